"""
Asset metrics tests

Balance / limit normalization, utilization and its display tiers.
"""
import pytest

from creditdesk.services.portfolio import (
    NPSL,
    UtilizationTier,
    asset_metrics,
    format_balance,
    format_limit,
    last_reported,
    max_balance,
    max_limit,
    normalize_amount,
    utilization,
    utilization_tier,
)


class TestNormalizeAmount:

    @pytest.mark.parametrize("raw,expected", [
        (500, 500.0),
        (1250.5, 1250.5),
        ("$1,250.50", 1250.5),
        ("2,000", 2000.0),
        ("  $0  ", 0.0),
    ])
    def test_parses_numbers_and_formatted_strings(self, raw, expected):
        assert normalize_amount(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "abc", "---", ".", True, float("nan"), float("inf")])
    def test_unparsable_becomes_zero(self, raw):
        assert normalize_amount(raw) == 0.0

    @pytest.mark.parametrize("raw,expected", [
        ("$500.00.", 500.0),
        ("1.2.3", 1.2),
        ("$1,000.50 USD.", 1000.5),
        (".75", 0.75),
    ])
    def test_leading_number_wins(self, raw, expected):
        """Trailing junk after the first number is ignored."""
        assert normalize_amount(raw) == expected

    def test_max_balance_with_trailing_dot(self, make_account, bureau):
        account = make_account(experian=bureau(balance="$500.00.", limit="$2,000.00."))
        assert max_balance(account) == 500.0
        assert max_limit(account) == 2000.0


class TestBalanceAndLimit:

    def test_max_across_bureaus(self, make_account, bureau):
        account = make_account(
            experian=bureau(balance="$300", limit="$1,000"),
            equifax=bureau(balance=450, limit=800),
            transunion=bureau(balance="n/a", limit=None),
        )
        assert max_balance(account) == 450.0
        assert max_limit(account) == 1000.0

    def test_no_bureaus_is_zero(self, make_account):
        account = make_account()
        assert max_balance(account) == 0.0
        assert max_limit(account) == 0.0


class TestUtilization:

    def test_utilization_percentage(self, make_account, bureau):
        account = make_account(experian=bureau(balance=500, limit=5000))
        assert utilization(account) == pytest.approx(10.0)

    @pytest.mark.parametrize("limit", [0, "0", "", None, "$0.00"])
    def test_no_limit_is_undefined(self, make_account, bureau, limit):
        """NPSL accounts never surface inf or NaN."""
        account = make_account(experian=bureau(balance=750, limit=limit), equifax=bureau(balance=0, limit=limit))

        assert utilization(account) is None
        metrics = asset_metrics(account)
        assert metrics.utilization is None
        assert metrics.utilization_tier is None
        assert metrics.limit_display == NPSL

    def test_absent_limit_is_undefined(self, make_account):
        account = make_account(experian={"overallStatus": "Positive", "balance": 120})
        assert utilization(account) is None

    @pytest.mark.parametrize("pct,tier", [
        (0.0, UtilizationTier.LOW),
        (9.0, UtilizationTier.LOW),
        (9.5, UtilizationTier.MODERATE),
        (10.0, UtilizationTier.MODERATE),
        (29.0, UtilizationTier.MODERATE),
        (29.01, UtilizationTier.HIGH),
        (145.0, UtilizationTier.HIGH),
    ])
    def test_tier_thresholds(self, pct, tier):
        assert utilization_tier(pct) == tier

    def test_tier_of_undefined(self):
        assert utilization_tier(None) is None


class TestDisplay:

    def test_format_limit(self):
        assert format_limit(5000) == "$5,000"
        assert format_limit(0) == "NPSL"

    def test_format_balance(self):
        assert format_balance(1234.4) == "$1,234"

    def test_last_reported_skips_placeholders(self, make_account, bureau):
        account = make_account(
            experian=bureau(lastReported="Not Provided"),
            equifax=bureau(lastReported="   "),
            transunion=bureau(lastReported="05/2024"),
        )
        assert last_reported(account) == "05/2024"

    def test_last_reported_prefers_experian(self, make_account, bureau):
        account = make_account(
            transunion=bureau(lastReported="04/2024"),
            experian=bureau(lastReported="06/2024"),
        )
        assert last_reported(account) == "06/2024"

    def test_last_reported_unknown(self, make_account):
        assert last_reported(make_account()) == "Unknown"

    def test_asset_metrics_bundle(self, make_account, bureau):
        account = make_account(
            experian=bureau(balance="$3,500", limit="$10,000", lastReported="09/2024"),
        )
        metrics = asset_metrics(account)

        assert metrics.max_balance == 3500.0
        assert metrics.max_limit == 10000.0
        assert metrics.utilization == pytest.approx(35.0)
        assert metrics.utilization_tier == UtilizationTier.HIGH
        assert metrics.limit_display == "$10,000"
        assert metrics.balance_display == "$3,500"
        assert metrics.last_reported == "09/2024"
