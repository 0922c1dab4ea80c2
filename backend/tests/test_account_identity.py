"""
Account identity tests

Covers the composite fingerprint used to link records describing the
same real-world account across report exports.
"""
import pytest

from creditdesk.models import MergedAccount
from creditdesk.services.portfolio import compute_identity, date_key, last4_digits, name_key


# =============================================================================
# TEST: date_key
# =============================================================================

class TestDateKey:

    def test_full_and_month_year_dates_collapse(self):
        """MM/DD/YYYY and MM/YYYY for the same month produce one key."""
        assert date_key("11/21/2025") == "11_2025"
        assert date_key("11/2025") == "11_2025"

    def test_single_digit_month_zero_padded(self):
        assert date_key("3/2020") == "03_2020"
        assert date_key("3/7/2020") == "03_2020"

    @pytest.mark.parametrize("value", ["", "Not Provided"])
    def test_missing_date_is_unknown(self, value):
        assert date_key(value) == "unknown"

    def test_unparsable_date_falls_back_to_raw_text(self):
        assert date_key("sometime last year") == "sometime last year"
        assert date_key("Jan 20") == "Jan 20"

    def test_only_ascii_digits_form_month_and_year(self):
        """Non-ASCII digits are not read as a month/year."""
        assert date_key("\u0661\u0661/\u0662\u0660\u0662\u0665") == "\u0661\u0661/\u0662\u0660\u0662\u0665"
        assert date_key("\uff11\uff11/2025") == "\uff11\uff11/2025"


# =============================================================================
# TEST: account number / creditor name normalization
# =============================================================================

class TestNormalization:

    def test_last4_uses_digits_only(self):
        assert last4_digits("****-****-1234") == "1234"
        assert last4_digits("5178 0598 7654 3210") == "3210"

    def test_fewer_than_four_digits_is_sentinel(self):
        assert last4_digits("12a") == "XXXX"
        assert last4_digits("") == "XXXX"
        assert last4_digits("INQUIRY") == "XXXX"

    def test_name_key_first_token(self):
        assert name_key("Chase Bank") == "chase"
        assert name_key("AMEX/Centurion") == "amex"
        assert name_key("Wells-Fargo Dealer Services") == "wellsfargo"

    def test_name_key_missing_name(self):
        assert name_key("") == "unknown"


# =============================================================================
# TEST: compute_identity
# =============================================================================

class TestComputeIdentity:

    def test_same_last4_and_month_merge(self, make_account):
        """Same last 4 digits and open month/year are the same account."""
        first = make_account(number="XXXXXXXX1234", opened="11/21/2025")
        second = make_account(number="****1234", opened="11/2025")

        assert compute_identity(first) == compute_identity(second) == "acct_1234_11_2025"

    def test_name_fallback_without_account_number(self, make_account):
        """No usable account digits: creditor-name prefix plus date key."""
        first = make_account(creditor="Chase Bank", number="", opened="03/15/2020")
        second = make_account(creditor="chase", number="N/A", opened="03/2020")

        assert compute_identity(first) == compute_identity(second) == "name_chase_03_2020"

    def test_different_open_months_stay_separate(self, make_account):
        first = make_account(number="1234", opened="03/2020")
        second = make_account(number="1234", opened="04/2020")

        assert compute_identity(first) != compute_identity(second)

    def test_different_unparsable_dates_stay_separate(self, make_account):
        first = make_account(number="1234", opened="early 2020")
        second = make_account(number="1234", opened="late 2020")

        assert compute_identity(first) == "acct_1234_early 2020"
        assert compute_identity(first) != compute_identity(second)

    def test_unknown_open_date(self, make_account):
        account = make_account(number="9876", opened="Not Provided")
        assert compute_identity(account) == "acct_9876_unknown"

    def test_identity_is_deterministic(self, make_account):
        """Repeated calls on the same fields return the same key."""
        account = make_account(creditor="Discover", number="", opened="07/2019")
        keys = {compute_identity(account) for _ in range(5)}
        assert keys == {"name_discover_07_2019"}

    def test_identity_not_stored_on_record(self, make_account):
        account = make_account()
        before = account.to_dict()
        compute_identity(account)
        assert account.to_dict() == before

    def test_defaults_do_not_raise(self):
        assert compute_identity(MergedAccount()) == "name_unknown_unknown"
