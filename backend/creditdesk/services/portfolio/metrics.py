"""
Credit Desk - Asset Metrics

Display metrics for a portfolio asset. Balances and limits arrive as numbers
or formatted strings and are normalized here; nothing in this module raises.
"""
from __future__ import annotations
import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ...models.ssot import MergedAccount, NOT_PROVIDED

NPSL = "NPSL"
UNKNOWN_REPORTED = "Unknown"

_LEADING_NUMBER = re.compile(r"[0-9]*\.?[0-9]*")


class UtilizationTier(str, Enum):
    LOW = "low"            # under 10%
    MODERATE = "moderate"  # 10% - 29%
    HIGH = "high"          # over 29%


@dataclass
class AssetMetrics:
    max_balance: float = 0.0
    max_limit: float = 0.0
    utilization: Optional[float] = None
    utilization_tier: Optional[UtilizationTier] = None
    last_reported: str = UNKNOWN_REPORTED

    @property
    def limit_display(self) -> str:
        return format_limit(self.max_limit)

    @property
    def balance_display(self) -> str:
        return format_balance(self.max_balance)


def normalize_amount(value: Any) -> float:
    """
    Coerce a balance/limit to a float.

    Strings keep only digits and dots before parsing ("$1,250.50" -> 1250.5).
    Anything unparsable, non-finite or missing becomes 0.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        cleaned = re.sub(r"[^0-9.]", "", str(value))
        # Longest leading number wins: "500.00." -> 500.0, "1.2.3" -> 1.2
        prefix = _LEADING_NUMBER.match(cleaned).group(0)
        if prefix in ("", "."):
            return 0.0
        number = float(prefix)
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def max_balance(account: MergedAccount) -> float:
    """Highest balance reported by any bureau, floor 0."""
    return max([normalize_amount(b.balance) for b in account.reporting_bureaus()] + [0.0])


def max_limit(account: MergedAccount) -> float:
    """Highest credit limit reported by any bureau; 0 means no preset limit."""
    return max([normalize_amount(b.credit_limit) for b in account.reporting_bureaus()] + [0.0])


def utilization(account: MergedAccount) -> Optional[float]:
    """Balance as a percentage of limit, or None when there is no limit (NPSL)."""
    limit = max_limit(account)
    if limit <= 0:
        return None
    return max_balance(account) / limit * 100


def utilization_tier(percentage: Optional[float]) -> Optional[UtilizationTier]:
    if percentage is None:
        return None
    if percentage > 29:
        return UtilizationTier.HIGH
    if percentage > 9:
        return UtilizationTier.MODERATE
    return UtilizationTier.LOW


def last_reported(account: MergedAccount) -> str:
    """First usable last-reported date in bureau order."""
    for data in account.reporting_bureaus():
        reported = data.last_reported or ""
        if reported.strip() and reported != NOT_PROVIDED:
            return reported
    return UNKNOWN_REPORTED


def format_limit(limit: float) -> str:
    if limit <= 0:
        return NPSL
    return f"${limit:,.0f}"


def format_balance(balance: float) -> str:
    return f"${balance:,.0f}"


def asset_metrics(account: MergedAccount) -> AssetMetrics:
    pct = utilization(account)
    return AssetMetrics(
        max_balance=max_balance(account),
        max_limit=max_limit(account),
        utilization=pct,
        utilization_tier=utilization_tier(pct),
        last_reported=last_reported(account),
    )
