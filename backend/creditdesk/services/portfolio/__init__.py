"""Credit Desk - Portfolio Reconciliation

Derives the positive portfolio (open, non-derogatory, deduplicated assets)
from a report snapshot's merged accounts.
"""
from .identity import compute_identity, date_key, last4_digits, name_key
from .rules import is_excluded, all_bureaus_positive
from .engine import PortfolioEngine, PortfolioResult, build_portfolio
from .metrics import (
    AssetMetrics,
    UtilizationTier,
    NPSL,
    normalize_amount,
    max_balance,
    max_limit,
    utilization,
    utilization_tier,
    last_reported,
    format_limit,
    format_balance,
    asset_metrics,
)

__all__ = [
    "compute_identity",
    "date_key",
    "last4_digits",
    "name_key",
    "is_excluded",
    "all_bureaus_positive",
    "PortfolioEngine",
    "PortfolioResult",
    "build_portfolio",
    "AssetMetrics",
    "UtilizationTier",
    "NPSL",
    "normalize_amount",
    "max_balance",
    "max_limit",
    "utilization",
    "utilization_tier",
    "last_reported",
    "format_limit",
    "format_balance",
    "asset_metrics",
]
