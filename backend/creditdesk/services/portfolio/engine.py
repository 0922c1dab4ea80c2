"""
Credit Desk - Portfolio Engine

Reconciles a client's merged accounts into the positive portfolio: the
open, non-derogatory assets, one record per real-world account.

Pass 1 blacklists every identity that any record marks as closed, negative
or a hard inquiry. Pass 2 keeps unanimously-positive records of the remaining
identities, first occurrence wins.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Set

from ...models.ssot import MergedAccount
from .identity import compute_identity
from .rules import is_excluded, all_bureaus_positive

logger = logging.getLogger(__name__)


@dataclass
class PortfolioResult:
    """Output of one reconciliation run. Recomputed from scratch every time."""
    assets: List[MergedAccount] = field(default_factory=list)
    excluded_identities: List[str] = field(default_factory=list)
    total_accounts: int = 0
    duplicates_collapsed: int = 0


class PortfolioEngine:
    """
    Stateless reconciliation engine.

    Safe to call repeatedly and concurrently; holds no state between runs.
    """

    def excluded_identities(self, accounts: Iterable[MergedAccount]) -> Set[str]:
        """Pass 1: identities vetoed by at least one of their records."""
        excluded: Set[str] = set()
        for account in accounts:
            if is_excluded(account):
                excluded.add(compute_identity(account))
        return excluded

    def reconcile(self, accounts: List[MergedAccount]) -> PortfolioResult:
        excluded = self.excluded_identities(accounts)

        # Pass 2 - dicts keep insertion order, so output order is first-seen order
        unique_assets: Dict[str, MergedAccount] = {}
        duplicates = 0
        for account in accounts:
            identity = compute_identity(account)
            if identity in excluded:
                continue
            if not all_bureaus_positive(account):
                continue
            if identity in unique_assets:
                duplicates += 1
                continue
            unique_assets[identity] = account

        result = PortfolioResult(
            assets=list(unique_assets.values()),
            excluded_identities=sorted(excluded),
            total_accounts=len(accounts),
            duplicates_collapsed=duplicates,
        )

        logger.info(
            f"Portfolio reconciled: {result.total_accounts} accounts, "
            f"{len(result.excluded_identities)} excluded identities, "
            f"{len(result.assets)} assets, "
            f"{result.duplicates_collapsed} duplicates collapsed"
        )
        return result


# =============================================================================
# FACTORY FUNCTION
# =============================================================================

def build_portfolio(accounts: List[MergedAccount]) -> List[MergedAccount]:
    """
    Deduplicated positive-asset list for a client's merged accounts.

    Args:
        accounts: mergedAccounts from the latest report snapshot

    Returns:
        One representative record per qualifying identity, in first-seen order
    """
    return PortfolioEngine().reconcile(accounts).assets
