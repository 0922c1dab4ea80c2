"""
Credit Desk - Negative Inventory

Per-bureau list of negative items for the audit-analysis screen. Hard
inquiries are normalized into MergedAccount shape so they can be selected
and audited alongside tradelines.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ...models.ssot import (
    AnalysisReport, MergedAccount, BureauData, Inquiry, Bureau, OverallStatus, HARD_INQUIRY
)

logger = logging.getLogger(__name__)

INQUIRY_ACCOUNT_NUMBER = "INQUIRY"
INQUIRY_STATUS = "Inquiry"
INQUIRY_ROW_PREFIX = "inq_"


@dataclass
class NegativeInventory:
    experian: List[MergedAccount] = field(default_factory=list)
    equifax: List[MergedAccount] = field(default_factory=list)
    transunion: List[MergedAccount] = field(default_factory=list)
    inquiries: List[MergedAccount] = field(default_factory=list)

    @property
    def total_negatives(self) -> int:
        # An account negative on two bureaus counts once per bureau
        return len(self.experian) + len(self.equifax) + len(self.transunion) + len(self.inquiries)

    def for_bureau(self, bureau: Bureau) -> List[MergedAccount]:
        return getattr(self, bureau.value)


def safe_row_id(row_id: str) -> str:
    """Row id usable as a document key ("/" is not allowed)."""
    return (row_id or "").replace("/", "_")


def inquiry_to_account(inquiry: Inquiry, index: int) -> MergedAccount:
    """
    Normalize a hard inquiry into a single-bureau negative account.

    An unrecognised bureau name yields an account with no bureau data.
    """
    account = MergedAccount(
        row_id=f"{INQUIRY_ROW_PREFIX}{index}",
        creditor_name=inquiry.creditor_name,
        account_number=INQUIRY_ACCOUNT_NUMBER,
        account_type=HARD_INQUIRY,
        date_opened=inquiry.date,
        date_closed="",
    )
    bureau = Bureau.from_name(inquiry.bureau)
    if bureau is not None:
        setattr(account, bureau.value, BureauData(
            overall_status=OverallStatus.NEGATIVE,
            account_status=INQUIRY_STATUS,
            balance=0,
            consultant_note="",
        ))
    return account


def build_negative_inventory(report: AnalysisReport) -> NegativeInventory:
    inventory = NegativeInventory(
        inquiries=[inquiry_to_account(inq, idx) for idx, inq in enumerate(report.inquiries)],
    )
    for account in report.merged_accounts:
        for bureau in Bureau:
            data = account.bureau_data(bureau)
            if data is not None and data.is_negative:
                inventory.for_bureau(bureau).append(account)

    logger.info(f"Report {report.report_id}: {inventory.total_negatives} negative items")
    return inventory


def find_item(inventory: NegativeInventory, safe_id: str) -> Optional[MergedAccount]:
    """Look up a tradeline or inquiry by its document-safe row id."""
    for bureau in Bureau:
        for account in inventory.for_bureau(bureau):
            if safe_row_id(account.row_id) == safe_id:
                return account
    for account in inventory.inquiries:
        if safe_row_id(account.row_id) == safe_id:
            return account
    return None
