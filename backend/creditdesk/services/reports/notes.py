"""
Credit Desk - Consultant Notes

Staff notes are written onto one bureau's view of an account in the latest
snapshot. Edits work on the stored snapshot JSON so fields the models do not
know about survive the update.
"""
from __future__ import annotations
import copy
import logging
from typing import Any, Dict, List, Optional, Tuple

from ...models.ssot import Bureau, MergedAccount
from .inventory import INQUIRY_ROW_PREFIX, safe_row_id

logger = logging.getLogger(__name__)


def is_inquiry_id(safe_id: str) -> bool:
    """Inquiry rows are derived from the inquiry list and cannot carry notes."""
    return (safe_id or "").startswith(INQUIRY_ROW_PREFIX)


def find_account(accounts: List[MergedAccount], safe_id: str) -> Optional[MergedAccount]:
    """First account whose document-safe row id matches."""
    for account in accounts:
        if safe_row_id(account.row_id) == safe_id:
            return account
    return None


def apply_consultant_note(
    snapshot: Dict[str, Any], safe_id: str, bureau: Bureau, note: str
) -> Tuple[Dict[str, Any], int]:
    """
    Set consultantNote on the given bureau of every row matching safe_id.

    Returns a new snapshot and the number of bureau records updated. Rows the
    bureau does not report on are left alone. The input is not modified.
    """
    updated = copy.deepcopy(snapshot)
    count = 0
    for account in updated.get("mergedAccounts") or []:
        if not isinstance(account, dict):
            continue
        if safe_row_id(str(account.get("rowId") or "")) != safe_id:
            continue
        data = account.get(bureau.value)
        if isinstance(data, dict):
            data["consultantNote"] = note
            count += 1

    logger.info(f"Consultant note on {safe_id}/{bureau.value}: {count} records updated")
    return updated, count
