"""Credit Desk - Report Views

Read-only views over a report snapshot: the negative/positive breakdown
and the per-bureau negative inventory. Consultant notes are the one edit
staff make to a stored snapshot.
"""
from .breakdown import ReportBreakdown, build_breakdown, is_negative, split_accounts
from .inventory import (
    NegativeInventory,
    build_negative_inventory,
    find_item,
    inquiry_to_account,
    safe_row_id,
)
from .notes import apply_consultant_note, find_account, is_inquiry_id

__all__ = [
    "ReportBreakdown",
    "build_breakdown",
    "is_negative",
    "split_accounts",
    "NegativeInventory",
    "build_negative_inventory",
    "find_item",
    "inquiry_to_account",
    "safe_row_id",
    "apply_consultant_note",
    "find_account",
    "is_inquiry_id",
]
