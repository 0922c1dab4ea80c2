"""
Credit Desk - Portfolio Classification Rules

Deterministic checks deciding whether an account can be shown as an open,
non-derogatory portfolio asset. No side effects, never raises.
"""
from __future__ import annotations
from typing import List

from ...models.ssot import MergedAccount, BureauData, HARD_INQUIRY, NOT_PROVIDED

# Account-status fragments that mark an account as closed or derogatory
EXCLUDED_STATUS_TERMS = ("closed", "paid", "charged", "collection")


def is_closed_by_date(account: MergedAccount) -> bool:
    """A non-blank date_closed other than "Not Provided" closes the account."""
    closed = account.date_closed or ""
    return bool(closed.strip()) and closed != NOT_PROVIDED


def has_negative_or_closed_status(bureaus: List[BureauData]) -> bool:
    """Any bureau reporting Negative, or a closed/paid/charged/collection status text."""
    for data in bureaus:
        if data.is_negative:
            return True
        status_text = (data.account_status or "").lower()
        if any(term in status_text for term in EXCLUDED_STATUS_TERMS):
            return True
    return False


def is_hard_inquiry(account: MergedAccount) -> bool:
    return account.account_type == HARD_INQUIRY


def is_excluded(account: MergedAccount) -> bool:
    """
    Check whether this record vetoes its identity from the portfolio.

    Exclusion is applied per identity by the engine: one excluded record
    blacklists every record sharing its fingerprint.
    """
    return (
        is_closed_by_date(account)
        or has_negative_or_closed_status(account.reporting_bureaus())
        or is_hard_inquiry(account)
    )


def all_bureaus_positive(account: MergedAccount) -> bool:
    """At least one bureau reports, and every reporting bureau says Positive."""
    bureaus = account.reporting_bureaus()
    if not bureaus:
        return False
    return all(data.is_positive for data in bureaus)
