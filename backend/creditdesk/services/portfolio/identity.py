"""
Credit Desk - Account Identity

Composite fingerprint that links records describing the same real-world
account: last 4 account-number digits + open month/year, or creditor-name
prefix + open month/year when no usable account number exists.
"""
from __future__ import annotations
import re

from ...models.ssot import MergedAccount, NOT_PROVIDED

NO_ACCOUNT_DIGITS = "XXXX"
UNKNOWN_DATE = "unknown"

# First 1-2 digit group is the month, next 4-digit group is the year.
# Matches both MM/DD/YYYY and MM/YYYY so "11/21/2025" and "11/2025" collapse.
_MONTH_YEAR = re.compile(r"([0-9]{1,2}).*?([0-9]{4})")
_NAME_SPLIT = re.compile(r"[\s/]")


def last4_digits(account_number: str) -> str:
    """Last 4 digits of the account number, or XXXX when fewer than 4 exist."""
    digits = re.sub(r"[^0-9]", "", account_number or "")
    return digits[-4:] if len(digits) >= 4 else NO_ACCOUNT_DIGITS


def date_key(date_opened: str) -> str:
    """
    Normalize an open date to MM_YYYY.

    Empty / "Not Provided" -> "unknown". Text with no month/year pair is
    returned unchanged, so two different unparsable dates never merge.
    """
    if not date_opened or date_opened == NOT_PROVIDED:
        return UNKNOWN_DATE
    match = _MONTH_YEAR.search(date_opened)
    if match:
        return f"{match.group(1).zfill(2)}_{match.group(2)}"
    return date_opened


def name_key(creditor_name: str) -> str:
    """First whitespace/slash token of the creditor name, lowercase letters only."""
    first = _NAME_SPLIT.split(creditor_name or "Unknown")[0]
    return re.sub(r"[^a-z]", "", first.lower())


def compute_identity(account: MergedAccount) -> str:
    """
    Derive the identity key for an account.

    Pure function of account_number, date_opened and creditor_name:
    the same fields always produce the same key.
    """
    last4 = last4_digits(account.account_number)
    opened = date_key(account.date_opened)

    if last4 == NO_ACCOUNT_DIGITS:
        return f"name_{name_key(account.creditor_name)}_{opened}"
    return f"acct_{last4}_{opened}"
