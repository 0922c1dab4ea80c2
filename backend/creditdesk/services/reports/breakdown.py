"""
Credit Desk - Report Breakdown

Splits a snapshot into negative accounts, positive accounts and inquiries
for the report screen. Unlike the portfolio, this split is by row, not by
account fingerprint, and performs no deduplication.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from ...models.ssot import AnalysisReport, MergedAccount, Inquiry

logger = logging.getLogger(__name__)


@dataclass
class ReportBreakdown:
    report_id: str = ""
    negative_accounts: List[MergedAccount] = field(default_factory=list)
    positive_accounts: List[MergedAccount] = field(default_factory=list)
    inquiries: List[Inquiry] = field(default_factory=list)


def is_negative(account: MergedAccount) -> bool:
    """Any reporting bureau classifies the account as Negative."""
    return any(data.is_negative for data in account.reporting_bureaus())


def split_accounts(accounts: List[MergedAccount]) -> Tuple[List[MergedAccount], List[MergedAccount]]:
    """
    Partition accounts into (negative, positive).

    Positive is everything whose row id does not belong to a negative
    account, so a row id shared with a negative record is never positive.
    """
    negative = [account for account in accounts if is_negative(account)]
    negative_rows = {account.row_id for account in negative}
    positive = [account for account in accounts if account.row_id not in negative_rows]
    return negative, positive


def build_breakdown(report: AnalysisReport) -> ReportBreakdown:
    negative, positive = split_accounts(report.merged_accounts)
    logger.info(
        f"Report {report.report_id} breakdown: {len(negative)} negative, "
        f"{len(positive)} positive, {len(report.inquiries)} inquiries"
    )
    return ReportBreakdown(
        report_id=report.report_id,
        negative_accounts=negative,
        positive_accounts=positive,
        inquiries=list(report.inquiries),
    )
