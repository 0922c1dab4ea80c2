"""Credit Desk - Data Models"""
from .ssot import (
    # Sentinels
    NOT_PROVIDED, HARD_INQUIRY,
    # Enums
    Bureau, BUREAU_ORDER, OverallStatus,
    # Snapshot records
    BureauData, MergedAccount, Inquiry, BureauScore, AnalysisReport,
)

__all__ = [
    "NOT_PROVIDED", "HARD_INQUIRY",
    "Bureau", "BUREAU_ORDER", "OverallStatus",
    "BureauData", "MergedAccount", "Inquiry", "BureauScore", "AnalysisReport",
]
