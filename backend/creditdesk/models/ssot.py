"""
Credit Desk - Single Source of Truth Models

A report snapshot is delivered by the ingestion pipeline as camelCase JSON.
These dataclasses are the only shape the services work with after loading.
Snapshots are read-only: every service recomputes its view from scratch.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union
from uuid import uuid4


# Sentinels written by the ingestion pipeline
NOT_PROVIDED = "Not Provided"
HARD_INQUIRY = "Hard Inquiry"

Amount = Union[float, int, str, None]


# =============================================================================
# ENUMS
# =============================================================================

class Bureau(str, Enum):
    EXPERIAN = "experian"
    EQUIFAX = "equifax"
    TRANSUNION = "transunion"

    @classmethod
    def from_name(cls, name: Any) -> Optional["Bureau"]:
        """Resolve 'Experian', 'TransUnion', 'equifax'... to a Bureau."""
        if not isinstance(name, str):
            return None
        key = name.strip().lower().replace(" ", "")
        for bureau in cls:
            if bureau.value == key:
                return bureau
        return None


# Canonical bureau order used everywhere a "first" bureau matters
BUREAU_ORDER = (Bureau.EXPERIAN, Bureau.EQUIFAX, Bureau.TRANSUNION)


class OverallStatus(str, Enum):
    POSITIVE = "Positive"
    NEGATIVE = "Negative"


def _text(value: Any, default: str = "") -> str:
    if value is None:
        return default
    if isinstance(value, str):
        return value
    return str(value)


def _status(value: Any) -> Union[OverallStatus, str]:
    try:
        return OverallStatus(value)
    except ValueError:
        return _text(value)


# =============================================================================
# SNAPSHOT RECORDS
# =============================================================================

@dataclass
class BureauData:
    """One bureau's view of a single account."""
    overall_status: Union[OverallStatus, str] = ""
    account_status: str = ""

    # Raw values - may be numbers or formatted strings ("$1,200.00")
    balance: Amount = None
    credit_limit: Amount = None
    monthly_payment: Amount = None

    last_reported: str = ""
    payment_history: Optional[str] = None
    dispute_status: Optional[str] = None
    consultant_note: Optional[str] = None
    key_4_part: Optional[str] = None

    @property
    def is_positive(self) -> bool:
        return self.overall_status == OverallStatus.POSITIVE

    @property
    def is_negative(self) -> bool:
        return self.overall_status == OverallStatus.NEGATIVE

    @classmethod
    def from_dict(cls, data: Any) -> Optional["BureauData"]:
        """Build from snapshot JSON. Anything that is not a mapping is absent."""
        if not isinstance(data, dict):
            return None
        return cls(
            overall_status=_status(data.get("overallStatus")),
            account_status=_text(data.get("accountStatus")),
            balance=data.get("balance"),
            credit_limit=data.get("creditLimit"),
            monthly_payment=data.get("monthlyPayment"),
            last_reported=_text(data.get("lastReported")),
            payment_history=data.get("paymentHistory"),
            dispute_status=data.get("disputeStatus"),
            consultant_note=data.get("consultantNote"),
            key_4_part=data.get("key4Part"),
        )

    def to_dict(self) -> Dict[str, Any]:
        status = self.overall_status
        return {
            "overallStatus": status.value if isinstance(status, OverallStatus) else status,
            "accountStatus": self.account_status,
            "balance": self.balance,
            "creditLimit": self.credit_limit,
            "monthlyPayment": self.monthly_payment,
            "lastReported": self.last_reported,
            "paymentHistory": self.payment_history,
            "disputeStatus": self.dispute_status,
            "consultantNote": self.consultant_note,
            "key4Part": self.key_4_part,
        }


@dataclass
class MergedAccount:
    """
    One logical tradeline, already merged across bureaus by ingestion.

    A bureau attribute of None means that bureau did not report the account.
    The account fingerprint is never stored here - it is derived on demand.
    """
    row_id: str = ""
    creditor_name: str = ""
    account_number: str = ""
    account_type: str = ""
    date_opened: str = ""
    date_closed: str = ""

    experian: Optional[BureauData] = None
    equifax: Optional[BureauData] = None
    transunion: Optional[BureauData] = None

    iwc_key: Optional[str] = None
    analysis_ran: bool = False

    def bureau_data(self, bureau: Bureau) -> Optional[BureauData]:
        """Get data for a specific bureau."""
        return getattr(self, bureau.value)

    def reporting_bureaus(self) -> List[BureauData]:
        """Present bureau sub-records, in canonical bureau order."""
        return [data for data in (self.bureau_data(b) for b in BUREAU_ORDER) if data is not None]

    @property
    def bureau_count(self) -> int:
        """Number of bureaus reporting this account."""
        return len(self.reporting_bureaus())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MergedAccount":
        return cls(
            row_id=_text(data.get("rowId")),
            creditor_name=_text(data.get("creditorName")),
            account_number=_text(data.get("accountNumber")),
            account_type=_text(data.get("accountType")),
            date_opened=_text(data.get("dateOpened")),
            date_closed=_text(data.get("dateClosed")),
            experian=BureauData.from_dict(data.get("experian")),
            equifax=BureauData.from_dict(data.get("equifax")),
            transunion=BureauData.from_dict(data.get("transunion")),
            iwc_key=data.get("iwcKey"),
            analysis_ran=bool(data.get("analysisRan", False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "rowId": self.row_id,
            "creditorName": self.creditor_name,
            "accountNumber": self.account_number,
            "accountType": self.account_type,
            "dateOpened": self.date_opened,
            "dateClosed": self.date_closed,
            "analysisRan": self.analysis_ran,
        }
        for bureau in BUREAU_ORDER:
            data = self.bureau_data(bureau)
            if data is not None:
                result[bureau.value] = data.to_dict()
        if self.iwc_key is not None:
            result["iwcKey"] = self.iwc_key
        return result


@dataclass
class Inquiry:
    """Hard inquiry as listed on the report."""
    bureau: str = ""
    creditor_name: str = ""
    date: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Inquiry":
        return cls(
            bureau=_text(data.get("bureau")),
            creditor_name=_text(data.get("creditorName")),
            date=_text(data.get("date")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"bureau": self.bureau, "creditorName": self.creditor_name, "date": self.date}


@dataclass
class BureauScore:
    bureau: str = ""
    score: Optional[int] = None


@dataclass
class AnalysisReport:
    """
    A full analysed-report snapshot for one client.

    Updates replace the whole snapshot; nothing is applied as a delta.
    """
    report_id: str = field(default_factory=lambda: str(uuid4()))
    report_date: str = ""
    status: str = ""
    file_name: Optional[str] = None
    report_url: Optional[str] = None

    scores: List[BureauScore] = field(default_factory=list)
    merged_accounts: List[MergedAccount] = field(default_factory=list)
    inquiries: List[Inquiry] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], report_id: Optional[str] = None) -> "AnalysisReport":
        report = cls(
            report_date=_text(data.get("reportDate")),
            status=_text(data.get("status")),
            file_name=data.get("fileName"),
            report_url=data.get("reportUrl"),
            scores=[
                BureauScore(bureau=_text(s.get("bureau")), score=s.get("score"))
                for s in (data.get("scores") or []) if isinstance(s, dict)
            ],
            merged_accounts=[
                MergedAccount.from_dict(a)
                for a in (data.get("mergedAccounts") or []) if isinstance(a, dict)
            ],
            inquiries=[
                Inquiry.from_dict(i)
                for i in (data.get("inquiries") or []) if isinstance(i, dict)
            ],
        )
        if report_id or data.get("id"):
            report.report_id = report_id or _text(data.get("id"))
        return report
