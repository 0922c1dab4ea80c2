"""
Credit Desk - Reports API Router

Stores analysed report snapshots per client and serves the report-screen
breakdown, the negative inventory and consultant notes of the latest snapshot.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional
from uuid import uuid4

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.db_models import ReportDB
from ..models import AnalysisReport, Bureau
from ..services.reports import (
    apply_consultant_note,
    build_breakdown,
    build_negative_inventory,
    find_account,
    find_item,
    is_inquiry_id,
    safe_row_id,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/clients/{client_id}", tags=["reports"])


# =============================================================================
# PYDANTIC MODELS FOR API
# =============================================================================

class SnapshotRequest(BaseModel):
    """Report snapshot as delivered by ingestion (camelCase JSON)."""
    reportDate: str = ""
    status: str = ""
    fileName: Optional[str] = None
    reportUrl: Optional[str] = None
    scores: List[Dict[str, Any]] = Field(default=[])
    mergedAccounts: List[Dict[str, Any]] = Field(default=[])
    inquiries: List[Dict[str, Any]] = Field(default=[])

    def to_report(self, report_id: Optional[str] = None) -> AnalysisReport:
        return AnalysisReport.from_dict(self.model_dump(), report_id=report_id)


class StoreReportResponse(BaseModel):
    report_id: str
    client_id: str
    message: str
    total_accounts: int
    total_inquiries: int


class ReportListItem(BaseModel):
    report_id: str
    report_date: str
    status: str
    file_name: Optional[str] = None
    accounts: int
    uploaded: str


class BreakdownResponse(BaseModel):
    report_id: str
    report_date: str
    scores: List[Dict[str, Any]]
    negative_accounts: List[Dict[str, Any]]
    positive_accounts: List[Dict[str, Any]]
    inquiries: List[Dict[str, Any]]


class InventoryItem(BaseModel):
    safe_id: str
    account: Dict[str, Any]


class InventoryResponse(BaseModel):
    report_id: str
    experian: List[InventoryItem]
    equifax: List[InventoryItem]
    transunion: List[InventoryItem]
    inquiries: List[InventoryItem]
    total_negatives: int


class NoteRequest(BaseModel):
    note: str = ""


class NoteResponse(BaseModel):
    safe_id: str
    bureau: str
    saved: bool
    records_updated: int = 0
    account: Optional[Dict[str, Any]] = None


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def load_latest_row(db: Session, client_id: str) -> ReportDB:
    """Latest snapshot row for a client, or 404."""
    row = db.query(ReportDB).filter(
        ReportDB.client_id == client_id
    ).order_by(ReportDB.created_at.desc()).first()

    if not row:
        raise HTTPException(status_code=404, detail="No analysis report found")

    return row


def load_latest_report(db: Session, client_id: str) -> AnalysisReport:
    """Latest snapshot for a client, or 404."""
    row = load_latest_row(db, client_id)
    return AnalysisReport.from_dict(row.report_data or {}, report_id=row.id)


def _inventory_items(accounts) -> List[InventoryItem]:
    return [InventoryItem(safe_id=safe_row_id(a.row_id), account=a.to_dict()) for a in accounts]


# =============================================================================
# API ENDPOINTS
# =============================================================================

@router.post("/reports", response_model=StoreReportResponse, status_code=201)
async def store_report(
    client_id: str,
    snapshot: SnapshotRequest,
    db: Session = Depends(get_db)
):
    """
    Store a new analysed report snapshot for a client.
    The new snapshot becomes the latest; earlier ones stay as history.
    """
    report_id = str(uuid4())
    report = snapshot.to_report(report_id=report_id)

    try:
        db_report = ReportDB(
            id=report_id,
            client_id=client_id,
            report_date=snapshot.reportDate,
            status=snapshot.status,
            file_name=snapshot.fileName,
            report_url=snapshot.reportUrl,
            report_data=snapshot.model_dump(),
        )
        db.add(db_report)
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Error storing report for client {client_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Error storing report: {e}")

    logger.info(
        f"Stored report {report_id} for client {client_id}: "
        f"{len(report.merged_accounts)} accounts, {len(report.inquiries)} inquiries"
    )

    return StoreReportResponse(
        report_id=report_id,
        client_id=client_id,
        message="Report snapshot stored",
        total_accounts=len(report.merged_accounts),
        total_inquiries=len(report.inquiries),
    )


@router.get("/reports", response_model=List[ReportListItem])
async def list_reports(client_id: str, db: Session = Depends(get_db)):
    """List all report snapshots for a client, newest first."""
    rows = db.query(ReportDB).filter(
        ReportDB.client_id == client_id
    ).order_by(ReportDB.created_at.desc()).all()

    return [
        ReportListItem(
            report_id=row.id,
            report_date=row.report_date or "",
            status=row.status or "",
            file_name=row.file_name,
            accounts=len((row.report_data or {}).get("mergedAccounts") or []),
            uploaded=str(row.created_at),
        )
        for row in rows
    ]


@router.get("/reports/latest", response_model=BreakdownResponse)
async def get_latest_report(client_id: str, db: Session = Depends(get_db)):
    """Negative / positive / inquiry breakdown of the latest snapshot."""
    report = load_latest_report(db, client_id)
    breakdown = build_breakdown(report)

    return BreakdownResponse(
        report_id=report.report_id,
        report_date=report.report_date,
        scores=[{"bureau": s.bureau, "score": s.score} for s in report.scores],
        negative_accounts=[a.to_dict() for a in breakdown.negative_accounts],
        positive_accounts=[a.to_dict() for a in breakdown.positive_accounts],
        inquiries=[i.to_dict() for i in breakdown.inquiries],
    )


@router.get("/negative-inventory", response_model=InventoryResponse)
async def get_negative_inventory(client_id: str, db: Session = Depends(get_db)):
    """Per-bureau negative items plus hard inquiries of the latest snapshot."""
    report = load_latest_report(db, client_id)
    inventory = build_negative_inventory(report)

    return InventoryResponse(
        report_id=report.report_id,
        experian=_inventory_items(inventory.for_bureau(Bureau.EXPERIAN)),
        equifax=_inventory_items(inventory.for_bureau(Bureau.EQUIFAX)),
        transunion=_inventory_items(inventory.for_bureau(Bureau.TRANSUNION)),
        inquiries=_inventory_items(inventory.inquiries),
        total_negatives=inventory.total_negatives,
    )


@router.get("/negative-inventory/{safe_id}", response_model=InventoryItem)
async def get_negative_item(client_id: str, safe_id: str, db: Session = Depends(get_db)):
    """Single negative item or inquiry of the latest snapshot, by safe row id."""
    report = load_latest_report(db, client_id)
    item = find_item(build_negative_inventory(report), safe_id)

    if item is None:
        raise HTTPException(status_code=404, detail="Negative item not found")

    return InventoryItem(safe_id=safe_row_id(item.row_id), account=item.to_dict())


@router.patch("/reports/latest/accounts/{safe_id}/{bureau}/note", response_model=NoteResponse)
async def save_consultant_note(
    client_id: str,
    safe_id: str,
    bureau: str,
    request: NoteRequest,
    db: Session = Depends(get_db)
):
    """
    Write a consultant note onto one bureau's record of an account in the
    latest snapshot. Inquiry rows are not stored accounts and are skipped.
    """
    target = Bureau.from_name(bureau)
    if target is None:
        raise HTTPException(status_code=404, detail="Unknown bureau")

    if is_inquiry_id(safe_id):
        return NoteResponse(safe_id=safe_id, bureau=target.value, saved=False)

    row = load_latest_row(db, client_id)
    report = AnalysisReport.from_dict(row.report_data or {}, report_id=row.id)

    account = find_account(report.merged_accounts, safe_id)
    if account is None:
        raise HTTPException(status_code=404, detail="Account not found")
    if account.bureau_data(target) is None:
        raise HTTPException(status_code=404, detail="Bureau not reported for this account")

    updated, count = apply_consultant_note(row.report_data or {}, safe_id, target, request.note)

    try:
        # JSON columns only persist on reassignment
        row.report_data = updated
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Error saving note for client {client_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Error saving note: {e}")

    saved_account = find_account(AnalysisReport.from_dict(updated).merged_accounts, safe_id)
    return NoteResponse(
        safe_id=safe_id,
        bureau=target.value,
        saved=True,
        records_updated=count,
        account=saved_account.to_dict(),
    )
