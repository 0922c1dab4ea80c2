"""
Credit Desk - Portfolio API Router

Positive portfolio (open, non-derogatory assets) with display metrics.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session

from ..database import get_db
from ..models import AnalysisReport
from ..services.portfolio import PortfolioEngine, asset_metrics, compute_identity
from .reports import SnapshotRequest, load_latest_report

logger = logging.getLogger(__name__)

router = APIRouter(tags=["portfolio"])


# =============================================================================
# PYDANTIC MODELS FOR API
# =============================================================================

class AssetResponse(BaseModel):
    identity: str
    row_id: str
    creditor_name: str
    account_number: str
    account_type: str
    date_opened: str
    max_balance: float
    max_limit: float
    balance_display: str
    limit_display: str  # "NPSL" when no limit is reported
    utilization: Optional[float] = None
    utilization_tier: Optional[str] = None
    last_reported: str
    account: Dict[str, Any]


class PortfolioResponse(BaseModel):
    report_id: str
    total_accounts: int
    total_assets: int
    excluded_identities: List[str]
    duplicates_collapsed: int
    assets: List[AssetResponse]


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def portfolio_response(report: AnalysisReport) -> PortfolioResponse:
    result = PortfolioEngine().reconcile(report.merged_accounts)

    assets = []
    for account in result.assets:
        metrics = asset_metrics(account)
        assets.append(AssetResponse(
            identity=compute_identity(account),
            row_id=account.row_id,
            creditor_name=account.creditor_name,
            account_number=account.account_number,
            account_type=account.account_type,
            date_opened=account.date_opened,
            max_balance=metrics.max_balance,
            max_limit=metrics.max_limit,
            balance_display=metrics.balance_display,
            limit_display=metrics.limit_display,
            utilization=metrics.utilization,
            utilization_tier=metrics.utilization_tier.value if metrics.utilization_tier else None,
            last_reported=metrics.last_reported,
            account=account.to_dict(),
        ))

    return PortfolioResponse(
        report_id=report.report_id,
        total_accounts=result.total_accounts,
        total_assets=len(result.assets),
        excluded_identities=result.excluded_identities,
        duplicates_collapsed=result.duplicates_collapsed,
        assets=assets,
    )


# =============================================================================
# API ENDPOINTS
# =============================================================================

@router.get("/clients/{client_id}/portfolio", response_model=PortfolioResponse)
async def get_portfolio(client_id: str, db: Session = Depends(get_db)):
    """Positive portfolio of the client's latest report snapshot."""
    report = load_latest_report(db, client_id)
    return portfolio_response(report)


@router.post("/portfolio/preview", response_model=PortfolioResponse)
async def preview_portfolio(snapshot: SnapshotRequest):
    """Positive portfolio for a supplied snapshot, without storing it."""
    return portfolio_response(snapshot.to_report())
