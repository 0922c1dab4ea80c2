"""Credit Desk - API Routers"""
from .reports import router as reports_router
from .portfolio import router as portfolio_router

__all__ = [
    "reports_router",
    "portfolio_router",
]
