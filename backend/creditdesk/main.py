"""
Credit Desk - FastAPI Application

Main entry point for the Credit Desk backend.

Architecture:
- Ingestion → AnalysisReport snapshot (stored per client, replaced whole)
- AnalysisReport → PortfolioEngine → positive portfolio + asset metrics
- AnalysisReport → Breakdown / NegativeInventory → report and audit screens
"""
import os
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routers import reports_router, portfolio_router
from .database import init_db


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize database on startup."""
    init_db()
    yield

# Create FastAPI app
app = FastAPI(
    lifespan=lifespan,
    title="Credit Desk",
    description="""
    Credit Desk - Client Report Analysis Service

    Serves derived, read-only views over a client's analysed credit report.

    ## Views
    1. **Portfolio**: open, non-derogatory accounts deduplicated by account fingerprint
    2. **Report Breakdown**: negative accounts, positive accounts, hard inquiries
    3. **Negative Inventory**: per-bureau negative items plus normalized inquiries

    ## Key Principles
    - Snapshots are full replacements, never deltas
    - Every view is recomputed from the latest snapshot
    - Malformed fields degrade to safe defaults instead of failing
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("CORS_ORIGINS", "*").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(reports_router)
app.include_router(portfolio_router)


@app.get("/")
async def root():
    """Root endpoint - API information."""
    return {
        "name": "Credit Desk",
        "version": "1.0.0",
        "description": "Client Report Analysis Service",
        "docs": "/docs",
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8001)
