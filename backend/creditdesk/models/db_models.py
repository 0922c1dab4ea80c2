"""
Credit Desk - SQLAlchemy ORM Models
Persisted report snapshots, one row per delivered snapshot
"""
from datetime import datetime
from sqlalchemy import Column, String, DateTime, JSON
from ..database import Base


class ReportDB(Base):
    """
    Analysed credit report snapshot for a client.

    Snapshots are full replacements: the newest row for a client is the
    latest analysis, older rows are history.
    """
    __tablename__ = "analysis_reports"

    id = Column(String(36), primary_key=True)  # UUID
    client_id = Column(String(128), nullable=False, index=True)

    report_date = Column(String(50))
    status = Column(String(50))
    file_name = Column(String(500))
    report_url = Column(String(1000))

    # Full snapshot as delivered (camelCase JSON)
    report_data = Column(JSON, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, index=True)
