"""Shared fixtures for Credit Desk tests."""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from creditdesk.database import Base, get_db
from creditdesk.main import app
from creditdesk.models import MergedAccount


def _bureau(status="Positive", account_status="Current", balance=0, limit=0, **extra):
    data = {
        "overallStatus": status,
        "accountStatus": account_status,
        "balance": balance,
        "creditLimit": limit,
    }
    data.update(extra)
    return data


@pytest.fixture
def bureau():
    """Factory for a camelCase bureau sub-record."""
    return _bureau


@pytest.fixture
def account_dict():
    """Factory for a camelCase mergedAccounts entry."""
    def make(row_id="a1", creditor="Capital One", number="****1234", opened="03/2020",
             closed="", account_type="Credit Card", **bureaus):
        data = {
            "rowId": row_id,
            "creditorName": creditor,
            "accountNumber": number,
            "dateOpened": opened,
            "dateClosed": closed,
            "accountType": account_type,
        }
        data.update(bureaus)
        return data
    return make


@pytest.fixture
def make_account(account_dict):
    """Factory for a MergedAccount built through the snapshot loader."""
    def make(**kwargs):
        return MergedAccount.from_dict(account_dict(**kwargs))
    return make


@pytest.fixture
def client():
    """API client backed by a private in-memory database."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)

    def override_get_db():
        db = TestingSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
        Base.metadata.drop_all(bind=engine)
