"""Pytest fixtures for testing"""

import pytest
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from ukrpay.api.main import create_app
from ukrpay.domain.models import PaymentData
from ukrpay.infrastructure.database.models import Base
from ukrpay.infrastructure.database.session import get_db


# Test database: one shared in-memory SQLite connection
TEST_DATABASE_URL = "sqlite://"
engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def sample_payment() -> PaymentData:
    """Typical sole-proprietor payee"""
    return PaymentData(
        recipient_name="Тест",
        iban="UA123456789012345678901234567",
        identification_code="12345678",
        purpose="Оплата",
        currency="UAH",
    )


@pytest.fixture
def sample_payment_json() -> dict:
    """Same payee as sample_payment, as the browser form sends it"""
    return {
        "recipientName": "Тест",
        "iban": "UA123456789012345678901234567",
        "identificationCode": "12345678",
        "purpose": "Оплата",
        "currency": "UAH",
    }
