"""Dependency injection for FastAPI endpoints"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session
from ukrpay.infrastructure.database.repositories import FormStateRepository
from ukrpay.infrastructure.database.session import get_db
from ukrpay.infrastructure.rendering.qr import QrRenderer


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_form_state_repository(db: Session = Depends(get_db)) -> FormStateRepository:
    """Provide form state repository bound to the request's session"""
    return FormStateRepository(db)


def get_qr_renderer() -> QrRenderer:
    """Provide QR renderer configured from settings"""
    return QrRenderer()
