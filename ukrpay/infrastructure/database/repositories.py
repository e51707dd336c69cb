"""Data access layer for persisted payment form state"""

import logging
from typing import Optional
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel
from sqlalchemy.orm import Session
from ukrpay.config import settings
from ukrpay.domain.exceptions import FormStateError
from ukrpay.domain.models import PaymentData
from ukrpay.infrastructure.database.models import FormState
from ukrpay.infrastructure.observability.metrics import form_state_discarded_counter

logger = logging.getLogger(__name__)


class StoredPaymentForm(BaseModel):
    """JSON document kept in form_state.payload, same camelCase keys the browser form stores"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    recipient_name: Optional[str] = None
    iban: Optional[str] = None
    identification_code: Optional[str] = None
    purpose: Optional[str] = None
    currency: Optional[str] = None
    amount: Optional[float] = None
    reference: Optional[str] = None
    display: Optional[str] = None

    def to_domain(self, default_currency: str) -> PaymentData:
        """Missing text fields fall back to form defaults"""
        return PaymentData(
            recipient_name=self.recipient_name or "",
            iban=self.iban or "",
            identification_code=self.identification_code or "",
            purpose=self.purpose or "",
            currency=self.currency if self.currency is not None else default_currency,
            amount=self.amount,
            reference=self.reference,
            display=self.display,
        )

    @classmethod
    def from_domain(cls, data: PaymentData) -> "StoredPaymentForm":
        return cls(
            recipient_name=data.recipient_name,
            iban=data.iban,
            identification_code=data.identification_code,
            purpose=data.purpose,
            currency=data.currency,
            amount=None if data.amount is None else float(data.amount),
            reference=data.reference,
            display=data.display,
        )


def serialize_payment_data(data: PaymentData) -> str:
    """PaymentData -> JSON text with camelCase keys"""
    return StoredPaymentForm.from_domain(data).model_dump_json(by_alias=True)


def deserialize_payment_data(payload: str, default_currency: str = "UAH") -> PaymentData:
    """
    JSON text -> PaymentData.

    Raises:
        FormStateError: payload is not a JSON object or holds values of the wrong type
    """
    try:
        stored = StoredPaymentForm.model_validate_json(payload)
    except ValidationError as e:
        raise FormStateError(f"Stored form state is invalid: {e.error_count()} error(s)") from e
    return stored.to_domain(default_currency)


class FormStateRepository:
    """Repository for the saved payment form"""

    def __init__(self, db: Session, default_currency: str | None = None):
        self.db = db
        self.default_currency = default_currency or settings.default_currency

    def load(self, key: str | None = None) -> Optional[PaymentData]:
        """
        Restore saved form state.

        Corrupt state is deleted and None returned, so callers fall back to defaults.
        """
        key = key or settings.form_state_key
        row = self.db.get(FormState, key)
        if row is None:
            return None

        try:
            return deserialize_payment_data(row.payload, self.default_currency)
        except FormStateError as e:
            form_state_discarded_counter.inc()
            logger.warning(f"Discarding corrupt form state: {e}", extra={"state_key": key})
            self.db.delete(row)
            self.db.flush()
            return None

    def save(self, data: PaymentData, key: str | None = None) -> FormState:
        """Insert or replace saved form state"""
        key = key or settings.form_state_key
        payload = serialize_payment_data(data)

        row = self.db.get(FormState, key)
        if row is None:
            row = FormState(key=key, payload=payload)
            self.db.add(row)
        else:
            row.payload = payload

        self.db.flush()
        return row

    def clear(self, key: str | None = None) -> bool:
        """Delete saved form state; False when nothing was stored"""
        key = key or settings.form_state_key
        row = self.db.get(FormState, key)
        if row is None:
            return False

        self.db.delete(row)
        self.db.flush()
        return True
