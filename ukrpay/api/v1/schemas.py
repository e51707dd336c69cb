"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional

from ukrpay.config import settings
from ukrpay.domain.models import EncodingResult, PaymentData, QrVersion


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case accepted too"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PaymentDataSchema(CamelModel):
    """Payment form contents"""

    recipient_name: str = Field(..., description="Payee name")
    iban: str = Field(..., description="Payee IBAN, not checksum-validated")
    identification_code: str = Field(..., description="EDRPOU or IPN")
    purpose: str = Field(..., description="Payment purpose")
    currency: str = Field(default_factory=lambda: settings.default_currency, description="Currency code")
    amount: Optional[float] = Field(None, description="Amount; omitted means the payer enters it")
    reference: Optional[str] = None
    display: Optional[str] = None

    def to_domain(self) -> PaymentData:
        return PaymentData(
            recipient_name=self.recipient_name,
            iban=self.iban,
            identification_code=self.identification_code,
            purpose=self.purpose,
            currency=self.currency,
            amount=self.amount,
            reference=self.reference,
            display=self.display,
        )

    @classmethod
    def from_domain(cls, data: PaymentData) -> "PaymentDataSchema":
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


def _default_version() -> QrVersion:
    return QrVersion(settings.default_qr_version)


class EncodeRequest(CamelModel):
    """Request body for POST /v1/encode and the QR image endpoints"""

    data: PaymentDataSchema
    version: QrVersion = Field(default_factory=_default_version)


class EncodingResponse(CamelModel):
    """Encoded payload and payment link"""

    full_url: str
    raw_payload: str
    encoded_payload: str

    @classmethod
    def from_domain(cls, result: EncodingResult) -> "EncodingResponse":
        return cls(
            full_url=result.full_url,
            raw_payload=result.raw_payload,
            encoded_payload=result.encoded_payload,
        )


class LinkResponse(CamelModel):
    """Response for GET /v1/link; result is null while the form is incomplete"""

    data: PaymentDataSchema
    result: Optional[EncodingResponse] = None


class FormStateResponse(CamelModel):
    """Response for the form-state endpoints"""

    data: PaymentDataSchema
    stored: bool
    result: Optional[EncodingResponse] = None
