"""Payment form rules: defaults, override merging and the placeholder state"""

from dataclasses import fields, replace
from typing import Optional, Union

from ukrpay.domain.encoder import encode_payment
from ukrpay.domain.models import EncodingResult, PaymentData, PaymentOverrides, QrVersion


def default_payment_data(currency: str = "UAH") -> PaymentData:
    """Empty form: every text field blank, no amount"""
    return PaymentData(
        recipient_name="",
        iban="",
        identification_code="",
        purpose="",
        currency=currency,
        amount=None,
        reference="",
        display="",
    )


def apply_overrides(data: PaymentData, overrides: PaymentOverrides) -> PaymentData:
    """Return a copy of data with every supplied override applied"""
    changes = {
        f.name: getattr(overrides, f.name)
        for f in fields(overrides)
        if f.name != "clear_amount" and getattr(overrides, f.name) is not None
    }
    if overrides.clear_amount:
        changes["amount"] = None
    if not changes:
        return data
    return replace(data, **changes)


def is_complete(data: PaymentData) -> bool:
    """A QR is only worth showing once recipient name and IBAN are filled in"""
    return bool(data.recipient_name) and bool(data.iban)


def maybe_encode(data: PaymentData, version: Union[QrVersion, str] = QrVersion.V002) -> Optional[EncodingResult]:
    """Encode complete form data; None means the form shows its placeholder"""
    if not is_complete(data):
        return None
    return encode_payment(data, version)


def export_filename(data: PaymentData) -> str:
    return f"ukrpay_{data.recipient_name or 'qr'}.png"
