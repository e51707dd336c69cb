"""Unit tests for payment form rules"""

from dataclasses import replace
from ukrpay.domain.form import (
    apply_overrides,
    default_payment_data,
    export_filename,
    is_complete,
    maybe_encode,
)
from ukrpay.domain.models import PaymentData, PaymentOverrides, QrVersion


def test_default_payment_data():
    """Test empty form defaults"""
    data = default_payment_data()

    assert data.recipient_name == ""
    assert data.iban == ""
    assert data.identification_code == ""
    assert data.purpose == ""
    assert data.currency == "UAH"
    assert data.amount is None
    assert data.reference == ""
    assert data.display == ""


def test_apply_overrides_replaces_only_supplied_fields(sample_payment: PaymentData):
    """Test None overrides keep existing values"""
    merged = apply_overrides(sample_payment, PaymentOverrides(iban="UA999", amount=42.5))

    assert merged.iban == "UA999"
    assert merged.amount == 42.5
    assert merged.recipient_name == sample_payment.recipient_name
    assert merged.purpose == sample_payment.purpose


def test_apply_overrides_empty_string_clears_field(sample_payment: PaymentData):
    """Test empty strings are real overrides"""
    merged = apply_overrides(sample_payment, PaymentOverrides(purpose=""))
    assert merged.purpose == ""


def test_apply_empty_overrides_returns_same_data(sample_payment: PaymentData):
    """Test no-op merge"""
    assert apply_overrides(sample_payment, PaymentOverrides()) is sample_payment


def test_is_complete_requires_name_and_iban(sample_payment: PaymentData):
    """Test placeholder rule"""
    assert is_complete(sample_payment) is True
    assert is_complete(replace(sample_payment, recipient_name="")) is False
    assert is_complete(replace(sample_payment, iban="")) is False
    # Identification code and purpose are not needed to show a code
    assert is_complete(replace(sample_payment, identification_code="", purpose="")) is True


def test_maybe_encode_placeholder_state(sample_payment: PaymentData):
    """Test incomplete data yields no encoding"""
    assert maybe_encode(default_payment_data()) is None
    assert maybe_encode(replace(sample_payment, iban="")) is None


def test_maybe_encode_complete_data(sample_payment: PaymentData):
    """Test complete data is encoded with the requested version"""
    result = maybe_encode(sample_payment, QrVersion.V001)

    assert result is not None
    assert result.full_url.startswith("https://qr.bank.gov.ua/")


def test_export_filename(sample_payment: PaymentData):
    """Test PNG download name"""
    assert export_filename(sample_payment) == "ukrpay_Тест.png"
    assert export_filename(default_payment_data()) == "ukrpay_qr.png"


def test_apply_overrides_clear_amount(sample_payment: PaymentData):
    """Test clearing the amount wins over a supplied amount"""
    stored = replace(sample_payment, amount=100)

    assert apply_overrides(stored, PaymentOverrides(clear_amount=True)).amount is None
    assert apply_overrides(stored, PaymentOverrides(amount=5.0, clear_amount=True)).amount is None
