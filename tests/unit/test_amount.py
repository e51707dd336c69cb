"""Unit tests for amount formatting"""

import pytest
from decimal import Decimal
from ukrpay.domain.amount import amount_field, format_amount, has_amount


@pytest.mark.parametrize(
    "amount,expected",
    [
        (150, "150"),
        (150.0, "150"),
        (150.5, "150.5"),
        (0.1 + 0.2, "0.30000000000000004"),  # Binary float noise is kept, not rounded
        (1e-05, "0.00001"),
        (1e-07, "1e-7"),
        (1.5e-07, "1.5e-7"),
        (1e20, "100000000000000000000"),
        (1e21, "1e+21"),
        (1.5e21, "1.5e+21"),
        (-42.25, "-42.25"),
        (Decimal("150.50"), "150.5"),
        (Decimal("1.5E+2"), "150"),
        (Decimal("0.0010"), "0.001"),
    ],
)
def test_format_amount(amount, expected):
    """Test plain number rendering without fixed-point padding"""
    assert format_amount(amount) == expected


def test_has_amount():
    """Test None, zero and NaN count as no amount"""
    assert has_amount(None) is False
    assert has_amount(0) is False
    assert has_amount(0.0) is False
    assert has_amount(float("nan")) is False
    assert has_amount(Decimal("0.00")) is False
    assert has_amount(0.5) is True
    assert has_amount(-3) is True


def test_amount_field():
    """Test currency prefix without separator"""
    assert amount_field(150, "UAH") == "UAH150"
    assert amount_field(None, "UAH") == ""
    assert amount_field(12.75, "") == "12.75"


def test_signalling_nan_counts_as_absent():
    """Test Decimal sNaN does not raise and leaves the field empty"""
    assert has_amount(Decimal("sNaN")) is False
    assert has_amount(Decimal("NaN")) is False
    assert amount_field(Decimal("sNaN"), "UAH") == ""
