"""Deep-link query parameters -> payment form overrides"""

import logging
import math
from typing import Mapping, Optional

from ukrpay.domain.form import apply_overrides, default_payment_data
from ukrpay.domain.models import PaymentData, PaymentOverrides

logger = logging.getLogger(__name__)

# Query parameter -> PaymentData field
QUERY_FIELDS = {
    "name": "recipient_name",
    "iban": "iban",
    "edrpou": "identification_code",
    "purpose": "purpose",
}
AMOUNT_PARAM = "amount"


def parse_amount(value: str) -> Optional[float]:
    """Parse the amount parameter; anything that is not a finite number means no amount"""
    try:
        amount = float(value.strip())
    except ValueError:
        logger.warning("Ignoring unparseable amount in deep link", extra={"amount": value})
        return None

    if not math.isfinite(amount):
        logger.warning("Ignoring non-finite amount in deep link", extra={"amount": value})
        return None
    return amount


def parse_query(params: Mapping[str, str]) -> PaymentOverrides:
    """
    Read the recognised deep-link parameters.

    Parameters that are present but empty still override the field with an
    empty string; an amount that is empty or does not parse clears the amount.
    Unknown parameters are ignored.
    """
    values = {field: params[param] for param, field in QUERY_FIELDS.items() if param in params}

    if AMOUNT_PARAM in params:
        amount = parse_amount(params[AMOUNT_PARAM])
        if amount is None:
            values["clear_amount"] = True
        else:
            values["amount"] = amount

    return PaymentOverrides(**values)


def initial_form_data(
    stored: Optional[PaymentData],
    params: Mapping[str, str],
    currency: str = "UAH",
) -> PaymentData:
    """Stored form state (or empty defaults) with deep-link parameters on top"""
    base = stored if stored is not None else default_payment_data(currency)
    overrides = parse_query(params)
    if overrides.is_empty():
        return base
    return apply_overrides(base, overrides)
