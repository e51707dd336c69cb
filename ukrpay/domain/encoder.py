"""
NBU payment QR payload encoder.

Field layout follows Table 1 of the NBU QR payment rules (appendices 2 and 3).
The payload is 13 newline-separated fields; the QR code carries a link with
the base64url-encoded payload appended to a version-dependent base URL.
"""

from typing import List, Union

from ukrpay.domain.amount import amount_field
from ukrpay.domain.models import EncodingResult, PaymentData, QrVersion
from ukrpay.utils.base64url import b64url_decode, b64url_encode

SERVICE_TAG = "BCD"
CODING_UTF8 = "1"
FUNCTION_CODE = "UCT"  # Ukrainian Credit Transfer
FIELD_SEPARATOR = "\n"
FIELD_COUNT = 13

BANK_GOV_UA_URL = "https://bank.gov.ua/qr/"
QR_BANK_GOV_UA_URL = "https://qr.bank.gov.ua/"

# Only these revisions are served from bank.gov.ua/qr/, everything else
# (001 included) goes to qr.bank.gov.ua
_BANK_GOV_UA_VERSIONS = frozenset({QrVersion.V002.value, QrVersion.V003.value})


def _version_text(version: Union[QrVersion, str]) -> str:
    return version.value if isinstance(version, QrVersion) else version


def base_url_for(version: Union[QrVersion, str]) -> str:
    """Base URL that the encoded payload is appended to"""
    if _version_text(version) in _BANK_GOV_UA_VERSIONS:
        return BANK_GOV_UA_URL
    return QR_BANK_GOV_UA_URL


def build_fields(data: PaymentData, version: Union[QrVersion, str]) -> List[str]:
    """Ordered payload fields; order and count are part of the wire format"""
    return [
        SERVICE_TAG,
        _version_text(version),
        CODING_UTF8,
        FUNCTION_CODE,
        "",  # BIC, reserved
        data.recipient_name,
        data.iban,
        amount_field(data.amount, data.currency),
        data.identification_code,
        "",  # Purpose code, reserved
        data.reference or "",
        data.purpose,
        data.display or "",
    ]


def encode_payment(data: PaymentData, version: Union[QrVersion, str] = QrVersion.V002) -> EncodingResult:
    """
    Encode payment data into the NBU QR payload and link.

    Accepts any field values, empty strings included, and never raises.
    Whether the result is worth showing is the caller's decision.
    """
    raw_payload = FIELD_SEPARATOR.join(build_fields(data, version))
    encoded_payload = b64url_encode(raw_payload.encode("utf-8"))

    return EncodingResult(
        full_url=f"{base_url_for(version)}{encoded_payload}",
        raw_payload=raw_payload,
        encoded_payload=encoded_payload,
    )


def decode_payload(encoded_payload: str) -> str:
    """Reverse of the token step: base64url token back to payload text"""
    return b64url_decode(encoded_payload).decode("utf-8")


def split_fields(raw_payload: str) -> List[str]:
    return raw_payload.split(FIELD_SEPARATOR)
