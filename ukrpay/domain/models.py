"""Domain models - pure Python dataclasses describing an NBU payment"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional, Union

Amount = Union[int, float, Decimal]


class QrVersion(str, Enum):
    """NBU QR payload format revision"""

    V001 = "001"
    V002 = "002"
    V003 = "003"


@dataclass(frozen=True)
class PaymentData:
    """Payee details entered on the payment form"""

    recipient_name: str
    iban: str
    identification_code: str  # EDRPOU or IPN
    purpose: str
    currency: str = "UAH"
    amount: Optional[Amount] = None  # None: payer enters the amount
    reference: Optional[str] = None
    display: Optional[str] = None


@dataclass(frozen=True)
class PaymentOverrides:
    """Partial payment data; None marks a field that was not supplied"""

    recipient_name: Optional[str] = None
    iban: Optional[str] = None
    identification_code: Optional[str] = None
    purpose: Optional[str] = None
    currency: Optional[str] = None
    amount: Optional[Amount] = None
    reference: Optional[str] = None
    display: Optional[str] = None
    clear_amount: bool = False  # Drop any existing amount; amount above is then ignored

    def is_empty(self) -> bool:
        supplied = [value for name, value in vars(self).items() if name != "clear_amount"]
        return not self.clear_amount and all(value is None for value in supplied)


@dataclass(frozen=True)
class EncodingResult:
    """Output of the payload encoder"""

    full_url: str
    raw_payload: str
    encoded_payload: str
