"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class IncompletePaymentDataError(DomainException):
    """Recipient name or IBAN is missing, so there is nothing to render"""

    pass


class QrRenderError(DomainException):
    """Payload does not fit into a QR symbol at the configured error correction"""

    pass


class FormStateError(DomainException):
    """Persisted form state is corrupt and cannot be restored"""

    pass
