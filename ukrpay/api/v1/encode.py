"""POST /v1/encode and GET /v1/link - payment payload encoding endpoints"""

import time
from fastapi import APIRouter, Depends, Query, Request

from ukrpay.api.v1.schemas import EncodeRequest, EncodingResponse, LinkResponse, PaymentDataSchema
from ukrpay.api.dependencies import get_form_state_repository, get_request_id
from ukrpay.config import settings
from ukrpay.domain.amount import has_amount
from ukrpay.domain.deeplink import initial_form_data
from ukrpay.domain.encoder import encode_payment
from ukrpay.domain.form import is_complete
from ukrpay.domain.models import EncodingResult, PaymentData, QrVersion
from ukrpay.infrastructure.database.repositories import FormStateRepository
from ukrpay.infrastructure.observability.logging import log_encoding
from ukrpay.infrastructure.observability.metrics import record_encoding

router = APIRouter()


def encode_and_record(data: PaymentData, version: QrVersion, request_id: str) -> EncodingResult:
    """Encode payment data and emit the encoding metric and log record"""
    start_time = time.time()
    result = encode_payment(data, version)

    payload_bytes = len(result.raw_payload.encode("utf-8"))
    duration_ms = (time.time() - start_time) * 1000
    record_encoding(version.value, has_amount(data.amount), payload_bytes)
    log_encoding(request_id, version.value, has_amount(data.amount), payload_bytes, duration_ms)
    return result


@router.post("/encode", response_model=EncodingResponse)
def encode(request_body: EncodeRequest, request: Request):
    """
    Encode payment details into the NBU payload.

    Encodes whatever it is given, empty fields included; the placeholder rule
    (recipient name and IBAN required) is applied by /v1/link and the QR endpoints.
    """
    result = encode_and_record(request_body.data.to_domain(), request_body.version, get_request_id(request))
    return EncodingResponse.from_domain(result)


@router.get("/link", response_model=LinkResponse)
def resolve_link(
    request: Request,
    version: QrVersion = Query(QrVersion(settings.default_qr_version), description="QR payload version"),
    repository: FormStateRepository = Depends(get_form_state_repository),
):
    """
    Resolve a deep link into form data and, once complete, its encoding.

    Recognised query parameters (name, iban, edrpou, amount, purpose) are laid
    over the saved form state, or over empty defaults when nothing is saved.
    """
    stored = repository.load()
    repository.db.commit()  # Persist discarding of corrupt state

    data = initial_form_data(stored, request.query_params, settings.default_currency)

    result = None
    if is_complete(data):
        result = EncodingResponse.from_domain(encode_and_record(data, version, get_request_id(request)))

    return LinkResponse(data=PaymentDataSchema.from_domain(data), result=result)
