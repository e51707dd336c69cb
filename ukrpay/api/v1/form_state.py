"""/v1/form-state - saved payment form"""

import logging
from fastapi import APIRouter, Depends, Request, Response

from ukrpay.api.v1.encode import encode_and_record
from ukrpay.api.v1.schemas import EncodingResponse, FormStateResponse, PaymentDataSchema
from ukrpay.api.dependencies import get_form_state_repository, get_request_id
from ukrpay.config import settings
from ukrpay.domain.form import default_payment_data, is_complete
from ukrpay.domain.models import QrVersion
from ukrpay.infrastructure.database.repositories import FormStateRepository

router = APIRouter()


@router.get("/form-state", response_model=FormStateResponse)
def get_form_state(repository: FormStateRepository = Depends(get_form_state_repository)):
    """Saved form contents, or empty defaults when nothing usable is saved"""
    stored = repository.load()
    repository.db.commit()

    data = stored if stored is not None else default_payment_data(settings.default_currency)
    return FormStateResponse(data=PaymentDataSchema.from_domain(data), stored=stored is not None)


@router.put("/form-state", response_model=FormStateResponse)
def save_form_state(
    request_body: PaymentDataSchema,
    request: Request,
    repository: FormStateRepository = Depends(get_form_state_repository),
):
    """Save form contents and return the encoding the form should now display"""
    request_id = get_request_id(request)
    data = request_body.to_domain()

    try:
        repository.save(data)
        repository.db.commit()
    except Exception:
        repository.db.rollback()
        logging.exception("Failed to save form state", extra={"request_id": request_id})
        raise

    result = None
    if is_complete(data):
        version = QrVersion(settings.default_qr_version)
        result = EncodingResponse.from_domain(encode_and_record(data, version, request_id))

    return FormStateResponse(data=request_body, stored=True, result=result)


@router.delete("/form-state", status_code=204)
def clear_form_state(repository: FormStateRepository = Depends(get_form_state_repository)):
    """Forget the saved form"""
    repository.clear()
    repository.db.commit()
    return Response(status_code=204)
