"""POST /v1/qr/svg and /v1/qr/png - QR images of the payment link"""

import logging
from urllib.parse import quote
from fastapi import APIRouter, Depends, HTTPException, Request
from starlette.responses import Response

from ukrpay.api.v1.encode import encode_and_record
from ukrpay.api.v1.schemas import EncodeRequest
from ukrpay.api.dependencies import get_qr_renderer, get_request_id
from ukrpay.domain.exceptions import IncompletePaymentDataError, QrRenderError
from ukrpay.domain.form import export_filename, is_complete
from ukrpay.domain.models import EncodingResult, PaymentData
from ukrpay.infrastructure.rendering.qr import QrRenderer

router = APIRouter()


def _encode_complete(request_body: EncodeRequest, request_id: str) -> tuple[PaymentData, EncodingResult]:
    data = request_body.data.to_domain()
    if not is_complete(data):
        raise IncompletePaymentDataError("Recipient name and IBAN are required to build a QR code")
    return data, encode_and_record(data, request_body.version, request_id)


def _render(render, request_body: EncodeRequest, request_id: str):
    try:
        data, result = _encode_complete(request_body, request_id)
        return data, render(result.full_url)

    except IncompletePaymentDataError as e:
        logging.warning(f"Incomplete payment data: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except QrRenderError as e:
        logging.warning(f"QR render failed: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=413, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/qr/svg")
def render_svg(
    request_body: EncodeRequest,
    request: Request,
    renderer: QrRenderer = Depends(get_qr_renderer),
):
    """QR code for on-screen display"""
    _, svg = _render(renderer.render_svg, request_body, get_request_id(request))
    return Response(content=svg, media_type="image/svg+xml")


@router.post("/qr/png")
def render_png(
    request_body: EncodeRequest,
    request: Request,
    renderer: QrRenderer = Depends(get_qr_renderer),
):
    """QR code as a downloadable PNG"""
    data, png = _render(renderer.render_png, request_body, get_request_id(request))

    # Recipient names are usually Cyrillic, so send the RFC 5987 form as well
    filename = export_filename(data)
    disposition = f"attachment; filename=\"ukrpay_qr.png\"; filename*=UTF-8''{quote(filename)}"
    return Response(content=png, media_type="image/png", headers={"Content-Disposition": disposition})
