"""QR code rendering for payment links"""

import io
import logging
import segno
from ukrpay.config import settings
from ukrpay.domain.exceptions import QrRenderError
from ukrpay.infrastructure.observability.metrics import qr_render_counter, qr_render_failure_counter

logger = logging.getLogger(__name__)


class QrRenderer:
    """Turns opaque text (the payment link) into SVG or PNG QR images"""

    def __init__(self, error_correction: str | None = None, border: int | None = None):
        self.error_correction = (error_correction or settings.qr_error_correction).lower()
        self.border = settings.qr_border if border is None else border

    def _make(self, text: str) -> segno.QRCode:
        try:
            # Fixed error-correction level; micro QR cannot hold a URL anyway
            return segno.make(text, error=self.error_correction, boost_error=False, micro=False)
        except segno.DataOverflowError as e:
            qr_render_failure_counter.inc()
            logger.warning(f"Payload too long for QR code: {e}", extra={"text_length": len(text)})
            raise QrRenderError(
                f"Payment link of {len(text)} characters does not fit a QR code "
                f"at error correction level {self.error_correction.upper()}"
            ) from e

    def _modules_across(self, qr: segno.QRCode) -> int:
        width, _ = qr.symbol_size(scale=1, border=self.border)
        return width

    def render_svg(self, text: str, size: int | None = None) -> str:
        """Standalone SVG document roughly `size` pixels wide"""
        size = size or settings.qr_svg_size
        qr = self._make(text)
        scale = size / self._modules_across(qr)

        # segno writes encoded bytes for SVG as well
        buffer = io.BytesIO()
        qr.save(buffer, kind="svg", xmldecl=False, scale=scale, border=self.border, encoding="utf-8")
        qr_render_counter.labels(format="svg").inc()
        return buffer.getvalue().decode("utf-8")

    def render_png(self, text: str, size: int | None = None) -> bytes:
        """PNG image at most `size` pixels wide, with at least one pixel per module"""
        size = size or settings.qr_png_size
        qr = self._make(text)
        scale = max(1, size // self._modules_across(qr))

        buffer = io.BytesIO()
        qr.save(buffer, kind="png", scale=scale, border=self.border)
        qr_render_counter.labels(format="png").inc()
        return buffer.getvalue()
