"""Integration tests for QR image rendering"""

import pytest
from ukrpay.domain.encoder import encode_payment
from ukrpay.domain.exceptions import QrRenderError
from ukrpay.domain.models import PaymentData
from ukrpay.infrastructure.rendering.qr import QrRenderer

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def test_render_png(sample_payment: PaymentData):
    """Test PNG output for a payment link"""
    png = QrRenderer().render_png(encode_payment(sample_payment).full_url, size=300)
    assert png.startswith(PNG_SIGNATURE)


def test_render_svg(sample_payment: PaymentData):
    """Test standalone SVG output"""
    svg = QrRenderer().render_svg(encode_payment(sample_payment).full_url)

    assert isinstance(svg, str)
    assert svg.lstrip().startswith("<svg")
    assert "</svg>" in svg


def test_render_svg_and_png_same_link(sample_payment: PaymentData):
    """Test both formats render the same link without error"""
    renderer = QrRenderer()
    url = encode_payment(sample_payment).full_url

    assert "<svg" in renderer.render_svg(url, size=120)
    assert renderer.render_png(url, size=120).startswith(PNG_SIGNATURE)


def test_render_too_long_payload_fails():
    """Test overflow is reported by the renderer, not the encoder"""
    data = PaymentData(
        recipient_name="Отримувач",
        iban="UA213223130000026007233566001",
        identification_code="12345678",
        purpose="Дуже довге призначення платежу " * 200,
    )
    result = encode_payment(data)

    with pytest.raises(QrRenderError):
        QrRenderer(error_correction="Q").render_png(result.full_url)


def test_lower_error_correction_fits_more():
    """Test level L holds text that level H cannot"""
    text = "https://bank.gov.ua/qr/" + "A" * 2000

    with pytest.raises(QrRenderError):
        QrRenderer(error_correction="H").render_svg(text)
    assert QrRenderer(error_correction="L").render_svg(text)
