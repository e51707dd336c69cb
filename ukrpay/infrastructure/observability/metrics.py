"""Prometheus metrics for encodings, QR rendering and form state"""

from prometheus_client import Counter, Histogram

# Encoding metrics
encoding_counter = Counter(
    "ukrpay_encodings_total",
    "Payment payloads encoded",
    ["version", "amount"],  # amount: present | absent
)

payload_size_histogram = Histogram(
    "ukrpay_payload_bytes",
    "UTF-8 size of raw payloads",
    buckets=[64, 128, 256, 512, 1024, 2048],
)

# Rendering metrics
qr_render_counter = Counter(
    "ukrpay_qr_renders_total",
    "QR images rendered",
    ["format"],  # svg | png
)

qr_render_failure_counter = Counter(
    "ukrpay_qr_render_failures_total",
    "QR renders rejected because the payload did not fit",
)

# Persistence metrics
form_state_discarded_counter = Counter(
    "ukrpay_form_state_discarded_total",
    "Corrupt stored form states dropped on load",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_encoding(version: str, has_amount: bool, payload_bytes: int) -> None:
    """Record one encoding for version usage and payload size distribution"""
    encoding_counter.labels(version=version, amount="present" if has_amount else "absent").inc()
    payload_size_histogram.observe(payload_bytes)
