"""URL-safe base64 helpers (RFC 4648 section 5, padding stripped)"""

import base64


def b64url_encode(data: bytes) -> str:
    """Encode bytes as base64url with trailing '=' removed"""
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def b64url_decode(token: str) -> bytes:
    """Decode a base64url token, restoring any stripped padding"""
    padding = "=" * (-len(token) % 4)
    return base64.urlsafe_b64decode(token + padding)
