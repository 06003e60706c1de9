"""
Error vocabulary for the attestation verifier.

The string values of ErrorCode are the external contract and must never
change spelling.
"""

from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    MISSING_INTEGRITY_TOKEN = "MISSING_INTEGRITY_TOKEN"
    INTEGRITY_TOKEN_TOO_LONG = "INTEGRITY_TOKEN_TOO_LONG"
    MISSING_DEVICE_KEY = "MISSING_DEVICE_KEY"
    DEVICE_KEY_TOO_LONG = "DEVICE_KEY_TOO_LONG"
    MISSING_NONCE = "MISSING_NONCE"
    NONCE_TOO_LONG = "NONCE_TOO_LONG"
    INVALID_HEADER = "INVALID_HEADER"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    # Transport-boundary rejections
    MALFORMED_BODY = "MALFORMED_BODY"
    NOT_FOUND = "NOT_FOUND"


class VerificationError(Exception):
    """Base error carrying an external code and HTTP status."""

    status_code = 500

    def __init__(self, code: ErrorCode, message: str, status_code: Optional[int] = None):
        self.code = code
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(f"{code.value}: {message}")


class ValidationError(VerificationError):
    """Raised when a request fails input validation."""

    status_code = 400
