"""
Security module for the attestation verifier.

Provides input validation for attestation requests and header sanity checks.
"""

from typing import Optional

from .errors import ErrorCode, ValidationError
from .models import AttestationRequest


# ============================================================
# Input Limits
# ============================================================

# Maximum accepted length for integrityToken.
MAX_INTEGRITY_TOKEN_LEN = 4096

# Maximum accepted length for deviceKey.
MAX_DEVICE_KEY_LEN = 512

# Maximum accepted length for nonce (hex-encoded 32-byte value plus headroom).
MAX_NONCE_LEN = 256


# ============================================================
# Request Validation
# ============================================================

# (field, max length, missing code, too-long code), in check order.
_FIELD_RULES = (
    ("integrity_token", MAX_INTEGRITY_TOKEN_LEN,
     ErrorCode.MISSING_INTEGRITY_TOKEN, ErrorCode.INTEGRITY_TOKEN_TOO_LONG),
    ("device_key", MAX_DEVICE_KEY_LEN,
     ErrorCode.MISSING_DEVICE_KEY, ErrorCode.DEVICE_KEY_TOO_LONG),
    ("nonce", MAX_NONCE_LEN,
     ErrorCode.MISSING_NONCE, ErrorCode.NONCE_TOO_LONG),
)


def validate_required_string(
    value: str,
    field_name: str,
    max_length: int,
    missing_code: ErrorCode,
    too_long_code: ErrorCode,
) -> str:
    """
    Validate that a string is non-blank and within a length limit.

    Blankness is judged after trimming whitespace; the length limit
    applies to the value as received.

    Raises:
        ValidationError: If validation fails
    """
    if not value.strip():
        raise ValidationError(missing_code, f"{field_name} is required and must not be blank")

    if len(value) > max_length:
        raise ValidationError(too_long_code, f"{field_name} exceeds maximum allowed length")

    return value


def validate_attestation_request(req: AttestationRequest) -> None:
    """
    Validate an attestation request.

    Fields are checked in a fixed order and the first failure wins:
    integrity token, then device key, then nonce.

    Raises:
        ValidationError: On the first failing rule
    """
    for field_name, max_length, missing_code, too_long_code in _FIELD_RULES:
        validate_required_string(
            getattr(req, field_name), field_name, max_length, missing_code, too_long_code
        )


# ============================================================
# Header Validation
# ============================================================

def validate_header_value(value: Optional[str], header_name: str) -> Optional[str]:
    """
    Reject header values that are not visible ASCII.

    Raw header bytes are decoded as latin-1 by the server, so anything outside
    tab and 0x20..0x7E means the client sent bytes that cannot be read as a
    header string.

    Raises:
        ValidationError: With INVALID_HEADER
    """
    if value is None:
        return None

    for ch in value:
        if ch != "\t" and not (" " <= ch <= "~"):
            raise ValidationError(
                ErrorCode.INVALID_HEADER, f"invalid request header: {header_name}"
            )

    return value
