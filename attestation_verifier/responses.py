"""
Response builder module for the attestation verifier.

Constructs session, health and error payloads. Every payload passes through
with_posture() so the environment label (and, on success, the disclaimer) is
attached in exactly one place.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .config import DEV_DISCLAIMER, ENV_POSTURE
from .errors import ErrorCode, VerificationError
from .models import ErrorResponse, HealthResponse, SessionResponse
from .util import now_epoch

SESSION_PREFIX = "session-"

INTERNAL_ERROR_MESSAGE = "internal server error"


@dataclass(frozen=True)
class VerificationOutcome:
    """Result of one successful verification."""
    trust_score: float
    nullifier: str
    session_token: str


def with_posture(body: Dict[str, Any], include_disclaimer: bool) -> Dict[str, Any]:
    """
    Attach the environment posture to a payload.

    Args:
        body: Payload fields
        include_disclaimer: Also attach the DEV disclaimer (success payloads)

    Returns:
        New dict with "environment" (and optionally "disclaimer") set
    """
    decorated = dict(body)
    decorated["environment"] = ENV_POSTURE
    if include_disclaimer:
        decorated["disclaimer"] = DEV_DISCLAIMER
    return decorated


def new_session_token(now: Optional[int] = None) -> str:
    """
    Mint a session token from the wall clock.

    Only second granularity; two requests in the same second get the same
    token.
    """
    ts = now_epoch() if now is None else now
    return f"{SESSION_PREFIX}{ts}"


def build_outcome(trust_score: float, nullifier: str, now: Optional[int] = None) -> VerificationOutcome:
    """Pair a score and nullifier with a freshly minted session token."""
    return VerificationOutcome(
        trust_score=trust_score,
        nullifier=nullifier,
        session_token=new_session_token(now),
    )


def session_payload(outcome: VerificationOutcome) -> Dict[str, Any]:
    """Build the /verify success payload."""
    body = with_posture(
        {
            "token": outcome.session_token,
            "trustScore": outcome.trust_score,
            "nullifier": outcome.nullifier,
        },
        include_disclaimer=True,
    )
    return SessionResponse.model_validate(body).model_dump(by_alias=True)


def health_payload() -> Dict[str, Any]:
    """Build the /health payload."""
    body = with_posture({"status": "ok"}, include_disclaimer=True)
    return HealthResponse.model_validate(body).model_dump()


def error_payload(code: ErrorCode, message: str) -> Dict[str, Any]:
    """
    Build an error payload.

    Error payloads carry the environment label but not the disclaimer.
    """
    body = with_posture(
        {"success": False, "error": message, "errorCode": code.value},
        include_disclaimer=False,
    )
    return ErrorResponse.model_validate(body).model_dump(by_alias=True)


def error_from_exception(exc: VerificationError) -> Dict[str, Any]:
    return error_payload(exc.code, exc.message)


def internal_error_payload() -> Dict[str, Any]:
    return error_payload(ErrorCode.INTERNAL_ERROR, INTERNAL_ERROR_MESSAGE)
