"""
Attestation Verifier (DEV-ONLY stub)

Accepts a client-submitted integrity proof (platform, integrity token,
device key, nonce), scores it, derives a stable pseudonymous nullifier for
the device, and returns a session token.

Verification is heuristic (prefix and length checks), not cryptographic
validation of platform attestation chains. Every successful response is
labeled environment "DEV" with an explicit non-production disclaimer.

Usage:
    from attestation_verifier import (
        AttestationRequest,
        AttestationVerifier,
        Platform,
        Settings,
    )

    verifier = AttestationVerifier(Settings.from_env())
    outcome = verifier.verify(
        AttestationRequest(
            platform=Platform.IOS,
            integrityToken="apple-xyz",
            deviceKey="dk",
            nonce="nn",
        )
    )
    outcome.trust_score   # 1.0
    outcome.nullifier     # "nullifier-<64 hex chars>"
"""

__version__ = "0.1.0"

from .config import DEV_DISCLAIMER, ENV_POSTURE, ConfigError, Settings
from .errors import ErrorCode, ValidationError, VerificationError
from .models import AttestationRequest, Platform
from .nullifier import derive_nullifier
from .responses import VerificationOutcome
from .scoring import score_attestation
from .verifier import AttestationVerifier

__all__ = [
    "AttestationRequest",
    "AttestationVerifier",
    "ConfigError",
    "DEV_DISCLAIMER",
    "ENV_POSTURE",
    "ErrorCode",
    "Platform",
    "Settings",
    "ValidationError",
    "VerificationError",
    "VerificationOutcome",
    "derive_nullifier",
    "score_attestation",
]
