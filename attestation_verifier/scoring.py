"""
Platform scoring module for the attestation verifier.

Each scorer is a DEV-ONLY heuristic stand-in for real platform attestation.
Scorers are pure functions of the integrity token and the mock flag: they
never raise and never read process state.
"""

from typing import Callable, Dict

from .models import Platform

FULL_TRUST = 1.0
WEB_NONTRIVIAL_TRUST = 0.8
UNVERIFIED_TRUST = 0.5
NO_TRUST = 0.0

WEB_TEST_TOKEN = "test-token"
WEB_MIN_TOKEN_LEN = 8
APPLE_TOKEN_PREFIX = "apple-"
GOOGLE_TOKEN_PREFIX = "google-"


def score_web(integrity_token: str, mock_mode: bool) -> float:
    """
    Score a web attestation.

    DEV-ONLY: length heuristic, not real attestation. The well-known test
    token scores full trust; anything longer than 8 characters is treated
    as non-trivial.
    """
    if mock_mode or integrity_token.strip() == WEB_TEST_TOKEN:
        return FULL_TRUST
    if len(integrity_token) > WEB_MIN_TOKEN_LEN:
        return WEB_NONTRIVIAL_TRUST
    return NO_TRUST


def _score_prefixed(integrity_token: str, mock_mode: bool, prefix: str) -> float:
    if mock_mode:
        return FULL_TRUST
    if integrity_token.startswith(prefix):
        return FULL_TRUST
    # Unverifiable tokens are downgraded, not rejected.
    return UNVERIFIED_TRUST


def score_apple(integrity_token: str, mock_mode: bool) -> float:
    """DEV-ONLY: prefix check, not real Apple App Attest."""
    return _score_prefixed(integrity_token, mock_mode, APPLE_TOKEN_PREFIX)


def score_google(integrity_token: str, mock_mode: bool) -> float:
    """DEV-ONLY: prefix check, not real Play Integrity."""
    return _score_prefixed(integrity_token, mock_mode, GOOGLE_TOKEN_PREFIX)


SCORERS: Dict[Platform, Callable[[str, bool], float]] = {
    Platform.WEB: score_web,
    Platform.IOS: score_apple,
    Platform.ANDROID: score_google,
}


def score_attestation(platform: Platform, integrity_token: str, mock_mode: bool) -> float:
    """Dispatch to the scorer for the given platform."""
    return SCORERS[platform](integrity_token, mock_mode)
