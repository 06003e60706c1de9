"""
Attestation verification pipeline.

    Received -> Validated -> Scored -> Assembled

Validation is a total gate: a request that fails it never reaches the scorer
or the nullifier deriver. The pipeline is stateless; the only shared value is
the frozen Settings it was built with.
"""

from typing import Optional

from .config import Settings
from .mock_mode import is_mock_enabled
from .models import AttestationRequest
from .nullifier import derive_nullifier
from .responses import VerificationOutcome, build_outcome
from .scoring import score_attestation
from .security import validate_attestation_request


class AttestationVerifier:
    """
    Verifies attestation requests against a fixed configuration.

    Thread-safe: holds no mutable state.
    """

    def __init__(self, settings: Settings):
        self._settings = settings

    @property
    def settings(self) -> Settings:
        return self._settings

    def mock_mode(self, mock_header: Optional[str]) -> bool:
        return is_mock_enabled(self._settings.e2e_mode, mock_header)

    def verify(
        self,
        req: AttestationRequest,
        mock_header: Optional[str] = None,
        now: Optional[int] = None,
    ) -> VerificationOutcome:
        """
        Run the full pipeline for one request.

        Args:
            req: Deserialized request
            mock_header: Raw x-mock-attestation header value, if any
            now: Unix timestamp for the session token (defaults to wall clock)

        Raises:
            ValidationError: If the request fails validation
        """
        validate_attestation_request(req)

        trust_score = score_attestation(
            req.platform, req.integrity_token, self.mock_mode(mock_header)
        )
        nullifier = derive_nullifier(req.device_key, self._settings.nullifier_salt)

        return build_outcome(trust_score, nullifier, now)
