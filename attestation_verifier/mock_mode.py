"""
Mock-mode resolution.

Two tiers: a process-wide flag (set from E2E_MODE at startup) forces mock mode
for every request; otherwise a request may opt in with the
x-mock-attestation header.
"""

from typing import Optional

MOCK_HEADER = "x-mock-attestation"


def is_mock_enabled(forced: bool, mock_header: Optional[str]) -> bool:
    """
    Decide whether verification must report maximal trust.

    Args:
        forced: Process-wide mock flag from Settings.e2e_mode
        mock_header: Raw x-mock-attestation value, if the request carried one

    Returns:
        True if the global flag is set, or the header equals "true"
        case-insensitively; False otherwise
    """
    if forced:
        return True
    if mock_header is None:
        return False
    return mock_header.lower() == "true"
