"""
Nullifier derivation.

A nullifier is a stable pseudonym for a device:

    nullifier = "nullifier-" || hex(SHA-256(salt || device_key))

Equal device keys under an unchanged salt always map to the same nullifier,
across calls and across restarts. The salt itself is never returned.
"""

from .util import sha256_hex

NULLIFIER_PREFIX = "nullifier-"


def derive_nullifier(device_key: str, salt: str) -> str:
    """
    Derive the nullifier for a device key.

    Args:
        device_key: Client-supplied device key (already validated)
        salt: Process-wide secret salt

    Returns:
        "nullifier-" followed by 64 lowercase hex characters
    """
    return NULLIFIER_PREFIX + sha256_hex(salt.encode('utf-8') + device_key.encode('utf-8'))
