"""
Configuration module for the attestation verifier.

Settings are read from the environment exactly once, at process start, and
handed to the app factory as an immutable value. Nothing in the pipeline
reads the environment after that.
"""

import os
from dataclasses import dataclass, asdict
from typing import Any, Dict, Mapping, Optional

# ============================================================
# Environment Posture
# ============================================================

# Hard-coded deployment posture. This service is always DEV.
ENV_POSTURE = "DEV"

DEV_DISCLAIMER = (
    "DEV-ONLY: this attestation is a stub and does not provide production sybil defense"
)

# ============================================================
# Defaults
# ============================================================

DEFAULT_NULLIFIER_SALT = "vh-nullifier-salt"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = "INFO"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """Raised when an environment value cannot be parsed."""


@dataclass(frozen=True)
class Settings:
    """
    Process-wide configuration.

    Attributes:
        e2e_mode: Force mock attestation for every request
        nullifier_salt: Secret salt mixed into every nullifier
        host: Bind address for the HTTP server
        port: Bind port for the HTTP server
        log_level: Root log level
        log_json: Emit structured JSON logs
        log_file: Optional file to mirror log output into
    """
    e2e_mode: bool = False
    nullifier_salt: str = DEFAULT_NULLIFIER_SALT
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    log_json: bool = True
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Raises:
            ConfigError: If a value is present but invalid
        """
        env = os.environ if environ is None else environ

        # Only the exact literal enables global mock mode.
        e2e_mode = env.get("E2E_MODE") == "true"

        # An empty salt is honored; only an unset one falls back.
        salt = env.get("NULLIFIER_SALT")
        if salt is None:
            salt = DEFAULT_NULLIFIER_SALT

        raw_port = env.get("VERIFIER_PORT", str(DEFAULT_PORT)).strip()
        try:
            port = int(raw_port)
        except ValueError:
            raise ConfigError(f"VERIFIER_PORT must be an integer, got {raw_port!r}")
        if not 0 < port < 65536:
            raise ConfigError(f"VERIFIER_PORT out of range: {port}")

        log_level = env.get("VERIFIER_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
        if log_level not in _LOG_LEVELS:
            raise ConfigError(f"VERIFIER_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}")

        return cls(
            e2e_mode=e2e_mode,
            nullifier_salt=salt,
            host=env.get("VERIFIER_HOST", DEFAULT_HOST).strip() or DEFAULT_HOST,
            port=port,
            log_level=log_level,
            log_json=_is_truthy(env.get("VERIFIER_LOG_JSON", "true")),
            log_file=env.get("VERIFIER_LOG_FILE", "").strip() or None,
        )

    def public_view(self) -> Dict[str, Any]:
        """Settings safe to log (the salt is withheld)."""
        data = asdict(self)
        data.pop("nullifier_salt")
        return data


def _is_truthy(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes")
