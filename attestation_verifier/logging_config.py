"""
Logging configuration for the attestation verifier.

Provides structured JSON logging with per-request correlation IDs.
Device keys, nonces, integrity tokens and the nullifier salt are never
logged.
"""

import json
import logging
import sys
import time
import uuid
from contextvars import ContextVar
from typing import Any, Dict, Optional

# Context variable for request ID tracking
request_id_var: ContextVar[str] = ContextVar('request_id', default='')


class StructuredFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    Outputs one JSON object per line, suitable for log aggregation.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": time.strftime('%Y-%m-%dT%H:%M:%SZ', time.gmtime(record.created)),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        request_id = request_id_var.get()
        if request_id:
            log_data["request_id"] = request_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, 'extra_fields'):
            log_data.update(record.extra_fields)

        return json.dumps(log_data, default=str)


class AuditLogger:
    """
    Logger for verification events.

    Each method emits one record whose extra fields are merged into the
    structured output.
    """

    def __init__(self, name: str = "attestation_verifier.audit"):
        self._logger = logging.getLogger(name)

    def _log(self, level: int, event_type: str, exc_info=None, **kwargs) -> None:
        if not self._logger.isEnabledFor(level):
            return

        message = kwargs.pop("message", "")
        extra: Dict[str, Any] = {
            "event_type": event_type,
            "request_id": request_id_var.get(),
            **kwargs
        }

        record = self._logger.makeRecord(
            self._logger.name,
            level,
            "",
            0,
            f"{event_type}: {message}",
            (),
            exc_info
        )
        record.extra_fields = extra
        self._logger.handle(record)

    def service_startup(self, environment: str, disclaimer: str, settings: Dict[str, Any]) -> None:
        """Log the posture banner at startup."""
        self._log(
            logging.WARNING,
            "SERVICE_STARTUP",
            environment=environment,
            disclaimer=disclaimer,
            settings=settings,
            message=f"[{environment}] attestation verifier starting: {disclaimer}"
        )

    def verification_request(
        self,
        platform: str,
        mock_mode: bool,
        integrity_token_len: int
    ) -> None:
        self._log(
            logging.INFO,
            "VERIFICATION_REQUEST",
            platform=platform,
            mock_mode=mock_mode,
            integrity_token_len=integrity_token_len,
            message=f"Verification requested for {platform}"
        )

    def verification_decision(
        self,
        platform: str,
        trust_score: float,
        nullifier: str
    ) -> None:
        """Log a completed verification."""
        level = logging.INFO if trust_score >= 0.5 else logging.WARNING
        self._log(
            level,
            "VERIFICATION_DECISION",
            platform=platform,
            trust_score=trust_score,
            nullifier=nullifier,
            message=f"Trust score {trust_score} for {platform}"
        )

    def validation_rejected(self, error_code: str, status: int, reason: str) -> None:
        """Log a request rejected before scoring."""
        self._log(
            logging.WARNING,
            "VALIDATION_REJECTED",
            error_code=error_code,
            status=status,
            reason=reason,
            message=f"Request rejected: {error_code}"
        )

    def request_rejected(self, error_code: str, status: int, reason: str) -> None:
        """Log a rejection that is not a validation failure, such as an unknown path."""
        self._log(
            logging.WARNING if status < 500 else logging.ERROR,
            "REQUEST_REJECTED",
            error_code=error_code,
            status=status,
            reason=reason,
            message=f"Request rejected: {error_code}"
        )

    def internal_error(self, error: BaseException, method: str, path: str) -> None:
        """Log an unhandled exception, with traceback."""
        self._log(
            logging.ERROR,
            "INTERNAL_ERROR",
            exc_info=(type(error), error, error.__traceback__),
            error_type=type(error).__name__,
            method=method,
            path=path,
            message=f"Unhandled error on {method} {path}"
        )


def configure_logging(
    level: str = "INFO",
    json_format: bool = True,
    log_file: Optional[str] = None
) -> None:
    """
    Configure logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: Use JSON formatting
        log_file: Optional file path for log output
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if json_format:
        formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


def set_request_id(request_id: Optional[str] = None) -> str:
    """
    Set the request ID for the current context.

    Args:
        request_id: Request ID to set, or None to generate one

    Returns:
        The request ID that was set
    """
    if not request_id:
        request_id = str(uuid.uuid4())
    request_id_var.set(request_id)
    return request_id


# Global audit logger instance
audit_log = AuditLogger()
