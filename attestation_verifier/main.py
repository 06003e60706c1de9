"""
HTTP surface for the attestation verifier (DEV-ONLY stub).

This service does NOT provide production-grade sybil defense. Every
response is labeled with environment "DEV", and successful responses carry
an explicit disclaimer.

Run with the console script ``attestation-verifier``, or:
    uvicorn --factory attestation_verifier.main:create_app --port 3000
"""

from typing import Optional

from fastapi import FastAPI, Header, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import DEV_DISCLAIMER, ENV_POSTURE, Settings
from .errors import ErrorCode, VerificationError
from .logging_config import audit_log, configure_logging, set_request_id
from .mock_mode import MOCK_HEADER
from .models import AttestationRequest
from .responses import (
    error_from_exception,
    error_payload,
    health_payload,
    internal_error_payload,
    session_payload,
)
from .security import validate_header_value
from .verifier import AttestationVerifier

REQUEST_ID_HEADER = "x-request-id"


def _error_response(status: int, body: dict, headers: Optional[dict] = None) -> JSONResponse:
    if status == 400:
        audit_log.validation_rejected(body["errorCode"], status, body["error"])
    else:
        audit_log.request_rejected(body["errorCode"], status, body["error"])
    return JSONResponse(status_code=status, content=body, headers=headers)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Process configuration; read from the environment if omitted
    """
    if settings is None:
        settings = Settings.from_env()

    # Only /health and /verify are served; no docs or schema routes.
    app = FastAPI(
        title="Attestation Verifier (DEV-ONLY)",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.verifier = AttestationVerifier(settings)

    @app.middleware("http")
    async def request_context(request: Request, call_next):
        request_id = set_request_id(request.headers.get(REQUEST_ID_HEADER))
        try:
            response = await call_next(request)
        except Exception as e:
            audit_log.internal_error(e, request.method, request.url.path)
            response = JSONResponse(status_code=500, content=internal_error_payload())
        response.headers[REQUEST_ID_HEADER] = request_id
        return response

    @app.exception_handler(VerificationError)
    async def _verification_error(request: Request, exc: VerificationError):
        return _error_response(exc.status_code, error_from_exception(exc))

    @app.exception_handler(RequestValidationError)
    async def _malformed_body(request: Request, exc: RequestValidationError):
        return _error_response(
            400, error_payload(ErrorCode.MALFORMED_BODY, "malformed request body")
        )

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 405:
            body = error_payload(
                ErrorCode.METHOD_NOT_ALLOWED, f"method not allowed: {request.method}"
            )
            return _error_response(405, body, headers=exc.headers)
        if exc.status_code == 404:
            return _error_response(404, error_payload(ErrorCode.NOT_FOUND, "not found"))
        if exc.status_code == 400:
            return _error_response(
                400, error_payload(ErrorCode.MALFORMED_BODY, "malformed request body")
            )
        return _error_response(500, internal_error_payload())

    @app.get("/health")
    def health():
        return health_payload()

    @app.post("/verify")
    def verify(
        req: AttestationRequest,
        x_mock_attestation: Optional[str] = Header(default=None),
    ):
        mock_header = validate_header_value(x_mock_attestation, MOCK_HEADER)
        verifier: AttestationVerifier = app.state.verifier

        audit_log.verification_request(
            str(req.platform), verifier.mock_mode(mock_header), len(req.integrity_token)
        )
        outcome = verifier.verify(req, mock_header)
        audit_log.verification_decision(str(req.platform), outcome.trust_score, outcome.nullifier)

        return session_payload(outcome)

    return app


def run() -> None:
    """Entry point: configure logging and serve on the configured address."""
    import uvicorn

    settings = Settings.from_env()
    configure_logging(
        level=settings.log_level,
        json_format=settings.log_json,
        log_file=settings.log_file,
    )
    audit_log.service_startup(ENV_POSTURE, DEV_DISCLAIMER, settings.public_view())

    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
