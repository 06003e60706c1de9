import json
import logging

from attestation_verifier.logging_config import (
    AuditLogger,
    StructuredFormatter,
    configure_logging,
    request_id_var,
    set_request_id,
)

from conftest import TEST_SALT


def _audit_records(caplog):
    return [r for r in caplog.records if hasattr(r, "extra_fields")]


def test_structured_formatter_emits_json():
    record = logging.LogRecord("x", logging.INFO, __file__, 10, "hello %s", ("world",), None)
    record.extra_fields = {"event_type": "TEST", "trust_score": 0.8}
    token = request_id_var.set("req-1")
    try:
        data = json.loads(StructuredFormatter().format(record))
    finally:
        request_id_var.reset(token)
    assert data["message"] == "hello world"
    assert data["level"] == "INFO"
    assert data["request_id"] == "req-1"
    assert data["event_type"] == "TEST"
    assert data["trust_score"] == 0.8


def test_set_request_id_generates_when_missing():
    rid = set_request_id()
    assert rid and request_id_var.get() == rid
    assert set_request_id("fixed") == "fixed"
    assert set_request_id("") != ""


def test_audit_logger_events(caplog):
    caplog.set_level(logging.INFO)
    audit = AuditLogger("attestation_verifier.audit.test")
    audit.verification_decision("ios", 1.0, "nullifier-abc")
    audit.validation_rejected("MISSING_NONCE", 400, "nonce is required")
    records = _audit_records(caplog)
    assert [r.extra_fields["event_type"] for r in records] == ["VERIFICATION_DECISION", "VALIDATION_REJECTED"]
    assert records[0].levelno == logging.INFO
    assert records[1].levelno == logging.WARNING
    assert records[1].extra_fields["error_code"] == "MISSING_NONCE"


def test_low_trust_decision_logs_warning(caplog):
    caplog.set_level(logging.INFO)
    AuditLogger("attestation_verifier.audit.test").verification_decision("web", 0.0, "nullifier-abc")
    assert _audit_records(caplog)[0].levelno == logging.WARNING


def test_verify_logs_without_secrets(client, payload, caplog):
    caplog.set_level(logging.INFO)
    r = client.post("/verify", json=payload(deviceKey="secret-device", nonce="secret-nonce",
                                            integrityToken="secret-integrity"))
    assert r.status_code == 200
    records = _audit_records(caplog)
    events = [r.extra_fields["event_type"] for r in records]
    assert "VERIFICATION_REQUEST" in events
    assert "VERIFICATION_DECISION" in events
    dumped = json.dumps([r.extra_fields for r in records]) + caplog.text
    for secret in ("secret-device", "secret-nonce", "secret-integrity", TEST_SALT):
        assert secret not in dumped


def test_rejection_is_logged(client, payload, caplog):
    caplog.set_level(logging.INFO)
    client.post("/verify", json=payload(nonce=""))
    codes = [r.extra_fields.get("error_code") for r in _audit_records(caplog)]
    assert "MISSING_NONCE" in codes


def test_configure_logging_installs_handler(tmp_path):
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    log_file = tmp_path / "verifier.log"
    try:
        configure_logging(level="debug", json_format=True, log_file=str(log_file))
        assert root.level == logging.DEBUG
        assert any(isinstance(h.formatter, StructuredFormatter) for h in root.handlers)
        logging.getLogger("attestation_verifier.test").info("written")
        for h in root.handlers:
            h.flush()
        assert json.loads(log_file.read_text().splitlines()[-1])["message"] == "written"
    finally:
        for h in root.handlers[:]:
            root.removeHandler(h)
            h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)


def test_routing_rejections_are_not_validation_events(client, caplog):
    caplog.set_level(logging.INFO)
    client.get("/nope")
    client.get("/verify")
    records = _audit_records(caplog)
    assert [r.extra_fields["event_type"] for r in records] == ["REQUEST_REJECTED", "REQUEST_REJECTED"]
    assert [r.extra_fields["error_code"] for r in records] == ["NOT_FOUND", "METHOD_NOT_ALLOWED"]


def test_internal_error_logged_once_with_traceback(app, client, payload, caplog):
    class Exploding:
        def mock_mode(self, mock_header):
            return False

        def verify(self, req, mock_header=None, now=None):
            raise RuntimeError("boom")

    app.state.verifier = Exploding()
    caplog.set_level(logging.INFO)
    assert client.post("/verify", json=payload()).status_code == 500
    errors = [r for r in caplog.records if r.levelno >= logging.ERROR]
    assert len(errors) == 1
    assert errors[0].extra_fields["event_type"] == "INTERNAL_ERROR"
    assert errors[0].extra_fields["path"] == "/verify"
    assert "RuntimeError" in StructuredFormatter().format(errors[0])
