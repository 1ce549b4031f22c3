import io
import json
import logging

import pytest

from campusconnect.core.config import Settings, validate_settings
from campusconnect.core.exceptions import (
    CampusConnectError,
    InputClosedError,
    NoMatchesError,
    RetryLimitExceededError,
)
from campusconnect.core.logging import (
    DevelopmentFormatter,
    LogContext,
    StructuredFormatter,
    get_logger,
    setup_logging,
)


def test_default_settings():
    config = Settings()
    assert config.APP_NAME == "CampusConnect"
    assert "IBA Karachi" in config.UNIVERSITIES
    assert config.STUDENT_ID_MIN_LENGTH == 3
    assert config.MAX_RETRY_ATTEMPTS is None
    assert validate_settings(config)


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("UNIVERSITIES", '["IBA Karachi", "LUMS Lahore"]')
    monkeypatch.setenv("MAX_RETRY_ATTEMPTS", "5")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = Settings()

    assert config.UNIVERSITIES == ["IBA Karachi", "LUMS Lahore"]
    assert config.MAX_RETRY_ATTEMPTS == 5
    assert config.LOG_LEVEL == "DEBUG"


def test_validate_settings_reports_every_problem():
    config = Settings(UNIVERSITIES=[], STUDENT_ID_MIN_LENGTH=0, MAX_RETRY_ATTEMPTS=0)

    with pytest.raises(ValueError) as exc_info:
        validate_settings(config)

    message = str(exc_info.value)
    assert "UNIVERSITIES" in message
    assert "STUDENT_ID_MIN_LENGTH" in message
    assert "MAX_RETRY_ATTEMPTS" in message


@pytest.mark.parametrize("error, code", [
    (CampusConnectError("x"), "INTERNAL_ERROR"),
    (NoMatchesError(), "NO_MATCHES"),
    (RetryLimitExceededError(), "RETRY_LIMIT_EXCEEDED"),
    (InputClosedError(), "INPUT_CLOSED"),
])
def test_exception_codes(error, code):
    assert isinstance(error, CampusConnectError)
    assert error.code == code
    assert str(error) == error.message


def test_get_logger_namespace():
    assert get_logger("campusconnect.flow.dispatcher").name == "campusconnect.flow.dispatcher"
    assert get_logger("scripts").name == "campusconnect.scripts"


def _record(logger_name: str = "campusconnect.test") -> logging.LogRecord:
    return logging.getLogger(logger_name).makeRecord(
        logger_name, logging.INFO, __file__, 1, "hello", None, None
    )


def test_log_context_attaches_fields():
    with LogContext(step="STUDENT_ID"):
        record = _record()
    outside = _record()

    assert record.step == "STUDENT_ID"
    assert not hasattr(outside, "step")


def test_structured_formatter_emits_json():
    with LogContext(step="UNIVERSITY", attempt=2):
        payload = json.loads(StructuredFormatter().format(_record()))

    assert payload["message"] == "hello"
    assert payload["level"] == "INFO"
    assert payload["step"] == "UNIVERSITY"
    assert payload["attempt"] == 2


def test_development_formatter_shows_context():
    with LogContext(step="PREMIUM_OFFER"):
        line = DevelopmentFormatter().format(_record())

    assert "campusconnect.test: hello" in line
    assert "[step=PREMIUM_OFFER]" in line


def test_setup_logging_uses_stderr_and_level(monkeypatch):
    stream = io.StringIO()
    monkeypatch.setattr("sys.stderr", stream)
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level

    try:
        setup_logging(Settings(LOG_LEVEL="INFO", ENVIRONMENT="production"))
        get_logger("test").info("configured")

        assert root.level == logging.INFO
        assert isinstance(root.handlers[0].formatter, StructuredFormatter)
        assert json.loads(stream.getvalue().splitlines()[-1])["message"] == "configured"
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
