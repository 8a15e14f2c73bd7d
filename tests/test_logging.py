"""
Unit Tests for Logging Helpers
==============================
"""

import logging

import pytest
import structlog


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestMaskKey:
    def test_mask_key(self):
        """Should keep a short prefix only."""
        from upbit_core.logging import mask_key

        assert mask_key("AbCdEfGhIjKl") == "AbCd****"
        assert mask_key("abc") == "****"
        assert mask_key("") == "****"


class TestRedaction:
    def test_redacts_sensitive_fields(self):
        """Credential fields should be blanked regardless of case."""
        from upbit_core.logging import redact_sensitive, REDACTED

        event = redact_sensitive(None, "info", {
            "event": "x",
            "secret_key": "s",
            "Authorization": "Bearer t",
            "method": "GET",
        })

        assert event["secret_key"] == REDACTED
        assert event["Authorization"] == REDACTED
        assert event["method"] == "GET"

    def test_setup_logging_json(self, restore_logging, capsys):
        """Configured output should be JSON with the service name and no secrets."""
        import json
        from upbit_core.logging import setup_logging, get_logger

        setup_logging(service_name="upbit-test", level="DEBUG", json_output=True)
        get_logger("upbit_core.test").info("hello", secret_key="s3cr3t")

        line = capsys.readouterr().out.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "hello"
        assert record["service"] == "upbit-test"
        assert record["secret_key"] == "[REDACTED]"
