"""Tests for structlog configuration."""

import json

import pytest
import structlog

from controly_ids.core.logging import setup_logging


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_json_logs(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that JSON mode writes one JSON object per event."""
        setup_logging(json_logs=True, log_level_name="INFO")

        structlog.get_logger("test").warning("id_entropy_unavailable", attempt=1)

        line = capsys.readouterr().err.strip()
        payload = json.loads(line)
        assert payload["event"] == "id_entropy_unavailable"
        assert payload["attempt"] == 1
        assert payload["level"] == "warning"
        assert "timestamp" in payload

    def test_level_filtering(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that events below the configured level are dropped."""
        setup_logging(json_logs=True, log_level_name="ERROR")

        logger = structlog.get_logger("test")
        logger.warning("dropped")
        logger.error("kept")

        err = capsys.readouterr().err
        assert "dropped" not in err
        assert "kept" in err

    def test_console_renderer(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that console mode renders the event name."""
        setup_logging(json_logs=False, log_level_name="DEBUG")

        structlog.get_logger("test").debug("id_generated", id="ABC12345")

        err = capsys.readouterr().err
        assert "id_generated" in err
        assert "ABC12345" in err
