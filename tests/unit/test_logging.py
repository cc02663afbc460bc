"""Unit tests for logging setup and match statistics."""

import json
import logging
from unittest.mock import Mock

import pytest

from strokematch.core.builder import build_glyph
from strokematch.core.matcher import GateOutcome, MatchResult
from strokematch.utils import MatchLogger, MatchStats, configure_logging


@pytest.fixture
def restore_root_logger():
    """Remove handlers added by configure_logging after the test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def accepted_result() -> MatchResult:
    return MatchResult(
        accepted=True,
        outcomes=[
            GateOutcome("dedup", True, 5.0, 2.0),
            GateOutcome("shape_fit", True, 0.123456, 0.4),
        ],
    )


def rejected_result(gate: str) -> MatchResult:
    return MatchResult(
        accepted=False,
        rejected_by=gate,
        outcomes=[GateOutcome(gate, False, 0.9, 0.4)],
    )


class TestMatchStats:
    """Tests for MatchStats."""

    def test_defaults(self):
        """Test that a new stats object starts at zero."""
        stats = MatchStats()
        assert stats.attempts == 0
        assert stats.rejected == 0
        assert stats.acceptance_rate == 0.0

    def test_rates(self):
        """Test the acceptance rate computation."""
        stats = MatchStats(attempts=4, accepted=3)
        assert stats.rejected == 1
        assert stats.acceptance_rate == 0.75


class TestMatchLogger:
    """Tests for MatchLogger."""

    def test_log_accepted_match(self):
        """Test that an accepted stroke is logged with rounded metrics."""
        mock_logger = Mock()
        match_logger = MatchLogger(mock_logger)

        match_logger.log_match("十", 0, accepted_result())

        mock_logger.info.assert_called_once_with(
            "Stroke accepted",
            character="十",
            stroke=0,
            dedup=5.0,
            shape_fit=0.1235,
        )
        assert match_logger.stats.attempts == 1
        assert match_logger.stats.accepted == 1

    def test_log_rejected_match(self):
        """Test that rejections are counted per gate."""
        mock_logger = Mock()
        match_logger = MatchLogger(mock_logger)

        match_logger.log_match("十", 1, rejected_result("length"))
        match_logger.log_match("十", 1, rejected_result("length"))
        match_logger.log_match("十", 1, rejected_result("direction"))

        stats = match_logger.stats
        assert stats.attempts == 3
        assert stats.accepted == 0
        assert stats.rejections == {"length": 2, "direction": 1}
        _, kwargs = mock_logger.info.call_args
        assert kwargs["gate"] == "direction"

    def test_log_glyph_built(self, shi_record):
        """Test logging a built glyph."""
        mock_logger = Mock()
        match_logger = MatchLogger(mock_logger)

        match_logger.log_glyph_built(build_glyph(shi_record))

        mock_logger.debug.assert_called_once_with(
            "Glyph built", character="十", strokes=2, logical_strokes=2
        )
        assert match_logger.stats.glyphs_built == 1

    def test_log_glyph_error(self):
        """Test logging a glyph build error."""
        mock_logger = Mock()
        match_logger = MatchLogger(mock_logger)

        match_logger.log_glyph_error("丁", ValueError("bad"))

        mock_logger.error.assert_called_once_with(
            "Glyph build failed", character="丁", error="bad", error_type="ValueError"
        )


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_writes_json_lines_to_file(self, tmp_path, restore_root_logger):  # noqa: ARG002
        """Test that structured events reach the log file."""
        log_file = tmp_path / "match.log"
        logger = configure_logging(log_file=log_file, quiet=True)

        logger.info("Stroke accepted", character="十", stroke=0)
        for handler in logging.getLogger().handlers:
            handler.flush()

        lines = log_file.read_text(encoding="utf-8").splitlines()
        assert any("Logging initialized" in line for line in lines)
        event_line = next(line for line in lines if "Stroke accepted" in line)
        payload = json.loads(event_line.split(" | ", 3)[3])
        assert payload["character"] == "十"
        assert payload["stroke"] == 0
        assert payload["level"] == "info"

    def test_quiet_without_file_adds_no_handlers(self, restore_root_logger):  # noqa: ARG002
        before = list(logging.getLogger().handlers)
        configure_logging(quiet=True)
        assert logging.getLogger().handlers == before

    def test_console_handler_level(self, restore_root_logger):  # noqa: ARG002
        before = list(logging.getLogger().handlers)
        configure_logging(console_level="ERROR")
        added = [h for h in logging.getLogger().handlers if h not in before]
        assert len(added) == 1
        assert added[0].level == logging.ERROR
