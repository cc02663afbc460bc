"""Logging utilities for strokematch."""

import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from strokematch.core.matcher import MatchResult
from strokematch.domain import GlyphModel


@dataclass
class MatchStats:
    """Statistics from a series of match attempts."""

    attempts: int = 0
    accepted: int = 0
    glyphs_built: int = 0
    rejections: Counter[str] = field(default_factory=Counter)

    @property
    def rejected(self) -> int:
        """Number of rejected attempts."""
        return self.attempts - self.accepted

    @property
    def acceptance_rate(self) -> float:
        """Share of attempts that were accepted."""
        if self.attempts == 0:
            return 0.0
        return self.accepted / self.attempts


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("strokematch")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class MatchLogger:
    """Logger for tracking glyph builds and match outcomes."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = MatchStats()

    def log_glyph_built(self, glyph: GlyphModel) -> None:
        """Log a successfully built glyph."""
        self._logger.debug(
            "Glyph built",
            character=glyph.character,
            strokes=len(glyph.strokes),
            logical_strokes=glyph.logical_stroke_count(),
        )
        self._stats.glyphs_built += 1

    def log_glyph_error(self, character: str, error: Exception) -> None:
        """Log a glyph that could not be built."""
        self._logger.error(
            "Glyph build failed",
            character=character,
            error=str(error),
            error_type=type(error).__name__,
        )

    def log_match(self, character: str, logical_id: int, result: MatchResult) -> None:
        """Log a match attempt and update statistics."""
        metrics = {name: round(value, 4) for name, value in result.metrics.items()}
        if result.accepted:
            self._logger.info(
                "Stroke accepted",
                character=character,
                stroke=logical_id,
                **metrics,
            )
            self._stats.accepted += 1
        else:
            self._logger.info(
                "Stroke rejected",
                character=character,
                stroke=logical_id,
                gate=result.rejected_by,
                **metrics,
            )
            self._stats.rejections[result.rejected_by or "unknown"] += 1
        self._stats.attempts += 1

    @property
    def stats(self) -> MatchStats:
        """Get current match statistics."""
        return self._stats
