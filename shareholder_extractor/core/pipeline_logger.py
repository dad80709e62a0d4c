"""Logging for document extraction runs.

One PipelineLogger is shared per process (see get_logger). It prints short
progress lines to stderr and, when a log directory is configured, writes a
detailed log file per document. Modules that log through
logging.getLogger(__name__) reach the same handlers, since every module
logger is a child of "shareholder_extractor".
"""

import logging
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import Any

LOGGER_NAME = "shareholder_extractor"

CONSOLE_FORMAT = "%(message)s"
FILE_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)-7s] %(name)s: %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_MAX_VALUE_CHARS = 50
_MAX_LIST_ITEMS = 5


def _describe(data: dict[str, Any]) -> str:
    """Render keyword metrics as "key=value" pairs, shortening long values."""
    parts = []
    for key, value in data.items():
        if isinstance(value, (list, tuple)) and len(value) > _MAX_LIST_ITEMS:
            value = f"[{len(value)} items]"
        text = str(value)
        if len(text) > _MAX_VALUE_CHARS:
            text = text[:_MAX_VALUE_CHARS - 3] + "..."
        parts.append(f"{key}={text}")
    return ", ".join(parts)


class PipelineLogger:
    """Console and per-document file logging for the extractor.

    Usage:
        log = get_logger(verbose=True, log_dir="outputs/logs")
        log.start_document("consent.pdf")
        log.stage_result("heuristic", "3 shareholders", company="LEXSY INC.")
        log.end_document(success=True, pages=2)
    """

    def __init__(
        self,
        verbose: bool = False,
        log_dir: str | Path | None = None,
        name: str = LOGGER_NAME,
    ):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG)
        self.log_dir = Path(log_dir) if log_dir else None
        self.log_file: Path | None = None
        self._file_handler: logging.FileHandler | None = None
        self._started: float | None = None

        self._console = logging.StreamHandler(sys.stderr)
        self._console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        self.logger.addHandler(self._console)
        self.set_verbose(verbose)

    @property
    def verbose(self) -> bool:
        return self._console.level <= logging.DEBUG

    def set_verbose(self, verbose: bool):
        """DEBUG on the console when verbose, INFO otherwise."""
        self._console.setLevel(logging.DEBUG if verbose else logging.INFO)

    def _close_log_file(self):
        if self._file_handler is not None:
            self.logger.removeHandler(self._file_handler)
            self._file_handler.close()
            self._file_handler = None
        self.log_file = None

    def _open_log_file(self, source: str):
        self._close_log_file()
        self.log_dir.mkdir(parents=True, exist_ok=True)
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.log_file = self.log_dir / f"{Path(source).stem or 'document'}_{stamp}.log"

        handler = logging.FileHandler(self.log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=FILE_DATE_FORMAT))
        handler.setLevel(logging.DEBUG)
        self.logger.addHandler(handler)
        self._file_handler = handler

    def start_document(self, source: str):
        """Log the start of one document in a log file of its own."""
        if self.log_dir:
            self._open_log_file(source)
        self._started = time.monotonic()
        self.logger.info(f"Extracting: {source}")

    def end_document(self, success: bool = True, **metrics):
        """Log the outcome of the current document with elapsed time."""
        parts = ["COMPLETE" if success else "FAILED"]
        if metrics:
            parts.append(_describe(metrics))
        if self._started is not None:
            parts.append(f"{time.monotonic() - self._started:.2f}s")
            self._started = None
        self.logger.info(" | ".join(parts))

    def stage_result(self, stage: str, result: str, **metrics):
        """Log what one strategy (heuristic, llm) produced."""
        line = f"  {stage}: {result}"
        if metrics:
            line = f"{line} ({_describe(metrics)})"
        self.logger.info(line)

    def _emit(self, level: int, message: str, exc: Exception | None = None, **data):
        if data:
            message = f"{message} | {_describe(data)}"
        if exc is not None:
            message = f"{message} | {type(exc).__name__}: {exc}"
        self.logger.log(level, message)

    def debug(self, message: str, **data):
        self._emit(logging.DEBUG, message, **data)

    def info(self, message: str, **data):
        self._emit(logging.INFO, message, **data)

    def warning(self, message: str, **data):
        self._emit(logging.WARNING, message, **data)

    def error(self, message: str, exc: Exception | None = None, **data):
        self._emit(logging.ERROR, message, exc, **data)

    def close(self):
        """Detach and close every handler this logger owns."""
        for handler in self.logger.handlers[:]:
            handler.close()
            self.logger.removeHandler(handler)
        self._file_handler = None
        self.log_file = None


_logger: PipelineLogger | None = None


def get_logger(verbose: bool = False, log_dir: str | Path | None = None) -> PipelineLogger:
    """Return the shared logger, creating it on first call.

    Later calls can switch verbose on and set a log directory when none is
    configured yet; they never switch verbose off.
    """
    global _logger
    if _logger is None:
        _logger = PipelineLogger(verbose=verbose, log_dir=log_dir)
        return _logger

    if verbose:
        _logger.set_verbose(True)
    if log_dir and _logger.log_dir is None:
        _logger.log_dir = Path(log_dir)
    return _logger


def reset_logger():
    """Drop the shared logger and its handlers (used between tests)."""
    global _logger
    if _logger is not None:
        _logger.close()
    _logger = None
