"""Structured JSON logging for TimeKeeper.

Provides consistent logging across all modules with:
    - JSON format for file logs
    - Human-readable console output
    - Rotating file handler
    - Context fields (task, source_path, etc.)
    - A TRACE level below DEBUG, matching the form's log level choices

Usage:
    from src.core.logging import get_logger, setup_logging

    setup_logging(log_dir=config.log_path, level="INFO")  # Call once at startup
    logger = get_logger(__name__)

    logger.info("Loaded workbook", extra={"context": {"sheets": 3}})
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Optional, Union

from src.core.exceptions import ConfigurationError

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

ROOT_LOGGER_NAME = "timekeeper"

# Form labels -> stdlib levels. WARN is the label shown in the form.
LEVELS: dict[str, int] = {
    "ERROR": logging.ERROR,
    "WARN": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "TRACE": TRACE,
}


class JSONFormatter(logging.Formatter):
    """Format log records as JSON for file output."""

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as JSON.

        Args:
            record: The log record to format

        Returns:
            JSON string with timestamp, level, module, message, and context
        """
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "module": record.name,
            "location": f"{record.filename}:{record.lineno}",
            "message": record.getMessage(),
        }

        if hasattr(record, "context"):
            log_data["context"] = record.context

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class ConsoleFormatter(logging.Formatter):
    """Human-readable format for console output."""

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record for console.

        Args:
            record: The log record to format

        Returns:
            Human-readable string
        """
        timestamp = datetime.now().strftime("%H:%M:%S")
        level = record.levelname
        message = record.getMessage()

        if hasattr(record, "context") and record.context:
            ctx_parts = [f"{k}={v}" for k, v in record.context.items()]
            if ctx_parts:
                message += f" [{', '.join(ctx_parts)}]"

        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)

        return f"{timestamp} {level:>5s} {record.name}: {message}"


_logging_initialized = False
_console_handler: Optional[logging.Handler] = None
_file_handler: Optional[RotatingFileHandler] = None


def resolve_level(level: Union[str, int, Any]) -> int:
    """Map a level label, LogLevel member, or stdlib int to a logging level.

    Labels are case-insensitive. "WARNING" is accepted as well as "WARN".

    Raises:
        ConfigurationError: If the label is unknown
    """
    if isinstance(level, int):
        return level
    label = str(getattr(level, "label", level)).strip().upper()
    if label == "WARNING":
        label = "WARN"
    if label not in LEVELS:
        raise ConfigurationError(f"Invalid log level '{level}'")
    return LEVELS[label]


def _apply_console(enabled: bool) -> None:
    """Add or remove the stdout handler."""
    global _console_handler

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if enabled and _console_handler is None:
        _console_handler = logging.StreamHandler(sys.stdout)
        _console_handler.setFormatter(ConsoleFormatter())
        root_logger.addHandler(_console_handler)
    elif not enabled and _console_handler is not None:
        root_logger.removeHandler(_console_handler)
        _console_handler.close()
        _console_handler = None


def _apply_file(log_dir: Optional[Path]) -> None:
    """Point the rotating file handler at log_dir, or remove it for None."""
    global _file_handler

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    log_file = Path(log_dir) / "timekeeper.log" if log_dir is not None else None

    if _file_handler is not None:
        if log_file is not None and _file_handler.baseFilename == os.path.abspath(log_file):
            return
        root_logger.removeHandler(_file_handler)
        _file_handler.close()
        _file_handler = None

    if log_file is None:
        return

    log_file.parent.mkdir(parents=True, exist_ok=True)
    _file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5,
        encoding="utf-8",
    )
    _file_handler.setFormatter(JSONFormatter())
    root_logger.addHandler(_file_handler)


def setup_logging(
    log_dir: Optional[Path] = None,
    level: Union[str, int, Any] = "INFO",
    to_stdout: bool = True,
) -> None:
    """Initialize logging system.

    Call once at application startup. Later calls are ignored until
    reset_logging() runs; use configure_from_form() to change outputs
    while running.

    Args:
        log_dir: Directory for log files. None leaves file logging off.
        level: Minimum level for both outputs (label, LogLevel, or int)
        to_stdout: Also write human-readable lines to the console
    """
    global _logging_initialized

    if _logging_initialized:
        return

    numeric_level = resolve_level(level)
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(numeric_level)
    _apply_console(to_stdout)
    _apply_file(log_dir)

    _logging_initialized = True
    logging.getLogger(ROOT_LOGGER_NAME).info(
        "Logging initialized",
        extra={
            "context": {
                "log_dir": str(log_dir) if log_dir else None,
                "level": logging.getLevelName(numeric_level),
            }
        },
    )


def configure_from_form(model: Any) -> None:
    """Apply a file form snapshot's logging choices.

    Runs on every submit: sets the level, starts or stops file logging
    in the form's log folder, and turns stdout output on or off. An
    empty log folder disables file logging.

    Args:
        model: FileFormModel (or anything with the same three fields)

    Raises:
        ConfigurationError: If the log level is unknown
    """
    log_dir = Path(model.log_directory) if model.log_directory else None
    if not _logging_initialized:
        setup_logging(log_dir=log_dir, level=model.log_level, to_stdout=model.log_to_stdout)
        return

    set_log_level(model.log_level)
    _apply_console(model.log_to_stdout)
    _apply_file(log_dir)
    logging.getLogger(ROOT_LOGGER_NAME).debug(
        "Logging reconfigured",
        extra={
            "context": {
                "log_dir": str(log_dir) if log_dir else None,
                "level": logging.getLevelName(resolve_level(model.log_level)),
                "stdout": bool(model.log_to_stdout),
            }
        },
    )


def set_log_level(level: Union[str, int, Any]) -> None:
    """Change the active log level at runtime.

    Args:
        level: Label ("error", "warn", "info", "debug", "trace"), LogLevel, or int

    Raises:
        ConfigurationError: If the label is unknown
    """
    numeric_level = resolve_level(level)
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(numeric_level)


def reset_logging() -> None:
    """Remove installed handlers and allow setup_logging() to run again.

    Used primarily for testing.
    """
    global _logging_initialized

    _apply_console(False)
    _apply_file(None)
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(logging.NOTSET)
    _logging_initialized = False


def log_task_error(task_name: str, error: Optional[BaseException]) -> None:
    """Log a background task failure with context.

    Does nothing when error is None, so callers can pass a task's
    outcome straight through.
    """
    if error is None:
        return
    get_logger("tasks").error(
        "Background task failed",
        exc_info=(type(error), error, error.__traceback__),
        extra={"context": {"task": task_name, "error": str(error)}},
    )


def get_logger(name: str) -> logging.Logger:
    """Get logger for module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance for the module
    """
    if name.startswith("src."):
        name = name[4:]
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
