"""
Structured logging for the market models package.

structlog renders events and hands them to the standard library logging
tree, where the handlers installed by ``setup_logging`` format and route them.
"""

import json
import logging
import logging.handlers
import sys
from datetime import datetime
from enum import Enum
from functools import partialmethod
from pathlib import Path
from typing import Any, Dict, Optional

import colorama
import structlog
from colorama import Back, Fore, Style
from structlog.stdlib import LoggerFactory


class LogCategory(str, Enum):
    """Which part of the package emitted an event."""
    SCHEMA = "schema"
    VALIDATION = "validation"
    EXPORT = "export"


LOG_FILE_NAME = "market_models.log"
ERROR_LOG_FILE_NAME = "errors.log"
PACKAGE_LOGGER = "market_models"

# Attributes every LogRecord has; anything else was passed through ``extra``
_STANDARD_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None))
) | {"message", "asctime"}


def configure_structlog(enable_json: bool = False) -> None:
    """
    Route structlog through the standard library logging tree.

    Applied at import time; setup_logging applies it again with the
    chosen renderer.
    """
    renderer = (
        structlog.processors.JSONRenderer()
        if enable_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def _rotating_handler(
    path: Path,
    level: int,
    formatter: logging.Formatter,
    max_file_size: int,
    backup_count: int
) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        path, maxBytes=max_file_size, backupCount=backup_count, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    log_level: str = "INFO",
    log_dir: str = "logs",
    enable_console: bool = True,
    enable_file: bool = True,
    enable_json: bool = False,
    max_file_size: int = 5 * 1024 * 1024,
    backup_count: int = 3
) -> None:
    """
    Install console and file handlers on the root logger.

    Args:
        log_level: Console threshold (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory receiving ``market_models.log`` and ``errors.log``
        enable_console: Write to stderr
        enable_file: Write rotating log files; the main file records DEBUG
        enable_json: One JSON object per line instead of text
        max_file_size: Rotation threshold in bytes
        backup_count: Rotated files to keep

    Raises:
        ValueError: If ``log_level`` is not a logging level name
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    colorama.init()
    configure_structlog(enable_json=enable_json)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    if enable_console:
        console = logging.StreamHandler(sys.stderr)
        console.setLevel(level)
        console.setFormatter(JsonLineFormatter() if enable_json else ColorLevelFormatter())
        root_logger.addHandler(console)

    if enable_file:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        file_formatter = JsonLineFormatter() if enable_json else PlainFileFormatter()

        root_logger.addHandler(_rotating_handler(
            log_path / LOG_FILE_NAME, logging.DEBUG, file_formatter, max_file_size, backup_count
        ))
        root_logger.addHandler(_rotating_handler(
            log_path / ERROR_LOG_FILE_NAME, logging.ERROR, file_formatter, max_file_size, backup_count
        ))

    root_logger.setLevel(logging.DEBUG if enable_file else level)


def _record_time(record: logging.LogRecord) -> datetime:
    return datetime.fromtimestamp(record.created)


class ColorLevelFormatter(logging.Formatter):
    """Short console lines with the level name colored."""

    LEVEL_COLORS = {
        logging.DEBUG: Fore.CYAN,
        logging.INFO: Fore.GREEN,
        logging.WARNING: Fore.YELLOW,
        logging.ERROR: Fore.RED,
        logging.CRITICAL: Fore.RED + Back.WHITE + Style.BRIGHT,
    }

    def format(self, record):
        color = self.LEVEL_COLORS.get(record.levelno, "")
        clock = _record_time(record).strftime("%H:%M:%S")
        level = f"{color}{record.levelname:<8}{Style.RESET_ALL}"
        return f"{Style.DIM}{clock}{Style.RESET_ALL} {level} {record.name}: {super().format(record)}"


class PlainFileFormatter(logging.Formatter):
    """File lines with an ISO timestamp and the emitting call site."""

    def format(self, record):
        stamp = _record_time(record).isoformat(timespec="milliseconds")
        where = f"{record.module}.{record.funcName}:{record.lineno}"
        return f"{stamp} {record.levelname:<8} {record.name} {super().format(record)} [{where}]"


class JsonLineFormatter(logging.Formatter):
    """One JSON object per record, including any ``extra`` attributes."""

    def format(self, record):
        entry: Dict[str, Any] = {
            "timestamp": _record_time(record).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
        }
        entry.update(
            (key, value) for key, value in vars(record).items()
            if key not in _STANDARD_RECORD_ATTRS and not key.startswith("_")
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class ContextLogger:
    """structlog logger that adds a fixed context to every event."""

    def __init__(self, name: str):
        self.name = name
        self.logger = structlog.get_logger(name)
        self._context: Dict[str, Any] = {}

    @property
    def context(self) -> Dict[str, Any]:
        return dict(self._context)

    def add_context(self, **kwargs) -> "ContextLogger":
        self._context.update(kwargs)
        return self

    def clear_context(self) -> "ContextLogger":
        self._context.clear()
        return self

    def _emit(self, method: str, message: str, **kwargs):
        getattr(self.logger, method)(message, **{**self._context, **kwargs})

    debug = partialmethod(_emit, "debug")
    info = partialmethod(_emit, "info")
    warning = partialmethod(_emit, "warning")
    error = partialmethod(_emit, "error")


class SchemaLogger(ContextLogger):
    """Events at the model boundary: payloads decoded or rejected."""

    def __init__(self, model_name: Optional[str] = None):
        name = f"{PACKAGE_LOGGER}.schema" if model_name is None else f"{PACKAGE_LOGGER}.schema.{model_name}"
        super().__init__(name)
        self.add_context(category=LogCategory.SCHEMA.value)
        if model_name is not None:
            self.add_context(model=model_name)

    def log_decoded(self, field_count: int, **kwargs):
        self.debug("Payload decoded", field_count=field_count, **kwargs)

    def log_rejected(self, issue_count: int, first_field: Optional[str] = None, **kwargs):
        self.warning("Payload rejected", issue_count=issue_count, first_field=first_field, **kwargs)


class ExportLogger(ContextLogger):
    """Events of a JSON Schema export run."""

    def __init__(self):
        super().__init__(f"{PACKAGE_LOGGER}.export")
        self.add_context(category=LogCategory.EXPORT.value)

    def log_schema_written(self, model_name: str, path: str, **kwargs):
        self.info("Schema written", model=model_name, path=path, **kwargs)

    def log_export_complete(self, count: int, output_dir: str, duration_ms: float, **kwargs):
        self.info(
            "Schema export complete",
            count=count,
            output_dir=output_dir,
            duration_ms=round(duration_ms, 2),
            **kwargs
        )


def get_schema_logger(model_name: Optional[str] = None) -> SchemaLogger:
    return SchemaLogger(model_name)


def get_export_logger() -> ExportLogger:
    return ExportLogger()


def get_logger(name: str, category: Optional[LogCategory] = None) -> ContextLogger:
    """Context logger, optionally tagged with a category."""
    logger = ContextLogger(name)
    if category is not None:
        logger.add_context(category=category.value)
    return logger


if not structlog.is_configured():
    configure_structlog()

# Silent until a host or setup_logging installs handlers on the root logger
logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())
