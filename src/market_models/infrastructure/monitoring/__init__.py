"""
Logging infrastructure for the market models package.
"""

from .logger import (
    LogCategory,
    configure_structlog,
    setup_logging,
    ColorLevelFormatter,
    PlainFileFormatter,
    JsonLineFormatter,
    ContextLogger,
    SchemaLogger,
    ExportLogger,
    get_schema_logger,
    get_export_logger,
    get_logger
)

__all__ = [
    'LogCategory',
    'configure_structlog',
    'setup_logging',
    'ColorLevelFormatter',
    'PlainFileFormatter',
    'JsonLineFormatter',
    'ContextLogger',
    'SchemaLogger',
    'ExportLogger',
    'get_schema_logger',
    'get_export_logger',
    'get_logger'
]
