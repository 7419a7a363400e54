"""
Infrastructure layer: error handling and logging.
"""

from .error_handling import (
    MarketModelsError,
    ValidationError,
    PayloadValidationError,
    UnknownModelError,
    ConfigurationError,
    SchemaExportError,
    handle_errors
)
from .monitoring import setup_logging, get_logger

__all__ = [
    "MarketModelsError",
    "ValidationError",
    "PayloadValidationError",
    "UnknownModelError",
    "ConfigurationError",
    "SchemaExportError",
    "handle_errors",
    "setup_logging",
    "get_logger"
]
