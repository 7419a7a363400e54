"""
Error handling infrastructure package.
"""

from .exceptions import (
    MarketModelsError,
    ErrorSeverity,
    ErrorCategory,
    ValidationError,
    PayloadValidationError,
    UnknownModelError,
    ConfigurationError,
    SchemaExportError
)

from .error_handler import (
    ErrorHandler,
    handle_errors,
    severity_of
)

__all__ = [
    # Exceptions
    "MarketModelsError",
    "ErrorSeverity",
    "ErrorCategory",
    "ValidationError",
    "PayloadValidationError",
    "UnknownModelError",
    "ConfigurationError",
    "SchemaExportError",

    # Error handling
    "ErrorHandler",
    "handle_errors",
    "severity_of"
]
