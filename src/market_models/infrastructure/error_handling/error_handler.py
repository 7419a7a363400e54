"""
Log errors at a level chosen by their severity.
"""

import logging
from collections import Counter
from datetime import datetime, timezone
from functools import wraps
from typing import Any, Dict, Optional

from .exceptions import ErrorSeverity, MarketModelsError

_LOG_LEVELS = {
    ErrorSeverity.LOW: logging.INFO,
    ErrorSeverity.MEDIUM: logging.WARNING,
    ErrorSeverity.HIGH: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


def severity_of(error: BaseException) -> ErrorSeverity:
    """Severity of package errors as declared; builtin errors by type."""
    if isinstance(error, MarketModelsError):
        return error.severity
    if isinstance(error, (KeyboardInterrupt, SystemExit, MemoryError)):
        return ErrorSeverity.CRITICAL
    if isinstance(error, OSError):
        return ErrorSeverity.HIGH
    if isinstance(error, (ValueError, TypeError, KeyError)):
        return ErrorSeverity.MEDIUM
    return ErrorSeverity.LOW


class ErrorHandler:
    """Logs handled errors and counts them per exception type."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        self._counts: Counter = Counter()
        self._last_error: Optional[Dict[str, Any]] = None

    def handle_error(
        self,
        error: BaseException,
        context: Optional[Dict[str, Any]] = None,
        operation_name: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Log ``error`` and return a summary of it.

        Args:
            error: The exception being handled
            context: Extra details, used when the error carries none
            operation_name: What was being attempted

        Returns:
            Summary with operation, error type, error id and severity
        """
        severity = severity_of(error)
        self._counts[type(error).__name__] += 1
        self.logger.log(_LOG_LEVELS[severity], self._describe(error, context, operation_name))

        self._last_error = {
            "operation": operation_name,
            "error_type": type(error).__name__,
            "error_id": getattr(error, "error_id", None),
            "severity": severity.value,
            "timestamp": datetime.now(timezone.utc).isoformat()
        }
        return dict(self._last_error)

    @staticmethod
    def _describe(
        error: BaseException,
        context: Optional[Dict[str, Any]],
        operation_name: Optional[str]
    ) -> str:
        parts = [f"Operation: {operation_name}"] if operation_name else []
        parts.append(f"{type(error).__name__}: {error}")
        if isinstance(error, MarketModelsError):
            parts.append(f"id={error.error_id} category={error.category.value}")
            context = error.context or context
        if context:
            parts.append(f"Context: {context}")
        return " | ".join(parts)

    def get_error_statistics(self) -> Dict[str, Any]:
        return {
            "error_counts": dict(self._counts),
            "last_error": self._last_error
        }


def handle_errors(operation_name: Optional[str] = None, reraise: bool = True):
    """
    Decorator that logs any exception escaping the wrapped call.

    Args:
        operation_name: Name to log; defaults to the function name
        reraise: Re-raise after logging; otherwise the call returns None
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                ErrorHandler().handle_error(e, operation_name=operation_name or func.__name__)
                if reraise:
                    raise
                return None

        return wrapper
    return decorator
