"""
Exception hierarchy for the market models package.

Every error carries a severity and a category so that ``ErrorHandler`` can
pick a log level, plus a ``context`` dict with the details a caller needs.
Subclasses set their defaults as class attributes.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorSeverity(Enum):
    """How loudly an error is logged."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Area of the package an error belongs to."""
    VALIDATION_ERROR = "validation_error"
    SCHEMA_ERROR = "schema_error"
    CONFIGURATION_ERROR = "configuration_error"
    EXPORT_ERROR = "export_error"
    SYSTEM_ERROR = "system_error"


def _as_text(value: Any) -> Optional[str]:
    return None if value is None else str(value)


class MarketModelsError(Exception):
    """Base class of every error raised by the package."""

    category = ErrorCategory.SYSTEM_ERROR
    severity = ErrorSeverity.MEDIUM
    error_code: Optional[str] = None

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        severity: Optional[ErrorSeverity] = None,
        category: Optional[ErrorCategory] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        if error_code is not None:
            self.error_code = error_code
        if severity is not None:
            self.severity = severity
        if category is not None:
            self.category = category
        self.context = dict(context or {})
        self.timestamp = datetime.now(timezone.utc)
        self.error_id = f"{self.category.value}_{self.timestamp:%Y%m%d_%H%M%S}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_id": self.error_id,
            "error_type": type(self).__name__,
            "message": self.message,
            "error_code": self.error_code,
            "severity": self.severity.value,
            "category": self.category.value,
            "context": self.context,
            "timestamp": self.timestamp.isoformat()
        }


class ValidationError(MarketModelsError):
    """A single value broke a model rule."""

    category = ErrorCategory.VALIDATION_ERROR
    severity = ErrorSeverity.LOW
    error_code = "invalid_value"

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        field_value: Any = None,
        validation_rule: Optional[str] = None,
        **kwargs
    ):
        context = kwargs.pop("context", None) or {}
        context.update(
            field_name=field_name,
            field_value=_as_text(field_value),
            validation_rule=validation_rule
        )
        super().__init__(message, context=context, **kwargs)


class PayloadValidationError(ValidationError):
    """
    A payload could not be decoded into a model.

    ``issues`` holds one ``{"field", "message", "type"}`` dict per problem,
    with field paths such as ``legs[0].action``.
    """

    error_code = "invalid_payload"

    def __init__(
        self,
        message: str,
        model_name: Optional[str] = None,
        issues: Optional[List[Dict[str, Any]]] = None,
        **kwargs
    ):
        self.model_name = model_name
        self.issues = list(issues or [])

        context = kwargs.pop("context", None) or {}
        context.update(model_name=model_name, issue_count=len(self.issues), issues=self.issues)
        super().__init__(
            message,
            field_name=self.issues[0]["field"] if self.issues else None,
            validation_rule="schema",
            context=context,
            **kwargs
        )


class UnknownModelError(MarketModelsError):
    """A model name is not in the registry."""

    category = ErrorCategory.SCHEMA_ERROR
    severity = ErrorSeverity.LOW
    error_code = "unknown_model"

    def __init__(
        self,
        message: str,
        model_name: Optional[str] = None,
        available: Optional[List[str]] = None,
        **kwargs
    ):
        self.model_name = model_name

        context = kwargs.pop("context", None) or {}
        context.update(model_name=model_name, available=list(available or []))
        super().__init__(message, context=context, **kwargs)


class ConfigurationError(MarketModelsError):
    """Settings are missing, malformed or fail schema validation."""

    category = ErrorCategory.CONFIGURATION_ERROR
    severity = ErrorSeverity.HIGH

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Any = None,
        **kwargs
    ):
        context = kwargs.pop("context", None) or {}
        context.update(config_key=config_key, config_value=_as_text(config_value))
        super().__init__(message, context=context, **kwargs)


class SchemaExportError(MarketModelsError):
    """A JSON Schema document could not be written."""

    category = ErrorCategory.EXPORT_ERROR
    severity = ErrorSeverity.HIGH

    def __init__(
        self,
        message: str,
        model_name: Optional[str] = None,
        output_path: Optional[str] = None,
        **kwargs
    ):
        context = kwargs.pop("context", None) or {}
        context.update(model_name=model_name, output_path=output_path)
        super().__init__(message, context=context, **kwargs)
