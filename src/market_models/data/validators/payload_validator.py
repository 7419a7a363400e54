"""
Payload validation that reports every issue instead of raising on the first.
"""

import json
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..models.registry import get_model
from ...infrastructure.error_handling import PayloadValidationError
from ...infrastructure.monitoring import LogCategory, get_logger

logger = get_logger(__name__, LogCategory.VALIDATION)


class ValidationSeverity(str, Enum):
    """Validation issue severity levels."""
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class ValidationIssue:
    """Represents a validation issue."""

    def __init__(self, severity: ValidationSeverity, message: str, field: Optional[str] = None):
        self.severity = severity
        self.message = message
        self.field = field
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "severity": self.severity.value,
            "message": self.message,
            "field": self.field
        }

    def __str__(self):
        field_info = f" ({self.field})" if self.field else ""
        return f"{self.severity.value.upper()}: {self.message}{field_info}"


class ValidationResult:
    """Container for validation results."""

    def __init__(self, model_name: str):
        self.model_name = model_name
        self.issues: List[ValidationIssue] = []
        self.is_valid = True
        self.item_count = 0

    def add_issue(self, severity: ValidationSeverity, message: str, field: Optional[str] = None):
        """Add a validation issue."""
        self.issues.append(ValidationIssue(severity, message, field))
        if severity == ValidationSeverity.ERROR:
            self.is_valid = False

    def add_error(self, message: str, field: Optional[str] = None):
        self.add_issue(ValidationSeverity.ERROR, message, field)

    def add_warning(self, message: str, field: Optional[str] = None):
        self.add_issue(ValidationSeverity.WARNING, message, field)

    def add_info(self, message: str, field: Optional[str] = None):
        self.add_issue(ValidationSeverity.INFO, message, field)

    def get_errors(self) -> List[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity == ValidationSeverity.ERROR]

    def get_warnings(self) -> List[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity == ValidationSeverity.WARNING]

    def has_errors(self) -> bool:
        return len(self.get_errors()) > 0

    def has_warnings(self) -> bool:
        return len(self.get_warnings()) > 0

    def passes(self, fail_on_warning: bool = False) -> bool:
        """Whether the payload is acceptable under the given strictness."""
        if fail_on_warning:
            return self.is_valid and not self.has_warnings()
        return self.is_valid

    def to_dict(self) -> Dict[str, Any]:
        return {
            "model": self.model_name,
            "valid": self.is_valid,
            "items": self.item_count,
            "errors": len(self.get_errors()),
            "warnings": len(self.get_warnings()),
            "issues": [issue.to_dict() for issue in self.issues]
        }


class PayloadValidator:
    """
    Validates raw payloads against a registered model.

    A payload that is a list is treated as a batch: each element is checked
    separately and its issues are prefixed with ``[index]``.
    """

    def validate(self, model_name: str, payload: Any) -> ValidationResult:
        model = get_model(model_name)
        result = ValidationResult(model.model_name())

        if isinstance(payload, list):
            if not payload:
                result.add_warning("Empty payload list")
            for index, item in enumerate(payload):
                self._validate_item(model, item, result, prefix=f"[{index}]")
        else:
            self._validate_item(model, payload, result)

        logger.debug(
            "Payload validated",
            model=result.model_name,
            items=result.item_count,
            errors=len(result.get_errors()),
            warnings=len(result.get_warnings())
        )
        return result

    def validate_json(self, model_name: str, text: Union[str, bytes]) -> ValidationResult:
        try:
            payload = json.loads(text)
        except ValueError as e:
            result = ValidationResult(get_model(model_name).model_name())
            result.add_error(f"Not a JSON document: {e}")
            return result
        return self.validate(model_name, payload)

    def validate_file(self, model_name: str, path: Union[str, Path]) -> ValidationResult:
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            result = ValidationResult(get_model(model_name).model_name())
            result.add_error(f"Cannot read {path}: {e.strerror or e}")
            return result
        return self.validate_json(model_name, text)

    def _validate_item(self, model, item: Any, result: ValidationResult, prefix: str = ""):
        result.item_count += 1
        try:
            model.from_dict(item)
        except PayloadValidationError as e:
            for issue in e.issues:
                result.add_error(issue["message"], self._join(prefix, issue["field"]))
            return

        if isinstance(item, dict):
            known = self._known_keys(model)
            for key in item:
                if key not in known:
                    result.add_info(f"Unknown field ignored: {key}", self._join(prefix, key))

    @staticmethod
    def _known_keys(model) -> set:
        keys = set()
        for name, field in model.model_fields.items():
            keys.add(name)
            if field.alias:
                keys.add(field.alias)
        return keys

    @staticmethod
    def _join(prefix: str, field: Optional[str]) -> Optional[str]:
        if not prefix:
            return field or None
        if not field:
            return prefix
        return f"{prefix}.{field}"
