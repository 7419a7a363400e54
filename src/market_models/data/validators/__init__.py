"""
Payload validation utilities.
"""

from .payload_validator import (
    ValidationSeverity,
    ValidationIssue,
    ValidationResult,
    PayloadValidator
)

__all__ = [
    "ValidationSeverity",
    "ValidationIssue",
    "ValidationResult",
    "PayloadValidator"
]
