"""
Data layer for the market models package.

- models: transfer shapes for tickers, options, strategies and playlists
- validators: batch payload validation with per-field issue reports
"""

from .models import *  # noqa: F401,F403
from .models import __all__ as _models_all
from .validators import PayloadValidator, ValidationResult, ValidationIssue, ValidationSeverity

__all__ = list(_models_all) + [
    "PayloadValidator",
    "ValidationResult",
    "ValidationIssue",
    "ValidationSeverity"
]
