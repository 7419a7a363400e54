"""
Application layer: configuration and use cases built on the models.
"""

from .config import ConfigManager
from .use_cases import SchemaExporter, ExportResult

__all__ = [
    "ConfigManager",
    "SchemaExporter",
    "ExportResult"
]
