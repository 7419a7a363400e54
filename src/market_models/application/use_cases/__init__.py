"""
Application use cases.
"""

from .export_schemas import SchemaExporter, ExportResult, BUNDLE_FILE_NAME, JSON_SCHEMA_DIALECT

__all__ = [
    'SchemaExporter',
    'ExportResult',
    'BUNDLE_FILE_NAME',
    'JSON_SCHEMA_DIALECT'
]
