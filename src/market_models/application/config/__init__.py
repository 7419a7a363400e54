"""
Configuration management for the market-models tooling.
"""

from .settings import (
    ConfigManager,
    LoggingConfig,
    ExportConfig,
    ValidationConfig,
    DEFAULT_CONFIG_PATH,
    DEFAULT_SCHEMA_PATH,
    ENV_OVERRIDES
)

__all__ = [
    'ConfigManager',
    'LoggingConfig',
    'ExportConfig',
    'ValidationConfig',
    'DEFAULT_CONFIG_PATH',
    'DEFAULT_SCHEMA_PATH',
    'ENV_OVERRIDES'
]
