"""
Configuration management for the market-models tooling.
Handles loading, validation, and environment variable overrides.
"""

import os
import logging
import json
import re
from copy import deepcopy
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, List, Optional, Union

import yaml
import jsonschema

from ...infrastructure.error_handling import ConfigurationError, handle_errors

CONFIG_DIR = Path(__file__).parent
DEFAULT_CONFIG_PATH = CONFIG_DIR / "settings.yaml"
DEFAULT_SCHEMA_PATH = CONFIG_DIR / "settings.schema.json"

# Environment variable -> config path
ENV_OVERRIDES = {
    'MARKET_MODELS_ENV': ['application', 'environment'],
    'MARKET_MODELS_LOG_LEVEL': ['application', 'log_level'],
    'MARKET_MODELS_LOG_DIR': ['logging', 'log_dir'],
    'MARKET_MODELS_LOG_FILE': ['logging', 'enable_file'],
    'MARKET_MODELS_LOG_JSON': ['logging', 'enable_json'],
    'MARKET_MODELS_EXPORT_DIR': ['export', 'output_dir'],
    'MARKET_MODELS_EXPORT_INDENT': ['export', 'indent'],
}

_INTEGER_FIELDS = ('indent',)
_UPPERCASE_FIELDS = ('log_level',)
_TEMPLATE_PATTERN = re.compile(r'\$\{([^}]+)\}')


@dataclass
class LoggingConfig:
    """Logging configuration."""
    log_level: str = "INFO"
    log_dir: str = "logs"
    enable_console: bool = True
    enable_file: bool = False
    enable_json: bool = False


@dataclass
class ExportConfig:
    """JSON Schema export configuration."""
    output_dir: str = "schemas"
    indent: int = 2
    models: List[str] = field(default_factory=list)


@dataclass
class ValidationConfig:
    """Payload validation configuration."""
    fail_on_warning: bool = False


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = deepcopy(value)
    return merged


class ConfigManager:
    """
    Configuration manager with validation and environment variable support.

    The packaged defaults are always loaded first; a user file, when given,
    is merged on top of them so it only needs the keys it changes.
    """

    def __init__(
        self,
        config_path: Optional[Union[str, Path]] = None,
        schema_path: Optional[Union[str, Path]] = None
    ):
        self.logger = logging.getLogger(f"{self.__class__.__module__}.{self.__class__.__name__}")
        self.config_path = Path(config_path) if config_path else None
        self.schema_path = Path(schema_path) if schema_path else DEFAULT_SCHEMA_PATH

        self._schema = self._load_schema()
        self._config = self._load_and_validate_config()

        self.logger.info(f"Configuration loaded from {self.config_path or DEFAULT_CONFIG_PATH}")

    def _load_schema(self) -> Dict[str, Any]:
        """Load JSON schema for validation."""
        if not self.schema_path.exists():
            raise ConfigurationError(f"Schema file not found: {self.schema_path}", config_key="schema_path")

        try:
            with open(self.schema_path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigurationError(f"Failed to load schema: {str(e)}", config_key="schema_path") from e

    def _read_yaml(self, path: Path) -> Dict[str, Any]:
        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {path}", config_key="config_path")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML configuration: {str(e)}", config_key="config_path") from e
        except OSError as e:
            raise ConfigurationError(f"Failed to read configuration: {str(e)}", config_key="config_path") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration root must be a mapping: {path}",
                config_key="config_path",
                config_value=type(data).__name__
            )
        return data

    @handle_errors(operation_name="load_config")
    def _load_and_validate_config(self) -> Dict[str, Any]:
        """Load defaults, merge the user file, apply env overrides and validate."""
        config_data = self._read_yaml(DEFAULT_CONFIG_PATH)
        if self.config_path is not None:
            config_data = _deep_merge(config_data, self._read_yaml(self.config_path))

        config_data = self._apply_env_overrides(config_data)
        self._validate_config(config_data)
        return config_data

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration."""
        config_copy = self._substitute_env_templates(deepcopy(config))

        for env_var, config_path in ENV_OVERRIDES.items():
            env_value = os.getenv(env_var)
            if env_value is not None:
                converted_value = self._convert_env_value(env_value, config_path)
                self._set_nested_value(config_copy, config_path, converted_value)

        return config_copy

    def _convert_env_value(self, value: str, config_path: list) -> Any:
        """Convert environment variable string to appropriate type."""
        if value.lower() in ('true', 'false'):
            return value.lower() == 'true'

        if config_path[-1] in _INTEGER_FIELDS:
            try:
                return int(value)
            except ValueError:
                raise ConfigurationError(
                    f"Expected an integer for {'.'.join(config_path)}",
                    config_key='.'.join(config_path),
                    config_value=value
                ) from None

        if config_path[-1] in _UPPERCASE_FIELDS:
            return value.upper()

        return value

    def _set_nested_value(self, config: Dict[str, Any], path: list, value: Any):
        """Set nested dictionary value using path list."""
        current = config
        for key in path[:-1]:
            if key not in current or not isinstance(current[key], dict):
                current[key] = {}
            current = current[key]
        current[path[-1]] = value

    def _substitute_env_templates(self, config: Any) -> Any:
        """Substitute ${VAR_NAME} templates with environment variables."""
        if isinstance(config, dict):
            return {k: self._substitute_env_templates(v) for k, v in config.items()}
        elif isinstance(config, list):
            return [self._substitute_env_templates(item) for item in config]
        elif isinstance(config, str):
            return _TEMPLATE_PATTERN.sub(lambda m: os.getenv(m.group(1), ''), config)
        else:
            return config

    def _validate_config(self, config: Dict[str, Any]):
        """Validate configuration against JSON schema."""
        try:
            jsonschema.validate(config, self._schema)
        except jsonschema.ValidationError as e:
            key = '.'.join(str(p) for p in e.absolute_path) or None
            raise ConfigurationError(
                f"Configuration validation failed: {e.message}",
                config_key=key,
                config_value=e.instance
            ) from e
        except jsonschema.SchemaError as e:
            raise ConfigurationError(f"Invalid schema: {e.message}") from e

    def get_config(self) -> Dict[str, Any]:
        """Get complete configuration."""
        return deepcopy(self._config)

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration object."""
        return LoggingConfig(
            log_level=self._config['application']['log_level'],
            **self._config['logging']
        )

    def get_export_config(self) -> ExportConfig:
        """Get export configuration object."""
        return ExportConfig(**self._config['export'])

    def get_validation_config(self) -> ValidationConfig:
        """Get validation configuration object."""
        return ValidationConfig(**self._config.get('validation', {}))

    def get_value(self, key_path: str, default: Any = None) -> Any:
        """Get configuration value by dot-separated path."""
        current = self._config
        try:
            for key in key_path.split('.'):
                current = current[key]
            return current
        except (KeyError, TypeError):
            return default

    def get_log_level(self) -> str:
        """Configured level name, already upper-cased."""
        return self._config['application'].get('log_level', 'INFO')

    def __repr__(self) -> str:
        return (
            f"ConfigManager(config_path={self.config_path or DEFAULT_CONFIG_PATH}, "
            f"environment={self._config['application']['environment']})"
        )
