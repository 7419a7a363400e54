"""
Export JSON Schema documents for the registered models.

Frontends generate their own types from these documents, so the backend's
pydantic models stay the single source of truth for every shape.
"""

import json
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from ...data.models.registry import get_model, list_models
from ...infrastructure.error_handling import SchemaExportError
from ...infrastructure.monitoring import get_export_logger

JSON_SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"
BUNDLE_FILE_NAME = "market-models.schema.json"


@dataclass
class ExportResult:
    """Outcome of an export run."""
    output_dir: str
    written: Dict[str, str] = field(default_factory=dict)
    bundle_path: Optional[str] = None
    duration_ms: float = 0.0

    @property
    def count(self) -> int:
        return len(self.written)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "output_dir": self.output_dir,
            "count": self.count,
            "written": dict(self.written),
            "bundle_path": self.bundle_path,
            "duration_ms": round(self.duration_ms, 2)
        }


class SchemaExporter:
    """Builds and writes JSON Schema documents from the model registry."""

    def __init__(self, indent: int = 2):
        self.indent = indent
        self.logger = get_export_logger()

    def resolve_models(self, models: Optional[Sequence[str]] = None) -> List[str]:
        """Validate requested model names; an empty selection means all."""
        names = list(models) if models else list_models()
        for name in names:
            get_model(name)
        return names

    def build_schema(self, model_name: str) -> Dict[str, Any]:
        """JSON Schema of one model using wire (camelCase) names."""
        model = get_model(model_name)
        schema = model.model_json_schema(by_alias=True)
        return {"$schema": JSON_SCHEMA_DIALECT, **schema}

    def build_bundle(self, models: Optional[Sequence[str]] = None) -> Dict[str, Any]:
        """One document holding every selected model under ``$defs``."""
        definitions: Dict[str, Any] = {}
        for name in self.resolve_models(models):
            schema = get_model(name).model_json_schema(
                by_alias=True,
                ref_template="#/$defs/{model}"
            )
            for nested_name, nested in schema.pop("$defs", {}).items():
                definitions.setdefault(nested_name, nested)
            definitions[name] = schema

        return {
            "$schema": JSON_SCHEMA_DIALECT,
            "title": "market-models",
            "$defs": definitions
        }

    def export(
        self,
        output_dir: Union[str, Path],
        models: Optional[Sequence[str]] = None,
        bundle: bool = False
    ) -> ExportResult:
        """Write ``<Model>.schema.json`` per model, plus an optional bundle."""
        started = time.perf_counter()
        output_path = Path(output_dir)
        names = self.resolve_models(models)

        try:
            output_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise SchemaExportError(
                f"Cannot create output directory: {e.strerror or e}",
                output_path=str(output_path)
            ) from e

        result = ExportResult(output_dir=str(output_path))
        for name in names:
            target = output_path / f"{name}.schema.json"
            self._write(target, self.build_schema(name), name)
            result.written[name] = str(target)
            self.logger.log_schema_written(name, str(target))

        if bundle:
            target = output_path / BUNDLE_FILE_NAME
            self._write(target, self.build_bundle(names), None)
            result.bundle_path = str(target)

        result.duration_ms = (time.perf_counter() - started) * 1000
        self.logger.log_export_complete(result.count, str(output_path), result.duration_ms)
        return result

    def _write(self, target: Path, document: Dict[str, Any], model_name: Optional[str]):
        try:
            target.write_text(json.dumps(document, indent=self.indent) + "\n", encoding="utf-8")
        except OSError as e:
            raise SchemaExportError(
                f"Cannot write schema file: {e.strerror or e}",
                model_name=model_name,
                output_path=str(target)
            ) from e
