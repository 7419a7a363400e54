"""
Base model shared by every entity in the package.

Attributes are snake_case in Python and camelCase on the wire. Both spellings
are accepted on input; output always uses camelCase.

Number and boolean fields are declared with pydantic's ``Strict*`` types: a
quoted number or a boolean standing in for a number is rejected, while an
integer is still accepted where a float is expected. Enums stay lax so their
string values decode.
"""

import json
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from ...infrastructure.error_handling import PayloadValidationError
from ...infrastructure.monitoring import get_schema_logger

ModelT = TypeVar("ModelT", bound="SchemaModel")


def _format_location(loc) -> str:
    """Render a pydantic error location as a dotted path with list indices."""
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path


def collect_issues(error: PydanticValidationError) -> List[Dict[str, Any]]:
    """Convert a pydantic ValidationError into plain issue dictionaries."""
    issues = []
    for item in error.errors(include_url=False):
        issues.append({
            "field": _format_location(item.get("loc", ())),
            "message": item.get("msg", ""),
            "type": item.get("type", ""),
        })
    return issues


class SchemaModel(BaseModel):
    """Base class for all transfer shapes."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
        use_enum_values=False,
        extra="ignore",
    )

    @classmethod
    def model_name(cls) -> str:
        return cls.__name__

    @classmethod
    def from_dict(cls: Type[ModelT], data: Any) -> ModelT:
        """Decode a payload, raising PayloadValidationError on any mismatch."""
        logger = get_schema_logger(cls.model_name())
        try:
            instance = cls.model_validate(data)
        except PydanticValidationError as e:
            issues = collect_issues(e)
            logger.log_rejected(len(issues), issues[0]["field"] if issues else None)
            raise PayloadValidationError(
                f"Invalid {cls.model_name()} payload: {len(issues)} issue(s)",
                model_name=cls.model_name(),
                issues=issues,
            ) from e

        logger.log_decoded(len(instance.model_fields_set))
        return instance

    @classmethod
    def from_json(cls: Type[ModelT], text: Union[str, bytes]) -> ModelT:
        """Decode a JSON document."""
        try:
            data = json.loads(text)
        except ValueError as e:
            raise PayloadValidationError(
                f"Invalid {cls.model_name()} payload: not a JSON document",
                model_name=cls.model_name(),
                issues=[{"field": "", "message": str(e), "type": "json_invalid"}],
            ) from e
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        """Encode with camelCase keys; absent optional fields are omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)


class PartialUpdateModel(SchemaModel):
    """
    Base class for partial-update requests.

    Only the fields a caller actually supplied are part of the update, so an
    omitted field and an explicit null stay distinguishable.
    """

    def _supplied(self, by_alias: bool) -> Dict[str, Any]:
        # Explicit nulls survive at the top level only; nested shapes omit absent optionals.
        dumped = self.model_dump(mode="json", by_alias=by_alias, exclude_none=True)
        supplied = {}
        for name, field in type(self).model_fields.items():
            if name in self.model_fields_set:
                key = (field.serialization_alias or field.alias or name) if by_alias else name
                supplied[key] = dumped.get(key)
        return supplied

    def changes(self) -> Dict[str, Any]:
        """Return the supplied fields keyed by their Python attribute name."""
        return self._supplied(by_alias=False)

    def is_empty(self) -> bool:
        return not self.model_fields_set

    def to_dict(self) -> Dict[str, Any]:
        return self._supplied(by_alias=True)
