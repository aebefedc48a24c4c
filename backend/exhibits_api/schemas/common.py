"""Shared value objects and the base model used by both record families.

Invariants:
    - A JSON null where a record, nested object or non-nullable field is
      expected decodes to the zero value instead of failing the whole file
    - Dataset files are decoded in strict mode: a value of the wrong JSON type
      ("5" for an int, true for a number) is a decode error
"""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, model_validator


def _null_to_empty(value: Any) -> Any:
    return "" if value is None else value


# String list element; null decodes to ""
Text = Annotated[str, BeforeValidator(_null_to_empty)]


class DatasetModel(BaseModel):
    """Base for dataset records."""

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def null_means_default(cls, data: Any) -> Any:
        if data is None:
            return {}
        if not isinstance(data, dict):
            return data
        cleaned = dict(data)
        for name, field in cls.model_fields.items():
            if field.default is None:
                continue
            for wire_key in {name, field.alias or name}:
                if wire_key in cleaned and cleaned[wire_key] is None:
                    del cleaned[wire_key]
        return cleaned


class LocalizedString(DatasetModel):
    """Parallel English and Arabic text for the same field."""
    en: str = ""
    ar: str = ""


class Coordinates(DatasetModel):
    latitude: float = 0.0
    longitude: float = 0.0
