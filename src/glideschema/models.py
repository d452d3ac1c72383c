"""
Data models for column descriptors and record schemas.
"""

import json
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .exceptions import FieldNotFoundError

TIME_PRECISION = "micros"


@dataclass(frozen=True)
class ColumnDescriptor:
    """A column name and its source type name, as reported by the table metadata."""

    field_name: str | None
    type_name: str | None

    @classmethod
    def from_record(
        cls,
        record: Mapping[str, Any],
        name_key: str = "element",
        type_key: str = "internal_type",
    ) -> "ColumnDescriptor":
        """
        Build a descriptor from a dictionary metadata record.

        Args:
            record: Mapping holding one column's metadata
            name_key: Key of the column name in the record
            type_key: Key of the source type name in the record

        Returns:
            ColumnDescriptor with missing keys left as None
        """
        return cls(field_name=record.get(name_key), type_name=record.get(type_key))


class FieldKind(Enum):
    """Semantic kind of a schema field."""

    DECIMAL = "decimal"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    DATE = "date"
    DATETIME = "datetime"
    TIME = "time"
    STRING = "string"
    NULL = "null"


@dataclass(frozen=True)
class FieldType:
    """Type of a schema field. Precision and scale are only set for decimals."""

    kind: FieldKind
    precision: int | None = None
    scale: int | None = None

    @classmethod
    def decimal(cls, precision: int, scale: int) -> "FieldType":
        return cls(FieldKind.DECIMAL, precision=precision, scale=scale)

    @property
    def is_null(self) -> bool:
        return self.kind is FieldKind.NULL


INTEGER = FieldType(FieldKind.INTEGER)
BOOLEAN = FieldType(FieldKind.BOOLEAN)
DATE = FieldType(FieldKind.DATE)
DATETIME = FieldType(FieldKind.DATETIME)
TIME = FieldType(FieldKind.TIME)
STRING = FieldType(FieldKind.STRING)
NULL = FieldType(FieldKind.NULL)


@dataclass(frozen=True)
class SchemaField:
    """A named, typed field of a record schema."""

    name: str
    type: FieldType
    nullable: bool = True


@dataclass(frozen=True)
class RecordSchema:
    """A named, ordered collection of typed fields."""

    name: str
    fields: tuple[SchemaField, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Stored as a tuple whatever sequence was passed in
        object.__setattr__(self, "fields", tuple(self.fields))

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self) -> Iterator[SchemaField]:
        return iter(self.fields)

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]

    def get_field(self, name: str) -> SchemaField:
        """
        Get a field by name.

        Args:
            name: Name of the field

        Returns:
            The first SchemaField with that name

        Raises:
            FieldNotFoundError: If no field has that name
        """
        for schema_field in self.fields:
            if schema_field.name == name:
                return schema_field
        raise FieldNotFoundError(f"Field '{name}' not found in schema '{self.name}'")

    def to_dict(self) -> dict[str, Any]:
        """Render the schema as an Avro-style record definition."""
        from .converters.avro import AvroConverter

        return AvroConverter().convert(self)

    def to_json(self, **kwargs) -> str:
        return json.dumps(self.to_dict(), **kwargs)
