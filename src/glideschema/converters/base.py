"""
Abstract base class for record schema converters.
"""

from abc import ABC, abstractmethod
from typing import Any

from ..models import RecordSchema, SchemaField


class SchemaConverter(ABC):
    """
    Abstract base class for rendering a RecordSchema for a downstream consumer.

    All converter implementations must inherit from this class and implement
    convert().
    """

    name: str = ""

    @abstractmethod
    def convert(self, schema: RecordSchema) -> Any:
        """
        Render a record schema in the converter's target form.

        Args:
            schema: Schema to convert

        Returns:
            The target representation of the schema
        """
        pass

    def convert_fields(self, schema: RecordSchema) -> list[Any]:
        """Render each field of a schema, in field order."""
        return [self.convert_field(f) for f in schema.fields]

    @abstractmethod
    def convert_field(self, schema_field: SchemaField) -> Any:
        """
        Render a single field.

        Args:
            schema_field: Field to convert

        Returns:
            The target representation of the field
        """
        pass
