"""
SQLAlchemy table definitions for record schemas.
"""

import sqlalchemy as sa
from sqlalchemy.types import NullType, TypeEngine

from ..models import FieldKind, FieldType, RecordSchema, SchemaField
from .base import SchemaConverter

_TYPES: dict[FieldKind, type[TypeEngine]] = {
    FieldKind.INTEGER: sa.Integer,
    FieldKind.BOOLEAN: sa.Boolean,
    FieldKind.DATE: sa.Date,
    FieldKind.DATETIME: sa.DateTime,
    FieldKind.TIME: sa.Time,
    FieldKind.STRING: sa.String,
    FieldKind.NULL: NullType,
}


class SqlAlchemyConverter(SchemaConverter):
    """Builds a SQLAlchemy Table from a schema."""

    name = "sqlalchemy"

    def __init__(self, metadata: sa.MetaData | None = None):
        """
        Initialize the converter.

        Args:
            metadata: MetaData the tables are registered on (a fresh one if None)
        """
        self.metadata = metadata if metadata is not None else sa.MetaData()

    def convert(self, schema: RecordSchema) -> sa.Table:
        """
        Build a table named after the schema with one column per field.

        A table already registered under the same name is replaced, so the
        result always reflects the schema passed in.

        Args:
            schema: Schema to convert

        Returns:
            SQLAlchemy Table registered on this converter's metadata
        """
        existing = self.metadata.tables.get(schema.name)
        if existing is not None:
            self.metadata.remove(existing)
        return sa.Table(schema.name, self.metadata, *self.convert_fields(schema))

    def convert_field(self, schema_field: SchemaField) -> sa.Column:
        return sa.Column(schema_field.name, self.convert_type(schema_field.type), nullable=schema_field.nullable)

    def convert_type(self, field_type: FieldType) -> TypeEngine:
        if field_type.kind is FieldKind.DECIMAL:
            return sa.Numeric(precision=field_type.precision, scale=field_type.scale)
        return _TYPES[field_type.kind]()
