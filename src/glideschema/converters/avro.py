"""
Avro-style JSON record definitions.
"""

from typing import Any

from ..models import TIME_PRECISION, FieldKind, FieldType, RecordSchema, SchemaField
from .base import SchemaConverter

_AVRO_TYPES: dict[FieldKind, Any] = {
    FieldKind.INTEGER: "int",
    FieldKind.BOOLEAN: "boolean",
    FieldKind.STRING: "string",
    FieldKind.NULL: "null",
    FieldKind.DATE: {"type": "int", "logicalType": "date"},
    FieldKind.DATETIME: {"type": "string", "logicalType": "datetime"},
    FieldKind.TIME: {"type": "long", "logicalType": f"time-{TIME_PRECISION}"},
}


class AvroConverter(SchemaConverter):
    """Renders a schema as an Avro record; nullable fields become unions with "null"."""

    name = "avro"

    def convert(self, schema: RecordSchema) -> dict[str, Any]:
        return {"type": "record", "name": schema.name, "fields": self.convert_fields(schema)}

    def convert_field(self, schema_field: SchemaField) -> dict[str, Any]:
        avro_type = self.convert_type(schema_field.type)
        if schema_field.nullable:
            avro_type = [avro_type, "null"]
        return {"name": schema_field.name, "type": avro_type}

    def convert_type(self, field_type: FieldType) -> Any:
        if field_type.kind is FieldKind.DECIMAL:
            return {
                "type": "bytes",
                "logicalType": "decimal",
                "precision": field_type.precision,
                "scale": field_type.scale,
            }
        # Logical type dicts are shared, hand out copies
        avro_type = _AVRO_TYPES[field_type.kind]
        return dict(avro_type) if isinstance(avro_type, dict) else avro_type
