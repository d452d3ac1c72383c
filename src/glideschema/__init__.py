"""
glideschema - record schemas from ServiceNow column metadata

This library maps the column descriptors of a ServiceNow table (field name plus
glide type name) to a typed record schema, and renders that schema for
downstream pipelines as Avro JSON, pandas dtypes or a SQLAlchemy table.
"""

from .config import SchemaConfig, load_config
from .converters import AvroConverter, PandasConverter, SchemaConverter, SqlAlchemyConverter, create_converter
from .core import columns_from_records, construct_schema
from .exceptions import (
    ConfigurationError,
    DuplicateFieldError,
    FieldNotFoundError,
    GlideSchemaError,
    UnsupportedConverterError,
)
from .models import ColumnDescriptor, FieldKind, FieldType, RecordSchema, SchemaField
from .type_mapping import resolve_field_type

__version__ = "0.1.0"
__all__ = [
    "construct_schema",
    "columns_from_records",
    "resolve_field_type",
    "SchemaConfig",
    "load_config",
    "ColumnDescriptor",
    "FieldKind",
    "FieldType",
    "SchemaField",
    "RecordSchema",
    "SchemaConverter",
    "AvroConverter",
    "PandasConverter",
    "SqlAlchemyConverter",
    "create_converter",
    "GlideSchemaError",
    "ConfigurationError",
    "DuplicateFieldError",
    "FieldNotFoundError",
    "UnsupportedConverterError",
]
