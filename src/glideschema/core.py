"""
Schema construction from source column descriptors.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from .config import SchemaConfig
from .models import ColumnDescriptor, RecordSchema, SchemaField
from .type_mapping import resolve_field_type

logger = logging.getLogger(__name__)


def construct_schema(
    table_name: str,
    columns: Iterable[ColumnDescriptor],
    config: SchemaConfig | None = None,
) -> RecordSchema:
    """
    Build a record schema for a table from its column descriptors.

    Columns without a name are dropped. Every other column becomes a nullable
    field, unless its type resolves to the null marker type.

    Args:
        table_name: Name given to the record schema
        columns: Column descriptors in table order
        config: Settings for parameterised types (None for defaults)

    Returns:
        RecordSchema with fields in the order of the retained columns
    """
    fields = [f for f in (_to_field(column, config) for column in columns) if f is not None]
    return RecordSchema(name=table_name, fields=tuple(fields))


def _to_field(column: ColumnDescriptor, config: SchemaConfig | None) -> SchemaField | None:
    name = column.field_name
    if not name:
        logger.debug("Skipping column with no name (type %r)", column.type_name)
        return None

    field_type = resolve_field_type(column.type_name, config)
    if field_type is None:
        return None

    return SchemaField(name=name, type=field_type, nullable=not field_type.is_null)


def columns_from_records(
    records: Iterable[Mapping[str, Any]],
    name_key: str = "element",
    type_key: str = "internal_type",
) -> list[ColumnDescriptor]:
    """
    Build column descriptors from dictionary metadata records.

    Args:
        records: One mapping per column, in table order
        name_key: Key of the column name in each record
        type_key: Key of the source type name in each record

    Returns:
        List of ColumnDescriptor, one per record
    """
    return [ColumnDescriptor.from_record(r, name_key=name_key, type_key=type_key) for r in records]
