"""
Dispatch table from source column type names to field types.
"""

import logging

from .config import SchemaConfig
from .models import BOOLEAN, DATE, DATETIME, INTEGER, STRING, TIME, FieldType

logger = logging.getLogger(__name__)

# Source types stored as text downstream. Anything not in TYPE_TABLE ends up
# here too; the names are listed so the mapping reads as documentation.
STRING_TYPE_NAMES = (
    "reference",
    "currency",
    "sys_class_name",
    "domain_id",
    "domain_path",
    "guid",
    "translated_html",
    "journal",
    "string",
)

TYPE_TABLE: dict[str, FieldType] = {
    "integer": INTEGER,
    "boolean": BOOLEAN,
    "glide_date": DATE,
    "glide_date_time": DATETIME,
    "glide_time": TIME,
    **{name: STRING for name in STRING_TYPE_NAMES},
}


def resolve_field_type(type_name: str | None, config: SchemaConfig | None = None) -> FieldType | None:
    """
    Map a source type name to a field type.

    Matching is case-insensitive. Unknown or missing names resolve to STRING.

    Args:
        type_name: Source column type name, e.g. "glide_date"
        config: Settings for parameterised types (decimal precision and scale)

    Returns:
        The resolved FieldType, or None if the column should carry no field
    """
    key = (type_name or "").lower()

    if key == "decimal":
        config = config or SchemaConfig()
        return FieldType.decimal(config.decimal_precision, config.decimal_scale)

    field_type = TYPE_TABLE.get(key)
    if field_type is None:
        logger.debug("Unrecognised column type %r, using string", type_name)
        return STRING
    return field_type
