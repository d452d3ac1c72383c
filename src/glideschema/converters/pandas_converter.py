"""
pandas dtypes for record schemas.
"""

import pandas as pd

from ..exceptions import DuplicateFieldError
from ..models import FieldKind, RecordSchema, SchemaField
from .base import SchemaConverter

# (nullable dtype, non-nullable dtype)
_DTYPES: dict[FieldKind, tuple[str, str]] = {
    FieldKind.DECIMAL: ("object", "object"),
    FieldKind.INTEGER: ("Int64", "int64"),
    FieldKind.BOOLEAN: ("boolean", "bool"),
    FieldKind.DATE: ("object", "object"),
    FieldKind.DATETIME: ("datetime64[ns]", "datetime64[ns]"),
    FieldKind.TIME: ("object", "object"),
    FieldKind.STRING: ("string", "string"),
    FieldKind.NULL: ("object", "object"),
}


class PandasConverter(SchemaConverter):
    """Maps a schema to pandas dtypes, using extension dtypes for nullable fields."""

    name = "pandas"

    def convert(self, schema: RecordSchema) -> dict[str, str]:
        """
        Get the pandas dtype for each field.

        Args:
            schema: Schema to convert

        Returns:
            Dict of field name to dtype string, in field order

        Raises:
            DuplicateFieldError: If two fields share a name
        """
        dtypes: dict[str, str] = {}
        for name, dtype in self.convert_fields(schema):
            if name in dtypes:
                raise DuplicateFieldError(
                    f"Field '{name}' appears more than once in schema '{schema.name}'; "
                    "pandas columns need unique names"
                )
            dtypes[name] = dtype
        return dtypes

    def convert_field(self, schema_field: SchemaField) -> tuple[str, str]:
        nullable_dtype, dtype = _DTYPES[schema_field.type.kind]
        return schema_field.name, nullable_dtype if schema_field.nullable else dtype

    def empty_frame(self, schema: RecordSchema) -> pd.DataFrame:
        """
        Create a zero-row DataFrame typed after the schema.

        Args:
            schema: Schema to convert

        Returns:
            pandas DataFrame with one typed column per field

        Raises:
            DuplicateFieldError: If two fields share a name
        """
        dtypes = self.convert(schema)
        return pd.DataFrame({name: pd.Series(dtype=dtype) for name, dtype in dtypes.items()})
