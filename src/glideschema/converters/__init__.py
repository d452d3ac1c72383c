"""
Converters rendering record schemas for downstream consumers.

Each converter turns a RecordSchema into one target representation, with a
unified interface through the SchemaConverter base class.
"""

from ..exceptions import UnsupportedConverterError
from .avro import AvroConverter
from .base import SchemaConverter
from .pandas_converter import PandasConverter
from .sqlalchemy_converter import SqlAlchemyConverter

__all__ = [
    "SchemaConverter",
    "AvroConverter",
    "PandasConverter",
    "SqlAlchemyConverter",
    "create_converter",
]

_CONVERTERS: dict[str, type[SchemaConverter]] = {
    AvroConverter.name: AvroConverter,
    PandasConverter.name: PandasConverter,
    SqlAlchemyConverter.name: SqlAlchemyConverter,
}


def create_converter(name: str) -> SchemaConverter:
    """
    Create the converter for a target representation.

    Args:
        name: One of "avro", "pandas" or "sqlalchemy" (case-insensitive)

    Returns:
        An instance of the matching converter class

    Raises:
        UnsupportedConverterError: If no converter has that name
    """
    try:
        converter_cls = _CONVERTERS[name.lower()]
    except KeyError:
        raise UnsupportedConverterError(
            f"No converter named '{name}'. Available: {', '.join(sorted(_CONVERTERS))}"
        )
    return converter_cls()
