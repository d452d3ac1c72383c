"""
Configuration for schema construction.
"""

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import TypedDict

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_DECIMAL_PRECISION = 38
DEFAULT_DECIMAL_SCALE = 9


class DecimalSettings(TypedDict, total=False):
    precision: int
    scale: int


class ConfigFile(TypedDict, total=False):
    decimal: DecimalSettings


@dataclass(frozen=True)
class SchemaConfig:
    """Settings applied when resolving source types to field types."""

    decimal_precision: int = DEFAULT_DECIMAL_PRECISION
    decimal_scale: int = DEFAULT_DECIMAL_SCALE

    def __post_init__(self):
        for name in ("decimal_precision", "decimal_scale"):
            value = getattr(self, name)
            # bool is an int subclass but never a valid precision or scale
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}")
        if self.decimal_precision < 1:
            raise ConfigurationError(
                f"Decimal precision must be at least 1, got {self.decimal_precision}"
            )
        if self.decimal_scale < 0:
            raise ConfigurationError(f"Decimal scale must not be negative, got {self.decimal_scale}")
        if self.decimal_scale > self.decimal_precision:
            raise ConfigurationError(
                f"Decimal scale {self.decimal_scale} exceeds precision {self.decimal_precision}"
            )


def load_config(path: str | Path) -> SchemaConfig:
    """
    Load schema settings from a TOML file.

    Args:
        path: Path to a TOML file with an optional [decimal] table

    Returns:
        SchemaConfig with missing keys left at their defaults

    Raises:
        ConfigurationError: If the file cannot be read or holds invalid settings
    """
    path = Path(path)
    try:
        with open(path, "rb") as f:
            data: ConfigFile = tomllib.load(f)  # type: ignore
    except FileNotFoundError:
        raise ConfigurationError(f"Config file not found: {path}")
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file: {path}. Error: {e}")
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Cannot parse config file: {path}. Error: {e}")

    decimal = data.get("decimal", {})
    if not isinstance(decimal, dict):
        raise ConfigurationError(f"Expected a [decimal] table in {path}")

    config = SchemaConfig(
        decimal_precision=decimal.get("precision", DEFAULT_DECIMAL_PRECISION),
        decimal_scale=decimal.get("scale", DEFAULT_DECIMAL_SCALE),
    )
    logger.info("Loaded schema config from %s", path)
    return config
