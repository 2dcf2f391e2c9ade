"""
Property-bag parsing for the fixed-width codec.

The host hands the codec a flat mapping of table properties. Two of them matter:

* ``field.lengths`` – comma-separated positive integers, one width per column.
* ``columns`` – comma-separated column names, same cardinality as the widths.

:func parse_field_lengths: Turn the ``field.lengths`` string into a list of widths.
:func parse_column_names: Turn the ``columns`` string into a list of names.
:func parse_properties: Validate the whole bag and return ``(widths, names)``.
"""
from __future__ import annotations
from typing import Any, List, Mapping, Tuple

from ..errors import ConfigError
from .jsonschema_validator import WIDTH_TOKEN, PropertiesValidator

FIELD_LENGTHS_KEY = "field.lengths"
COLUMNS_KEY = "columns"

_PROPERTIES_VALIDATOR = PropertiesValidator()


def _to_widths(tokens: List[str]) -> List[int]:
    widths = []
    for position, token in enumerate(tokens, start=1):
        width = int(token)
        if width <= 0:
            raise ConfigError(f"Field length #{position} must be positive, got {width}")
        widths.append(width)
    return widths


def parse_field_lengths(lengths: str | None) -> List[int]:
    """
    Parse a ``field.lengths`` value into a list of widths.

    Each comma-separated entry is trimmed and read as a decimal integer.

    :param lengths: Raw property value, e.g. ``"5,10,3"``.
    :returns: Widths in declaration order.
    :rtype: list[int]
    :raises ConfigError: If the value is missing or empty, or an entry is not a positive integer.
    """
    if lengths is None or not lengths.strip():
        raise ConfigError(f"This codec requires the '{FIELD_LENGTHS_KEY}' property")
    tokens = [token.strip() for token in lengths.split(",")]
    for position, token in enumerate(tokens, start=1):
        if not WIDTH_TOKEN.fullmatch(token):
            raise ConfigError(f"Field length #{position} is not an integer: '{token}'")
    return _to_widths(tokens)


def parse_column_names(columns: str | None) -> List[str]:
    """
    Parse a ``columns`` value into a list of names. Names are kept verbatim.

    :param columns: Raw property value, e.g. ``"id,name,code"``.
    :returns: Column names in declaration order.
    :rtype: list[str]
    :raises ConfigError: If the value is missing.
    """
    if columns is None:
        raise ConfigError(f"This codec requires the '{COLUMNS_KEY}' property")
    return columns.split(",")


def parse_properties(props: Mapping[str, Any]) -> Tuple[List[int], List[str]]:
    """
    Validate a host property bag and extract widths and column names.

    Unrelated keys are ignored.

    :param props: Flat property mapping.
    :returns: ``(widths, column_names)``
    :raises ConfigError: On any missing or malformed property, or mismatched counts.
    """
    lengths = props.get(FIELD_LENGTHS_KEY)
    if lengths is None or (isinstance(lengths, str) and not lengths.strip()):
        raise ConfigError(f"This codec requires the '{FIELD_LENGTHS_KEY}' property")
    error = _PROPERTIES_VALIDATOR.validate_properties(props)
    if error is not None:
        raise ConfigError(f"Invalid codec properties: {error.message}") from error
    # token shape was checked by the width-list format
    widths = _to_widths([token.strip() for token in lengths.split(",")])
    names = parse_column_names(props.get(COLUMNS_KEY))
    if len(names) != len(widths):
        raise ConfigError(
            f"'{COLUMNS_KEY}' lists {len(names)} names but '{FIELD_LENGTHS_KEY}' declares {len(widths)} widths"
        )
    return widths, names
