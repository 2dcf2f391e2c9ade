"""
FixedWidthLineCodec: converts between one text line and a row of fixed-width fields.

The codec is built once from a list of widths and a matching list of column
names. ``decode`` slices a line into fields, ``encode`` truncates or pads field
values back into a single line. Every field is treated as text; type coercion
is left to the caller.

:class FixedWidthField: Field-level slicing and padding helpers.
:class FixedWidthLineCodec: The codec itself.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, Mapping, Sequence, Tuple

from ..errors import ConfigError, FieldCountMismatchError, TruncatedInputError
from ..schema.properties import parse_properties
from ..schema.row_shape import arrow_schema, polars_schema
from ..types import Record, Row, SchemaEntry

logger = logging.getLogger(__name__)

ENCODING = "utf-8"
PAD_CHAR = " "


def as_text_line(line: str | bytes) -> str:
    """Return ``line`` as text, decoding ``bytes`` as UTF-8 with replacement."""
    if isinstance(line, bytes):
        return line.decode(ENCODING, errors="replace")
    return line


class FixedWidthField:
    @staticmethod
    def extract_field_value(line, start, width):
        """
        Extract the raw value of a field from a line.

        :param str line: The whole input line.
        :param int start: Zero-based offset of the field.
        :param int width: Number of characters in the field.
        :returns: The field value, whitespace untouched.
        :rtype: str
        :raises TruncatedInputError: If the line ends before the field does.
        """
        if start + width > len(line):
            raise TruncatedInputError(start + width, len(line))
        return line[start:start + width]

    @staticmethod
    def fit_field_value(value, width):
        """
        Truncate or right-pad a value to exactly ``width`` characters.

        :param str value: The field value.
        :param int width: Declared field width.
        :returns: The first ``width`` characters of ``value``, or ``value`` padded with spaces.
        :rtype: str
        """
        if len(value) > width:
            return value[:width]
        return value + PAD_CHAR * (width - len(value))

    @staticmethod
    def to_text(value: Any) -> str:
        """
        Render a field value as text for encoding.

        :param value: Any field value; ``None`` renders as an empty string, ``bytes`` are decoded as UTF-8.
        :returns: The value as a string.
        :rtype: str
        """
        if value is None:
            return ""
        if isinstance(value, bytes):
            return value.decode(ENCODING, errors="replace")
        return str(value)


class FixedWidthLineCodec:
    """
    Bidirectional codec for fixed-width text records.

    :param widths: Positive field widths, in column order.
    :param column_names: Column names, one per width.
    :raises ConfigError: If widths are empty or not positive integers, the counts differ,
        or a column name repeats.
    """

    def __init__(self, widths: Sequence[int], column_names: Sequence[str]):
        widths = list(widths)
        column_names = list(column_names)
        if not widths:
            raise ConfigError("At least one field length is required")
        for position, width in enumerate(widths, start=1):
            if isinstance(width, bool) or not isinstance(width, int):
                raise ConfigError(f"Field length #{position} is not an integer: {width!r}")
            if width <= 0:
                raise ConfigError(f"Field length #{position} must be positive, got {width}")
        if len(column_names) != len(widths):
            raise ConfigError(
                f"Got {len(column_names)} column names for {len(widths)} field lengths"
            )
        seen = set()
        for name in column_names:
            if name in seen:
                raise ConfigError(f"Duplicate column name: {name!r}")
            seen.add(name)
        self._schema: Tuple[SchemaEntry, ...] = tuple(
            SchemaEntry(str(name), width) for name, width in zip(column_names, widths)
        )
        self._record_length = sum(widths)
        logger.debug(
            "Fixed-width codec ready: %d fields, record length %d", len(self._schema), self._record_length
        )

    @classmethod
    def from_properties(cls, props: Mapping[str, Any]) -> "FixedWidthLineCodec":
        """Build a codec from a host property bag (``field.lengths`` and ``columns``).

        :param props: Flat property mapping; unrelated keys are ignored.
        :raises ConfigError: If either property is missing or malformed.
        """
        widths, names = parse_properties(props)
        return cls(widths, names)

    # ---------------- Schema accessors -----------
    def schema(self) -> Tuple[SchemaEntry, ...]:
        return self._schema

    @property
    def widths(self) -> Tuple[int, ...]:
        return tuple(entry.width for entry in self._schema)

    @property
    def column_names(self) -> Tuple[str, ...]:
        return tuple(entry.name for entry in self._schema)

    @property
    def record_length(self) -> int:
        return self._record_length

    def polars_schema(self) -> Dict[str, Any]:
        return polars_schema(self._schema)

    def arrow_schema(self):
        return arrow_schema(self._schema)

    # ---------------- Read path -----------
    def decode(self, line: str | bytes) -> Row:
        """
        Slice a line into one value per schema entry.

        Characters past the end of the last field are ignored. ``bytes`` input
        is decoded as UTF-8 first; line terminators are not stripped.

        :param line: One encoded record.
        :returns: A new list of field values in schema order.
        :raises TruncatedInputError: If the line ends before the last field does; no partial row is returned.
        """
        line = as_text_line(line)
        row: Row = []
        cursor = 0
        for entry in self._schema:
            row.append(FixedWidthField.extract_field_value(line, cursor, entry.width))
            cursor += entry.width
        return row

    def decode_record(self, line: str | bytes) -> Record:
        """Decode a line into a dict keyed by column name."""
        return dict(zip(self.column_names, self.decode(line)))

    # ---------------- Write path -----------
    def encode(self, row: Sequence[Any] | Mapping[str, Any]) -> str:
        """
        Join field values into one fixed-width line.

        Values longer than their width are cut to the first ``width`` characters;
        shorter ones are right-padded with spaces. ``None`` encodes as blanks.

        :param row: Values in schema order, or a mapping keyed by column name.
        :returns: A line exactly ``record_length`` characters long.
        :raises FieldCountMismatchError: If the row does not have one value per column.
        """
        values = self._values_in_order(row)
        return "".join(
            FixedWidthField.fit_field_value(FixedWidthField.to_text(value), entry.width)
            for value, entry in zip(values, self._schema)
        )

    def _values_in_order(self, row: Sequence[Any] | Mapping[str, Any]) -> Sequence[Any]:
        expected = len(self._schema)
        if isinstance(row, Mapping):
            missing = [entry.name for entry in self._schema if entry.name not in row]
            if len(row) != expected or missing:
                raise FieldCountMismatchError(expected, len(row), missing)
            return [row[entry.name] for entry in self._schema]
        if isinstance(row, (str, bytes)):
            raise TypeError("encode expects a sequence of field values, not a single string")
        values = list(row)
        if len(values) != expected:
            raise FieldCountMismatchError(expected, len(values))
        return values
