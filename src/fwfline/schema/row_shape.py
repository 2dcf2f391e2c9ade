"""Row shape descriptions for host type systems.

Every fixed-width field is plain text, so both descriptions map each column to
a string type; the declared widths travel along as Arrow metadata.
"""
from __future__ import annotations
from typing import Dict, Iterable

import polars as pl
import pyarrow as pa

from ..types import SchemaEntry


def polars_schema(entries: Iterable[SchemaEntry]) -> Dict[str, pl.DataType]:
    return {entry.name: pl.Utf8 for entry in entries}


def arrow_schema(entries: Iterable[SchemaEntry]) -> pa.Schema:
    """Build a ``pyarrow`` schema with one ``string`` field per column.

    :param entries: Ordered ``(name, width)`` pairs.
    :return: Schema whose field metadata holds ``width`` and whose schema
        metadata holds the total ``record_length``.
    """
    entries = list(entries)
    fields = [
        pa.field(entry.name, pa.string(), metadata={"width": str(entry.width)})
        for entry in entries
    ]
    record_length = sum(entry.width for entry in entries)
    return pa.schema(fields, metadata={"record_length": str(record_length)})
