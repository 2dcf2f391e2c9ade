from __future__ import annotations
import logging
from typing import Any, Dict, Iterable, Iterator, List

import polars as pl

from ..codec.fixed_width import FixedWidthLineCodec, as_text_line
from ..errors import CodecError, FieldCountMismatchError
from ..types import RowResult

logger = logging.getLogger(__name__)


class LineBatch:
    def __init__(
            self,
            codec: FixedWidthLineCodec,
            chunk_size: int = 50_000,
            strict: bool = False,
    ) -> None:
        """Batch adapter over a :class:`FixedWidthLineCodec`.

        Decodes many in-memory lines at once, either as a stream of
        :class:`RowResult` or as a Polars DataFrame, and encodes a DataFrame
        back into lines.

        :param codec: Codec holding the fixed-width schema.
        :param chunk_size: Number of decoded rows buffered before they are
            turned into a DataFrame chunk.
        :param strict: Re-raise decode errors instead of recording them.
        """
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self.codec = codec
        self.chunk_size = chunk_size
        self.strict = strict
        self.rejected: List[RowResult] = []

    def iter_results(self, lines: Iterable[str | bytes]) -> Iterator[RowResult]:
        """Decode each line and yield its outcome.

        Line numbers are 1-based. A line that fails to decode yields a result
        carrying the error (or raises it when ``strict``).
        """
        for line_number, line in enumerate(lines, start=1):
            text = as_text_line(line)
            try:
                row = self.codec.decode(text)
            except CodecError as exc:
                if self.strict:
                    raise
                logger.debug("Rejected line %d: %s", line_number, exc)
                yield RowResult(line_number=line_number, line=text, row=None, error=exc)
                continue
            yield RowResult(line_number=line_number, line=text, row=row, error=None)

    def to_frame(self, lines: Iterable[str | bytes]) -> pl.DataFrame:
        """Decode lines into a DataFrame with one Utf8 column per schema entry.

        Rejected lines are collected on ``self.rejected`` (reset on each call).
        """
        self.rejected = []
        schema = self.codec.polars_schema()
        chunks: List[pl.DataFrame] = []
        buffer: List[List[str]] = []
        for rr in self.iter_results(lines):
            if rr.error is not None:
                self.rejected.append(rr)
                continue
            buffer.append(rr.row)
            if len(buffer) >= self.chunk_size:
                chunks.append(pl.DataFrame(buffer, schema=schema, orient="row"))
                buffer.clear()
        if buffer:
            chunks.append(pl.DataFrame(buffer, schema=schema, orient="row"))
        if not chunks:
            return pl.DataFrame(schema=schema)
        return pl.concat(chunks, how="vertical")

    def encode_frame(self, df: pl.DataFrame) -> List[str]:
        """Encode every DataFrame row into a fixed-width line.

        Columns are picked in schema order; extra columns are ignored.

        :raises FieldCountMismatchError: If a schema column is missing from ``df``.
        """
        names = list(self.codec.column_names)
        missing = [name for name in names if name not in df.columns]
        if missing:
            raise FieldCountMismatchError(len(names), len(names) - len(missing), missing)
        out: List[str] = []
        for values in df.select(names).iter_rows():
            out.append(self.codec.encode(values))
        return out

    def encode_records(self, records: Iterable[Dict[str, Any]]) -> List[str]:
        """Encode records keyed by column name into fixed-width lines.

        :param records: Mappings holding exactly the schema columns.
        :return: One line per record, in input order.
        :raises FieldCountMismatchError: If a record lacks a column or carries extra keys.
        """
        return [self.codec.encode(record) for record in records]
