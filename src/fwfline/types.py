from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, NamedTuple, Optional

Row = List[str]
Record = Dict[str, str]


class SchemaEntry(NamedTuple):
    name: str
    width: int


@dataclass
class RowResult:
    line_number: int
    line: str
    row: Optional[Row]
    error: Optional[Exception]
