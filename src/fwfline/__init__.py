from .codec.fixed_width import FixedWidthLineCodec
from .engine.batch import LineBatch
from .errors import CodecError, ConfigError, FieldCountMismatchError, TruncatedInputError
from .types import Record, Row, RowResult, SchemaEntry

__version__ = "0.1.0"

__all__ = [
    "FixedWidthLineCodec",
    "LineBatch",
    "CodecError",
    "ConfigError",
    "FieldCountMismatchError",
    "TruncatedInputError",
    "Record",
    "Row",
    "RowResult",
    "SchemaEntry",
    "__version__",
]
