"""Exceptions raised by the fixed-width line codec.

All of them derive from :class:`ValueError` through :class:`CodecError`, so
callers that already guard row handling with ``except ValueError`` keep
working unchanged.
"""
from __future__ import annotations
from typing import Sequence


class CodecError(ValueError):
    """Base class for every codec failure."""


class ConfigError(CodecError):
    """The width / column configuration is missing or malformed."""


class TruncatedInputError(CodecError):
    """A line is shorter than the widths it has to cover.

    :param expected: Total record length declared by the schema.
    :param actual: Length of the offending line.
    """

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Data length shorter than expected: need {expected} characters, got {actual}")


class FieldCountMismatchError(CodecError):
    def __init__(self, expected: int, actual: int, missing: Sequence[str] = ()):
        self.expected = expected
        self.actual = actual
        self.missing = tuple(missing)
        message = f"Field count does not match field lengths: expected {expected}, got {actual}"
        if self.missing:
            message += f"; missing columns: {', '.join(self.missing)}"
        super().__init__(message)
