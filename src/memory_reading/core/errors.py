"""
Memory Reading Error Taxonomy - Custom exception classes for snapshot parsing.

Decode errors are fatal for a parse call. Integer recovery errors are raised
while reading coordinate attributes and are recovered per node by the region
resolver, so callers of ``parse_snapshot`` never see them.
"""
from typing import Optional


class MemoryReadingError(Exception):
    """Base exception for all memory reading errors."""

    def __init__(self, message: str, path: Optional[str] = None, **context):
        super().__init__(message)
        self.message = message
        self.path = path
        self.context = context

    def __str__(self):
        parts = [self.message]
        if self.path:
            parts.append(f"path={self.path}")
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            parts.append(f"context=({context_str})")
        return " | ".join(parts)


class DecodeError(MemoryReadingError):
    """Raised when the snapshot text cannot be decoded into a node tree."""
    pass


class DecodeSyntaxError(DecodeError):
    """Raised when the input is not well-formed JSON."""

    def __init__(self, message: str, line: Optional[int] = None,
                 column: Optional[int] = None, position: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.line = line
        self.column = column
        self.position = position


class DecodeSchemaError(DecodeError):
    """Raised when a node is missing a required field or a field has the wrong shape."""

    def __init__(self, message: str, field: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field


class IntegerRecoveryError(MemoryReadingError):
    """Raised when a 64-bit numeral cannot be reduced to a 32-bit integer."""
    pass


class InvalidNumeral(IntegerRecoveryError):
    """Raised when the input text is not a decimal integer numeral."""

    def __init__(self, message: str, numeral: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.numeral = numeral


class InvalidEncoding(IntegerRecoveryError):
    """Raised when a hexadecimal encoding step cannot be completed."""

    def __init__(self, message: str, encoding: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.encoding = encoding
