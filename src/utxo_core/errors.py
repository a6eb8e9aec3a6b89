"""Typed codec failures.

Every error carries a stable ``code`` so callers can report it without
matching on message text.
"""
from __future__ import annotations


class CodecError(ValueError):
    code = "E_CODEC"

    def __init__(self, message: str, *, offset: int | None = None) -> None:
        self.reason = message
        self.offset = offset
        super().__init__(message)


class TruncatedInput(CodecError):
    code = "E_TRUNCATED_INPUT"


class TypeMismatch(CodecError):
    code = "E_TYPE_MISMATCH"


class SlotIndexOutOfRange(CodecError):
    code = "E_INDEX_OUT_OF_RANGE"


class MalformedJSON(CodecError):
    code = "E_MALFORMED_JSON"


class InvalidHexEncoding(CodecError):
    code = "E_HEX_ENCODING"
