"""UTXO input identifiers.

An input id is the referenced transaction id followed by the output index as
a little-endian u16. It is derived on demand and defined for any index the
record can hold, in range or not.
"""
from __future__ import annotations

import re
import struct
from typing import Iterable

from .errors import InvalidHexEncoding
from .protocol import UTXO_INPUT_ID_FMT, UTXO_INPUT_ID_LENGTH

_HEX_INPUT_ID = re.compile(r"[0-9a-fA-F]{%d}" % (UTXO_INPUT_ID_LENGTH * 2))


def derive_identifier(record) -> bytes:
    """Return the 34-byte input id of a record."""
    return struct.pack(UTXO_INPUT_ID_FMT, record.transaction_id, record.transaction_output_index)


def identifier_to_hex(input_id: bytes) -> str:
    return bytes(input_id).hex()


def identifiers_to_hex(input_ids: Iterable[bytes]) -> list[str]:
    return [identifier_to_hex(i) for i in input_ids]


def identifier_from_hex(text: str) -> bytes:
    """Parse a 68-character hex input id, as used by lookup callers."""
    if not isinstance(text, str) or not _HEX_INPUT_ID.fullmatch(text):
        raise InvalidHexEncoding(
            f"input id must be {UTXO_INPUT_ID_LENGTH * 2} hex characters, got {text!r}"
        )
    return bytes.fromhex(text)
