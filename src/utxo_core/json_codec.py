"""JSON form of UTXO inputs.

    {"type": 0, "transactionId": "<64 hex>", "transactionOutputIndex": 0..126}

Serializing never validates. Deserializing always applies the output index
bounds, whatever mode the caller uses for the binary path.
"""
from __future__ import annotations

import json
import re
from typing import Any

from .codec import index_bounds_check
from .errors import InvalidHexEncoding, MalformedJSON
from .protocol import (
    INPUT_UTXO,
    JSON_TRANSACTION_ID,
    JSON_TRANSACTION_OUTPUT_INDEX,
    JSON_TYPE,
    TRANSACTION_ID_LENGTH,
)
from .utxo_input import UTXOInput

CANONICAL_JSON_KW = {"sort_keys": True, "separators": (",", ":"), "ensure_ascii": False}

_HEX_TX_ID = re.compile(r"[0-9a-fA-F]{%d}" % (TRANSACTION_ID_LENGTH * 2))


def to_json_obj(record: UTXOInput) -> dict:
    return {
        JSON_TYPE: INPUT_UTXO,
        JSON_TRANSACTION_ID: record.transaction_id.hex(),
        JSON_TRANSACTION_OUTPUT_INDEX: int(record.transaction_output_index),
    }


def _field(obj: dict, key: str, typ: type) -> Any:
    if key not in obj:
        raise MalformedJSON(f"UTXO input JSON is missing {key!r}")
    value = obj[key]
    # bool is an int subclass but not a JSON number
    if isinstance(value, bool) or not isinstance(value, typ):
        raise MalformedJSON(
            f"UTXO input JSON field {key!r} must be {typ.__name__}, got {type(value).__name__}"
        )
    return value


def from_json_obj(obj: Any) -> UTXOInput:
    if not isinstance(obj, dict):
        raise MalformedJSON(f"UTXO input JSON must be an object, got {type(obj).__name__}")

    _field(obj, JSON_TYPE, int)
    tx_hex = _field(obj, JSON_TRANSACTION_ID, str)
    index = _field(obj, JSON_TRANSACTION_OUTPUT_INDEX, int)

    if not _HEX_TX_ID.fullmatch(tx_hex):
        raise InvalidHexEncoding(
            f"unable to decode transaction ID from JSON for UTXO input: "
            f"expected {TRANSACTION_ID_LENGTH * 2} hex characters, got {len(tx_hex)}"
        )

    err = index_bounds_check(index)
    if err is not None:
        raise err

    return UTXOInput(bytes.fromhex(tx_hex), index)


def dumps(record: UTXOInput) -> str:
    return json.dumps(to_json_obj(record), **CANONICAL_JSON_KW)


def loads(text: str | bytes) -> UTXOInput:
    try:
        obj = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedJSON(f"UTXO input JSON invalid: {e}") from e
    return from_json_obj(obj)
