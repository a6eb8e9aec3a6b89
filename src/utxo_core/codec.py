"""Binary codec for UTXO inputs.

Layout: [Type(1) | TransactionID(32) | OutputIndex(2, LE)] = 35 bytes.
Validation runs as an ordered list of checks; the first failing check wins.
Trailing bytes after a record are left for the caller.
"""
from __future__ import annotations

from typing import Callable, Optional, Sequence, Tuple

from .errors import CodecError, SlotIndexOutOfRange, TruncatedInput, TypeMismatch
from .modes import DeSeriMode, has_mode
from .protocol import (
    INPUT_UTXO,
    REF_UTXO_INDEX_MAX,
    REF_UTXO_INDEX_MIN,
    SMALL_TYPE_DENOTATION_BYTE_SIZE,
    TRANSACTION_ID_LENGTH,
    UTXO_INPUT_SIZE,
)
from .serializer import Deserializer, Serializer
from .utxo_input import UTXOInput

CheckStep = Tuple[Callable[[], bool], Callable[[], CodecError]]


def run_checks(steps: Sequence[CheckStep]) -> Optional[CodecError]:
    """Return the error of the first failing step, or None."""
    for ok, fail in steps:
        if not ok():
            return fail()
    return None


def index_bounds_check(index: int) -> Optional[SlotIndexOutOfRange]:
    if REF_UTXO_INDEX_MIN <= index <= REF_UTXO_INDEX_MAX:
        return None
    return SlotIndexOutOfRange(
        f"transaction output index {index} outside "
        f"[{REF_UTXO_INDEX_MIN}, {REF_UTXO_INDEX_MAX}]"
    )


def decode(data: bytes, mode: DeSeriMode = DeSeriMode.STRICT) -> tuple[UTXOInput, int]:
    """Decode one UTXO input from the start of ``data``.

    Returns the record and the number of bytes consumed (always 35).
    """
    des = Deserializer(data)
    validate = has_mode(mode, DeSeriMode.PERFORM_VALIDATION)

    if validate:
        des.abort_if(lambda: run_checks([
            (
                lambda: len(des.data) >= UTXO_INPUT_SIZE,
                lambda: TruncatedInput(
                    f"invalid UTXO input bytes: need {UTXO_INPUT_SIZE}, got {len(des.data)}"
                ),
            ),
            (
                lambda: des.data[0] == INPUT_UTXO,
                lambda: TypeMismatch(
                    f"unable to deserialize UTXO input: type {des.data[0]} != {INPUT_UTXO}"
                ),
            ),
        ]))

    des.skip(SMALL_TYPE_DENOTATION_BYTE_SIZE, "UTXO input type")
    tx_id = des.read_bytes(TRANSACTION_ID_LENGTH, "transaction ID in UTXO input")
    index = des.read_u16("transaction output index in UTXO input")

    if validate:
        des.abort_if(lambda: index_bounds_check(index))

    return UTXOInput(tx_id, index), des.done()


def encode(record: UTXOInput, mode: DeSeriMode = DeSeriMode.STRICT) -> bytes:
    """Encode a UTXO input to exactly 35 bytes."""
    ser = Serializer()
    if has_mode(mode, DeSeriMode.PERFORM_VALIDATION):
        ser.abort_if(lambda: index_bounds_check(record.transaction_output_index))
    return (
        ser.write_u8(INPUT_UTXO)
        .write_bytes(record.transaction_id)
        .write_u16(record.transaction_output_index)
        .serialize()
    )
