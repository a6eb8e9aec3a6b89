from __future__ import annotations

from warnings import warn

from utxo_core.codec import decode
from utxo_core.errors import CodecError
from utxo_core.json_codec import from_json_obj
from utxo_core.modes import DeSeriMode, has_mode
from utxo_core.protocol import DEFAULT_MAX_STREAM_BYTES, UTXO_INPUT_SIZE
from .const import ERRORS


def _error(err: CodecError, offset: int) -> dict:
    return {"code": err.code, "message": ERRORS[err.code], "offset": offset, "detail": err.reason}

def _result(errors: list, input_ids: list) -> dict:
    return {
        "status": "FAIL" if errors else "PASS",
        "error_count": len(errors),
        "errors": errors,
        "record_count": len(input_ids),
        "input_ids": input_ids,
    }

def verify_stream(data: bytes, mode: DeSeriMode = DeSeriMode.STRICT,
                  max_bytes: int = DEFAULT_MAX_STREAM_BYTES) -> dict:
    """Verify a buffer of back-to-back UTXO inputs.

    Each bad record is reported with its offset and the walk resumes at the
    next record boundary. A partial record at the tail ends the walk: with
    validation it is an E_TRUNCATED_INPUT error, without it only a warning.
    """
    errors: list[dict] = []
    input_ids: list[str] = []

    if len(data) > max_bytes:
        errors.append({"code":"E_STREAM_TOO_LARGE","message":ERRORS["E_STREAM_TOO_LARGE"],
                       "offset":0,"detail":f"{len(data)} bytes exceeds limit {max_bytes}"})
        return _result(errors, input_ids)

    view = memoryview(data)
    offset = 0
    while offset < len(view):
        if len(view) - offset < UTXO_INPUT_SIZE and not has_mode(mode, DeSeriMode.PERFORM_VALIDATION):
            warn(f"Trailing partial UTXO input at offset {offset} ({len(view) - offset} bytes)")
            break
        try:
            record, consumed = decode(view[offset:], mode)
        except CodecError as e:
            errors.append(_error(e, offset))
            offset += UTXO_INPUT_SIZE
            continue
        input_ids.append(record.id_hex())
        offset += consumed

    return _result(errors, input_ids)

def verify_json_inputs(items: list) -> dict:
    """Verify a list of UTXO input JSON objects; offsets are list positions."""
    errors: list[dict] = []
    input_ids: list[str] = []
    for i, obj in enumerate(items):
        try:
            record = from_json_obj(obj)
        except CodecError as e:
            errors.append(_error(e, i))
            continue
        input_ids.append(record.id_hex())
    return _result(errors, input_ids)
