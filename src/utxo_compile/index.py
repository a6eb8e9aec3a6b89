from __future__ import annotations

import json
from pathlib import Path

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from utxo_core.codec import decode
from utxo_core.json_codec import from_json_obj
from utxo_core.modes import DeSeriMode
from utxo_core.protocol import DEFAULT_MAX_STREAM_BYTES
from utxo_core.utxo_input import UTXOInput

INDEX_FILE = "index/inputs.parquet"

INDEX_SCHEMA = pa.schema(
    [
        ("offset", pa.int64()),
        ("transaction_id", pa.string()),
        ("transaction_output_index", pa.int32()),
        ("input_id", pa.string()),
    ]
)


def read_binary_inputs(data: bytes, mode: DeSeriMode) -> list[tuple[int, UTXOInput]]:
    """Decode every record in a stream. Fails closed on the first bad record."""
    view = memoryview(data)
    out: list[tuple[int, UTXOInput]] = []
    offset = 0
    while offset < len(view):
        try:
            record, consumed = decode(view[offset:], mode)
        except ValueError as e:
            raise ValueError(f"FATAL: record at offset {offset}: {e}") from e
        out.append((offset, record))
        offset += consumed
    return out


def read_json_inputs(items: list) -> list[tuple[int, UTXOInput]]:
    if not isinstance(items, list):
        raise ValueError(f"FATAL: expected a JSON array of inputs, got {type(items).__name__}")
    out: list[tuple[int, UTXOInput]] = []
    for i, obj in enumerate(items):
        try:
            out.append((i, from_json_obj(obj)))
        except ValueError as e:
            raise ValueError(f"FATAL: input {i}: {e}") from e
    return out


def compile_input_index(src: Path, out_path: Path, mode: DeSeriMode = DeSeriMode.STRICT) -> pd.DataFrame:
    """Build index/inputs.parquet from a binary stream or a .json array of inputs."""
    src = Path(src)
    size = src.stat().st_size
    if size > DEFAULT_MAX_STREAM_BYTES:
        raise ValueError(f"FATAL: input size {size} exceeds limit {DEFAULT_MAX_STREAM_BYTES}")

    if src.suffix == ".json":
        records = read_json_inputs(json.loads(src.read_text(encoding="utf-8")))
    else:
        records = read_binary_inputs(src.read_bytes(), mode)

    rows: list[dict] = []
    seen: dict[str, int] = {}
    for offset, record in records:
        iid = record.id_hex()
        if iid in seen:
            raise ValueError(f"FATAL: duplicate input {iid} at {offset} (first at {seen[iid]})")
        seen[iid] = offset
        rows.append(
            {
                "offset": int(offset),
                "transaction_id": record.transaction_id.hex(),
                "transaction_output_index": int(record.transaction_output_index),
                "input_id": iid,
            }
        )

    df = pd.DataFrame(rows, columns=INDEX_SCHEMA.names)
    if df.empty:
        return df

    df = df.sort_values("input_id").reset_index(drop=True)
    (Path(out_path) / "index").mkdir(parents=True, exist_ok=True)
    table = pa.Table.from_pandas(df, schema=INDEX_SCHEMA, preserve_index=False)
    pq.write_table(table, Path(out_path) / INDEX_FILE)
    return df
