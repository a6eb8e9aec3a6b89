import json
import struct
import warnings

import pytest
from click.testing import CliRunner

from utxo_core import DeSeriMode, UTXOInput, encode
from utxo_core.protocol import UTXO_INPUT_FMT
from utxo_verify.cli import main
from utxo_verify.logic import verify_json_inputs, verify_stream


def rec(i):
    return UTXOInput(bytes([i]) * 32, i)


def test_verify_stream_pass():
    data = b"".join(encode(rec(i)) for i in range(3))
    result = verify_stream(data)
    assert result["status"] == "PASS"
    assert result["record_count"] == 3
    assert result["input_ids"] == [rec(i).id_hex() for i in range(3)]


def test_verify_empty_stream():
    result = verify_stream(b"")
    assert result == {"status": "PASS", "error_count": 0, "errors": [], "record_count": 0, "input_ids": []}


def test_verify_stream_reports_each_bad_record():
    bad_tag = struct.pack(UTXO_INPUT_FMT, 9, b"\x01" * 32, 1)
    bad_index = struct.pack(UTXO_INPUT_FMT, 0, b"\x02" * 32, 127)
    data = encode(rec(0)) + bad_tag + bad_index + encode(rec(3))
    result = verify_stream(data)
    assert result["status"] == "FAIL"
    assert [(e["code"], e["offset"]) for e in result["errors"]] == [
        ("E_TYPE_MISMATCH", 35),
        ("E_INDEX_OUT_OF_RANGE", 70),
    ]
    assert result["record_count"] == 2


def test_verify_stream_without_validation():
    bad_tag = struct.pack(UTXO_INPUT_FMT, 9, b"\x01" * 32, 127)
    result = verify_stream(bad_tag, DeSeriMode.NONE)
    assert result["status"] == "PASS"
    assert result["record_count"] == 1


def test_verify_stream_truncated_tail():
    data = encode(rec(1)) + encode(rec(2))[:10]
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        result = verify_stream(data)
    assert result["status"] == "FAIL"
    assert result["errors"][0]["code"] == "E_TRUNCATED_INPUT"
    assert result["errors"][0]["offset"] == 35
    assert result["record_count"] == 1


def test_verify_stream_size_limit():
    result = verify_stream(encode(rec(1)) * 2, max_bytes=35)
    assert result["errors"][0]["code"] == "E_STREAM_TOO_LARGE"


def test_verify_json_inputs():
    good = {"type": 0, "transactionId": "11" * 32, "transactionOutputIndex": 1}
    items = [good, {"type": 0, "transactionId": "11" * 31, "transactionOutputIndex": 1}, {}]
    result = verify_json_inputs(items)
    assert [e["code"] for e in result["errors"]] == ["E_HEX_ENCODING", "E_MALFORMED_JSON"]
    assert [e["offset"] for e in result["errors"]] == [1, 2]
    assert result["input_ids"] == ["11" * 32 + "0100"]


def test_cli_stream(tmp_path):
    p = tmp_path / "inputs.bin"
    p.write_bytes(encode(rec(1)))
    r = CliRunner().invoke(main, ["stream", str(p)])
    assert r.exit_code == 0, r.output
    assert json.loads(r.output)["status"] == "PASS"


def test_cli_stream_fail_and_no_validate(tmp_path):
    p = tmp_path / "inputs.bin"
    p.write_bytes(encode(UTXOInput(b"\x01" * 32, 127), DeSeriMode.NONE))
    r = CliRunner().invoke(main, ["stream", str(p)])
    assert r.exit_code == 1
    assert json.loads(r.output)["errors"][0]["code"] == "E_INDEX_OUT_OF_RANGE"

    r = CliRunner().invoke(main, ["stream", "--no-validate", str(p)])
    assert r.exit_code == 0, r.output


def test_cli_json(tmp_path):
    p = tmp_path / "inputs.json"
    p.write_text(json.dumps([{"type": 0, "transactionId": "22" * 32, "transactionOutputIndex": 0}]))
    r = CliRunner().invoke(main, ["json", str(p)])
    assert r.exit_code == 0, r.output
    assert json.loads(r.output)["input_ids"] == ["22" * 32 + "0000"]


def test_cli_json_not_array(tmp_path):
    p = tmp_path / "inputs.json"
    p.write_text("{}")
    r = CliRunner().invoke(main, ["json", str(p)])
    assert r.exit_code == 1
    assert json.loads(r.output)["errors"][0]["code"] == "E_MALFORMED_JSON"


def test_verify_stream_truncated_tail_without_validation_warns():
    data = encode(rec(1)) + encode(rec(2))[:10]
    with pytest.warns(UserWarning, match="offset 35"):
        result = verify_stream(data, DeSeriMode.NONE)
    assert result["status"] == "PASS"
    assert result["errors"] == []
    assert result["record_count"] == 1


def test_cli_json_invalid_utf8(tmp_path):
    p = tmp_path / "inputs.json"
    p.write_bytes(b"[\xff]")
    r = CliRunner().invoke(main, ["json", str(p)])
    assert r.exit_code == 1
    assert json.loads(r.output)["errors"][0]["code"] == "E_MALFORMED_JSON"
