import json
from pathlib import Path
import click
from utxo_core.json_codec import CANONICAL_JSON_KW
from utxo_core.modes import DeSeriMode
from .const import ERRORS
from .logic import verify_json_inputs, verify_stream

def _emit(result: dict) -> None:
    click.echo(json.dumps(result, **CANONICAL_JSON_KW))
    if result["status"] != "PASS":
        raise SystemExit(1)

@click.group()
def main():
    pass

@main.command("stream")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--no-validate", is_flag=True, help="Skip length, type and index checks")
def stream_cmd(path: Path, no_validate: bool):
    mode = DeSeriMode.NONE if no_validate else DeSeriMode.STRICT
    _emit(verify_stream(path.read_bytes(), mode))

@main.command("json")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def json_cmd(path: Path):
    try:
        items = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        items = None
        detail = str(e)
    else:
        detail = f"expected a JSON array, got {type(items).__name__}"
    if not isinstance(items, list):
        errors = [{"code":"E_MALFORMED_JSON","message":ERRORS["E_MALFORMED_JSON"],"offset":0,"detail":detail}]
        _emit({"status":"FAIL","error_count":1,"errors":errors,"record_count":0,"input_ids":[]})
    _emit(verify_json_inputs(items))

if __name__ == "__main__":
    main()
