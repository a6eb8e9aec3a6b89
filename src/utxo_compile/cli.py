"""UTXO input index compiler."""
from __future__ import annotations

from pathlib import Path

import click

from utxo_core.modes import DeSeriMode
from utxo_compile.index import INDEX_FILE, compile_input_index


@click.command()
@click.argument("src", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("out", type=click.Path(file_okay=False, path_type=Path))
@click.option("--no-validate", is_flag=True, help="Skip length, type and index checks for binary input")
def main(src: Path, out: Path, no_validate: bool) -> None:
    """Compile a stream of UTXO inputs into a Parquet index."""
    mode = DeSeriMode.NONE if no_validate else DeSeriMode.STRICT
    try:
        df = compile_input_index(src, out, mode)
    except Exception as e:
        # Fail closed with a single-line reason.
        msg = str(e)
        click.echo(msg if msg.startswith("FATAL:") else f"FATAL: {msg}")
        raise SystemExit(1)

    if df.empty:
        click.echo(f"PASS: No inputs in {src}")
        return
    click.echo(f"PASS: Index generated at {out / INDEX_FILE}")
    click.echo(f"  Inputs: {len(df)}")
    click.echo(f"  Transactions: {df['transaction_id'].nunique()}")


if __name__ == "__main__":
    main()
