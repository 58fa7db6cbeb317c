"""Graffiti Wall - export a wall to parquet and query the export."""
from __future__ import annotations

import json
from pathlib import Path

import click

from graffiti_core.buffer import FileBuffer
from graffiti_core.const import CANONICAL_JSON_KW
from graffiti_core.errors import GraffitiError

from .parquet import export_messages
from .query import messages_by_name


@click.group()
def main():
    pass


@main.command("messages")
@click.argument("wall", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("out", type=click.Path(file_okay=False, path_type=Path))
def messages_cmd(wall: Path, out: Path):
    """Write OUT/messages.parquet from WALL."""
    try:
        target = export_messages(FileBuffer(wall).data, out)
    except GraffitiError as e:
        click.echo(f"FATAL: {e}", err=True)
        raise SystemExit(1)
    if target is None:
        click.echo("Wall is empty, nothing exported.")
        return
    click.echo(f"PASS: Export written to {target}")


@main.command("find")
@click.argument("parquet", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("name")
def find_cmd(parquet: Path, name: str):
    """Print every message posted under NAME."""
    df = messages_by_name(parquet, name)
    for row in df.to_dict(orient="records"):
        row = {k: (int(v) if k in ("position", "timestamp") else v) for k, v in row.items()}
        click.echo(json.dumps(row, **CANONICAL_JSON_KW))


if __name__ == "__main__":
    main()
