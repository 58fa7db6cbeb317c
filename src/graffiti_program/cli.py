"""Graffiti Wall - command line client for a file-backed wall."""
from __future__ import annotations

import json
import sys
from contextlib import redirect_stdout
from pathlib import Path

import click

from graffiti_core.buffer import FileBuffer
from graffiti_core.const import CANONICAL_JSON_KW
from graffiti_core.errors import GraffitiError
from graffiti_core.protocol import MAX_ACCOUNT_SIZE, MAX_WALL_SIZE
from graffiti_core.reader import get_message_at_index, read_header, scan_messages
from graffiti_core.text import pack_field, unpack_field

from .crypto import sign_instruction
from .errors import ProgramError
from .instruction import encode_instruction
from .processor import AccountInfo, process_instruction, signer_account

# Deterministic demo poster key.
# In production, load from the caller's wallet.
DEMO_KEY_SEED = "a665a45920422f9d417e4867efdc4fb8a04a1f3fff1fa07e998e86f7f7a27ae3"


def _emit(obj: dict) -> None:
    click.echo(json.dumps(obj, **CANONICAL_JSON_KW))


def _fail(reason) -> None:
    # Fail closed, with a single-line reason.
    click.echo(f"FATAL: {reason}", err=True)
    raise SystemExit(1)


def record_to_dict(index: int, record) -> dict:
    return {
        "position": index,
        "timestamp": record.timestamp,
        "name": unpack_field(record.name),
        "message": unpack_field(record.message),
    }


wall_option = click.option(
    "--wall",
    "wall_path",
    envvar="GRAFFITI_WALL",
    default="wall.bin",
    show_default=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="File holding the wall account.",
)


@click.group()
def main():
    pass


@main.command("init")
@wall_option
def init_cmd(wall_path: Path):
    """Create an empty wall account."""
    if wall_path.exists():
        _fail(f"{wall_path} already exists")
    with FileBuffer(wall_path):
        pass
    _emit({"status": "PASS", "path": str(wall_path), "size": 0})


@main.command("post")
@wall_option
@click.argument("name")
@click.argument("message")
@click.option("--key-seed", envvar="GRAFFITI_KEY_SEED", default=DEMO_KEY_SEED, help="Hex Ed25519 seed of the poster.")
@click.option("--max-wall-size", default=MAX_WALL_SIZE, show_default=True, type=int, help="Wall ceiling, fixed by the first post.")
@click.option("--max-account-size", default=MAX_ACCOUNT_SIZE, show_default=True, type=int, help="Host account limit.")
def post_cmd(wall_path: Path, name: str, message: str, key_seed: str, max_wall_size: int, max_account_size: int):
    """Append NAME and MESSAGE to the wall."""
    try:
        seed = bytes.fromhex(key_seed)
    except ValueError as e:
        _fail(f"invalid key seed: {e}")

    data = encode_instruction(pack_field(name), pack_field(message))
    try:
        pub, sig = sign_instruction(seed, data)
    except ValueError as e:
        _fail(f"invalid key seed: {e}")

    buffer = FileBuffer(wall_path, max_size=max_account_size)
    accounts = [
        signer_account(pub, data, sig),
        AccountInfo(key=b"wall", is_signer=False, is_writable=True, buffer=buffer),
    ]
    try:
        # Program log lines go to stderr, results to stdout.
        with redirect_stdout(sys.stderr):
            position = process_instruction(accounts, data, max_wall_size=max_wall_size)
    except ProgramError as e:
        _emit({"status": "FAIL", "error": e.to_dict()})
        raise SystemExit(1)
    buffer.commit()
    _emit({"status": "PASS", "position": position, "poster": pub.hex()})


@main.command("show")
@wall_option
@click.argument("index", type=int)
def show_cmd(wall_path: Path, index: int):
    """Print the message at INDEX."""
    data = FileBuffer(wall_path).data
    try:
        record = get_message_at_index(data, index)
    except GraffitiError as e:
        _emit({"status": "FAIL", "error": e.to_dict()})
        raise SystemExit(1)
    _emit(record_to_dict(index, record))


@main.command("list")
@wall_option
def list_cmd(wall_path: Path):
    """Print the header and every message."""
    data = FileBuffer(wall_path).data
    if not data:
        _emit({"message_count": 0, "messages": []})
        return
    try:
        header = read_header(data)
    except GraffitiError as e:
        _fail(e)
    messages = [record_to_dict(i, r) for i, r in scan_messages(data)]
    _emit({"message_count": header.message_count, "max_messages": header.max_messages, "messages": messages})


if __name__ == "__main__":
    main()
