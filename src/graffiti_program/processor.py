"""Graffiti Wall program entry point.

Validates the caller and the wall account, decodes the append request, and
hands off to the core engine. Core failures are reported as `ProgramError`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from graffiti_core.buffer import WallBuffer
from graffiti_core.engine import AppendEngine, Clock
from graffiti_core.errors import GraffitiError
from graffiti_core.protocol import MAX_WALL_SIZE

from .crypto import verify_ed25519
from .errors import ProgramError, to_program_error
from .instruction import decode_instruction


@dataclass
class AccountInfo:
    key: bytes
    is_signer: bool
    is_writable: bool
    buffer: WallBuffer | None = None


def signer_account(public_key: bytes, instruction_data: bytes, signature: bytes) -> AccountInfo:
    """Caller account; `is_signer` holds only for a valid Ed25519 signature."""
    try:
        ok = verify_ed25519(public_key, instruction_data, signature)
    except (TypeError, ValueError):
        # Malformed key or signature bytes.
        ok = False
    return AccountInfo(key=public_key, is_signer=ok, is_writable=False)


def process_instruction(
    accounts: Sequence[AccountInfo],
    instruction_data: bytes,
    clock: Clock | None = None,
    max_wall_size: int = MAX_WALL_SIZE,
) -> int:
    print("Graffiti Wall: Processing instruction")

    if len(accounts) < 2:
        raise ProgramError("NotEnoughAccountKeys", f"expected 2 accounts, got {len(accounts)}")
    signer, wall = accounts[0], accounts[1]

    if not signer.is_signer:
        print("Error: Missing required signature")
        raise ProgramError("MissingRequiredSignature")
    if not wall.is_writable or wall.buffer is None:
        print("Error: Account not writable")
        raise ProgramError("InvalidAccountData", "wall account is not writable")

    try:
        name, message = decode_instruction(instruction_data)
    except ProgramError as e:
        print(f"Error: Failed to deserialize instruction data: {e.detail}")
        raise

    engine = AppendEngine(max_wall_size=max_wall_size, clock=clock)
    try:
        position = engine.append(wall.buffer, name, message)
    except GraffitiError as e:
        print(f"Error: {e}")
        raise to_program_error(e) from e

    print(f"Graffiti Wall: Message added successfully at position {position}")
    return position
