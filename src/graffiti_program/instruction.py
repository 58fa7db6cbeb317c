from __future__ import annotations

import struct

from graffiti_core.layout import check_field
from graffiti_core.protocol import INSTRUCTION_FMT, INSTRUCTION_SIZE

from .errors import ProgramError


def encode_instruction(name: bytes, message: bytes) -> bytes:
    check_field("name", name)
    check_field("message", message)
    return struct.pack(INSTRUCTION_FMT, bytes(name), bytes(message))


def decode_instruction(data: bytes) -> tuple[bytes, bytes]:
    """Split an append request into its two 64-byte fields.

    Trailing or missing bytes are rejected, not ignored.
    """
    if len(data) != INSTRUCTION_SIZE:
        raise ProgramError(
            "InvalidInstructionData",
            f"expected {INSTRUCTION_SIZE} bytes of instruction data, got {len(data)}",
        )
    name, message = struct.unpack(INSTRUCTION_FMT, data)
    return name, message
