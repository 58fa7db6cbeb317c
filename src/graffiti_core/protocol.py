"""Graffiti Wall protocol constants.

Single source of truth for the on-account layout.
Keep this file stable. The program and every reader must remain synchronized.
"""
import struct

# Header: [MessageCount(4) | MaxMessages(4)] = 8 bytes
HEADER_FMT = "<II"
HEADER_SIZE = struct.calcsize(HEADER_FMT)

# Record: [Timestamp(8) | Name(64) | Message(64)] = 136 bytes
FIELD_SIZE = 64
RECORD_FMT = f"<q{FIELD_SIZE}s{FIELD_SIZE}s"
RECORD_SIZE = struct.calcsize(RECORD_FMT)

# Append request: [Name(64) | Message(64)] = 128 bytes
INSTRUCTION_FMT = f"<{FIELD_SIZE}s{FIELD_SIZE}s"
INSTRUCTION_SIZE = struct.calcsize(INSTRUCTION_FMT)

# Default wall ceiling, ~9MB
MAX_WALL_SIZE = 9_000_000

# Host account ceiling
MAX_ACCOUNT_SIZE = 10 * 1024 * 1024  # 10 MiB

U32_MAX = 0xFFFFFFFF
