"""Graffiti Wall append engine.

One call is one logical transition:

1. read (or synthesize) the header
2. reject a full wall before touching anything
3. grow the account once, to exactly the size the new record needs
4. write the record
5. bump and rewrite the header (commit point)

The record is written before the header so `message_count` never points at
a record that failed to land.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

from .buffer import WallBuffer
from .errors import BufferTooSmall, WallFull
from .layout import (
    Header,
    Record,
    check_field,
    decode_header,
    encode_header,
    encode_record,
    max_messages_for,
    record_offset,
)
from .protocol import HEADER_SIZE, MAX_WALL_SIZE, RECORD_SIZE

Clock = Callable[[], int]


def current_timestamp() -> int:
    """Wall-clock seconds. Advisory only, ordering is not guaranteed."""
    return int(datetime.now(timezone.utc).timestamp())


class AppendEngine:
    def __init__(self, max_wall_size: int = MAX_WALL_SIZE, clock: Clock | None = None):
        max_messages_for(max_wall_size)
        self.max_wall_size = max_wall_size
        self.clock = clock or current_timestamp

    def load_header(self, buffer: WallBuffer) -> Header:
        if len(buffer) == 0:
            return Header.fresh(self.max_wall_size)
        # Copy out; no view may outlive a decode failure.
        with buffer.view() as data:
            raw = bytes(data[:HEADER_SIZE])
        return decode_header(raw)

    def append(self, buffer: WallBuffer, name: bytes, message: bytes) -> int:
        """Append one record and return its zero-based position."""
        check_field("name", name)
        check_field("message", message)

        header = self.load_header(buffer)
        if header.is_full:
            raise WallFull(f"{header.message_count}/{header.max_messages} messages")

        position = header.message_count
        message_offset = record_offset(position)
        required_size = message_offset + RECORD_SIZE

        if required_size > len(buffer):
            buffer.grow(required_size)

        record = Record(timestamp=self.clock(), name=bytes(name), message=bytes(message))

        record_bytes = bytearray(RECORD_SIZE)
        encode_record(record, record_bytes)
        header.message_count += 1
        header_bytes = bytearray(HEADER_SIZE)
        encode_header(header, header_bytes)

        if len(buffer) < required_size:
            raise BufferTooSmall(f"account holds {len(buffer)} bytes, record needs {required_size}")

        # Record first, header last: the header write is the commit point.
        with buffer.mutable_view() as data:
            data[message_offset:required_size] = record_bytes
            data[:HEADER_SIZE] = header_bytes

        return position


def append(
    buffer: WallBuffer,
    name: bytes,
    message: bytes,
    *,
    clock: Clock | None = None,
    max_wall_size: int = MAX_WALL_SIZE,
) -> int:
    return AppendEngine(max_wall_size=max_wall_size, clock=clock).append(buffer, name, message)
