"""Graffiti Wall layout codec.

Every offset is a pure function of the record index:

    [Header(8)][Record_0(136)][Record_1(136)]...

There is no framing and no magic; a header or record is valid as soon as
enough bytes are present at its fixed offset.
"""
from __future__ import annotations

import struct
from dataclasses import dataclass

from .errors import BufferTooSmall, InvalidPayload, MalformedHeader, MalformedRecord
from .protocol import (
    FIELD_SIZE,
    HEADER_FMT,
    HEADER_SIZE,
    MAX_WALL_SIZE,
    RECORD_FMT,
    RECORD_SIZE,
    U32_MAX,
)


@dataclass
class Header:
    message_count: int
    max_messages: int

    @classmethod
    def fresh(cls, max_wall_size: int = MAX_WALL_SIZE) -> "Header":
        """Header for a wall that has never been written."""
        return cls(message_count=0, max_messages=max_messages_for(max_wall_size))

    @property
    def is_full(self) -> bool:
        return self.message_count >= self.max_messages


@dataclass(frozen=True)
class Record:
    timestamp: int
    name: bytes
    message: bytes

    def __post_init__(self) -> None:
        check_field("name", self.name)
        check_field("message", self.message)


def check_field(label: str, value: bytes) -> None:
    if not isinstance(value, (bytes, bytearray)) or len(value) != FIELD_SIZE:
        size = len(value) if isinstance(value, (bytes, bytearray)) else type(value).__name__
        raise InvalidPayload(f"{label} is {size}, expected {FIELD_SIZE} bytes")


def max_messages_for(max_wall_size: int) -> int:
    if max_wall_size < HEADER_SIZE:
        raise ValueError(f"max_wall_size {max_wall_size} is smaller than the {HEADER_SIZE}-byte header")
    return min((max_wall_size - HEADER_SIZE) // RECORD_SIZE, U32_MAX)


def record_offset(index: int) -> int:
    """Byte offset of record `index`. Callers validate the index."""
    return HEADER_SIZE + index * RECORD_SIZE


def decode_header(data) -> Header:
    if len(data) < HEADER_SIZE:
        raise MalformedHeader(f"need {HEADER_SIZE} bytes, have {len(data)}")
    message_count, max_messages = struct.unpack_from(HEADER_FMT, data, 0)
    return Header(message_count=message_count, max_messages=max_messages)


def encode_header(header: Header, out) -> None:
    if len(out) < HEADER_SIZE:
        raise BufferTooSmall(f"header needs {HEADER_SIZE} bytes, target has {len(out)}")
    # Packed before the write; the header lands in one assignment or not at all.
    out[:HEADER_SIZE] = struct.pack(HEADER_FMT, header.message_count, header.max_messages)


def decode_record(data) -> Record:
    if len(data) < RECORD_SIZE:
        raise MalformedRecord(f"need {RECORD_SIZE} bytes, have {len(data)}")
    timestamp, name, message = struct.unpack_from(RECORD_FMT, data, 0)
    return Record(timestamp=timestamp, name=name, message=message)


def encode_record(record: Record, out) -> None:
    if len(out) < RECORD_SIZE:
        raise BufferTooSmall(f"record needs {RECORD_SIZE} bytes, target has {len(out)}")
    out[:RECORD_SIZE] = struct.pack(RECORD_FMT, record.timestamp, bytes(record.name), bytes(record.message))
