from __future__ import annotations

from typing import Iterator
from warnings import warn

from .errors import MalformedRecord, OutOfRange
from .layout import Header, Record, decode_header, decode_record, record_offset
from .protocol import HEADER_SIZE, RECORD_SIZE


def read_header(data) -> Header:
    return decode_header(bytes(data[:HEADER_SIZE]))


def get_message_at_index(data, index: int) -> Record:
    """Decode the committed record at `index`."""
    header = read_header(data)
    if index < 0 or index >= header.message_count:
        raise OutOfRange(f"index {index}, wall holds {header.message_count} messages")

    offset = record_offset(index)
    return decode_record(bytes(data[offset:offset + RECORD_SIZE]))


def iter_messages(data) -> Iterator[tuple[int, Record]]:
    header = read_header(data)
    for index in range(header.message_count):
        yield index, get_message_at_index(data, index)


def scan_messages(data) -> Iterator[tuple[int, Record]]:
    """Like `iter_messages`, but stops with a warning at a truncated tail."""
    header = read_header(data)
    for index in range(header.message_count):
        try:
            record = get_message_at_index(data, index)
        except MalformedRecord:
            warn(f"Truncated record {index} at offset {record_offset(index)}. Stopping scan.")
            return
        yield index, record
