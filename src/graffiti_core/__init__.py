"""Graffiti Wall Core - account layout and the append transition."""
from .engine import AppendEngine, append, current_timestamp
from .errors import (
    AccountTooSmall,
    BufferTooSmall,
    GraffitiError,
    InvalidPayload,
    MalformedHeader,
    MalformedRecord,
    OutOfRange,
    WallFull,
)
from .layout import (
    Header,
    Record,
    decode_header,
    decode_record,
    encode_header,
    encode_record,
    record_offset,
)
from .reader import get_message_at_index, iter_messages, read_header, scan_messages

__all__ = [
    "AppendEngine", "append", "current_timestamp",
    "GraffitiError", "MalformedHeader", "MalformedRecord", "WallFull",
    "AccountTooSmall", "BufferTooSmall", "OutOfRange", "InvalidPayload",
    "Header", "Record", "decode_header", "encode_header", "decode_record",
    "encode_record", "record_offset",
    "read_header", "get_message_at_index", "iter_messages", "scan_messages",
]
