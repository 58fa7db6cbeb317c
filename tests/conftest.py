import struct

import pytest

from graffiti_core.buffer import MemoryBuffer
from graffiti_core.protocol import HEADER_FMT, RECORD_SIZE
from graffiti_core.text import pack_field

FIXED_TS = 1_700_000_000


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_TS


@pytest.fixture
def post():
    """A (name, message) pair of packed 64-byte fields."""
    return pack_field("alice"), pack_field("hi")


def wall_with(message_count: int, max_messages: int, records: int | None = None) -> MemoryBuffer:
    """Account whose header claims `message_count` and holds `records` zeroed records."""
    records = message_count if records is None else records
    data = struct.pack(HEADER_FMT, message_count, max_messages) + bytes(records * RECORD_SIZE)
    return MemoryBuffer(data)


@pytest.fixture
def make_wall():
    return wall_with
