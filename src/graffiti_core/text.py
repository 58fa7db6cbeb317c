"""Client-side text policy for the two opaque 64-byte fields."""
from __future__ import annotations

from .protocol import FIELD_SIZE


def pack_field(text: str) -> bytes:
    """UTF-8 encode, cut to 64 bytes on a character boundary, zero-pad."""
    raw = text.encode("utf-8")
    if len(raw) > FIELD_SIZE:
        raw = raw[:FIELD_SIZE].decode("utf-8", errors="ignore").encode("utf-8")
    return raw.ljust(FIELD_SIZE, b"\x00")


def unpack_field(raw: bytes) -> str:
    return bytes(raw).replace(b"\x00", b"").decode("utf-8", errors="replace")
