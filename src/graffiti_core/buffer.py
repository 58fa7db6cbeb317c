"""Host-side wall accounts.

The engine only relies on the `WallBuffer` shape: a length, a read-only view,
a writable view, and `grow(new_len)`. Views must be released before `grow`
is requested; a bytearray cannot resize while a view is exported.
"""
from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Protocol

from .errors import AccountTooSmall
from .protocol import MAX_ACCOUNT_SIZE


class WallBuffer(Protocol):
    def __len__(self) -> int: ...

    def view(self) -> memoryview: ...

    def mutable_view(self) -> memoryview: ...

    def grow(self, new_len: int) -> None: ...


class MemoryBuffer:
    """In-memory account backed by a bytearray."""

    def __init__(self, initial: bytes = b"", max_size: int = MAX_ACCOUNT_SIZE):
        if len(initial) > max_size:
            raise AccountTooSmall(f"initial data {len(initial)} exceeds account limit {max_size}")
        self.data = bytearray(initial)
        self.max_size = max_size
        self.grow_calls: list[int] = []

    def __len__(self) -> int:
        return len(self.data)

    def __bytes__(self) -> bytes:
        return bytes(self.data)

    def view(self) -> memoryview:
        return memoryview(self.data).toreadonly()

    def mutable_view(self) -> memoryview:
        return memoryview(self.data)

    def grow(self, new_len: int) -> None:
        self.grow_calls.append(new_len)
        if new_len > self.max_size:
            raise AccountTooSmall(f"requested {new_len} bytes, account limit is {self.max_size}")
        if new_len < len(self.data):
            raise AccountTooSmall(f"cannot shrink account from {len(self.data)} to {new_len} bytes")
        # Zero-fill the new region.
        self.data.extend(bytes(new_len - len(self.data)))


class FileBuffer(MemoryBuffer):
    """Account persisted to a single file.

    The file is read once on open; `commit()` writes the whole account back
    through a temp file and an atomic replace, so a crash never leaves a
    half-written wall on disk. A missing file is an empty account.
    """

    def __init__(self, path: Path, max_size: int = MAX_ACCOUNT_SIZE):
        self.path = Path(path)
        initial = self.path.read_bytes() if self.path.exists() else b""
        super().__init__(initial, max_size=max_size)

    def commit(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(prefix=self.path.name + ".", suffix=".tmp", dir=self.path.parent)
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(self.data)
                f.flush()
                os.fdatasync(f.fileno()) if hasattr(os, "fdatasync") else os.fsync(f.fileno())
            os.replace(tmp, self.path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise

    def __enter__(self) -> "FileBuffer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        # Failed calls leave the file as it was.
        if exc_type is None:
            self.commit()
