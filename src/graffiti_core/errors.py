from __future__ import annotations

from .const import ERRORS


class GraffitiError(ValueError):
    """Base class for every failure the wall core reports."""

    code = ""

    def __init__(self, detail: str | None = None):
        self.detail = detail
        message = ERRORS[self.code]
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)

    def to_dict(self) -> dict:
        out = {"code": self.code, "message": ERRORS[self.code]}
        if self.detail:
            out["detail"] = self.detail
        return out


class MalformedHeader(GraffitiError):
    code = "E_MALFORMED_HEADER"


class MalformedRecord(GraffitiError):
    code = "E_MALFORMED_RECORD"


class WallFull(GraffitiError):
    code = "E_WALL_FULL"


class AccountTooSmall(GraffitiError):
    code = "E_ACCOUNT_TOO_SMALL"


class BufferTooSmall(GraffitiError):
    code = "E_BUFFER_TOO_SMALL"


class OutOfRange(GraffitiError):
    code = "E_OUT_OF_RANGE"


class InvalidPayload(GraffitiError):
    code = "E_INVALID_PAYLOAD"
