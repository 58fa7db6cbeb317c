from __future__ import annotations

from graffiti_core.errors import (
    AccountTooSmall,
    BufferTooSmall,
    GraffitiError,
    InvalidPayload,
    MalformedHeader,
    MalformedRecord,
    OutOfRange,
    WallFull,
)

# Custom program error codes
CUSTOM_CODES = {
    WallFull: 1,
    AccountTooSmall: 2,
}

BUILTIN_KINDS = {
    MalformedHeader: "InvalidAccountData",
    MalformedRecord: "InvalidAccountData",
    BufferTooSmall: "AccountDataTooSmall",
    InvalidPayload: "InvalidInstructionData",
    OutOfRange: "InvalidArgument",
}


class ProgramError(Exception):
    """Error as reported across the program boundary."""

    def __init__(self, kind: str, detail: str | None = None, custom: int | None = None):
        self.kind = kind
        self.detail = detail
        self.custom = custom
        label = f"Custom({custom})" if custom is not None else kind
        super().__init__(f"{label}: {detail}" if detail else label)

    def to_dict(self) -> dict:
        out = {"kind": self.kind}
        if self.custom is not None:
            out["custom"] = self.custom
        if self.detail:
            out["detail"] = self.detail
        return out


def to_program_error(e: GraffitiError) -> ProgramError:
    for cls, code in CUSTOM_CODES.items():
        if isinstance(e, cls):
            return ProgramError("Custom", str(e), custom=code)
    for cls, kind in BUILTIN_KINDS.items():
        if isinstance(e, cls):
            return ProgramError(kind, str(e))
    return ProgramError("InvalidAccountData", str(e))
