"""Graffiti Wall Program - caller checks and error mapping around the core."""
from .errors import ProgramError, to_program_error
from .instruction import decode_instruction, encode_instruction
from .processor import AccountInfo, process_instruction, signer_account

__all__ = [
    "ProgramError", "to_program_error",
    "decode_instruction", "encode_instruction",
    "AccountInfo", "process_instruction", "signer_account",
]
