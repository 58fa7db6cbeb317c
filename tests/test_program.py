import pytest

from graffiti_core.buffer import MemoryBuffer
from graffiti_core.errors import WallFull
from graffiti_core.reader import get_message_at_index
from graffiti_program.crypto import sign_instruction, verify_ed25519
from graffiti_program.errors import ProgramError, to_program_error
from graffiti_program.instruction import decode_instruction, encode_instruction
from graffiti_program.processor import AccountInfo, process_instruction, signer_account

SEED = bytes(range(32))


def _accounts(data: bytes, buffer, writable: bool = True):
    pub, sig = sign_instruction(SEED, data)
    return [
        signer_account(pub, data, sig),
        AccountInfo(key=b"wall", is_signer=False, is_writable=writable, buffer=buffer),
    ]


def test_instruction_layout(post):
    data = encode_instruction(*post)
    assert len(data) == 128
    assert data[:64] == post[0]
    assert decode_instruction(data) == post


@pytest.mark.parametrize("size", [0, 127, 129, 136])
def test_instruction_must_be_exact(size):
    with pytest.raises(ProgramError) as exc:
        decode_instruction(bytes(size))
    assert exc.value.kind == "InvalidInstructionData"


def test_signature_round_trip():
    pub, sig = sign_instruction(SEED, b"payload")
    assert verify_ed25519(pub, b"payload", sig)
    assert not verify_ed25519(pub, b"tampered", sig)


def test_append_through_program(post, fixed_clock, capsys):
    buffer = MemoryBuffer()
    data = encode_instruction(*post)

    assert process_instruction(_accounts(data, buffer), data, clock=fixed_clock) == 0
    assert process_instruction(_accounts(data, buffer), data, clock=fixed_clock) == 1

    record = get_message_at_index(buffer.data, 1)
    assert (record.name, record.message) == post
    out = capsys.readouterr().out
    assert "Message added successfully at position 1" in out


def test_bad_signature(post):
    buffer = MemoryBuffer()
    data = encode_instruction(*post)
    pub, sig = sign_instruction(SEED, data)
    accounts = [
        signer_account(pub, data[:-1] + b"\x01", sig),
        AccountInfo(key=b"wall", is_signer=False, is_writable=True, buffer=buffer),
    ]
    with pytest.raises(ProgramError) as exc:
        process_instruction(accounts, data)
    assert exc.value.kind == "MissingRequiredSignature"
    assert len(buffer) == 0


def test_malformed_key_is_not_a_signer():
    assert not signer_account(b"short", b"data", b"sig").is_signer


def test_read_only_wall(post):
    buffer = MemoryBuffer()
    data = encode_instruction(*post)
    with pytest.raises(ProgramError) as exc:
        process_instruction(_accounts(data, buffer, writable=False), data)
    assert exc.value.kind == "InvalidAccountData"


def test_missing_accounts(post):
    data = encode_instruction(*post)
    with pytest.raises(ProgramError) as exc:
        process_instruction(_accounts(data, MemoryBuffer())[:1], data)
    assert exc.value.kind == "NotEnoughAccountKeys"


def test_bad_instruction_data():
    data = bytes(100)
    with pytest.raises(ProgramError) as exc:
        process_instruction(_accounts(data, MemoryBuffer()), data)
    assert exc.value.kind == "InvalidInstructionData"


def test_full_wall_is_custom_1(make_wall, post):
    buffer = make_wall(2, 2)
    snapshot = bytes(buffer)
    data = encode_instruction(*post)
    with pytest.raises(ProgramError) as exc:
        process_instruction(_accounts(data, buffer), data)
    assert (exc.value.kind, exc.value.custom) == ("Custom", 1)
    assert isinstance(exc.value.__cause__, WallFull)
    assert bytes(buffer) == snapshot


def test_account_limit_is_custom_2(post):
    buffer = MemoryBuffer(max_size=64)
    data = encode_instruction(*post)
    with pytest.raises(ProgramError) as exc:
        process_instruction(_accounts(data, buffer), data)
    assert exc.value.custom == 2
    assert exc.value.to_dict()["custom"] == 2


def test_malformed_header_maps_to_account_data(post):
    buffer = MemoryBuffer(b"\x00")
    data = encode_instruction(*post)
    with pytest.raises(ProgramError) as exc:
        process_instruction(_accounts(data, buffer), data)
    assert exc.value.kind == "InvalidAccountData"
    assert exc.value.custom is None


def test_error_mapping_table():
    from graffiti_core.errors import BufferTooSmall, OutOfRange

    assert to_program_error(BufferTooSmall()).kind == "AccountDataTooSmall"
    assert to_program_error(OutOfRange("index 4")).kind == "InvalidArgument"
