from nacl.signing import SigningKey, VerifyKey
from nacl.exceptions import BadSignatureError

def verify_ed25519(public_key_bytes: bytes, message: bytes, signature: bytes) -> bool:
    vk = VerifyKey(public_key_bytes)
    try:
        vk.verify(message, signature)
        return True
    except BadSignatureError:
        return False

def sign_instruction(seed: bytes, data: bytes) -> tuple[bytes, bytes]:
    """Return (public key, detached signature) for `data`."""
    sk = SigningKey(seed)
    return bytes(sk.verify_key), sk.sign(data).signature
