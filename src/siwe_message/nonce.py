import secrets
import string

_ALPHABET = string.ascii_letters + string.digits


def generate_nonce(length: int = 96) -> str:
    """Random alphanumeric nonce suitable for the ``Nonce:`` line."""
    if length < 8:
        raise ValueError(f"nonce length must be at least 8, got {length}")
    return "".join(secrets.choice(_ALPHABET) for _ in range(length))
