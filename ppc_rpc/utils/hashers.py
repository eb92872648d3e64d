from hashlib import sha256


def dsha256(b: bytes) -> bytes:
    """Double SHA256 hash."""
    return sha256(sha256(b).digest()).digest()
