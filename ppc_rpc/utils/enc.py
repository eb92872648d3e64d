import re

_HEX_RE = re.compile(r"[0-9a-fA-F]*")


def var_int(i: int) -> bytes:
    if i < 0:
        raise ValueError(f"var_int requires non-negative integer, got {i}")
    if i < 0xFD:
        return i.to_bytes(1, "little")
    if i <= 0xFFFF:
        return b"\xfd" + i.to_bytes(2, "little")
    if i <= 0xFFFFFFFF:
        return b"\xfe" + i.to_bytes(4, "little")
    return b"\xff" + i.to_bytes(8, "little")


def var_bytes(b: bytes) -> bytes:
    """Length-prefixed byte string (script fields)."""
    return var_int(len(b)) + b


def is_hex(s: str) -> bool:
    return _HEX_RE.fullmatch(s) is not None
