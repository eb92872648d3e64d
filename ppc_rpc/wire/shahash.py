"""
Fixed-width 32-byte hash identifier (block hashes, transaction ids).

Hashes are held in internal (little-endian) byte order and displayed the
way the node prints them: byte-reversed hex.
"""
from typing import Union

from ..utils.enc import is_hex

HASH_SIZE = 32
MAX_HASH_STRING_SIZE = HASH_SIZE * 2


class ShaHash:
    __slots__ = ("_b",)

    def __init__(self, b: Union[bytes, bytearray] = bytes(HASH_SIZE)):
        if len(b) != HASH_SIZE:
            raise ValueError(
                f"invalid hash length of {len(b)}, want {HASH_SIZE}"
            )
        self._b = bytes(b)

    @classmethod
    def from_str(cls, s: str) -> "ShaHash":
        """
        Parse the byte-reversed hex form used on the wire.

        Raises:
            ValueError: if s is not exactly 64 hex characters
        """
        if not isinstance(s, str):
            raise ValueError(f"hash string must be str, got {type(s).__name__}")
        if len(s) != MAX_HASH_STRING_SIZE:
            raise ValueError(
                f"hash string must be {MAX_HASH_STRING_SIZE} hex characters, got {len(s)}"
            )
        if not is_hex(s):
            raise ValueError(f"hash string is not valid hex: {s!r}")
        return cls(bytes.fromhex(s)[::-1])

    def to_bytes(self) -> bytes:
        return self._b

    def __str__(self) -> str:
        return self._b[::-1].hex()

    def __repr__(self) -> str:
        return f"ShaHash({str(self)!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, ShaHash):
            return NotImplemented
        return self._b == other._b

    def __hash__(self) -> int:
        return hash(self._b)
