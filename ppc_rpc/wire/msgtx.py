"""
Peercoin transaction wire encoding.

Layout matches the Bitcoin transaction with one addition: a 4-byte
timestamp (nTime) directly after the version.
"""
import time
from dataclasses import dataclass, field
from typing import List

from ..utils.enc import var_int, var_bytes
from ..utils.hashers import dsha256
from .shahash import ShaHash

TX_VERSION = 1
MAX_TX_IN_SEQUENCE_NUM = 0xFFFFFFFF


@dataclass(frozen=True)
class OutPoint:
    hash: ShaHash
    index: int

    def serialize(self) -> bytes:
        return self.hash.to_bytes() + self.index.to_bytes(4, "little")


@dataclass(frozen=True)
class TxIn:
    previous_out_point: OutPoint
    signature_script: bytes = b""
    sequence: int = MAX_TX_IN_SEQUENCE_NUM

    def serialize(self) -> bytes:
        return (
            self.previous_out_point.serialize()
            + var_bytes(self.signature_script)
            + self.sequence.to_bytes(4, "little")
        )


@dataclass(frozen=True)
class TxOut:
    value: int
    pk_script: bytes

    def serialize(self) -> bytes:
        return self.value.to_bytes(8, "little", signed=True) + var_bytes(
            self.pk_script
        )


@dataclass
class MsgTx:
    version: int = TX_VERSION
    time: int = field(default_factory=lambda: int(time.time()))
    tx_in: List[TxIn] = field(default_factory=list)
    tx_out: List[TxOut] = field(default_factory=list)
    lock_time: int = 0

    def serialize(self) -> bytes:
        return (
            self.version.to_bytes(4, "little")
            + self.time.to_bytes(4, "little")
            + var_int(len(self.tx_in))
            + b"".join(txin.serialize() for txin in self.tx_in)
            + var_int(len(self.tx_out))
            + b"".join(txout.serialize() for txout in self.tx_out)
            + self.lock_time.to_bytes(4, "little")
        )

    def tx_hash(self) -> ShaHash:
        return ShaHash(dsha256(self.serialize()))

