"""
Result records and decoders for the proof-of-stake RPC methods.

Decoders take the JSON ``result`` value of a reply (already parsed) and
return a typed value, raising DecodeError on any shape or range mismatch.
Numeric fields are accepted both as JSON numbers and as decimal strings,
since node versions differ in how they encode them.
"""
import re
from dataclasses import dataclass
from typing import Any

from ..consensus.targets import bits_to_target, target_to_diff1
from ..errors import DecodeError
from ..wire import ShaHash

UINT32_MAX = 2**32 - 1
UINT64_MAX = 2**64 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_UNSIGNED_RE = re.compile(r"[0-9]+")
_SIGNED_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class KernelStakeModifierResult:
    hash: str
    kernel_stake_modifier: int


@dataclass(frozen=True)
class NextRequiredTargetResult:
    target: int

    @property
    def target_int(self) -> int:
        """Full 256-bit target expanded from the compact form."""
        return bits_to_target(self.target)

    @property
    def difficulty(self) -> float:
        return target_to_diff1(self.target_int)


def _parse_int(value: Any, lo: int, hi: int, what: str) -> int:
    # bool is an int subclass; JSON true/false is never a number here
    if isinstance(value, bool):
        raise DecodeError(f"{what}: expected number or decimal string, got bool")
    if isinstance(value, int):
        n = value
    elif isinstance(value, str):
        pattern = _UNSIGNED_RE if lo >= 0 else _SIGNED_RE
        if not pattern.fullmatch(value):
            raise DecodeError(f"{what}: invalid decimal string {value!r}")
        n = int(value, 10)
    else:
        raise DecodeError(
            f"{what}: expected number or decimal string, got {type(value).__name__}"
        )
    if n < lo or n > hi:
        raise DecodeError(f"{what}: value {n} out of range [{lo}, {hi}]")
    return n


def _require_object(value: Any, what: str) -> dict:
    if not isinstance(value, dict):
        raise DecodeError(f"{what}: expected JSON object, got {type(value).__name__}")
    return value


def _field(obj: dict, key: str, what: str) -> Any:
    try:
        return obj[key]
    except KeyError:
        raise DecodeError(f"{what}: missing field {key!r}") from None


def decode_kernel_stake_modifier(result: Any) -> int:
    return _parse_int(result, 0, UINT64_MAX, "kernel stake modifier")


def decode_kernel_stake_modifier_verbose(result: Any) -> KernelStakeModifierResult:
    what = "kernel stake modifier result"
    obj = _require_object(result, what)
    block_hash = _field(obj, "hash", what)
    if not isinstance(block_hash, str):
        raise DecodeError(f"{what}: hash must be a string")
    modifier = _parse_int(
        _field(obj, "kernelstakemodifier", what), 0, UINT64_MAX, what
    )
    return KernelStakeModifierResult(hash=block_hash, kernel_stake_modifier=modifier)


def decode_next_required_target(result: Any) -> int:
    # Values above 32 bits are rejected rather than narrowed.
    return _parse_int(result, 0, UINT32_MAX, "next required target")


def decode_next_required_target_verbose(result: Any) -> NextRequiredTargetResult:
    what = "next required target result"
    obj = _require_object(result, what)
    target = _parse_int(_field(obj, "target", what), 0, UINT32_MAX, what)
    return NextRequiredTargetResult(target=target)


def decode_last_proof_of_work_reward(result: Any) -> int:
    what = "last proof-of-work reward"
    obj = _require_object(result, what)
    return _parse_int(_field(obj, "subsidy", what), INT64_MIN, INT64_MAX, what)


def decode_send_coin_stake_transaction(result: Any) -> ShaHash:
    try:
        return ShaHash.from_str(result)
    except ValueError as e:
        raise DecodeError(f"coin-stake transaction hash: {e}") from e
