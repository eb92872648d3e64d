"""
Command builders for the Peercoin proof-of-stake RPC methods.

Builders validate their arguments and raise ParameterError before
anything is sent.
"""
from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union

from ..errors import ParameterError
from ..utils.enc import is_hex
from ..wire import MsgTx, ShaHash
from ..wire.shahash import MAX_HASH_STRING_SIZE

JSONRPC_VERSION = "1.0"

GET_KERNEL_STAKE_MODIFIER = "getkernelstakemodifier"
GET_NEXT_REQUIRED_TARGET = "getnextrequiredtarget"
GET_LAST_PROOF_OF_WORK_REWARD = "getlastproofofworkreward"
SEND_COIN_STAKE_TRANSACTION = "sendcoinstaketransaction"


@dataclass(frozen=True)
class Command:
    id: Any
    method: str
    params: Tuple[Any, ...] = ()

    def marshal(self) -> dict:
        return {
            "jsonrpc": JSONRPC_VERSION,
            "id": self.id,
            "method": self.method,
            "params": list(self.params),
        }


def _hash_param(block_hash: Union[ShaHash, str, None]) -> str:
    # None means "no hash" and goes out as an empty string
    if block_hash is None:
        return ""
    if isinstance(block_hash, ShaHash):
        return str(block_hash)
    if isinstance(block_hash, str):
        if len(block_hash) > MAX_HASH_STRING_SIZE or not is_hex(block_hash):
            raise ParameterError(f"invalid block hash {block_hash!r}")
        return block_hash
    raise ParameterError(
        f"block hash must be ShaHash, str or None, got {type(block_hash).__name__}"
    )


def _bool_param(name: str, value) -> bool:
    if not isinstance(value, bool):
        raise ParameterError(f"{name} must be a bool, got {type(value).__name__}")
    return value


def new_get_kernel_stake_modifier_cmd(
    id, block_hash: Union[ShaHash, str, None], verbose: Optional[bool] = None
) -> Command:
    params = [_hash_param(block_hash)]
    if verbose is not None:
        params.append(_bool_param("verbose", verbose))
    return Command(id, GET_KERNEL_STAKE_MODIFIER, tuple(params))


def new_get_next_required_target_cmd(
    id, proof_of_stake: bool, verbose: Optional[bool] = None
) -> Command:
    params = [_bool_param("proof_of_stake", proof_of_stake)]
    if verbose is not None:
        params.append(_bool_param("verbose", verbose))
    return Command(id, GET_NEXT_REQUIRED_TARGET, tuple(params))


def new_get_last_proof_of_work_reward_cmd(id) -> Command:
    return Command(id, GET_LAST_PROOF_OF_WORK_REWARD)


def new_send_coin_stake_transaction_cmd(
    id, tx: Union[MsgTx, bytes, str, None]
) -> Command:
    """
    Build a sendcoinstaketransaction command.

    tx may be a MsgTx (serialized to its wire encoding), raw bytes, or an
    already hex-encoded string. A missing or empty transaction is rejected.
    """
    if tx is None:
        raise ParameterError("no transaction to send")
    if isinstance(tx, MsgTx):
        try:
            tx_hex = tx.serialize().hex()
        except (OverflowError, ValueError) as e:
            raise ParameterError(f"transaction cannot be serialized: {e}") from e
    elif isinstance(tx, (bytes, bytearray)):
        tx_hex = bytes(tx).hex()
    elif isinstance(tx, str):
        if len(tx) % 2 or not is_hex(tx):
            raise ParameterError("transaction hex must be an even-length hex string")
        tx_hex = tx.lower()
    else:
        raise ParameterError(
            f"transaction must be MsgTx, bytes or str, got {type(tx).__name__}"
        )
    if not tx_hex:
        raise ParameterError("no transaction to send")
    return Command(id, SEND_COIN_STAKE_TRANSACTION, (tx_hex,))
