"""
Async bindings for the proof-of-stake JSON-RPC calls of a Peercoin node.
"""
from .errors import DecodeError, ParameterError, PPCRPCError, RPCError, TransportError
from .rpc import Client, PPCClient, RPCFuture
from .rpc.results import KernelStakeModifierResult, NextRequiredTargetResult
from .wire import MsgTx, OutPoint, ShaHash, TxIn, TxOut

__version__ = "0.1.0"

__all__ = [
    "Client",
    "PPCClient",
    "RPCFuture",
    "KernelStakeModifierResult",
    "NextRequiredTargetResult",
    "ShaHash",
    "MsgTx",
    "OutPoint",
    "TxIn",
    "TxOut",
    "PPCRPCError",
    "ParameterError",
    "TransportError",
    "RPCError",
    "DecodeError",
]
