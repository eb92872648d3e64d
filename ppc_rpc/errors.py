"""
Error types raised by the ppc_rpc bindings.

Every failure reaches the caller through the same raise path of the
awaited call; the subclass tells which stage failed.
"""
from typing import Any, Optional


class PPCRPCError(Exception):
    """Base class for all ppc_rpc errors."""


class ParameterError(PPCRPCError, ValueError):
    """Malformed input detected before anything was sent."""


class TransportError(PPCRPCError):
    """The request could not be delivered or the reply could not be read."""


class RPCError(PPCRPCError):
    """The node answered with a JSON-RPC error object."""

    def __init__(self, code: Optional[int], message: str, data: Any = None):
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message
        self.data = data


class DecodeError(PPCRPCError):
    """A result arrived but does not have the expected shape or type."""
