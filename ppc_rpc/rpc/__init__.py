from .client import Client, RPCFuture
from .ppc import PPCClient

__all__ = ["Client", "RPCFuture", "PPCClient"]
