from .shahash import ShaHash, HASH_SIZE
from .msgtx import MsgTx, OutPoint, TxIn, TxOut

__all__ = ["ShaHash", "HASH_SIZE", "MsgTx", "OutPoint", "TxIn", "TxOut"]
