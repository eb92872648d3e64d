from hashlib import sha256

from ppc_rpc.wire import MsgTx, OutPoint, ShaHash, TxIn, TxOut


def _coinstake():
    return MsgTx(
        version=1,
        time=0x5F5E1000,
        tx_in=[TxIn(OutPoint(ShaHash(bytes(range(32))), 1), b"\x51")],
        tx_out=[TxOut(0, b""), TxOut(100, b"\x51")],
        lock_time=0,
    )


def test_serialize_layout():
    expected = (
        "01000000"  # version
        + "00105e5f"  # timestamp
        + "01"  # input count
        + bytes(range(32)).hex()
        + "01000000"  # previous output index
        + "01" + "51"  # signature script
        + "ffffffff"  # sequence
        + "02"  # output count
        + "0000000000000000" + "00"
        + "6400000000000000" + "01" + "51"
        + "00000000"  # lock time
    )
    assert _coinstake().serialize().hex() == expected


def test_tx_hash_is_double_sha256():
    tx = _coinstake()
    digest = sha256(sha256(tx.serialize()).digest()).digest()
    assert tx.tx_hash().to_bytes() == digest
    assert str(tx.tx_hash()) == digest[::-1].hex()


def test_empty_transaction_serializes():
    tx = MsgTx(version=1, time=0)
    assert tx.serialize().hex() == "01000000" + "00000000" + "00" + "00" + "00000000"
