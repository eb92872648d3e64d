import pytest

from ppc_rpc.errors import ParameterError
from ppc_rpc.rpc import commands
from ppc_rpc.wire import MsgTx, ShaHash

GENESIS = "0000000032fe677166d54963b62a4677d8957e87c508eaa4fd7eb1c880cd27e3"


def test_marshal_envelope():
    cmd = commands.new_get_next_required_target_cmd(7, True, False)
    assert cmd.marshal() == {
        "jsonrpc": "1.0",
        "id": 7,
        "method": "getnextrequiredtarget",
        "params": [True, False],
    }


def test_kernel_stake_modifier_nil_hash_is_empty_string():
    cmd = commands.new_get_kernel_stake_modifier_cmd(1, None, False)
    assert cmd.method == "getkernelstakemodifier"
    assert cmd.params == ("", False)


def test_kernel_stake_modifier_with_shahash():
    cmd = commands.new_get_kernel_stake_modifier_cmd(
        1, ShaHash.from_str(GENESIS), True
    )
    assert cmd.params == (GENESIS, True)


def test_kernel_stake_modifier_with_hex_string():
    cmd = commands.new_get_kernel_stake_modifier_cmd(1, GENESIS)
    assert cmd.params == (GENESIS,)


@pytest.mark.parametrize("bad", ["xyz", GENESIS + "0", 42])
def test_kernel_stake_modifier_bad_hash(bad):
    with pytest.raises(ParameterError):
        commands.new_get_kernel_stake_modifier_cmd(1, bad, False)


def test_verbose_must_be_bool():
    with pytest.raises(ParameterError, match="verbose"):
        commands.new_get_kernel_stake_modifier_cmd(1, None, 1)


def test_next_required_target_params():
    assert commands.new_get_next_required_target_cmd(1, False).params == (False,)
    assert commands.new_get_next_required_target_cmd(1, True, True).params == (
        True,
        True,
    )


def test_next_required_target_rejects_non_bool():
    with pytest.raises(ParameterError, match="proof_of_stake"):
        commands.new_get_next_required_target_cmd(1, "yes")


def test_last_proof_of_work_reward_has_no_params():
    cmd = commands.new_get_last_proof_of_work_reward_cmd(3)
    assert cmd.marshal()["params"] == []
    assert cmd.method == "getlastproofofworkreward"


def test_send_coin_stake_from_msgtx():
    tx = MsgTx(version=1, time=0)
    cmd = commands.new_send_coin_stake_transaction_cmd(1, tx)
    assert cmd.method == "sendcoinstaketransaction"
    assert cmd.params == (tx.serialize().hex(),)


def test_send_coin_stake_from_bytes_and_hex():
    raw = bytes.fromhex("01000000deadbeef")
    assert commands.new_send_coin_stake_transaction_cmd(1, raw).params == (
        "01000000deadbeef",
    )
    assert commands.new_send_coin_stake_transaction_cmd(1, "01000000DEADBEEF").params == (
        "01000000deadbeef",
    )


@pytest.mark.parametrize("bad", [None, b"", "", "abc", "zz", 5])
def test_send_coin_stake_rejects_missing_or_malformed(bad):
    with pytest.raises(ParameterError):
        commands.new_send_coin_stake_transaction_cmd(1, bad)


def test_command_is_immutable():
    cmd = commands.new_get_last_proof_of_work_reward_cmd(1)
    with pytest.raises(Exception):
        cmd.method = "other"


@pytest.mark.parametrize(
    "tx",
    [
        MsgTx(version=-1, time=0),
        MsgTx(version=1, time=0, lock_time=2**32),
        MsgTx(version=1, time=-5),
    ],
)
def test_send_coin_stake_unserializable_tx(tx):
    with pytest.raises(ParameterError, match="cannot be serialized"):
        commands.new_send_coin_stake_transaction_cmd(1, tx)


@pytest.mark.parametrize("bad", ["abc\n", "ab\n", "0100\n"])
def test_send_coin_stake_rejects_trailing_newline(bad):
    with pytest.raises(ParameterError):
        commands.new_send_coin_stake_transaction_cmd(1, bad)


def test_kernel_stake_modifier_rejects_trailing_newline():
    with pytest.raises(ParameterError):
        commands.new_get_kernel_stake_modifier_cmd(1, "ab\n", False)
