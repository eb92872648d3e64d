"""
Peercoin proof-of-stake RPC calls.

Each call comes as a pair: ``*_async`` returns an RPCFuture right away
(it must be called with an event loop running and never raises), and the
plain coroutine awaits that future and returns the decoded value.
"""
from functools import partial
from typing import Union

from ..wire import MsgTx, ShaHash
from . import commands, results
from .client import Client, RPCFuture
from .results import KernelStakeModifierResult, NextRequiredTargetResult


class PPCClient(Client):
    def get_kernel_stake_modifier_async(
        self, block_hash: Union[ShaHash, str, None]
    ) -> RPCFuture[int]:
        return self._future(
            partial(
                commands.new_get_kernel_stake_modifier_cmd,
                block_hash=block_hash,
                verbose=False,
            ),
            results.decode_kernel_stake_modifier,
        )

    async def get_kernel_stake_modifier(
        self, block_hash: Union[ShaHash, str, None]
    ) -> int:
        """
        Return the kernel stake modifier of the given block.

        A block_hash of None asks the node for its current best block.
        See get_kernel_stake_modifier_verbose for the structured reply.
        """
        return await self.get_kernel_stake_modifier_async(block_hash)

    def get_kernel_stake_modifier_verbose_async(
        self, block_hash: Union[ShaHash, str, None]
    ) -> RPCFuture[KernelStakeModifierResult]:
        return self._future(
            partial(
                commands.new_get_kernel_stake_modifier_cmd,
                block_hash=block_hash,
                verbose=True,
            ),
            results.decode_kernel_stake_modifier_verbose,
        )

    async def get_kernel_stake_modifier_verbose(
        self, block_hash: Union[ShaHash, str, None]
    ) -> KernelStakeModifierResult:
        return await self.get_kernel_stake_modifier_verbose_async(block_hash)

    def get_next_required_target_async(self, proof_of_stake: bool) -> RPCFuture[int]:
        return self._future(
            partial(
                commands.new_get_next_required_target_cmd,
                proof_of_stake=proof_of_stake,
                verbose=False,
            ),
            results.decode_next_required_target,
        )

    async def get_next_required_target(self, proof_of_stake: bool) -> int:
        """
        Return the compact target the next block must meet.

        proof_of_stake selects the proof-of-stake or proof-of-work chain.
        """
        return await self.get_next_required_target_async(proof_of_stake)

    def get_next_required_target_verbose_async(
        self, proof_of_stake: bool
    ) -> RPCFuture[NextRequiredTargetResult]:
        return self._future(
            partial(
                commands.new_get_next_required_target_cmd,
                proof_of_stake=proof_of_stake,
                verbose=True,
            ),
            results.decode_next_required_target_verbose,
        )

    async def get_next_required_target_verbose(
        self, proof_of_stake: bool
    ) -> NextRequiredTargetResult:
        return await self.get_next_required_target_verbose_async(proof_of_stake)

    def get_last_proof_of_work_reward_async(self) -> RPCFuture[int]:
        return self._future(
            commands.new_get_last_proof_of_work_reward_cmd,
            results.decode_last_proof_of_work_reward,
        )

    async def get_last_proof_of_work_reward(self) -> int:
        """Return the subsidy of the most recent proof-of-work block."""
        return await self.get_last_proof_of_work_reward_async()

    def send_coin_stake_transaction_async(
        self, tx: Union[MsgTx, bytes, str]
    ) -> RPCFuture[ShaHash]:
        return self._future(
            partial(commands.new_send_coin_stake_transaction_cmd, tx=tx),
            results.decode_send_coin_stake_transaction,
        )

    async def send_coin_stake_transaction(self, tx: Union[MsgTx, bytes, str]) -> ShaHash:
        """Submit a signed coin-stake transaction and return its hash."""
        return await self.send_coin_stake_transaction_async(tx)
