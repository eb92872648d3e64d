import asyncio
import dataclasses
import json

from .config import Settings
from .errors import PPCRPCError
from .logging_setup import setup_logging
from .rpc.ppc import PPCClient


async def run_command(client: PPCClient, command: str, args) -> object:
    """Run one sub-command against client and return a JSON-friendly value."""
    if command == "stakemodifier":
        block_hash = args.hash or None
        if args.full:
            return dataclasses.asdict(
                await client.get_kernel_stake_modifier_verbose(block_hash)
            )
        return await client.get_kernel_stake_modifier(block_hash)
    if command == "nexttarget":
        proof_of_stake = not args.pow
        if args.full:
            res = await client.get_next_required_target_verbose(proof_of_stake)
            return {
                "target": res.target,
                "target_hex": f"{res.target_int:064x}",
                "difficulty": res.difficulty,
            }
        return await client.get_next_required_target(proof_of_stake)
    if command == "lastpowreward":
        return await client.get_last_proof_of_work_reward()
    if command == "sendcoinstake":
        return str(await client.send_coin_stake_transaction(args.txhex))
    raise ValueError(f"unknown command {command!r}")


def run_with_settings(settings: Settings, command: str, args) -> int:
    logger = setup_logging(settings.log_level)
    logger.debug("Connecting to %s:%d", settings.rpcip, settings.rpcport)

    async def main():
        async with PPCClient(settings.node_url, timeout=settings.timeout) as client:
            return await run_command(client, command, args)

    try:
        result = asyncio.run(main())
    except PPCRPCError as e:
        logger.error("%s failed: %s", command, e)
        return 1
    print(json.dumps(result, indent=2))
    return 0
