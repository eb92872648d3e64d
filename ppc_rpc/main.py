import argparse
from .run import run_with_settings
from .config import Settings, TESTNET_RPC_PORT


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="ppc-rpc", description="Peercoin proof-of-stake RPC calls"
    )
    p.add_argument("--rpcip", default=None)
    p.add_argument("--rpcport", type=int, default=None)
    p.add_argument("--rpcuser", default=None)
    p.add_argument("--rpcpass", default=None)
    p.add_argument("--timeout", type=float, default=None)
    p.add_argument("-t", "--testnet", action="store_true", default=None)
    p.add_argument(
        "-v", "--verbose", "--debug", action="store_true", dest="verbose", default=None
    )
    p.add_argument(
        "--log-level",
        default=None,
        help="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    sub = p.add_subparsers(dest="command", required=True)

    sm = sub.add_parser("stakemodifier", help="Kernel stake modifier of a block")
    sm.add_argument("--hash", default=None, help="Block hash (default: best block)")
    sm.add_argument("--full", action="store_true", help="Structured result")

    nt = sub.add_parser("nexttarget", help="Next required target (compact bits)")
    nt.add_argument("--pow", action="store_true", help="Proof-of-work target")
    nt.add_argument("--full", action="store_true", help="Structured result")

    sub.add_parser("lastpowreward", help="Subsidy of the last proof-of-work block")

    cs = sub.add_parser("sendcoinstake", help="Submit a signed coin-stake transaction")
    cs.add_argument("txhex", help="Serialized transaction, hex encoded")
    return p


SETTINGS_ARGS = ("rpcip", "rpcport", "rpcuser", "rpcpass", "timeout", "testnet", "log_level")


def main(argv=None):
    args = build_parser().parse_args(argv)

    s = Settings()
    for k in SETTINGS_ARGS:
        v = getattr(args, k)
        if v is not None:
            setattr(s, k, v)
    if args.testnet and args.rpcport is None:
        s.rpcport = TESTNET_RPC_PORT
    if args.verbose and args.log_level is None:
        s.log_level = "DEBUG"

    if not s.rpcuser or not s.rpcpass:
        raise SystemExit(
            "PPC RPC credentials are required (--rpcuser/--rpcpass or env vars)."
        )
    raise SystemExit(run_with_settings(s, args.command, args))


if __name__ == "__main__":
    main()
