"""
Chain Guardian command-line interface

Checks a destination address against the chain you are sending on and prints
the same panels a wallet would show before confirming the transaction.

Usage:
    chain-guardian check 7xKXtg2CW87d97TXJSDpbD5jBkheTqA83TZRuJosgAsU
    chain-guardian check 0x742d35Cc6634C0532925a3b8D4C9C0B4b8E6d8A2 --chain-id eip155:137
    chain-guardian classify 1A1zP1eP5QGefi2DMPTfTL5SLmv7Divf --json
    chain-guardian preview TN3W4H6rK2ce4vX9YnFQHwKENnHjoxb3m9
    chain-guardian chains
    chain-guardian samples

Environment:
    CHAIN_GUARDIAN_CHAIN_ID    default --chain-id (eip155:1)
    CHAIN_GUARDIAN_LOG_LEVEL   default --log-level (WARNING)
"""

import argparse
import json
import logging
import os
import sys

from .chains import DEFAULT_CHAIN_ID, EVM_CHAIN_NAMES
from .classifier import classify, evaluate
from .exceptions import ChainGuardianError
from .handlers import PREVIEW_WARNING, on_rpc_request
from .render import render_verdict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

EXIT_OK = 0
EXIT_INCOMPATIBLE = 1
EXIT_ERROR = 2

# Addresses from the demo page
SAMPLE_ADDRESSES = {
    "EVM": "0x742d35Cc6634C0532925a3b8D4C9C0B4b8E6d8A2",
    "Solana": "7xKXtg2CW87d97TXJSDpbD5jBkheTqA83TZRuJosgAsU",
    "Bitcoin": "1A1zP1eP5QGefi2DMPTfTL5SLmv7Divf",
    "Tron": "TN3W4H6rK2ce4vX9YnFQHwKENnHjoxb3m9",
}


def _print_json(data) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def cmd_check(args) -> int:
    verdict = evaluate(args.chain_id, args.address)
    if verdict is None:
        print("No destination address given")
        return EXIT_OK

    if args.json:
        _print_json(verdict.model_dump(mode="json"))
    else:
        print(render_verdict(verdict))
    return EXIT_INCOMPATIBLE if verdict.is_blocking else EXIT_OK


def cmd_classify(args) -> int:
    match = classify(args.address)
    if args.json:
        _print_json(match.model_dump(mode="json") if match else None)
    elif match is None:
        print("Unrecognized")
    else:
        kind = "EVM" if match.is_evm else "non-EVM"
        print(f"{match.name} ({kind})")
    return EXIT_OK


def cmd_preview(args) -> int:
    verdict = on_rpc_request(
        PREVIEW_WARNING,
        {"address": args.address, "chainId": args.chain_id},
    )
    if verdict is None:
        print("No warning would be shown for this address")
        return EXIT_OK
    print(render_verdict(verdict, preview=True))
    return EXIT_OK


def cmd_chains(args) -> int:
    for chain_id, name in EVM_CHAIN_NAMES.items():
        print(f"  {chain_id:<10} {name}")
    return EXIT_OK


def cmd_samples(args) -> int:
    for label, address in SAMPLE_ADDRESSES.items():
        verdict = evaluate(args.chain_id, address)
        print(f"\n=== {label}: {address}")
        print(render_verdict(verdict))
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    # Configuration
    chain_id = os.getenv("CHAIN_GUARDIAN_CHAIN_ID", DEFAULT_CHAIN_ID)
    log_level = os.getenv("CHAIN_GUARDIAN_LOG_LEVEL", "WARNING").upper()

    parser = argparse.ArgumentParser(
        prog="chain-guardian",
        description="Detect destination addresses that belong to another chain",
    )
    parser.add_argument(
        "--log-level",
        default=log_level,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: %(default)s)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Check an address against the current chain")
    check.add_argument("address", help="Destination address")
    check.add_argument("--chain-id", default=chain_id, help="Current chain (default: %(default)s)")
    check.add_argument("--json", action="store_true", help="Print the verdict as JSON")
    check.set_defaults(func=cmd_check)

    classify_p = sub.add_parser("classify", help="Detect the network of an address")
    classify_p.add_argument("address", help="Address to classify")
    classify_p.add_argument("--json", action="store_true", help="Print the match as JSON")
    classify_p.set_defaults(func=cmd_classify)

    preview = sub.add_parser("preview", help="Preview the wrong-chain warning for an address")
    preview.add_argument("address", help="Destination address")
    preview.add_argument("--chain-id", default=chain_id, help="Current chain (default: %(default)s)")
    preview.set_defaults(func=cmd_preview)

    chains = sub.add_parser("chains", help="List known EVM chains")
    chains.set_defaults(func=cmd_chains)

    samples = sub.add_parser("samples", help="Run checks on the built-in sample addresses")
    samples.add_argument("--chain-id", default=chain_id, help="Current chain (default: %(default)s)")
    samples.set_defaults(func=cmd_samples)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid log level: {args.log_level!r}")

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        return args.func(args)
    except ChainGuardianError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
