"""CLI tool for chain operations."""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from src.chainkit.config import get_settings
from src.chainkit.exceptions import ChainkitError
from src.chainkit.logging_config import configure_logging
from src.chainkit.service import (
    ChainRequestPayload,
    ChainService,
    CompletionRequestPayload,
    MultipleChainsRequestPayload,
)


def load_payload(args) -> dict:
    """Read the request payload from --payload-file or --payload-json."""
    if args.payload_file:
        return json.loads(Path(args.payload_file).read_text())
    return json.loads(args.payload_json)


def run_command(args, service: ChainService) -> str:
    payload = load_payload(args)
    if args.command == "complete":
        return service.complete(CompletionRequestPayload.model_validate(payload))
    if args.command == "chain":
        return service.invoke_chain(args.chain_type, ChainRequestPayload.model_validate(payload))
    return service.invoke_chains(MultipleChainsRequestPayload.model_validate(payload))


def _add_payload_arguments(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--payload-json", "-j", help="Request payload as JSON string")
    group.add_argument("--payload-file", "-f", type=Path, help="Request payload JSON file")
    parser.add_argument("--output", "-o", type=Path, help="Output file")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Chain operations CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    complete_parser = subparsers.add_parser("complete", help="Single model call on a prompt")
    _add_payload_arguments(complete_parser)

    chain_parser = subparsers.add_parser("chain", help="Run one chain")
    chain_parser.add_argument("chain_type", help="Chain type: llm | httpRequest | oracleDb")
    _add_payload_arguments(chain_parser)

    chains_parser = subparsers.add_parser("chains", help="Run a multi-chain pipeline")
    _add_payload_arguments(chains_parser)
    return parser


def main(argv: Optional[list[str]] = None, service: Optional[ChainService] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        settings = get_settings()
        configure_logging(settings.LOG_LEVEL)
        service = service or ChainService(settings)
        output = run_command(args, service)
    except (ChainkitError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output:
        Path(args.output).write_text(output)
        print(f"✅ Result written to {args.output}")
    else:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
