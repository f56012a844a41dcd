"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m rewardtree_cli build recipients.json [--out DIR] [--json]
    python -m rewardtree_cli prove recipients.json (--address ADDR | --index N) [--json]
    python -m rewardtree_cli verify --address ADDR --amount N --usdc-amount N --proof FILE [--root B58]
    python -m rewardtree_cli show recipients.json [--json]
    python -m rewardtree_cli config --init|--show

Environment Variables:
    REWARDTREE_STRICT_MODE          Leaf check and proof self-verification (default: true)
    REWARDTREE_DOMAIN_SEPARATION    Prefix leaf/node hashes (default: false)
    REWARDTREE_PLACEHOLDER_ADDRESS  Padding address (default: system program)
    REWARDTREE_LOG_LEVEL            Log level (default: INFO)
    REWARDTREE_LOG_FILE             Additional log file
    REWARDTREE_MAX_WORKERS          Threads for bulk proof generation
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from rewardtree.config.runtime import get_default_config_template, load_config
from rewardtree.schemas.errors import RewardTreeException
from rewardtree_cli import __version__
from rewardtree_cli.commands import build, prove, show, verify


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="rewardtree",
        description="Build reward distribution Merkle trees, generate and verify claim proofs.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to YAML configuration file (default: ./rewardtree.yaml or ~/.config/rewardtree/config.yaml)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- build command ---
    build_parser = subparsers.add_parser(
        "build",
        help="Build the tree for a recipients file and print its root",
        description="Normalize recipients, build the tree, optionally write root and proofs.",
    )
    build_parser.add_argument("recipients", type=str, help="Recipients JSON file")
    build_parser.add_argument(
        "--out", "-o",
        type=str,
        default=None,
        help="Directory for root.txt and proofs.json",
    )
    build_parser.add_argument("--json", action="store_true", default=False, help="JSON output")
    build_parser.add_argument("--debug", action="store_true", default=False, help="Show tracebacks")
    build_parser.set_defaults(func=build.build_cmd)

    # --- prove command ---
    prove_parser = subparsers.add_parser(
        "prove",
        help="Print the claim proof for one recipient",
    )
    prove_parser.add_argument("recipients", type=str, help="Recipients JSON file")
    target = prove_parser.add_mutually_exclusive_group()
    target.add_argument("--address", "-a", type=str, default=None, help="Recipient address")
    target.add_argument("--index", "-i", type=int, default=None, help="Leaf index")
    prove_parser.add_argument("--json", action="store_true", default=False, help="JSON output")
    prove_parser.add_argument("--debug", action="store_true", default=False, help="Show tracebacks")
    prove_parser.set_defaults(func=prove.prove_cmd)

    # --- verify command ---
    verify_parser = subparsers.add_parser(
        "verify",
        help="Verify a claim proof against a root",
        description="Recompute the root from recipient data and a proof. Exit 2 on mismatch.",
    )
    verify_parser.add_argument("--address", "-a", type=str, required=True, help="Recipient address")
    verify_parser.add_argument("--amount", type=int, required=True, help="Token amount, base units")
    verify_parser.add_argument(
        "--usdc-amount",
        dest="usdc_amount",
        type=int,
        required=True,
        help="USDC amount, base units",
    )
    verify_parser.add_argument("--proof", "-p", type=str, required=True, help="Proof payload JSON file")
    verify_parser.add_argument(
        "--root", "-r",
        type=str,
        default=None,
        help="Base-58 root (default: root recorded in the proof file)",
    )
    verify_parser.add_argument("--json", action="store_true", default=False, help="JSON output")
    verify_parser.add_argument("--debug", action="store_true", default=False, help="Show tracebacks")
    verify_parser.set_defaults(func=verify.verify_cmd)

    # --- show command ---
    show_parser = subparsers.add_parser(
        "show",
        help="Print every tree level in base-58",
    )
    show_parser.add_argument("recipients", type=str, help="Recipients JSON file")
    show_parser.add_argument("--json", action="store_true", default=False, help="JSON output")
    show_parser.add_argument("--debug", action="store_true", default=False, help="Show tracebacks")
    show_parser.set_defaults(func=show.show_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Manage CLI configuration",
        description="Initialize or display configuration.",
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        default=False,
        help="Create a template configuration file",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.add_argument(
        "--path",
        type=str,
        default="rewardtree.yaml",
        help="Path for config file (default: rewardtree.yaml)",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.init:
        config_path = Path(args.path)
        if config_path.exists():
            print(f"Error: Config file already exists: {config_path}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR

        config_path.write_text(get_default_config_template())
        print(f"Created configuration file: {config_path}")
        print("You can also use environment variables (REWARDTREE_* prefix).")
        return EXIT_SUCCESS

    if args.show:
        print(json.dumps(args.runtime_config.to_dict(), indent=2))
        return EXIT_SUCCESS

    print("Usage: rewardtree config [--init|--show]")
    print("  --init  Create a template configuration file")
    print("  --show  Show current configuration")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=verification failed)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    log_level = args.log_level or config.log_level
    setup_logging(level=log_level, log_file=config.log_file)

    args.runtime_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except RewardTreeException as e:
        if getattr(args, "debug", False):
            traceback.print_exc()
        print(f"Error [{e.code}]: {e.message}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if getattr(args, "debug", False):
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
