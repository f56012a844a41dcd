"""
CLI Prove Command

Print the claim payload for one recipient.

Usage:
    rewardtree prove recipients.json --address ADDR
    rewardtree prove recipients.json --index N
"""

from __future__ import annotations

import json
import sys
from argparse import Namespace
from pathlib import Path

from rewardtree.merkle.distribution import Distribution
from rewardtree_cli.io import load_recipients


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


def prove_cmd(args: Namespace) -> int:
    """Execute the prove command."""
    if args.address is None and args.index is None:
        print("Error: one of --address or --index is required", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    config = args.runtime_config
    recipients = load_recipients(Path(args.recipients))
    dist = Distribution.from_recipients(recipients, config.merkle)

    if args.address is not None:
        payload = dist.claim_payload_for(args.address)
    else:
        payload = dist.claim_payload(args.index)

    if args.json:
        print(json.dumps(payload.to_dict(), indent=2))
    else:
        print(f"address: {payload.address}")
        print(f"index: {payload.index}")
        print(f"amount: {payload.amount}")
        print(f"usdc_amount: {payload.usdc_amount}")
        print(f"root: {payload.root}")
        print(f"proof ({len(payload.proof)}):")
        for sibling, on_left in zip(payload.proof, payload.path):
            side = "L" if on_left else "R"
            print(f"  [{side}] {sibling}")

    return EXIT_SUCCESS
