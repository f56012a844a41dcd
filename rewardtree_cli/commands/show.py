"""
CLI Show Command

Dump every tree level in base-58, leaves first.

Usage:
    rewardtree show recipients.json [--json]
"""

from __future__ import annotations

import json
from argparse import Namespace
from pathlib import Path

from rewardtree.merkle.distribution import Distribution, tree_to_base58
from rewardtree_cli.io import load_recipients


EXIT_SUCCESS = 0


def show_cmd(args: Namespace) -> int:
    """Execute the show command."""
    recipients = load_recipients(Path(args.recipients))
    dist = Distribution.from_recipients(recipients, args.runtime_config.merkle)
    levels = tree_to_base58(dist.tree)

    if args.json:
        print(json.dumps({"root": dist.root_b58, "levels": levels}, indent=2))
        return EXIT_SUCCESS

    for k, level in enumerate(levels):
        label = "root" if k == len(levels) - 1 else f"level {k}"
        print(f"{label} ({len(level)}):")
        for position, digest in enumerate(level):
            if k == 0:
                entry = dist.recipients[position]
                print(f"  {position}: {digest}  <- {entry.leaf_text()}")
            else:
                print(f"  {position}: {digest}")

    return EXIT_SUCCESS
