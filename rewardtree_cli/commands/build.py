"""
CLI Build Command

Build the tree for a recipients file and print its root. With --out,
also write root.txt and proofs.json (one claim payload per recipient).

Usage:
    rewardtree build recipients.json [--out DIR] [--json]
"""

from __future__ import annotations

import json
import logging
from argparse import Namespace
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from rewardtree.merkle.distribution import Distribution
from rewardtree_cli.io import load_recipients, write_json_file


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


@dataclass
class BuildSummary:
    """Summary of a tree build for CLI output."""
    recipients_path: str = ""
    root: str = ""
    recipient_count: int = 0
    leaf_count: int = 0
    height: int = 0
    output_dir: str | None = None

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        if d["output_dir"] is None:
            del d["output_dir"]
        return d


def write_outputs(dist: Distribution, out_dir: Path, max_workers: int | None) -> None:
    """Write root.txt and proofs.json into out_dir."""
    out_dir.mkdir(parents=True, exist_ok=True)
    (out_dir / "root.txt").write_text(dist.root_b58 + "\n", encoding="utf-8")

    payloads = dist.claim_payloads(max_workers=max_workers)
    write_json_file(
        out_dir / "proofs.json",
        {
            "root": dist.root_b58,
            "claims": [p.to_dict() for p in payloads],
        },
    )
    logger.info("Wrote %d proofs to %s", len(payloads), out_dir)


def print_summary_human(summary: BuildSummary) -> None:
    """Print summary in human-readable format."""
    print(f"recipients: {summary.recipients_path}")
    print(f"root: {summary.root}")
    print(f"recipient_count: {summary.recipient_count}")
    print(f"leaf_count: {summary.leaf_count}")
    print(f"height: {summary.height}")
    if summary.output_dir:
        print(f"output: {summary.output_dir}")


def build_cmd(args: Namespace) -> int:
    """Execute the build command."""
    config = args.runtime_config
    recipients = load_recipients(Path(args.recipients))
    dist = Distribution.from_recipients(recipients, config.merkle)

    summary = BuildSummary(
        recipients_path=str(args.recipients),
        root=dist.root_b58,
        recipient_count=dist.recipient_count,
        leaf_count=dist.tree.leaf_count,
        height=dist.tree.height,
    )

    if args.out:
        out_dir = Path(args.out)
        write_outputs(dist, out_dir, config.max_workers)
        summary.output_dir = str(out_dir)

    if args.json:
        print(json.dumps(summary.to_dict(), indent=2))
    else:
        print_summary_human(summary)

    return EXIT_SUCCESS
