"""
CLI Verify Command

Verify a claim offline: recipient data + proof payload + root. Needs no
recipients file and no tree.

The proof file is either a single payload ({"proof": [...], "path": [...]})
or a proofs.json written by `build --out`, in which case the claim for
--address is selected.

Usage:
    rewardtree verify --address ADDR --amount N --usdc-amount N \
        --proof proof.json [--root B58] [--json]
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from pathlib import Path
from typing import Any

from rewardtree.merkle.merkle_proofs import MerkleVerifier
from rewardtree.schemas.proof import ProofPayload
from rewardtree.schemas.recipient import RecipientInput
from rewardtree_cli.io import load_json_file


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


def select_payload(data: Any, address: str) -> tuple[ProofPayload, str | None]:
    """
    Pick the payload to verify from a loaded proof file.

    Returns:
        The payload and the file-level root, if any
    """
    if isinstance(data, dict) and "claims" in data:
        for claim in data["claims"]:
            if claim.get("address") == address:
                return ProofPayload.model_validate(claim), data.get("root")
        raise ValueError(f"No claim for {address} in proof file")
    return ProofPayload.model_validate(data), None


def verify_cmd(args: Namespace) -> int:
    """Execute the verify command."""
    proof_path = Path(args.proof)
    if not proof_path.exists():
        print(f"Error: Proof file not found: {proof_path}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    payload, file_root = select_payload(load_json_file(proof_path), args.address)
    root_b58 = args.root or payload.root or file_root
    if not root_b58:
        print("Error: no root given and none found in proof file", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    recipient = RecipientInput(
        address=args.address,
        amount=args.amount,
        usdc_amount=args.usdc_amount,
    )
    verifier = MerkleVerifier(args.runtime_config.merkle)
    ok = verifier.verify_payload(recipient, payload, root_b58)

    result = {
        "address": recipient.address,
        "amount": recipient.amount,
        "usdcAmount": recipient.usdc_amount,
        "root": root_b58,
        "proof_length": len(payload.proof),
        "ok": ok,
    }
    if args.json:
        print(json.dumps(result, indent=2))
    else:
        print(f"address: {recipient.address}")
        print(f"root: {root_b58}")
        print(f"ok: {str(ok).lower()}")

    if ok:
        logger.info("Verification passed")
        return EXIT_SUCCESS
    logger.warning("Verification failed")
    return EXIT_VERIFICATION_FAILED
