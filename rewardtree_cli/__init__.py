"""
Reward Tree CLI

Command-line interface for building distribution trees and claim proofs.

Usage:
    python -m rewardtree_cli build recipients.json --out ./out
    python -m rewardtree_cli prove recipients.json --address ADDR
    python -m rewardtree_cli verify --address ADDR --amount 100 --usdc-amount 0 --proof proof.json
"""

__version__ = "0.1.0"
