"""
Reward Tree

Merkle commitments for reward and airdrop distributions: build a tree over
sorted recipients, publish its root, hand each recipient a proof.
"""

__version__ = "0.1.0"
