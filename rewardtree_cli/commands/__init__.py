"""
CLI command modules.
"""

from rewardtree_cli.commands import build, prove, show, verify

__all__ = ["build", "prove", "show", "verify"]
