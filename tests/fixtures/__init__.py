"""
Test fixtures package for reward tree tests.

- recipients.py: deterministic addresses and sorted recipient lists

Usage:
    from fixtures.recipients import make_recipients

    def test_something():
        entries = make_recipients(5)
"""

from .recipients import (
    make_address,
    make_letter_recipients,
    make_recipients,
)

__all__ = [
    "make_address",
    "make_letter_recipients",
    "make_recipients",
]
