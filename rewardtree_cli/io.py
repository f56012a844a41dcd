"""
CLI file helpers.

Recipient files are JSON: either a list of entries or an object with a
"recipients" list. Each entry has "address", "amount" and "usdcAmount".
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from rewardtree.schemas.recipient import RecipientInput


class RecipientFileError(ValueError):
    """Raised when a recipients file cannot be read."""


def load_json_file(path: Path) -> Any:
    """Load and parse a JSON file."""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_recipients(path: Path) -> list[RecipientInput]:
    """
    Load recipient entries from a JSON file.

    Entries are returned in file order; validation and padding happen in
    the normalizer.
    """
    if not path.exists():
        raise RecipientFileError(f"Recipients file not found: {path}")

    try:
        data = load_json_file(path)
    except json.JSONDecodeError as e:
        raise RecipientFileError(f"Invalid JSON in {path}: {e}") from e

    if isinstance(data, dict):
        data = data.get("recipients")
    if not isinstance(data, list):
        raise RecipientFileError(
            f"{path} must contain a list of recipients or an object with a 'recipients' list"
        )

    entries = []
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            raise RecipientFileError(f"Recipient entry {i} in {path} is not an object")
        entries.append(RecipientInput.from_mapping(item))
    return entries


def write_json_file(path: Path, data: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
        f.write("\n")
