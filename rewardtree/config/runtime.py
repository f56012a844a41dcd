"""
Runtime Configuration

Configuration for tree construction, proof generation and the CLI.
Everything a component needs is passed in explicitly; nothing in the
merkle package reads the environment on its own.
"""

from __future__ import annotations

import copy
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from rewardtree.crypto.encoding import DEFAULT_ADDRESS

load_dotenv()


ENV_PREFIX = "REWARDTREE_"


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


@dataclass(frozen=True)
class MerkleConfig:
    """
    Configuration for the normalizer, builder, prover and verifier.

    Attributes:
        strict: Check the declared leaf and self-verify every generated
            proof. Only tests that need deliberately invalid proofs turn
            this off.
        domain_separation: Hash leaves as sha256(0x00 || text) and nodes as
            sha256(0x01 || left || right). Must match the verifier.
        placeholder_address: Address used for padding entries
        validate_addresses: Require base-58 32-byte wallet addresses
    """
    strict: bool = True
    domain_separation: bool = False
    placeholder_address: str = DEFAULT_ADDRESS
    validate_addresses: bool = True


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration.

    Can be loaded from:
    - Environment variables
    - YAML file
    - Programmatic construction
    """
    merkle: MerkleConfig = field(default_factory=MerkleConfig)
    log_level: str = "INFO"
    log_file: Optional[str] = None
    max_workers: Optional[int] = None

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - REWARDTREE_STRICT_MODE: Leaf check and proof self-verification (true/false)
        - REWARDTREE_DOMAIN_SEPARATION: Prefix leaf/node hashes (true/false)
        - REWARDTREE_PLACEHOLDER_ADDRESS: Padding address
        - REWARDTREE_LOG_LEVEL: Log level
        - REWARDTREE_LOG_FILE: Additional log file
        - REWARDTREE_MAX_WORKERS: Threads used for bulk proof generation
        """
        overrides: dict[str, Any] = {}

        if os.getenv(f"{ENV_PREFIX}STRICT_MODE"):
            overrides.setdefault("merkle", {})["strict"] = _env_bool(
                f"{ENV_PREFIX}STRICT_MODE", "true"
            )
        if os.getenv(f"{ENV_PREFIX}DOMAIN_SEPARATION"):
            overrides.setdefault("merkle", {})["domain_separation"] = _env_bool(
                f"{ENV_PREFIX}DOMAIN_SEPARATION"
            )
        if os.getenv(f"{ENV_PREFIX}PLACEHOLDER_ADDRESS"):
            overrides.setdefault("merkle", {})["placeholder_address"] = os.getenv(
                f"{ENV_PREFIX}PLACEHOLDER_ADDRESS"
            )

        if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
            overrides["log_level"] = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
        if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
            overrides["log_file"] = os.getenv(f"{ENV_PREFIX}LOG_FILE")
        if os.getenv(f"{ENV_PREFIX}MAX_WORKERS"):
            overrides["max_workers"] = int(os.getenv(f"{ENV_PREFIX}MAX_WORKERS", "0")) or None

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """Load configuration purely from environment variables."""
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        merkle_data = data.get("merkle", {}) or {}
        merkle = MerkleConfig(**merkle_data) if merkle_data else MerkleConfig()

        return cls(
            merkle=merkle,
            log_level=data.get("log_level", "INFO"),
            log_file=data.get("log_file"),
            max_workers=data.get("max_workers"),
        )

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)

        if "merkle" in overrides:
            merkle_data = {
                "strict": new_config.merkle.strict,
                "domain_separation": new_config.merkle.domain_separation,
                "placeholder_address": new_config.merkle.placeholder_address,
                "validate_addresses": new_config.merkle.validate_addresses,
            }
            merkle_data.update(overrides["merkle"])
            new_config.merkle = MerkleConfig(**merkle_data)

        for key in ("log_level", "log_file", "max_workers"):
            if key in overrides:
                setattr(new_config, key, overrides[key])

        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "merkle": {
                "strict": self.merkle.strict,
                "domain_separation": self.merkle.domain_separation,
                "placeholder_address": self.merkle.placeholder_address,
                "validate_addresses": self.merkle.validate_addresses,
            },
            "log_level": self.log_level,
            "log_file": self.log_file,
            "max_workers": self.max_workers,
        }


def get_default_config_template() -> str:
    """Get a template YAML configuration file."""
    return f"""# rewardtree configuration
merkle:
  strict: true
  domain_separation: false
  placeholder_address: "{DEFAULT_ADDRESS}"
  validate_addresses: true
log_level: INFO
log_file: null
max_workers: null
"""


def load_config(config_path: Path | None = None) -> RuntimeConfig:
    """
    Load configuration from file and/or environment.

    Environment variables override file settings. Without an explicit
    path, ./rewardtree.yaml and ~/.config/rewardtree/config.yaml are tried.
    """
    config = RuntimeConfig()

    if config_path is not None:
        config = RuntimeConfig.from_yaml(config_path)
    else:
        default_paths = [
            Path.cwd() / "rewardtree.yaml",
            Path.home() / ".config" / "rewardtree" / "config.yaml",
        ]
        for default_path in default_paths:
            if default_path.exists():
                config = RuntimeConfig.from_yaml(default_path)
                break

    return config.with_env_overrides()
