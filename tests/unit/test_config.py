"""
Runtime Configuration Unit Tests
Tests for rewardtree/config/runtime.py
"""
import pytest

from rewardtree.config.runtime import (
    MerkleConfig,
    RuntimeConfig,
    get_default_config_template,
    load_config,
)
from rewardtree.crypto.encoding import DEFAULT_ADDRESS


class TestDefaults:

    def test_merkle_defaults(self):
        config = MerkleConfig()

        assert config.strict is True
        assert config.domain_separation is False
        assert config.placeholder_address == DEFAULT_ADDRESS
        assert config.validate_addresses is True

    def test_runtime_defaults(self):
        config = RuntimeConfig()

        assert config.merkle == MerkleConfig()
        assert config.log_level == "INFO"
        assert config.max_workers is None


class TestFromDict:

    def test_partial_data(self):
        config = RuntimeConfig.from_dict({"merkle": {"domain_separation": True}})

        assert config.merkle.domain_separation is True
        assert config.merkle.strict is True

    def test_to_dict_round_trip(self):
        original = RuntimeConfig(
            merkle=MerkleConfig(strict=False, validate_addresses=False),
            log_level="DEBUG",
            max_workers=4,
        )
        assert RuntimeConfig.from_dict(original.to_dict()) == original

    def test_unknown_merkle_key_rejected(self):
        with pytest.raises(TypeError):
            RuntimeConfig.from_dict({"merkle": {"bogus": 1}})


class TestEnvOverrides:

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("REWARDTREE_STRICT_MODE", "false")
        monkeypatch.setenv("REWARDTREE_DOMAIN_SEPARATION", "true")
        monkeypatch.setenv("REWARDTREE_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("REWARDTREE_MAX_WORKERS", "8")

        config = RuntimeConfig.from_env()

        assert config.merkle.strict is False
        assert config.merkle.domain_separation is True
        assert config.log_level == "DEBUG"
        assert config.max_workers == 8

    def test_env_overrides_file_values(self, monkeypatch):
        base = RuntimeConfig(merkle=MerkleConfig(domain_separation=True), log_level="WARNING")
        monkeypatch.setenv("REWARDTREE_STRICT_MODE", "false")

        config = base.with_env_overrides()

        assert config.merkle.strict is False
        assert config.merkle.domain_separation is True
        assert config.log_level == "WARNING"
        assert base.merkle.strict is True

    def test_no_overrides_returns_same(self):
        base = RuntimeConfig()
        assert base.with_env_overrides() is base


class TestYaml:

    def test_template_loads(self, tmp_path):
        path = tmp_path / "rewardtree.yaml"
        path.write_text(get_default_config_template())

        assert RuntimeConfig.from_yaml(path) == RuntimeConfig()

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("merkle:\n  strict: false\nlog_level: ERROR\n")

        config = RuntimeConfig.from_yaml(path)

        assert config.merkle.strict is False
        assert config.log_level == "ERROR"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            RuntimeConfig.from_yaml(tmp_path / "missing.yaml")

    def test_load_config_explicit_path(self, tmp_path, monkeypatch):
        path = tmp_path / "config.yaml"
        path.write_text("max_workers: 2\n")
        monkeypatch.setenv("REWARDTREE_LOG_LEVEL", "DEBUG")

        config = load_config(path)

        assert config.max_workers == 2
        assert config.log_level == "DEBUG"

    def test_load_config_cwd_default(self, tmp_path, monkeypatch):
        (tmp_path / "rewardtree.yaml").write_text("log_level: WARNING\n")
        monkeypatch.chdir(tmp_path)

        assert load_config().log_level == "WARNING"
