"""Tests for AuthzConfig — layered configuration."""

from __future__ import annotations

import pytest

from resource_policy.config._config import (
    AuthzConfig,
    _reset_global_config,
    _set_global_config,
    configure,
    get_global_config,
)


class TestAuthzConfigDefaults:
    """Test default configuration values."""

    def test_default_on_missing_policy(self) -> None:
        assert AuthzConfig().on_missing_policy == "deny"

    def test_default_log_policy_decisions(self) -> None:
        assert AuthzConfig().log_policy_decisions is False


class TestAuthzConfigValidation:
    def test_rejects_unknown_on_missing_policy(self) -> None:
        with pytest.raises(ValueError, match="on_missing_policy"):
            AuthzConfig(on_missing_policy="ignore")  # type: ignore[arg-type]


class TestAuthzConfigFrozen:
    """Test that AuthzConfig is immutable."""

    def test_cannot_set_on_missing_policy(self) -> None:
        config = AuthzConfig()
        with pytest.raises(AttributeError):
            config.on_missing_policy = "raise"  # type: ignore[misc]


class TestAuthzConfigMerge:
    """Test merge semantics for layered configuration."""

    def test_merge_overrides_on_missing_policy(self) -> None:
        merged = AuthzConfig().merge(on_missing_policy="raise")
        assert merged.on_missing_policy == "raise"
        assert merged.log_policy_decisions is False  # unchanged

    def test_merge_overrides_log_policy_decisions(self) -> None:
        merged = AuthzConfig().merge(log_policy_decisions=True)
        assert merged.log_policy_decisions is True
        assert merged.on_missing_policy == "deny"  # unchanged

    def test_merge_with_no_overrides(self) -> None:
        config = AuthzConfig(on_missing_policy="raise")
        merged = config.merge()
        assert merged == config
        assert merged is not config

    def test_merge_false_is_not_ignored(self) -> None:
        merged = AuthzConfig(log_policy_decisions=True).merge(log_policy_decisions=False)
        assert merged.log_policy_decisions is False


class TestGlobalConfig:
    def setup_method(self) -> None:
        _reset_global_config()

    def teardown_method(self) -> None:
        _reset_global_config()

    def test_configure_merges_into_global(self) -> None:
        result = configure(on_missing_policy="raise")
        assert result is get_global_config()
        assert get_global_config().on_missing_policy == "raise"

    def test_configure_keeps_unspecified_settings(self) -> None:
        configure(log_policy_decisions=True)
        configure(on_missing_policy="raise")
        assert get_global_config().log_policy_decisions is True

    def test_reset(self) -> None:
        configure(on_missing_policy="raise")
        _reset_global_config()
        assert get_global_config() == AuthzConfig()

    def test_set_snapshot(self) -> None:
        snapshot = AuthzConfig(on_missing_policy="raise", log_policy_decisions=True)
        _set_global_config(snapshot)
        assert get_global_config() is snapshot
