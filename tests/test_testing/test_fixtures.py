"""Tests for the pytest fixtures shipped in resource_policy.testing."""

from __future__ import annotations

from resource_policy.config._config import AuthzConfig, get_global_config
from resource_policy.policy._registry import PolicyRegistry, get_default_registry
from tests.conftest import Article, ArticlePolicy


class TestPolicyRegistryFixture:
    def test_is_fresh_registry(self, policy_registry: PolicyRegistry) -> None:
        assert isinstance(policy_registry, PolicyRegistry)
        assert policy_registry is not get_default_registry()
        assert policy_registry.registered_types() == set()

    def test_is_usable(self, policy_registry: PolicyRegistry) -> None:
        policy_registry.register(Article, ArticlePolicy)
        assert policy_registry.lookup(Article) is ArticlePolicy


class TestPolicyConfigFixture:
    def test_defaults(self, policy_config: AuthzConfig) -> None:
        assert policy_config == AuthzConfig()


class TestIsolatedPolicyFixture:
    def test_yields_global_state(self, isolated_policy) -> None:
        cfg, registry = isolated_policy
        assert cfg is get_global_config()
        assert registry is get_default_registry()

    def test_registration_is_visible_during_test(self, isolated_policy) -> None:
        _, registry = isolated_policy
        registry.register(Article, ArticlePolicy)
        assert get_default_registry().has_policy(Article)

    def test_registration_does_not_leak(self, isolated_policy) -> None:
        _, registry = isolated_policy
        assert not registry.has_policy(Article)
