"""Configuration module for resource-policy."""

from __future__ import annotations

from resource_policy.config._config import AuthzConfig, configure, get_global_config

__all__ = ["AuthzConfig", "configure", "get_global_config"]
