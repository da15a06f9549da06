"""resource-policy pytest plugin -- auto-discovered via pytest11 entry point.

This module is registered as a pytest plugin in ``pyproject.toml``::

    [project.entry-points.pytest11]
    resource_policy = "resource_policy.testing._plugin"

All fixtures defined here are automatically available in projects
that install resource-policy.
"""

from __future__ import annotations

# Re-export fixtures so they are auto-discovered by pytest.
from resource_policy.testing._fixtures import (  # noqa: F401
    isolated_policy,
    policy_config,
    policy_registry,
)

__all__ = ["isolated_policy", "policy_config", "policy_registry"]
