"""Policy engine — action dispatch, scopes and policy registration."""

from resource_policy.policy._base import Policy
from resource_policy.policy._decorator import policy, predicate
from resource_policy.policy._registry import PolicyRegistry, get_default_registry
from resource_policy.policy._scope import Scope

__all__ = [
    "Policy",
    "PolicyRegistry",
    "Scope",
    "get_default_registry",
    "policy",
    "predicate",
]
