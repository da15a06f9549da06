"""resource-policy — Per-resource authorization policies for Python applications.

Policies are plain classes: bind a principal and a resource, define a
``can_<action>`` predicate per action, and ask or enforce. Scopes narrow
collections, and ``AttributeAuthorizer`` checks single-attribute changes.

Example::

    from resource_policy import Policy, Scope, policy, authorize

    @policy(Post)
    class PostPolicy(Policy):
        class Scope(Scope):
            def resolve(self):
                return self.collection.where(Post.author_id == self.principal.id)

        def can_update(self) -> bool:
            return self.resource.author_id == self.principal.id

    authorize(current_user, "update", post)  # raises AuthorizationDenied
"""

from importlib.metadata import PackageNotFoundError, version

from resource_policy._checks import authorize, can, policy_for, resolve_scope
from resource_policy._types import PrincipalLike
from resource_policy.attributes._authorizer import AttributeAuthorizer
from resource_policy.config._config import AuthzConfig, configure
from resource_policy.exceptions import (
    AttributeConfigurationError,
    AuthorizationDenied,
    InvalidActionError,
    NoPolicyError,
    PolicyError,
    ScopeNotImplementedError,
    UnknownEngineError,
)
from resource_policy.policy._base import Policy
from resource_policy.policy._decorator import policy, predicate
from resource_policy.policy._registry import PolicyRegistry
from resource_policy.policy._scope import Scope

try:
    __version__ = version("resource-policy")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "__version__",
    "AttributeAuthorizer",
    "AttributeConfigurationError",
    "AuthorizationDenied",
    "AuthzConfig",
    "InvalidActionError",
    "NoPolicyError",
    "Policy",
    "PolicyError",
    "PolicyRegistry",
    "PrincipalLike",
    "Scope",
    "ScopeNotImplementedError",
    "UnknownEngineError",
    "authorize",
    "can",
    "configure",
    "policy",
    "policy_for",
    "predicate",
    "resolve_scope",
]
