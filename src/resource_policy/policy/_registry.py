"""PolicyRegistry — maps resource types to their policy classes."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from resource_policy.policy._base import Policy

__all__ = ["PolicyRegistry", "get_default_registry"]


class PolicyRegistry:
    """Registry that maps resource types to policy classes.

    Thread-safe for reads after startup. Registration normally happens at
    import time through the ``@policy`` decorator.

    Example::

        registry = PolicyRegistry()
        registry.register(Post, PostPolicy)
        assert registry.lookup(Post) is PostPolicy
    """

    def __init__(self) -> None:
        self._policies: dict[type, type[Policy]] = {}

    def register(self, resource_type: type, policy_cls: type[Policy]) -> None:
        """Register *policy_cls* as the policy for *resource_type*.

        Registering the same resource type twice replaces the earlier
        policy class.

        Args:
            resource_type: The resource class (a SQLAlchemy model, a
                dataclass, any type).
            policy_cls: A ``Policy`` subclass.
        """
        self._policies[resource_type] = policy_cls

    def lookup(self, resource_type: type) -> type[Policy] | None:
        """Look up the policy class for *resource_type*.

        Walks the MRO of *resource_type*, so a subclass without a policy
        of its own uses its nearest registered ancestor's.

        Args:
            resource_type: The resource class to look up.

        Returns:
            The policy class, or ``None`` if nothing in the MRO is registered.

        Example::

            policy_cls = registry.lookup(type(post))
        """
        for klass in resource_type.__mro__:
            policy_cls = self._policies.get(klass)
            if policy_cls is not None:
                return policy_cls
        return None

    def has_policy(self, resource_type: type) -> bool:
        """Check whether a policy class applies to *resource_type*."""
        return self.lookup(resource_type) is not None

    def registered_types(self) -> set[type]:
        """Return every resource type registered directly."""
        return set(self._policies)

    def clear(self) -> None:
        """Remove all registered policies.

        Primarily useful in test teardown to reset the registry state
        between tests.
        """
        self._policies.clear()


# Module-level default registry (singleton).
_default_registry = PolicyRegistry()


def get_default_registry() -> PolicyRegistry:
    """Return the global default (singleton) policy registry.

    This is the registry used by ``@policy``, ``can``, ``authorize`` and
    the finder helpers when no explicit registry is provided.
    """
    return _default_registry
