"""Decorators — register policy classes and name predicates explicitly."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from resource_policy.policy._base import _ACTION_MARKER, Policy
from resource_policy.policy._registry import PolicyRegistry, get_default_registry

__all__ = ["policy", "predicate"]

P = TypeVar("P", bound=type[Policy])
F = TypeVar("F", bound=Callable[..., bool])


def policy(
    resource_type: type,
    *,
    registry: PolicyRegistry | None = None,
) -> Callable[[P], P]:
    """Class decorator that registers a policy class for *resource_type*.

    Args:
        resource_type: The resource class the policy applies to.
        registry: Optional custom registry. Defaults to the global registry.

    Returns:
        A decorator that registers the class and returns it unchanged.

    Raises:
        TypeError: If the decorated class is not a ``Policy`` subclass.

    Example::

        @policy(Post)
        class PostPolicy(Policy):
            def can_show(self) -> bool:
                return self.resource.is_published
    """

    def decorator(cls: P) -> P:
        if not (isinstance(cls, type) and issubclass(cls, Policy)):
            raise TypeError(f"@policy can only decorate Policy subclasses, got {cls!r}")
        target = registry if registry is not None else get_default_registry()
        target.register(resource_type, cls)
        return cls

    return decorator


def predicate(action: str) -> Callable[[F], F]:
    """Mark a method as the predicate for *action*.

    Use it for action names that cannot be spelled as ``can_<action>``.

    Example::

        class PostPolicy(Policy):
            @predicate("publish-draft")
            def may_publish_draft(self) -> bool:
                return self.principal.role == "editor"

        PostPolicy(user, post).enforce("publish-draft")
    """
    if not action:
        raise ValueError("predicate() requires a non-empty action name")

    def decorator(fn: F) -> F:
        setattr(fn, _ACTION_MARKER, action)
        return fn

    return decorator
