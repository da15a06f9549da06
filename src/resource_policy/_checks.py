"""Point checks — find a resource's policy and ask it about one action."""

from __future__ import annotations

from typing import Any

from resource_policy._log import log_missing_policy
from resource_policy.config._config import get_global_config
from resource_policy.exceptions import AuthorizationDenied, NoPolicyError
from resource_policy.policy._base import Policy
from resource_policy.policy._registry import PolicyRegistry, get_default_registry

__all__ = ["authorize", "can", "policy_for", "resolve_scope"]


def _lookup(resource_type: type, registry: PolicyRegistry | None) -> type[Policy] | None:
    target_registry = registry if registry is not None else get_default_registry()
    return target_registry.lookup(resource_type)


def policy_for(
    principal: Any,
    resource: Any,
    *,
    registry: PolicyRegistry | None = None,
) -> Policy:
    """Instantiate the policy registered for ``type(resource)``.

    Args:
        principal: The user/principal performing the action.
        resource: The resource instance.
        registry: Optional custom registry. Defaults to the global registry.

    Returns:
        A policy bound to (*principal*, *resource*).

    Raises:
        NoPolicyError: If no policy is registered for the resource's type.

    Example::

        policy_for(current_user, post).enforce("update")
    """
    policy_cls = _lookup(type(resource), registry)
    if policy_cls is None:
        raise NoPolicyError(resource_type=type(resource).__name__)
    return policy_cls(principal, resource)


def can(
    principal: Any,
    action: str,
    resource: Any,
    *,
    registry: PolicyRegistry | None = None,
) -> bool:
    """Check if *principal* can perform *action* on *resource*.

    When no policy is registered for the resource's type, the global
    ``on_missing_policy`` setting decides: ``"deny"`` returns ``False``
    and ``"raise"`` raises ``NoPolicyError``.

    Args:
        principal: The user/principal performing the action.
        action: The action string (e.g., ``"show"``, ``"update"``).
        resource: The resource instance.
        registry: Optional custom registry. Defaults to the global registry.

    Returns:
        ``True`` if access is granted, ``False`` if denied.

    Raises:
        InvalidActionError: If the policy defines no predicate for *action*.

    Example::

        if can(current_user, "show", post):
            return post
    """
    policy_cls = _lookup(type(resource), registry)
    if policy_cls is None:
        if get_global_config().on_missing_policy == "raise":
            raise NoPolicyError(resource_type=type(resource).__name__)
        log_missing_policy(resource_type=type(resource))
        return False
    return policy_cls(principal, resource).query(action)


def authorize(
    principal: Any,
    action: str,
    resource: Any,
    *,
    registry: PolicyRegistry | None = None,
    message: str | None = None,
) -> None:
    """Assert that *principal* is authorized to perform *action* on *resource*.

    Raises :class:`~resource_policy.exceptions.AuthorizationDenied` when
    access is denied. Returns ``None`` on success.

    Args:
        principal: The user/principal performing the action.
        action: The action string.
        resource: The resource instance.
        registry: Optional custom registry. Defaults to the global registry.
        message: Optional custom error message for the exception.

    Raises:
        AuthorizationDenied: If the principal is not authorized.
        InvalidActionError: If the policy defines no predicate for *action*.

    Example::

        authorize(current_user, "update", post)  # raises if denied
    """
    if not can(principal, action, resource, registry=registry):
        raise AuthorizationDenied(
            principal=principal,
            action=action,
            resource=resource,
            message=message,
        )


def resolve_scope(
    principal: Any,
    resource_type: type,
    collection: Any,
    *,
    registry: PolicyRegistry | None = None,
) -> Any:
    """Resolve *collection* through the scope of *resource_type*'s policy.

    Missing policies always raise: there is no generic empty value for an
    arbitrary collection.

    Args:
        principal: The user/principal accessing the records.
        resource_type: The resource class whose policy to use.
        collection: The base collection (a list, a ``Select``, ...).
        registry: Optional custom registry. Defaults to the global registry.

    Returns:
        Whatever the policy's ``Scope.resolve()`` returns.

    Raises:
        NoPolicyError: If no policy is registered for *resource_type*.

    Example::

        stmt = resolve_scope(current_user, Post, select(Post))
        posts = session.execute(stmt).scalars().all()
    """
    policy_cls = _lookup(resource_type, registry)
    if policy_cls is None:
        raise NoPolicyError(resource_type=resource_type.__name__)
    return policy_cls.Scope(principal, collection).resolve()
