"""FastAPI dependencies for resource-policy authorization."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from fastapi import Depends, Request

from resource_policy._checks import authorize
from resource_policy.policy._registry import PolicyRegistry

__all__ = ["PolicyDep", "get_principal"]


def get_principal(request: Request) -> Any:
    """Sentinel dependency -- override via ``app.dependency_overrides[get_principal]``.

    Raises ``NotImplementedError`` if not overridden, ensuring users
    configure their principal provider before using ``PolicyDep``.

    Example::

        from resource_policy.integrations.fastapi import get_principal

        app.dependency_overrides[get_principal] = my_get_current_user
    """
    raise NotImplementedError(
        "Override get_principal via app.dependency_overrides[get_principal]."
    )


def _make_dependency(
    action: str,
    resource_dependency: Callable[..., Any],
    *,
    registry: PolicyRegistry | None = None,
) -> Callable[..., Any]:
    """Build the dependency function authorizing one loaded resource."""

    def _authorize_resource(
        resource: Any = Depends(resource_dependency),
        principal: Any = Depends(get_principal),
    ) -> Any:
        authorize(principal, action, resource, registry=registry)
        return resource

    return _authorize_resource


def PolicyDep(
    action: str,
    resource_dependency: Callable[..., Any],
    *,
    registry: PolicyRegistry | None = None,
) -> Any:
    """FastAPI dependency that loads a resource and authorizes *action* on it.

    The resource is produced by *resource_dependency* (any FastAPI
    dependency, usually one reading a path parameter), the principal by
    ``get_principal``. A denial raises ``AuthorizationDenied``, which
    ``install_error_handlers`` turns into a 403.

    Args:
        action: The action to authorize (e.g. ``"show"``).
        resource_dependency: Dependency callable returning the resource.
        registry: Optional per-dependency registry override.

    Returns:
        A FastAPI ``Depends`` instance.

    Example::

        def load_post(post_id: int) -> Post:
            return posts[post_id]

        @app.get("/posts/{post_id}")
        async def show_post(post: Post = PolicyDep("show", load_post)) -> dict:
            return {"id": post.id}
    """
    return Depends(_make_dependency(action, resource_dependency, registry=registry))
