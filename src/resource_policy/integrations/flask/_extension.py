"""Flask extension for resource-policy authorization."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from flask import Flask, current_app, jsonify

from resource_policy._checks import authorize as _authorize
from resource_policy._checks import can as _can
from resource_policy._checks import resolve_scope as _resolve_scope
from resource_policy.exceptions import AuthorizationDenied, PolicyError
from resource_policy.policy._registry import PolicyRegistry

__all__ = ["PolicyExtension"]


class PolicyExtension:
    """Flask extension that authorizes resources for the current principal.

    Registers error handlers mapping ``AuthorizationDenied`` to 403 and any
    other ``PolicyError`` to 500, and provides ``can()``, ``authorize()``
    and ``resolve_scope()`` bound to the principal returned by
    ``principal_provider``.

    Supports the Flask app-factory pattern via ``init_app()``.

    Args:
        app: Optional Flask application. If provided, calls ``init_app()``
            immediately.
        principal_provider: A callable ``() -> principal`` returning the
            current principal. Called within request context.
        registry: Optional policy registry. Defaults to the global registry.

    Example::

        from flask import Flask
        from resource_policy.integrations.flask import PolicyExtension

        app = Flask(__name__)
        policies = PolicyExtension(app, principal_provider=lambda: g.user)

        @app.put("/posts/<int:post_id>")
        def update_post(post_id):
            post = load_post(post_id)
            policies.authorize("update", post)
            ...
    """

    def __init__(
        self,
        app: Flask | None = None,
        *,
        principal_provider: Callable[[], Any],
        registry: PolicyRegistry | None = None,
    ) -> None:
        self._principal_provider = principal_provider
        self._registry = registry

        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        """Initialize the extension with a Flask application.

        Stores configuration on ``app.extensions["resource_policy"]`` and
        registers error handlers for policy exceptions.

        Args:
            app: The Flask application instance.
        """
        app.extensions["resource_policy"] = {
            "principal_provider": self._principal_provider,
            "registry": self._registry,
        }

        @app.errorhandler(AuthorizationDenied)
        def handle_denied(exc: AuthorizationDenied):  # pyright: ignore[reportUnusedFunction]
            return jsonify({"detail": str(exc)}), 403

        @app.errorhandler(PolicyError)
        def handle_policy_error(exc: PolicyError):  # pyright: ignore[reportUnusedFunction]
            return jsonify({"detail": str(exc)}), 500

    def _state(self) -> tuple[Any, PolicyRegistry | None]:
        ext_state: dict[str, Any] = current_app.extensions["resource_policy"]
        principal_provider: Callable[[], Any] = ext_state["principal_provider"]
        return principal_provider(), ext_state["registry"]

    def can(self, action: str, resource: Any) -> bool:
        """Return whether the current principal may perform *action* on *resource*."""
        principal, registry = self._state()
        return _can(principal, action, resource, registry=registry)

    def authorize(self, action: str, resource: Any) -> None:
        """Raise ``AuthorizationDenied`` unless the current principal may act.

        Must be called within a Flask request context.
        """
        principal, registry = self._state()
        _authorize(principal, action, resource, registry=registry)

    def resolve_scope(self, resource_type: type, collection: Any) -> Any:
        """Narrow *collection* to what the current principal may access.

        Example::

            @app.get("/posts")
            def list_posts():
                stmt = policies.resolve_scope(Post, select(Post))
                return [p.id for p in session.execute(stmt).scalars()]
        """
        principal, registry = self._state()
        return _resolve_scope(principal, resource_type, collection, registry=registry)
