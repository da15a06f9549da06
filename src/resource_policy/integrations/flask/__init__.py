"""Flask integration for resource-policy."""

from __future__ import annotations

try:
    import flask as _flask_check  # noqa: F401  # pyright: ignore[reportUnusedImport]

    del _flask_check
except ImportError as exc:
    raise ImportError(
        "Flask integration requires flask. Install it with: pip install resource-policy[flask]"
    ) from exc

from resource_policy.integrations.flask._extension import PolicyExtension

__all__ = ["PolicyExtension"]
