"""FastAPI integration for resource-policy."""

from __future__ import annotations

try:
    import fastapi as _fastapi_check  # noqa: F401  # pyright: ignore[reportUnusedImport]

    del _fastapi_check
except ImportError as exc:
    raise ImportError(
        "FastAPI integration requires fastapi. Install it with: pip install resource-policy[fastapi]"
    ) from exc

from resource_policy.integrations.fastapi._dependencies import PolicyDep, get_principal
from resource_policy.integrations.fastapi._errors import install_error_handlers

__all__ = [
    "PolicyDep",
    "get_principal",
    "install_error_handlers",
]
