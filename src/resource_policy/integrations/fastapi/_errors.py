"""Exception handlers for FastAPI integration."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from resource_policy.exceptions import AuthorizationDenied, PolicyError

__all__ = ["install_error_handlers"]


def install_error_handlers(app: FastAPI) -> None:
    """Install exception handlers for resource-policy errors on a FastAPI app.

    Converts authorization exceptions into HTTP responses:

    - ``AuthorizationDenied`` -> 403 Forbidden
    - any other ``PolicyError`` (``InvalidActionError``, ``NoPolicyError``,
      ``UnknownEngineError``, ...) -> 500 Internal Server Error

    Args:
        app: The FastAPI application instance.

    Example::

        from fastapi import FastAPI
        from resource_policy.integrations.fastapi import install_error_handlers

        app = FastAPI()
        install_error_handlers(app)
    """

    @app.exception_handler(AuthorizationDenied)
    async def authorization_denied_handler(  # pyright: ignore[reportUnusedFunction]
        request: object, exc: AuthorizationDenied
    ) -> JSONResponse:
        return JSONResponse(
            status_code=403,
            content={"detail": str(exc)},
        )

    @app.exception_handler(PolicyError)
    async def policy_error_handler(  # pyright: ignore[reportUnusedFunction]
        request: object, exc: PolicyError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=500,
            content={"detail": str(exc)},
        )
