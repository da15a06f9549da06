"""Exception hierarchy for resource-policy."""

from __future__ import annotations

__all__ = [
    "AttributeConfigurationError",
    "AuthorizationDenied",
    "InvalidActionError",
    "NoPolicyError",
    "PolicyError",
    "ScopeNotImplementedError",
    "UnknownEngineError",
]


class PolicyError(Exception):
    """Base exception for all resource-policy errors."""


class AuthorizationDenied(PolicyError):  # noqa: N818
    """Principal is not authorized to perform the requested action.

    This is the expected, user-facing outcome of a failed check. Calling
    applications usually translate it into a 403 response.

    Attributes:
        principal: The principal that was denied.
        action: The action that was attempted.
        resource: The resource the action targeted.

    Example::

        try:
            PostPolicy(user, post).enforce("update")
        except AuthorizationDenied as exc:
            print(f"{exc.principal} cannot {exc.action} {exc.resource}")
    """

    def __init__(
        self,
        *,
        principal: object,
        action: str,
        resource: object,
        message: str | None = None,
    ) -> None:
        self.principal = principal
        self.action = action
        self.resource = resource
        if message is None:
            message = (
                f"Principal {principal!r} is not authorized to perform action "
                f"{action!r} on this resource."
            )
        super().__init__(message)


class InvalidActionError(PolicyError):
    """The action has no predicate on the policy.

    This is a programming error, not a denial: the calling code asked for
    an action the policy class never defined.

    Attributes:
        action: The unknown action.
        policy_type: Name of the policy class, if known.
    """

    def __init__(self, *, action: str, policy_type: str | None = None) -> None:
        self.action = action
        self.policy_type = policy_type
        message = f"{action!r} is not a valid action for this policy."
        if policy_type is not None:
            message = f"{action!r} is not a valid action for {policy_type}."
        super().__init__(message)


class ScopeNotImplementedError(PolicyError, NotImplementedError):
    """A ``Scope`` subclass did not override ``resolve()``."""

    def __init__(self, scope_type: str) -> None:
        self.scope_type = scope_type
        super().__init__(f"{scope_type} must implement resolve()")


class UnknownEngineError(PolicyError):
    """The resource shape is not supported by attribute authorization.

    Attributes:
        resource: The resource that could not be inspected.
        attribute: The attribute that was being authorized.
    """

    def __init__(self, *, resource: object, attribute: str) -> None:
        self.resource = resource
        self.attribute = attribute
        super().__init__(
            "Attribute authorization requires a tracked-model or tracked-field "
            f"resource representation (got {type(resource).__name__} for "
            f"attribute {attribute!r})."
        )


class AttributeConfigurationError(PolicyError, ValueError):
    """``only`` and ``except_`` were both supplied to an attribute check."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message or "The only and except options cannot be used at the same time."
        )


class NoPolicyError(PolicyError):
    """No policy class registered for a resource type.

    Raised by the finder helpers (``policy_for``, ``resolve_scope``) and by
    ``can``/``authorize`` when configured with ``on_missing_policy="raise"``.

    Attributes:
        resource_type: Name of the resource type with no policy.
    """

    def __init__(self, *, resource_type: str) -> None:
        self.resource_type = resource_type
        super().__init__(f"No policy registered for {resource_type}")
