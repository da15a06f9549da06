"""Shared protocols and type aliases for resource-policy."""

from __future__ import annotations

from typing import Literal, Protocol, runtime_checkable

__all__ = [
    "Engine",
    "OnMissingPolicy",
    "PrincipalLike",
]

# Valid values for AuthzConfig.on_missing_policy.
OnMissingPolicy = Literal["deny", "raise"]

# Resource representations understood by AttributeAuthorizer.
Engine = Literal["tracked_model", "tracked_field"]


@runtime_checkable
class PrincipalLike(Protocol):
    """Structural type for principals.

    The core never inspects principals; this protocol only documents
    what most predicates reach for. Any object with an ``id`` attribute
    satisfies it: SQLAlchemy models, dataclasses, named tuples.

    Example::

        @dataclass
        class User:
            id: int
            name: str

        assert isinstance(User(id=1, name="Alice"), PrincipalLike)
    """

    @property
    def id(self) -> int | str: ...
