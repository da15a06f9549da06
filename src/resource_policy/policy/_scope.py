"""Scope — collection-level authorization for index-style operations."""

from __future__ import annotations

from typing import Any

from resource_policy.exceptions import ScopeNotImplementedError

__all__ = ["Scope"]


class Scope:
    """Narrows a base collection to the records a principal may access.

    Subclass inside a concrete policy and override :meth:`resolve`. The
    base collection is never mutated: ``resolve`` returns a new, filtered
    collection (a list comprehension, a narrowed SQLAlchemy ``Select``,
    and so on).

    Example::

        class PostPolicy(Policy):
            class Scope(Scope):
                def resolve(self):
                    return self.collection.where(Post.author_id == self.principal.id)

        stmt = PostPolicy.Scope(current_user, select(Post)).resolve()
    """

    __slots__ = ("_principal", "_collection")

    def __init__(self, principal: Any, collection: Any) -> None:
        self._principal = principal
        self._collection = collection

    @property
    def principal(self) -> Any:
        """The principal accessing the records."""
        return self._principal

    @property
    def collection(self) -> Any:
        """The base collection to filter."""
        return self._collection

    def resolve(self) -> Any:
        """Return the records accessible by the principal.

        Raises:
            ScopeNotImplementedError: If the subclass does not override it.
        """
        raise ScopeNotImplementedError(type(self).__qualname__)

    def __repr__(self) -> str:
        return f"{type(self).__qualname__}(principal={self._principal!r})"
