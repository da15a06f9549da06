"""Policy base class — action dispatch over per-class predicate registries."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, ClassVar

from resource_policy._log import log_policy_decision
from resource_policy.config._config import get_global_config
from resource_policy.exceptions import AuthorizationDenied, InvalidActionError
from resource_policy.policy._scope import Scope

__all__ = ["PREDICATE_PREFIX", "ENFORCE_PREFIX", "Policy"]

# Predicate methods are named ``can_<action>``.
PREDICATE_PREFIX = "can_"

# ``policy.authorize_<action>()`` is shorthand for ``policy.enforce(action)``.
ENFORCE_PREFIX = "authorize_"

# Set by the ``@predicate`` decorator.
_ACTION_MARKER = "__policy_action__"


def _predicate_action(attr_name: str, value: object) -> str | None:
    """Return the action a class attribute is the predicate for, if any."""
    if not callable(value):
        return None
    marked = getattr(value, _ACTION_MARKER, None)
    if marked is not None:
        return marked
    if attr_name.startswith(PREDICATE_PREFIX) and len(attr_name) > len(PREDICATE_PREFIX):
        return attr_name[len(PREDICATE_PREFIX) :]
    return None


class Policy:
    """Base class for resource policies.

    A policy binds a principal and a resource and answers, for each action
    it knows, whether the principal may perform it. Actions are declared by
    defining predicate methods named ``can_<action>`` (or decorated with
    ``@predicate("<action>")``). The set of actions is open-ended: it is
    exactly the set of predicates the concrete class defines.

    The predicate registry is built once per class, when the class is
    created, and never changes afterwards. A subclass removes an inherited
    action by setting its predicate to ``None``.

    The ``authorize_<action>`` shorthand is resolved dynamically, so
    ``hasattr(policy, "authorize_anything")`` is always true. Use
    :meth:`has_action` to ask whether an action exists.

    Attributes:
        Scope: The collection-level contract for this policy. Concrete
            policies override it with their own ``Scope`` subclass.

    Example::

        class PostPolicy(Policy):
            class Scope(Scope):
                def resolve(self):
                    return [p for p in self.collection if p.is_published]

            def can_show(self) -> bool:
                return self.resource.is_published or self.principal.id == self.resource.author_id

        policy = PostPolicy(current_user, post)
        policy.can_show()        # query form, called directly
        policy.query("show")     # query form, by action name
        policy.enforce("show")   # raises AuthorizationDenied when denied
        policy.authorize_show()  # same as enforce("show")
    """

    Scope: ClassVar[type[Scope]] = Scope

    _predicates: ClassVar[dict[str, str]] = {}

    __slots__ = ("_principal", "_resource")

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        predicates: dict[str, str] = {}
        # Most-derived definitions win; mixins contribute their predicates too.
        # Redefining a method name drops whatever action it used to serve.
        for klass in reversed(cls.__mro__):
            for attr_name, value in vars(klass).items():
                for stale in [a for a, name in predicates.items() if name == attr_name]:
                    del predicates[stale]
                action = _predicate_action(attr_name, value)
                if action is not None:
                    predicates[action] = attr_name
        cls._predicates = predicates

    def __init__(self, principal: Any, resource: Any) -> None:
        self._principal = principal
        self._resource = resource

    @property
    def principal(self) -> Any:
        """The principal operating on the resource."""
        return self._principal

    @property
    def resource(self) -> Any:
        """The resource being operated on."""
        return self._resource

    @classmethod
    def actions(cls) -> frozenset[str]:
        """Return every action this policy class defines a predicate for."""
        return frozenset(cls._predicates)

    @classmethod
    def has_action(cls, action: str) -> bool:
        """Return whether *action* has a predicate on this policy class."""
        return action in cls._predicates

    def query(self, action: str) -> bool:
        """Return whether the principal may perform *action* on the resource.

        Args:
            action: The action name (e.g. ``"show"``).

        Returns:
            The truth value of the action's predicate.

        Raises:
            InvalidActionError: If the policy defines no predicate for *action*.
        """
        method_name = self._predicates.get(action)
        if method_name is None:
            raise InvalidActionError(action=action, policy_type=type(self).__name__)

        allowed = bool(getattr(self, method_name)())

        if get_global_config().log_policy_decisions:
            log_policy_decision(policy=self, action=action, allowed=allowed)

        return allowed

    def enforce(self, action: str) -> None:
        """Assert that the principal may perform *action* on the resource.

        Returns ``None`` on success.

        Raises:
            AuthorizationDenied: If the predicate returns a false value.
            InvalidActionError: If the policy defines no predicate for *action*.

        Example::

            PostPolicy(current_user, post).enforce("update")
        """
        if not self.query(action):
            raise AuthorizationDenied(
                principal=self._principal,
                action=action,
                resource=self._resource,
            )

    def __getattr__(self, name: str) -> Callable[[], None]:
        if name.startswith(ENFORCE_PREFIX) and len(name) > len(ENFORCE_PREFIX):
            return functools.partial(self.enforce, name[len(ENFORCE_PREFIX) :])
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(principal={self._principal!r}, "
            f"resource={self._resource!r})"
        )
