"""AttributeAuthorizer — attribute-level authorization for resource updates."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from typing import Any, ClassVar

from resource_policy._log import log_attribute_decision
from resource_policy._types import Engine
from resource_policy.attributes._engines import PriorValueReader, resolve_reader
from resource_policy.config._config import get_global_config
from resource_policy.exceptions import AttributeConfigurationError

__all__ = ["AttributeAuthorizer"]


def _stringify(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, enum.Enum):
        return str(value.value)
    return str(value)


def _flatten(values: Any) -> Iterator[Any]:
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        yield values
        return
    for value in values:
        yield from _flatten(value)


def _normalize_values(values: Any) -> list[str]:
    """Turn an ``only``/``except_`` option into a list of non-empty strings.

    Nested iterables are flattened at any depth.
    """
    if values is None:
        return []
    return [text for text in (_stringify(v) for v in _flatten(values)) if text]


class AttributeAuthorizer:
    """Decides whether a change to one attribute of a resource is allowed.

    The authorizer compares the attribute's prior value with its current
    one and, when they differ, checks the new value against an optional
    allow-list (``only``) or deny-list (``except_``).

    Two resource representations are supported and detected once, at
    construction:

    - ``"tracked_model"``: the resource holds its persisted state in a
      nested object at :attr:`model_attribute` (a form wrapping a model).
    - ``"tracked_field"``: the resource exposes ``<attribute>_was`` or is a
      SQLAlchemy-mapped instance whose attribute history holds the prior
      value.

    Subclass to change the accessor names:

    Example::

        class DraftAuthorizer(AttributeAuthorizer):
            model_attribute = "original"
            prior_suffix = "_before"

        authorizer = AttributeAuthorizer(post, "status")
        authorizer.authorize(only=["draft", "review"])

    Raises:
        UnknownEngineError: If the resource has neither representation.
    """

    model_attribute: ClassVar[str] = "model"
    prior_suffix: ClassVar[str] = "_was"

    __slots__ = ("_resource", "_attribute", "_reader")

    def __init__(self, resource: Any, attribute: str) -> None:
        self._resource = resource
        self._attribute = attribute
        self._reader: PriorValueReader = resolve_reader(
            resource,
            attribute,
            model_attribute=self.model_attribute,
            prior_suffix=self.prior_suffix,
        )

    @property
    def resource(self) -> Any:
        """The resource being authorized."""
        return self._resource

    @property
    def attribute(self) -> str:
        """The attribute being authorized."""
        return self._attribute

    @property
    def engine(self) -> Engine:
        """The representation detected at construction."""
        return self._reader.kind

    def old_value(self) -> Any:
        """Return the value the attribute had before the change (if any)."""
        return self._reader.old_value(self._resource, self._attribute)

    def new_value(self) -> Any:
        """Return the current value of the attribute."""
        return getattr(self._resource, self._attribute)

    def changed(self) -> bool:
        """Return whether the attribute's value differs from its prior value."""
        return self.old_value() != self.new_value()

    def authorize(self, *, only: Any = None, except_: Any = None) -> bool:
        """Return whether the attribute holds an authorized value.

        An unchanged attribute is always authorized. A changed one is
        authorized when its new value is in ``only``, or not in
        ``except_``. With neither option, any change is rejected.

        Values are compared by their string form, so ``1`` and ``"1"``
        match. ``None`` and empty strings in the options are ignored.

        Args:
            only: A value or iterable of values the attribute may change to.
            except_: A value or iterable of values the attribute may not
                change to.

        Returns:
            ``True`` if the change is authorized, ``False`` otherwise.

        Raises:
            AttributeConfigurationError: If both ``only`` and ``except_``
                are non-empty.

        Example::

            AttributeAuthorizer(post, "status").authorize(except_=["archived"])
        """
        allowed_values = _normalize_values(only)
        forbidden_values = _normalize_values(except_)

        if allowed_values and forbidden_values:
            raise AttributeConfigurationError()

        changed = self.changed()
        if not changed:
            allowed = True
        elif allowed_values:
            allowed = _stringify(self.new_value()) in allowed_values
        elif forbidden_values:
            allowed = _stringify(self.new_value()) not in forbidden_values
        else:
            allowed = False

        if get_global_config().log_policy_decisions:
            log_attribute_decision(
                resource=self._resource,
                attribute=self._attribute,
                engine=self.engine,
                changed=changed,
                allowed=allowed,
            )

        return allowed

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(resource={self._resource!r}, "
            f"attribute={self._attribute!r}, engine={self.engine!r})"
        )
