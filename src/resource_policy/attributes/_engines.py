"""Readers for the resource representations attribute authorization supports.

A *tracked-model* resource wraps its persisted state in a nested object
(a form object holding the model it edits): the prior value lives on that
object. A *tracked-field* resource exposes the prior value of each field
itself, either through a ``<attribute>_was`` accessor or, for
SQLAlchemy-mapped instances, through the ORM's attribute history.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from sqlalchemy import inspect as sa_inspect
from sqlalchemy import select
from sqlalchemy.orm import InstanceState

from resource_policy._types import Engine
from resource_policy.exceptions import UnknownEngineError

__all__ = [
    "MappedHistoryReader",
    "PriorValueReader",
    "TrackedFieldReader",
    "TrackedModelReader",
    "resolve_reader",
]

_MISSING = object()


class PriorValueReader:
    """Reads the value an attribute had before the pending change."""

    __slots__ = ()

    kind: ClassVar[Engine]

    def old_value(self, resource: Any, attribute: str) -> Any:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class TrackedModelReader(PriorValueReader):
    """Prior value read off the nested model object."""

    model_attribute: str

    kind: ClassVar[Engine] = "tracked_model"

    def old_value(self, resource: Any, attribute: str) -> Any:
        return getattr(getattr(resource, self.model_attribute), attribute)


@dataclass(frozen=True, slots=True)
class TrackedFieldReader(PriorValueReader):
    """Prior value read from the ``<attribute><suffix>`` accessor."""

    prior_suffix: str

    kind: ClassVar[Engine] = "tracked_field"

    def old_value(self, resource: Any, attribute: str) -> Any:
        return getattr(resource, f"{attribute}{self.prior_suffix}")


@dataclass(frozen=True, slots=True)
class MappedHistoryReader(PriorValueReader):
    """Prior value read from SQLAlchemy attribute history.

    Scalar attributes only. When a value was set over one that was never
    loaded (an attribute expired by a commit, a deferred column) the
    history holds no prior value. For a persistent instance the committed
    value is then read from the database, without flushing the pending
    change. A pending or transient instance has no prior value and reads
    as ``None``.
    """

    kind: ClassVar[Engine] = "tracked_field"

    def old_value(self, resource: Any, attribute: str) -> Any:
        state: InstanceState[Any] = sa_inspect(resource)
        history = state.attrs[attribute].load_history()
        if history.deleted:
            return history.deleted[0]
        if history.added:
            if state.persistent:
                return _load_committed_value(state, attribute)
            return None
        return getattr(resource, attribute)


def _load_committed_value(state: InstanceState[Any], attribute: str) -> Any:
    mapper = state.mapper
    session = state.session
    criteria = [
        column == value for column, value in zip(mapper.primary_key, state.identity or ())
    ]
    stmt = select(mapper.attrs[attribute].class_attribute).where(*criteria)
    with session.no_autoflush:
        return session.execute(stmt).scalar_one_or_none()


def _has_tracked_model(resource: Any, attribute: str, model_attribute: str) -> bool:
    model = getattr(resource, model_attribute, _MISSING)
    if model is _MISSING or model is None:
        return False
    return hasattr(model, attribute)


def _is_mapped_attribute(resource: Any, attribute: str) -> bool:
    state = sa_inspect(resource, raiseerr=False)
    if not isinstance(state, InstanceState):
        return False
    return attribute in state.mapper.attrs


def resolve_reader(
    resource: Any,
    attribute: str,
    *,
    model_attribute: str,
    prior_suffix: str,
) -> PriorValueReader:
    """Probe *resource* and return the reader for its representation.

    Tracked-model wins over tracked-field. Within tracked-field an explicit
    ``<attribute><suffix>`` accessor wins over ORM history.

    Raises:
        UnknownEngineError: If no supported representation is found.
    """
    if _has_tracked_model(resource, attribute, model_attribute):
        return TrackedModelReader(model_attribute=model_attribute)
    if hasattr(resource, f"{attribute}{prior_suffix}"):
        return TrackedFieldReader(prior_suffix=prior_suffix)
    if _is_mapped_attribute(resource, attribute):
        return MappedHistoryReader()
    raise UnknownEngineError(resource=resource, attribute=attribute)
