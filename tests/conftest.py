"""Shared test fixtures for resource-policy tests."""

from __future__ import annotations

from dataclasses import dataclass

import pytest
from sqlalchemy import Boolean, ForeignKey, Integer, String, create_engine
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    Session,
    mapped_column,
    relationship,
    sessionmaker,
)

from resource_policy.config._config import _reset_global_config
from resource_policy.policy._base import Policy
from resource_policy.policy._scope import Scope
from resource_policy.testing._fixtures import (  # noqa: F401
    isolated_policy,
    policy_config,
    policy_registry,
)

# ---------------------------------------------------------------------------
# Test models
# ---------------------------------------------------------------------------


class Base(DeclarativeBase):
    pass


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100))
    role: Mapped[str] = mapped_column(String(50), default="viewer")

    posts: Mapped[list[Post]] = relationship("Post", back_populates="author")


class Post(Base):
    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(200))
    status: Mapped[str] = mapped_column(String(20), default="draft")
    is_published: Mapped[bool] = mapped_column(Boolean, default=False)
    author_id: Mapped[int] = mapped_column(ForeignKey("users.id"))

    author: Mapped[User] = relationship("User", back_populates="posts")


# ---------------------------------------------------------------------------
# Plain resources for the two attribute representations
# ---------------------------------------------------------------------------


@dataclass
class Record:
    """Tracked-field resource: exposes ``status`` and ``status_was``."""

    status: object
    status_was: object = None


@dataclass
class PersistedPost:
    """The model a ``PostForm`` wraps."""

    status: object
    title: str = ""


@dataclass
class PostForm:
    """Tracked-model resource: prior state lives on ``model``."""

    status: object
    model: PersistedPost | None = None


# ---------------------------------------------------------------------------
# MockPrincipal — satisfies PrincipalLike protocol
# ---------------------------------------------------------------------------


@dataclass
class MockPrincipal:
    """Test principal that satisfies PrincipalLike protocol."""

    id: int | str
    role: str = "viewer"


@dataclass
class Article:
    """Plain (non-ORM) resource used by dispatch tests."""

    id: int
    author_id: int
    is_published: bool = False


class ArticlePolicy(Policy):
    """Authors see and edit their own articles; everyone sees published ones."""

    class Scope(Scope):
        def resolve(self):
            return [
                a
                for a in self.collection
                if a.is_published or a.author_id == self.principal.id
            ]

    def can_show(self) -> bool:
        return self.resource.is_published or self.is_author()

    def can_update(self) -> bool:
        return self.is_author()

    def can_destroy(self) -> bool:
        return self.principal.role == "admin"

    def is_author(self) -> bool:
        return self.resource.author_id == self.principal.id


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_config():
    """Every test starts and ends with the default global config."""
    _reset_global_config()
    yield
    _reset_global_config()


@pytest.fixture()
def engine():
    """Create an in-memory SQLite engine with all tables."""
    eng = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(eng)
    return eng


@pytest.fixture()
def session(engine):
    """Provide a transactional session that rolls back after each test."""
    factory = sessionmaker(bind=engine)
    sess = factory()
    try:
        yield sess
    finally:
        sess.rollback()
        sess.close()


@pytest.fixture()
def sample_data(session: Session) -> dict[str, list]:
    """Seed the database with sample data for testing."""
    alice = User(id=1, name="Alice", role="admin")
    bob = User(id=2, name="Bob", role="editor")
    session.add_all([alice, bob])

    post1 = Post(id=1, title="Public Post", status="published", is_published=True, author_id=1)
    post2 = Post(id=2, title="Draft Post", status="draft", is_published=False, author_id=1)
    post3 = Post(id=3, title="Bob's Post", status="published", is_published=True, author_id=2)
    session.add_all([post1, post2, post3])

    session.flush()
    return {
        "users": [alice, bob],
        "posts": [post1, post2, post3],
    }
