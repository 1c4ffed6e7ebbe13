"""Database session management utilities."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.orm import Session

from ..models.base import Base

from .session import SessionLocal, engine as _engine


@contextmanager
def get_session() -> Iterator[Session]:
    """Context manager yielding a SQLAlchemy session."""

    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def get_session_dependency() -> Iterator[Session]:
    """FastAPI dependency wrapping :func:`get_session`."""

    with get_session() as session:
        yield session


def get_engine():
    """Return the configured SQLAlchemy engine."""

    return _engine


@contextmanager
def session_scope() -> Iterator[Session]:
    """Provide a transactional scope for scripts and tests."""

    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


@contextmanager
def transaction(session: Session) -> Iterator[Session]:
    """Unit of work for multi-step writes on an existing session.

    Commits when the block exits normally and rolls back on any exception,
    including ``BaseException`` subclasses, before re-raising it.
    """

    try:
        yield session
    except BaseException:
        session.rollback()
        raise
    else:
        session.commit()


def create_all() -> None:
    """Create all tables known to the ORM metadata."""

    from .. import models  # noqa: F401

    Base.metadata.create_all(bind=_engine)


__all__ = [
    "Base",
    "create_all",
    "get_engine",
    "get_session",
    "get_session_dependency",
    "session_scope",
    "transaction",
]
