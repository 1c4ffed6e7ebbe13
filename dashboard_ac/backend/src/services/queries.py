"""Query helpers shared by the resource services."""

from __future__ import annotations

from typing import Any, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.orm import InstrumentedAttribute, Session

from ..core.errors import ConflictError, NotFoundError
from ..schemas.common import PageParams

ModelT = TypeVar("ModelT")


def active(model: type[ModelT]) -> Select[tuple[ModelT]]:
    """Return a ``SELECT`` over rows of ``model`` that are not soft-deleted."""

    return select(model).where(model.deleted_at.is_(None))


def get_or_404(session: Session, model: type[ModelT], entity_id: Any, label: str) -> ModelT:
    """Return the live row with ``entity_id`` or raise :class:`NotFoundError`."""

    entity = session.scalars(active(model).where(model.id == entity_id)).one_or_none()
    if entity is None:
        raise NotFoundError(f"{label} not found")
    return entity


def paginate(session: Session, stmt: Select, params: PageParams) -> tuple[list[Any], int]:
    """Return one page of ``stmt`` together with the unpaginated row count."""

    total = session.scalar(
        select(func.count()).select_from(stmt.order_by(None).subquery())
    )
    items = session.scalars(stmt.offset(params.offset).limit(params.limit)).all()
    return list(items), int(total or 0)


def contains(column: InstrumentedAttribute, value: str) -> Any:
    """Case-insensitive substring match."""

    escaped = value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return column.ilike(f"%{escaped}%", escape="\\")


def ensure_unique(
    session: Session,
    column: InstrumentedAttribute,
    value: Any,
    message: str,
    *,
    exclude_id: Any = None,
    error: type[ConflictError] = ConflictError,
) -> None:
    """Raise ``error`` (a :class:`ConflictError`) when another row already holds ``value``.

    Soft-deleted rows count, since the unique index still covers them.
    """

    model = column.class_
    stmt = select(model.id).where(column == value)
    if exclude_id is not None:
        stmt = stmt.where(model.id != exclude_id)
    if session.scalars(stmt.limit(1)).first() is not None:
        raise error(message)


__all__ = ["active", "contains", "ensure_unique", "get_or_404", "paginate"]
