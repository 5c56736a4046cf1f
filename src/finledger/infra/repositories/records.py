"""Shared SQLModel repository for owner-scoped, dated ledger rows."""

from __future__ import annotations

from datetime import date
from typing import Any, Callable, ClassVar, ContextManager, Generic, Mapping, Optional, TypeVar

from sqlmodel import Session, SQLModel, select

ModelT = TypeVar("ModelT", bound=SQLModel)

SessionFactory = Callable[[], ContextManager[Session]]

# Columns a partial update may never touch.
PROTECTED_FIELDS = frozenset({"id", "owner_id", "project_id", "created_at"})


def apply_changes(obj: SQLModel, changes: Mapping[str, Any]) -> None:
    """Replace the supplied fields on ``obj``, leaving the others untouched."""

    for key, value in changes.items():
        if key in PROTECTED_FIELDS:
            continue
        if not hasattr(obj, key):
            raise AttributeError(f"{type(obj).__name__} has no field {key!r}")
        setattr(obj, key, value)


class SQLModelOwnedRecordRepository(Generic[ModelT]):
    """CRUD for a table whose rows carry ``owner_id`` and ``occurred_on``."""

    model: ClassVar[type[SQLModel]]

    def __init__(self, session_factory: SessionFactory):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def get_by_id(self, record_id: str, *, owner_id: str) -> Optional[ModelT]:
        """Retrieve a record by ID."""
        with self.session_factory() as session:
            obj = session.exec(
                select(self.model)
                .where(self.model.id == record_id)
                .where(self.model.owner_id == owner_id)
            ).first()
            if obj:
                session.expunge(obj)
            return obj

    def list_for_owner(
        self,
        *,
        owner_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[ModelT]:
        """Records in ``[start_date, end_date]`` (inclusive, either bound optional), newest first."""
        with self.session_factory() as session:
            statement = select(self.model).where(self.model.owner_id == owner_id)
            if start_date is not None:
                statement = statement.where(self.model.occurred_on >= start_date)
            if end_date is not None:
                statement = statement.where(self.model.occurred_on <= end_date)
            statement = statement.order_by(
                self.model.occurred_on.desc(), self.model.created_at.desc()  # type: ignore
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def create(self, payload: Mapping[str, Any], *, owner_id: str) -> ModelT:
        """Insert a new row owned by ``owner_id``."""
        with self.session_factory() as session:
            obj = self.model(**dict(payload), owner_id=owner_id)
            session.add(obj)
            session.commit()
            session.refresh(obj)
            session.expunge(obj)
            return obj

    def update(
        self, record_id: str, changes: Mapping[str, Any], *, owner_id: str
    ) -> Optional[ModelT]:
        """Apply a partial update; ``None`` when the row does not exist for this owner."""
        with self.session_factory() as session:
            obj = session.exec(
                select(self.model)
                .where(self.model.id == record_id)
                .where(self.model.owner_id == owner_id)
            ).first()
            if obj is None:
                return None
            apply_changes(obj, changes)
            session.add(obj)
            session.commit()
            session.refresh(obj)
            session.expunge(obj)
            return obj

    def delete(self, record_id: str, *, owner_id: str) -> bool:
        """Delete a row; ``False`` when nothing matched."""
        with self.session_factory() as session:
            obj = session.exec(
                select(self.model)
                .where(self.model.id == record_id)
                .where(self.model.owner_id == owner_id)
            ).first()
            if obj is None:
                return False
            session.delete(obj)
            session.commit()
            return True
