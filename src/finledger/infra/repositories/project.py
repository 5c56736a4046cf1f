"""SQLModel implementation of the entrepreneurship project repository."""

from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional

from sqlmodel import Session, select

from ...models.project import EntrepreneurshipProject, ProjectFinancialRecord
from .records import SQLModelOwnedRecordRepository, apply_changes


class SQLModelProjectRepository(SQLModelOwnedRecordRepository[EntrepreneurshipProject]):
    """Projects and their ledger rows.

    Ledger rows have no owner column; they are reachable only through a
    project owned by the caller. Deleting a project deletes its rows.
    """

    model = EntrepreneurshipProject

    def list_for_owner(self, *, owner_id: str) -> list[EntrepreneurshipProject]:  # type: ignore[override]
        """List projects, most recently started first."""
        with self.session_factory() as session:
            statement = (
                select(EntrepreneurshipProject)
                .where(EntrepreneurshipProject.owner_id == owner_id)
                .order_by(
                    EntrepreneurshipProject.start_date.desc(),  # type: ignore
                    EntrepreneurshipProject.created_at.desc(),  # type: ignore
                )
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def delete(self, record_id: str, *, owner_id: str) -> bool:
        """Delete a project together with its financial records."""
        with self.session_factory() as session:
            project = self._owned_project(session, record_id, owner_id)
            if project is None:
                return False
            records = session.exec(
                select(ProjectFinancialRecord).where(
                    ProjectFinancialRecord.project_id == project.id
                )
            ).all()
            for record in records:
                session.delete(record)
            session.flush()
            session.delete(project)
            session.commit()
            return True

    # Project ledger rows
    def list_records(
        self,
        project_id: str,
        *,
        owner_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Optional[list[ProjectFinancialRecord]]:
        """Ledger rows for a project, newest first; ``None`` if the project is not the owner's."""
        with self.session_factory() as session:
            if self._owned_project(session, project_id, owner_id) is None:
                return None
            statement = select(ProjectFinancialRecord).where(
                ProjectFinancialRecord.project_id == project_id
            )
            if start_date is not None:
                statement = statement.where(ProjectFinancialRecord.occurred_on >= start_date)
            if end_date is not None:
                statement = statement.where(ProjectFinancialRecord.occurred_on <= end_date)
            statement = statement.order_by(
                ProjectFinancialRecord.occurred_on.desc(),  # type: ignore
                ProjectFinancialRecord.created_at.desc(),  # type: ignore
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def create_record(
        self, project_id: str, payload: Mapping[str, Any], *, owner_id: str
    ) -> Optional[ProjectFinancialRecord]:
        """Insert a ledger row; ``None`` if the project is not the owner's."""
        with self.session_factory() as session:
            if self._owned_project(session, project_id, owner_id) is None:
                return None
            record = ProjectFinancialRecord(**dict(payload), project_id=project_id)
            session.add(record)
            session.commit()
            session.refresh(record)
            session.expunge(record)
            return record

    def get_record(self, record_id: str, *, owner_id: str) -> Optional[ProjectFinancialRecord]:
        with self.session_factory() as session:
            record = self._owned_record(session, record_id, owner_id)
            if record:
                session.expunge(record)
            return record

    def update_record(
        self, record_id: str, changes: Mapping[str, Any], *, owner_id: str
    ) -> Optional[ProjectFinancialRecord]:
        """Apply a partial update to a ledger row."""
        with self.session_factory() as session:
            record = self._owned_record(session, record_id, owner_id)
            if record is None:
                return None
            apply_changes(record, changes)
            session.add(record)
            session.commit()
            session.refresh(record)
            session.expunge(record)
            return record

    def delete_record(self, record_id: str, *, owner_id: str) -> bool:
        with self.session_factory() as session:
            record = self._owned_record(session, record_id, owner_id)
            if record is None:
                return False
            session.delete(record)
            session.commit()
            return True

    @staticmethod
    def _owned_project(
        session: Session, project_id: str, owner_id: str
    ) -> Optional[EntrepreneurshipProject]:
        return session.exec(
            select(EntrepreneurshipProject)
            .where(EntrepreneurshipProject.id == project_id)
            .where(EntrepreneurshipProject.owner_id == owner_id)
        ).first()

    @staticmethod
    def _owned_record(
        session: Session, record_id: str, owner_id: str
    ) -> Optional[ProjectFinancialRecord]:
        return session.exec(
            select(ProjectFinancialRecord)
            .join(
                EntrepreneurshipProject,
                EntrepreneurshipProject.id == ProjectFinancialRecord.project_id,  # type: ignore
            )
            .where(ProjectFinancialRecord.id == record_id)
            .where(EntrepreneurshipProject.owner_id == owner_id)
        ).first()
