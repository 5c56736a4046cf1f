"""Entrepreneurship project repository protocol."""

from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional, Protocol

from ...models.project import EntrepreneurshipProject, ProjectFinancialRecord


class ProjectRepository(Protocol):
    """Repository for projects and their financial records."""

    def get_by_id(self, project_id: str, *, owner_id: str) -> Optional[EntrepreneurshipProject]:
        """Retrieve a project by ID."""
        ...

    def list_for_owner(self, *, owner_id: str) -> list[EntrepreneurshipProject]:
        """List all projects."""
        ...

    def create(self, payload: Mapping[str, Any], *, owner_id: str) -> EntrepreneurshipProject:
        """Create a new project."""
        ...

    def update(
        self, project_id: str, changes: Mapping[str, Any], *, owner_id: str
    ) -> Optional[EntrepreneurshipProject]:
        """Update an existing project."""
        ...

    def delete(self, project_id: str, *, owner_id: str) -> bool:
        """Delete a project and its records."""
        ...

    # Financial record operations
    def list_records(
        self,
        project_id: str,
        *,
        owner_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Optional[list[ProjectFinancialRecord]]:
        """Get all records for a project."""
        ...

    def get_record(self, record_id: str, *, owner_id: str) -> Optional[ProjectFinancialRecord]:
        """Get a specific record."""
        ...

    def create_record(
        self, project_id: str, payload: Mapping[str, Any], *, owner_id: str
    ) -> Optional[ProjectFinancialRecord]:
        """Create a new record inside a project."""
        ...

    def update_record(
        self, record_id: str, changes: Mapping[str, Any], *, owner_id: str
    ) -> Optional[ProjectFinancialRecord]:
        """Update a record."""
        ...

    def delete_record(self, record_id: str, *, owner_id: str) -> bool:
        """Delete a record."""
        ...
