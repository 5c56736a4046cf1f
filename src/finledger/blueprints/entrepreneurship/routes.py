"""Entrepreneurship project routes: projects, their ledger records and summaries."""

from __future__ import annotations

from flask import jsonify

from ...domain.repositories import ProjectRepository
from ...errors import RecordNotFoundError
from ...extensions import session_scope
from ...infra.repositories.project import SQLModelProjectRepository
from ...logging_config import get_logger
from ...services.projects import plan_vs_actual, project_summary
from ..common import (
    date_range_args,
    owner_id,
    request_json,
    serialize_project,
    serialize_project_record,
    validate_form,
)
from . import bp
from .forms import ProjectForm, ProjectRecordForm

logger = get_logger(__name__)


def _repository() -> ProjectRepository:
    return SQLModelProjectRepository(session_scope)


@bp.get("/projects")
def list_projects():
    projects = _repository().list_for_owner(owner_id=owner_id())
    return jsonify([serialize_project(project) for project in projects])


@bp.post("/projects")
def create_project():
    values = validate_form(ProjectForm, request_json())
    project = _repository().create(values, owner_id=owner_id())
    logger.info("Project created", extra={"project_id": project.id, "project_name": project.name})
    return jsonify(serialize_project(project)), 201


@bp.put("/projects/<project_id>")
def update_project(project_id: str):
    repo = _repository()
    existing = repo.get_by_id(project_id, owner_id=owner_id())
    if existing is None:
        raise RecordNotFoundError("Project not found")

    changes = validate_form(ProjectForm, request_json(), existing=serialize_project(existing))
    project = repo.update(project_id, changes, owner_id=owner_id())
    if project is None:
        raise RecordNotFoundError("Project not found")
    logger.info("Project updated", extra={"project_id": project_id, "fields": sorted(changes)})
    return jsonify(serialize_project(project))


@bp.delete("/projects/<project_id>")
def delete_project(project_id: str):
    """Delete a project together with every record in its ledger."""

    if not _repository().delete(project_id, owner_id=owner_id()):
        raise RecordNotFoundError("Project not found")
    logger.info("Project deleted", extra={"project_id": project_id})
    return jsonify({"success": True})


@bp.get("/projects/<project_id>/records")
def list_project_records(project_id: str):
    start_date, end_date = date_range_args()
    records = _repository().list_records(
        project_id, owner_id=owner_id(), start_date=start_date, end_date=end_date
    )
    if records is None:
        raise RecordNotFoundError("Project not found")
    return jsonify([serialize_project_record(record) for record in records])


@bp.post("/projects/<project_id>/records")
def create_project_record(project_id: str):
    values = validate_form(ProjectRecordForm, request_json())
    record = _repository().create_record(project_id, values, owner_id=owner_id())
    if record is None:
        raise RecordNotFoundError("Project not found")
    logger.info(
        "Project record created",
        extra={"project_id": project_id, "record_id": record.id, "type": record.type},
    )
    return jsonify(serialize_project_record(record)), 201


@bp.get("/projects/<project_id>/summary")
def summarize_project(project_id: str):
    """Planned vs actual revenue, expense and profit for a project."""

    repo = _repository()
    project = repo.get_by_id(project_id, owner_id=owner_id())
    if project is None:
        raise RecordNotFoundError("Project not found")
    records = repo.list_records(project_id, owner_id=owner_id()) or []
    return jsonify(
        {
            "project": serialize_project(project),
            "summary": project_summary(records).to_dict(),
            "categories": [variance.to_dict() for variance in plan_vs_actual(records)],
        }
    )


@bp.put("/records/<record_id>")
def update_project_record(record_id: str):
    repo = _repository()
    existing = repo.get_record(record_id, owner_id=owner_id())
    if existing is None:
        raise RecordNotFoundError("Financial record not found")

    changes = validate_form(
        ProjectRecordForm, request_json(), existing=serialize_project_record(existing)
    )
    record = repo.update_record(record_id, changes, owner_id=owner_id())
    if record is None:
        raise RecordNotFoundError("Financial record not found")
    logger.info("Project record updated", extra={"record_id": record_id, "fields": sorted(changes)})
    return jsonify(serialize_project_record(record))


@bp.delete("/records/<record_id>")
def delete_project_record(record_id: str):
    if not _repository().delete_record(record_id, owner_id=owner_id()):
        raise RecordNotFoundError("Financial record not found")
    logger.info("Project record deleted", extra={"record_id": record_id})
    return jsonify({"success": True})
