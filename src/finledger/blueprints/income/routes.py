"""Income routes."""

from __future__ import annotations

from flask import jsonify

from ...domain.repositories import IncomeRepository
from ...errors import RecordNotFoundError
from ...extensions import session_scope
from ...infra.repositories.income import SQLModelIncomeRepository
from ...logging_config import get_logger
from ..common import date_range_args, owner_id, request_json, serialize_income, validate_form
from . import bp
from .forms import IncomeForm

logger = get_logger(__name__)


def _repository() -> IncomeRepository:
    return SQLModelIncomeRepository(session_scope)


@bp.get("")
def list_income():
    """List income records, newest first, within an optional date range."""

    start_date, end_date = date_range_args()
    records = _repository().list_for_owner(
        owner_id=owner_id(), start_date=start_date, end_date=end_date
    )
    return jsonify([serialize_income(record) for record in records])


@bp.post("")
def create_income():
    values = validate_form(IncomeForm, request_json())
    record = _repository().create(values, owner_id=owner_id())
    logger.info(
        "Income record created",
        extra={"record_id": record.id, "type": record.type, "category": record.category},
    )
    return jsonify(serialize_income(record)), 201


@bp.put("/<record_id>")
def update_income(record_id: str):
    repo = _repository()
    existing = repo.get_by_id(record_id, owner_id=owner_id())
    if existing is None:
        raise RecordNotFoundError("Income record not found")

    changes = validate_form(IncomeForm, request_json(), existing=serialize_income(existing))
    record = repo.update(record_id, changes, owner_id=owner_id())
    if record is None:
        raise RecordNotFoundError("Income record not found")
    logger.info("Income record updated", extra={"record_id": record_id, "fields": sorted(changes)})
    return jsonify(serialize_income(record))


@bp.delete("/<record_id>")
def delete_income(record_id: str):
    if not _repository().delete(record_id, owner_id=owner_id()):
        raise RecordNotFoundError("Income record not found")
    logger.info("Income record deleted", extra={"record_id": record_id})
    return jsonify({"success": True})
