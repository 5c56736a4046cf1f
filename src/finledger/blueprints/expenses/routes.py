"""Expense routes."""

from __future__ import annotations

from flask import jsonify, request

from ...domain.repositories import ExpenseRepository
from ...errors import RecordNotFoundError
from ...extensions import session_scope
from ...infra.repositories.expense import SQLModelExpenseRepository
from ...logging_config import get_logger
from ...services.aggregation import filter_by_date_range
from ..common import date_range_args, owner_id, request_json, serialize_expense, validate_form
from . import bp
from .forms import ExpenseForm

logger = get_logger(__name__)


def _repository() -> ExpenseRepository:
    return SQLModelExpenseRepository(session_scope)


@bp.get("")
def list_expenses():
    """List expense records, newest first, optionally for one ``category`` and a date range."""

    start_date, end_date = date_range_args()
    category = request.args.get("category", "").strip()
    repo = _repository()
    if category:
        records = filter_by_date_range(
            repo.filter_by_category(category, owner_id=owner_id()), start_date, end_date
        )
    else:
        records = repo.list_for_owner(
            owner_id=owner_id(), start_date=start_date, end_date=end_date
        )
    return jsonify([serialize_expense(record) for record in records])


@bp.post("")
def create_expense():
    values = validate_form(ExpenseForm, request_json())
    record = _repository().create(values, owner_id=owner_id())
    logger.info(
        "Expense record created",
        extra={"record_id": record.id, "category": record.category},
    )
    return jsonify(serialize_expense(record)), 201


@bp.put("/<record_id>")
def update_expense(record_id: str):
    repo = _repository()
    existing = repo.get_by_id(record_id, owner_id=owner_id())
    if existing is None:
        raise RecordNotFoundError("Expense record not found")

    changes = validate_form(ExpenseForm, request_json(), existing=serialize_expense(existing))
    record = repo.update(record_id, changes, owner_id=owner_id())
    if record is None:
        raise RecordNotFoundError("Expense record not found")
    logger.info("Expense record updated", extra={"record_id": record_id, "fields": sorted(changes)})
    return jsonify(serialize_expense(record))


@bp.delete("/<record_id>")
def delete_expense(record_id: str):
    if not _repository().delete(record_id, owner_id=owner_id()):
        raise RecordNotFoundError("Expense record not found")
    logger.info("Expense record deleted", extra={"record_id": record_id})
    return jsonify({"success": True})
