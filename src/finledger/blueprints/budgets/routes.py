"""Budget routes."""

from __future__ import annotations

from flask import jsonify

from ...domain.repositories import BudgetRepository
from ...errors import RecordNotFoundError
from ...extensions import session_scope
from ...infra.repositories.budget import SQLModelBudgetRepository
from ...logging_config import get_logger
from ..common import owner_id, request_json, serialize_budget, validate_form
from . import bp
from .forms import BudgetForm

logger = get_logger(__name__)


def _repository() -> BudgetRepository:
    return SQLModelBudgetRepository(session_scope)


@bp.get("")
def list_budgets():
    budgets = _repository().list_for_owner(owner_id=owner_id())
    return jsonify([serialize_budget(budget) for budget in budgets])


@bp.post("")
def create_budget():
    values = validate_form(BudgetForm, request_json())
    budget = _repository().create(values, owner_id=owner_id())
    logger.info(
        "Budget created",
        extra={"budget_id": budget.id, "category": budget.category, "period": budget.period},
    )
    return jsonify(serialize_budget(budget)), 201


@bp.put("/<budget_id>")
def update_budget(budget_id: str):
    repo = _repository()
    existing = repo.get_by_id(budget_id, owner_id=owner_id())
    if existing is None:
        raise RecordNotFoundError("Budget not found")

    changes = validate_form(BudgetForm, request_json(), existing=serialize_budget(existing))
    budget = repo.update(budget_id, changes, owner_id=owner_id())
    if budget is None:
        raise RecordNotFoundError("Budget not found")
    logger.info("Budget updated", extra={"budget_id": budget_id, "fields": sorted(changes)})
    return jsonify(serialize_budget(budget))


@bp.delete("/<budget_id>")
def delete_budget(budget_id: str):
    if not _repository().delete(budget_id, owner_id=owner_id()):
        raise RecordNotFoundError("Budget not found")
    logger.info("Budget deleted", extra={"budget_id": budget_id})
    return jsonify({"success": True})
