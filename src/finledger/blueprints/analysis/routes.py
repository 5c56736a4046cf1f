"""Financial analysis routes: period summary, dashboard overview and budget progress."""

from __future__ import annotations

from flask import jsonify

from ...extensions import session_scope
from ...infra.repositories import (
    SQLModelBudgetRepository,
    SQLModelExpenseRepository,
    SQLModelIncomeRepository,
)
from ...services.aggregation import (
    budget_overview,
    budget_progress,
    compute_summary,
    expense_ratio,
    monthly_trend,
    sum_by_category,
    sum_by_month,
    sum_by_type,
)
from ..common import date_range_args, owner_id
from . import bp

# Expenses at or below this share of income count as healthy.
HEALTHY_EXPENSE_RATIO = 80.0


def _load_records():
    start_date, end_date = date_range_args()
    scope = {"owner_id": owner_id(), "start_date": start_date, "end_date": end_date}
    income = SQLModelIncomeRepository(session_scope).list_for_owner(**scope)
    expenses = SQLModelExpenseRepository(session_scope).list_for_owner(**scope)
    return income, expenses


@bp.get("/summary")
def summary():
    """Totals, net income and savings rate over the requested date range."""

    income, expenses = _load_records()
    return jsonify(compute_summary(income, expenses).to_dict())


@bp.get("/overview")
def overview():
    """Everything the analysis dashboard draws, in one payload."""

    income, expenses = _load_records()
    budgets = SQLModelBudgetRepository(session_scope).list_for_owner(owner_id=owner_id())

    totals = compute_summary(income, expenses)
    ratio = expense_ratio(totals)
    return jsonify(
        {
            "summary": totals.to_dict(),
            "expenseRatio": ratio,
            "isExpenseRatioHealthy": ratio <= HEALTHY_EXPENSE_RATIO,
            "incomeByType": sum_by_type(income),
            "incomeByCategory": sum_by_category(income),
            "expensesByCategory": sum_by_category(expenses),
            "incomeByMonth": [bucket.to_dict() for bucket in sum_by_month(income, "income")],
            "expensesByMonth": [bucket.to_dict() for bucket in sum_by_month(expenses, "expense")],
            "monthlyTrend": monthly_trend(income, expenses),
            "budgets": [progress.to_dict() for progress in budget_overview(expenses, budgets)],
        }
    )


@bp.get("/budgets/<category>")
def category_budget(category: str):
    """Spend against the budget of a single expense category."""

    _, expenses = _load_records()
    budget = SQLModelBudgetRepository(session_scope).get_for_category(category, owner_id=owner_id())
    budgets = [budget] if budget is not None else []
    return jsonify(budget_progress(category, expenses, budgets).to_dict())
