"""
Centralized category definitions shared by forms, aggregations and the API.

Income categories are keyed by income type: each type carries its own fixed
category set, so a (type, category) pair can be checked when a record is built.
Project ledger categories follow the same shape keyed by revenue/expense.
Labels and icons are presentation tables only.
"""

from __future__ import annotations

from ..errors import InvalidInputError

# Income types and their category sets
INCOME_TYPES = ("salary", "investment", "business")

INCOME_CATEGORIES: dict[str, dict[str, str]] = {
    "salary": {
        "base": "Base salary",
        "bonus": "Year-end bonus",
        "overtime": "Overtime pay",
        "allowance": "Allowance",
        "other": "Other salary",
    },
    "investment": {
        "dividend": "Stock dividends",
        "interest": "Bond interest",
        "fund": "Fund returns",
        "rent": "Rental income",
        "other": "Other investment",
    },
    "business": {
        "revenue": "Business revenue",
        "side": "Side business",
        "consulting": "Consulting fees",
        "royalty": "Royalties",
        "other": "Other business",
    },
}

INCOME_TYPE_LABELS = {
    "salary": "Salary income",
    "investment": "Investment income",
    "business": "Business income",
}

# Expense categories
EXPENSE_CATEGORIES: dict[str, str] = {
    "living": "Living expenses",
    "loan": "Loan payments",
    "insurance": "Insurance",
    "investment": "Investment spending",
    "entertainment": "Entertainment",
    "other": "Other expenses",
}

EXPENSE_CATEGORY_ICONS = {
    "living": "fas fa-utensils",
    "loan": "fas fa-home",
    "insurance": "fas fa-shield-alt",
    "investment": "fas fa-chart-line",
    "entertainment": "fas fa-gamepad",
    "other": "fas fa-ellipsis-h",
}
DEFAULT_ICON = "fas fa-circle"

BUDGET_PERIODS = ("monthly", "yearly")

PROJECT_STATUSES = {
    "active": "In progress",
    "completed": "Completed",
    "paused": "Paused",
}

# Project ledger accounting categories
PROJECT_RECORD_TYPES = ("revenue", "expense")

PROJECT_CATEGORIES: dict[str, dict[str, str]] = {
    "revenue": {
        "sales_revenue": "Sales revenue",
        "service_revenue": "Service revenue",
        "other_revenue": "Other operating revenue",
    },
    "expense": {
        "cost_of_goods_sold": "Cost of goods sold",
        "marketing_expense": "Marketing",
        "admin_expense": "Administrative",
        "research_development": "Research and development",
        "rent_expense": "Rent",
        "salary_expense": "Salaries",
        "equipment_expense": "Equipment",
        "material_expense": "Materials",
        "other_expense": "Other operating expenses",
    },
}

PROJECT_TYPE_LABELS = {
    "revenue": "Operating revenue",
    "expense": "Operating expenses",
}


def income_categories_for(income_type: str) -> tuple[str, ...]:
    """Return the category keys allowed for ``income_type`` (empty when unknown)."""

    return tuple(INCOME_CATEGORIES.get(income_type, {}))


def validate_income_category(income_type: str, category: str) -> None:
    """Raise ``InvalidInputError`` unless ``category`` belongs to ``income_type``."""

    if income_type not in INCOME_CATEGORIES:
        raise InvalidInputError(
            f"Unknown income type {income_type!r}",
            details={"type": [f"Choose one of: {', '.join(INCOME_TYPES)}."]},
        )
    allowed_categories = income_categories_for(income_type)
    if category not in allowed_categories:
        allowed = ", ".join(allowed_categories)
        raise InvalidInputError(
            f"Category {category!r} is not valid for {income_type} income",
            details={"category": [f"Choose one of: {allowed}."]},
        )


def validate_project_category(record_type: str, category: str) -> None:
    """Raise ``InvalidInputError`` unless ``category`` belongs to ``record_type``."""

    if record_type not in PROJECT_CATEGORIES:
        raise InvalidInputError(
            f"Unknown project record type {record_type!r}",
            details={"type": [f"Choose one of: {', '.join(PROJECT_RECORD_TYPES)}."]},
        )
    if category not in PROJECT_CATEGORIES[record_type]:
        allowed = ", ".join(PROJECT_CATEGORIES[record_type])
        raise InvalidInputError(
            f"Category {category!r} is not valid for project {record_type}",
            details={"category": [f"Choose one of: {allowed}."]},
        )


def is_expense_category(category: str) -> bool:
    """Check if a category key is a known expense category."""
    return category in EXPENSE_CATEGORIES


def category_label(category: str, *, income_type: str | None = None) -> str:
    """Return the display label for a category, falling back to the raw key."""

    if income_type is not None:
        return INCOME_CATEGORIES.get(income_type, {}).get(category, category)
    return EXPENSE_CATEGORIES.get(category, category)


def category_icon(category: str) -> str:
    return EXPENSE_CATEGORY_ICONS.get(category, DEFAULT_ICON)


def catalog() -> dict[str, object]:
    """Return every static table in one JSON-friendly mapping."""

    return {
        "incomeTypes": [
            {
                "value": income_type,
                "label": INCOME_TYPE_LABELS[income_type],
                "categories": [
                    {"value": key, "label": label}
                    for key, label in INCOME_CATEGORIES[income_type].items()
                ],
            }
            for income_type in INCOME_TYPES
        ],
        "expenseCategories": [
            {"value": key, "label": label, "icon": category_icon(key)}
            for key, label in EXPENSE_CATEGORIES.items()
        ],
        "budgetPeriods": list(BUDGET_PERIODS),
        "projectStatuses": [
            {"value": key, "label": label} for key, label in PROJECT_STATUSES.items()
        ],
        "projectCategories": [
            {
                "value": record_type,
                "label": PROJECT_TYPE_LABELS[record_type],
                "categories": [
                    {"value": key, "label": label}
                    for key, label in PROJECT_CATEGORIES[record_type].items()
                ],
            }
            for record_type in PROJECT_RECORD_TYPES
        ],
    }
