"""Blueprint exports."""

from . import analysis, budgets, catalog, entrepreneurship, expenses, income, loan

__all__ = [
    "analysis",
    "budgets",
    "catalog",
    "entrepreneurship",
    "expenses",
    "income",
    "loan",
]
