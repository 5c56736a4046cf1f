"""Concrete repository implementations using SQLModel."""

from .budget import SQLModelBudgetRepository
from .expense import SQLModelExpenseRepository
from .income import SQLModelIncomeRepository
from .project import SQLModelProjectRepository

__all__ = [
    "SQLModelBudgetRepository",
    "SQLModelExpenseRepository",
    "SQLModelIncomeRepository",
    "SQLModelProjectRepository",
]
