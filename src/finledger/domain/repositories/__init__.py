"""Repository protocol definitions for domain layer."""

from .budget import BudgetRepository
from .project import ProjectRepository
from .records import ExpenseRepository, IncomeRepository

__all__ = [
    "BudgetRepository",
    "ExpenseRepository",
    "IncomeRepository",
    "ProjectRepository",
]
