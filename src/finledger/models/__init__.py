"""SQLModel table exports."""

from .budget import Budget
from .expense import ExpenseRecord
from .income import IncomeRecord
from .project import EntrepreneurshipProject, ProjectFinancialRecord

__all__ = [
    "Budget",
    "EntrepreneurshipProject",
    "ExpenseRecord",
    "IncomeRecord",
    "ProjectFinancialRecord",
]
