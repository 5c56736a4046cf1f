"""Tests for the pydantic request forms and the shared partial-update helper."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from finledger.blueprints.budgets.forms import BudgetForm
from finledger.blueprints.common import validate_form
from finledger.blueprints.entrepreneurship.forms import ProjectForm, ProjectRecordForm
from finledger.blueprints.expenses.forms import ExpenseForm
from finledger.blueprints.income.forms import IncomeForm
from finledger.blueprints.loan.forms import LoanForm
from finledger.errors import InvalidInputError


def test_income_form_reads_camel_case_aliases():
    form = IncomeForm.model_validate(
        {"type": "salary", "category": "bonus", "amount": "1500.50", "date": "2024-02-01", "isPlanned": True}
    )
    assert form.occurred_on == date(2024, 2, 1)
    assert form.amount == Decimal("1500.50")
    assert form.is_planned is True
    assert form.notes is None


def test_income_form_rejects_mismatched_category():
    with pytest.raises(InvalidInputError) as excinfo:
        IncomeForm.model_validate(
            {"type": "investment", "category": "base", "amount": 10, "date": "2024-02-01"}
        )
    assert "category" in excinfo.value.details


def test_income_form_rejects_negative_amount():
    with pytest.raises(ValidationError):
        IncomeForm.model_validate(
            {"type": "salary", "category": "base", "amount": -1, "date": "2024-02-01"}
        )


def test_expense_form_rejects_unknown_category():
    with pytest.raises(ValidationError):
        ExpenseForm.model_validate({"category": "yachts", "amount": 10, "date": "2024-02-01"})


def test_budget_form_defaults_to_monthly():
    assert BudgetForm.model_validate({"category": "living", "amount": 100}).period == "monthly"
    with pytest.raises(ValidationError):
        BudgetForm.model_validate({"category": "living", "amount": 100, "period": "weekly"})


def test_budget_form_rejects_income_category():
    with pytest.raises(ValidationError):
        BudgetForm.model_validate({"category": "bonus", "amount": 100})


def test_project_form_requires_name():
    with pytest.raises(ValidationError):
        ProjectForm.model_validate({"name": "   ", "startDate": "2024-01-01"})


def test_project_record_form_checks_accounting_category():
    form = ProjectRecordForm.model_validate(
        {"type": "expense", "category": "rent_expense", "subCategory": "Stall", "amount": 800, "date": "2024-01-01"}
    )
    assert form.sub_category == "Stall"
    with pytest.raises(InvalidInputError):
        ProjectRecordForm.model_validate(
            {"type": "revenue", "category": "rent_expense", "amount": 800, "date": "2024-01-01"}
        )


def test_loan_form_builds_loan_input():
    form = LoanForm.model_validate({"loanAmount": 8_000_000, "downPayment": 2_000_000, "loanTerm": 30, "interestRate": 2.1})
    loan = form.to_loan_input()
    assert loan.principal == 6_000_000
    assert form.monthly_income is None


def test_loan_form_range_errors_raise_invalid_input():
    form = LoanForm.model_validate({"loanAmount": 100, "loanTerm": 0})
    with pytest.raises(InvalidInputError):
        form.to_loan_input()


class TestValidateForm:
    def test_full_payload_returns_attribute_names(self):
        values = validate_form(
            ExpenseForm, {"category": "loan", "amount": "22478", "date": "2024-01-10"}
        )
        assert values == {
            "category": "loan",
            "amount": Decimal("22478"),
            "occurred_on": date(2024, 1, 10),
            "description": None,
            "notes": None,
            "is_planned": False,
        }

    def test_errors_are_grouped_by_field(self):
        with pytest.raises(InvalidInputError) as excinfo:
            validate_form(ExpenseForm, {"category": "loan"})
        assert set(excinfo.value.details) >= {"amount", "date"}

    def test_partial_update_returns_only_supplied_fields(self):
        existing = {
            "id": "abc",
            "type": "salary",
            "category": "base",
            "amount": "1000.00",
            "date": "2024-01-05",
            "notes": None,
            "isPlanned": False,
        }
        changes = validate_form(IncomeForm, {"amount": "1200", "isPlanned": True}, existing=existing)
        assert changes == {"amount": Decimal("1200"), "is_planned": True}

    def test_partial_update_still_checks_category_pair(self):
        existing = {"type": "salary", "category": "base", "amount": "1000.00", "date": "2024-01-05"}
        with pytest.raises(InvalidInputError):
            validate_form(IncomeForm, {"type": "investment"}, existing=existing)
