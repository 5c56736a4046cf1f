"""Loan affordability calculator.

Fixed-rate amortization: the monthly payment, the first-period split between
principal and interest, affordability ratios against monthly income, and the
full month-by-month schedule.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from ..errors import DivisionByZeroError, InvalidInputError

MORTGAGE_RATIO_LIMIT = 30.0
DEBT_RATIO_LIMIT = 40.0
MAX_LOAN_TERM_YEARS = 100


def _to_float(value: Any, field: str) -> float:
    if isinstance(value, bool):
        raise InvalidInputError(f"{field} must be a number", details={field: ["Not a number."]})
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise InvalidInputError(
            f"{field} must be a number", details={field: ["Not a number."]}
        ) from exc
    if not math.isfinite(number):
        raise InvalidInputError(f"{field} must be finite", details={field: ["Not finite."]})
    return number


@dataclass(frozen=True, slots=True)
class LoanInput:
    """A loan scenario; amounts in currency units, term in years, rate in percent."""

    loan_amount: float
    down_payment: float
    loan_term_years: float
    annual_interest_rate_percent: float

    @classmethod
    def from_values(
        cls,
        *,
        loan_amount: Any,
        down_payment: Any,
        loan_term_years: Any,
        annual_interest_rate_percent: Any,
    ) -> "LoanInput":
        """Parse raw user input, rejecting malformed numbers and impossible scenarios."""

        loan = cls(
            loan_amount=_to_float(loan_amount, "loanAmount"),
            down_payment=_to_float(down_payment, "downPayment"),
            loan_term_years=_to_float(loan_term_years, "loanTerm"),
            annual_interest_rate_percent=_to_float(annual_interest_rate_percent, "interestRate"),
        )
        errors: dict[str, list[str]] = {}
        if loan.loan_amount <= 0:
            errors["loanAmount"] = ["Loan amount must be greater than zero."]
        if loan.down_payment < 0:
            errors["downPayment"] = ["Down payment cannot be negative."]
        elif loan.down_payment > loan.loan_amount:
            errors["downPayment"] = ["Down payment cannot exceed the loan amount."]
        if loan.loan_term_years <= 0:
            errors["loanTerm"] = ["Loan term must be greater than zero."]
        elif loan.loan_term_years > MAX_LOAN_TERM_YEARS:
            errors["loanTerm"] = [f"Loan term cannot exceed {MAX_LOAN_TERM_YEARS} years."]
        if loan.annual_interest_rate_percent < 0:
            errors["interestRate"] = ["Interest rate cannot be negative."]
        if errors:
            raise InvalidInputError("Invalid loan parameters", details=errors)
        return loan

    @property
    def principal(self) -> float:
        return self.loan_amount - self.down_payment

    @property
    def monthly_rate(self) -> float:
        return (self.annual_interest_rate_percent / 100) / 12

    @property
    def number_of_payments(self) -> float:
        return self.loan_term_years * 12


@dataclass(frozen=True, slots=True)
class LoanResult:
    """Payment snapshot and affordability verdict for a loan scenario."""

    monthly_payment: float
    principal_payment: float
    interest_payment: float
    debt_ratio: float
    mortgage_ratio: float
    is_affordable: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "monthlyPayment": self.monthly_payment,
            "principalPayment": self.principal_payment,
            "interestPayment": self.interest_payment,
            "debtRatio": self.debt_ratio,
            "mortgageRatio": self.mortgage_ratio,
            "isAffordable": self.is_affordable,
        }


@dataclass(frozen=True, slots=True)
class ScheduleRow:
    """One month of an amortization schedule."""

    period: int
    payment: float
    interest: float
    principal: float
    remaining_balance: float


def monthly_payment(loan: LoanInput) -> float:
    """Return the level monthly payment for ``loan``."""

    principal = loan.principal
    if principal < 0:
        raise InvalidInputError(
            "Down payment exceeds the loan amount",
            details={"downPayment": ["Down payment cannot exceed the loan amount."]},
        )
    if loan.loan_term_years < 0:
        raise InvalidInputError(
            "Loan term cannot be negative", details={"loanTerm": ["Loan term must be positive."]}
        )

    rate = loan.monthly_rate
    payments = loan.number_of_payments
    if payments == 0:
        raise DivisionByZeroError("Amortization schedule has zero payments")
    if rate > 0:
        try:
            # (1 + r)^n - 1 without cancellation for tiny rates
            accrued = math.expm1(payments * math.log1p(rate))
        except OverflowError:
            return principal * rate
        if accrued > 0:
            return principal * rate * ((accrued + 1) / accrued)
    return principal / payments


def compute_loan(
    loan: LoanInput,
    monthly_income: Any,
    *,
    mortgage_limit: float = MORTGAGE_RATIO_LIMIT,
    debt_limit: float = DEBT_RATIO_LIMIT,
) -> LoanResult:
    """Compute the payment breakdown and affordability ratios for ``loan``.

    Ratios are percentages of ``monthly_income``. Other debts are not modelled,
    so the debt ratio equals the mortgage ratio.
    """

    income = _to_float(monthly_income, "monthlyIncome")
    if income <= 0:
        raise InvalidInputError(
            "Monthly income must be greater than zero",
            details={"monthlyIncome": ["Monthly income must be greater than zero."]},
        )

    payment = monthly_payment(loan)
    interest_payment = loan.principal * loan.monthly_rate
    principal_payment = payment - interest_payment

    mortgage_ratio = payment / income * 100
    debt_ratio = mortgage_ratio

    return LoanResult(
        monthly_payment=payment,
        principal_payment=principal_payment,
        interest_payment=interest_payment,
        debt_ratio=debt_ratio,
        mortgage_ratio=mortgage_ratio,
        is_affordable=mortgage_ratio <= mortgage_limit and debt_ratio <= debt_limit,
    )


def amortization_schedule(loan: LoanInput) -> list[ScheduleRow]:
    """Return the month-by-month payoff schedule for ``loan``.

    A fractional month count is rounded up to whole payments; the final row
    absorbs floating-point drift so the balance ends at exactly zero.
    """

    payment = monthly_payment(loan)
    rate = loan.monthly_rate
    periods = math.ceil(loan.number_of_payments)
    balance = loan.principal
    rows: list[ScheduleRow] = []

    for period in range(1, periods + 1):
        interest = balance * rate
        principal_part = payment - interest
        if period == periods or principal_part >= balance:
            principal_part = balance
            rows.append(
                ScheduleRow(
                    period=period,
                    payment=principal_part + interest,
                    interest=interest,
                    principal=principal_part,
                    remaining_balance=0.0,
                )
            )
            break
        balance -= principal_part
        rows.append(
            ScheduleRow(
                period=period,
                payment=payment,
                interest=interest,
                principal=principal_part,
                remaining_balance=balance,
            )
        )

    return rows


def schedule_summary(rows: list[ScheduleRow]) -> tuple[int, float, float]:
    """Return (months, total_paid, total_interest)."""

    if not rows:
        return 0, 0.0, 0.0
    total_paid = sum(row.payment for row in rows)
    total_interest = sum(row.interest for row in rows)
    return len(rows), total_paid, total_interest


def schedule_to_dicts(rows: list[ScheduleRow]) -> list[dict[str, Any]]:
    return [
        {
            "period": row.period,
            "payment": row.payment,
            "interest": row.interest,
            "principal": row.principal,
            "remainingBalance": row.remaining_balance,
        }
        for row in rows
    ]


__all__ = [
    "LoanInput",
    "LoanResult",
    "ScheduleRow",
    "amortization_schedule",
    "compute_loan",
    "monthly_payment",
    "schedule_summary",
    "schedule_to_dicts",
]
