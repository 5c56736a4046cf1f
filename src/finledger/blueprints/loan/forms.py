"""Loan calculator form."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ...services.loans import LoanInput


class LoanForm(BaseModel):
    """Raw loan scenario as posted by the calculator page.

    Type coercion happens here; range checks live in ``LoanInput.from_values``
    so the CLI and the API reject the same scenarios.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    loan_amount: float = Field(alias="loanAmount", allow_inf_nan=False)
    down_payment: float = Field(default=0.0, alias="downPayment", allow_inf_nan=False)
    loan_term: float = Field(alias="loanTerm", allow_inf_nan=False)
    interest_rate: float = Field(default=0.0, alias="interestRate", allow_inf_nan=False)
    monthly_income: Optional[float] = Field(
        default=None, alias="monthlyIncome", allow_inf_nan=False
    )

    def to_loan_input(self) -> LoanInput:
        return LoanInput.from_values(
            loan_amount=self.loan_amount,
            down_payment=self.down_payment,
            loan_term_years=self.loan_term,
            annual_interest_rate_percent=self.interest_rate,
        )


__all__ = ["LoanForm"]
