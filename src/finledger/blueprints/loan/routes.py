"""Loan calculator routes."""

from __future__ import annotations

from flask import current_app, jsonify
from pydantic import ValidationError

from ...errors import InvalidInputError
from ...logging_config import get_logger
from ...services.loans import (
    amortization_schedule,
    compute_loan,
    schedule_summary,
    schedule_to_dicts,
)
from ..common import request_json, validation_details
from . import bp
from .forms import LoanForm

logger = get_logger(__name__)


def _parse_form() -> LoanForm:
    try:
        return LoanForm.model_validate(request_json())
    except ValidationError as exc:
        raise InvalidInputError(
            "Invalid loan parameters", details=validation_details(exc)
        ) from exc


@bp.post("/assess")
def assess():
    """Monthly payment breakdown and affordability against monthly income.

    ``monthlyIncome`` falls back to the configured default when omitted.
    """

    form = _parse_form()
    config = current_app.config["FINLEDGER_CONFIG"]
    monthly_income = (
        form.monthly_income if form.monthly_income is not None else config.DEFAULT_MONTHLY_INCOME
    )
    result = compute_loan(
        form.to_loan_input(),
        monthly_income,
        mortgage_limit=config.MORTGAGE_RATIO_LIMIT,
        debt_limit=config.DEBT_RATIO_LIMIT,
    )
    logger.info(
        "Loan assessed",
        extra={"mortgage_ratio": round(result.mortgage_ratio, 2), "affordable": result.is_affordable},
    )
    return jsonify({**result.to_dict(), "monthlyIncome": monthly_income})


@bp.post("/schedule")
def schedule():
    """Full amortization schedule with totals."""

    form = _parse_form()
    rows = amortization_schedule(form.to_loan_input())
    months, total_paid, total_interest = schedule_summary(rows)
    return jsonify(
        {
            "months": months,
            "totalPaid": total_paid,
            "totalInterest": total_interest,
            "schedule": schedule_to_dicts(rows),
        }
    )
