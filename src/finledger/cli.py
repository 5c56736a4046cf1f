"""Flask CLI commands for FinLedger."""

from __future__ import annotations

import click
from flask import current_app

from .errors import FinLedgerError
from .services.formatting import format_currency, format_percent


def init_app(app) -> None:
    """Register CLI commands on the Flask app."""

    @app.cli.command("finledger-seed")
    @click.option("--force", is_flag=True, default=False, help="Seed even if data already exists")
    @click.option("--owner", default=None, help="Owner id to seed (defaults to the demo user)")
    def finledger_seed(force: bool, owner: str | None) -> None:
        """Seed demo income, expenses, budgets and a sample project."""

        # Import here to avoid circular imports at module import time
        from .extensions import session_scope
        from .services.seed import seed_demo_data

        owner_id = owner or current_app.config["FINLEDGER_CONFIG"].DEMO_USER_ID
        click.echo(f"Seeding demo data for {owner_id}...")
        summary = seed_demo_data(session_scope, owner_id, force=force)
        click.echo(
            f"Income: {summary.income}, expenses: {summary.expenses}, "
            f"budgets: {summary.budgets}, projects: {summary.projects}, "
            f"project records: {summary.project_records}"
        )

    @app.cli.command("finledger-loan")
    @click.option("--loan-amount", type=float, default=8_000_000, show_default=True)
    @click.option("--down-payment", type=float, default=2_000_000, show_default=True)
    @click.option("--term", type=float, default=30, show_default=True, help="Loan term in years")
    @click.option("--rate", type=float, default=2.1, show_default=True, help="Annual rate in percent")
    @click.option("--income", type=float, default=None, help="Monthly income (defaults to config)")
    def finledger_loan(
        loan_amount: float, down_payment: float, term: float, rate: float, income: float | None
    ) -> None:
        """Print the affordability assessment and payoff totals for a loan."""

        from .services.loans import (
            LoanInput,
            amortization_schedule,
            compute_loan,
            schedule_summary,
        )

        config = current_app.config["FINLEDGER_CONFIG"]
        monthly_income = income if income is not None else config.DEFAULT_MONTHLY_INCOME
        try:
            loan = LoanInput.from_values(
                loan_amount=loan_amount,
                down_payment=down_payment,
                loan_term_years=term,
                annual_interest_rate_percent=rate,
            )
            result = compute_loan(
                loan,
                monthly_income,
                mortgage_limit=config.MORTGAGE_RATIO_LIMIT,
                debt_limit=config.DEBT_RATIO_LIMIT,
            )
            months, total_paid, total_interest = schedule_summary(amortization_schedule(loan))
        except FinLedgerError as exc:
            raise click.ClickException(exc.message) from exc

        click.echo(f"Monthly payment:   {format_currency(result.monthly_payment)}")
        click.echo(f"Principal portion: {format_currency(result.principal_payment)}")
        click.echo(f"Interest portion:  {format_currency(result.interest_payment)}")
        click.echo(f"Mortgage ratio:    {format_percent(result.mortgage_ratio)}")
        click.echo(f"Debt ratio:        {format_percent(result.debt_ratio)}")
        click.echo(f"Affordable:        {'yes' if result.is_affordable else 'no'}")
        click.echo(
            f"Payoff: {months} months, {format_currency(total_paid)} paid, "
            f"{format_currency(total_interest)} interest"
        )
