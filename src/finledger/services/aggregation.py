"""Aggregations over income and expense records for dashboards and analysis.

Every function here is pure. Records may be SQLModel rows or plain mappings;
each needs an ``amount``, a date (``occurred_on`` on rows, ``date`` in
mappings), a ``category`` and, for income, a ``type``.

Sums are accumulated as ``Decimal`` so the result does not depend on record
order, then exposed as floats.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Mapping, Sequence

from ..constants.categories import EXPENSE_CATEGORIES, INCOME_TYPES
from ..errors import ParseError

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")


def record_field(record: Any, name: str, default: Any = None) -> Any:
    if isinstance(record, Mapping):
        return record.get(name, default)
    return getattr(record, name, default)


def parse_amount(value: Any) -> Decimal:
    """Read a record amount as ``Decimal``; raise ``ParseError`` if it is not numeric."""

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, bool) or value is None:
        raise ParseError(f"Amount {value!r} is not numeric")
    elif isinstance(value, int):
        amount = Decimal(value)
    elif isinstance(value, float):
        amount = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            amount = Decimal(value.strip())
        except InvalidOperation as exc:
            raise ParseError(f"Amount {value!r} is not numeric") from exc
    else:
        raise ParseError(f"Amount {value!r} is not numeric")

    if not amount.is_finite():
        raise ParseError(f"Amount {value!r} is not a finite number")
    return amount


def parse_date(value: Any) -> date:
    """Coerce a date, datetime or ISO ``YYYY-MM-DD`` string into a ``date``."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError as exc:
            raise ParseError(f"Date {value!r} is not a valid YYYY-MM-DD date") from exc
    raise ParseError(f"Date {value!r} is not a valid date")


def record_date(record: Any) -> date:
    raw = record_field(record, "occurred_on")
    if raw is None:
        raw = record_field(record, "date")
    return parse_date(raw)


def month_key(value: date) -> str:
    """Normalized ``YYYY-MM`` key for a calendar date."""
    return f"{value.year:04d}-{value.month:02d}"


def filter_by_date_range(
    records: Iterable[Any],
    start_date: date | str | None = None,
    end_date: date | str | None = None,
) -> list[Any]:
    """Keep records whose date lies in ``[start_date, end_date]``; either bound may be open."""

    start = parse_date(start_date) if start_date else None
    end = parse_date(end_date) if end_date else None
    kept = []
    for record in records:
        when = record_date(record)
        if start is not None and when < start:
            continue
        if end is not None and when > end:
            continue
        kept.append(record)
    return kept


def sort_by_date_desc(records: Iterable[Any]) -> list[Any]:
    """Newest first, the ordering used by every list endpoint."""
    return sorted(records, key=record_date, reverse=True)


def _total(records: Iterable[Any]) -> Decimal:
    return sum((parse_amount(record_field(r, "amount")) for r in records), _ZERO)


def _grouped(records: Iterable[Any], key: str) -> dict[str, Decimal]:
    totals: dict[str, Decimal] = {}
    for record in records:
        group = record_field(record, key)
        totals[group] = totals.get(group, _ZERO) + parse_amount(record_field(record, "amount"))
    return totals


def sum_by_category(records: Iterable[Any]) -> dict[str, float]:
    """Total ``amount`` per category, keyed in first-seen order."""

    return {category: float(total) for category, total in _grouped(records, "category").items()}


def sum_by_type(records: Iterable[Any]) -> dict[str, float]:
    """Total ``amount`` per income type, keyed in first-seen order."""

    return {kind: float(total) for kind, total in _grouped(records, "type").items()}


@dataclass(frozen=True, slots=True)
class MonthlyBucket:
    """Totals for one calendar month."""

    month: str
    totals: dict[str, float] = field(default_factory=dict)

    @property
    def total(self) -> float:
        return float(sum((Decimal(repr(v)) for v in self.totals.values()), _ZERO))

    def to_dict(self) -> dict[str, Any]:
        return {"month": self.month, **self.totals}


def sum_by_month(records: Iterable[Any], kind: str = "expense") -> list[MonthlyBucket]:
    """Group records by ``YYYY-MM`` (ascending).

    Income buckets hold one total per income type (the three known types are
    always present); expense buckets hold a single ``total``.
    """

    if kind not in ("income", "expense"):
        raise ValueError(f"Unknown record kind {kind!r}")
    by_type = kind == "income"

    months: dict[str, dict[str, Decimal]] = {}
    for record in records:
        key = month_key(record_date(record))
        if key not in months:
            months[key] = {t: _ZERO for t in INCOME_TYPES} if by_type else {"total": _ZERO}
        bucket = months[key]
        slot = record_field(record, "type") if by_type else "total"
        bucket[slot] = bucket.get(slot, _ZERO) + parse_amount(record_field(record, "amount"))

    return [
        MonthlyBucket(month=key, totals={name: float(value) for name, value in months[key].items()})
        for key in sorted(months)
    ]


def monthly_trend(income: Iterable[Any], expenses: Iterable[Any]) -> list[dict[str, Any]]:
    """Income, expenses and net income per month, ascending."""

    table: dict[str, list[Decimal]] = defaultdict(lambda: [_ZERO, _ZERO])
    for record in income:
        table[month_key(record_date(record))][0] += parse_amount(record_field(record, "amount"))
    for record in expenses:
        table[month_key(record_date(record))][1] += parse_amount(record_field(record, "amount"))

    return [
        {
            "month": key,
            "income": float(table[key][0]),
            "expenses": float(table[key][1]),
            "netIncome": float(table[key][0] - table[key][1]),
        }
        for key in sorted(table)
    ]


@dataclass(frozen=True, slots=True)
class SummaryResult:
    """Headline numbers for a period."""

    total_income: float
    total_expenses: float
    net_income: float
    savings_rate: float

    def to_dict(self) -> dict[str, float]:
        return {
            "totalIncome": self.total_income,
            "totalExpenses": self.total_expenses,
            "netIncome": self.net_income,
            "savingsRate": self.savings_rate,
        }


def compute_summary(
    income_records: Iterable[Any], expense_records: Iterable[Any]
) -> SummaryResult:
    """Totals, net income and savings rate (percent; zero when there is no income)."""

    total_income = _total(income_records)
    total_expenses = _total(expense_records)
    net_income = total_income - total_expenses
    savings_rate = net_income / total_income * _HUNDRED if total_income > 0 else _ZERO
    return SummaryResult(
        total_income=float(total_income),
        total_expenses=float(total_expenses),
        net_income=float(net_income),
        savings_rate=float(savings_rate),
    )


def expense_ratio(summary: SummaryResult) -> float:
    """Expenses as a percentage of income; zero when there is no income."""

    if summary.total_income <= 0:
        return 0.0
    return summary.total_expenses / summary.total_income * 100


@dataclass(frozen=True, slots=True)
class ProgressResult:
    """Spend against a category budget."""

    category: str
    total: float
    budget_amount: float
    remaining: float
    percent_used: float
    record_count: int = 0

    @property
    def is_over_budget(self) -> bool:
        return self.remaining < 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.category,
            "total": self.total,
            "budgetAmount": self.budget_amount,
            "remaining": self.remaining,
            "percentUsed": self.percent_used,
            "recordCount": self.record_count,
            "isOverBudget": self.is_over_budget,
        }


def find_budget(category: str, budgets: Iterable[Any]) -> Any | None:
    """First budget for ``category``, or ``None``."""

    return next((b for b in budgets if record_field(b, "category") == category), None)


def budget_progress(
    category: str, records: Iterable[Any], budgets: Iterable[Any]
) -> ProgressResult:
    """Compare spend in ``category`` with its budget.

    Unknown categories and missing budgets count as zero. ``percent_used`` is
    capped at 100; ``remaining`` goes negative on overspend.
    """

    matching = [r for r in records if record_field(r, "category") == category]
    total = _total(matching)
    budget = find_budget(category, budgets)
    budget_amount = parse_amount(record_field(budget, "amount")) if budget is not None else _ZERO

    if budget_amount > 0:
        percent_used = min(total / budget_amount * _HUNDRED, _HUNDRED)
    else:
        percent_used = _ZERO

    return ProgressResult(
        category=category,
        total=float(total),
        budget_amount=float(budget_amount),
        remaining=float(budget_amount - total),
        percent_used=float(percent_used),
        record_count=len(matching),
    )


def budget_overview(
    records: Sequence[Any],
    budgets: Sequence[Any],
    categories: Iterable[str] | None = None,
) -> list[ProgressResult]:
    """Progress for each expense category, then any extra categories seen in ``records``."""

    ordered = list(categories) if categories is not None else list(EXPENSE_CATEGORIES)
    for record in records:
        category = record_field(record, "category")
        if category not in ordered:
            ordered.append(category)
    return [budget_progress(category, records, budgets) for category in ordered]


__all__ = [
    "MonthlyBucket",
    "ProgressResult",
    "SummaryResult",
    "budget_overview",
    "budget_progress",
    "compute_summary",
    "expense_ratio",
    "filter_by_date_range",
    "find_budget",
    "month_key",
    "monthly_trend",
    "parse_amount",
    "parse_date",
    "record_date",
    "record_field",
    "sort_by_date_desc",
    "sum_by_category",
    "sum_by_month",
    "sum_by_type",
]
