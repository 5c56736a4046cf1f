"""Entrepreneurship project ledger summaries (plan vs actual)."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterable

from .aggregation import parse_amount, record_field

_ZERO = Decimal("0")


@dataclass(slots=True)
class ProjectSummary:
    """Planned and actual totals for a project ledger."""

    planned_revenue: float = 0.0
    planned_expense: float = 0.0
    actual_revenue: float = 0.0
    actual_expense: float = 0.0

    @property
    def planned_profit(self) -> float:
        return self.planned_revenue - self.planned_expense

    @property
    def actual_profit(self) -> float:
        return self.actual_revenue - self.actual_expense

    def to_dict(self) -> dict[str, float]:
        return {
            "plannedRevenue": self.planned_revenue,
            "plannedExpense": self.planned_expense,
            "plannedProfit": self.planned_profit,
            "actualRevenue": self.actual_revenue,
            "actualExpense": self.actual_expense,
            "actualProfit": self.actual_profit,
        }


@dataclass(slots=True)
class CategoryVariance:
    """Lightweight DTO for reporting plan vs actual per accounting category."""

    type: str
    category: str
    planned: float
    actual: float

    @property
    def delta(self) -> float:
        return self.actual - self.planned

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "category": self.category,
            "planned": self.planned,
            "actual": self.actual,
            "delta": self.delta,
        }


def project_summary(records: Iterable[Any]) -> ProjectSummary:
    """Sum revenue and expense records, split by the ``is_planned`` flag."""

    buckets = {
        (True, "revenue"): _ZERO,
        (True, "expense"): _ZERO,
        (False, "revenue"): _ZERO,
        (False, "expense"): _ZERO,
    }
    for record in records:
        key = (bool(_is_planned(record)), record_field(record, "type"))
        if key not in buckets:
            continue
        buckets[key] += parse_amount(record_field(record, "amount"))

    return ProjectSummary(
        planned_revenue=float(buckets[(True, "revenue")]),
        planned_expense=float(buckets[(True, "expense")]),
        actual_revenue=float(buckets[(False, "revenue")]),
        actual_expense=float(buckets[(False, "expense")]),
    )


def plan_vs_actual(records: Iterable[Any]) -> list[CategoryVariance]:
    """Compose planned vs actual amounts per (type, category), revenue first."""

    planned: dict[tuple[str, str], Decimal] = {}
    actual: dict[tuple[str, str], Decimal] = {}
    for record in records:
        key = (record_field(record, "type"), record_field(record, "category"))
        target = planned if _is_planned(record) else actual
        target[key] = target.get(key, _ZERO) + parse_amount(record_field(record, "amount"))

    type_order = {"revenue": 0, "expense": 1}
    all_keys = set(planned) | set(actual)
    ordered = sorted(all_keys, key=lambda k: (type_order.get(k[0], 2), k[0], k[1]))

    return [
        CategoryVariance(
            type=record_type,
            category=category,
            planned=float(planned.get((record_type, category), _ZERO)),
            actual=float(actual.get((record_type, category), _ZERO)),
        )
        for record_type, category in ordered
    ]


def _is_planned(record: Any) -> bool:
    value = record_field(record, "is_planned")
    if value is None:
        value = record_field(record, "isPlanned", False)
    return bool(value)


__all__ = ["CategoryVariance", "ProjectSummary", "plan_vs_actual", "project_summary"]
