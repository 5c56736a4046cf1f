"""Helpers shared by the JSON blueprints: owner scoping, payload parsing, serialization."""

from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional, TypeVar

from flask import current_app, request
from pydantic import BaseModel, ValidationError

from ..constants.categories import category_icon, category_label
from ..errors import InvalidInputError, ParseError
from ..services.aggregation import parse_date
from ..services.formatting import format_amount

FormT = TypeVar("FormT", bound=BaseModel)


def owner_id() -> str:
    """Owner id every request is scoped to (the configured demo user)."""
    return current_app.config["FINLEDGER_CONFIG"].DEMO_USER_ID


def request_json() -> dict[str, Any]:
    """Return the request body, which must be a JSON object."""

    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise InvalidInputError(
            "Request body must be a JSON object", details={"body": ["Expected a JSON object."]}
        )
    return payload


def date_range_args() -> tuple[Optional[date], Optional[date]]:
    """Parse the optional ``startDate`` / ``endDate`` query parameters."""

    bounds: list[Optional[date]] = []
    for name in ("startDate", "endDate"):
        raw = request.args.get(name, "").strip()
        if not raw:
            bounds.append(None)
            continue
        try:
            bounds.append(parse_date(raw))
        except ParseError as exc:
            raise InvalidInputError(
                f"Invalid {name}", details={name: ["Enter a valid date (YYYY-MM-DD)."]}
            ) from exc
    return bounds[0], bounds[1]


def validation_details(exc: ValidationError) -> dict[str, list[str]]:
    """Flatten pydantic errors into ``{field: [messages]}``."""

    structured: dict[str, list[str]] = {}
    for error in exc.errors(include_url=False):
        loc = error.get("loc", ())
        key = str(loc[0]) if loc else "__root__"
        structured.setdefault(key, []).append(error.get("msg", "Invalid value"))
    return structured


def validate_form(
    form_cls: type[FormT],
    data: Mapping[str, Any],
    *,
    existing: Optional[Mapping[str, Any]] = None,
) -> dict[str, Any]:
    """Validate ``data`` and return model field values keyed by attribute name.

    With ``existing`` (the serialized stored row) the payload is a partial
    update: it is merged over the stored values so cross-field rules still
    apply, and only the fields present in ``data`` are returned.
    """

    merged = {**existing, **data} if existing is not None else dict(data)
    try:
        form = form_cls.model_validate(merged)
    except ValidationError as exc:
        raise InvalidInputError("Invalid request data", details=validation_details(exc)) from exc

    values = form.model_dump()
    if existing is None:
        return values

    supplied = set(data)
    return {
        name: values[name]
        for name, info in form_cls.model_fields.items()
        if name in supplied or (info.alias is not None and info.alias in supplied)
    }


def _iso(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def serialize_income(record) -> dict[str, Any]:
    return {
        "id": record.id,
        "ownerId": record.owner_id,
        "type": record.type,
        "category": record.category,
        "categoryLabel": category_label(record.category, income_type=record.type),
        "amount": format_amount(record.amount),
        "date": _iso(record.occurred_on),
        "notes": record.notes,
        "isPlanned": record.is_planned,
        "createdAt": _iso(record.created_at),
    }


def serialize_expense(record) -> dict[str, Any]:
    return {
        "id": record.id,
        "ownerId": record.owner_id,
        "category": record.category,
        "categoryLabel": category_label(record.category),
        "icon": category_icon(record.category),
        "amount": format_amount(record.amount),
        "date": _iso(record.occurred_on),
        "description": record.description,
        "notes": record.notes,
        "isPlanned": record.is_planned,
        "createdAt": _iso(record.created_at),
    }


def serialize_budget(budget) -> dict[str, Any]:
    return {
        "id": budget.id,
        "ownerId": budget.owner_id,
        "category": budget.category,
        "amount": format_amount(budget.amount),
        "period": budget.period,
        "createdAt": _iso(budget.created_at),
    }


def serialize_project(project) -> dict[str, Any]:
    return {
        "id": project.id,
        "ownerId": project.owner_id,
        "name": project.name,
        "description": project.description,
        "startDate": _iso(project.start_date),
        "status": project.status,
        "createdAt": _iso(project.created_at),
    }


def serialize_project_record(record) -> dict[str, Any]:
    return {
        "id": record.id,
        "projectId": record.project_id,
        "type": record.type,
        "category": record.category,
        "subCategory": record.sub_category,
        "amount": format_amount(record.amount),
        "description": record.description,
        "date": _iso(record.occurred_on),
        "isPlanned": record.is_planned,
        "createdAt": _iso(record.created_at),
    }


__all__ = [
    "date_range_args",
    "owner_id",
    "request_json",
    "serialize_budget",
    "serialize_expense",
    "serialize_income",
    "serialize_project",
    "serialize_project_record",
    "validate_form",
    "validation_details",
]
