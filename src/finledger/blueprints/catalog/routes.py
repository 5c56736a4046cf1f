"""Static category tables for the dashboard."""

from __future__ import annotations

from flask import jsonify

from ...constants.categories import catalog
from . import bp


@bp.get("")
def list_categories():
    return jsonify(catalog())
