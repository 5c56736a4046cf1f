"""Service module exports."""

from . import aggregation, formatting, loans, projects, seed

__all__ = [
    "aggregation",
    "formatting",
    "loans",
    "projects",
    "seed",
]
