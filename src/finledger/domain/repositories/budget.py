"""Budget repository protocol."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol

from ...models.budget import Budget


class BudgetRepository(Protocol):
    """Repository for managing category budgets."""

    def get_by_id(self, budget_id: str, *, owner_id: str) -> Optional[Budget]:
        """Retrieve a budget by ID."""
        ...

    def get_for_category(self, category: str, *, owner_id: str) -> Optional[Budget]:
        """Get the budget that applies to a category."""
        ...

    def list_for_owner(self, *, owner_id: str) -> list[Budget]:
        """List all budgets."""
        ...

    def create(self, payload: Mapping[str, Any], *, owner_id: str) -> Budget:
        """Create a new budget."""
        ...

    def update(
        self, budget_id: str, changes: Mapping[str, Any], *, owner_id: str
    ) -> Optional[Budget]:
        """Update an existing budget."""
        ...

    def delete(self, budget_id: str, *, owner_id: str) -> bool:
        """Delete a budget by ID."""
        ...
