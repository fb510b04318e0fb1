"""Protocol definitions for persistence collaborators.

The engine never talks to storage directly; it hands finished outcomes to an
object satisfying ComparisonStore.
"""

from typing import Protocol, runtime_checkable

from rent_vs_etf.models.db import ComparisonRecord
from rent_vs_etf.models.results import ComparisonOutcome


@runtime_checkable
class ComparisonStore(Protocol):
    async def add(self, outcome: ComparisonOutcome) -> ComparisonRecord:
        """Append a computed comparison; assigns id and created_at."""
        ...

    async def get(self, comparison_id: int) -> ComparisonRecord | None:
        """Fetch one saved comparison, or None if it does not exist."""
        ...

    async def list_recent(
        self, limit: int | None = None, offset: int = 0
    ) -> list[ComparisonRecord]:
        """Saved comparisons, newest first."""
        ...
