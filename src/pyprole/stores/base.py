"""Adventure store interface shared by the remote and in-memory adapters."""

from __future__ import annotations

from typing import Protocol

from pyprole.models.adventure import Adventure, NewAdventure


class AdventureStore(Protocol):
    """CRUD-less-D contract for the ``adventures`` data source."""

    name: str

    async def list(self) -> list[Adventure]:
        """Every record, newest ``created_at`` first."""
        ...

    async def get(self, adventure_id: str) -> Adventure:
        """One record; raises ``ProleNotFoundError`` when absent."""
        ...

    async def create(self, new: NewAdventure) -> Adventure:
        """Insert a record, assigning id and timestamps."""
        ...

    async def set_bounty(self, adventure_id: str, new_amount: float) -> Adventure:
        """Overwrite ``bounty_current`` and refresh ``updated_at``."""
        ...
