"""Adventure store backed by the hosted PostgREST table."""

from __future__ import annotations

from pyprole._api import adventures as _adventures_api
from pyprole._transport import Transport
from pyprole.models.adventure import Adventure, NewAdventure


class RemoteAdventureStore:
    """Primary adapter: every call is one HTTP round trip."""

    name = "remote"

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    async def list(self) -> list[Adventure]:
        return await _adventures_api.fetch_adventures(self._transport)

    async def get(self, adventure_id: str) -> Adventure:
        return await _adventures_api.fetch_adventure(self._transport, adventure_id)

    async def create(self, new: NewAdventure) -> Adventure:
        return await _adventures_api.insert_adventure(self._transport, new)

    async def set_bounty(self, adventure_id: str, new_amount: float) -> Adventure:
        return await _adventures_api.update_bounty(self._transport, adventure_id, new_amount)
