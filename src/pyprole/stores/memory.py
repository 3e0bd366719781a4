"""In-memory adventure store used as the demo fallback."""

from __future__ import annotations

import asyncio
import dataclasses
import logging
import secrets
import string
from collections.abc import Iterable
from datetime import datetime, timedelta

from pyprole.exceptions import ProleNotFoundError
from pyprole.models._base import utcnow
from pyprole.models.adventure import Adventure, NewAdventure
from pyprole.stores.seed import seed_records

_logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_lowercase + string.digits
_ID_LENGTH = 9


@dataclasses.dataclass(frozen=True)
class LatencyProfile:
    """Simulated round-trip delays, in seconds, per operation."""

    list: float = 0.5
    get: float = 0.2
    create: float = 0.3
    update: float = 0.2

    @classmethod
    def none(cls) -> LatencyProfile:
        return cls(list=0.0, get=0.0, create=0.0, update=0.0)


def _new_id() -> str:
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(_ID_LENGTH))


class MemoryAdventureStore:
    """Fallback adapter holding records in a list.

    Parameters
    ----------
    seed : iterable of Adventure or None
        Initial records. Defaults to the six demo missions.
    latency : LatencyProfile
        Delay applied before each operation completes.
    """

    name = "memory"

    def __init__(
        self,
        seed: Iterable[Adventure] | None = None,
        *,
        latency: LatencyProfile | None = None,
    ) -> None:
        records = seed_records() if seed is None else [record.model_copy(deep=True) for record in seed]
        self._records: list[Adventure] = records
        self._latency = latency or LatencyProfile()

    async def _delay(self, seconds: float) -> None:
        if seconds > 0:
            await asyncio.sleep(seconds)

    def _index_of(self, adventure_id: str) -> int:
        for index, record in enumerate(self._records):
            if record.id == adventure_id:
                return index
        raise ProleNotFoundError(f"Adventure {adventure_id} not found", endpoint=self.name)

    async def list(self) -> list[Adventure]:
        await self._delay(self._latency.list)
        ordered = sorted(self._records, key=lambda record: record.created_at, reverse=True)
        return [record.model_copy(deep=True) for record in ordered]

    async def get(self, adventure_id: str) -> Adventure:
        await self._delay(self._latency.get)
        return self._records[self._index_of(adventure_id)].model_copy(deep=True)

    async def create(self, new: NewAdventure) -> Adventure:
        await self._delay(self._latency.create)
        now = utcnow()
        record = Adventure(id=_new_id(), created_at=now, updated_at=now, **new.model_dump())
        self._records.append(record)
        _logger.debug("Created in-memory adventure %s (%s)", record.id, record.codename)
        return record.model_copy(deep=True)

    async def set_bounty(self, adventure_id: str, new_amount: float) -> Adventure:
        await self._delay(self._latency.update)
        index = self._index_of(adventure_id)
        current = self._records[index]
        updated = current.model_copy(
            update={
                "bounty_current": new_amount,
                "updated_at": _next_timestamp(current.updated_at),
            }
        )
        self._records[index] = updated
        return updated.model_copy(deep=True)


def _next_timestamp(previous: datetime) -> datetime:
    """Now, or one microsecond past *previous* if the clock hasn't moved."""
    now = utcnow()
    if now <= previous:
        return previous + timedelta(microseconds=1)
    return now
