"""Mission control: source selection, projections and contributions."""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Iterable
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from pyprole._constants import DEFAULT_JITTER_AMOUNT
from pyprole.exceptions import ProleError
from pyprole.models.adventure import Adventure, MissionStatus, Projection
from pyprole.policy import project
from pyprole.stores.base import AdventureStore
from pyprole.stores.seed import SAMPLE_ADVENTURES

_logger = logging.getLogger(__name__)

FALLBACK_BANNER = "Running in demo mode - Supabase connection unavailable"
FAILED_BANNER = "Failed to load mission data."

ALL_STATUSES = "all"


class SourceOutcome(StrEnum):
    """Which data source a session ended up on."""

    OK = "ok"
    USING_FALLBACK = "using_fallback"
    BOTH_FAILED = "both_failed"


class MissionLoad(BaseModel):
    """Result of loading the mission board."""

    model_config = ConfigDict(frozen=True)

    outcome: SourceOutcome
    projections: list[Projection] = Field(default_factory=list)
    banner: str | None = None


def filter_by_status(
    projections: Iterable[Projection],
    status: MissionStatus | str = ALL_STATUSES,
) -> list[Projection]:
    """Projections matching *status*; ``"all"`` keeps everything."""
    if status == ALL_STATUSES:
        return list(projections)
    wanted = MissionStatus(status)
    return [projection for projection in projections if projection.status is wanted]


async def initialize_sample_data(store: AdventureStore) -> int:
    """Seed *store* with the sample missions if it is empty.

    Returns the number of records created.
    """
    existing = await store.list()
    if existing:
        return 0
    _logger.info("Creating sample adventure data in %s store", store.name)
    for sample in SAMPLE_ADVENTURES:
        await store.create(sample)
    return len(SAMPLE_ADVENTURES)


class MissionControl:
    """Reads missions from one store per session, primary first.

    The first :meth:`load_adventures` call decides the session's store. A
    missing or failing primary switches to the fallback for good; the
    primary is never probed again.

    Parameters
    ----------
    primary : AdventureStore or None
        Hosted store adapter; ``None`` when it is not configured.
    fallback : AdventureStore
        In-memory adapter.
    seed_on_empty : bool
        Seed an empty primary with the sample missions on first load.
    jitter_amount : float
        Coordinate jitter width for redacted projections.
    rng : random.Random or None
        Source of jitter draws; the module RNG when ``None``.
    """

    def __init__(
        self,
        primary: AdventureStore | None,
        fallback: AdventureStore,
        *,
        seed_on_empty: bool = True,
        jitter_amount: float = DEFAULT_JITTER_AMOUNT,
        rng: random.Random | None = None,
    ) -> None:
        self._primary = primary
        self._fallback = fallback
        self._seed_on_empty = seed_on_empty
        self._jitter_amount = jitter_amount
        self._rng = rng
        self._active: AdventureStore | None = None
        self._outcome: SourceOutcome | None = None

    @property
    def outcome(self) -> SourceOutcome | None:
        """Session outcome, or ``None`` before the first load."""
        return self._outcome

    @property
    def active_store(self) -> AdventureStore | None:
        return self._active

    def _project_all(self, records: Iterable[Adventure]) -> list[Projection]:
        return [project(record, jitter_amount=self._jitter_amount, rng=self._rng) for record in records]

    async def _load_primary(self, primary: AdventureStore) -> list[Adventure]:
        if self._seed_on_empty:
            await initialize_sample_data(primary)
        return await primary.list()

    async def _load_fallback(self) -> MissionLoad:
        try:
            records = await self._fallback.list()
        except Exception:
            _logger.error("Fallback store %s failed", self._fallback.name, exc_info=True)
            self._active = None
            self._outcome = SourceOutcome.BOTH_FAILED
            return MissionLoad(outcome=SourceOutcome.BOTH_FAILED, banner=FAILED_BANNER)

        self._active = self._fallback
        self._outcome = SourceOutcome.USING_FALLBACK
        return MissionLoad(
            outcome=SourceOutcome.USING_FALLBACK,
            projections=self._project_all(records),
            banner=FALLBACK_BANNER,
        )

    async def load_adventures(self) -> MissionLoad:
        """Return fresh projections from the session's store. Never raises."""
        if self._outcome is SourceOutcome.OK and self._active is not None:
            try:
                records = await self._active.list()
            except ProleError:
                _logger.warning("Primary store failed after selection; switching to fallback", exc_info=True)
                return await self._load_fallback()
            return MissionLoad(outcome=SourceOutcome.OK, projections=self._project_all(records))

        if self._outcome is not None:
            # Already on the fallback (or nothing worked); never re-probe the primary.
            return await self._load_fallback()

        if self._primary is None:
            _logger.info("Hosted store not configured; using %s store", self._fallback.name)
            return await self._load_fallback()

        try:
            records = await self._load_primary(self._primary)
        except Exception as exc:
            _logger.warning("Primary store unavailable, falling back to demo data: %s", exc)
            return await self._load_fallback()

        self._active = self._primary
        self._outcome = SourceOutcome.OK
        return MissionLoad(outcome=SourceOutcome.OK, projections=self._project_all(records))

    def _require_store(self) -> AdventureStore:
        if self._active is None:
            raise ProleError("No mission store available; call load_adventures() first")
        return self._active

    async def contribute(self, adventure_id: str, amount: float) -> Adventure:
        """Add *amount* to a mission's bounty.

        Reads the current total, adds *amount* locally and writes the new
        absolute total. Two overlapping contributions to the same mission
        can lose one of them (last write wins).
        """
        if not math.isfinite(amount):
            raise ValueError(f"contribution must be a finite number, got {amount!r}")
        store = self._require_store()
        current = await store.get(adventure_id)
        new_total = current.bounty_current + amount
        updated = await store.set_bounty(adventure_id, new_total)
        _logger.info("Contributed %.2f to mission %s (total %.2f)", amount, adventure_id, updated.bounty_current)
        return updated
