"""Adventure (mission) models and the status table."""

from __future__ import annotations

import dataclasses
import math
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pyprole.models._base import ProleBaseModel, StoreTimestamp


class MissionStatus(StrEnum):
    """Lifecycle stage of a mission."""

    SCOUTING = "scouting"
    GREENLIT = "greenlit"
    ACTIVE = "active"
    COMPLETE = "complete"


@dataclasses.dataclass(frozen=True)
class StatusStyle:
    """Marker presentation and redaction flag for one status."""

    color: str
    icon: str
    redacted: bool


STATUS_STYLES: dict[MissionStatus, StatusStyle] = {
    MissionStatus.SCOUTING: StatusStyle(color="rgba(255, 165, 0, 0.9)", icon="?", redacted=True),
    MissionStatus.GREENLIT: StatusStyle(color="rgba(59, 130, 246, 0.9)", icon="T", redacted=False),
    MissionStatus.ACTIVE: StatusStyle(color="rgba(239, 68, 68, 0.9)", icon="A", redacted=False),
    MissionStatus.COMPLETE: StatusStyle(color="rgba(16, 185, 129, 0.9)", icon="✓", redacted=False),
}

if set(STATUS_STYLES) != set(MissionStatus):  # pragma: no cover - import-time guard
    raise RuntimeError("STATUS_STYLES must cover every MissionStatus")


class Adventure(ProleBaseModel):
    """A single row of the ``adventures`` table.

    Parameters
    ----------
    id : str
        Store-assigned identifier (integer keys are stringified).
    title : str
        True title. Never shown publicly.
    codename : str
        Public alias, always shown.
    status : MissionStatus
        Current lifecycle stage.
    description : str or None
        True mission brief.
    lat, lng : float
        Exact coordinates in decimal degrees.
    bounty_target : float
        Funding goal.
    bounty_current : float
        Running total of contributions.
    created_at, updated_at : datetime
        UTC timestamps.
    """

    id: str
    title: str
    codename: str
    status: MissionStatus
    description: str | None = None
    lat: float
    lng: float
    bounty_target: float
    bounty_current: float = 0.0
    created_at: StoreTimestamp
    updated_at: StoreTimestamp

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def true_latitude(self) -> float:
        return self.lat

    @property
    def true_longitude(self) -> float:
        return self.lng

    @property
    def progress_percent(self) -> float:
        """Funding progress capped at 100."""
        if self.bounty_target <= 0:
            return 0.0
        return min(self.bounty_current / self.bounty_target * 100.0, 100.0)


class NewAdventure(BaseModel):
    """Creation payload: every column except the store-assigned ones."""

    model_config = ConfigDict(frozen=True, extra="forbid", str_strip_whitespace=True)

    title: str = Field(min_length=1)
    codename: str = Field(min_length=1)
    status: MissionStatus = MissionStatus.SCOUTING
    description: str | None = None
    lat: float = Field(ge=-90.0, le=90.0)
    lng: float = Field(ge=-180.0, le=180.0)
    bounty_target: float = Field(gt=0)
    bounty_current: float = 0.0

    @field_validator("bounty_target", "bounty_current")
    @classmethod
    def _finite(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("bounty amounts must be finite")
        return value

    def to_row(self) -> dict[str, Any]:
        """Column dict for an insert, with the status as its plain string."""
        return self.model_dump(mode="json")


class Projection(BaseModel):
    """Public view of an :class:`Adventure`. Computed per read, never stored."""

    model_config = ConfigDict(frozen=True)

    id: str
    codename: str
    status: MissionStatus
    display_title: str
    display_description: str | None
    display_latitude: float
    display_longitude: float
    bounty_target: float
    bounty_current: float

    @property
    def is_redacted(self) -> bool:
        return STATUS_STYLES[self.status].redacted


class RedactionReport(BaseModel):
    """Outcome of the redaction self-check."""

    model_config = ConfigDict(frozen=True)

    is_secure: bool
    warnings: list[str] = Field(default_factory=list)


class MissionStats(BaseModel):
    """Aggregate counts and bounty totals over a set of missions."""

    model_config = ConfigDict(frozen=True)

    total: int = 0
    scouting: int = 0
    greenlit: int = 0
    active: int = 0
    complete: int = 0
    total_bounty_target: float = 0.0
    total_bounty_current: float = 0.0
    completion_rate: float = 0.0
