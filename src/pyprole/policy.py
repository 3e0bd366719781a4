"""Display policy for mission records.

Maps an :class:`~pyprole.models.Adventure` to the :class:`Projection`
shown on the public map. Scouting missions are redacted: the brief is
replaced by a fixed sentinel and the coordinates are perturbed with a
fresh random offset on every call, so a re-rendered marker moves.

Nothing here mutates the record or caches a projection.
"""

from __future__ import annotations

import random
from collections.abc import Iterable

from pyprole._constants import DEFAULT_JITTER_AMOUNT, LEAK_THRESHOLD_DEGREES, REDACTED_DESCRIPTION
from pyprole.models.adventure import (
    STATUS_STYLES,
    Adventure,
    MissionStats,
    MissionStatus,
    Projection,
    RedactionReport,
    StatusStyle,
)

DESCRIPTION_EXPOSED_WARNING = "Full description exposed in scouting mission"
COORDINATES_EXPOSED_WARNING = "Coordinates may not be sufficiently obfuscated for scouting mission"


def status_style(status: MissionStatus | str) -> StatusStyle:
    """Return the marker style for *status*.

    Raises :class:`ValueError` for strings outside the status vocabulary.
    """
    return STATUS_STYLES[MissionStatus(status)]


def is_redacted(status: MissionStatus | str) -> bool:
    """``True`` iff *status* is ``scouting``."""
    return status_style(status).redacted


def _offset(rng: random.Random | None, jitter_amount: float) -> float:
    draw = rng.random() if rng is not None else random.random()  # noqa: S311
    offset = (draw - 0.5) * jitter_amount
    # random() is in [0, 1); a draw of exactly 0.0 would land on the closed edge.
    if jitter_amount > 0 and offset <= -jitter_amount / 2:
        return 0.0
    return offset


def apply_coordinate_jitter(
    lat: float,
    lng: float,
    jitter_amount: float = DEFAULT_JITTER_AMOUNT,
    *,
    rng: random.Random | None = None,
) -> tuple[float, float]:
    """Offset each axis independently by a uniform draw in ``(-j/2, +j/2)``."""
    return lat + _offset(rng, jitter_amount), lng + _offset(rng, jitter_amount)


def project(
    record: Adventure,
    *,
    jitter_amount: float = DEFAULT_JITTER_AMOUNT,
    rng: random.Random | None = None,
) -> Projection:
    """Compute the public view of *record*.

    The codename is always the display title. Redacted records get the
    sentinel description and jittered coordinates; all others expose the
    true description (possibly ``None``) and exact coordinates.
    """
    if is_redacted(record.status):
        display_lat, display_lng = apply_coordinate_jitter(record.lat, record.lng, jitter_amount, rng=rng)
        display_description: str | None = REDACTED_DESCRIPTION
    else:
        display_lat, display_lng = record.lat, record.lng
        display_description = record.description

    return Projection(
        id=record.id,
        codename=record.codename,
        status=record.status,
        display_title=record.codename,
        display_description=display_description,
        display_latitude=display_lat,
        display_longitude=display_lng,
        bounty_target=record.bounty_target,
        bounty_current=record.bounty_current,
    )


def validate_redaction(projection: Projection, record: Adventure) -> RedactionReport:
    """Diagnostic check that a scouting projection hides what it should.

    The coordinate check only flags deltas under 0.001 degrees on both
    axes, which catches disabled jitter but not merely weak jitter.
    """
    warnings: list[str] = []

    if record.status is MissionStatus.SCOUTING:
        if projection.display_description != REDACTED_DESCRIPTION:
            warnings.append(DESCRIPTION_EXPOSED_WARNING)

        lat_diff = abs(record.lat - projection.display_latitude)
        lng_diff = abs(record.lng - projection.display_longitude)
        if lat_diff < LEAK_THRESHOLD_DEGREES and lng_diff < LEAK_THRESHOLD_DEGREES:
            warnings.append(COORDINATES_EXPOSED_WARNING)

    return RedactionReport(is_secure=not warnings, warnings=warnings)


def mission_stats(records: Iterable[Adventure | Projection]) -> MissionStats:
    """Count missions per status and total their bounties."""
    items = list(records)
    counts = dict.fromkeys(MissionStatus, 0)
    for item in items:
        counts[item.status] += 1

    total = len(items)
    return MissionStats(
        total=total,
        scouting=counts[MissionStatus.SCOUTING],
        greenlit=counts[MissionStatus.GREENLIT],
        active=counts[MissionStatus.ACTIVE],
        complete=counts[MissionStatus.COMPLETE],
        total_bounty_target=sum(item.bounty_target for item in items),
        total_bounty_current=sum(item.bounty_current for item in items),
        completion_rate=(counts[MissionStatus.COMPLETE] / total * 100.0) if total else 0.0,
    )
