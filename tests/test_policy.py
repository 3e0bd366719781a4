"""Tests for the display policy (redaction, jitter, self-check, stats)."""

from __future__ import annotations

import random
from datetime import UTC, datetime

import pytest

from pyprole._constants import REDACTED_DESCRIPTION
from pyprole.models.adventure import STATUS_STYLES, Adventure, MissionStatus, Projection
from pyprole.policy import (
    COORDINATES_EXPOSED_WARNING,
    DESCRIPTION_EXPOSED_WARNING,
    apply_coordinate_jitter,
    is_redacted,
    mission_stats,
    project,
    status_style,
    validate_redaction,
)

_STAMP = datetime(2024, 1, 15, 10, tzinfo=UTC)


def _adventure(status: MissionStatus, *, description: str | None = "True brief", **overrides: object) -> Adventure:
    fields: dict[str, object] = {
        "id": "adv-1",
        "title": "Birkbeck Tunnel Complex",
        "codename": "Operation Shadow Vault",
        "status": status,
        "description": description,
        "lat": 51.5202,
        "lng": -0.1298,
        "bounty_target": 500.0,
        "bounty_current": 125.5,
        "created_at": _STAMP,
        "updated_at": _STAMP,
    }
    fields.update(overrides)
    return Adventure(**fields)


# ------------------------------------------------------------------
# is_redacted / status table
# ------------------------------------------------------------------


@pytest.mark.parametrize(
    ("status", "expected"),
    [
        ("scouting", True),
        ("greenlit", False),
        ("active", False),
        ("complete", False),
    ],
)
def test_is_redacted_only_for_scouting(status: str, expected: bool) -> None:
    assert is_redacted(status) is expected
    assert is_redacted(MissionStatus(status)) is expected


def test_is_redacted_rejects_unknown_status() -> None:
    with pytest.raises(ValueError):
        is_redacted("abandoned")


def test_status_table_is_exhaustive() -> None:
    assert set(STATUS_STYLES) == set(MissionStatus)
    assert status_style("scouting").icon == "?"
    assert status_style(MissionStatus.COMPLETE).icon == "✓"
    assert [s for s in MissionStatus if STATUS_STYLES[s].redacted] == [MissionStatus.SCOUTING]


# ------------------------------------------------------------------
# project
# ------------------------------------------------------------------


def test_scouting_projection_hides_description() -> None:
    record = _adventure(MissionStatus.SCOUTING)
    projection = project(record)

    assert projection.display_description == REDACTED_DESCRIPTION
    assert projection.display_title == record.codename
    assert projection.is_redacted


def test_scouting_projection_without_description_still_uses_sentinel() -> None:
    projection = project(_adventure(MissionStatus.SCOUTING, description=None))
    assert projection.display_description == REDACTED_DESCRIPTION


@pytest.mark.parametrize("status", [MissionStatus.GREENLIT, MissionStatus.ACTIVE, MissionStatus.COMPLETE])
def test_unredacted_projection_exposes_exact_fields(status: MissionStatus) -> None:
    record = _adventure(status)
    for _ in range(5):
        projection = project(record)
        assert projection.display_description == record.description
        assert projection.display_title == record.codename
        assert projection.display_latitude == record.lat
        assert projection.display_longitude == record.lng


def test_unredacted_projection_keeps_absent_description() -> None:
    projection = project(_adventure(MissionStatus.ACTIVE, description=None))
    assert projection.display_description is None


def test_title_is_never_surfaced() -> None:
    for status in MissionStatus:
        projection = project(_adventure(status))
        assert projection.display_title == "Operation Shadow Vault"
        assert "Birkbeck" not in projection.model_dump_json()


def test_scouting_jitter_is_fresh_and_bounded() -> None:
    record = _adventure(MissionStatus.SCOUTING)
    projections = [project(record) for _ in range(50)]

    latitudes = {p.display_latitude for p in projections}
    longitudes = {p.display_longitude for p in projections}
    assert len(latitudes) > 1
    assert len(longitudes) > 1
    for p in projections:
        assert abs(p.display_latitude - record.lat) < 0.01
        assert abs(p.display_longitude - record.lng) < 0.01


def test_project_does_not_mutate_record() -> None:
    record = _adventure(MissionStatus.SCOUTING)
    before = record.model_dump()
    project(record)
    assert record.model_dump() == before


def test_custom_jitter_amount_and_seeded_rng() -> None:
    record = _adventure(MissionStatus.SCOUTING)
    first = project(record, jitter_amount=1.0, rng=random.Random(7))
    second = project(record, jitter_amount=1.0, rng=random.Random(7))

    assert first == second
    assert abs(first.display_latitude - record.lat) < 0.5


def test_apply_coordinate_jitter_zero_amount_is_identity() -> None:
    assert apply_coordinate_jitter(10.0, 20.0, 0.0) == (10.0, 20.0)


def test_apply_coordinate_jitter_stays_in_open_interval_at_edge_draw() -> None:
    class _ZeroRandom(random.Random):
        def random(self) -> float:
            return 0.0

    lat, lng = apply_coordinate_jitter(10.0, 20.0, 0.02, rng=_ZeroRandom())
    assert abs(lat - 10.0) < 0.01
    assert abs(lng - 20.0) < 0.01


# ------------------------------------------------------------------
# validate_redaction
# ------------------------------------------------------------------


def test_validate_redaction_secure_for_jittered_scouting() -> None:
    record = _adventure(MissionStatus.SCOUTING)
    projection = project(record, jitter_amount=1.0, rng=random.Random(1))
    report = validate_redaction(projection, record)

    assert report.is_secure
    assert report.warnings == []


def test_validate_redaction_flags_leaked_description_and_coordinates() -> None:
    record = _adventure(MissionStatus.SCOUTING)
    leaky = Projection(
        id=record.id,
        codename=record.codename,
        status=record.status,
        display_title=record.codename,
        display_description=record.description,
        display_latitude=record.lat + 0.0005,
        display_longitude=record.lng,
        bounty_target=record.bounty_target,
        bounty_current=record.bounty_current,
    )
    report = validate_redaction(leaky, record)

    assert not report.is_secure
    assert report.warnings == [DESCRIPTION_EXPOSED_WARNING, COORDINATES_EXPOSED_WARNING]


def test_validate_redaction_only_one_axis_small_is_not_flagged() -> None:
    record = _adventure(MissionStatus.SCOUTING)
    projection = project(record).model_copy(
        update={"display_latitude": record.lat, "display_longitude": record.lng + 0.005}
    )
    assert validate_redaction(projection, record).is_secure


def test_validate_redaction_ignores_unredacted_records() -> None:
    record = _adventure(MissionStatus.ACTIVE)
    report = validate_redaction(project(record), record)
    assert report.is_secure


# ------------------------------------------------------------------
# mission_stats
# ------------------------------------------------------------------


def test_mission_stats_counts_and_totals() -> None:
    records = [
        _adventure(MissionStatus.SCOUTING, bounty_target=100.0, bounty_current=10.0),
        _adventure(MissionStatus.COMPLETE, bounty_target=200.0, bounty_current=200.0),
        _adventure(MissionStatus.COMPLETE, bounty_target=50.0, bounty_current=50.0),
        _adventure(MissionStatus.ACTIVE, bounty_target=50.0, bounty_current=0.0),
    ]
    stats = mission_stats(records)

    assert stats.total == 4
    assert stats.scouting == 1
    assert stats.complete == 2
    assert stats.greenlit == 0
    assert stats.total_bounty_target == pytest.approx(400.0)
    assert stats.total_bounty_current == pytest.approx(260.0)
    assert stats.completion_rate == pytest.approx(50.0)


def test_mission_stats_empty() -> None:
    stats = mission_stats([])
    assert stats.total == 0
    assert stats.completion_rate == 0.0
