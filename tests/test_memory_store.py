from __future__ import annotations

import pytest

from pyprole.exceptions import ProleNotFoundError
from pyprole.models.adventure import MissionStatus, NewAdventure
from pyprole.stores.memory import LatencyProfile, MemoryAdventureStore


def _store() -> MemoryAdventureStore:
    return MemoryAdventureStore(latency=LatencyProfile.none())


@pytest.mark.asyncio
async def test_list_returns_seed_newest_first() -> None:
    records = await _store().list()

    assert len(records) == 6
    assert [r.created_at for r in records] == sorted((r.created_at for r in records), reverse=True)
    assert records[0].id == "1"


@pytest.mark.asyncio
async def test_list_returns_copies() -> None:
    store = _store()
    first = await store.list()
    first[0].raw["poked"] = True

    second = await store.list()
    assert "poked" not in second[0].raw


@pytest.mark.asyncio
async def test_separate_stores_do_not_share_state() -> None:
    a = _store()
    b = _store()
    await a.set_bounty("1", 999.0)

    assert (await b.get("1")).bounty_current == 125.50


@pytest.mark.asyncio
async def test_contribution_scenario_updates_total_and_timestamp() -> None:
    store = _store()
    before = await store.get("1")
    assert before.bounty_current == 125.50

    updated = await store.set_bounty("1", before.bounty_current + 50)

    assert updated.bounty_current == pytest.approx(175.50)
    assert updated.updated_at > before.updated_at
    assert (await store.get("1")).bounty_current == pytest.approx(175.50)


@pytest.mark.asyncio
async def test_updated_at_strictly_increases_on_rapid_updates() -> None:
    store = _store()
    first = await store.set_bounty("2", 1.0)
    second = await store.set_bounty("2", 2.0)
    assert second.updated_at > first.updated_at


@pytest.mark.asyncio
async def test_create_assigns_id_and_timestamps() -> None:
    store = _store()
    new = NewAdventure(title="Kingsway Exchange", codename="Deep Line", lat=51.517, lng=-0.119, bounty_target=900)

    created = await store.create(new)

    assert len(created.id) == 9
    assert created.id.isalnum()
    assert created.status is MissionStatus.SCOUTING
    assert created.created_at == created.updated_at
    records = await store.list()
    assert records[0].id == created.id
    assert len(records) == 7


@pytest.mark.asyncio
async def test_missing_id_raises_not_found() -> None:
    store = _store()
    with pytest.raises(ProleNotFoundError):
        await store.set_bounty("nope", 1.0)
    with pytest.raises(ProleNotFoundError):
        await store.get("nope")


@pytest.mark.asyncio
async def test_custom_seed() -> None:
    seeded = await _store().list()
    store = MemoryAdventureStore(seeded[:2], latency=LatencyProfile.none())
    assert len(await store.list()) == 2
