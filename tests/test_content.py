from __future__ import annotations

import json
from pathlib import Path

import pytest

from pyprole.content import (
    filter_gear,
    filter_locations,
    filter_stories,
    load_gear,
    load_locations,
    load_stories,
    load_timeline,
)
from pyprole.exceptions import ProleContentError


def _write(directory: Path, name: str, payload: object) -> None:
    (directory / name).write_text(json.dumps(payload), encoding="utf-8")


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    _write(
        tmp_path,
        "current_gear.json",
        {
            "current_kit": [
                {
                    "id": "g1",
                    "name": "Fenix HM65R Headlamp",
                    "category": "lighting",
                    "price": "$99",
                    "rating": 4.8,
                    "description": "Dual beam headlamp for tunnels",
                    "specs": {"lumens": "1400"},
                    "tested_conditions": ["Birkbeck tunnels"],
                },
                {
                    "id": "g2",
                    "name": "Osprey Talon 22",
                    "category": "packs",
                    "rating": 4.5,
                    "description": "Daypack",
                },
            ],
            "testimonials": [{"item": "Osprey Talon 22", "quote": "Never let me down", "mission": "Platform Prime"}],
        },
    )
    _write(
        tmp_path,
        "stories.json",
        [
            {"id": "s1", "title": "Under Aldgate", "category": "Urban Exploration"},
            {"id": "s2", "title": "Heath at dawn", "category": "Nature Reflection"},
        ],
    )
    _write(
        tmp_path,
        "locations.json",
        [
            {
                "id": "l1",
                "name": "Crossness",
                "coordinates": {"lat": 51.4982, "lng": 0.1234},
                "category": "Urban Exploration",
                "youtube_videos": {"primary": "abc123"},
            },
            {
                "id": "l2",
                "name": "Hampstead Heath",
                "coordinates": {"lat": 51.559, "lng": -0.175},
                "category": "Nature & Reflection",
            },
        ],
    )
    _write(
        tmp_path,
        "timeline.json",
        [
            {
                "year": 2024,
                "season": "Winter",
                "month": "January",
                "adventures": [{"date": "2024-01-08", "location": "Greenwich", "type": "Shoot"}],
            }
        ],
    )
    return tmp_path


def test_load_gear(content_dir: Path) -> None:
    gear = load_gear(content_dir)

    assert [item.id for item in gear.current_kit] == ["g1", "g2"]
    assert gear.current_kit[0].specs == {"lumens": "1400"}
    assert gear.current_kit[1].missions == []
    assert gear.categories == ["lighting", "packs"]
    assert gear.testimonials[0].mission == "Platform Prime"


def test_filter_gear(content_dir: Path) -> None:
    items = load_gear(content_dir).current_kit

    assert [i.id for i in filter_gear(items)] == ["g1", "g2"]
    assert [i.id for i in filter_gear(items, category="packs")] == ["g2"]
    assert [i.id for i in filter_gear(items, search="TUNNEL")] == ["g1"]
    assert filter_gear(items, category="packs", search="headlamp") == []


def test_load_and_filter_stories(content_dir: Path) -> None:
    stories = load_stories(content_dir)

    assert [s.id for s in filter_stories(stories, "urban")] == ["s1"]
    assert [s.id for s in filter_stories(stories, "reflection")] == ["s2"]
    assert len(filter_stories(stories)) == 2


def test_load_stories_accepts_wrapped_document(tmp_path: Path) -> None:
    _write(tmp_path, "stories.json", {"stories": [{"id": "s9", "title": "Wrapped"}]})
    assert [s.id for s in load_stories(tmp_path)] == ["s9"]


def test_load_and_filter_locations(content_dir: Path) -> None:
    locations = load_locations(content_dir)

    assert locations[0].coordinates.lat == 51.4982
    assert locations[0].youtube_videos.primary == "abc123"
    assert locations[1].youtube_videos.secondary == ""
    assert [loc.id for loc in filter_locations(locations, "nature")] == ["l2"]
    assert [loc.id for loc in filter_locations(locations, "culture")] == []


def test_load_timeline(content_dir: Path) -> None:
    timeline = load_timeline(content_dir)
    assert timeline[0].year == 2024
    assert timeline[0].adventures[0].location == "Greenwich"


def test_missing_file_raises_content_error(tmp_path: Path) -> None:
    with pytest.raises(ProleContentError) as exc_info:
        load_gear(tmp_path)
    assert exc_info.value.source.endswith("current_gear.json")


def test_invalid_json_raises_content_error(tmp_path: Path) -> None:
    (tmp_path / "timeline.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ProleContentError):
        load_timeline(tmp_path)


def test_wrong_shape_raises_content_error(tmp_path: Path) -> None:
    _write(tmp_path, "locations.json", [{"id": "l1", "name": "No coordinates"}])
    with pytest.raises(ProleContentError, match="locations.json"):
        load_locations(tmp_path)
