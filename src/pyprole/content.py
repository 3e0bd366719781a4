"""Loaders and filters for the static JSON content feeds."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from pyprole.exceptions import ProleContentError
from pyprole.models.content import GearData, GearItem, Location, Story, TimelineEntry

_logger = logging.getLogger(__name__)

T = TypeVar("T")

GEAR_FILE = "current_gear.json"
STORIES_FILE = "stories.json"
LOCATIONS_FILE = "locations.json"
TIMELINE_FILE = "timeline.json"

ALL_CATEGORIES = "all"

# Filter ids used by the site's category buttons.
STORY_CATEGORY_FILTERS: dict[str, str] = {
    "urban": "Urban Exploration",
    "nature": "Nature Reflection",
    "culture": "Cultural Immersion",
    "reflection": "Nature Reflection",
}
LOCATION_CATEGORY_FILTERS: dict[str, str] = {
    "urban": "Urban Exploration",
    "nature": "Nature & Reflection",
    "culture": "Cultural Immersion",
    "reflection": "Nature & Reflection",
}


def _read_json(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ProleContentError(f"Cannot read {path.name}: {exc}", source=str(path)) from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ProleContentError(f"{path.name} is not valid JSON: {exc}", source=str(path)) from exc


def _validate(adapter: TypeAdapter[T], data: Any, path: Path) -> T:
    try:
        return adapter.validate_python(data)
    except ValidationError as exc:
        raise ProleContentError(
            f"{path.name} does not match the expected shape: {exc.error_count()} error(s)",
            source=str(path),
        ) from exc


_GEAR = TypeAdapter(GearData)
_STORIES = TypeAdapter(list[Story])
_LOCATIONS = TypeAdapter(list[Location])
_TIMELINE = TypeAdapter(list[TimelineEntry])


def load_gear(content_dir: Path) -> GearData:
    path = content_dir / GEAR_FILE
    gear = _validate(_GEAR, _read_json(path), path)
    _logger.debug("Gear loaded: %d items", len(gear.current_kit))
    return gear


def load_stories(content_dir: Path) -> list[Story]:
    """Load ``stories.json``; accepts a bare list or ``{"stories": [...]}``."""
    path = content_dir / STORIES_FILE
    data = _read_json(path)
    if isinstance(data, dict) and "stories" in data:
        data = data["stories"]
    stories = _validate(_STORIES, data, path)
    _logger.debug("Stories loaded: %d items", len(stories))
    return stories


def load_locations(content_dir: Path) -> list[Location]:
    path = content_dir / LOCATIONS_FILE
    locations = _validate(_LOCATIONS, _read_json(path), path)
    _logger.debug("Locations loaded: %d items", len(locations))
    return locations


def load_timeline(content_dir: Path) -> list[TimelineEntry]:
    path = content_dir / TIMELINE_FILE
    timeline = _validate(_TIMELINE, _read_json(path), path)
    _logger.debug("Timeline loaded: %d items", len(timeline))
    return timeline


def filter_gear(items: Iterable[GearItem], category: str = ALL_CATEGORIES, search: str = "") -> list[GearItem]:
    """Gear in *category* whose name or description contains *search*."""
    needle = search.strip().lower()
    result = []
    for item in items:
        if category != ALL_CATEGORIES and item.category != category:
            continue
        if needle and needle not in item.name.lower() and needle not in item.description.lower():
            continue
        result.append(item)
    return result


_Categorised = TypeVar("_Categorised", bound=BaseModel)


def _filter_category(items: Iterable[_Categorised], category_id: str, mapping: dict[str, str]) -> list[_Categorised]:
    if category_id == ALL_CATEGORIES:
        return list(items)
    wanted = mapping.get(category_id, category_id)
    return [item for item in items if getattr(item, "category", None) == wanted]


def filter_stories(stories: Iterable[Story], category_id: str = ALL_CATEGORIES) -> list[Story]:
    return _filter_category(stories, category_id, STORY_CATEGORY_FILTERS)


def filter_locations(locations: Iterable[Location], category_id: str = ALL_CATEGORIES) -> list[Location]:
    return _filter_category(locations, category_id, LOCATION_CATEGORY_FILTERS)
