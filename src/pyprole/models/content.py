"""Models for the static JSON content feeds (gear, stories, map)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _FeedModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class GearItem(_FeedModel):
    id: str
    name: str
    category: str
    price: str = ""
    affiliate_link: str = ""
    rating: float = Field(default=0.0, ge=0.0, le=5.0)
    description: str = ""
    specs: dict[str, str] = Field(default_factory=dict)
    missions: list[str] = Field(default_factory=list)
    why_essential: str = ""
    tested_conditions: list[str] = Field(default_factory=list)
    image: str = ""


class Testimonial(_FeedModel):
    item: str
    quote: str
    mission: str = ""


class GearData(_FeedModel):
    """Root document of ``current_gear.json``."""

    current_kit: list[GearItem] = Field(default_factory=list)
    testimonials: list[Testimonial] = Field(default_factory=list)

    @property
    def categories(self) -> list[str]:
        """Distinct categories in first-seen order."""
        seen: dict[str, None] = {}
        for item in self.current_kit:
            seen.setdefault(item.category, None)
        return list(seen)


class Story(_FeedModel):
    id: str
    title: str
    excerpt: str = ""
    date: str = ""
    location: str = ""
    category: str = ""
    tags: list[str] = Field(default_factory=list)
    featured_image: str = ""
    read_time: str = ""
    gear_used: list[str] = Field(default_factory=list)
    missions: list[str] = Field(default_factory=list)
    story_highlights: list[str] = Field(default_factory=list)
    safety_notes: str = ""


class Coordinates(_FeedModel):
    lat: float = Field(ge=-90.0, le=90.0)
    lng: float = Field(ge=-180.0, le=180.0)


class YoutubeVideos(_FeedModel):
    primary: str = ""
    secondary: str = ""


class Location(_FeedModel):
    id: str
    name: str
    coordinates: Coordinates
    visit_date: str = ""
    category: str = ""
    description: str = ""
    story: str = ""
    tags: list[str] = Field(default_factory=list)
    image: str = ""
    youtube_videos: YoutubeVideos = Field(default_factory=YoutubeVideos)


class TimelineAdventure(_FeedModel):
    date: str
    location: str
    type: str = ""
    description: str = ""
    duration: str = ""
    category: str = ""


class TimelineEntry(_FeedModel):
    year: int
    season: str = ""
    month: str = ""
    adventures: list[TimelineAdventure] = Field(default_factory=list)
