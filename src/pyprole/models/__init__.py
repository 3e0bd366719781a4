"""Data models for pyprole."""

from pyprole.models._base import ProleBaseModel, StoreTimestamp, ensure_utc
from pyprole.models.adventure import (
    STATUS_STYLES,
    Adventure,
    MissionStats,
    MissionStatus,
    NewAdventure,
    Projection,
    RedactionReport,
    StatusStyle,
)
from pyprole.models.content import (
    Coordinates,
    GearData,
    GearItem,
    Location,
    Story,
    Testimonial,
    TimelineAdventure,
    TimelineEntry,
    YoutubeVideos,
)
from pyprole.models.submissions import (
    ContactMessage,
    NewsletterSignup,
    SubmissionResult,
    SubscribeOutcome,
)

__all__ = [
    "Adventure",
    "ContactMessage",
    "Coordinates",
    "GearData",
    "GearItem",
    "Location",
    "MissionStats",
    "MissionStatus",
    "NewAdventure",
    "NewsletterSignup",
    "ProleBaseModel",
    "Projection",
    "RedactionReport",
    "STATUS_STYLES",
    "StatusStyle",
    "StoreTimestamp",
    "Story",
    "SubmissionResult",
    "SubscribeOutcome",
    "Testimonial",
    "TimelineAdventure",
    "TimelineEntry",
    "YoutubeVideos",
    "ensure_utc",
]
