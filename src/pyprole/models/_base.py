"""Base model for rows returned by the hosted store.

Every table model inherits from :class:`ProleBaseModel` which provides:

* ``null`` columns dropped before validation so the field default is used.
* A ``raw`` dict that captures the original row.
* Naive timestamps coerced to UTC via :data:`StoreTimestamp`.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes; convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def utcnow() -> datetime:
    return datetime.now(UTC)


StoreTimestamp = Annotated[datetime, AfterValidator(ensure_utc)]
"""Annotated type for ISO-8601 ``timestamptz`` columns, always UTC-aware."""


class ProleBaseModel(BaseModel):
    """Base for hosted-store row models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    raw: dict[str, Any] = Field(default_factory=dict, exclude=True, repr=False)
    """Original row dict."""

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, values: Any) -> Any:
        """Drop ``null`` columns and stash the raw row."""
        if not isinstance(values, dict):
            return values
        cleaned = {key: value for key, value in values.items() if value is not None}
        # Keep an explicit raw= from the caller; otherwise stash the row.
        if "raw" not in values:
            cleaned["raw"] = dict(values)
        return cleaned
