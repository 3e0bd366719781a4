"""Adventures table endpoints.

Table:
  - adventures
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from pydantic import TypeAdapter, ValidationError

from pyprole._api._common import REPRESENTATION, raise_for_response, single_row
from pyprole._constants import ADVENTURES_TABLE
from pyprole._transport import RestResponse, Transport
from pyprole.exceptions import ProleDataError, ProleTransportError
from pyprole.models._base import utcnow
from pyprole.models.adventure import Adventure, NewAdventure

_logger = logging.getLogger(__name__)

_ADVENTURE_LIST = TypeAdapter(list[Adventure])


def _validate_rows(response: RestResponse, decoded: Any) -> list[Adventure]:
    try:
        return _ADVENTURE_LIST.validate_python(decoded)
    except ValidationError as exc:
        raise ProleDataError(
            f"{response.endpoint} returned rows that are not adventures: {exc.error_count()} error(s)",
            endpoint=response.endpoint,
        ) from exc


def _validate_row(response: RestResponse) -> Adventure:
    try:
        return Adventure.model_validate(single_row(response))
    except ValidationError as exc:
        raise ProleDataError(
            f"{response.endpoint} returned a row that is not an adventure: {exc.error_count()} error(s)",
            endpoint=response.endpoint,
        ) from exc


async def fetch_adventures(transport: Transport) -> list[Adventure]:
    """Fetch every adventure, newest first."""
    response = await transport.request(
        "GET",
        ADVENTURES_TABLE,
        params={"select": "*", "order": "created_at.desc"},
    )
    decoded = raise_for_response(response)
    # A non-list reply must not read as an empty table; that would trigger seeding.
    if not isinstance(decoded, list):
        raise ProleTransportError(
            f"Unexpected list payload from {response.endpoint}: {type(decoded).__name__}",
            status_code=response.status,
            endpoint=response.endpoint,
        )
    _logger.debug("Adventure list decoded count=%d", len(decoded))
    return _validate_rows(response, decoded)


async def fetch_adventure(transport: Transport, adventure_id: str) -> Adventure:
    """Fetch a single adventure by id."""
    response = await transport.request(
        "GET",
        ADVENTURES_TABLE,
        params={"select": "*", "id": f"eq.{adventure_id}"},
    )
    return _validate_row(response)


async def insert_adventure(
    transport: Transport,
    new: NewAdventure,
    *,
    now: datetime | None = None,
) -> Adventure:
    """Insert a new adventure and return the stored row."""
    stamp = (now or utcnow()).isoformat()
    row = {**new.to_row(), "created_at": stamp, "updated_at": stamp}
    response = await transport.request(
        "POST",
        ADVENTURES_TABLE,
        body=[row],
        prefer=REPRESENTATION,
    )
    return _validate_row(response)


async def update_bounty(
    transport: Transport,
    adventure_id: str,
    amount: float,
    *,
    now: datetime | None = None,
) -> Adventure:
    """Overwrite ``bounty_current`` with *amount* and refresh ``updated_at``.

    The new absolute total is sent, not a delta.
    """
    response = await transport.request(
        "PATCH",
        ADVENTURES_TABLE,
        params={"id": f"eq.{adventure_id}"},
        body={"bounty_current": amount, "updated_at": (now or utcnow()).isoformat()},
        prefer=REPRESENTATION,
    )
    return _validate_row(response)
