"""Shared helpers for the hosted-store endpoint modules.

- mapping PostgREST error bodies to the exception hierarchy
- unwrapping single-row replies

It is internal to pyprole and may change at any time.
"""

from __future__ import annotations

from typing import Any

from pyprole._constants import DUPLICATE_MESSAGE_MARKERS, SINGLE_ROW_CODE, UNIQUE_VIOLATION_CODE
from pyprole._transport import RestResponse
from pyprole.exceptions import (
    ProleApiError,
    ProleDuplicateError,
    ProleNotFoundError,
    ProleTransportError,
)

REPRESENTATION = "return=representation"
MINIMAL = "return=minimal"


def is_duplicate(code: str, message: str, status: int | None = None) -> bool:
    """Whether an error body describes a uniqueness violation."""
    if code == UNIQUE_VIOLATION_CODE or status == 409:
        return True
    lowered = message.lower()
    return any(marker in lowered for marker in DUPLICATE_MESSAGE_MARKERS)


def raise_for_response(response: RestResponse) -> Any:
    """Return ``response.data`` on success, else raise the mapped error."""
    if response.ok:
        return response.data

    endpoint = response.endpoint
    body = response.data
    has_error_body = isinstance(body, dict) and ("code" in body or "message" in body)
    if response.status == 409 and not has_error_body:
        raise ProleDuplicateError(
            f"{endpoint} failed: HTTP 409 conflict",
            endpoint=endpoint,
            status_code=response.status,
        )
    if not has_error_body:
        raise ProleTransportError(
            f"HTTP {response.status} from {endpoint}",
            status_code=response.status,
            endpoint=endpoint,
        )

    code = str(body.get("code") or "")
    message = str(body.get("message") or "")
    text = f"{endpoint} failed: code={code} message={message}"

    if is_duplicate(code, message, response.status):
        raise ProleDuplicateError(text, code=code, endpoint=endpoint, status_code=response.status, detail=message)
    if code == SINGLE_ROW_CODE or response.status == 404:
        raise ProleNotFoundError(text, code=code, endpoint=endpoint, status_code=response.status, detail=message)
    raise ProleApiError(text, code=code, endpoint=endpoint, status_code=response.status, detail=message)


def single_row(response: RestResponse) -> dict[str, Any]:
    """Unwrap a reply expected to hold exactly one row."""
    data = raise_for_response(response)
    if isinstance(data, list):
        if len(data) != 1:
            raise ProleNotFoundError(
                f"{response.endpoint} returned {len(data)} rows, expected 1",
                code=SINGLE_ROW_CODE,
                endpoint=response.endpoint,
                status_code=response.status,
            )
        data = data[0]
    if not isinstance(data, dict):
        raise ProleTransportError(
            f"Unexpected row payload from {response.endpoint}: {type(data).__name__}",
            status_code=response.status,
            endpoint=response.endpoint,
        )
    return data
