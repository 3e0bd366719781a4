from __future__ import annotations

import pytest

from pyprole._api._common import is_duplicate, raise_for_response, single_row
from pyprole._transport import RestResponse
from pyprole.exceptions import (
    ProleApiError,
    ProleDuplicateError,
    ProleNotFoundError,
    ProleTransportError,
)


def _response(status: int, data: object, endpoint: str = "newsletter_signups") -> RestResponse:
    return RestResponse(status=status, data=data, endpoint=endpoint)


def test_success_returns_data() -> None:
    assert raise_for_response(_response(200, [{"id": 1}])) == [{"id": 1}]
    assert raise_for_response(_response(201, None)) is None


def test_unique_violation_raises_duplicate() -> None:
    body = {"code": "23505", "message": 'duplicate key value violates unique constraint "newsletter_email_key"'}
    with pytest.raises(ProleDuplicateError) as exc_info:
        raise_for_response(_response(409, body))

    exc = exc_info.value
    assert exc.code == "23505"
    assert exc.status_code == 409
    assert exc.endpoint == "newsletter_signups"
    assert "duplicate key" in exc.detail


@pytest.mark.parametrize(
    ("code", "message", "status", "expected"),
    [
        ("23505", "", 400, True),
        ("", "", 409, True),
        ("P0001", "Email already exists", 400, True),
        ("P0001", "Duplicate entry", 400, True),
        ("42501", "permission denied for table newsletter_signups", 401, False),
    ],
)
def test_is_duplicate(code: str, message: str, status: int, expected: bool) -> None:
    assert is_duplicate(code, message, status) is expected


def test_other_error_body_raises_api_error() -> None:
    body = {"code": "42501", "message": "permission denied"}
    with pytest.raises(ProleApiError) as exc_info:
        raise_for_response(_response(401, body))

    exc = exc_info.value
    assert not isinstance(exc, ProleDuplicateError)
    assert exc.code == "42501"
    assert exc.detail == "permission denied"


def test_error_without_body_is_transport_error() -> None:
    with pytest.raises(ProleTransportError) as exc_info:
        raise_for_response(_response(502, None))
    assert exc_info.value.status_code == 502


def test_single_row_unwraps_list() -> None:
    assert single_row(_response(200, [{"id": "a"}], "adventures")) == {"id": "a"}


def test_single_row_empty_list_is_not_found() -> None:
    with pytest.raises(ProleNotFoundError):
        single_row(_response(200, [], "adventures"))


def test_single_row_pgrst116_is_not_found() -> None:
    body = {"code": "PGRST116", "message": "JSON object requested, multiple (or no) rows returned"}
    with pytest.raises(ProleNotFoundError):
        single_row(_response(406, body, "adventures"))


def test_bare_conflict_is_duplicate() -> None:
    with pytest.raises(ProleDuplicateError) as exc_info:
        raise_for_response(_response(409, None))
    assert exc_info.value.status_code == 409
    assert exc_info.value.detail == ""
