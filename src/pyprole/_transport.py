"""HTTP transport for the hosted store's PostgREST endpoint."""

from __future__ import annotations

import dataclasses
import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from pyprole._constants import REST_PATH, USER_AGENT
from pyprole._redact import redact_for_log
from pyprole.config import ProleConfig
from pyprole.exceptions import ProleConfigError, ProleTransportError

_logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class RestResponse:
    """Status and decoded JSON body of one PostgREST call.

    ``data`` is ``None`` for empty bodies (e.g. ``return=minimal`` inserts).
    """

    status: int
    data: Any
    endpoint: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class Transport(Protocol):
    """Structural transport interface used by the ``_api`` modules.

    Having a protocol here makes it easy to pass test doubles while
    keeping the production implementation (`RestTransport`) concrete.
    """

    async def request(
        self,
        method: str,
        table: str,
        *,
        params: Mapping[str, str] | None = None,
        body: Any = None,
        prefer: str | None = None,
    ) -> RestResponse:
        ...


class RestTransport:
    """Sends table requests to ``<store_url>/rest/v1/<table>`` with the anon key."""

    def __init__(self, config: ProleConfig, http_session: aiohttp.ClientSession) -> None:
        if not config.store_configured:
            raise ProleConfigError("Hosted store URL/key missing or invalid")
        self._config = config
        self._http = http_session
        self._base = f"{config.rest_base_url}{REST_PATH}"
        self._timeout = aiohttp.ClientTimeout(total=config.request_timeout)

    def _headers(self, prefer: str | None) -> dict[str, str]:
        key = self._config.store_key or ""
        headers = {
            "apikey": key,
            "authorization": f"Bearer {key}",
            "accept": "application/json",
            "content-type": "application/json",
            "user-agent": USER_AGENT,
        }
        if prefer:
            headers["prefer"] = prefer
        return headers

    async def request(
        self,
        method: str,
        table: str,
        *,
        params: Mapping[str, str] | None = None,
        body: Any = None,
        prefer: str | None = None,
    ) -> RestResponse:
        """Send one request and decode the JSON reply.

        Non-2xx statuses are returned, not raised: PostgREST puts its error
        code in the body and the ``_api`` layer maps it. Network failures and
        undecodable bodies raise :class:`ProleTransportError`.
        """
        url = f"{self._base}/{table}"
        headers = self._headers(prefer)
        data = json.dumps(body) if body is not None else None

        _logger.debug(
            "%s %s params=%s headers=%s body=%s",
            method,
            url,
            dict(params or {}),
            redact_for_log(headers),
            redact_for_log(body),
        )

        try:
            async with self._http.request(
                method,
                url,
                params=dict(params or {}),
                data=data,
                headers=headers,
                timeout=self._timeout,
            ) as resp:
                text = await resp.text()
                status = resp.status
        except (aiohttp.ClientError, TimeoutError) as exc:
            raise ProleTransportError(
                f"Request to {table} failed: {exc}",
                endpoint=table,
            ) from exc

        _logger.debug("%s %s -> HTTP %s", method, url, status)

        if not text.strip():
            return RestResponse(status=status, data=None, endpoint=table)

        try:
            decoded = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ProleTransportError(
                f"Invalid JSON from {table}: {text[:200]}",
                status_code=status,
                endpoint=table,
            ) from exc

        return RestResponse(status=status, data=decoded, endpoint=table)
