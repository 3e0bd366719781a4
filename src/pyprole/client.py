"""High-level async client composing the stores, mission control and forms."""

from __future__ import annotations

import logging
import random
from typing import Any

import aiohttp
from pydantic import ValidationError

from pyprole._api import submissions as _submissions_api
from pyprole._redact import mask_email
from pyprole._transport import RestTransport, Transport
from pyprole.config import ProleConfig
from pyprole.exceptions import (
    ProleApiError,
    ProleConfigError,
    ProleDuplicateError,
    ProleError,
    ProleTransportError,
)
from pyprole.models.adventure import Adventure
from pyprole.models.submissions import (
    SUBSCRIBE_DUPLICATE_MESSAGE,
    SUBSCRIBE_GENERIC_MESSAGE,
    SUBSCRIBE_INVALID_MESSAGE,
    SUBSCRIBE_NETWORK_MESSAGE,
    SUBSCRIBE_SUCCESS_MESSAGE,
    ContactMessage,
    NewsletterSignup,
    SubmissionResult,
    SubscribeOutcome,
)
from pyprole.service import MissionControl, MissionLoad
from pyprole.stores.base import AdventureStore
from pyprole.stores.memory import LatencyProfile, MemoryAdventureStore
from pyprole.stores.remote import RemoteAdventureStore

_logger = logging.getLogger(__name__)


class ProleClient:
    """Async client for the Prole Adventures data layer.

    Usage::

        async with ProleClient(ProleConfig.from_env()) as client:
            board = await client.load_adventures()
            result = await client.subscribe_newsletter("scout@example.com")

    The hosted store is only used when the configuration passes
    :attr:`ProleConfig.store_configured`; otherwise every mission read goes
    to the in-memory fallback and form submissions report an error.
    """

    def __init__(
        self,
        config: ProleConfig,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
        fallback: AdventureStore | None = None,
        fallback_latency: LatencyProfile | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._config = config
        self._external_session = session is not None
        self._http_session = session
        self._injected_transport = transport
        self._transport: Transport | None = transport
        self._fallback = fallback or MemoryAdventureStore(latency=fallback_latency)
        self._rng = rng
        self._missions: MissionControl | None = None

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> ProleClient:
        if self._transport is None and self._config.store_configured:
            if self._http_session is None:
                self._http_session = aiohttp.ClientSession()
            self._transport = RestTransport(self._config, self._http_session)
        elif self._transport is None:
            _logger.debug(
                "Hosted store not initialized - url=%s key=%s",
                self._config.store_url or "not set",
                "***set***" if self._config.store_key else "not set",
            )

        primary = RemoteAdventureStore(self._transport) if self._transport is not None else None
        self._missions = MissionControl(
            primary,
            self._fallback,
            jitter_amount=self._config.jitter_amount,
            rng=self._rng,
        )
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._transport = self._injected_transport
        self._missions = None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_missions(self) -> MissionControl:
        if self._missions is None:
            raise ProleError("Client not initialized. Use 'async with ProleClient(...) as client:'")
        return self._missions

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise ProleConfigError("Hosted store not configured")
        return self._transport

    # ------------------------------------------------------------------
    # Missions
    # ------------------------------------------------------------------

    @property
    def missions(self) -> MissionControl:
        return self._require_missions()

    async def load_adventures(self) -> MissionLoad:
        """Projections for the mission board, with the session's source outcome."""
        return await self._require_missions().load_adventures()

    async def contribute(self, adventure_id: str, amount: float) -> Adventure:
        """Add *amount* to a mission's bounty (read, add, overwrite)."""
        return await self._require_missions().contribute(adventure_id, amount)

    # ------------------------------------------------------------------
    # Forms
    # ------------------------------------------------------------------

    async def save_contact_message(self, name: str, email: str, message: str) -> None:
        """Store a contact form submission.

        Raises :class:`ProleConfigError` when the hosted store is not
        configured, and :class:`ProleApiError`/:class:`ProleTransportError`
        when the insert fails.
        """
        transport = self._require_transport()
        payload = ContactMessage(name=name, email=email, message=message)
        await _submissions_api.insert_contact_message(transport, payload)

    async def subscribe_newsletter(self, email: str) -> SubmissionResult:
        """Sign *email* up for the newsletter and classify the outcome."""
        try:
            signup = NewsletterSignup(email=email)
        except ValidationError:
            return SubmissionResult(outcome=SubscribeOutcome.ERROR, message=SUBSCRIBE_INVALID_MESSAGE)

        try:
            transport = self._require_transport()
            await _submissions_api.insert_newsletter_signup(transport, signup)
        except ProleDuplicateError:
            _logger.info("Newsletter address already subscribed: %s", mask_email(email))
            return SubmissionResult(outcome=SubscribeOutcome.DUPLICATE, message=SUBSCRIBE_DUPLICATE_MESSAGE)
        except ProleTransportError as exc:
            _logger.warning("Newsletter signup network error: %s", exc)
            return SubmissionResult(outcome=SubscribeOutcome.ERROR, message=SUBSCRIBE_NETWORK_MESSAGE)
        except ProleApiError as exc:
            _logger.warning("Newsletter signup rejected: code=%s", exc.code)
            return SubmissionResult(outcome=SubscribeOutcome.ERROR, message=exc.detail or SUBSCRIBE_GENERIC_MESSAGE)
        except ProleConfigError:
            return SubmissionResult(outcome=SubscribeOutcome.ERROR, message=SUBSCRIBE_GENERIC_MESSAGE)
        return SubmissionResult(outcome=SubscribeOutcome.SUCCESS, message=SUBSCRIBE_SUCCESS_MESSAGE)
