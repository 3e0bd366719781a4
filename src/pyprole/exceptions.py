"""Custom exception hierarchy for pyprole."""

from __future__ import annotations


class ProleError(Exception):
    """Base exception for all pyprole errors."""


class ProleConfigError(ProleError):
    """Hosted store configuration is missing or invalid."""


class ProleContentError(ProleError):
    """A static content feed could not be read or parsed."""

    def __init__(self, message: str, *, source: str = "") -> None:
        self.source = source
        super().__init__(message)


class ProleTransportError(ProleError):
    """HTTP-level failure (network, unexpected status, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class ProleApiError(ProleError):
    """The hosted store rejected the request with an error body."""

    def __init__(
        self,
        message: str,
        *,
        code: str = "",
        endpoint: str = "",
        status_code: int | None = None,
        detail: str = "",
    ) -> None:
        self.code = code
        self.detail = detail
        self.endpoint = endpoint
        self.status_code = status_code
        super().__init__(message)


class ProleDuplicateError(ProleApiError):
    """Insert rejected by a uniqueness constraint (Postgres code ``23505``).

    Raised for newsletter signups of an address that is already on the
    list, so callers can show "already subscribed" instead of a failure.
    """


class ProleNotFoundError(ProleApiError):
    """A single-row lookup matched no record."""


class ProleDataError(ProleError):
    """The hosted store replied, but the payload does not fit the model."""

    def __init__(self, message: str, *, endpoint: str = "") -> None:
        self.endpoint = endpoint
        super().__init__(message)
