"""Client configuration for pyprole."""

from __future__ import annotations

import dataclasses
import os
from pathlib import Path
from typing import Any

from pyprole._constants import (
    PLACEHOLDER_KEY_MARKERS,
    PLACEHOLDER_URL_MARKERS,
    SITE_BASE_URL,
    SUPABASE_HOST_MARKERS,
)


def is_valid_store_url(url: str | None) -> bool:
    """Return ``True`` when *url* looks like a real hosted-store project URL."""
    if not url or not isinstance(url, str):
        return False
    candidate = url.strip()
    if not candidate or not candidate.startswith("http"):
        return False
    if not any(marker in candidate for marker in SUPABASE_HOST_MARKERS):
        return False
    return not any(marker in candidate for marker in PLACEHOLDER_URL_MARKERS)


def is_valid_store_key(key: str | None) -> bool:
    """Return ``True`` when *key* is a non-empty, non-placeholder anon key."""
    if not key or not isinstance(key, str):
        return False
    if not key.strip():
        return False
    return not any(marker in key for marker in PLACEHOLDER_KEY_MARKERS)


@dataclasses.dataclass(frozen=True)
class ProleConfig:
    """Library configuration.

    Parameters
    ----------
    store_url : str or None
        Hosted store project URL (e.g. ``https://abc.supabase.co``).
    store_key : str or None
        Anonymous access key for the hosted store.
    site_url : str
        Public site base URL used for sitemap ``<loc>`` entries.
    request_timeout : float
        Total timeout in seconds for each HTTP request to the store.
    content_dir : Path or None
        Directory holding the static JSON feeds.
    jitter_amount : float
        Full width, in decimal degrees, of the coordinate jitter applied
        to redacted missions.
    """

    store_url: str | None = None
    store_key: str | None = None
    site_url: str = SITE_BASE_URL
    request_timeout: float = 10.0
    content_dir: Path | None = None
    jitter_amount: float = 0.02

    @property
    def store_configured(self) -> bool:
        """Whether the primary hosted store should be constructed at all."""
        return is_valid_store_url(self.store_url) and is_valid_store_key(self.store_key)

    @property
    def rest_base_url(self) -> str:
        """Store URL without a trailing slash."""
        return (self.store_url or "").strip().rstrip("/")

    @classmethod
    def from_env(cls, **overrides: Any) -> ProleConfig:
        """Create configuration from environment variables.

        Reads ``PROLE_SUPABASE_URL`` and ``PROLE_SUPABASE_ANON_KEY`` (falling
        back to the site build's ``VITE_SUPABASE_URL`` and
        ``VITE_SUPABASE_ANON_KEY``), plus optional ``PROLE_SITE_URL``,
        ``PROLE_REQUEST_TIMEOUT``, ``PROLE_CONTENT_DIR`` and
        ``PROLE_JITTER_AMOUNT``. Explicit keyword arguments override
        environment values.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        store_url = env.get("PROLE_SUPABASE_URL", env.get("VITE_SUPABASE_URL"))
        if store_url is not None:
            config_kwargs["store_url"] = store_url
        store_key = env.get("PROLE_SUPABASE_ANON_KEY", env.get("VITE_SUPABASE_ANON_KEY"))
        if store_key is not None:
            config_kwargs["store_key"] = store_key

        site_url = env.get("PROLE_SITE_URL")
        if site_url is not None:
            config_kwargs["site_url"] = site_url

        timeout_env = env.get("PROLE_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            config_kwargs["request_timeout"] = float(timeout_env)

        content_env = env.get("PROLE_CONTENT_DIR")
        if content_env is not None and "content_dir" not in overrides:
            config_kwargs["content_dir"] = Path(content_env)

        jitter_env = env.get("PROLE_JITTER_AMOUNT")
        if jitter_env is not None and "jitter_amount" not in overrides:
            config_kwargs["jitter_amount"] = float(jitter_env)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
