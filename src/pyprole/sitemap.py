"""XML sitemap for the public site routes."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from typing import Literal
from xml.etree import ElementTree as ET

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pyprole._constants import SITE_BASE_URL
from pyprole.models._base import utcnow

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"

SITEMAP_HEADERS: dict[str, str] = {
    "Content-Type": "application/xml",
    "Cache-Control": "public, max-age=86400, s-maxage=86400",
}

ChangeFreq = Literal["always", "hourly", "daily", "weekly", "monthly", "yearly", "never"]


class SitemapRoute(BaseModel):
    """One ``<url>`` entry."""

    model_config = ConfigDict(frozen=True)

    path: str
    changefreq: ChangeFreq = "monthly"
    priority: float = Field(default=0.5, ge=0.0, le=1.0)

    @field_validator("path")
    @classmethod
    def _absolute_path(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("route path must start with '/'")
        return value


ROUTES: tuple[SitemapRoute, ...] = (
    SitemapRoute(path="/", changefreq="weekly", priority=1.0),
    SitemapRoute(path="/watch", changefreq="weekly", priority=0.8),
    SitemapRoute(path="/gear", changefreq="monthly", priority=0.7),
    SitemapRoute(path="/stories", changefreq="weekly", priority=0.9),
    SitemapRoute(path="/community", changefreq="weekly", priority=0.8),
    SitemapRoute(path="/about", changefreq="monthly", priority=0.6),
    SitemapRoute(path="/contact", changefreq="monthly", priority=0.5),
    SitemapRoute(path="/privacy-policy", changefreq="yearly", priority=0.3),
    SitemapRoute(path="/terms", changefreq="yearly", priority=0.3),
)


def generate_sitemap(
    routes: Iterable[SitemapRoute] = ROUTES,
    *,
    base_url: str = SITE_BASE_URL,
    today: date | None = None,
) -> str:
    """Render a sitemaps.org ``urlset`` document for *routes*."""
    lastmod = (today or utcnow().date()).isoformat()
    base = base_url.rstrip("/")

    urlset = ET.Element("urlset", xmlns=SITEMAP_NAMESPACE)
    for route in routes:
        url = ET.SubElement(urlset, "url")
        ET.SubElement(url, "loc").text = f"{base}{route.path}"
        ET.SubElement(url, "lastmod").text = lastmod
        ET.SubElement(url, "changefreq").text = route.changefreq
        ET.SubElement(url, "priority").text = str(route.priority)

    ET.indent(urlset, space="  ")
    body = ET.tostring(urlset, encoding="unicode")
    return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}\n'
