"""Data models for the scraper pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping

NO_TITLE = "No title found"
NO_META_DESCRIPTION = "No meta description"
NO_H1 = "No H1 found"

SOCIAL_PLATFORMS = ("facebook", "twitter", "instagram", "linkedin")


def _no_social_links() -> Dict[str, bool]:
    return {platform: False for platform in SOCIAL_PLATFORMS}


@dataclass
class RawPage:
    """The raw HTTP response for a single URL fetch."""

    url: str
    html: str
    status_code: int


@dataclass(frozen=True)
class SiteSignals:
    """Structured facts extracted once from a fetched page.

    Every field has a default so that a partial record can still be graded.
    Text fields hold a sentinel (``NO_TITLE`` etc.) rather than an empty
    string when the element is absent.
    """

    url: str = ""
    title: str = NO_TITLE
    meta_description: str = NO_META_DESCRIPTION
    h1_count: int = 0
    h1_text: str = NO_H1
    image_count: int = 0
    images_without_alt: int = 0
    has_https: bool = False
    has_viewport: bool = False
    has_favicon: bool = False
    link_count: int = 0
    script_count: int = 0
    css_count: int = 0
    form_count: int = 0
    button_count: int = 0
    body_text: str = ""
    social_links: Mapping[str, bool] = field(default_factory=_no_social_links)

    def __post_init__(self) -> None:
        # Read-only view over a private copy.
        object.__setattr__(self, "social_links", MappingProxyType(dict(self.social_links)))

    @property
    def has_meta_description(self) -> bool:
        text = self.meta_description.strip()
        return bool(text) and text != NO_META_DESCRIPTION

    @property
    def social_count(self) -> int:
        return sum(1 for linked in self.social_links.values() if linked)

    def as_dict(self) -> Dict[str, Any]:
        """Return the camelCase shape used on the wire."""
        return {
            "url": self.url,
            "title": self.title,
            "metaDescription": self.meta_description,
            "h1Count": self.h1_count,
            "h1Text": self.h1_text,
            "imageCount": self.image_count,
            "imagesWithoutAlt": self.images_without_alt,
            "hasHttps": self.has_https,
            "linkCount": self.link_count,
            "hasViewport": self.has_viewport,
            "bodyText": self.body_text,
            "hasFavicon": self.has_favicon,
            "scriptCount": self.script_count,
            "cssCount": self.css_count,
            "formCount": self.form_count,
            "buttonCount": self.button_count,
            "socialLinks": dict(self.social_links),
        }
