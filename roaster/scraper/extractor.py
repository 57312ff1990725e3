"""Signal extraction: turns fetched markup into a :class:`SiteSignals` record."""

from __future__ import annotations

import logging
import re
from typing import Dict, Iterable

from bs4 import BeautifulSoup, ParserRejectedMarkup
from bs4.element import Tag

from roaster.config import settings
from roaster.scraper.models import (
    NO_H1,
    NO_META_DESCRIPTION,
    NO_TITLE,
    RawPage,
    SiteSignals,
)

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")

# Substrings matched against anchor hrefs, per platform.
_SOCIAL_DOMAINS: Dict[str, tuple[str, ...]] = {
    "facebook": ("facebook.com",),
    "twitter": ("twitter.com", "x.com"),
    "instagram": ("instagram.com",),
    "linkedin": ("linkedin.com",),
}

_NON_VISIBLE = ["script", "style", "noscript"]

# Tried in order; lxml recovers from markup html.parser rejects.
_PARSERS = ("html.parser", "lxml")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _attr_text(tag: Tag, name: str) -> str | None:
    """Return attribute *name* as a single string.

    BeautifulSoup splits multi-valued attributes such as ``rel`` into lists;
    they are joined back so substring checks behave like a CSS ``*=`` match.
    """
    value = tag.get(name)
    if value is None:
        return None
    if isinstance(value, list):
        return " ".join(value)
    return str(value)


def _parse(html: str) -> BeautifulSoup | None:
    """Parse *html* with the first parser that accepts it, else ``None``."""
    for features in _PARSERS:
        try:
            return BeautifulSoup(html, features)
        except ParserRejectedMarkup as exc:
            logger.warning("Parser %s rejected markup: %s", features, exc)
    return None


def _is_https(url: str) -> bool:
    return url.strip().lower().startswith("https://")


def _collapse(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def _meta_named(soup: BeautifulSoup, name: str) -> Tag | None:
    for meta in soup.find_all("meta"):
        if _attr_text(meta, "name") == name:
            return meta
    return None


def _extract_title(soup: BeautifulSoup) -> str:
    tag = soup.find("title")
    if tag is None:
        return NO_TITLE
    return tag.get_text().strip() or NO_TITLE


def _extract_meta_description(soup: BeautifulSoup) -> str:
    meta = _meta_named(soup, "description")
    if meta is None:
        return NO_META_DESCRIPTION
    content = (_attr_text(meta, "content") or "").strip()
    return content or NO_META_DESCRIPTION


def _count_images_without_alt(images: Iterable[Tag]) -> int:
    """Count images whose ``alt`` is missing or exactly empty."""
    return sum(1 for img in images if _attr_text(img, "alt") in (None, ""))


def _link_rels(soup: BeautifulSoup) -> list[str]:
    return [(_attr_text(link, "rel") or "").strip().lower() for link in soup.find_all("link")]


def _count_submit_inputs(soup: BeautifulSoup) -> int:
    return sum(
        1
        for inp in soup.find_all("input")
        if (_attr_text(inp, "type") or "").strip().lower() == "submit"
    )


def _extract_social_links(hrefs: list[str]) -> Dict[str, bool]:
    return {
        platform: any(domain in href for href in hrefs for domain in domains)
        for platform, domains in _SOCIAL_DOMAINS.items()
    }


def _extract_body_text(soup: BeautifulSoup, limit: int) -> str:
    """Visible text of ``<body>``, whitespace-collapsed and truncated.

    Mutates *soup*; call it after every count has been taken.
    """
    container = soup.body
    if container is None:
        for head in soup.find_all("head"):
            head.decompose()
        container = soup
    for tag in container.find_all(_NON_VISIBLE):
        tag.decompose()
    return _collapse(container.get_text(separator=" "))[:limit]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_signals(url: str, html: str, body_text_limit: int | None = None) -> SiteSignals:
    """Parse *html* fetched from *url* into a :class:`SiteSignals` record.

    Never raises on malformed markup: ``html.parser`` is tried first and
    ``lxml`` second.  Absent elements map to sentinel text or zero counts,
    and markup every parser rejects yields the all-sentinel record.
    """
    limit = settings.body_text_limit if body_text_limit is None else body_text_limit
    soup = _parse(html or "")
    if soup is None:
        return SiteSignals(url=url, has_https=_is_https(url))

    h1s = soup.find_all("h1")
    images = soup.find_all("img")
    rels = _link_rels(soup)
    anchors = soup.find_all("a")
    hrefs = [_attr_text(a, "href") or "" for a in anchors]

    h1_text = NO_H1
    if h1s:
        h1_text = h1s[0].get_text().strip() or NO_H1

    fields = dict(
        url=url,
        title=_extract_title(soup),
        meta_description=_extract_meta_description(soup),
        h1_count=len(h1s),
        h1_text=h1_text,
        image_count=len(images),
        images_without_alt=_count_images_without_alt(images),
        has_https=_is_https(url),
        has_viewport=_meta_named(soup, "viewport") is not None,
        has_favicon=any("icon" in rel for rel in rels),
        link_count=len(anchors),
        script_count=len(soup.find_all("script")),
        css_count=sum(1 for rel in rels if rel == "stylesheet") + len(soup.find_all("style")),
        form_count=len(soup.find_all("form")),
        button_count=len(soup.find_all("button")) + _count_submit_inputs(soup),
        social_links=_extract_social_links(hrefs),
    )
    # Last: strips script/style nodes from the tree.
    fields["body_text"] = _extract_body_text(soup, limit)

    return SiteSignals(**fields)


def extract_page(raw: RawPage) -> SiteSignals:
    """Convenience wrapper: extract signals from a fetched :class:`RawPage`."""
    return extract_signals(raw.url, raw.html)
