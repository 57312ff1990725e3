"""HTTP fetcher for the page under review."""

from __future__ import annotations

import logging
import re

import httpx

from roaster.config import settings
from roaster.errors import FetchError, ValidationError
from roaster.scraper.models import RawPage

logger = logging.getLogger(__name__)

_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)


def normalize_url(raw_url: str | None) -> str:
    """Return *raw_url* with an explicit scheme, defaulting to ``https://``.

    Raises:
        ValidationError: If *raw_url* is empty or only whitespace.
    """
    url = (raw_url or "").strip()
    if not url:
        raise ValidationError("URL is required")
    if not _SCHEME_RE.match(url):
        url = "https://" + url
    return url


def fetch_page(raw_url: str) -> RawPage:
    """Fetch *raw_url* (normalized first) and return a :class:`RawPage`.

    A single GET is issued with a browser-like User-Agent and the configured
    timeout.  Redirects are followed by the client; there are no retries.

    Raises:
        ValidationError: If *raw_url* is blank.
        FetchError: On a non-2xx status, timeout, DNS failure, refused
            connection or malformed URL.  The message is user-facing.
    """
    url = normalize_url(raw_url)
    logger.info("Fetching %s", url)

    try:
        with httpx.Client(
            headers={"User-Agent": settings.user_agent},
            timeout=settings.fetch_timeout,
            follow_redirects=True,
        ) as client:
            response = client.get(url)
            response.raise_for_status()
            html = response.text
            status_code = response.status_code
    except httpx.HTTPStatusError as exc:
        code = exc.response.status_code
        logger.warning("Fetch of %s returned HTTP %s", url, code)
        raise FetchError(f"Request failed with status code {code}") from exc
    except httpx.TimeoutException as exc:
        logger.warning("Fetch of %s timed out", url)
        raise FetchError(
            f"Timed out after {settings.fetch_timeout:g}s fetching {url}"
        ) from exc
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.warning("Fetch of %s failed: %r", url, exc)
        raise FetchError(str(exc) or f"Could not fetch {url}") from exc

    return RawPage(url=url, html=html, status_code=status_code)
