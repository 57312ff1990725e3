"""Scraper package — page fetch & signal extraction."""

from roaster.scraper.extractor import extract_page, extract_signals
from roaster.scraper.fetcher import fetch_page, normalize_url
from roaster.scraper.models import RawPage, SiteSignals

__all__ = [
    "fetch_page",
    "normalize_url",
    "extract_signals",
    "extract_page",
    "RawPage",
    "SiteSignals",
]
