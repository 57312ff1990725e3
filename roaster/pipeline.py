"""Analysis and landing-page pipelines shared by the API and the CLI.

``analyze_url`` orchestrates the review of a single site:

    normalize → fetch → extract signals → roast + professional critiques

The two critiques share only the immutable signal record, so they run in
parallel on a two-worker thread pool and are combined once both finish.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Dict

from roaster.errors import ValidationError
from roaster.generation.providers import TextGenerator
from roaster.grader.rules import Style
from roaster.landing.models import BusinessInfo
from roaster.scraper.extractor import extract_page
from roaster.scraper.fetcher import fetch_page
from roaster.scraper.models import SiteSignals

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisResult:
    signals: SiteSignals
    roast_feedback: str
    professional_feedback: str

    def as_dict(self) -> Dict[str, Any]:
        return {
            "success": True,
            "analysis": self.signals.as_dict(),
            "roastFeedback": self.roast_feedback,
            "professionalFeedback": self.professional_feedback,
        }


def critique_both(generator: TextGenerator, signals: SiteSignals) -> Dict[Style, str]:
    """Run both critique styles concurrently and return them keyed by style."""
    with ThreadPoolExecutor(max_workers=2, thread_name_prefix="critique") as pool:
        futures = {style: pool.submit(generator.critique, signals, style) for style in Style}
        return {style: future.result() for style, future in futures.items()}


def analyze_url(url: str, generator: TextGenerator) -> AnalysisResult:
    """Fetch *url*, extract its signals and critique it in both styles.

    Raises:
        ValidationError: If *url* is blank.
        FetchError: If the page cannot be fetched.
    """
    raw = fetch_page(url)
    signals = extract_page(raw)
    logger.info(
        "Extracted signals for %s (h1=%d, images=%d, scripts=%d)",
        signals.url,
        signals.h1_count,
        signals.image_count,
        signals.script_count,
    )

    feedback = critique_both(generator, signals)
    return AnalysisResult(
        signals=signals,
        roast_feedback=feedback[Style.ROAST],
        professional_feedback=feedback[Style.PROFESSIONAL],
    )


def generate_landing(info: BusinessInfo, generator: TextGenerator) -> str:
    """Return landing-page HTML for *info* from *generator*.

    Raises:
        ValidationError: If the business name or description is blank.
    """
    if not info.name or not info.description:
        raise ValidationError("Business name and description are required")
    logger.info("Generating landing page for %r via %s", info.name, generator.name)
    return generator.landing_page(info)
