"""Prompt builders and output clean-up for the language-model backends."""

from __future__ import annotations

import json
import re

from roaster.grader.rules import Style
from roaster.landing.models import BusinessInfo
from roaster.scraper.models import SiteSignals

_LEADING_FENCE_RE = re.compile(r"^\s*```[\w+-]*[^\S\n]*\n?")
_TRAILING_FENCE_RE = re.compile(r"\n?```\s*$")

_ROAST_INSTRUCTIONS = (
    "You are a brutally honest, sarcastic website critic with a great sense of "
    "humor. Analyze this website and ROAST it. Be funny, savage, but also "
    "helpful. Use emojis. Give it a grade (F to A).\n\n"
    "Website Analysis:\n{analysis}\n\n"
    "Format your response as:\n"
    "1. Overall Grade: [grade]\n"
    "2. First Impressions (roast the title/description)\n"
    "3. Design Crimes (what looks bad)\n"
    "4. Technical Sins (missing SEO, accessibility issues)\n"
    "5. Content Critique (is the copy good?)\n"
    "6. The Verdict (summary roast)\n"
    "7. Redemption Path (3 quick fixes they NEED to make)\n\n"
    "Be savage but constructive. Make them laugh, then make them fix their site."
)

_PROFESSIONAL_INSTRUCTIONS = (
    "You are a professional website consultant. Analyze this website and "
    "provide constructive, actionable feedback. Be encouraging but honest.\n\n"
    "Website Analysis:\n{analysis}\n\n"
    "Format your response as:\n"
    "1. Overall Grade: [grade]\n"
    "2. First Impressions\n"
    "3. Design Assessment\n"
    "4. Technical Review (SEO, accessibility, performance)\n"
    "5. Content Evaluation\n"
    "6. Summary\n"
    "7. Top 3 Priority Improvements\n\n"
    "Be professional, helpful, and specific with recommendations."
)

_LANDING_INSTRUCTIONS = (
    "Create a complete, modern HTML landing page for this business. Include "
    "inline CSS (no external files). Make it responsive and professional.\n\n"
    "Business Info:\n"
    "- Name: {name}\n"
    "- Description: {description}\n"
    "- Target Customer: {target_customer}\n"
    "- Key Features/Benefits: {features}\n"
    "- Call to Action: {cta}\n"
    "- Contact: {contact}\n\n"
    "Include navigation, a hero section with headline and CTA button, a "
    "features section, a social-proof section, a contact section and a footer. "
    "Use flexbox/grid and subtle hover effects.\n\n"
    "Return ONLY the complete HTML code, no explanation. Start with <!DOCTYPE html>"
)


def build_critique_prompt(signals: SiteSignals, style: Style | str) -> str:
    """Describe *signals* to the model and ask for a critique in *style*."""
    template = _ROAST_INSTRUCTIONS if Style(style) is Style.ROAST else _PROFESSIONAL_INSTRUCTIONS
    analysis = json.dumps(signals.as_dict(), indent=2, ensure_ascii=False)
    return template.replace("{analysis}", analysis)


def build_landing_prompt(info: BusinessInfo) -> str:
    return _LANDING_INSTRUCTIONS.format(
        name=info.name,
        description=info.description,
        target_customer=info.target_customer,
        features=info.features,
        cta=info.cta,
        contact=info.contact,
    )


def strip_code_fences(text: str) -> str:
    """Remove a wrapping ```` ```lang ```` … ```` ``` ```` pair, if present.

    A trailing closer is only stripped when the text opens with a fence;
    a reply cut off before its closing fence loses just the opener.
    """
    opener = _LEADING_FENCE_RE.match(text)
    if opener is None:
        return text.strip()
    cleaned = _TRAILING_FENCE_RE.sub("", text[opener.end():], count=1)
    return cleaned.strip()
