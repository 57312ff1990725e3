"""The heuristic grader: signals in, scored critique out.

``grade`` never raises for any signal record.  Score, grade and text depend
only on the :class:`SiteSignals` record and the requested :class:`Style`, so
identical input always produces byte-identical output.
"""

from __future__ import annotations

from dataclasses import dataclass

from roaster.grader.rules import ReportContext, Style, render_sections
from roaster.grader.scoring import letter_grade, score_signals
from roaster.grader.sections import REPORT_SECTIONS
from roaster.scraper.models import SiteSignals

_HEADER_ICON = {Style.ROAST: "🔥", Style.PROFESSIONAL: "📊"}

_FOOTER = {
    Style.ROAST: "*[SMART ANALYSIS - connect a language model for fully custom roasts]*",
    Style.PROFESSIONAL: "*[SMART ANALYSIS - connect a language model for comprehensive AI analysis]*",
}


@dataclass(frozen=True)
class GradeReport:
    score: int
    grade: str
    style: Style
    report_text: str


def build_context(signals: SiteSignals, score: int, grade_letter: str) -> ReportContext:
    """Collect the values report templates may interpolate."""
    values = {
        "url": signals.url,
        "title": signals.title,
        "meta_description": signals.meta_description,
        "h1_count": signals.h1_count,
        "h1_text": signals.h1_text,
        "image_count": signals.image_count,
        "images_without_alt": signals.images_without_alt,
        "link_count": signals.link_count,
        "script_count": signals.script_count,
        "css_count": signals.css_count,
        "form_count": signals.form_count,
        "button_count": signals.button_count,
        "social_count": signals.social_count,
        "word_count": len(signals.body_text.split()),
        "score": score,
        "grade": grade_letter,
    }
    return ReportContext(signals=signals, score=score, grade=grade_letter, values=values)


def grade(signals: SiteSignals, style: Style | str = Style.ROAST) -> GradeReport:
    """Score *signals* and write the report in the requested *style*.

    Args:
        signals: The extracted signal record.
        style: ``Style.ROAST`` / ``"roast"`` or ``Style.PROFESSIONAL`` /
            ``"professional"``.

    Raises:
        ValueError: If *style* names neither tone.
    """
    style = Style(style)
    score = score_signals(signals)
    grade_letter = letter_grade(score)
    ctx = build_context(signals, score, grade_letter)

    parts = [f"## {_HEADER_ICON[style]} Score: {score}/100 | Grade: {grade_letter}"]
    parts.extend(render_sections(REPORT_SECTIONS, ctx, style))
    parts.append(_FOOTER[style])

    return GradeReport(
        score=score,
        grade=grade_letter,
        style=style,
        report_text="\n\n".join(parts),
    )
