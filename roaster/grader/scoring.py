"""Additive point system mapping :class:`SiteSignals` to a score and grade.

Canonical table (applied in this order, then clamped to ``[0, 100]``)::

    base                                      40
    HTTPS                                    +15
    viewport meta tag                        +12
    meta description present                 +10
    exactly one H1                            +8
    more than one H1                          +4
    images present, all with alt text         +8
    favicon                                   +5
    at least one button                       +2
    at least one form                         +2
    more than 5 images without alt text      -10
    more than 20 scripts                      -5
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from roaster.scraper.models import SiteSignals

BASE_SCORE = 40
MIN_SCORE = 0
MAX_SCORE = 100


@dataclass(frozen=True)
class ScoreRule:
    label: str
    delta: int
    applies: Callable[[SiteSignals], bool]


SCORE_RULES: tuple[ScoreRule, ...] = (
    ScoreRule("https", 15, lambda s: s.has_https),
    ScoreRule("viewport", 12, lambda s: s.has_viewport),
    ScoreRule("meta_description", 10, lambda s: s.has_meta_description),
    ScoreRule("single_h1", 8, lambda s: s.h1_count == 1),
    ScoreRule("multiple_h1", 4, lambda s: s.h1_count > 1),
    ScoreRule(
        "alt_text_coverage",
        8,
        lambda s: s.images_without_alt == 0 and s.image_count > 0,
    ),
    ScoreRule("favicon", 5, lambda s: s.has_favicon),
    ScoreRule("buttons", 2, lambda s: s.button_count > 0),
    ScoreRule("forms", 2, lambda s: s.form_count > 0),
    ScoreRule("missing_alt_text", -10, lambda s: s.images_without_alt > 5),
    ScoreRule("script_bloat", -5, lambda s: s.script_count > 20),
)

# (minimum score, grade), highest first.
GRADE_THRESHOLDS: tuple[tuple[int, str], ...] = (
    (93, "A"),
    (90, "A-"),
    (87, "B+"),
    (83, "B"),
    (80, "B-"),
    (77, "C+"),
    (73, "C"),
    (70, "C-"),
    (67, "D+"),
    (63, "D"),
    (60, "D-"),
)
FAILING_GRADE = "F"


def score_breakdown(signals: SiteSignals) -> list[tuple[str, int]]:
    """Return the ``(label, delta)`` pairs of every rule that applies."""
    return [(rule.label, rule.delta) for rule in SCORE_RULES if rule.applies(signals)]


def score_signals(signals: SiteSignals) -> int:
    """Return the clamped 0–100 score for *signals*."""
    total = BASE_SCORE + sum(delta for _, delta in score_breakdown(signals))
    return max(MIN_SCORE, min(MAX_SCORE, total))


def letter_grade(score: int) -> str:
    """Map *score* onto the twelve-step letter scale."""
    for minimum, grade in GRADE_THRESHOLDS:
        if score >= minimum:
            return grade
    return FAILING_GRADE
