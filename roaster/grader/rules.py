"""Table-driven rule engine for report prose.

A report is an ordered tuple of :class:`Section` objects.  Each section holds
ordered :class:`Line` entries, and each line is an ordered tuple of
:class:`Rule` candidates: the first rule whose predicate holds supplies the
sentence template for the requested :class:`Style`.  The last rule of every
line is unconditional, so a line always renders.

Everything here is pure: the same context always yields the same text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict

from roaster.scraper.models import SiteSignals


class Style(str, Enum):
    ROAST = "roast"
    PROFESSIONAL = "professional"


@dataclass(frozen=True)
class ReportContext:
    """Inputs a predicate may inspect, plus the values templates interpolate."""

    signals: SiteSignals
    score: int
    grade: str
    values: Dict[str, Any] = field(default_factory=dict)


Predicate = Callable[[ReportContext], bool]


def always(ctx: ReportContext) -> bool:
    return True


@dataclass(frozen=True)
class Rule:
    when: Predicate
    roast: str
    professional: str

    def template(self, style: Style) -> str:
        return self.roast if style is Style.ROAST else self.professional


@dataclass(frozen=True)
class Line:
    rules: tuple[Rule, ...]

    def choose(self, ctx: ReportContext) -> Rule:
        for rule in self.rules:
            if rule.when(ctx):
                return rule
        return self.rules[-1]

    def render(self, ctx: ReportContext, style: Style) -> str:
        return self.choose(ctx).template(style).format(**ctx.values)


def line(*rules: Rule) -> Line:
    if not rules:
        raise ValueError("a line needs at least one rule")
    return Line(rules=tuple(rules))


PARAGRAPH = "paragraph"
BULLETS = "bullets"
NUMBERED = "numbered"


@dataclass(frozen=True)
class Section:
    key: str
    roast_heading: str
    professional_heading: str
    lines: tuple[Line, ...]
    layout: str = BULLETS

    def heading(self, style: Style) -> str:
        return self.roast_heading if style is Style.ROAST else self.professional_heading

    def render(self, ctx: ReportContext, style: Style) -> str:
        sentences = [ln.render(ctx, style) for ln in self.lines]
        if self.layout == PARAGRAPH:
            body = " ".join(sentences)
        elif self.layout == NUMBERED:
            body = "\n".join(f"{i}. {s}" for i, s in enumerate(sentences, start=1))
        else:
            body = "\n".join(f"- {s}" for s in sentences)
        return f"### {self.heading(style)}\n{body}"


def render_sections(
    sections: tuple[Section, ...], ctx: ReportContext, style: Style
) -> list[str]:
    return [section.render(ctx, style) for section in sections]
