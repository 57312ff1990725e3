"""Deterministic landing-page renderer.

Fills the packaged ``templates/landing.html`` with :class:`BusinessInfo`
values using :class:`string.Template`.  Interpolated values are injected
as-is unless escaping is enabled (``LANDING_ESCAPE_HTML`` or ``escape=True``).
"""

from __future__ import annotations

import html
from datetime import date
from functools import lru_cache
from pathlib import Path
from string import Template

from roaster.config import settings
from roaster.landing.models import BusinessInfo

FEATURE_SLOTS = 3
DEFAULT_FEATURE_LABELS = ("Quality Service", "Expert Support", "Fast Results")

_FEATURE_BLURBS = (
    "Designed from the ground up for {target}.",
    "Backed by the {name} team every step of the way.",
    "See the difference from day one.",
)


@lru_cache(maxsize=4)
def _load_template(path: Path) -> Template:
    return Template(path.read_text(encoding="utf-8"))


def split_features(features: str) -> list[str]:
    """Return exactly three feature labels from a comma-separated string.

    Blank entries are dropped, extras beyond the third are ignored, and
    missing slots take the default label for that slot.
    """
    labels = [part.strip() for part in (features or "").split(",") if part.strip()]
    labels = labels[:FEATURE_SLOTS]
    for slot in range(len(labels), FEATURE_SLOTS):
        labels.append(DEFAULT_FEATURE_LABELS[slot])
    return labels


def render_landing_page(
    info: BusinessInfo,
    year: int | None = None,
    escape: bool | None = None,
) -> str:
    """Return a complete HTML document for *info*.

    Args:
        info: The questionnaire answers.
        year: Footer copyright year; defaults to the current year.
        escape: HTML-escape interpolated values.  ``None`` uses
            ``settings.landing_escape_html``.
    """
    if escape is None:
        escape = settings.landing_escape_html
    if year is None:
        year = date.today().year

    values = {
        "name": info.name,
        "description": info.description,
        "target_customer": info.target_customer,
        "cta": info.cta,
        "contact": info.contact,
    }
    for slot, label in enumerate(split_features(info.features), start=1):
        values[f"feature_{slot}_title"] = label
        values[f"feature_{slot}_text"] = _FEATURE_BLURBS[slot - 1].format(
            target=info.target_customer, name=info.name
        )

    if escape:
        values = {key: html.escape(value, quote=True) for key, value in values.items()}
    values["year"] = str(year)

    return _load_template(settings.landing_template_path).substitute(values)
