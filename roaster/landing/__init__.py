"""Landing package — business questionnaire to HTML."""

from roaster.landing.models import BusinessInfo
from roaster.landing.renderer import render_landing_page, split_features

__all__ = ["BusinessInfo", "render_landing_page", "split_features"]
