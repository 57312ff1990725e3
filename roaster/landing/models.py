"""Data model for the landing-page questionnaire."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

DEFAULT_TARGET_CUSTOMER = "everyone"
DEFAULT_FEATURES = "Quality service"
DEFAULT_CTA = "Get Started"
DEFAULT_CONTACT = "Contact us for more info"

_OPTIONAL_DEFAULTS = {
    "target_customer": DEFAULT_TARGET_CUSTOMER,
    "features": DEFAULT_FEATURES,
    "cta": DEFAULT_CTA,
    "contact": DEFAULT_CONTACT,
}

# Wire (camelCase) name -> field name, for keys that differ.
_PAYLOAD_ALIASES = {"targetCustomer": "target_customer"}


def _clean(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


@dataclass
class BusinessInfo:
    """Answers to the business questionnaire.

    ``name`` and ``description`` are required by the API; every other field
    falls back to its default when blank.
    """

    name: str
    description: str
    target_customer: str = DEFAULT_TARGET_CUSTOMER
    features: str = DEFAULT_FEATURES
    cta: str = DEFAULT_CTA
    contact: str = DEFAULT_CONTACT

    def __post_init__(self) -> None:
        self.name = _clean(self.name)
        self.description = _clean(self.description)
        for field_name, default in _OPTIONAL_DEFAULTS.items():
            setattr(self, field_name, _clean(getattr(self, field_name)) or default)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "BusinessInfo":
        """Build from a request body using camelCase or snake_case keys."""
        values: dict[str, Any] = {}
        for key, value in payload.items():
            field_name = _PAYLOAD_ALIASES.get(key, key)
            if field_name in ("name", "description") or field_name in _OPTIONAL_DEFAULTS:
                values[field_name] = value
        return cls(
            name=values.pop("name", ""),
            description=values.pop("description", ""),
            **values,
        )
