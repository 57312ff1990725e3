"""Centralised settings for the Website Roaster backend.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

_TRUTHY = {"1", "true", "yes", "on"}

_DESKTOP_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/122.0.0.0 Safari/537.36"
)


def _env_flag(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).strip().lower() in _TRUTHY


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Text generation backend
    # ------------------------------------------------------------------
    llm_provider: str = field(
        default_factory=lambda: os.environ.get("LLM_PROVIDER", "heuristic").strip().lower()
    )
    openai_chat_model: str = field(
        default_factory=lambda: os.environ.get("OPENAI_CHAT_MODEL", "gpt-4o-mini")
    )
    ollama_chat_model: str = field(
        default_factory=lambda: os.environ.get("OLLAMA_CHAT_MODEL", "ministral-3:8b")
    )
    ollama_base_url: str = field(
        default_factory=lambda: os.environ.get("OLLAMA_BASE_URL", "http://localhost:11434")
    )
    generation_timeout: float = field(
        default_factory=lambda: float(os.environ.get("GENERATION_TIMEOUT", "30.0"))
    )
    critique_max_tokens: int = field(
        default_factory=lambda: int(os.environ.get("CRITIQUE_MAX_TOKENS", "1500"))
    )
    landing_max_tokens: int = field(
        default_factory=lambda: int(os.environ.get("LANDING_MAX_TOKENS", "4000"))
    )

    # ------------------------------------------------------------------
    # Page fetcher / signal extractor
    # ------------------------------------------------------------------
    fetch_timeout: float = field(
        default_factory=lambda: float(os.environ.get("FETCH_TIMEOUT", "10.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get("FETCH_USER_AGENT", _DESKTOP_UA)
    )
    body_text_limit: int = field(
        default_factory=lambda: int(os.environ.get("BODY_TEXT_LIMIT", "2000"))
    )

    # ------------------------------------------------------------------
    # Landing page renderer
    # ------------------------------------------------------------------
    landing_escape_html: bool = field(
        default_factory=lambda: _env_flag("LANDING_ESCAPE_HTML")
    )

    @property
    def landing_template_path(self) -> Path:
        """Absolute path to the landing page template bundled with the package."""
        return Path(__file__).resolve().parent / "landing" / "templates" / "landing.html"

    # ------------------------------------------------------------------
    # Server / logging
    # ------------------------------------------------------------------
    host: str = field(default_factory=lambda: os.environ.get("HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(os.environ.get("PORT", "3000")))
    log_level: str = field(default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO"))


# Module-level singleton — import this everywhere:
#   from roaster.config import settings
settings = Settings()
