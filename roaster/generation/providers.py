"""Pluggable text-generation backends with automatic heuristic fallback.

Backends (selected once at startup by ``settings.llm_provider``):
  ``heuristic`` — the deterministic grader and template renderer (default).
  ``openai``    — LangChain ``ChatOpenAI``; requires ``OPENAI_API_KEY``.
  ``ollama``    — LangChain ``ChatOllama`` against ``OLLAMA_BASE_URL``.

All backends share one interface: ``critique(signals, style) -> str`` and
``landing_page(info) -> str``.  Model-backed generators never raise from
either call: any failure is logged and answered by the heuristic backend.
"""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from typing import Any

from roaster.config import settings
from roaster.errors import GenerationError
from roaster.generation.prompts import (
    build_critique_prompt,
    build_landing_prompt,
    strip_code_fences,
)
from roaster.grader.report import grade
from roaster.grader.rules import Style
from roaster.landing.models import BusinessInfo
from roaster.landing.renderer import render_landing_page
from roaster.scraper.models import SiteSignals

logger = logging.getLogger(__name__)

MODE_LIVE = "live"
MODE_DEMO = "demo"
MODE_SMART = "smart-analysis"


# ---------------------------------------------------------------------------
# Abstract base
# ---------------------------------------------------------------------------

class TextGenerator(ABC):
    """Abstract base class for a report / landing-page text backend."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable backend name."""

    @property
    @abstractmethod
    def mode(self) -> str:
        """``"live"``, ``"demo"`` or ``"smart-analysis"`` for the health check."""

    @property
    def connected(self) -> bool:
        return self.mode == MODE_LIVE

    @abstractmethod
    def critique(self, signals: SiteSignals, style: Style) -> str:
        """Return report text for *signals* in *style*.  Must not raise."""

    @abstractmethod
    def landing_page(self, info: BusinessInfo) -> str:
        """Return a complete HTML document for *info*."""


# ---------------------------------------------------------------------------
# Heuristic backend
# ---------------------------------------------------------------------------

class HeuristicGenerator(TextGenerator):
    """Deterministic backend: the point-based grader and the HTML template."""

    def __init__(self, mode: str = MODE_SMART) -> None:
        self._mode = mode

    @property
    def name(self) -> str:
        return "heuristic"

    @property
    def mode(self) -> str:
        return self._mode

    def critique(self, signals: SiteSignals, style: Style) -> str:
        return grade(signals, style).report_text

    def landing_page(self, info: BusinessInfo) -> str:
        return render_landing_page(info)


# ---------------------------------------------------------------------------
# Language-model backends
# ---------------------------------------------------------------------------

class LLMGenerator(TextGenerator):
    """Shared plumbing for LangChain chat-model backends."""

    def __init__(self) -> None:
        self._fallback = HeuristicGenerator()

    @property
    def mode(self) -> str:
        return MODE_LIVE

    @abstractmethod
    def _get_llm(self, max_tokens: int) -> Any:
        """Return a configured LangChain chat model."""

    def _complete(self, prompt: str, max_tokens: int) -> str:
        """Invoke the model once and return fence-stripped text.

        Raises:
            GenerationError: On any client failure or an empty reply.
        """
        from langchain_core.messages import HumanMessage

        try:
            llm = self._get_llm(max_tokens)
            response = llm.invoke([HumanMessage(content=prompt)])
        except Exception as exc:
            raise GenerationError(f"{self.name} request failed: {exc}") from exc

        content = response.content if hasattr(response, "content") else response
        text = strip_code_fences(content if isinstance(content, str) else str(content))
        if not text:
            raise GenerationError(f"{self.name} returned an empty response")
        return text

    def critique(self, signals: SiteSignals, style: Style) -> str:
        try:
            return self._complete(
                build_critique_prompt(signals, style), settings.critique_max_tokens
            )
        except GenerationError as exc:
            logger.warning("[%s] critique fell back to heuristic: %s", self.name, exc)
            return self._fallback.critique(signals, style)

    def landing_page(self, info: BusinessInfo) -> str:
        try:
            html = self._complete(build_landing_prompt(info), settings.landing_max_tokens)
            if "<html" not in html.lower():
                raise GenerationError(f"{self.name} reply is not an HTML document")
            return html
        except GenerationError as exc:
            logger.warning("[%s] landing page fell back to template: %s", self.name, exc)
            return self._fallback.landing_page(info)


class OpenAIGenerator(LLMGenerator):
    """OpenAI chat completions via ``langchain_openai``."""

    @property
    def name(self) -> str:
        return "openai"

    def _get_llm(self, max_tokens: int) -> Any:
        from langchain_openai import ChatOpenAI

        return ChatOpenAI(
            model=settings.openai_chat_model,
            temperature=0,
            max_tokens=max_tokens,
            timeout=settings.generation_timeout,
            max_retries=0,
        )


class OllamaGenerator(LLMGenerator):
    """Local models via ``langchain_ollama``."""

    @property
    def name(self) -> str:
        return "ollama"

    def _get_llm(self, max_tokens: int) -> Any:
        from langchain_ollama import ChatOllama

        return ChatOllama(
            model=settings.ollama_chat_model,
            base_url=settings.ollama_base_url,
            temperature=0,
            num_predict=max_tokens,
            client_kwargs={"timeout": settings.generation_timeout},
        )


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------

def build_generator(provider: str | None = None) -> TextGenerator:
    """Return the backend named by *provider* (default ``settings.llm_provider``).

    An OpenAI backend without ``OPENAI_API_KEY``, or an unknown provider
    name, degrades to the heuristic backend in ``"demo"`` mode.
    """
    name = (provider if provider is not None else settings.llm_provider).strip().lower()

    if name in ("", "heuristic"):
        generator: TextGenerator = HeuristicGenerator()
    elif name == "openai":
        if os.environ.get("OPENAI_API_KEY"):
            generator = OpenAIGenerator()
        else:
            logger.warning("LLM_PROVIDER=openai but OPENAI_API_KEY is not set; using heuristic demo mode.")
            generator = HeuristicGenerator(mode=MODE_DEMO)
    elif name == "ollama":
        generator = OllamaGenerator()
    else:
        logger.warning("Unknown LLM_PROVIDER %r; using heuristic demo mode.", name)
        generator = HeuristicGenerator(mode=MODE_DEMO)

    logger.info("Text generator: %s (mode=%s)", generator.name, generator.mode)
    return generator
