"""Tests for settings resolution and logging setup."""

from __future__ import annotations

import logging
from unittest.mock import patch

from roaster.config import Settings
from roaster.log import APP_LOGGER, setup_logging


class TestSettings:
    def test_defaults(self) -> None:
        with patch.dict("os.environ", {}, clear=True):
            s = Settings()
        assert s.llm_provider == "heuristic"
        assert s.fetch_timeout == 10.0
        assert s.body_text_limit == 2000
        assert s.landing_escape_html is False
        assert s.port == 3000
        assert "Mozilla/5.0" in s.user_agent

    def test_environment_overrides(self) -> None:
        env = {
            "LLM_PROVIDER": " OpenAI ",
            "FETCH_TIMEOUT": "2.5",
            "BODY_TEXT_LIMIT": "100",
            "LANDING_ESCAPE_HTML": "yes",
            "PORT": "8080",
        }
        with patch.dict("os.environ", env, clear=True):
            s = Settings()
        assert s.llm_provider == "openai"
        assert s.fetch_timeout == 2.5
        assert s.body_text_limit == 100
        assert s.landing_escape_html is True
        assert s.port == 8080

    def test_landing_template_is_packaged(self) -> None:
        assert Settings().landing_template_path.is_file()


class TestSetupLogging:
    def test_repeated_calls_do_not_stack_handlers(self) -> None:
        setup_logging("INFO")
        logger = setup_logging("DEBUG")
        assert logger.name == APP_LOGGER
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self) -> None:
        assert setup_logging("chatty").level == logging.INFO
