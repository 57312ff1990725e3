"""Tests for the roaster CLI (analyze / landing)."""

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from cli.main import app
from roaster.errors import FetchError
from roaster.generation.providers import HeuristicGenerator
from roaster.scraper.models import RawPage

runner = CliRunner()

_RAW = RawPage(
    url="https://acme.test",
    html="<html><head><title>Acme</title></head><body><h1>Hi</h1></body></html>",
    status_code=200,
)


@pytest.fixture(autouse=True)
def heuristic_backend():
    with patch("cli.main.build_generator", return_value=HeuristicGenerator()) as build:
        yield build


def test_analyze_prints_both_reports():
    with patch("roaster.pipeline.fetch_page", return_value=_RAW):
        result = runner.invoke(app, ["--log-level", "WARNING", "analyze", "acme.test"])

    assert result.exit_code == 0
    assert "[analyze] Title  : Acme" in result.stdout
    assert "[analyze] Mode   : smart-analysis" in result.stdout
    assert "## 🔥 Score:" in result.stdout
    assert "## 📊 Score:" in result.stdout


def test_analyze_single_style():
    with patch("roaster.pipeline.fetch_page", return_value=_RAW):
        result = runner.invoke(
            app, ["--log-level", "WARNING", "analyze", "acme.test", "--style", "professional"]
        )

    assert result.exit_code == 0
    assert "## 📊 Score:" in result.stdout
    assert "## 🔥 Score:" not in result.stdout


def test_analyze_json():
    with patch("roaster.pipeline.fetch_page", return_value=_RAW):
        result = runner.invoke(app, ["--log-level", "WARNING", "analyze", "acme.test", "--json"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["success"] is True
    assert data["analysis"]["title"] == "Acme"
    assert set(data) == {"success", "analysis", "roastFeedback", "professionalFeedback"}


def test_analyze_fetch_error_exits_1():
    with patch(
        "roaster.pipeline.fetch_page",
        side_effect=FetchError("Request failed with status code 503"),
    ):
        result = runner.invoke(app, ["--log-level", "WARNING", "analyze", "acme.test"])

    assert result.exit_code == 1
    assert "❌ Error: Request failed with status code 503" in result.stdout


def test_analyze_unknown_style_exits_1():
    with patch("roaster.pipeline.fetch_page") as fetch:
        result = runner.invoke(app, ["analyze", "acme.test", "--style", "sarcastic"])

    assert result.exit_code == 1
    assert "Unknown style" in result.stdout
    fetch.assert_not_called()


def test_landing_prints_html():
    result = runner.invoke(
        app,
        ["--log-level", "WARNING", "landing", "--name", "Acme", "--description", "Widgets"],
    )

    assert result.exit_code == 0
    assert result.stdout.startswith("<!DOCTYPE html>")
    assert "<title>Acme</title>" in result.stdout


def test_landing_writes_output_file(tmp_path):
    out = tmp_path / "site.html"
    result = runner.invoke(
        app,
        [
            "--log-level", "WARNING",
            "landing",
            "--name", "Acme",
            "--description", "Widgets",
            "--features", "Fresh, Fast",
            "--output", str(out),
        ],
    )

    assert result.exit_code == 0
    html = out.read_text(encoding="utf-8")
    assert "<h3>Fresh</h3>" in html
    assert f"[landing] Wrote {len(html)} characters" in result.stdout


def test_landing_blank_description_exits_1():
    result = runner.invoke(app, ["landing", "--name", "Acme", "--description", "  "])

    assert result.exit_code == 1
    assert "Business name and description are required" in result.stdout
