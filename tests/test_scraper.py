"""Tests for the scraper — page fetch + signal extraction.

Mocking strategy:
- ``respx`` patches ``httpx`` at the transport layer so no real network calls
  are made during ``fetch_page`` tests.
- Extraction tests run ``extract_signals`` directly against inline markup.
"""

from __future__ import annotations

from unittest.mock import patch

import httpx
import pytest
import respx
from bs4 import ParserRejectedMarkup

from roaster.errors import FetchError, ValidationError
from roaster.scraper.extractor import extract_page, extract_signals
from roaster.scraper.fetcher import fetch_page, normalize_url
from roaster.scraper.models import (
    NO_H1,
    NO_META_DESCRIPTION,
    NO_TITLE,
    RawPage,
    SiteSignals,
)


# ---------------------------------------------------------------------------
# Fixtures / constants
# ---------------------------------------------------------------------------

_RICH_HTML = """\
<!DOCTYPE html>
<html>
<head>
  <title>  Acme Widgets  </title>
  <meta name="description" content="The best widgets.">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <link rel="shortcut icon" href="/favicon.ico">
  <link rel="stylesheet" href="/a.css">
  <link rel="stylesheet" href="/b.css">
  <style>body { color: red; }</style>
  <script src="/app.js"></script>
</head>
<body>
  <h1> Welcome to Acme </h1>
  <h1>Second headline</h1>
  <p>Widgets   for
     everyone.</p>
  <img src="a.png" alt="A widget">
  <img src="b.png" alt="">
  <img src="c.png">
  <form><input type="text" name="q"><input type="submit" value="Go"></form>
  <button>Buy now</button>
  <a href="https://facebook.com/acme">Facebook</a>
  <a href="https://x.com/acme">X</a>
  <a href="/about">About</a>
  <script>var hidden = "not visible";</script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# normalize_url
# ---------------------------------------------------------------------------

class TestNormalizeUrl:
    def test_bare_domain_gets_https(self) -> None:
        assert normalize_url("example.com") == "https://example.com"

    def test_http_scheme_is_kept(self) -> None:
        assert normalize_url("http://example.com") == "http://example.com"

    def test_scheme_match_is_case_insensitive(self) -> None:
        assert normalize_url("HTTPS://Example.com") == "HTTPS://Example.com"

    def test_surrounding_whitespace_is_stripped(self) -> None:
        assert normalize_url("  example.com/page  ") == "https://example.com/page"

    @pytest.mark.parametrize("raw", ["", "   ", None])
    def test_blank_url_raises_validation_error(self, raw) -> None:
        with pytest.raises(ValidationError, match="URL is required"):
            normalize_url(raw)


# ---------------------------------------------------------------------------
# fetch_page
# ---------------------------------------------------------------------------

class TestFetchPage:
    def test_successful_fetch_returns_raw_page(self) -> None:
        with respx.mock:
            respx.get("https://example.com/article").mock(
                return_value=httpx.Response(200, text=_RICH_HTML)
            )
            raw = fetch_page("https://example.com/article")

        assert isinstance(raw, RawPage)
        assert raw.url == "https://example.com/article"
        assert raw.status_code == 200
        assert "<title>  Acme Widgets  </title>" in raw.html

    def test_bare_domain_is_fetched_over_https(self) -> None:
        with respx.mock:
            route = respx.get("https://example.com/about").mock(
                return_value=httpx.Response(200, text="<html></html>")
            )
            raw = fetch_page("example.com/about")

        assert route.called
        assert raw.url == "https://example.com/about"

    def test_browser_user_agent_is_sent(self) -> None:
        with respx.mock:
            route = respx.get("https://example.com/").mock(
                return_value=httpx.Response(200, text="<html></html>")
            )
            fetch_page("https://example.com/")

        assert "Mozilla/5.0" in route.calls.last.request.headers["User-Agent"]

    def test_http_error_raises_fetch_error(self) -> None:
        with respx.mock:
            respx.get("https://example.com/missing").mock(
                return_value=httpx.Response(404, text="Not Found")
            )
            with pytest.raises(FetchError) as excinfo:
                fetch_page("https://example.com/missing")

        assert excinfo.value.message == "Request failed with status code 404"
        assert excinfo.value.status_code == 400

    def test_timeout_raises_fetch_error(self) -> None:
        with respx.mock:
            respx.get("https://slow.example.com/").mock(
                side_effect=httpx.ConnectTimeout("timed out")
            )
            with pytest.raises(FetchError, match="Timed out"):
                fetch_page("https://slow.example.com/")

    def test_connection_error_raises_fetch_error(self) -> None:
        with respx.mock:
            respx.get("https://down.example.com/").mock(
                side_effect=httpx.ConnectError("Connection refused")
            )
            with pytest.raises(FetchError, match="Connection refused"):
                fetch_page("https://down.example.com/")

    def test_redirect_is_followed(self) -> None:
        with respx.mock:
            respx.get("https://example.com/old").mock(
                return_value=httpx.Response(
                    301, headers={"Location": "https://example.com/new"}
                )
            )
            respx.get("https://example.com/new").mock(
                return_value=httpx.Response(200, text="<title>New</title>")
            )
            raw = fetch_page("https://example.com/old")

        assert "New" in raw.html


# ---------------------------------------------------------------------------
# extract_signals
# ---------------------------------------------------------------------------

class TestExtractSignals:
    @pytest.fixture()
    def signals(self) -> SiteSignals:
        return extract_signals("https://acme.test", _RICH_HTML)

    def test_title_is_trimmed(self, signals: SiteSignals) -> None:
        assert signals.title == "Acme Widgets"

    def test_meta_description(self, signals: SiteSignals) -> None:
        assert signals.meta_description == "The best widgets."
        assert signals.has_meta_description is True

    def test_h1_count_and_first_text(self, signals: SiteSignals) -> None:
        assert signals.h1_count == 2
        assert signals.h1_text == "Welcome to Acme"

    def test_images_without_alt_counts_missing_and_empty(self, signals: SiteSignals) -> None:
        assert signals.image_count == 3
        assert signals.images_without_alt == 2

    def test_viewport_and_favicon(self, signals: SiteSignals) -> None:
        assert signals.has_viewport is True
        assert signals.has_favicon is True

    def test_counts(self, signals: SiteSignals) -> None:
        assert signals.link_count == 3
        assert signals.script_count == 2
        assert signals.css_count == 3
        assert signals.form_count == 1
        assert signals.button_count == 2

    def test_social_links(self, signals: SiteSignals) -> None:
        assert signals.social_links == {
            "facebook": True,
            "twitter": True,
            "instagram": False,
            "linkedin": False,
        }
        assert signals.social_count == 2

    def test_https_flag_follows_url(self, signals: SiteSignals) -> None:
        assert signals.has_https is True
        assert extract_signals("http://acme.test", _RICH_HTML).has_https is False

    def test_body_text_is_collapsed_and_visible_only(self, signals: SiteSignals) -> None:
        assert "Widgets for everyone." in signals.body_text
        assert "not visible" not in signals.body_text
        assert "color: red" not in signals.body_text
        assert "  " not in signals.body_text

    def test_body_text_is_truncated(self) -> None:
        html = "<html><body><p>" + "word " * 1000 + "</p></body></html>"
        assert len(extract_signals("https://a.test", html).body_text) == 2000
        assert len(extract_signals("https://a.test", html, body_text_limit=50).body_text) == 50

    def test_empty_markup_yields_sentinels(self) -> None:
        signals = extract_signals("http://example.com", "")
        assert signals.title == NO_TITLE
        assert signals.meta_description == NO_META_DESCRIPTION
        assert signals.h1_text == NO_H1
        assert signals.h1_count == 0
        assert signals.image_count == 0
        assert signals.has_viewport is False
        assert signals.has_favicon is False
        assert signals.body_text == ""

    def test_blank_meta_description_is_sentinel(self) -> None:
        html = '<head><meta name="description" content="   "></head>'
        assert extract_signals("https://a.test", html).meta_description == NO_META_DESCRIPTION

    def test_empty_h1_is_sentinel_but_counted(self) -> None:
        html = "<body><h1>   </h1></body>"
        signals = extract_signals("https://a.test", html)
        assert signals.h1_count == 1
        assert signals.h1_text == NO_H1

    def test_apple_touch_icon_counts_as_favicon(self) -> None:
        html = '<head><link rel="apple-touch-icon" href="/icon.png"></head>'
        assert extract_signals("https://a.test", html).has_favicon is True

    def test_document_without_body_element(self) -> None:
        html = "<head><title>T</title></head><p>Hello there</p>"
        signals = extract_signals("https://a.test", html)
        assert signals.body_text == "Hello there"

    @pytest.mark.parametrize(
        "html",
        [
            "<html><body><img alt=''><img><h1>Unclosed <div><p>text</body>",
            "<img src=x alt><img/><img alt=\"\"/></img></img>",
            "<div><p>text<img alt=ok><img src=y",
            "</html></body><title>late",
            "<html><body><![foo bar]><h1>Still here</h1></body></html>",
        ],
    )
    def test_malformed_markup_never_raises(self, html: str) -> None:
        signals = extract_signals("https://a.test", html)
        assert 0 <= signals.images_without_alt <= signals.image_count
        assert signals.h1_count >= 0

    def test_unknown_marked_section_is_recovered(self) -> None:
        html = "<html><body><![foo bar]><h1>Still here</h1></body></html>"
        signals = extract_signals("https://a.test", html)
        assert signals.h1_count == 1
        assert signals.h1_text == "Still here"

    def test_markup_rejected_by_every_parser_yields_sentinels(self) -> None:
        with patch(
            "roaster.scraper.extractor.BeautifulSoup",
            side_effect=ParserRejectedMarkup("unknown status keyword"),
        ) as parse:
            signals = extract_signals("https://a.test", "<![foo bar]>")

        assert parse.call_count == 2
        assert signals == SiteSignals(url="https://a.test", has_https=True)

    def test_link_rel_match_is_case_insensitive(self) -> None:
        html = (
            '<head><link rel="StyleSheet" href="/a.css">'
            '<link rel=" Shortcut Icon " href="/f.ico"></head>'
        )
        signals = extract_signals("https://a.test", html)
        assert signals.css_count == 1
        assert signals.has_favicon is True

    def test_social_links_are_read_only(self, signals: SiteSignals) -> None:
        with pytest.raises(TypeError):
            signals.social_links["instagram"] = True  # type: ignore[index]
        assert signals.as_dict()["socialLinks"]["instagram"] is False

    def test_social_links_are_copied_on_creation(self) -> None:
        links = {"facebook": True}
        signals = SiteSignals(social_links=links)
        links["facebook"] = False
        assert signals.social_links["facebook"] is True

    def test_extract_page_uses_raw_url(self) -> None:
        raw = RawPage(url="https://acme.test/", html=_RICH_HTML, status_code=200)
        assert extract_page(raw).url == "https://acme.test/"

    def test_as_dict_uses_wire_names(self, signals: SiteSignals) -> None:
        data = signals.as_dict()
        assert data["metaDescription"] == "The best widgets."
        assert data["imagesWithoutAlt"] == 2
        assert data["hasHttps"] is True
        assert data["socialLinks"]["twitter"] is True
