"""Tests for the information disclosure probe."""

import httpx

from api_scanner.core.models import Verdict
from api_scanner.prober.disclosure import DisclosureProbe, find_keywords

from conftest import refuse

TARGET = "https://api.test"
KEYWORDS = ["password", "secret", "key", "token", "database", "internal", "debug"]


class TestFindKeywords:
    """Tests for keyword matching."""

    def test_case_insensitive(self):
        """Upper-case text should match the lower-case keyword."""
        assert find_keywords("Invalid PASSWORD supplied", KEYWORDS) == ["password"]

    def test_no_matches(self):
        """A body without keywords should match nothing."""
        assert find_keywords('{"status": "ok", "items": []}', KEYWORDS) == []

    def test_every_keyword_reported(self):
        """Several keywords should each be reported, in keyword order."""
        body = "DEBUG mode on; database=users; internal error"
        assert find_keywords(body, KEYWORDS) == ["database", "internal", "debug"]

    def test_substring_match(self):
        """Keywords should match inside larger words."""
        assert find_keywords("api_keys_enabled", KEYWORDS) == ["key"]


class TestDisclosureProbe:
    """Tests for the probe against a fake transport."""

    def test_reports_matches(self, settings, make_client, capsys):
        """Matched keywords should be printed and returned."""
        client = make_client(
            lambda request: httpx.Response(200, text='{"Token": "abc", "Secret": "xyz"}')
        )

        result = DisclosureProbe(settings.prober, client).run(TARGET)
        out = capsys.readouterr().out

        assert result.matched_keywords == ["secret", "token"]
        assert result.verdict is Verdict.INFORMATIONAL
        assert "Potential information disclosure: 'secret' found" in out
        assert "Potential information disclosure: 'token' found" in out

    def test_clean_body(self, settings, make_client, capsys):
        """A clean body should produce no disclosure lines."""
        client = make_client(lambda request: httpx.Response(200, text="hello world"))

        result = DisclosureProbe(settings.prober, client).run(TARGET)

        assert result.matched_keywords == []
        assert result.verdict is Verdict.SAFE
        assert "Potential information disclosure" not in capsys.readouterr().out

    def test_error_status_body_still_searched(self, settings, make_client):
        """The body should be searched whatever the status code."""
        client = make_client(
            lambda request: httpx.Response(500, text="Traceback: database connection failed")
        )

        result = DisclosureProbe(settings.prober, client).run(TARGET)

        assert result.matched_keywords == ["database"]

    def test_unreachable_target(self, settings, make_client):
        """A failed request should be treated as an empty body."""
        result = DisclosureProbe(settings.prober, make_client(refuse)).run(TARGET)

        assert result.matched_keywords == []
        assert result.reachable is False

    def test_single_get(self, settings, make_client):
        """The probe should issue exactly one GET to the target."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append((request.method, request.url.host, request.url.path))
            return httpx.Response(200)

        DisclosureProbe(settings.prober, make_client(handler)).run(TARGET)

        assert seen == [("GET", "api.test", "/")]
