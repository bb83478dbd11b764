"""Tests for job description fetching and HTML extraction."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import requests

from resume_fit.core.config import FetchConfig
from resume_fit.core.errors import FetchError
from resume_fit.parsing.scraper import clean_text, extract_description, fetch_job_description

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"


def _load_posting() -> str:
    return (FIXTURES_DIR / "job_posting.html").read_text()


class TestCleanText:
    def test_collapses_whitespace(self) -> None:
        assert clean_text("  a \n\n b\t c  ") == "a b c"


class TestExtractDescription:
    def test_selector_match(self) -> None:
        text = extract_description(_load_posting())
        assert text.startswith("Senior Backend Engineer")
        assert "PostgreSQL" in text
        assert "Copyright" not in text
        assert "tracking" not in text
        assert "Acme Careers" not in text

    def test_short_match_falls_through_to_body(self) -> None:
        html = (
            "<html><body><div class='job-description'>Too short</div>"
            "<p>Other body text</p><script>var x = 1;</script></body></html>"
        )
        text = extract_description(html)
        assert text == "Too short Other body text"

    def test_data_testid_preferred(self) -> None:
        long_a = "alpha " * 50
        long_b = "beta " * 50
        html = (
            f"<body><div class='job-description'>{long_b}</div>"
            f"<div data-testid='job-description'>{long_a}</div></body>"
        )
        assert extract_description(html).startswith("alpha")

    def test_strips_style(self) -> None:
        html = "<html><head><style>.x{}</style></head><body>Hello</body></html>"
        assert extract_description(html) == "Hello"


class TestFetchJobDescription:
    def test_success(self) -> None:
        mock_response = MagicMock()
        mock_response.text = _load_posting()
        config = FetchConfig(timeout_seconds=4)

        with patch(
            "resume_fit.parsing.scraper.requests.get", return_value=mock_response
        ) as mock_get:
            text = fetch_job_description("https://jobs.example.com/1", config)

        assert "Senior Backend Engineer" in text
        mock_get.assert_called_once_with(
            "https://jobs.example.com/1",
            timeout=4.0,
            headers={"User-Agent": config.user_agent},
        )
        mock_response.raise_for_status.assert_called_once()

    def test_timeout(self) -> None:
        with (
            patch(
                "resume_fit.parsing.scraper.requests.get",
                side_effect=requests.Timeout("slow"),
            ),
            pytest.raises(FetchError, match="Request timeout"),
        ):
            fetch_job_description("https://jobs.example.com/1")

    def test_http_error(self) -> None:
        mock_response = MagicMock()
        mock_response.raise_for_status.side_effect = requests.HTTPError("404 Not Found")
        with (
            patch("resume_fit.parsing.scraper.requests.get", return_value=mock_response),
            pytest.raises(FetchError, match="Failed to fetch job description from URL"),
        ):
            fetch_job_description("https://jobs.example.com/missing")

    def test_connection_error(self) -> None:
        with (
            patch(
                "resume_fit.parsing.scraper.requests.get",
                side_effect=requests.ConnectionError("refused"),
            ),
            pytest.raises(FetchError, match="refused"),
        ):
            fetch_job_description("https://jobs.example.com/1")
