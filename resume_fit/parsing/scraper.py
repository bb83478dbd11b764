"""Fetch a job description's text from a posting URL."""

import logging
import re

import requests
from bs4 import BeautifulSoup

from resume_fit.core.config import FetchConfig
from resume_fit.core.errors import FetchError

logger = logging.getLogger(__name__)

# Tried in order; the first with enough text wins, else the whole body.
DESCRIPTION_SELECTORS: tuple[str, ...] = (
    '[data-testid="job-description"]',
    ".job-description",
    ".description",
    "#job-description",
    "article",
    "main",
    ".content",
)
MIN_DESCRIPTION_CHARS = 200

_STRIP_TAGS = ("script", "style", "nav", "header", "footer")
_WHITESPACE_RE = re.compile(r"\s+")


def clean_text(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def extract_description(html: str) -> str:
    """Pick the job description text out of a posting page."""
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup.find_all(list(_STRIP_TAGS)):
        tag.decompose()

    for selector in DESCRIPTION_SELECTORS:
        element = soup.select_one(selector)
        if element is None:
            continue
        content = element.get_text(" ", strip=True)
        if len(content) > MIN_DESCRIPTION_CHARS:
            logger.debug("Job description matched selector %s", selector)
            return clean_text(content)

    body = soup.body or soup
    return clean_text(body.get_text(" ", strip=True))


def fetch_job_description(url: str, config: FetchConfig | None = None) -> str:
    """Download a posting page and return its description text.

    Raises:
        FetchError: On timeout, HTTP error, or connection failure.
    """
    config = config or FetchConfig()
    try:
        response = requests.get(
            url,
            timeout=config.timeout_seconds,
            headers={"User-Agent": config.user_agent},
        )
        response.raise_for_status()
    except requests.Timeout as e:
        msg = "Request timeout: URL took too long to respond"
        raise FetchError(msg) from e
    except requests.RequestException as e:
        msg = f"Failed to fetch job description from URL: {e}"
        raise FetchError(msg) from e

    logger.info("Fetched %s (%d bytes)", url, len(response.text))
    return extract_description(response.text)
