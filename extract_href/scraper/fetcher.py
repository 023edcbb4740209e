"""HTTP fetcher: one GET for the source URL, parsed into a BeautifulSoup tree."""

from __future__ import annotations

import logging
from urllib.parse import urlsplit

import httpx
from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from extract_href.config import settings
from extract_href.errors import FetchError, ParseError
from extract_href.scraper.models import RawPage

logger = logging.getLogger(__name__)


def _check_source_url(url: str) -> None:
    """Raise :class:`FetchError` unless *url* is absolute (scheme and host)."""
    try:
        parts = urlsplit(url)
    except ValueError as exc:
        raise FetchError(f"invalid url {url!r}: {exc}") from exc
    if not parts.scheme or not parts.netloc:
        raise FetchError(f"invalid url {url!r}: must be absolute")


def fetch_document(url: str) -> RawPage:
    """Fetch *url* and return a :class:`RawPage`.

    The response body is returned whatever the status code; only transport
    failures (DNS, refused connection, timeout, bad URL) raise.

    Raises:
        FetchError: If *url* is not absolute or the request fails in transport.
    """
    _check_source_url(url)

    logger.debug("GET %s", url)
    try:
        with httpx.Client(
            headers={"User-Agent": settings.user_agent},
            timeout=settings.request_timeout,
            follow_redirects=True,
        ) as client:
            response = client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise FetchError(f"fetching {url}: {exc}") from exc

    logger.debug("HTTP %d from %s (%d bytes)", response.status_code, url, len(response.content))
    return RawPage(url=url, content=response.content, status_code=response.status_code)


def parse_document(raw: RawPage) -> BeautifulSoup:
    """Parse *raw* into a queryable document.

    Bytes are handed to BeautifulSoup untouched so it can sniff the encoding.
    When an element repeats an attribute the first value is kept.

    Raises:
        ParseError: If the parser rejects the markup.
    """
    try:
        return BeautifulSoup(raw.content, "html.parser", on_duplicate_attribute="ignore")
    except ParserRejectedMarkup as exc:
        raise ParseError(f"parsing {raw.url}: {exc}") from exc
