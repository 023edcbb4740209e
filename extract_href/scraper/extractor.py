"""Href extraction: select elements, resolve their hrefs, drop duplicates."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional
from urllib.parse import urldefrag, urljoin

import httpx
from bs4 import BeautifulSoup, Tag
from soupsieve import SelectorSyntaxError

from extract_href.scraper.models import Stats

logger = logging.getLogger(__name__)

_ASCII_WHITESPACE = " \t\n\f\r"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def normalize_url(url: str) -> str:
    """Return *url* without its fragment, percent-encoded by ``httpx.URL``.

    Spellings of one resource (``/a b`` and ``/a%20b``, ``/café`` and
    ``/caf%C3%A9``) normalise to the same string.

    Raises:
        ValueError: If *url* is not a valid URL.
    """
    try:
        return str(httpx.URL(urldefrag(url).url))
    except httpx.InvalidURL as exc:
        raise ValueError(str(exc)) from exc


def resolve_href(href: str, base_url: str) -> str:
    """Resolve *href* against *base_url* and return it normalised, without its fragment.

    An ``href`` holds a "valid URL potentially surrounded by spaces" (HTML
    Living Standard, 2.4.5), and the URL parser strips leading and trailing
    ASCII whitespace before parsing (WHATWG URL Standard, "basic URL
    parser"), so the value is stripped the same way here. Empty and
    fragment-only hrefs resolve to *base_url* itself.

    Raises:
        ValueError: If *href* is not a parseable URL reference.
    """
    absolute = urljoin(base_url, href.strip(_ASCII_WHITESPACE))
    return normalize_url(absolute)


def select_elements(soup: BeautifulSoup, selector: str) -> List[Tag]:
    """Return the elements matching *selector* in document order.

    A selector the engine cannot compile matches nothing.
    """
    try:
        return soup.select(selector)
    except SelectorSyntaxError as exc:
        logger.warning("Selector %r is invalid, nothing matched: %s", selector, exc)
        return []


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

class HrefCollector:
    """Accumulates unique absolute URLs from the hrefs of matched elements.

    Each accepted URL is handed to *emit* as soon as it is accepted, so output
    order is first-occurrence order.
    """

    def __init__(self, source_url: str, emit: Optional[Callable[[str], None]] = None) -> None:
        self.source_url = source_url
        # the source in both its given and its normalised spelling
        self._self_refs = {source_url}
        try:
            self._self_refs.add(normalize_url(source_url))
        except ValueError as exc:
            logger.debug("Source url %r kept as given: %s", source_url, exc)
        self.stats = Stats()
        self._emit = emit
        # dict keeps insertion order; values unused
        self._accepted: dict[str, None] = {}

    @property
    def accepted(self) -> List[str]:
        return list(self._accepted)

    def add(self, element: Tag) -> Optional[str]:
        """Classify one element; return the URL if it was accepted."""
        self.stats.elements += 1

        href = element.get("href")
        if href is None:
            return None
        self.stats.with_href += 1

        try:
            url = resolve_href(href, self.source_url)
        except ValueError as exc:
            # counted in with_href only
            logger.debug("Skipping unresolvable href %r: %s", href, exc)
            return None

        if url in self._self_refs or url in self._accepted:
            self.stats.duplicates += 1
            return None

        self._accepted[url] = None
        self.stats.valid_url += 1
        if self._emit is not None:
            self._emit(url)
        return url

    def add_all(self, elements: Iterable[Tag]) -> Stats:
        for element in elements:
            self.add(element)
        return self.stats


def extract_hrefs(
    soup: BeautifulSoup,
    source_url: str,
    selector: str = "a",
    emit: Optional[Callable[[str], None]] = None,
) -> HrefCollector:
    """Run *selector* over *soup* and collect the resolved, de-duplicated hrefs."""
    collector = HrefCollector(source_url, emit=emit)
    collector.add_all(select_elements(soup, selector))
    return collector
