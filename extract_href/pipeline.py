"""Extraction pipeline.

``fetch_and_write_hrefs`` runs a whole extraction for one page:

    validate → fetch → parse → select → resolve/de-duplicate → write
"""

from __future__ import annotations

import logging

from extract_href.scraper.extractor import extract_hrefs
from extract_href.scraper.fetcher import fetch_document, parse_document
from extract_href.scraper.models import ExtractConfig, Stats
from extract_href.writer import Sink

logger = logging.getLogger(__name__)


def fetch_and_write_hrefs(config: ExtractConfig, sink: Sink) -> Stats:
    """Fetch ``config.source_url`` and write every unique absolute href to *sink*.

    Pipeline:
        1. :meth:`ExtractConfig.validate` — no network activity on failure.
        2. :func:`~extract_href.scraper.fetcher.fetch_document` — single GET.
        3. :func:`~extract_href.scraper.fetcher.parse_document` — HTML tree.
        4. :func:`~extract_href.scraper.extractor.extract_hrefs` — each URL is
           written to *sink* the moment it is accepted.

    The sink is not closed here; whoever opened it closes it.

    Args:
        config: Source URL, selector and (unused here) output path.
        sink: Destination for accepted URLs.

    Returns:
        The :class:`Stats` for the run.

    Raises:
        ConfigError: If the source URL is missing.
        FetchError: If the source URL is invalid or unreachable.
        ParseError: If the body cannot be parsed as HTML.
        OutputError: If writing to a file sink fails.
    """
    config.validate()

    raw = fetch_document(config.source_url)
    soup = parse_document(raw)

    collector = extract_hrefs(soup, config.source_url, config.selector, emit=sink.write)
    stats = collector.stats
    logger.info(
        "%s: %d elements, %d with href, %d duplicates, %d valid",
        config.source_url,
        stats.elements,
        stats.with_href,
        stats.duplicates,
        stats.valid_url,
    )
    return stats
