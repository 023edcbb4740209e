"""Scraper package — fetch, parse & href extraction."""

from extract_href.scraper.extractor import HrefCollector, extract_hrefs, resolve_href
from extract_href.scraper.fetcher import fetch_document, parse_document
from extract_href.scraper.models import ExtractConfig, RawPage, Stats

__all__ = [
    "fetch_document",
    "parse_document",
    "extract_hrefs",
    "resolve_href",
    "HrefCollector",
    "ExtractConfig",
    "RawPage",
    "Stats",
]
