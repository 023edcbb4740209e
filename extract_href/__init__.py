"""extract-href — pull a de-duplicated list of absolute links out of one HTML page."""

from extract_href.pipeline import fetch_and_write_hrefs
from extract_href.scraper.models import ExtractConfig, Stats
from extract_href.writer import FileSink, StreamSink, open_sink

__all__ = [
    "fetch_and_write_hrefs",
    "ExtractConfig",
    "Stats",
    "FileSink",
    "StreamSink",
    "open_sink",
]
