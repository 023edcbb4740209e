"""Data models for the href extraction pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from extract_href.errors import ConfigError


@dataclass
class ExtractConfig:
    """Everything a single run needs: where to fetch, what to match, where to write."""

    source_url: str
    selector: str = "a"
    output_path: Optional[Path] = None

    def validate(self) -> None:
        """Raise :class:`ConfigError` if the run cannot start."""
        if not self.source_url:
            raise ConfigError("url is required")


@dataclass
class RawPage:
    """The raw HTTP response for the source URL."""

    url: str
    content: bytes
    status_code: int


@dataclass
class Stats:
    """Counters accumulated while walking the matched elements."""

    # elements matched by the selector
    elements: int = 0
    # elements carrying an "href" attribute
    with_href: int = 0
    # hrefs that resolved to the source URL or to an already accepted URL
    duplicates: int = 0
    # hrefs accepted and written out
    valid_url: int = 0

    def summary(self) -> str:
        return (
            f"{self.elements} matched HTML elements\n"
            f"{self.with_href} had a href attribute.\n"
            f"{self.duplicates} were duplicates\n"
            f"{self.valid_url} were valid"
        )
