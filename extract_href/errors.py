"""Error types raised by the extract-href pipeline."""

from __future__ import annotations


class ExtractError(Exception):
    """Base class for every failure that aborts a run."""


class ConfigError(ExtractError, ValueError):
    """The run configuration is incomplete (e.g. no source URL)."""


class FetchError(ExtractError):
    """The source URL is invalid or the HTTP request failed in transport."""


class ParseError(ExtractError):
    """The response body could not be parsed as HTML."""


class OutputError(ExtractError, OSError):
    """The output file could not be created, written or closed."""
