"""Result sinks: where accepted URLs are written, one per line.

A run writes either to a file (:class:`FileSink`) or to a text stream
(:class:`StreamSink`, standard error by default). Only a file sink owns a
resource, so only it has :meth:`FileSink.close`.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, TextIO, Union

from extract_href.errors import OutputError


class FileSink:
    """Creates (or truncates) *path* and writes UTF-8 lines to it."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        try:
            self._fh = self.path.open("w", encoding="utf-8", newline="\n")
        except OSError as exc:
            raise OutputError(f"creating {self.path}: {exc}") from exc

    def write(self, url: str) -> None:
        try:
            self._fh.write(f"{url}\n")
        except OSError as exc:
            raise OutputError(f"writing {self.path}: {exc}") from exc

    def close(self) -> None:
        """Flush and release the file handle. Safe to call twice."""
        if self._fh.closed:
            return
        try:
            self._fh.close()
        except OSError as exc:
            raise OutputError(f"closing {self.path}: {exc}") from exc


class StreamSink:
    """Writes lines to an already-open text stream it does not own."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        # resolved here, not at import, so redirected streams are honoured
        self.stream = stream if stream is not None else sys.stderr

    def write(self, url: str) -> None:
        self.stream.write(f"{url}\n")


Sink = Union[FileSink, StreamSink]


def open_sink(path: Optional[Union[str, Path]] = None) -> Sink:
    """Return a :class:`FileSink` for *path*, or a stderr :class:`StreamSink` if none."""
    if path:
        return FileSink(path)
    return StreamSink()
