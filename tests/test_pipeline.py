"""Tests for ``fetch_and_write_hrefs`` end to end (HTTP mocked with respx)."""

from __future__ import annotations

import io

import httpx
import pytest
import respx

from extract_href.errors import ConfigError, FetchError
from extract_href.pipeline import fetch_and_write_hrefs
from extract_href.scraper.models import ExtractConfig, Stats
from extract_href.writer import FileSink, StreamSink

_PAGE = """\
<html>
  <body>
    <a>This shouldn't work</a>
    <a href="#bad"></a>
    <a href="/rel-endpoint"></a>
    <a href="http://youtube.com/external-link"></a>
  </body>
</html>
"""


@respx.mock
def test_reference_scenario_to_stream():
    respx.get("http://host/1").mock(return_value=httpx.Response(200, text=_PAGE))
    buf = io.StringIO()

    stats = fetch_and_write_hrefs(ExtractConfig(source_url="http://host/1"), StreamSink(buf))

    assert stats == Stats(elements=4, with_href=3, duplicates=1, valid_url=2)
    assert buf.getvalue() == "http://host/rel-endpoint\nhttp://youtube.com/external-link\n"


@respx.mock
def test_reference_scenario_to_file(tmp_path):
    respx.get("http://host/1").mock(return_value=httpx.Response(200, text=_PAGE))
    path = tmp_path / "out.txt"
    sink = FileSink(path)

    try:
        fetch_and_write_hrefs(ExtractConfig(source_url="http://host/1", output_path=path), sink)
    finally:
        sink.close()

    assert path.read_text(encoding="utf-8").splitlines() == [
        "http://host/rel-endpoint",
        "http://youtube.com/external-link",
    ]


def test_missing_url_makes_no_request():
    buf = io.StringIO()
    with respx.mock(assert_all_called=False) as mock:
        with pytest.raises(ConfigError, match="url is required"):
            fetch_and_write_hrefs(ExtractConfig(source_url=""), StreamSink(buf))
        assert mock.calls.call_count == 0

    assert buf.getvalue() == ""


@respx.mock
def test_selector_without_matches():
    respx.get("http://host/1").mock(return_value=httpx.Response(200, text=_PAGE))
    buf = io.StringIO()

    stats = fetch_and_write_hrefs(
        ExtractConfig(source_url="http://host/1", selector="table td a"), StreamSink(buf)
    )

    assert stats == Stats()
    assert buf.getvalue() == ""


@respx.mock
def test_transport_failure_raises_fetch_error():
    respx.get("http://host/1").mock(side_effect=httpx.ConnectError("connection refused"))

    with pytest.raises(FetchError):
        fetch_and_write_hrefs(ExtractConfig(source_url="http://host/1"), StreamSink(io.StringIO()))


@respx.mock
def test_relative_hrefs_resolve_against_source_not_redirect_target():
    respx.get("http://host/dir/page").mock(
        return_value=httpx.Response(301, headers={"Location": "http://other/landing/"})
    )
    respx.get("http://other/landing/").mock(
        return_value=httpx.Response(200, text='<a href="next">next</a>')
    )
    buf = io.StringIO()

    fetch_and_write_hrefs(ExtractConfig(source_url="http://host/dir/page"), StreamSink(buf))

    assert buf.getvalue() == "http://host/dir/next\n"
