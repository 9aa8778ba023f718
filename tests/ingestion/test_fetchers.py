from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from vodhub.errors import ApiError, FormatError, TransportError
from vodhub.ingestion import RelayConfig, SourceFetcher, build_cms_url
from vodhub.ingestion.cms_fetcher import CmsFetcher
from vodhub.ingestion.playlist_fetcher import PlaylistFetcher

DIRECT = RelayConfig()

CMS_PAYLOAD = {
    "code": 1,
    "msg": "数据列表",
    "total": 1,
    "list": [
        {
            "vod_id": 7,
            "vod_name": "Mountain Story",
            "vod_pic": "http://img.test/7.jpg",
            "vod_play_url": "HD$http://v.test/7.m3u8",
            "vod_remarks": "HD",
        }
    ],
}

PLAYLIST = '#EXTM3U\n#EXTINF:-1 tvg-logo="http://x/a.png",News One\nhttp://x/news1.m3u8\n#EXTINF:-1,Sports\nhttp://x/sports.m3u8\n'


class _Recorder:
    """Mock transport handler recording requested urls."""

    def __init__(self, handler) -> None:  # noqa: ANN001
        self.handler = handler
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


def _run(coro):  # noqa: ANN001
    return asyncio.run(coro)


def test_build_cms_url_prefers_query_over_category() -> None:
    assert build_cms_url("http://cms.test/api.php/provide/vod", "abc", "2") == (
        "http://cms.test/api.php/provide/vod?ac=detail&wd=abc"
    )
    assert build_cms_url("http://cms.test/api.php/provide/vod", None, "2") == (
        "http://cms.test/api.php/provide/vod?ac=detail&t=2"
    )
    assert build_cms_url("http://cms.test/vod/?at=json") == "http://cms.test/vod/?at=json&ac=detail"


def test_cms_fetch_parses_and_caches(cms_source, cache) -> None:
    recorder = _Recorder(lambda request: httpx.Response(200, json=CMS_PAYLOAD))
    fetcher = CmsFetcher(cache=cache, transport=recorder.transport)

    first = _run(fetcher.fetch(cms_source, DIRECT, query="mountain"))
    second = _run(fetcher.fetch(cms_source, DIRECT, query="mountain"))

    assert [v.title for v in first] == ["Mountain Story"]
    assert second == first
    assert len(recorder.requests) == 1
    params = recorder.requests[0].url.params
    assert params["ac"] == "detail"
    assert params["wd"] == "mountain"
    assert "t" not in params


def test_cms_fetch_goes_through_query_style_relay(cms_source) -> None:
    recorder = _Recorder(lambda request: httpx.Response(200, json=CMS_PAYLOAD))
    fetcher = CmsFetcher(transport=recorder.transport)

    _run(fetcher.fetch(cms_source, RelayConfig(prefix="http://relay.test/?url="), category_id="1"))

    request_url = recorder.requests[0].url
    assert request_url.host == "relay.test"
    assert request_url.params["url"] == "http://cms.test/api.php/provide/vod?ac=detail&t=1"


def test_cms_search_not_supported_is_empty_success(cms_source, cache) -> None:
    recorder = _Recorder(lambda request: httpx.Response(200, text="本站暂不支持搜索"))
    fetcher = CmsFetcher(cache=cache, transport=recorder.transport)

    assert _run(fetcher.fetch(cms_source, DIRECT, query="anything")) == []


def test_cms_markup_response_is_format_error(cms_source) -> None:
    recorder = _Recorder(lambda request: httpx.Response(200, text="<html>error</html>"))
    fetcher = CmsFetcher(transport=recorder.transport)

    with pytest.raises(FormatError) as excinfo:
        _run(fetcher.fetch(cms_source, DIRECT, query="x"))
    assert "XML/HTML" in str(excinfo.value)


def test_cms_invalid_json_is_format_error(cms_source) -> None:
    recorder = _Recorder(lambda request: httpx.Response(200, text="{not json"))
    fetcher = CmsFetcher(transport=recorder.transport)

    with pytest.raises(FormatError):
        _run(fetcher.fetch(cms_source, DIRECT))


def test_cms_remote_error_is_api_error_and_not_cached(cms_source, cache, store) -> None:
    body = json.dumps({"code": 0, "msg": "maintenance", "total": 9})
    recorder = _Recorder(lambda request: httpx.Response(200, text=body))
    fetcher = CmsFetcher(cache=cache, transport=recorder.transport)

    with pytest.raises(ApiError) as excinfo:
        _run(fetcher.fetch(cms_source, DIRECT))

    assert "maintenance" in str(excinfo.value)
    assert list(store.keys()) == []


def test_http_error_status_is_transport_error_with_relay_hint(cms_source) -> None:
    recorder = _Recorder(lambda request: httpx.Response(403))
    fetcher = CmsFetcher(transport=recorder.transport)

    with pytest.raises(TransportError) as excinfo:
        _run(fetcher.fetch(cms_source, DIRECT))

    message = str(excinfo.value)
    assert "HTTP 403" in message
    assert "relay" in message
    assert cms_source.name in message


def test_connection_failure_is_transport_error(cms_source) -> None:
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    fetcher = CmsFetcher(transport=httpx.MockTransport(refuse))

    with pytest.raises(TransportError) as excinfo:
        _run(fetcher.fetch(cms_source, DIRECT))
    assert "relay" in str(excinfo.value)


def test_playlist_fetch_filters_and_caches(playlist_source, cache) -> None:
    recorder = _Recorder(lambda request: httpx.Response(200, text=PLAYLIST))
    fetcher = PlaylistFetcher(cache=cache, transport=recorder.transport)

    videos = _run(fetcher.fetch(playlist_source, DIRECT, query="news"))
    again = _run(fetcher.fetch(playlist_source, DIRECT, query="news"))

    assert [v.title for v in videos] == ["News One"]
    assert again == videos
    assert len(recorder.requests) == 1
    assert str(recorder.requests[0].url) == playlist_source.url


def test_playlist_category_request_is_empty_without_network(playlist_source) -> None:
    recorder = _Recorder(lambda request: httpx.Response(200, text=PLAYLIST))
    fetcher = PlaylistFetcher(transport=recorder.transport)

    assert _run(fetcher.fetch(playlist_source, DIRECT, category_id="1")) == []
    assert recorder.requests == []


def test_playlist_markup_is_format_error(playlist_source) -> None:
    recorder = _Recorder(lambda request: httpx.Response(200, text="<!DOCTYPE html><html></html>"))
    fetcher = PlaylistFetcher(transport=recorder.transport)

    with pytest.raises(FormatError):
        _run(fetcher.fetch(playlist_source, DIRECT))


def test_source_fetcher_dispatches_on_kind(cms_source, playlist_source) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "live.test":
            return httpx.Response(200, text=PLAYLIST)
        return httpx.Response(200, json=CMS_PAYLOAD)

    fetcher = SourceFetcher(transport=httpx.MockTransport(handler))

    assert [v.title for v in fetcher.fetch_sync(cms_source, DIRECT)] == ["Mountain Story"]
    assert [v.title for v in fetcher.fetch_sync(playlist_source, DIRECT)] == ["News One", "Sports"]


def test_redirect_loop_is_transport_error(cms_source) -> None:
    def loop(request: httpx.Request) -> httpx.Response:
        return httpx.Response(302, headers={"Location": str(request.url)})

    fetcher = CmsFetcher(transport=httpx.MockTransport(loop))

    with pytest.raises(TransportError) as excinfo:
        _run(fetcher.fetch(cms_source, DIRECT, category_id="1"))
    assert "redirects" in str(excinfo.value)
    assert "relay" in str(excinfo.value)
