from __future__ import annotations

import pytest

from vodhub.errors import FormatError
from vodhub.ingestion.playlist_parser import (
    FALLBACK_THUMBNAIL,
    ensure_playlist_text,
    parse_playlist,
)

SAMPLE_PLAYLIST = """#EXTM3U
#EXTINF:-1 tvg-logo="http://x/logo.png",Channel A
http://x/stream.m3u8
#EXTINF:-1 group-title="News, World",BBC News
http://x/bbc.m3u8

#EXTINF:-1,channel a
http://x/stream-2.m3u8
"""


def test_single_channel(playlist_source) -> None:
    text = '#EXTINF:-1 tvg-logo="http://x/logo.png",Channel A\nhttp://x/stream.m3u8\n'

    videos = parse_playlist(text, playlist_source)

    assert len(videos) == 1
    video = videos[0]
    assert video.title == "Channel A"
    assert video.thumbnail_url == "http://x/logo.png"
    assert video.remarks == "Live"
    assert [(e.name, e.url) for e in video.episodes] == [("Play", "http://x/stream.m3u8")]
    assert video.id == "live-1-Channel A-0"


def test_title_is_taken_after_last_comma(playlist_source) -> None:
    videos = parse_playlist(SAMPLE_PLAYLIST, playlist_source)

    assert [v.title for v in videos] == ["Channel A", "BBC News", "channel a"]
    assert videos[1].thumbnail_url == FALLBACK_THUMBNAIL


def test_repeated_titles_get_distinct_ids(playlist_source) -> None:
    text = "#EXTINF:-1,Same\nhttp://x/1\n#EXTINF:-1,Same\nhttp://x/2\n"

    videos = parse_playlist(text, playlist_source)

    assert len({v.id for v in videos}) == 2


def test_missing_title_gets_placeholder(playlist_source) -> None:
    videos = parse_playlist("#EXTM3U\n#EXTINF:-1\nhttp://x/1\n", playlist_source)

    assert videos[0].title == "Unknown channel 1"


def test_query_filter_is_case_insensitive(playlist_source) -> None:
    videos = parse_playlist(SAMPLE_PLAYLIST, playlist_source, query="CHANNEL a")

    assert [v.episodes[0].url for v in videos] == ["http://x/stream.m3u8", "http://x/stream-2.m3u8"]


def test_query_filter_without_match_is_empty(playlist_source) -> None:
    assert parse_playlist(SAMPLE_PLAYLIST, playlist_source, query="sports") == []


def test_uri_without_metadata_is_skipped(playlist_source) -> None:
    text = "http://x/orphan.m3u8\n#EXTINF:-1,Real\nhttp://x/real.m3u8\nhttp://x/second-orphan.m3u8\n"

    videos = parse_playlist(text, playlist_source)

    assert [v.title for v in videos] == ["Real"]


def test_other_directives_are_inert(playlist_source) -> None:
    text = "#EXTINF:-1,Real\n#EXTVLCOPT:http-user-agent=x\n\nhttp://x/real.m3u8\n"

    videos = parse_playlist(text, playlist_source)

    assert videos[0].episodes[0].url == "http://x/real.m3u8"


def test_markup_is_rejected() -> None:
    with pytest.raises(FormatError):
        ensure_playlist_text("  <html><body>502 Bad Gateway</body></html>", "Live TV")

    assert ensure_playlist_text("#EXTM3U\n") == "#EXTM3U\n"
