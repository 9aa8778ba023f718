from __future__ import annotations

import pytest

from vodhub.errors import ApiError, FormatError
from vodhub.ingestion.cms_parser import (
    CmsListing,
    CmsMalformed,
    CmsRemoteError,
    decode_cms_payload,
    parse_episodes,
    transform_cms_response,
)
from vodhub.models import Source, SourceKind


def _source() -> Source:
    return Source(id="cms-1", name="Alpha CMS", url="http://cms.test/api", kind=SourceKind.CMS_API)


def _record(**overrides):
    record = {
        "vod_id": 42,
        "vod_name": "Example Show",
        "vod_blurb": "A show.",
        "vod_pic": "http://img.test/42.jpg",
        "vod_play_url": "Ep1$http://v.test/1.m3u8#Ep2$http://v.test/2.m3u8",
        "vod_remarks": "HD",
    }
    record.update(overrides)
    return record


def test_parse_episodes_empty_string() -> None:
    assert parse_episodes("") == []
    assert parse_episodes(None) == []


def test_parse_episodes_preserves_order_and_drops_missing_urls() -> None:
    episodes = parse_episodes("Ep1$http://v/1#Broken#Ep3$#Ep4$http://v/4")

    assert [(e.name, e.url) for e in episodes] == [("Ep1", "http://v/1"), ("Ep4", "http://v/4")]


def test_parse_episodes_defaults_blank_name() -> None:
    episodes = parse_episodes("$http://v/1")

    assert episodes[0].name == "Video"


def test_parse_episodes_rejoins_to_equivalent_string() -> None:
    packed = "第1集$http://v/1.m3u8#第2集$http://v/2.m3u8#第3集$http://v/3.m3u8"

    episodes = parse_episodes(packed)

    assert "#".join(f"{e.name}${e.url}" for e in episodes) == packed


def test_code_one_without_list_and_zero_total_is_empty() -> None:
    assert isinstance(decode_cms_payload({"code": 1, "total": 0}), CmsListing)
    assert transform_cms_response({"code": 1, "total": 0}, _source()) == []


def test_failure_code_with_zero_total_is_empty() -> None:
    assert transform_cms_response({"code": 0, "msg": "bad", "total": 0}, _source()) == []


def test_failure_code_with_results_raises_api_error() -> None:
    payload = decode_cms_payload({"code": 0, "msg": "bad", "total": 5})
    assert isinstance(payload, CmsRemoteError)
    assert payload.message == "bad"

    with pytest.raises(ApiError) as excinfo:
        transform_cms_response({"code": 0, "msg": "bad", "total": 5}, _source())
    assert "bad" in str(excinfo.value)
    assert excinfo.value.source_name == "Alpha CMS"


def test_failure_code_without_message_uses_generic_text() -> None:
    payload = decode_cms_payload({"code": -1})

    assert isinstance(payload, CmsRemoteError)
    assert payload.message == "API returned an error."


def test_missing_list_with_nonzero_total_is_malformed() -> None:
    assert isinstance(decode_cms_payload({"code": 1, "total": 3}), CmsMalformed)
    assert isinstance(decode_cms_payload({"code": 1, "list": "nope"}), CmsMalformed)

    with pytest.raises(FormatError):
        transform_cms_response({"code": 1, "total": 3}, _source())


def test_non_object_payload_is_malformed() -> None:
    with pytest.raises(FormatError):
        transform_cms_response(["not", "an", "object"], _source())


def test_records_map_to_videos() -> None:
    source = _source()
    payload = {"code": 1, "total": 2, "list": [_record(), _record(vod_id="x7", vod_blurb=None, vod_remarks=None)]}

    videos = transform_cms_response(payload, source)

    assert len(videos) == 2
    first, second = videos
    assert first.id == "42"
    assert first.title == "Example Show"
    assert first.thumbnail_url == "http://img.test/42.jpg"
    assert first.remarks == "HD"
    assert [e.name for e in first.episodes] == ["Ep1", "Ep2"]
    assert first.source_id == source.id
    assert first.source_name == source.name
    assert first.source_kind == SourceKind.CMS_API
    assert second.id == "x7"
    assert second.description == "No description available."
    assert second.remarks == ""


def test_invalid_record_is_skipped_and_the_rest_kept() -> None:
    payload = {"code": 1, "total": 3, "list": [_record(), _record(vod_id=None), "junk"]}

    videos = transform_cms_response(payload, _source())

    assert [v.id for v in videos] == ["42"]
