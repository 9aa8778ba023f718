"""Curated catalog sources."""

from typing import Dict, List

from ..models import Source, SourceKind

PRESET_SOURCES: List[Dict[str, str]] = [
    {"name": "TV-爱坤资源", "url": "https://ikunzyapi.com/api.php/provide/vod", "kind": "apple-cms"},
    {"name": "电影天堂", "url": "https://caiji.dyttzyapi.com/api.php/provide/vod", "kind": "apple-cms"},
    {
        "name": "茅台资源",
        "url": "https://caiji.maotaizy.cc/api.php/provide/vod/from/mtm3u8/at/josn/",
        "kind": "apple-cms",
    },
]


def preset_sources() -> List[Source]:
    """Build fresh Source records for the curated list, keyed by url."""
    return [
        Source(id=preset["url"], name=preset["name"], url=preset["url"], kind=SourceKind(preset["kind"]))
        for preset in PRESET_SOURCES
    ]
