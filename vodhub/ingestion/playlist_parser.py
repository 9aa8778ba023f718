"""M3U8 live playlist parsing."""

import re
from typing import Dict, List, Optional

from ..errors import FormatError
from ..models import Episode, Source, Video

EXTINF_MARKER = "#EXTINF:"
FALLBACK_THUMBNAIL = "https://via.placeholder.com/300x450.png?text=Live"
LIVE_REMARKS = "Live"
PLAY_EPISODE_NAME = "Play"

_LOGO_RE = re.compile(r'tvg-logo="([^"]*)"')


def ensure_playlist_text(text: str, source_name: Optional[str] = None) -> str:
    """Reject markup bodies, which mean the relay answered with an error page."""
    if text.strip().startswith("<"):
        raise FormatError(
            "API returned an unexpected format (XML/HTML) instead of an M3U8 playlist",
            source_name,
        )
    return text


def _parse_extinf(line: str, index: int, source: Source) -> Dict[str, str]:
    title = ""
    if "," in line:
        title = line.rsplit(",", 1)[1].strip()
    if not title:
        title = f"Unknown channel {index}"

    logo_match = _LOGO_RE.search(line)
    thumbnail = logo_match.group(1) if logo_match and logo_match.group(1) else FALLBACK_THUMBNAIL

    return {
        "id": f"{source.id}-{title}-{index}",
        "title": title,
        "thumbnail_url": thumbnail,
        "description": f"Live channel: {title}",
    }


def parse_playlist(text: str, source: Source, query: Optional[str] = None) -> List[Video]:
    """Turn playlist text into one single-episode video per channel.

    A metadata line opens a pending record and the next uri line completes it.
    Uri lines with no pending record are skipped. When query is given only
    titles containing it (case-insensitive) are kept.
    """
    needle = query.strip().lower() if query else ""
    videos = []
    pending: Optional[Dict[str, str]] = None

    for index, raw_line in enumerate(text.split("\n")):
        line = raw_line.strip()
        if line.startswith(EXTINF_MARKER):
            pending = _parse_extinf(line, index, source)
        elif line and not line.startswith("#"):
            if pending is not None and (not needle or needle in pending["title"].lower()):
                videos.append(
                    Video(
                        episodes=[Episode(name=PLAY_EPISODE_NAME, url=line)],
                        remarks=LIVE_REMARKS,
                        source_id=source.id,
                        source_name=source.name,
                        source_kind=source.kind,
                        **pending,
                    )
                )
            pending = None

    return videos
