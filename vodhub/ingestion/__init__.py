"""Source retrieval: relay rewriting, format parsing and fetch pipelines."""

from .cms_fetcher import CmsFetcher, build_cms_url
from .cms_parser import decode_cms_payload, parse_episodes, transform_cms_response
from .fetcher import SourceFetcher
from .playlist_fetcher import PlaylistFetcher
from .playlist_parser import ensure_playlist_text, parse_playlist
from .relay import PRESET_RELAYS, RelayConfig, build_request_url, resolve_relay

__all__ = [
    "CmsFetcher",
    "PlaylistFetcher",
    "SourceFetcher",
    "RelayConfig",
    "PRESET_RELAYS",
    "build_cms_url",
    "build_request_url",
    "decode_cms_payload",
    "ensure_playlist_text",
    "parse_episodes",
    "parse_playlist",
    "resolve_relay",
    "transform_cms_response",
]
