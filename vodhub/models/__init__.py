"""Data models for vodhub."""

from .source import Source, SourceKind, SourceStatus, infer_source_kind
from .video import Episode, Video

__all__ = ["Episode", "Source", "SourceKind", "SourceStatus", "Video", "infer_source_kind"]
