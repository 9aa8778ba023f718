"""Source model for registered catalog endpoints."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class SourceKind(str, Enum):
    """Catalog backend flavour."""

    CMS_API = "apple-cms"
    PLAYLIST = "m3u8"


class SourceStatus(str, Enum):
    """Availability as last observed by a probe or query."""

    UNKNOWN = "unknown"
    TESTING = "testing"
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"


def infer_source_kind(url: str) -> SourceKind:
    """Playlist urls end in .m3u8, everything else is a CMS api."""
    if url.strip().lower().endswith(".m3u8"):
        return SourceKind.PLAYLIST
    return SourceKind.CMS_API


class Source(BaseModel):
    """Registered catalog source."""

    id: str = Field(..., description="Stable unique identifier")
    name: str = Field(..., description="Display name")
    url: str = Field(..., description="Base endpoint url")
    kind: SourceKind = Field(SourceKind.CMS_API, description="Catalog backend flavour")
    status: SourceStatus = Field(SourceStatus.UNKNOWN, description="Last known availability")
    latency_ms: Optional[int] = Field(None, description="Probe latency, only when available")

    @property
    def is_searchable(self) -> bool:
        """Whether the source takes part in fan-out search."""
        return self.status in (SourceStatus.AVAILABLE, SourceStatus.UNKNOWN)
