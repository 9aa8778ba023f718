"""Result models for fan-out queries and probes."""

from typing import List, Optional

from pydantic import BaseModel, Field

from ..models import SourceStatus, Video


class FetchOutcome(BaseModel):
    """Result of querying one source during a fan-out."""

    source_id: str = Field(..., description="Source id")
    source_name: str = Field(..., description="Source name")
    success: bool = Field(..., description="Whether the fetch succeeded")
    videos: List[Video] = Field(default_factory=list, description="Parsed videos")
    error: Optional[str] = Field(None, description="Error message if failed")
    latency_ms: Optional[int] = Field(None, description="Time from issue to resolution")


class SearchResult(BaseModel):
    """Merged result of a fan-out search."""

    videos: List[Video] = Field(default_factory=list, description="Videos in completion order")
    errors: List[str] = Field(default_factory=list, description="One message per failed source")
    outcomes: List[FetchOutcome] = Field(default_factory=list, description="Per-source outcomes")


class ProbeResult(BaseModel):
    """Health probe outcome for one source."""

    status: SourceStatus = Field(..., description="available or unavailable")
    latency_ms: Optional[int] = Field(None, description="Latency when available")
    error: Optional[str] = Field(None, description="Failure reason when unavailable")
