"""Normalized catalog entries."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .source import SourceKind


class Episode(BaseModel):
    """Single playable target."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Display label")
    url: str = Field(..., min_length=1, description="Playable url")


class Video(BaseModel):
    """Catalog entry normalized from any source kind."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Source-local identifier")
    title: str = Field(..., description="Title")
    description: str = Field("", description="Synopsis")
    thumbnail_url: str = Field("", description="Poster or channel logo")
    episodes: List[Episode] = Field(default_factory=list, description="Episodes in playable order")
    remarks: str = Field("", description="Badge text such as quality or update status")
    source_id: str = Field(..., description="Id of the originating source")
    source_name: str = Field(..., description="Name of the originating source")
    source_kind: SourceKind = Field(..., description="Kind of the originating source")
