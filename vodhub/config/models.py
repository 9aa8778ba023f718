"""Configuration models."""

from typing import Optional

from pydantic import BaseModel, Field


class RelaySettings(BaseModel):
    """Relay selection."""

    selected: str = Field("cors-eu-org", description="Preset relay id (see 'vodhub relay list')")
    custom_url: str = Field("", description="Relay prefix used when selected is 'custom'")
    url_env: Optional[str] = Field(
        "VODHUB_RELAY_URL",
        description="Environment variable overriding the relay prefix",
    )


class CacheSettings(BaseModel):
    """Response cache configuration."""

    enabled: bool = Field(True, description="Whether parsed responses are cached")
    path: str = Field("~/.cache/vodhub/cache.json", description="Cache file location")


class HttpSettings(BaseModel):
    """Outbound request configuration."""

    timeout: float = Field(15.0, description="Request timeout in seconds", gt=0.0, le=120.0)
    user_agent: str = Field("vodhub/0.1 (catalog aggregator)", description="User-Agent header")


class ConfigModel(BaseModel):
    """Main configuration model."""

    relay: RelaySettings = Field(default_factory=RelaySettings)
    cache: CacheSettings = Field(default_factory=CacheSettings)
    http: HttpSettings = Field(default_factory=HttpSettings)
