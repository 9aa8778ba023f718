"""Relay url rewriting for cross-origin restricted catalog endpoints."""

from typing import List
from urllib.parse import quote

from pydantic import BaseModel, Field

# Same unreserved set as encodeURIComponent, which query-style relays expect
_ENCODE_SAFE = "-_.!~*'()"


class RelayConfig(BaseModel):
    """Relay prefix; the style is inferred from the presence of '?'."""

    prefix: str = Field("", description="Relay prefix, empty for a direct connection")

    @property
    def is_direct(self) -> bool:
        return not self.prefix

    @property
    def is_query_style(self) -> bool:
        return "?" in self.prefix


class RelayPreset(BaseModel):
    """Known public relay."""

    id: str
    name: str
    url: str


PRESET_RELAYS: List[RelayPreset] = [
    RelayPreset(id="cors-eu-org", name="cors.eu.org", url="https://cors.eu.org/"),
    RelayPreset(id="corsproxy-io", name="corsproxy.io", url="https://corsproxy.io/?"),
    RelayPreset(id="none", name="Direct connection (no relay)", url=""),
    RelayPreset(id="custom", name="Custom relay", url=""),
]


def build_request_url(relay: RelayConfig, target_url: str) -> str:
    """Rewrite target_url through the relay.

    Query-style relays (prefix contains '?') receive the target percent-encoded
    as a parameter value; path-style relays receive it verbatim as a trailing
    path. An empty prefix means a direct connection.
    """
    if relay.is_direct:
        return target_url
    if relay.is_query_style:
        return relay.prefix + quote(target_url, safe=_ENCODE_SAFE)
    return relay.prefix + target_url


def resolve_relay(relay_id: str, custom_url: str = "") -> RelayConfig:
    """Resolve a preset id to a relay config; unknown ids connect directly."""
    if relay_id == "custom":
        return RelayConfig(prefix=custom_url.strip())

    for preset in PRESET_RELAYS:
        if preset.id == relay_id:
            return RelayConfig(prefix=preset.url)

    return RelayConfig()
