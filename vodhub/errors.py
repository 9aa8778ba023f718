"""Exception hierarchy for catalog retrieval and the source registry."""

from typing import Optional

RELAY_HINT = (
    "The source or the relay may be down, or the relay may be rejecting the request. "
    "Try another relay ('vodhub relay list') or check your network connection."
)


class VodHubError(Exception):
    """Base class for all vodhub errors."""


class SourceError(VodHubError):
    """An error scoped to a single catalog source."""

    def __init__(self, message: str, source_name: Optional[str] = None) -> None:
        self.source_name = source_name
        self.detail = message
        if source_name:
            message = f"Failed to fetch data from {source_name}. ({message})"
        super().__init__(message)


class TransportError(SourceError):
    """Connection, DNS, timeout or relay failure."""

    def __init__(self, message: str, source_name: Optional[str] = None) -> None:
        super().__init__(f"{message}. {RELAY_HINT}", source_name)


class FormatError(SourceError):
    """Response is not valid JSON or playlist text, or is a markup error page."""


class ApiError(SourceError):
    """Well-formed response carrying a remote failure code."""


class NoUsableSourcesError(VodHubError):
    """No source is eligible for the requested operation."""


class RegistryError(VodHubError):
    """Source registry operation failed."""


class DuplicateSourceError(RegistryError):
    """A source with the same url is already registered."""


class SourceNotFoundError(RegistryError):
    """No source with the given id is registered."""


class InvalidSourceError(RegistryError):
    """The source url is not an absolute http(s) url."""
