"""CMS-JSON response decoding and normalization."""

from typing import Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..errors import ApiError, FormatError
from ..models import Episode, Source, Video

EPISODE_SEPARATOR = "#"
FIELD_SEPARATOR = "$"
DEFAULT_EPISODE_NAME = "Video"
DEFAULT_DESCRIPTION = "No description available."
GENERIC_API_ERROR = "API returned an error."


class CmsRecord(BaseModel):
    """Raw catalog record as returned by the api."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    vod_id: str
    vod_name: Optional[str] = None
    vod_blurb: Optional[str] = None
    vod_pic: Optional[str] = None
    vod_play_url: Optional[str] = None
    vod_remarks: Optional[str] = None


class CmsListing(BaseModel):
    """Successful listing (possibly empty)."""

    kind: Literal["listing"] = "listing"
    records: List[CmsRecord] = Field(default_factory=list)
    total: Optional[int] = None


class CmsRemoteError(BaseModel):
    """The api answered with a failure code."""

    kind: Literal["remote_error"] = "remote_error"
    message: str


class CmsMalformed(BaseModel):
    """The payload does not have the expected shape."""

    kind: Literal["malformed"] = "malformed"
    reason: str


CmsPayload = Union[CmsListing, CmsRemoteError, CmsMalformed]


def parse_episodes(packed: Optional[str]) -> List[Episode]:
    """Split a packed ``name$url#name$url`` string into episodes.

    Entries without a url are dropped; order is preserved.
    """
    if not packed:
        return []

    episodes = []
    for chunk in packed.split(EPISODE_SEPARATOR):
        parts = chunk.split(FIELD_SEPARATOR)
        name = parts[0] or DEFAULT_EPISODE_NAME
        url = parts[1] if len(parts) > 1 else ""
        if url:
            episodes.append(Episode(name=name, url=url))
    return episodes


def decode_cms_payload(data: Any) -> CmsPayload:
    """Classify a decoded JSON payload.

    ``code != 1`` with ``total == 0`` is an empty listing rather than an error,
    and so is a missing ``list`` when ``total == 0``.
    """
    if not isinstance(data, dict):
        return CmsMalformed(reason="response is not a JSON object")

    code = data.get("code")
    total = data.get("total")
    # Only a literal 0 counts; a missing total is not "nothing found"
    is_empty = total == 0 and not isinstance(total, bool)

    if code != 1 or isinstance(code, bool):
        if is_empty:
            return CmsListing(total=0)
        message = data.get("msg")
        return CmsRemoteError(message=str(message) if message else GENERIC_API_ERROR)

    raw_list = data.get("list")
    if not isinstance(raw_list, list):
        if is_empty:
            return CmsListing(total=0)
        return CmsMalformed(reason='missing "list" property or it is not an array')

    # Records are validated one by one; a bad record is dropped, not the listing
    records = []
    for item in raw_list:
        try:
            records.append(CmsRecord.model_validate(item))
        except ValidationError:
            continue

    return CmsListing(records=records, total=total if isinstance(total, int) else None)


def record_to_video(record: CmsRecord, source: Source) -> Video:
    """Map a raw record to a normalized video."""
    return Video(
        id=record.vod_id,
        title=record.vod_name or "",
        description=record.vod_blurb or DEFAULT_DESCRIPTION,
        thumbnail_url=record.vod_pic or "",
        episodes=parse_episodes(record.vod_play_url),
        remarks=record.vod_remarks or "",
        source_id=source.id,
        source_name=source.name,
        source_kind=source.kind,
    )


def transform_cms_response(data: Any, source: Source) -> List[Video]:
    """Normalize a decoded CMS response, raising on remote or shape errors."""
    payload = decode_cms_payload(data)

    if isinstance(payload, CmsRemoteError):
        raise ApiError(payload.message, source.name)
    if isinstance(payload, CmsMalformed):
        raise FormatError(f"Invalid API response format: {payload.reason}", source.name)

    return [record_to_video(record, source) for record in payload.records]
