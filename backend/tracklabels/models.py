"""
Track format data models.

Represents the technical metadata of one selectable track.
All models use Pydantic for validation.
Unknown or missing values are explicitly represented as None.
The player's NO_VALUE sentinel (-1) is accepted on input and
normalized to None, never carried further.
"""

import logging
from enum import Enum, IntEnum
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from .errors import InvalidTrackFormatError

logger = logging.getLogger(__name__)

# Sentinel used by the player framework for "no value"
NO_VALUE = -1

SUBTITLE_MIME_TYPES = frozenset({
    "application/x-subrip",
    "application/ttml+xml",
    "application/cea-608",
    "application/cea-708",
    "application/x-mp4-vtt",
    "application/x-quicktime-tx3g",
    "application/pgs",
    "application/dvbsubs",
    "application/vobsub",
})


class MediaKind(str, Enum):
    """Kind of media carried by a track."""
    
    VIDEO = "video"
    AUDIO = "audio"
    TEXT = "text"
    OTHER = "other"


class PlaybackState(IntEnum):
    """Player state, numbered as the player framework numbers them."""
    
    IDLE = 1
    BUFFERING = 2
    READY = 3
    ENDED = 4


def media_kind_for_mime(mime_type: Optional[str]) -> MediaKind:
    """
    Classify a sample MIME type.
    
    Args:
        mime_type: e.g. "video/avc", "audio/mp4a-latm", "text/vtt"
        
    Returns:
        MediaKind, OTHER when the type is missing or unrecognized
    """
    if not mime_type:
        return MediaKind.OTHER
    
    mime = mime_type.strip().lower()
    top_level = mime.split("/", 1)[0]
    
    if top_level == "video":
        return MediaKind.VIDEO
    if top_level == "audio":
        return MediaKind.AUDIO
    if top_level == "text" or mime in SUBTITLE_MIME_TYPES:
        return MediaKind.TEXT
    return MediaKind.OTHER


class TrackFormat(BaseModel):
    """
    Format descriptor for a single track.
    
    Immutable. Every field except kind is optional.
    If kind is omitted it is derived from sample_mime_type.
    """
    
    model_config = ConfigDict(extra="forbid", frozen=True)
    
    kind: MediaKind = MediaKind.OTHER
    width: Optional[int] = None
    height: Optional[int] = None
    frame_rate: Optional[float] = None
    bitrate: Optional[int] = None  # bits per second
    codecs: Optional[str] = None  # e.g., "avc1.64001f", "vp9.2"
    language: Optional[str] = None  # e.g., "en", "und"
    channel_count: Optional[int] = None
    sample_rate: Optional[int] = None  # Hz
    sample_mime_type: Optional[str] = None
    
    @model_validator(mode="before")
    @classmethod
    def derive_kind(cls, data: Any) -> Any:
        """Fill in kind from the MIME type when not given explicitly."""
        if isinstance(data, Mapping) and data.get("kind") is None:
            mime = data.get("sample_mime_type")
            if mime is not None:
                data = dict(data)
                data["kind"] = media_kind_for_mime(mime)
        return data
    
    @field_validator(
        "width", "height", "frame_rate", "bitrate", "channel_count", "sample_rate",
        mode="before",
    )
    @classmethod
    def normalize_sentinel(cls, v: Any) -> Any:
        """Map the NO_VALUE sentinel to None."""
        if v is None or v == NO_VALUE:
            return None
        return v
    
    @field_validator("width", "height", "frame_rate", "bitrate", "channel_count", "sample_rate")
    @classmethod
    def validate_non_negative(cls, v: Optional[float]) -> Optional[float]:
        """Numeric fields cannot be negative."""
        if v is not None and v < 0:
            raise ValueError("Numeric track fields cannot be negative")
        return v
    
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TrackFormat":
        """
        Build a track format from a plain mapping.
        
        Args:
            data: Field values, sentinels allowed
            
        Returns:
            Validated TrackFormat
            
        Raises:
            InvalidTrackFormatError: If the data does not describe a valid track
        """
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            logger.warning("Rejected track format %r: %s", dict(data), e)
            raise InvalidTrackFormatError(str(e), data) from e
