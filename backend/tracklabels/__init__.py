"""
Track label system.

Derives short, human-readable labels for media tracks from their
technical metadata, for display in a track-selection UI.

Labels are built by pure functions. No I/O, no shared mutable state.

Usage:
    from tracklabels import TrackFormat, MediaKind, build_track_label
    
    track = TrackFormat(kind=MediaKind.VIDEO, width=1920, height=1080, codecs="avc1.64001f")
    print(build_track_label(track))  # "1080p, avc"
"""

from .errors import (
    TrackLabelError,
    InvalidTrackFormatError,
    InvalidLabelSettingsError,
)
from .models import (
    NO_VALUE,
    MediaKind,
    PlaybackState,
    TrackFormat,
    media_kind_for_mime,
)
from .settings import (
    LabelSettings,
    DEFAULT_LABEL_SETTINGS,
)
from .resolution import (
    RESOLUTION_TABLE,
    canonical_height,
)
from .codec_names import (
    CODEC_SHORT_AVC,
    CODEC_SHORT_VP9,
    CODEC_SHORT_VP9_HDR,
    CODEC_SHORT_MP4A,
    CODEC_SHORT_VORBIS,
    codec_name_short,
    is_hdr_codec,
)
from .builder import (
    TrackLabelBuilder,
    build_track_label,
    join_with_separator,
)
from .playback import playback_state_to_string

__all__ = [
    # Errors
    "TrackLabelError",
    "InvalidTrackFormatError",
    "InvalidLabelSettingsError",
    # Models
    "NO_VALUE",
    "MediaKind",
    "PlaybackState",
    "TrackFormat",
    "media_kind_for_mime",
    # Settings
    "LabelSettings",
    "DEFAULT_LABEL_SETTINGS",
    # Resolution
    "RESOLUTION_TABLE",
    "canonical_height",
    # Codecs
    "CODEC_SHORT_AVC",
    "CODEC_SHORT_VP9",
    "CODEC_SHORT_VP9_HDR",
    "CODEC_SHORT_MP4A",
    "CODEC_SHORT_VORBIS",
    "codec_name_short",
    "is_hdr_codec",
    # Labels
    "TrackLabelBuilder",
    "build_track_label",
    "join_with_separator",
    # Playback
    "playback_state_to_string",
]
