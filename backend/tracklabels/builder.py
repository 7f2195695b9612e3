"""
Track label construction.

Turns a TrackFormat into the short label shown in the track-selection UI,
e.g. "1080p, 29.97fps, 5Mbit, vp9, HDR" or "en, 2ch, 48000Hz, mp4a".

The label is a left-to-right join of independent fragments. Each fragment
builder is total: missing data yields an empty fragment, which the join
skips. Nothing here raises for a valid TrackFormat.

Fragment order per kind:
    video: resolution, frame rate, bitrate, codec, HDR
    audio: language, channels + sample rate, bitrate, codec, channel hint
    other: language, bitrate, codec
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, List, Optional

from .codec_names import codec_name_short, is_hdr_codec
from .models import MediaKind, TrackFormat
from .resolution import canonical_height
from .settings import DEFAULT_LABEL_SETTINGS, LabelSettings

logger = logging.getLogger(__name__)

UNDEFINED_LANGUAGE = "und"
HDR_LABEL = "HDR"
SURROUND_HINT = "5.1"

_MEGABIT = Decimal(1_000_000)
_TWO_PLACES = Decimal("0.01")


def format_float(value: float) -> str:
    """Format a number without trailing zeros: 30.0 -> "30", 29.970 -> "29.97"."""
    return f"{value:f}".rstrip("0").rstrip(".")


def join_with_separator(first: str, second: str, separator: str = ", ") -> str:
    """Join two fragments, dropping whichever is empty."""
    if not first:
        return second
    if not second:
        return first
    return first + separator + second


def build_resolution_string(track: TrackFormat, tolerance: int = 15) -> str:
    """Short resolution, e.g. 720p or 1080p."""
    height = canonical_height(track.width, track.height, tolerance)
    return "" if height is None else f"{height}p"


def build_frame_rate_string(track: TrackFormat) -> str:
    if track.frame_rate is None:
        return ""
    return f"{format_float(track.frame_rate)}fps"


def build_bitrate_string(track: TrackFormat) -> str:
    """
    Bitrate in megabits, rounded half-up to two decimals.
    
    Rates that round to zero are omitted.
    """
    if track.bitrate is None:
        return ""
    
    megabits = (Decimal(track.bitrate) / _MEGABIT).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)
    if megabits == 0:
        return ""
    return f"{format_float(float(megabits))}Mbit"


def build_codec_string(track: TrackFormat) -> str:
    if track.codecs is None:
        return ""
    return codec_name_short(track.codecs)


def build_hdr_string(track: TrackFormat) -> str:
    return HDR_LABEL if is_hdr_codec(track.codecs) else ""


def build_language_string(track: TrackFormat) -> str:
    if not track.language or track.language == UNDEFINED_LANGUAGE:
        return ""
    return track.language


def build_audio_property_string(track: TrackFormat) -> str:
    if track.channel_count is None or track.sample_rate is None:
        return ""
    return f"{track.channel_count}ch, {track.sample_rate}Hz"


def build_channel_hint_string(track: TrackFormat, threshold: int = 300_000) -> str:
    """
    Guess surround audio from bitrate alone.
    
    No channel layout is available here, so high-bitrate stereo is
    also reported as 5.1.
    """
    if track.bitrate is not None and track.bitrate > threshold:
        return SURROUND_HINT
    return ""


class TrackLabelBuilder:
    """
    Builds display labels for tracks.
    
    Stateless apart from its immutable settings, so one instance can be
    shared freely.
    """
    
    def __init__(self, settings: Optional[LabelSettings] = None):
        self.settings = settings or DEFAULT_LABEL_SETTINGS
    
    def build(self, track: TrackFormat) -> str:
        """
        Build the label for a track.
        
        Args:
            track: Format descriptor of the track
            
        Returns:
            Comma-separated label, or the configured unknown label
            when no fragment could be derived
        """
        label = ""
        for fragment in self.fragments(track):
            label = join_with_separator(label, fragment, self.settings.separator)
        
        if not label:
            label = self.settings.unknown_label
        
        logger.debug("Track label for %s track: %s", track.kind.value, label)
        return label
    
    def fragments(self, track: TrackFormat) -> List[str]:
        """All fragments for the track in display order, empty ones included."""
        return [build(track) for build in self._fragment_builders(track.kind)]
    
    def _fragment_builders(self, kind: MediaKind) -> List[Callable[[TrackFormat], str]]:
        settings = self.settings
        
        if kind == MediaKind.VIDEO:
            return [
                lambda t: build_resolution_string(t, settings.resolution_tolerance),
                build_frame_rate_string,
                build_bitrate_string,
                build_codec_string,
                build_hdr_string,
            ]
        
        if kind == MediaKind.AUDIO:
            return [
                build_language_string,
                build_audio_property_string,
                build_bitrate_string,
                build_codec_string,
                lambda t: build_channel_hint_string(t, settings.surround_bitrate_threshold),
            ]
        
        return [
            build_language_string,
            build_bitrate_string,
            build_codec_string,
        ]


_default_builder = TrackLabelBuilder()


def build_track_label(track: TrackFormat, settings: Optional[LabelSettings] = None) -> str:
    """
    Build the display label for a track.
    
    Module-level shortcut for TrackLabelBuilder(settings).build(track).
    """
    if settings is None:
        return _default_builder.build(track)
    return TrackLabelBuilder(settings).build(track)
