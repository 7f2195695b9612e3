"""
Tests for the TrackFormat model.

Verifies:
- NO_VALUE sentinel normalizes to None
- Negative values are rejected
- Kind is derived from the sample MIME type
- from_dict wraps validation failures in InvalidTrackFormatError
- Formats are immutable
"""

import pytest
from pydantic import ValidationError

from tracklabels import (
    NO_VALUE,
    InvalidTrackFormatError,
    MediaKind,
    TrackFormat,
    TrackLabelError,
    build_track_label,
    media_kind_for_mime,
)


class TestSentinelNormalization:
    """The player's NO_VALUE sentinel never survives validation."""
    
    def test_sentinel_becomes_none(self):
        track = TrackFormat(
            kind=MediaKind.VIDEO,
            width=NO_VALUE, height=NO_VALUE, frame_rate=NO_VALUE,
            bitrate=NO_VALUE, channel_count=NO_VALUE, sample_rate=NO_VALUE,
        )
        assert track.width is None
        assert track.height is None
        assert track.frame_rate is None
        assert track.bitrate is None
        assert track.channel_count is None
        assert track.sample_rate is None
    
    def test_float_sentinel_becomes_none(self):
        assert TrackFormat(frame_rate=-1.0).frame_rate is None
    
    def test_sentinel_format_is_unknown(self):
        track = TrackFormat(kind=MediaKind.AUDIO, bitrate=NO_VALUE, channel_count=NO_VALUE)
        assert build_track_label(track) == "unknown"
    
    def test_negative_value_rejected(self):
        with pytest.raises(ValidationError):
            TrackFormat(width=-2)


class TestMediaKindForMime:
    """Test MIME type classification."""
    
    @pytest.mark.parametrize("mime,expected", [
        ("video/avc", MediaKind.VIDEO),
        ("video/x-vnd.on2.vp9", MediaKind.VIDEO),
        ("audio/mp4a-latm", MediaKind.AUDIO),
        ("AUDIO/OPUS", MediaKind.AUDIO),
        ("text/vtt", MediaKind.TEXT),
        ("application/x-subrip", MediaKind.TEXT),
        ("application/cea-608", MediaKind.TEXT),
        ("application/id3", MediaKind.OTHER),
        ("", MediaKind.OTHER),
        (None, MediaKind.OTHER),
    ])
    def test_classification(self, mime, expected):
        assert media_kind_for_mime(mime) == expected
    
    def test_explicit_kind_wins_over_mime(self):
        track = TrackFormat(kind=MediaKind.OTHER, sample_mime_type="video/avc")
        assert track.kind == MediaKind.OTHER
    
    def test_kind_defaults_to_other(self):
        assert TrackFormat().kind == MediaKind.OTHER


class TestFromDict:
    """Test construction from raw mappings."""
    
    def test_valid_dict(self):
        track = TrackFormat.from_dict({
            "sample_mime_type": "audio/mp4a-latm",
            "language": "en",
            "bitrate": 128000,
            "channel_count": -1,
        })
        assert track.kind == MediaKind.AUDIO
        assert track.bitrate == 128000
        assert track.channel_count is None
    
    def test_unknown_field_rejected(self):
        with pytest.raises(InvalidTrackFormatError) as exc_info:
            TrackFormat.from_dict({"bogus": 1})
        
        assert exc_info.value.data == {"bogus": 1}
        assert "Invalid track format" in str(exc_info.value)
    
    def test_bad_type_rejected(self):
        with pytest.raises(TrackLabelError):
            TrackFormat.from_dict({"width": "wide"})


class TestImmutability:
    """Formats are read-only."""
    
    def test_cannot_assign(self):
        track = TrackFormat(width=1920)
        with pytest.raises(ValidationError):
            track.width = 1280
