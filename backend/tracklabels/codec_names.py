"""
Codec name helpers.

Codec strings arrive in RFC 6381 form ("avc1.64001f", "mp4a.40.2",
"vp09.00.10.08"). The track label only needs the family name.
"""

from typing import Optional


CODEC_SHORT_AVC = "avc"
CODEC_SHORT_VP9 = "vp9"
CODEC_SHORT_VP9_HDR = "vp9.2"
CODEC_SHORT_MP4A = "mp4a"
CODEC_SHORT_VORBIS = "vorbis"

# Search order matters: first match wins
SHORT_CODEC_NAMES = (
    CODEC_SHORT_AVC,
    CODEC_SHORT_VP9,
    CODEC_SHORT_MP4A,
    CODEC_SHORT_VORBIS,
)


def codec_name_short(codec: Optional[str]) -> Optional[str]:
    """
    Canonicalize a full codec string to its short family name.
    
    Unrecognized codecs pass through lowercased but otherwise unchanged.
    
    Args:
        codec: Full codec string, or None
        
    Returns:
        Short codec name, or None if codec is None
    """
    if codec is None:
        return None
    
    lowered = codec.lower()
    
    for name in SHORT_CODEC_NAMES:
        if name in lowered:
            return name
    
    return lowered


def is_hdr_codec(codec: Optional[str]) -> bool:
    """
    Check whether a codec string is the HDR VP9 profile.
    
    Exact match only. Other HDR variants (HDR10 via HEVC, Dolby Vision)
    are not recognized here.
    """
    if codec is None:
        return False
    return codec == CODEC_SHORT_VP9_HDR
