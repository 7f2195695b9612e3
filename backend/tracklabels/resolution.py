"""
Canonical resolution lookup.

Maps a pixel width to the vertical resolution it is usually marketed as,
so that encodes with slightly odd heights (e.g. 1920x1066) still read
as "1080p". Genuinely non-standard aspect ratios keep their real height.
"""

from types import MappingProxyType
from typing import Mapping, Optional


RESOLUTION_TABLE: Mapping[int, int] = MappingProxyType({
    256: 144,
    426: 240,
    640: 360,
    854: 480,
    1280: 720,
    1920: 1080,
    2560: 1440,
    3840: 2160,
    7680: 4320,
})


def sizes_match(expected: int, actual: int, tolerance: int) -> bool:
    """True if two pixel sizes differ by at most tolerance."""
    return abs(expected - actual) <= tolerance


def canonical_height(width: Optional[int], height: Optional[int], tolerance: int = 15) -> Optional[int]:
    """
    Resolve the height to display for a given frame size.
    
    Args:
        width: Pixel width, or None if unknown
        height: Pixel height, or None if unknown
        tolerance: Max distance from the canonical height still treated as canonical
        
    Returns:
        Canonical height when the width is known and the heights agree,
        the actual height otherwise, None if either dimension is missing
    """
    if width is None or height is None:
        return None
    
    canonical = RESOLUTION_TABLE.get(width)
    
    # Compare both heights to avoid mislabeling non-standard proportions
    if canonical is not None and sizes_match(canonical, height, tolerance):
        return canonical
    return height
