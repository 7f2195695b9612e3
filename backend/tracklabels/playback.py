"""Playback state display names."""

from typing import Any

from .models import PlaybackState


def playback_state_to_string(state: Any) -> str:
    """
    Name a player state for logs and debug overlays.
    
    Accepts a PlaybackState or its raw integer value.
    Unrecognized values are reported as ended.
    """
    if state == PlaybackState.BUFFERING:
        return "STATE_BUFFERING"
    if state == PlaybackState.READY:
        return "STATE_READY"
    if state == PlaybackState.IDLE:
        return "STATE_IDLE"
    return "STATE_ENDED"
