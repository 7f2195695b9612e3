"""
Track label error types.

All errors inherit from TrackLabelError for easy catching.
Errors are explicit and provide actionable messages.

Label construction itself never raises. These errors only surface when
a track format descriptor or label settings are built from raw data.
"""

from typing import Any, Mapping, Optional


class TrackLabelError(Exception):
    """Base exception for all track label failures."""
    pass


class InvalidTrackFormatError(TrackLabelError):
    """Raised when a track format descriptor cannot be built from raw data."""
    
    def __init__(self, reason: str, data: Optional[Mapping[str, Any]] = None):
        self.reason = reason
        self.data = dict(data) if data is not None else None
        super().__init__(f"Invalid track format: {reason}")


class InvalidLabelSettingsError(TrackLabelError):
    """Raised when label settings are inconsistent or malformed."""
    
    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid label setting '{field}': {reason}")
