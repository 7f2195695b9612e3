"""
LabelSettings — Immutable configuration for track label construction.

The defaults reproduce the labels shown in the track-selection UI:
- Fragments joined with ", "
- "unknown" when nothing could be derived
- Canonical resolution accepted within 15 pixels of the actual height
- "5.1" channel hint above 300 kbit/s

Settings are frozen once created. Build a new instance to change them.
"""

from dataclasses import dataclass, asdict, fields
from typing import Any, Dict

from .errors import InvalidLabelSettingsError


@dataclass(frozen=True)
class LabelSettings:
    """
    Complete, immutable label configuration.
    
    Validation happens on construction, so an instance that exists
    is always usable by the builder.
    """
    
    separator: str = ", "
    unknown_label: str = "unknown"
    
    # Max distance between canonical and actual height, inclusive
    resolution_tolerance: int = 15
    
    # Bits per second above which audio is hinted as surround
    surround_bitrate_threshold: int = 300_000
    
    def __post_init__(self) -> None:
        if not isinstance(self.separator, str):
            raise InvalidLabelSettingsError("separator", "must be a string")
        if not isinstance(self.unknown_label, str) or not self.unknown_label:
            raise InvalidLabelSettingsError("unknown_label", "must be a non-empty string")
        if isinstance(self.resolution_tolerance, bool) or not isinstance(self.resolution_tolerance, int):
            raise InvalidLabelSettingsError("resolution_tolerance", "must be an integer")
        if self.resolution_tolerance < 0:
            raise InvalidLabelSettingsError("resolution_tolerance", "cannot be negative")
        if isinstance(self.surround_bitrate_threshold, bool) or not isinstance(self.surround_bitrate_threshold, int):
            raise InvalidLabelSettingsError("surround_bitrate_threshold", "must be an integer")
        if self.surround_bitrate_threshold < 0:
            raise InvalidLabelSettingsError("surround_bitrate_threshold", "cannot be negative")
    
    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a plain dictionary."""
        return asdict(self)
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LabelSettings":
        """
        Deserialize from a dictionary.
        
        Missing keys fall back to defaults. Unknown keys are rejected
        rather than silently ignored.
        
        Raises:
            InvalidLabelSettingsError: On unknown keys or invalid values
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise InvalidLabelSettingsError(unknown[0], "unknown setting")
        return cls(**data)


DEFAULT_LABEL_SETTINGS = LabelSettings()
