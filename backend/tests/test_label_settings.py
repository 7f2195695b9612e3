"""
Tests for LabelSettings validation and serialization.
"""

import pytest
from dataclasses import FrozenInstanceError

from tracklabels import (
    DEFAULT_LABEL_SETTINGS,
    InvalidLabelSettingsError,
    LabelSettings,
)


class TestDefaults:
    """Default settings reproduce the standard label layout."""
    
    def test_default_values(self):
        assert DEFAULT_LABEL_SETTINGS.separator == ", "
        assert DEFAULT_LABEL_SETTINGS.unknown_label == "unknown"
        assert DEFAULT_LABEL_SETTINGS.resolution_tolerance == 15
        assert DEFAULT_LABEL_SETTINGS.surround_bitrate_threshold == 300_000
    
    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_LABEL_SETTINGS.separator = "; "


class TestValidation:
    """Invalid settings fail on construction."""
    
    def test_negative_tolerance(self):
        with pytest.raises(InvalidLabelSettingsError) as exc_info:
            LabelSettings(resolution_tolerance=-1)
        assert exc_info.value.field == "resolution_tolerance"
    
    def test_negative_threshold(self):
        with pytest.raises(InvalidLabelSettingsError):
            LabelSettings(surround_bitrate_threshold=-5)
    
    def test_empty_unknown_label(self):
        with pytest.raises(InvalidLabelSettingsError):
            LabelSettings(unknown_label="")
    
    def test_non_string_separator(self):
        with pytest.raises(InvalidLabelSettingsError):
            LabelSettings(separator=None)
    
    def test_bool_tolerance_rejected(self):
        with pytest.raises(InvalidLabelSettingsError):
            LabelSettings(resolution_tolerance=True)


class TestSerialization:
    """Test dict round trip and key checking."""
    
    def test_to_dict(self):
        assert LabelSettings(separator=" | ").to_dict() == {
            "separator": " | ",
            "unknown_label": "unknown",
            "resolution_tolerance": 15,
            "surround_bitrate_threshold": 300_000,
        }
    
    def test_from_dict_partial(self):
        settings = LabelSettings.from_dict({"unknown_label": "n/a"})
        assert settings.unknown_label == "n/a"
        assert settings.separator == ", "
    
    def test_from_dict_unknown_key(self):
        with pytest.raises(InvalidLabelSettingsError) as exc_info:
            LabelSettings.from_dict({"colour": "red"})
        assert exc_info.value.field == "colour"
