import pytest

from functions.descriptor.core.exceptions import InvalidConfigurationError
from functions.descriptor.models import Resources, WindowConfig
from functions.descriptor.services.resources import validate_resources
from functions.descriptor.services.window import validate_window_config


class TestValidateWindowConfig:
    @pytest.mark.parametrize(
        "window",
        [
            WindowConfig(window_length_count=10),
            WindowConfig(window_length_duration_ms=1000, sliding_interval_duration_ms=500),
            WindowConfig(
                window_length_count=10,
                timestamp_extractor_class_name="com.x.Ts",
                max_lag_ms=0,
                watermark_emit_interval_ms=100,
            ),
        ],
    )
    def test_valid_windows(self, window):
        validate_window_config(window)

    @pytest.mark.parametrize(
        ("window", "message"),
        [
            (WindowConfig(), "Window length is not specified"),
            (
                WindowConfig(window_length_count=1, window_length_duration_ms=1),
                "Please set one or the other",
            ),
            (WindowConfig(window_length_count=0), r"Window length must be positive \[0\]"),
            (WindowConfig(window_length_duration_ms=-5), "Window length must be positive"),
            (
                WindowConfig(window_length_count=1, sliding_interval_count=0),
                "Sliding interval must be positive",
            ),
            (
                WindowConfig(window_length_count=1, sliding_interval_duration_ms=0),
                "Sliding interval must be positive",
            ),
            (
                WindowConfig(
                    window_length_count=1,
                    timestamp_extractor_class_name="com.x.Ts",
                    max_lag_ms=-1,
                ),
                "Lag duration must be positive",
            ),
            (
                WindowConfig(
                    window_length_count=1,
                    timestamp_extractor_class_name="com.x.Ts",
                    watermark_emit_interval_ms=0,
                ),
                "Watermark interval must be positive",
            ),
        ],
    )
    def test_invalid_windows(self, window, message):
        with pytest.raises(InvalidConfigurationError, match=message):
            validate_window_config(window)

    def test_lag_ignored_without_timestamp_extractor(self):
        validate_window_config(WindowConfig(window_length_count=1, max_lag_ms=-1))


class TestValidateResources:
    def test_valid_resources(self):
        validate_resources(Resources(cpu=0.5, ram=1024, disk=2048))

    def test_unset_resources_are_valid(self):
        validate_resources(Resources())

    @pytest.mark.parametrize(
        ("resources", "field"),
        [
            (Resources(cpu=0), "resources.cpu"),
            (Resources(ram=-1), "resources.ram"),
            (Resources(disk=0), "resources.disk"),
        ],
    )
    def test_non_positive_rejected(self, resources, field):
        with pytest.raises(InvalidConfigurationError) as exc_info:
            validate_resources(resources)

        assert exc_info.value.field == field
