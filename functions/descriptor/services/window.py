from ..core.exceptions import InvalidConfigurationError
from ..models import WindowConfig


def validate_window_config(window_config: WindowConfig) -> None:
    """
    Check windowing parameters.

    A window is sized either by message count or by duration, never both.
    Lag and watermark settings only matter for event-time windows, i.e. when
    a timestamp extractor is configured.
    """
    length_count = window_config.window_length_count
    length_duration = window_config.window_length_duration_ms

    if length_count is None and length_duration is None:
        raise InvalidConfigurationError("Window length is not specified", field="windowConfig")

    if length_count is not None and length_duration is not None:
        raise InvalidConfigurationError(
            "Window length for time and count are set! Please set one or the other.",
            field="windowConfig",
        )

    if length_count is not None and length_count <= 0:
        raise InvalidConfigurationError(
            f"Window length must be positive [{length_count}]",
            field="windowConfig.windowLengthCount",
        )

    if length_duration is not None and length_duration <= 0:
        raise InvalidConfigurationError(
            f"Window length must be positive [{length_duration}]",
            field="windowConfig.windowLengthDurationMs",
        )

    sliding_count = window_config.sliding_interval_count
    if sliding_count is not None and sliding_count <= 0:
        raise InvalidConfigurationError(
            f"Sliding interval must be positive [{sliding_count}]",
            field="windowConfig.slidingIntervalCount",
        )

    sliding_duration = window_config.sliding_interval_duration_ms
    if sliding_duration is not None and sliding_duration <= 0:
        raise InvalidConfigurationError(
            f"Sliding interval must be positive [{sliding_duration}]",
            field="windowConfig.slidingIntervalDurationMs",
        )

    if window_config.timestamp_extractor_class_name is not None:
        max_lag = window_config.max_lag_ms
        if max_lag is not None and max_lag < 0:
            raise InvalidConfigurationError(
                f"Lag duration must be positive [{max_lag}]",
                field="windowConfig.maxLagMs",
            )
        watermark_interval = window_config.watermark_emit_interval_ms
        if watermark_interval is not None and watermark_interval <= 0:
            raise InvalidConfigurationError(
                f"Watermark interval must be positive [{watermark_interval}]",
                field="windowConfig.watermarkEmitIntervalMs",
            )
