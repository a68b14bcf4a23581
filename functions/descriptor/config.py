"""
Descriptor service configuration definition.

Loads configuration from environment variables and provides a Pydantic model.
Uses pydantic-settings for type safety and defaults.
"""

import os
import sys
import tempfile

from pydantic import Field

from functions.common.core.config import BaseAppConfig

_DEFAULT_LOG_CONFIG = os.path.join(os.path.dirname(__file__), "logging.yml")


class DescriptorConfig(BaseAppConfig):
    """
    Configuration management for function config translation and validation.
    """

    # Windowing
    WINDOW_FUNCTION_EXECUTOR_CLASS: str = Field(
        default="org.apache.pulsar.functions.windowing.WindowFunctionExecutor",
        description="Class name that runs windowed functions on behalf of the user class",
    )

    # Artifact loading
    ARTIFACT_DOWNLOAD_DIR: str = Field(
        default=tempfile.gettempdir(), description="Directory for downloaded function packages"
    )
    ARTIFACT_DOWNLOAD_TIMEOUT: float = Field(
        default=30.0, description="Function package download timeout (seconds)"
    )

    # Logging
    LOG_CONFIG_PATH: str = Field(
        default=_DEFAULT_LOG_CONFIG, description="Logging dictConfig YAML path"
    )


# Load config as a singleton.
# pydantic-settings reads environment variables during instantiation.
try:
    config = DescriptorConfig()
except Exception as e:
    sys.stderr.write(f"Failed to load configuration: {e}\n")
    raise
