"""
Core logic package.

Provides input topic handling, subscription derivation and topic names.
"""

from .exceptions import ArtifactError, FunctionConfigError, InvalidConfigurationError
from .inputs import build_input_specs, collect_input_topics
from .subscription import derive_subscription_type, reconstruct_delivery
from .topic_name import is_valid_topic_name, parse_topic_name

__all__ = [
    "ArtifactError",
    "FunctionConfigError",
    "InvalidConfigurationError",
    "build_input_specs",
    "collect_input_topics",
    "derive_subscription_type",
    "reconstruct_delivery",
    "is_valid_topic_name",
    "parse_topic_name",
]
