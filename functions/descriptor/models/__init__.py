"""
Data model definitions package.

Aggregates Pydantic models for use in other modules.
"""

from .function_config import (
    ConsumerConfig,
    FunctionConfig,
    ProcessingGuarantees,
    Resources,
    Runtime,
    WindowConfig,
)
from .function_details import (
    ConsumerSpec,
    FunctionDetails,
    ResourceSpec,
    RetryDetails,
    SinkSpec,
    SourceSpec,
    SubscriptionType,
)

__all__ = [
    "ConsumerConfig",
    "FunctionConfig",
    "ProcessingGuarantees",
    "Resources",
    "Runtime",
    "WindowConfig",
    "ConsumerSpec",
    "FunctionDetails",
    "ResourceSpec",
    "RetryDetails",
    "SinkSpec",
    "SourceSpec",
    "SubscriptionType",
]
