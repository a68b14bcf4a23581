"""
Function details models.

Canonical descriptor submitted to the function runtime.
"""

from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, Field

from .function_config import ProcessingGuarantees, Runtime


class SubscriptionType(str, Enum):
    SHARED = "SHARED"
    FAILOVER = "FAILOVER"


class ConsumerSpec(BaseModel):
    serde_class_name: Optional[str] = None
    schema_type: Optional[str] = None
    is_regex_pattern: bool = False
    type_class_name: Optional[str] = None


class SourceSpec(BaseModel):
    input_specs: Dict[str, ConsumerSpec] = Field(default_factory=dict)
    subscription_type: SubscriptionType = SubscriptionType.SHARED
    subscription_name: Optional[str] = None
    timeout_ms: Optional[int] = None
    type_class_name: Optional[str] = None


class SinkSpec(BaseModel):
    topic: Optional[str] = None
    serde_class_name: Optional[str] = None
    schema_type: Optional[str] = None
    type_class_name: Optional[str] = None


class RetryDetails(BaseModel):
    max_message_retries: int = 0
    dead_letter_topic: Optional[str] = None


class ResourceSpec(BaseModel):
    cpu: Optional[float] = None
    ram: Optional[int] = None
    disk: Optional[int] = None


class FunctionDetails(BaseModel):
    """
    Runtime-facing function descriptor.

    `user_config` is the serialized user config bag; window parameters, if any,
    travel inside it under a reserved key.
    """

    tenant: Optional[str] = None
    namespace: Optional[str] = None
    name: Optional[str] = None
    class_name: Optional[str] = None
    log_topic: Optional[str] = None
    runtime: Optional[Runtime] = None
    processing_guarantees: Optional[ProcessingGuarantees] = None
    auto_ack: bool = False
    parallelism: int = 1
    source: SourceSpec = Field(default_factory=SourceSpec)
    sink: SinkSpec = Field(default_factory=SinkSpec)
    retry_details: Optional[RetryDetails] = None
    resources: Optional[ResourceSpec] = None
    user_config: Optional[str] = None
