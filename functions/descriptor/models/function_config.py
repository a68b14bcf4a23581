"""
Function config models.

Defines the user-facing description of a stream-processing function as
Pydantic models. Field names follow Python conventions; function config files
use the camelCase aliases (`className`, `customSerdeInputs`, ...).
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Runtime(str, Enum):
    JAVA = "JAVA"
    PYTHON = "PYTHON"
    GO = "GO"


class ProcessingGuarantees(str, Enum):
    AT_LEAST_ONCE = "ATLEAST_ONCE"
    AT_MOST_ONCE = "ATMOST_ONCE"
    EFFECTIVELY_ONCE = "EFFECTIVELY_ONCE"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ConsumerConfig(_CamelModel):
    """Per-input-topic consumer settings."""

    schema_type: Optional[str] = None
    serde_class_name: Optional[str] = None
    is_regex_pattern: bool = Field(default=False, alias="regexPattern")


class Resources(_CamelModel):
    """Resources requested for each function instance."""

    cpu: Optional[float] = None
    ram: Optional[int] = None
    disk: Optional[int] = None


class WindowConfig(_CamelModel):
    """
    Windowing parameters.

    `actual_window_function_class_name` refers back to the user class that the
    window executor wraps; it is filled in when the config is translated.
    """

    window_length_count: Optional[int] = None
    window_length_duration_ms: Optional[int] = None
    sliding_interval_count: Optional[int] = None
    sliding_interval_duration_ms: Optional[int] = None
    late_data_topic: Optional[str] = None
    max_lag_ms: Optional[int] = None
    watermark_emit_interval_ms: Optional[int] = None
    timestamp_extractor_class_name: Optional[str] = None
    actual_window_function_class_name: Optional[str] = None


class FunctionConfig(_CamelModel):
    """
    User-authored function config.

    Inputs can be declared five ways (plain topics, a topic pattern, custom
    serde map, custom schema map and full consumer specs); they are reconciled
    into a single topic -> consumer spec map on translation.
    """

    # identity
    tenant: Optional[str] = None
    namespace: Optional[str] = None
    name: Optional[str] = None
    class_name: Optional[str] = None
    runtime: Optional[Runtime] = None

    # inputs
    inputs: List[str] = Field(default_factory=list)
    topics_pattern: Optional[str] = None
    custom_serde_inputs: Dict[str, str] = Field(default_factory=dict)
    custom_schema_inputs: Dict[str, str] = Field(default_factory=dict)
    input_specs: Dict[str, ConsumerConfig] = Field(default_factory=dict)

    # outputs
    output: Optional[str] = None
    output_serde_class_name: Optional[str] = None
    output_schema_type: Optional[str] = None
    log_topic: Optional[str] = None

    # delivery
    processing_guarantees: Optional[ProcessingGuarantees] = ProcessingGuarantees.AT_LEAST_ONCE
    retain_ordering: bool = False
    sub_name: Optional[str] = None
    timeout_ms: Optional[int] = None
    auto_ack: bool = False

    # failure handling
    max_message_retries: int = -1
    dead_letter_topic: Optional[str] = None

    # execution
    parallelism: int = 1
    resources: Optional[Resources] = None
    jar: Optional[str] = None
    py: Optional[str] = None
    go: Optional[str] = None

    user_config: Dict[str, Any] = Field(default_factory=dict)
    window_config: Optional[WindowConfig] = None

    @property
    def qualified_name(self) -> str:
        return f"{self.tenant}/{self.namespace}/{self.name}"
