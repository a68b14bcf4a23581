"""
Function config translator.

Maps a user-authored FunctionConfig to the FunctionDetails descriptor
submitted to the runtime, and back. Both directions are purely structural:
they never validate, so an invalid config yields a best-effort descriptor.
"""

import logging
from typing import Optional

from ..config import config as settings
from ..core.inputs import build_input_specs, is_blank
from ..core.subscription import derive_subscription_type, reconstruct_delivery
from ..models import (
    ConsumerConfig,
    FunctionConfig,
    FunctionDetails,
    Resources,
    ResourceSpec,
    RetryDetails,
    Runtime,
    SinkSpec,
    SourceSpec,
)
from .artifacts import FunctionTypes
from .user_config import (
    deserialize_user_config,
    extract_window_config,
    merge_window_config,
    serialize_user_config,
)

logger = logging.getLogger("descriptor.translator")


def to_details(
    function_config: FunctionConfig, type_args: Optional[FunctionTypes] = None
) -> FunctionDetails:
    """
    Convert a function config into a function descriptor.

    Args:
        function_config: config to convert (not modified)
        type_args: resolved input/output type names; only used for JAVA functions

    Returns:
        FunctionDetails
    """
    if function_config.runtime != Runtime.JAVA:
        type_args = None

    # --- Source ---
    input_specs = build_input_specs(function_config)
    if type_args is not None:
        for spec in input_specs.values():
            spec.type_class_name = type_args.input_type

    source = SourceSpec(
        input_specs=input_specs,
        subscription_type=derive_subscription_type(
            function_config.retain_ordering, function_config.processing_guarantees
        ),
        subscription_name=None if is_blank(function_config.sub_name) else function_config.sub_name,
        timeout_ms=function_config.timeout_ms,
        type_class_name=type_args.input_type if type_args else None,
    )

    # --- Sink ---
    sink = SinkSpec(
        topic=function_config.output,
        serde_class_name=_non_blank(function_config.output_serde_class_name),
        schema_type=_non_blank(function_config.output_schema_type),
        type_class_name=type_args.output_type if type_args else None,
    )

    details = FunctionDetails(
        tenant=function_config.tenant,
        namespace=function_config.namespace,
        name=function_config.name,
        log_topic=function_config.log_topic,
        runtime=function_config.runtime,
        processing_guarantees=function_config.processing_guarantees,
        auto_ack=function_config.auto_ack,
        parallelism=function_config.parallelism,
        source=source,
        sink=sink,
    )

    if function_config.max_message_retries >= 0:
        details.retry_details = RetryDetails(
            max_message_retries=function_config.max_message_retries,
            dead_letter_topic=function_config.dead_letter_topic or None,
        )

    # --- Windowing / user config ---
    user_config = merge_window_config(
        function_config.user_config, function_config.window_config, function_config.class_name
    )
    if function_config.window_config is not None:
        details.class_name = settings.WINDOW_FUNCTION_EXECUTOR_CLASS
    else:
        details.class_name = function_config.class_name
    if user_config:
        details.user_config = serialize_user_config(user_config)

    if function_config.resources is not None:
        details.resources = ResourceSpec(**function_config.resources.model_dump())

    logger.debug(
        "Converted function config to details",
        extra={
            "function": function_config.qualified_name,
            "input_count": len(input_specs),
            "subscription_type": source.subscription_type.value,
        },
    )
    return details


def from_details(details: FunctionDetails) -> FunctionConfig:
    """
    Convert a function descriptor back into a function config.

    Inputs always come back as `input_specs`; the descriptor cannot tell which
    of the legacy input forms produced them. Retain-ordering is reconstructed
    from the subscription type; the descriptor's processing guarantee wins
    over the reconstructed one when it is set.
    """
    input_specs = {}
    for topic, spec in details.source.input_specs.items():
        consumer = ConsumerConfig(is_regex_pattern=spec.is_regex_pattern)
        if spec.serde_class_name:
            consumer.serde_class_name = spec.serde_class_name
        if spec.schema_type:
            consumer.schema_type = spec.schema_type
        input_specs[topic] = consumer

    retain_ordering, processing_guarantees = reconstruct_delivery(details.source.subscription_type)
    if details.processing_guarantees is not None:
        processing_guarantees = details.processing_guarantees

    user_config, window_config = extract_window_config(
        deserialize_user_config(details.user_config)
    )
    if window_config is not None:
        class_name = window_config.actual_window_function_class_name
        window_config = window_config.model_copy(
            update={"actual_window_function_class_name": None}
        )
    else:
        class_name = details.class_name

    function_config = FunctionConfig(
        tenant=details.tenant,
        namespace=details.namespace,
        name=details.name,
        class_name=class_name,
        runtime=details.runtime,
        input_specs=input_specs,
        output=details.sink.topic or None,
        output_serde_class_name=details.sink.serde_class_name or None,
        output_schema_type=details.sink.schema_type or None,
        log_topic=details.log_topic or None,
        processing_guarantees=processing_guarantees,
        retain_ordering=retain_ordering,
        sub_name=details.source.subscription_name or None,
        timeout_ms=details.source.timeout_ms or None,
        auto_ack=details.auto_ack,
        parallelism=details.parallelism,
        user_config=user_config,
        window_config=window_config,
    )

    if details.retry_details is not None:
        function_config.max_message_retries = details.retry_details.max_message_retries
        function_config.dead_letter_topic = details.retry_details.dead_letter_topic or None

    if details.resources is not None:
        function_config.resources = Resources(**details.resources.model_dump())

    return function_config


def _non_blank(value: Optional[str]) -> Optional[str]:
    return None if is_blank(value) else value
