"""
Input topic collection.

A function config can declare its inputs as plain topics, a topic pattern,
custom serde and schema maps, or full consumer specs. The helpers here
flatten those declarations into one topic list and one topic -> consumer
spec map.
"""

from typing import Dict, List

from ..models import ConsumerSpec, FunctionConfig


def collect_input_topics(config: FunctionConfig) -> List[str]:
    """
    Return every topic referenced as an input, in declaration order.

    The topic pattern counts as a single entry. Duplicates are kept.
    """
    topics: List[str] = []
    if config.inputs:
        topics.extend(config.inputs)
    if config.topics_pattern:
        topics.append(config.topics_pattern)
    if config.custom_serde_inputs:
        topics.extend(config.custom_serde_inputs.keys())
    if config.custom_schema_inputs:
        topics.extend(config.custom_schema_inputs.keys())
    if config.input_specs:
        topics.extend(config.input_specs.keys())
    return topics


def build_input_specs(config: FunctionConfig) -> Dict[str, ConsumerSpec]:
    """
    Build the topic -> consumer spec map of the descriptor source.

    Later declarations replace earlier ones for the same topic. No conflict
    checks happen here; validation rejects specs with both a schema type and
    a serde class.
    """
    specs: Dict[str, ConsumerSpec] = {}

    for topic in config.inputs or []:
        specs[topic] = ConsumerSpec(is_regex_pattern=False)

    if config.topics_pattern:
        specs[config.topics_pattern] = ConsumerSpec(is_regex_pattern=True)

    for topic, serde_class_name in (config.custom_serde_inputs or {}).items():
        specs[topic] = ConsumerSpec(serde_class_name=serde_class_name, is_regex_pattern=False)

    for topic, schema_type in (config.custom_schema_inputs or {}).items():
        specs[topic] = ConsumerSpec(schema_type=schema_type, is_regex_pattern=False)

    for topic, consumer in (config.input_specs or {}).items():
        spec = ConsumerSpec(is_regex_pattern=consumer.is_regex_pattern)
        # Schema type wins over serde class when both are given.
        if not is_blank(consumer.schema_type):
            spec.schema_type = consumer.schema_type
        elif not is_blank(consumer.serde_class_name):
            spec.serde_class_name = consumer.serde_class_name
        specs[topic] = spec

    return specs


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()
