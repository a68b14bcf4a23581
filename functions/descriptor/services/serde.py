"""
Default serde and schema checks.

Class presence is checked against the classes packaged with the function;
builtin serdes and schema types are always accepted. Compatibility with the
function's type arguments needs a JVM and is left to the runtime.
"""

from typing import Optional

from ..core.exceptions import InvalidConfigurationError
from .artifacts import ArtifactHandle

BUILTIN_SERDE_CLASSES = frozenset(
    {
        "org.apache.pulsar.functions.api.utils.DefaultSerDe",
        "org.apache.pulsar.functions.api.utils.JavaSerDe",
    }
)

BUILTIN_SCHEMA_TYPES = frozenset(
    {
        "AVRO",
        "JSON",
        "PROTOBUF",
        "PROTOBUF_NATIVE",
        "KEY_VALUE",
        "STRING",
        "BYTES",
        "BOOLEAN",
        "INT8",
        "INT16",
        "INT32",
        "INT64",
        "FLOAT",
        "DOUBLE",
        "DATE",
        "TIME",
        "TIMESTAMP",
        "AUTO_CONSUME",
    }
)


def validate_serde_class(
    serde_class_name: str,
    expected_type: str,
    artifact: Optional[ArtifactHandle],
    is_input: bool,
) -> None:
    if serde_class_name in BUILTIN_SERDE_CLASSES:
        return
    if artifact is None or not artifact.has_class(serde_class_name):
        direction = "input" if is_input else "output"
        raise InvalidConfigurationError(
            f"The SerDe class {serde_class_name} for {direction} type {expected_type} "
            "does not exist in the function package",
            field="customSerdeInputs" if is_input else "outputSerdeClassName",
        )


def validate_schema_type(
    schema_type: str,
    expected_type: str,
    artifact: Optional[ArtifactHandle],
    is_input: bool,
) -> None:
    if schema_type.upper() in BUILTIN_SCHEMA_TYPES:
        return
    if artifact is None or not artifact.has_class(schema_type):
        direction = "input" if is_input else "output"
        raise InvalidConfigurationError(
            f"The Schema class {schema_type} for {direction} type {expected_type} "
            "does not exist in the function package",
            field="customSchemaInputs" if is_input else "outputSchemaType",
        )
