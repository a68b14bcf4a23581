"""
Function config validation.

Runs three gates in order and stops at the first violation:

1. common checks that apply to every runtime,
2. runtime-specific checks, looked up in a per-runtime table,
3. for JAVA, resolution of the function package, which is then used to check
   serde and schema classes against the function's type arguments.

Every rule violation raises InvalidConfigurationError; package loading and
type resolution problems raise ArtifactError. Collaborators (topic grammar,
package loading, type resolution, serde/schema/window/resource checks) are
injected so they can be replaced.
"""

import logging
from pathlib import Path
from typing import Callable, Dict, Optional, Union

from pydantic.alias_generators import to_camel

from ..core.exceptions import ArtifactError, FunctionConfigError, InvalidConfigurationError
from ..core.inputs import collect_input_topics, is_blank
from ..core.topic_name import is_valid_topic_name
from ..models import FunctionConfig, ProcessingGuarantees, Resources, Runtime, WindowConfig
from .artifacts import (
    ArchiveArtifactLoader,
    ArtifactHandle,
    ArtifactLoader,
    FunctionTypeResolver,
    FunctionTypes,
    is_builtin,
    is_package_url_supported,
)
from .resources import validate_resources
from .serde import validate_schema_type, validate_serde_class
from .window import validate_window_config

logger = logging.getLogger("descriptor.validation")

TopicNameValidator = Callable[[str], bool]
ClassValidator = Callable[[str, str, Optional[ArtifactHandle], bool], None]
WindowValidator = Callable[[WindowConfig], None]
ResourceValidator = Callable[[Resources], None]
RuntimeChecks = Callable[
    [FunctionConfig, Optional[str], Optional[Path]], Optional[ArtifactHandle]
]

# (config field, label used in messages)
_PACKAGE_FIELDS = (("jar", "jar"), ("py", "python"), ("go", "go"))


class FunctionConfigValidator:
    """
    Validates function configs before they are translated and submitted.

    Args:
        topic_name_validator: topic grammar check
        artifact_loader: opens JAVA function packages
        type_resolver: resolves the input/output types of a JAVA function;
            required to validate JAVA functions
        serde_validator: checks a serde class against an expected type
        schema_validator: checks a schema type against an expected type
        window_validator: checks windowing parameters
        resource_validator: checks resource limits
    """

    def __init__(
        self,
        *,
        topic_name_validator: TopicNameValidator = is_valid_topic_name,
        artifact_loader: Optional[ArtifactLoader] = None,
        type_resolver: Optional[FunctionTypeResolver] = None,
        serde_validator: ClassValidator = validate_serde_class,
        schema_validator: ClassValidator = validate_schema_type,
        window_validator: WindowValidator = validate_window_config,
        resource_validator: ResourceValidator = validate_resources,
    ):
        self.topic_name_validator = topic_name_validator
        self.artifact_loader = artifact_loader or ArchiveArtifactLoader()
        self.type_resolver = type_resolver
        self.serde_validator = serde_validator
        self.schema_validator = schema_validator
        self.window_validator = window_validator
        self.resource_validator = resource_validator

        self._runtime_checks: Dict[Runtime, RuntimeChecks] = {
            Runtime.JAVA: self._do_java_checks,
            Runtime.PYTHON: self._do_restricted_checks,
            Runtime.GO: self._do_restricted_checks,
        }

    def validate(
        self,
        function_config: FunctionConfig,
        package_url: Optional[str] = None,
        uploaded_file: Optional[Union[str, Path]] = None,
    ) -> Optional[ArtifactHandle]:
        """
        Validate a function config.

        Args:
            function_config: config to check
            package_url: explicit function package URL (JAVA)
            uploaded_file: function package already uploaded to local disk (JAVA)

        Returns:
            The loaded function package for JAVA functions, otherwise None.

        Raises:
            InvalidConfigurationError: a validation rule is violated
            ArtifactError: the function package cannot be loaded or introspected
        """
        function = function_config.qualified_name
        try:
            self._do_common_checks(function_config)
            runtime_checks = self._runtime_checks[function_config.runtime]
            artifact = runtime_checks(
                function_config,
                package_url,
                Path(uploaded_file) if uploaded_file is not None else None,
            )
        except FunctionConfigError as e:
            logger.info(
                f"Function config rejected: {e}",
                extra={
                    "function": function,
                    "error_type": type(e).__name__,
                    "field": getattr(e, "field", None),
                },
            )
            raise

        logger.info(
            "Function config validated",
            extra={"function": function, "runtime": function_config.runtime.value},
        )
        return artifact

    # ===========================================
    # Common checks
    # ===========================================

    def _do_common_checks(self, function_config: FunctionConfig) -> None:
        for field, label in (
            ("tenant", "tenant"),
            ("namespace", "namespace"),
            ("name", "name"),
            ("class_name", "classname"),
        ):
            if is_blank(getattr(function_config, field)):
                raise InvalidConfigurationError(
                    f"Function {label} cannot be null", field=to_camel(field)
                )
        if function_config.runtime is None:
            raise InvalidConfigurationError("Function runtime cannot be null", field="runtime")

        input_topics = collect_input_topics(function_config)
        if not input_topics:
            raise InvalidConfigurationError(
                "No input topic(s) specified for the function", field="inputs"
            )
        for topic in input_topics:
            if not self.topic_name_validator(topic):
                raise InvalidConfigurationError(f"Input topic {topic} is invalid", field="inputs")

        for field, label in (
            ("output", "Output"),
            ("log_topic", "Log"),
            ("dead_letter_topic", "Dead letter"),
        ):
            topic = getattr(function_config, field)
            if topic and not self.topic_name_validator(topic):
                raise InvalidConfigurationError(
                    f"{label} topic {topic} is invalid", field=to_camel(field)
                )

        if function_config.parallelism <= 0:
            raise InvalidConfigurationError(
                "Function parallelism should be a positive number", field="parallelism"
            )

        output = function_config.output
        if output and output in input_topics:
            raise InvalidConfigurationError(
                f"Output topic {output} is also being used as an input topic "
                "(topics must be one or the other)",
                field="output",
            )

        if function_config.window_config is not None:
            # The window executor acks messages itself.
            if function_config.auto_ack:
                raise InvalidConfigurationError(
                    "Cannot enable auto ack when using windowing functionality",
                    field="autoAck",
                )
            self.window_validator(function_config.window_config)

        if function_config.resources is not None:
            self.resource_validator(function_config.resources)

        self._check_delivery(function_config)

        for field, label in _PACKAGE_FIELDS:
            locator = getattr(function_config, field)
            if is_blank(locator) or is_builtin(locator) or is_package_url_supported(locator):
                continue
            if not Path(locator).exists():
                raise InvalidConfigurationError(
                    f"The supplied {label} file does not exist", field=to_camel(field)
                )

    @staticmethod
    def _check_delivery(function_config: FunctionConfig) -> None:
        guarantee = function_config.processing_guarantees
        timeout_ms = function_config.timeout_ms

        if timeout_ms is not None and timeout_ms <= 0:
            raise InvalidConfigurationError(
                "Function timeout must be a positive number", field="timeoutMs"
            )
        if (
            timeout_ms is not None
            and guarantee is not None
            and guarantee != ProcessingGuarantees.AT_LEAST_ONCE
        ):
            raise InvalidConfigurationError(
                "Message timeout can only be specified with processing guarantee "
                f"{ProcessingGuarantees.AT_LEAST_ONCE.value}",
                field="timeoutMs",
            )

        retries = function_config.max_message_retries
        if retries >= 0 and guarantee == ProcessingGuarantees.EFFECTIVELY_ONCE:
            raise InvalidConfigurationError(
                "Message retries cannot be combined with effectively-once processing",
                field="maxMessageRetries",
            )
        if retries < 0 and function_config.dead_letter_topic:
            raise InvalidConfigurationError(
                "Dead letter topic specified, however max retries is set to infinity",
                field="deadLetterTopic",
            )

    # ===========================================
    # Runtime-specific checks
    # ===========================================

    def _do_java_checks(
        self,
        function_config: FunctionConfig,
        package_url: Optional[str],
        uploaded_file: Optional[Path],
    ) -> ArtifactHandle:
        artifact = self._resolve_artifact(function_config, package_url, uploaded_file)
        type_args = self._resolve_types(function_config, artifact)
        input_type = type_args.input_type

        # Plain inputs use the default schema; nothing to check for them.
        for serde_class_name in function_config.custom_serde_inputs.values():
            self.serde_validator(serde_class_name, input_type, artifact, True)

        for schema_type in function_config.custom_schema_inputs.values():
            self.schema_validator(schema_type, input_type, artifact, True)

        for topic, consumer in function_config.input_specs.items():
            has_schema = not is_blank(consumer.schema_type)
            has_serde = not is_blank(consumer.serde_class_name)
            if has_schema and has_serde:
                raise InvalidConfigurationError(
                    f"Only one of schemaType or serdeClassName should be set in inputSpec "
                    f"for topic {topic}",
                    field="inputSpecs",
                )
            if has_serde:
                self.serde_validator(consumer.serde_class_name, input_type, artifact, True)
            if has_schema:
                self.schema_validator(consumer.schema_type, input_type, artifact, True)

        if not type_args.has_output:
            return artifact

        output_type = type_args.output_type
        output_serde = function_config.output_serde_class_name
        output_schema = function_config.output_schema_type
        if not is_blank(output_serde) and not is_blank(output_schema):
            raise InvalidConfigurationError(
                "Only one of outputSchemaType or outputSerdeClassName should be set",
                field="output",
            )
        if not is_blank(output_schema):
            self.schema_validator(output_schema, output_type, artifact, False)
        if not is_blank(output_serde):
            self.serde_validator(output_serde, output_type, artifact, False)

        return artifact

    def _do_restricted_checks(
        self,
        function_config: FunctionConfig,
        package_url: Optional[str],
        uploaded_file: Optional[Path],
    ) -> None:
        """Reject capabilities that runtimes without type introspection do not support."""
        runtime = function_config.runtime.value.capitalize()

        if function_config.processing_guarantees == ProcessingGuarantees.EFFECTIVELY_ONCE:
            raise InvalidConfigurationError(
                f"Effectively-once processing guarantees not yet supported in {runtime}",
                field="processingGuarantees",
            )
        if function_config.window_config is not None:
            raise InvalidConfigurationError(
                f"There is currently no support for windowing in {runtime}",
                field="windowConfig",
            )
        if function_config.max_message_retries >= 0:
            raise InvalidConfigurationError(
                f"Message retries not yet supported in {runtime}", field="maxMessageRetries"
            )
        return None

    # ===========================================
    # Function package resolution (JAVA)
    # ===========================================

    def _resolve_artifact(
        self,
        function_config: FunctionConfig,
        package_url: Optional[str],
        uploaded_file: Optional[Path],
    ) -> ArtifactHandle:
        if not is_blank(package_url):
            return self.artifact_loader.load(package_url)

        if uploaded_file is not None:
            return self.artifact_loader.load_file(uploaded_file)

        jar = function_config.jar
        if not is_blank(jar):
            if not is_package_url_supported(jar) and not Path(jar).exists():
                raise InvalidConfigurationError("Jar file does not exist", field="jar")
            return self.artifact_loader.load(jar)

        raise InvalidConfigurationError("Function package is not provided", field="jar")

    def _resolve_types(
        self, function_config: FunctionConfig, artifact: ArtifactHandle
    ) -> FunctionTypes:
        if self.type_resolver is None:
            raise ArtifactError(
                artifact.locator, "Unable to resolve function types: no type resolver configured"
            )
        return self.type_resolver.resolve(function_config, artifact)


def validate(
    function_config: FunctionConfig,
    package_url: Optional[str] = None,
    uploaded_file: Optional[Union[str, Path]] = None,
    type_resolver: Optional[FunctionTypeResolver] = None,
    artifact_loader: Optional[ArtifactLoader] = None,
) -> Optional[ArtifactHandle]:
    """
    Validate with the default collaborators.

    JAVA functions need a `type_resolver`; PYTHON and GO functions do not.
    """
    validator = FunctionConfigValidator(
        artifact_loader=artifact_loader, type_resolver=type_resolver
    )
    return validator.validate(function_config, package_url, uploaded_file)
