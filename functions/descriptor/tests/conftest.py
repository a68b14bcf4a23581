from pathlib import Path

import pytest

from functions.descriptor.core.exceptions import ArtifactError
from functions.descriptor.models import FunctionConfig, ProcessingGuarantees, Runtime
from functions.descriptor.services.artifacts import ArtifactHandle, FunctionTypes

INPUT_TOPIC = "persistent://t/ns/in"
OUTPUT_TOPIC = "persistent://t/ns/out"


class FakeArtifactLoader:
    """Artifact loader that records calls and returns a canned handle."""

    def __init__(self, class_names=(), error: Exception | None = None):
        self.class_names = frozenset(class_names)
        self.error = error
        self.loaded: list[str] = []

    def load(self, locator: str) -> ArtifactHandle:
        self.loaded.append(locator)
        if self.error:
            raise self.error
        return ArtifactHandle(locator=locator, path=Path(locator), class_names=self.class_names)

    def load_file(self, path: Path, locator: str | None = None) -> ArtifactHandle:
        return self.load(locator or str(path))


class CannedTypeResolver:
    """Type resolver returning fixed input/output type names."""

    def __init__(self, input_type="java.lang.String", output_type="java.lang.String"):
        self.types = FunctionTypes(input_type=input_type, output_type=output_type)
        self.calls = 0

    def resolve(self, function_config, artifact) -> FunctionTypes:
        self.calls += 1
        return self.types


class FailingTypeResolver:
    def resolve(self, function_config, artifact) -> FunctionTypes:
        raise ArtifactError(artifact.locator, "Function class not found")


@pytest.fixture
def function_config() -> FunctionConfig:
    return FunctionConfig(
        tenant="t",
        namespace="ns",
        name="f",
        class_name="com.x.F",
        runtime=Runtime.JAVA,
        inputs=[INPUT_TOPIC],
        output=OUTPUT_TOPIC,
        parallelism=1,
        processing_guarantees=ProcessingGuarantees.AT_LEAST_ONCE,
    )


@pytest.fixture
def python_config(function_config) -> FunctionConfig:
    return function_config.model_copy(update={"runtime": Runtime.PYTHON, "class_name": "f.F"})


@pytest.fixture
def artifact_loader() -> FakeArtifactLoader:
    return FakeArtifactLoader(class_names={"com.x.F", "com.x.MySerDe", "com.x.MySchema"})


@pytest.fixture
def type_resolver() -> CannedTypeResolver:
    return CannedTypeResolver()


@pytest.fixture
def corrupt_loader() -> FakeArtifactLoader:
    return FakeArtifactLoader(error=ArtifactError("corrupt.jar", "Corrupted function package"))


@pytest.fixture
def failing_resolver() -> FailingTypeResolver:
    return FailingTypeResolver()


@pytest.fixture
def void_output_resolver() -> CannedTypeResolver:
    return CannedTypeResolver(output_type="java.lang.Void")
