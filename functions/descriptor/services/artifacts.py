"""
Function package loading.

Opens the archive (jar/nar/zip) that implements a function so that its
classes can be inspected during validation. Remote packages are downloaded
first. The resulting ArtifactHandle is handed back to the caller for reuse.
"""

import logging
import os
import uuid
import zipfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, Optional, Protocol
from urllib.parse import unquote, urlparse

import httpx

from functions.common.core.http_client import HttpClientFactory

from ..config import DescriptorConfig, config
from ..core.exceptions import ArtifactError
from ..models import FunctionConfig

logger = logging.getLogger("descriptor.artifacts")

BUILTIN_PREFIX = "builtin://"
FUNCTION_PREFIX = "function://"
FILE_PREFIX = "file:"
HTTP_PREFIXES = ("http://", "https://")

# Output type of functions that never publish a result.
VOID_TYPE = "java.lang.Void"


def is_package_url_supported(locator: str | None) -> bool:
    if not locator:
        return False
    return locator.startswith(HTTP_PREFIXES) or locator.startswith((FILE_PREFIX, FUNCTION_PREFIX))


def is_builtin(locator: str | None) -> bool:
    return bool(locator) and locator.startswith(BUILTIN_PREFIX)


@dataclass(frozen=True)
class ArtifactHandle:
    """A loaded function package and the classes it contains."""

    locator: str
    path: Path
    class_names: FrozenSet[str] = field(default_factory=frozenset)

    def has_class(self, class_name: str) -> bool:
        return class_name in self.class_names


@dataclass(frozen=True)
class FunctionTypes:
    """Resolved input/output type names of a function."""

    input_type: str
    output_type: str

    @property
    def has_output(self) -> bool:
        return self.output_type != VOID_TYPE


class ArtifactLoader(Protocol):
    def load(self, locator: str) -> ArtifactHandle: ...

    def load_file(self, path: Path, locator: Optional[str] = None) -> ArtifactHandle: ...


class FunctionTypeResolver(Protocol):
    def resolve(self, function_config: FunctionConfig, artifact: ArtifactHandle) -> FunctionTypes: ...


class ArchiveArtifactLoader:
    """
    Loads function packages from local paths, `file:` URLs and http(s) URLs.

    Args:
        settings: service settings (download directory and timeout)
        http_client_factory: factory for the download client
    """

    def __init__(
        self,
        settings: DescriptorConfig = config,
        http_client_factory: HttpClientFactory | None = None,
    ):
        self.settings = settings
        self.http_client_factory = http_client_factory or HttpClientFactory(settings)

    def load(self, locator: str) -> ArtifactHandle:
        if locator.startswith(HTTP_PREFIXES):
            path = self._download(locator)
            try:
                return self.load_file(path, locator)
            except ArtifactError:
                path.unlink(missing_ok=True)
                raise
        elif locator.startswith(FILE_PREFIX):
            path = Path(unquote(urlparse(locator).path))
        elif locator.startswith((FUNCTION_PREFIX, BUILTIN_PREFIX)):
            raise ArtifactError(locator, "Package locator cannot be opened as an archive")
        else:
            path = Path(locator)
        return self.load_file(path, locator)

    def load_file(self, path: Path, locator: Optional[str] = None) -> ArtifactHandle:
        locator = locator or str(path)
        if not path.is_file():
            raise ArtifactError(locator, "Function package does not exist")

        try:
            with zipfile.ZipFile(path) as archive:
                names = archive.namelist()
        except (zipfile.BadZipFile, OSError) as e:
            raise ArtifactError(locator, "Corrupted function package", e) from e

        class_names = frozenset(
            name[: -len(".class")].replace("/", ".")
            for name in names
            if name.endswith(".class") and not name.endswith("module-info.class")
        )
        logger.info(
            "Loaded function package",
            extra={"locator": locator, "class_count": len(class_names)},
        )
        return ArtifactHandle(locator=locator, path=path, class_names=class_names)

    def _download(self, url: str) -> Path:
        file_name = os.path.basename(urlparse(url).path) or "function-package"
        target = Path(self.settings.ARTIFACT_DOWNLOAD_DIR) / f"{uuid.uuid4().hex}-{file_name}"
        logger.debug("Downloading function package %s to %s", url, target)

        try:
            with self.http_client_factory.create_sync_client(
                timeout=self.settings.ARTIFACT_DOWNLOAD_TIMEOUT
            ) as client:
                response = client.get(url)
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise ArtifactError(url, "Failed to download function package", e) from e

        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(response.content)
        return target
