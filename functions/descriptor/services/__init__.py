"""
Services package.

Provides translation, validation and function package loading.
"""

from .artifacts import ArchiveArtifactLoader, ArtifactHandle, FunctionTypes
from .config_loader import load_function_config
from .translator import from_details, to_details
from .validation import FunctionConfigValidator, validate

__all__ = [
    "ArchiveArtifactLoader",
    "ArtifactHandle",
    "FunctionTypes",
    "load_function_config",
    "from_details",
    "to_details",
    "FunctionConfigValidator",
    "validate",
]
