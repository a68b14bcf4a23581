"""
Function config file loader.

Loads a function config from a YAML or JSON file (camelCase keys).
Environment variables written as ${VAR} are substituted before parsing.
"""

import logging
import os
import string
from pathlib import Path
from typing import Union

import yaml
from pydantic import ValidationError

from ..core.exceptions import InvalidConfigurationError
from ..models import FunctionConfig

logger = logging.getLogger("descriptor.config_loader")


def load_function_config(path: Union[str, Path]) -> FunctionConfig:
    """
    Load a function config file.

    JSON is a subset of YAML, so one parser handles both formats.

    Args:
        path: config file path

    Returns:
        FunctionConfig

    Raises:
        FileNotFoundError: the file does not exist
        InvalidConfigurationError: the content is not a valid function config
    """
    with open(path, "r", encoding="utf-8") as f:
        template = string.Template(f.read())

    content = template.safe_substitute(os.environ)

    try:
        data = yaml.safe_load(content) or {}
    except yaml.YAMLError as e:
        raise InvalidConfigurationError(f"Error parsing function config {path}: {e}") from e

    if not isinstance(data, dict):
        raise InvalidConfigurationError(
            f"Function config root must be a mapping, got: {type(data).__name__}"
        )

    try:
        function_config = FunctionConfig.model_validate(data)
    except ValidationError as e:
        raise InvalidConfigurationError(f"Invalid function config {path}: {e}") from e

    logger.info(f"Loaded function config {function_config.qualified_name} from {path}")
    return function_config
