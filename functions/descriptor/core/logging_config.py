import logging

from functions.common.core.logging_config import setup_logging as common_setup_logging

from ..config import config


def setup_logging(config_path: str | None = None):
    """
    Load the YAML config and initialize logging for the descriptor service.

    LOG_LEVEL from the settings (including `.env`) fills the level placeholder.
    """
    path = config_path or config.LOG_CONFIG_PATH
    common_setup_logging(path, defaults={"LOG_LEVEL": config.LOG_LEVEL})
    logging.getLogger("descriptor").debug("Logging configured from %s", path)
