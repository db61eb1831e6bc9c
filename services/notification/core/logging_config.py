import os

from services.common.core.logging_config import setup_logging as common_setup_logging


def setup_logging(config_path: str = None):
    """
    Load the YAML config and initialize logging.
    LOG_CONFIG_PATH overrides the configured path.
    """
    if config_path is None:
        from ..config import config

        config_path = os.getenv("LOG_CONFIG_PATH", config.LOG_CONFIG_PATH)
    common_setup_logging(config_path)
