"""
Process bootstrap.

The single place where a configuration failure terminates the process.
"""

import sys

from core.config import Conf, load_config, validate_and_defaults
from core.errors import ConfigError
from core.logging import get_logger


logger = get_logger(__name__)


def load_resolved_config(path: str) -> Conf:
    """
    Load, default and validate the config file.

    Raises:
        ConfigError: on any load, parse or validation failure
    """
    conf = load_config(path)
    validate_and_defaults(conf)
    logger.info(
        "configuration loaded",
        path=conf.src_path,
        listenAddress=conf.listen_address,
        listenPort=conf.listen_port,
        timeZone=conf.time_zone,
    )
    return conf


def bootstrap(path: str) -> Conf:
    """
    Return a fully valid config or exit the process with status 1.

    Usage:
        conf = bootstrap(get_settings().config_path)
    """
    try:
        return load_resolved_config(path)
    except ConfigError as err:
        logger.critical(
            "Cannot start - invalid configuration",
            error=str(err),
            errorType=type(err).__name__,
            path=path,
        )
        sys.exit(1)
