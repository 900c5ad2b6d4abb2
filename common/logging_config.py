"""
Logging Configuration.

All modules obtain their loggers through :func:`get_logger` so that the
output format is consistent across the package. The solver itself logs
sparingly: construction and iteration counts at DEBUG, convergence
failures at WARNING just before the corresponding exception is raised.
"""

import logging
import sys
from typing import Union


LOG_FORMAT = '%(asctime)s | %(name)s | %(levelname)s | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
PACKAGE_LOGGERS = ("common", "geospatial")


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown logging level name: {level!r}")
        return resolved
    return level


def get_logger(name: str, level: Union[int, str] = logging.INFO) -> logging.Logger:
    """Get a logger configured for the geodesy package.

    Parameters
    ----------
    name : str
        Logger name (typically __name__).
    level : int or str
        Logging level, either numeric or a level name such as ``"DEBUG"``.

    Returns
    -------
    logging.Logger
        Configured logger instance.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(_resolve_level(level))
    return logger


def set_package_level(level: Union[int, str]) -> None:
    """Set the level of every logger already created under this package.

    Parameters
    ----------
    level : int or str
        Logging level applied to the ``common`` and ``geospatial`` loggers
        and their children.
    """
    resolved = _resolve_level(level)
    for name in PACKAGE_LOGGERS:
        logging.getLogger(name).setLevel(resolved)
        for logger_name, logger in list(logging.root.manager.loggerDict.items()):
            if logger_name.startswith(name + ".") and isinstance(logger, logging.Logger):
                logger.setLevel(resolved)
