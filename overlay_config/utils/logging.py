import logging
from pathlib import Path
from typing import List, Optional

PACKAGE_LOGGER = "overlay_config"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# handlers installed by configure_logging, replaced on the next call
_installed: List[logging.Handler] = []


def configure_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    propagate: bool = True,
) -> logging.Logger:
    """
    Show the loader's discovery messages without touching the root logger.

    Attaches a stream handler (and a file handler when *log_file* is given)
    to the ``overlay_config`` logger and sets its level. Calling it again
    replaces the handlers from the previous call.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in _installed:
        package_logger.removeHandler(handler)
        handler.close()
    _installed.clear()

    formatter = logging.Formatter(LOG_FORMAT)
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
        _installed.append(handler)

    package_logger.setLevel(level)
    package_logger.propagate = propagate
    return package_logger


def get_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
    """
    Get a logger under the ``overlay_config`` namespace.

    Names that are not already inside the namespace are nested below it, so
    ``get_logger("loader")`` returns ``overlay_config.loader``.
    """
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}" if name else PACKAGE_LOGGER
    return logging.getLogger(name)
