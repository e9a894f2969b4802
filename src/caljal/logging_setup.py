import logging
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s  [%(levelname)s]  %(name)s › %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"

_handler: Optional[logging.Handler] = None  # guard against double-initialisation


def setup_logging(*, level: int = logging.WARNING, fmt: str = DEFAULT_FORMAT,
                  datefmt: str = DEFAULT_DATEFMT) -> None:
    """
    Configure the `caljal` logger. Call this from an entry point only;
    library modules just use `logging.getLogger(__name__)`.

    Repeated calls only change the level.
    """
    global _handler
    logger = logging.getLogger("caljal")
    logger.setLevel(level)
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=datefmt))
        logger.addHandler(_handler)
    _handler.setLevel(level)
