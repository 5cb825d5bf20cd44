import logging
import os
import sys


def setup_logger(level: int = logging.INFO, name: str = "raster_toolkit") -> logging.Logger:
    """Create or update the project logger.

    - Respects the RASTER_TOOLKIT_LOG_LEVEL env override on every call.
    - Ensures there is exactly one StreamHandler on the base logger, pointed at
      the current sys.stderr, and updates its formatter instead of adding
      another handler.
    """
    logger = logging.getLogger(name)

    env_level = (os.getenv("RASTER_TOOLKIT_LOG_LEVEL") or "").strip().lower()
    if env_level:
        level = parse_level(env_level, level)
    logger.setLevel(level)

    stream_handler: logging.StreamHandler | None = None
    for h in list(logger.handlers):
        if isinstance(h, logging.StreamHandler):
            stream_handler = h

    if stream_handler is None:
        stream_handler = logging.StreamHandler(stream=sys.stderr)
        logger.addHandler(stream_handler)
    elif stream_handler.stream is not sys.stderr:
        # stderr may have been swapped (test capture, redirection)
        stream_handler.setStream(sys.stderr)

    fmt = logging.Formatter(
        fmt="[%(asctime)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    stream_handler.setFormatter(fmt)

    # Do not propagate beyond the project logger
    logger.propagate = False
    return logger


def parse_level(value: str, default: int = logging.INFO) -> int:
    """Map a level name such as 'debug' to its logging constant."""
    level_map = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR,
        "critical": logging.CRITICAL,
    }
    return level_map.get((value or "").strip().lower(), default)


def get_logger(name: str | None = None) -> logging.Logger:
    base = logging.getLogger("raster_toolkit")
    if not base.handlers:
        base = setup_logger()
    return base if not name else base.getChild(name)
