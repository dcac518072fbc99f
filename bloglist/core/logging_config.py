"""
Logging setup for the service.

``setup_logging`` attaches a single console handler to the root logger.
Calling it again is a no-op, so ``create_application`` can run more than
once (tests do this).
"""
import logging


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger once

    Args:
        level: Logging level name (e.g. "DEBUG", "INFO"), case insensitive
    """
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return

    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(handler)
