"""
Root logger configuration.
"""

import logging


def setup_logging(level: str = "INFO") -> None:
    """
    Attach a console handler to the root logger and set its level.

    Does nothing if the root logger already has handlers, so repeated
    calls (tests building several apps, uvicorn's own config) are safe.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logger.addHandler(handler)
