"""Logging helpers shared by the engine and the console front end."""

import logging

LOG_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "WARNING", debug: bool = False) -> None:
    """Call once at program start (the console front end does).

    ``debug`` forces DEBUG whatever ``level`` says.
    """
    level = "DEBUG" if debug else level.upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
