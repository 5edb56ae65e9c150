"""
Logging configuration for the API process.

``setup_logging`` attaches a console handler to the root logger the
first time it is called; later calls only adjust the level.
"""

import logging


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger with a console handler."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if root.handlers:
        return

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)
