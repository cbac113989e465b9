"""Logging configuration for the command-line entry point."""

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def configure_logging(level: str = "WARNING") -> None:
    """Configure root logging once for a CLI run.

    Logs go to stderr so they never mix with report output.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )
