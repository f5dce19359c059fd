"""Logging setup."""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s/%(threadName)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d-%H:%M:%S"


def log_level(verbose: bool = False, debug: bool = False) -> int:
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    return logging.WARNING


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Configure the root logger; ``debug`` wins over ``verbose``."""
    logging.basicConfig(
        level=log_level(verbose, debug),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        force=True,
    )
