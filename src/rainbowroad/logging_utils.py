"""Logging setup shared by the CLI and server entry points."""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s - %(message)s"


def configure_logging(log_level: str = "INFO") -> None:
    """Send all rainbowroad logs to stderr at the given level."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(log_level.upper())

    # httpx logs every outbound request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
