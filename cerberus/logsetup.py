"""Logging configuration of the proxy."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname).1s %(threadName)s %(message)s"


def init() -> None:
    """Reconfigure the root logger to the proxy's line format."""
    logging.basicConfig(format=LOG_FORMAT, level=logging.INFO, force=True)