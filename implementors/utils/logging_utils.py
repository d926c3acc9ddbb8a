"""Logging setup for command-line entry points."""

from __future__ import annotations

import logging
from typing import Union

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """Attach a stderr handler to the root logger at ``level``.

    Library modules only create loggers; scripts call this once at startup.
    """
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
