"""
Process-wide logging setup.

Modules log through `logging.getLogger(__name__)` using `event key=value`
messages; this only wires the root handler once.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
        return None
    logging.basicConfig(level=level, format=LOG_FORMAT)
