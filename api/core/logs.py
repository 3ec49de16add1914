"""
Process-wide logging setup.

Modules log through `logging.getLogger(__name__)` with `event key=value`
messages; this only installs the root handler and level.
"""

from __future__ import annotations

import logging

from . import config

_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str | None = None) -> None:
    resolved = (level or config.log_level()).upper()
    logging.basicConfig(level=resolved, format=_FORMAT)
    logging.getLogger().setLevel(resolved)
    # httpx logs every request at INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)
