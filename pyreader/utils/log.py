from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | int = "WARNING") -> int:
    """
    Configure root logging once for the application.

    Accepts a level name ("info", "DEBUG") or a numeric level. Unknown names
    fall back to WARNING. Returns the numeric level that was applied.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        if not isinstance(resolved, int):
            resolved = logging.WARNING
    else:
        resolved = int(level)

    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger().setLevel(resolved)
    return resolved
