from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "UNSCRAMBLE_LOG_LEVEL"


def configure_logging(level: str | None = None) -> None:
    """
    Route diagnostics to stderr. Level comes from `level`, else the
    UNSCRAMBLE_LOG_LEVEL environment variable, else WARNING.

    Game feedback is printed, not logged, so the default level keeps stderr
    free of anything but real problems.
    """
    level = (level or os.environ.get(LOG_LEVEL_ENV) or "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )
