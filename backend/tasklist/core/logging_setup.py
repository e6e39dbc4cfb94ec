from __future__ import annotations

import logging
import sys

# Third-party loggers that are only interesting when something breaks.
_QUIET_LOGGERS = ("sqlalchemy", "aiosqlite", "passlib")
HANDLER_NAME = "tasklist-console"


def setup_logging(level: str | int = logging.INFO) -> None:
    """
    Configure the root logger with a single stderr handler.

    Call this once, before the first request is served.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    # Replace only our own handler so repeated calls do not stack; others (pytest, uvicorn) stay.
    for h in list(root.handlers):
        if h.get_name() == HANDLER_NAME:
            root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.set_name(HANDLER_NAME)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    root.addHandler(ch)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.captureWarnings(True)
