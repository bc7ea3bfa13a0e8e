"""
Logging setup for the booking core.

What gets logged, by logger:

* ``home_booking.app.core.storage``: unreadable or non-array data files
  (WARNING, the collection is treated as empty) and failed writes
  (ERROR, the stored file is left as it was).
* ``home_booking.app.repositories``: malformed records skipped on read
  and a catalog falling back to the built-in works (WARNING).
* ``home_booking.app.services``: registrations, created and rebooked
  services, generated bills and payment confirmations or rejections
  (INFO), bills on an unknown plan (WARNING) and rejected selections
  (DEBUG).

Records go to stderr so the command line output on stdout stays
readable, and optionally to ``LOG_FILE``.
"""

import logging
import sys
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _with_format(handler: logging.Handler) -> logging.Handler:
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    return handler


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Route booking core log records to stderr and ``logfile``.

    Handlers are attached on the first call only.  The level is applied
    every time, so ``--verbose`` takes effect even when the root logger
    was already configured.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"``; unknown names mean INFO.
    logfile : Optional[str]
        Log file path.  Missing parent directories are created.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if root.handlers:
        return

    root.addHandler(_with_format(logging.StreamHandler(sys.stderr)))
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        root.addHandler(_with_format(logging.FileHandler(log_path, encoding="utf-8")))
