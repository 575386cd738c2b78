"""SQL trace logging, written to standard error while switched on."""

from __future__ import annotations

import logging
import sys
import threading
from typing import Optional

TRACE = logging.getLogger("hdbcore.sqltrace")
"""Logger receiving SQL trace output."""
TRACE.propagate = False
TRACE.addHandler(logging.NullHandler())
TRACE.setLevel(logging.DEBUG)

_PREFIX = "hdb sql "
_lock = threading.Lock()
_handler: Optional[logging.Handler] = None


def is_on() -> bool:
    """Report whether trace output is active."""
    return _handler is not None


def set_on(on: bool) -> None:
    """Switch trace output to standard error on or off."""
    global _handler
    with _lock:
        if on:
            if _handler is None:
                handler = logging.StreamHandler(sys.stderr)
                handler.setFormatter(
                    logging.Formatter(
                        _PREFIX + "%(asctime)s %(message)s", datefmt="%Y/%m/%d %H:%M:%S"
                    )
                )
                TRACE.addHandler(handler)
                _handler = handler
        elif _handler is not None:
            TRACE.removeHandler(_handler)
            _handler = None