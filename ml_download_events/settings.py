from __future__ import annotations

"""Package-level configuration constants.

Only plain values live here so the module can be imported from anywhere in
the package without pulling in pydantic or the logging setup.
"""

# Standard library
import os

__all__ = [
    "LOG_LEVEL",
    "MAX_INT32",
    "MAX_INT64",
    "NO_INT_VALUE",
    "WIRE_CHARSET",
]

# Charset of the encoded wire payload handed to the transport layer
WIRE_CHARSET = "utf-8"

# Zero default applied by builder factories to counters and statuses
NO_INT_VALUE = 0

MAX_INT32 = 2**31 - 1
MAX_INT64 = 2**63 - 1


def _log_level() -> str:
    """Resolve the log level for :func:`configure_logging`.

    Encoding never depends on this value; it only tunes how chatty the
    package logger is once a caller opts into our handler.
    """
    return os.getenv("ML_DOWNLOAD_EVENTS_LOG_LEVEL", "INFO").upper()


LOG_LEVEL: str = _log_level()
