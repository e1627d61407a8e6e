from __future__ import annotations

import logging
import sys

_NOISY_MODULES = ("urllib3", "requests", "charset_normalizer")

_LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)-5s %(name)s > %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

_handler: logging.Handler | None = None


def _level_for(verbosity: int) -> int:
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logger(verbosity: int = 0) -> None:
    """Configure console logging from the number of ``-v`` flags.

    0 warnings, 1 info, 2 debug with HTTP libraries held at info, 3+ debug
    everywhere.
    """
    global _handler

    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
    root.addHandler(_handler)
    root.setLevel(_level_for(verbosity))

    noisy_level = logging.INFO if verbosity == 2 else logging.NOTSET
    for name in _NOISY_MODULES:
        logging.getLogger(name).setLevel(noisy_level)
