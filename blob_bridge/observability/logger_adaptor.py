"""Loguru-backed named loggers for blob-bridge.

Diagnostics are written as human readable lines to stdout; they are not part of
any functional contract.
"""

import sys
from typing import Any, Optional

from loguru import logger as _loguru_logger

from blob_bridge.constants import LOG_LEVEL

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> "
    "<level>{level: <8}</level> "
    "<cyan>{extra[logger_name]}</cyan> - <level>{message}</level>"
)

_loggers: dict = {}
_sink_configured = False


def _configure_sink() -> None:
    global _sink_configured
    if _sink_configured:
        return
    _loguru_logger.remove()
    # Records from unbound loggers still need a name for LOG_FORMAT
    _loguru_logger.configure(extra={"logger_name": "blob_bridge"})
    _loguru_logger.add(sys.stdout, level=LOG_LEVEL, format=LOG_FORMAT, colorize=False)
    _sink_configured = True


class BlobBridgeLogger:
    """Minimal logger that forwards to loguru with the logger name bound."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._log = _loguru_logger.bind(logger_name=name)

    @property
    def name(self) -> str:
        return self._name

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.info(msg, *args, **kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.error(msg, *args, **kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.warning(msg, *args, **kwargs)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.debug(msg, *args, **kwargs)

    def exception(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.exception(msg, *args, **kwargs)

    def critical(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.critical(msg, *args, **kwargs)


def get_logger(name: Optional[str] = None) -> BlobBridgeLogger:
    """Return the shared logger for ``name``, configuring the stdout sink once."""
    _configure_sink()
    if name is None:
        name = "blob_bridge"
    if name not in _loggers:
        _loggers[name] = BlobBridgeLogger(name)
    return _loggers[name]


default_logger = get_logger()
