from __future__ import annotations

import logging
from typing import Dict, List, Optional, TextIO

from hbconcat.constants import LOGGER_NAMESPACE
from hbconcat.core.interfaces.logging import LoggerFactoryProtocol
from hbconcat.logging.helpers import get_logger, setup_base_logger


class DefaultLoggerFactory(LoggerFactoryProtocol):
    """Hand out ``hbconcat.*`` loggers for the concat components.

    The ``hbconcat`` base logger is configured through `setup_base_logger`
    the first time any logger is requested; every name handed out is
    qualified under LOGGER_NAMESPACE and cached per factory.
    """

    def __init__(self, *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
        self._json = bool(json_logs)
        self._level = int(level)
        self._stream: Optional[TextIO] = stream
        self._configured = False
        self._loggers: Dict[str, logging.Logger] = {}

    def _ensure_config(self) -> None:
        if not self._configured:
            setup_base_logger(json_logs=self._json, level=self._level, stream=self._stream)
            self._configured = True

    @property
    def base_logger(self) -> logging.Logger:
        self._ensure_config()
        return logging.getLogger(LOGGER_NAMESPACE)

    def get_logger(self, name: str) -> logging.Logger:
        self._ensure_config()
        logger = self._loggers.get(name)
        if logger is None:
            logger = self._loggers[name] = get_logger(name)
        return logger

    def issued(self) -> List[str]:
        """Qualified names of the loggers handed out so far."""
        return sorted(lg.name for lg in self._loggers.values())
