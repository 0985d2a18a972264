"""
debug.py - Logging and timing helpers for the Connect Four search engine

All modules log through the ``debug`` singleton defined here. Messages are
tagged with a component name ("board", "search", "game", "cli") so noisy
parts of the engine can be filtered without touching the others.
"""

import logging
import sys
import time
from contextlib import contextmanager
from enum import Enum
from typing import Iterator, List, Optional, Set


class DebugLevel(Enum):
    NONE = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5


# Python logging has no TRACE level; it is emitted as DEBUG with a prefix
LEVEL_MAP = {
    DebugLevel.NONE: logging.CRITICAL + 10,
    DebugLevel.ERROR: logging.ERROR,
    DebugLevel.WARNING: logging.WARNING,
    DebugLevel.INFO: logging.INFO,
    DebugLevel.DEBUG: logging.DEBUG,
    DebugLevel.TRACE: logging.DEBUG,
}

LOGGER_NAME = "connect4_search"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class Timer:
    """Elapsed wall time of a ``DebugManager.timer`` block."""

    def __init__(self):
        self.started = time.perf_counter()
        self.elapsed: Optional[float] = None

    def stop(self) -> float:
        self.elapsed = time.perf_counter() - self.started
        return self.elapsed


class DebugManager:
    """Filters, formats and forwards engine log messages to ``logging``."""

    def __init__(self, level: DebugLevel = DebugLevel.WARNING):
        self._level = level
        self._enabled = True
        self._log_file: Optional[str] = None
        self._components: Set[str] = set()  # empty means all
        self._logger = logging.getLogger(LOGGER_NAME)
        self._logger.setLevel(LEVEL_MAP[level])
        self._logger.propagate = False
        if not self._console_handlers():
            # stdout belongs to the board output of the CLI
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S'))
            self._logger.addHandler(handler)

    def _console_handlers(self) -> List[logging.Handler]:
        return [h for h in self._logger.handlers if type(h) is logging.StreamHandler]

    @property
    def level(self) -> DebugLevel:
        return self._level

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def configure(self, level: Optional[DebugLevel] = None,
                  enabled: Optional[bool] = None,
                  log_file: Optional[str] = None,
                  components: Optional[List[str]] = None) -> None:
        """
        Change the debug settings. Arguments left as None keep their value.

        Args:
            level: Most verbose level that is still emitted
            enabled: Master switch for all output
            log_file: Also write messages to this file ("" removes the file handler)
            components: Only emit messages tagged with one of these components
                (an empty list re-enables every component)
        """
        if level is not None:
            self._level = level
            self._logger.setLevel(LEVEL_MAP[level])

        if enabled is not None:
            self._enabled = enabled

        if log_file is not None:
            self._set_log_file(log_file or None)

        if components is not None:
            self._components = set(components)

    def _set_log_file(self, path: Optional[str]) -> None:
        for handler in [h for h in self._logger.handlers if isinstance(h, logging.FileHandler)]:
            self._logger.removeHandler(handler)
            handler.close()

        self._log_file = path
        if path:
            handler = logging.FileHandler(path)
            handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
            self._logger.addHandler(handler)

    def is_enabled_for(self, level: DebugLevel, component: Optional[str] = None) -> bool:
        """Return True if a message at ``level`` for ``component`` would be emitted."""
        if not self._enabled or level is DebugLevel.NONE or level.value > self._level.value:
            return False
        return not (component and self._components and component not in self._components)

    def log(self, level: DebugLevel, message: str, component: Optional[str] = None) -> None:
        if not self.is_enabled_for(level, component):
            return

        if component:
            message = f"[{component}] {message}"
        if level is DebugLevel.TRACE:
            message = f"TRACE: {message}"
        self._logger.log(LEVEL_MAP[level], message)

    def error(self, message: str, component: Optional[str] = None) -> None:
        self.log(DebugLevel.ERROR, message, component)

    def warning(self, message: str, component: Optional[str] = None) -> None:
        self.log(DebugLevel.WARNING, message, component)

    def info(self, message: str, component: Optional[str] = None) -> None:
        self.log(DebugLevel.INFO, message, component)

    def debug(self, message: str, component: Optional[str] = None) -> None:
        self.log(DebugLevel.DEBUG, message, component)

    def trace(self, message: str, component: Optional[str] = None) -> None:
        self.log(DebugLevel.TRACE, message, component)

    @contextmanager
    def timer(self, name: str, component: Optional[str] = None) -> Iterator[Timer]:
        """
        Time the enclosed block and log the result at DEBUG.

            with debug.timer("search", "search") as t:
                ...
            t.elapsed  # seconds
        """
        timer = Timer()
        try:
            yield timer
        finally:
            timer.stop()
            self.debug(f"Performance [{name}]: {timer.elapsed:.6f} seconds", component)

    def set_from_string(self, level_str: str) -> bool:
        """Set the level from a command line string such as "debug"."""
        level = DebugLevel.__members__.get(level_str.upper())
        if level is None:
            self.warning(f"Unknown debug level: {level_str}")
            return False

        self.configure(level=level)
        self.info(f"Debug level set to {level.name}")
        return True


debug = DebugManager()
