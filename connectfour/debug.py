"""
debug.py - Logging and timing helpers for the connectfour package

This module wraps the standard logging module behind a small manager with
named levels, per-component filtering and simple performance markers. The
initial level and an optional log file are read from the environment so a
caller can turn on tracing without touching code.
"""

import logging
import os
import sys
import time
from contextlib import contextmanager
from enum import Enum
from typing import Dict, Iterator, List, Optional, Set

ENV_LEVEL = "CONNECTFOUR_DEBUG_LEVEL"
ENV_LOG_FILE = "CONNECTFOUR_LOG_FILE"


class DebugLevel(Enum):
    NONE = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5

    @classmethod
    def from_string(cls, name: str) -> Optional["DebugLevel"]:
        """Look up a level by case-insensitive name, None if unknown."""
        return cls.__members__.get(name.strip().upper())


# TRACE sits below DEBUG so it can be silenced independently
TRACE_LOGGING_LEVEL = logging.DEBUG - 5
logging.addLevelName(TRACE_LOGGING_LEVEL, "TRACE")

LEVEL_MAP = {
    DebugLevel.NONE: logging.CRITICAL + 10,
    DebugLevel.ERROR: logging.ERROR,
    DebugLevel.WARNING: logging.WARNING,
    DebugLevel.INFO: logging.INFO,
    DebugLevel.DEBUG: logging.DEBUG,
    DebugLevel.TRACE: TRACE_LOGGING_LEVEL,
}

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class DebugManager:
    """Manages logging for the Connect Four engine."""

    def __init__(self, logger_name: str = "connectfour"):
        self._level = DebugLevel.WARNING
        self._enabled = True
        self._log_file: Optional[str] = None
        self._enabled_components: Set[str] = set()  # empty means all
        self._logger = self._setup_logger(logger_name)
        self._performance_markers: Dict[str, float] = {}

    def _setup_logger(self, name: str) -> logging.Logger:
        logger = logging.getLogger(name)
        logger.setLevel(LEVEL_MAP[self._level])
        logger.propagate = False

        if not any(isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
                   for h in logger.handlers):
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S'))
            logger.addHandler(console_handler)

        return logger

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
        Configure the manager.

        Args:
            level: Minimum level that gets emitted
            enabled: Master switch for all output
            log_file: Path of a file to mirror output into ("" removes it)
            components: Components to emit for (empty list for all)
        """
        if level is not None:
            self._level = level
            self._logger.setLevel(LEVEL_MAP[level])

        if enabled is not None:
            self._enabled = enabled

        if log_file is not None:
            for handler in self._logger.handlers[:]:
                if isinstance(handler, logging.FileHandler):
                    self._logger.removeHandler(handler)
                    handler.close()

            self._log_file = log_file or None
            if self._log_file:
                file_handler = logging.FileHandler(self._log_file)
                file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
                self._logger.addHandler(file_handler)

        if components is not None:
            self._enabled_components = set(components)

    def configure_from_env(self, environ: Optional[Dict[str, str]] = None) -> None:
        """Apply CONNECTFOUR_DEBUG_LEVEL and CONNECTFOUR_LOG_FILE if present."""
        environ = os.environ if environ is None else environ

        level_name = environ.get(ENV_LEVEL)
        if level_name:
            level = DebugLevel.from_string(level_name)
            if level is None:
                self.warning(f"Ignoring unknown {ENV_LEVEL}={level_name!r}", "debug")
            else:
                self.configure(level=level)

        log_file = environ.get(ENV_LOG_FILE)
        if log_file:
            self.configure(log_file=log_file)

    def _should_log(self, level: DebugLevel, component: Optional[str]) -> bool:
        if not self._enabled or level is DebugLevel.NONE:
            return False
        if level.value > self._level.value:
            return False
        if component and self._enabled_components and component not in self._enabled_components:
            return False
        return True

    def log(self, level: DebugLevel, message: str, component: Optional[str] = None) -> None:
        if not self._should_log(level, component):
            return
        if component:
            message = f"[{component}] {message}"
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

    def start_timer(self, marker_name: str) -> None:
        self._performance_markers[marker_name] = time.perf_counter()

    def end_timer(self, marker_name: str, component: Optional[str] = None) -> Optional[float]:
        """
        Stop a timer and log the elapsed time.

        Returns:
            Elapsed seconds, or None if the marker was never started
        """
        started = self._performance_markers.pop(marker_name, None)
        if started is None:
            self.warning(f"Timer '{marker_name}' not started", "debug")
            return None

        elapsed = time.perf_counter() - started
        self.debug(f"Performance [{marker_name}]: {elapsed:.6f} seconds", component)
        return elapsed

    @contextmanager
    def timer(self, marker_name: str, component: Optional[str] = None) -> Iterator[None]:
        self.start_timer(marker_name)
        try:
            yield
        finally:
            self.end_timer(marker_name, component)

    def set_from_string(self, level_str: str) -> bool:
        """Set the level from a command-line string. Returns False if unknown."""
        level = DebugLevel.from_string(level_str)
        if level is None:
            self.warning(f"Unknown debug level: {level_str}")
            return False
        self.configure(level=level)
        self.info(f"Debug level set to {level.name}")
        return True


debug = DebugManager()
debug.configure_from_env()
