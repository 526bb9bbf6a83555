"""
debug.py - Logging for the Connect Four engine

This module wraps the standard logging package with a small manager that adds
named debug levels, per-component filtering, optional file output and simple
timers used by the benchmark command.
"""

import logging
import sys
import time
from enum import Enum
from typing import Dict, List, Optional, Set, TextIO


class DebugLevel(Enum):
    NONE = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5


TRACE_LEVEL = 5
logging.addLevelName(TRACE_LEVEL, "TRACE")

# Mapping to standard logging levels
LEVEL_MAP = {
    DebugLevel.NONE: logging.CRITICAL + 10,
    DebugLevel.ERROR: logging.ERROR,
    DebugLevel.WARNING: logging.WARNING,
    DebugLevel.INFO: logging.INFO,
    DebugLevel.DEBUG: logging.DEBUG,
    DebugLevel.TRACE: TRACE_LEVEL,
}

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOGGER_NAME = "connectfour"


class DebugManager:
    """Routes engine log messages through a single named logger."""

    def __init__(self, level: DebugLevel = DebugLevel.WARNING, stream: Optional[TextIO] = None,
                 name: str = LOGGER_NAME):
        self._level = level
        self._enabled = True
        self._enabled_components: Set[str] = set()  # Empty set means all components
        self._timers: Dict[str, float] = {}
        self._logger = logging.getLogger(name)
        self._logger.setLevel(LEVEL_MAP[level])
        self._console_handler = self._make_console_handler(stream)
        self._logger.addHandler(self._console_handler)
        self._file_handler: Optional[logging.FileHandler] = None

    @staticmethod
    def _make_console_handler(stream: Optional[TextIO]) -> logging.Handler:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S'))
        return handler

    @property
    def level(self) -> DebugLevel:
        return self._level

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def configure(self, level: Optional[DebugLevel] = None,
                  enabled: Optional[bool] = None,
                  log_file: Optional[str] = None,
                  components: Optional[List[str]] = None,
                  stream: Optional[TextIO] = None):
        """
        Configure the manager.

        Args:
            level: Debug level to set
            enabled: Whether logging is enabled at all
            log_file: Path to a log file; an empty string turns file logging off
            components: Components to log for (empty list for all)
            stream: Replacement stream for console output
        """
        if level is not None:
            self._level = level
            self._logger.setLevel(LEVEL_MAP[level])

        if enabled is not None:
            self._enabled = enabled

        if stream is not None:
            self._logger.removeHandler(self._console_handler)
            self._console_handler = self._make_console_handler(stream)
            self._logger.addHandler(self._console_handler)

        if log_file is not None:
            if self._file_handler is not None:
                self._logger.removeHandler(self._file_handler)
                self._file_handler.close()
                self._file_handler = None
            if log_file:
                self._file_handler = logging.FileHandler(log_file)
                self._file_handler.setFormatter(
                    logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
                self._logger.addHandler(self._file_handler)

        if components is not None:
            self._enabled_components = set(components)

    def _should_log(self, level: DebugLevel, component: Optional[str]) -> bool:
        if not self._enabled or self._level == DebugLevel.NONE:
            return False
        if level.value > self._level.value:
            return False
        if component and self._enabled_components and component not in self._enabled_components:
            return False
        return True

    def log(self, level: DebugLevel, message: str, component: Optional[str] = None):
        """Log a message at the given level, tagged with its component."""
        if level == DebugLevel.NONE or not self._should_log(level, component):
            return
        if component:
            message = f"[{component}] {message}"
        self._logger.log(LEVEL_MAP[level], message)

    def error(self, message: str, component: Optional[str] = None):
        self.log(DebugLevel.ERROR, message, component)

    def warning(self, message: str, component: Optional[str] = None):
        self.log(DebugLevel.WARNING, message, component)

    def info(self, message: str, component: Optional[str] = None):
        self.log(DebugLevel.INFO, message, component)

    def debug(self, message: str, component: Optional[str] = None):
        self.log(DebugLevel.DEBUG, message, component)

    def trace(self, message: str, component: Optional[str] = None):
        self.log(DebugLevel.TRACE, message, component)

    def start_timer(self, marker_name: str):
        """Start a named timer."""
        self._timers[marker_name] = time.perf_counter()

    def end_timer(self, marker_name: str, component: Optional[str] = None) -> Optional[float]:
        """
        Stop a named timer.

        Returns:
            Elapsed seconds, or None if the timer was never started
        """
        started = self._timers.pop(marker_name, None)
        if started is None:
            self.warning(f"Timer '{marker_name}' not started", "debug")
            return None
        elapsed = time.perf_counter() - started
        self.debug(f"Timer [{marker_name}]: {elapsed:.6f} seconds", component)
        return elapsed

    def set_from_string(self, level_str: str) -> bool:
        """Set the level from a command-line string. Returns False if unknown."""
        try:
            level = DebugLevel[level_str.upper()]
        except KeyError:
            self.warning(f"Unknown debug level: {level_str}")
            return False
        self.configure(level=level)
        return True


# Create a singleton instance
debug = DebugManager()
