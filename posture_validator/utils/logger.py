"""
Structured logger used throughout the posture validator.

Wraps the standard ``logging`` module so call sites can attach a small
data dict to each message.
"""

import logging
from typing import Any, Literal, Optional


LogLevel = Literal["debug", "info", "warn", "error", "silent"]

LOG_LEVELS: tuple[str, ...] = ("debug", "info", "warn", "error", "silent")

_LEVEL_MAP: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "silent": logging.CRITICAL + 1,
}

LOGGER_NAME = "posture_validator"


class Logger:
    """Logger that renders an optional data dict after the message."""

    def __init__(self, level: LogLevel = "info", name: str = LOGGER_NAME):
        # Threshold is per instance
        self._logger = logging.getLogger(name)
        self._threshold = _LEVEL_MAP[level]
        self.level = level

    def _log(self, level: int, message: str, data: Optional[dict[str, Any]], **kwargs: Any) -> None:
        if level < self._threshold:
            return
        self._logger.log(level, self._format(message, data), **kwargs)

    @staticmethod
    def _format(message: str, data: Optional[dict[str, Any]]) -> str:
        if not data:
            return message
        details = " ".join(f"{key}={value!r}" for key, value in data.items())
        return f"{message} {details}"

    def debug(self, message: str, data: Optional[dict[str, Any]] = None) -> None:
        self._log(logging.DEBUG, message, data)

    def info(self, message: str, data: Optional[dict[str, Any]] = None) -> None:
        self._log(logging.INFO, message, data)

    def warn(self, message: str, data: Optional[dict[str, Any]] = None) -> None:
        self._log(logging.WARNING, message, data)

    def error(
        self,
        message: str,
        data: Optional[dict[str, Any]] = None,
        error: Optional[BaseException] = None,
    ) -> None:
        self._log(logging.ERROR, message, data, exc_info=error)


class SilentLogger(Logger):
    """Logger that discards everything."""

    def __init__(self) -> None:
        super().__init__("silent")

    def debug(self, message: str, data: Optional[dict[str, Any]] = None) -> None:
        pass

    def info(self, message: str, data: Optional[dict[str, Any]] = None) -> None:
        pass

    def warn(self, message: str, data: Optional[dict[str, Any]] = None) -> None:
        pass

    def error(
        self,
        message: str,
        data: Optional[dict[str, Any]] = None,
        error: Optional[BaseException] = None,
    ) -> None:
        pass


def create_logger(level: LogLevel = "info") -> Logger:
    if level == "silent":
        return SilentLogger()
    return Logger(level)
