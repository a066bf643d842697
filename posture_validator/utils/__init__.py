from posture_validator.utils.lines import find_line, line_of_offset
from posture_validator.utils.logger import Logger, LogLevel, SilentLogger, create_logger

__all__ = [
    "find_line",
    "line_of_offset",
    "Logger",
    "LogLevel",
    "SilentLogger",
    "create_logger",
]
