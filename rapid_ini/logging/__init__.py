"""Module de logging."""

from rapid_ini.logging.base import Logger
from rapid_ini.logging.file_logger import FileLogger

__all__ = [
    "Logger",
    "FileLogger",
]
