"""Module de gestion des errors."""

from rapid_ini.errors.base import ErrorHandler, ErrorHandlerChain
from rapid_ini.errors.exceptions import (RapidIniError,
                                         KeyNotFoundError,
                                         ConfigurationError,
                                         FileConfigurationError,
                                         IniFileError)
from rapid_ini.errors.console_handler import ConsoleErrorHandler
from rapid_ini.errors.logger_handler import LoggerErrorHandler


__all__ = [
    "RapidIniError",
    "KeyNotFoundError",
    "ConfigurationError",
    "FileConfigurationError",
    "IniFileError",
    "ErrorHandler",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    "ErrorHandlerChain",
]
