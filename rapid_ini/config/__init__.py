"""Module de configuration."""

from rapid_ini.config.settings import LoggingSettings, RapidIniSettings
from rapid_ini.config.loader import ConfigLoader, FileConfigLoader

__all__ = [
    "LoggingSettings",
    "RapidIniSettings",
    "ConfigLoader",
    "FileConfigLoader",
]
