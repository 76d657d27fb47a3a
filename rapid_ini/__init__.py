"""
rapid_ini - Lecteur INI rapide et conteneur de propriétés.

Modules disponibles:
- reader: Lecture de texte INI (parse, IniReader) et écriture (to_ini)
- container: Accès aux propriétés lues (IniContainer)
- filesystem: Lecture de fichiers INI depuis le disque (IniFileLoader)
- config: Chargement des paramètres (TOML, JSON, INI) validés par Pydantic
- logging: Gestion des logs (Logger, FileLogger)
- errors: Exceptions et handlers d'erreurs
"""

__version__ = "1.0.0"

from rapid_ini.reader import (
    ReaderState,
    qualified_key,
    IniReader,
    parse,
    parse_buffer,
    split_qualified_key,
    to_ini,
)
from rapid_ini.container import PropertyContainer, IniContainer
from rapid_ini.errors import (
    RapidIniError,
    KeyNotFoundError,
    ConfigurationError,
    FileConfigurationError,
    IniFileError,
    ErrorHandler,
    ErrorHandlerChain,
    ConsoleErrorHandler,
    LoggerErrorHandler,
)
from rapid_ini.logging import Logger, FileLogger
from rapid_ini.config import (
    LoggingSettings,
    RapidIniSettings,
    ConfigLoader,
    FileConfigLoader,
)
from rapid_ini.filesystem import TextSource, FileTextSource, IniFileLoader

__all__ = [
    # Reader
    "ReaderState",
    "qualified_key",
    "IniReader",
    "parse",
    "parse_buffer",
    "split_qualified_key",
    "to_ini",
    # Container
    "PropertyContainer",
    "IniContainer",
    # Errors
    "RapidIniError",
    "KeyNotFoundError",
    "ConfigurationError",
    "FileConfigurationError",
    "IniFileError",
    "ErrorHandler",
    "ErrorHandlerChain",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    # Logging
    "Logger",
    "FileLogger",
    # Config
    "LoggingSettings",
    "RapidIniSettings",
    "ConfigLoader",
    "FileConfigLoader",
    # Filesystem
    "TextSource",
    "FileTextSource",
    "IniFileLoader",
]
