"""Module de lecture de fichiers INI."""

from rapid_ini.filesystem.base import TextSource
from rapid_ini.filesystem.loader import FileTextSource, IniFileLoader

__all__ = [
    "TextSource",
    "FileTextSource",
    "IniFileLoader",
]
