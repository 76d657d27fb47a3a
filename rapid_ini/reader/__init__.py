"""Module de lecture et d'écriture de texte INI."""

from rapid_ini.reader.base import ReaderState, qualified_key
from rapid_ini.reader.parser import IniReader, parse, parse_buffer
from rapid_ini.reader.writer import split_qualified_key, to_ini

__all__ = [
    "ReaderState",
    "qualified_key",
    "IniReader",
    "parse",
    "parse_buffer",
    "split_qualified_key",
    "to_ini",
]
