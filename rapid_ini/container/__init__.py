"""Module de conteneurs de propriétés INI."""

from rapid_ini.container.base import PropertyContainer
from rapid_ini.container.container import IniContainer

__all__ = [
    "PropertyContainer",
    "IniContainer",
]
