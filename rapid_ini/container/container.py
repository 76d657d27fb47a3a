"""Conteneur de propriétés INI.

Ce module fournit IniContainer, qui enveloppe le dictionnaire produit
par ``parse`` et offre des recherches par clé qualifiée, par couple
(section, clé) et avec valeur de repli.
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import overload

from rapid_ini.container.base import PropertyContainer
from rapid_ini.errors.exceptions import KeyNotFoundError
from rapid_ini.reader.base import qualified_key
from rapid_ini.reader.parser import parse


class IniContainer(PropertyContainer):
    """Conteneur de propriétés issues d'un fichier INI.

    Le conteneur n'est pas synchronisé : les modifications concurrentes
    (set_property, import_properties) depuis plusieurs threads doivent
    être protégées par l'appelant.

    Example:
        >>> container = IniContainer.from_text("[Database]\\nHost=localhost\\n")
        >>> container.get_value("Database", "Host")
        'localhost'
        >>> container.get_value_or("Database.Port", "5432")
        '5432'
    """

    def __init__(self, parse_result: Mapping[str, str] | None = None) -> None:
        """Initialise le conteneur avec une copie du résultat de lecture.

        Args:
            parse_result: Résultat de ``parse`` (vide si None).
        """
        self._properties: dict[str, str] = dict(parse_result or {})

    @classmethod
    def from_text(cls, text: str) -> "IniContainer":
        """Crée un conteneur à partir d'un texte INI.

        Args:
            text: Contenu INI.

        Returns:
            Conteneur des propriétés lues.
        """
        return cls(parse(text))

    def import_properties(self, parse_result: Mapping[str, str]) -> None:
        """Remplace toutes les propriétés par celles fournies.

        Args:
            parse_result: Résultat de ``parse``.
        """
        self._properties = dict(parse_result)

    def set_property(self, key: str, value: str) -> None:
        """Crée ou remplace une propriété.

        Args:
            key: Clé qualifiée de la propriété.
            value: Nouvelle valeur.
        """
        self._properties[key] = value

    def key_exists(self, key: str) -> bool:
        """Indique si la clé qualifiée existe."""
        return key in self._properties

    @overload
    def get_value(self, key: str, /) -> str: ...

    @overload
    def get_value(self, section: str, key: str, /) -> str: ...

    def get_value(self, *parts: str) -> str:
        """Retourne la valeur d'une propriété.

        Args:
            *parts: ``(key,)`` ou ``(section, key)``. Une section vide
                équivaut à la clé seule.

        Returns:
            Valeur de la propriété.

        Raises:
            KeyNotFoundError: Si la propriété n'existe pas.
            TypeError: Si le nombre d'arguments est invalide.
        """
        if len(parts) not in (1, 2):
            raise TypeError(
                f"get_value() attend 1 ou 2 arguments, reçu {len(parts)}"
            )
        key = qualified_key(*parts) if len(parts) == 2 else parts[0]

        try:
            return self._properties[key]
        except KeyError:
            raise KeyNotFoundError(key) from None

    @overload
    def get_value_or(self, key: str, fallback: str, /) -> str: ...

    @overload
    def get_value_or(self, section: str, key: str, fallback: str, /) -> str: ...

    def get_value_or(self, *parts: str) -> str:
        """Retourne la valeur d'une propriété ou une valeur de repli.

        Args:
            *parts: ``(key, fallback)`` ou ``(section, key, fallback)``.

        Returns:
            Valeur de la propriété, ou ``fallback`` si elle n'existe pas.

        Raises:
            TypeError: Si le nombre d'arguments est invalide.
        """
        if len(parts) not in (2, 3):
            raise TypeError(
                f"get_value_or() attend 2 ou 3 arguments, reçu {len(parts)}"
            )
        *names, fallback = parts
        key = qualified_key(*names) if len(names) == 2 else names[0]
        return self._properties.get(key, fallback)

    def get_properties(self) -> Mapping[str, str]:
        """Retourne une vue en lecture seule, sans copie, des propriétés."""
        return MappingProxyType(self._properties)

    def __contains__(self, key: object) -> bool:
        return key in self._properties

    def __getitem__(self, key: str) -> str:
        return self.get_value(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._properties!r})"
