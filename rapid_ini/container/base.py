"""Interface abstraite pour les conteneurs de propriétés INI.

Ce module définit le contrat (ABC) d'accès aux propriétés lues par
``rapid_ini.reader.parse`` :
- recherche exacte (échec si la clé est absente)
- recherche avec valeur de repli (jamais d'échec)
- composition (section, clé) en clé qualifiée
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping


class PropertyContainer(ABC):
    """Interface pour un conteneur de propriétés INI."""

    @abstractmethod
    def set_property(self, key: str, value: str) -> None:
        """Crée ou remplace une propriété.

        Args:
            key: Clé qualifiée de la propriété.
            value: Nouvelle valeur.
        """
        pass

    @abstractmethod
    def key_exists(self, key: str) -> bool:
        """Indique si la clé qualifiée existe.

        Args:
            key: Clé qualifiée.

        Returns:
            True si la propriété existe, False sinon.
        """
        pass

    @abstractmethod
    def get_value(self, *parts: str) -> str:
        """Retourne la valeur d'une propriété.

        Args:
            *parts: ``(key,)`` ou ``(section, key)``.

        Returns:
            Valeur de la propriété.

        Raises:
            KeyNotFoundError: Si la propriété n'existe pas.
        """
        pass

    @abstractmethod
    def get_value_or(self, *parts: str) -> str:
        """Retourne la valeur d'une propriété ou une valeur de repli.

        Args:
            *parts: ``(key, fallback)`` ou ``(section, key, fallback)``.

        Returns:
            Valeur de la propriété, ou ``fallback`` si elle n'existe pas.
        """
        pass

    @abstractmethod
    def get_properties(self) -> Mapping[str, str]:
        """Retourne une vue en lecture seule de toutes les propriétés."""
        pass

    @abstractmethod
    def import_properties(self, parse_result: Mapping[str, str]) -> None:
        """Remplace toutes les propriétés par celles fournies.

        Args:
            parse_result: Résultat de ``parse``.
        """
        pass
