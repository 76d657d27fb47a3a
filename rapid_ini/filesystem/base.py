"""Interface abstraite pour les sources de texte INI."""

from abc import ABC, abstractmethod
from pathlib import Path


class TextSource(ABC):
    """Interface pour la lecture complète d'un fichier texte."""

    @abstractmethod
    def read_text(self, file_path: str | Path) -> str:
        """
        Lit tout le contenu d'un fichier.

        Args:
            file_path: Chemin du fichier

        Returns:
            Contenu complet du fichier

        Raises:
            FileNotFoundError: Si le fichier n'existe pas
        """
        pass
