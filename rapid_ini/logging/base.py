"""Interface de journalisation injectée dans les composants rapid_ini."""

from abc import ABC, abstractmethod


class Logger(ABC):
    """Journal des lectures de fichiers INI.

    Reçu par FileTextSource, IniFileLoader et LoggerErrorHandler. Le
    parseur et le conteneur restent sans journal : ils ne font aucune
    entrée/sortie.
    """

    @abstractmethod
    def log_info(self, message: str) -> None:
        """Trace une lecture réussie (fichier lu, propriétés trouvées)."""

    @abstractmethod
    def log_warning(self, message: str) -> None:
        """Trace une anomalie récupérable, comme une clé absente."""

    @abstractmethod
    def log_error(self, message: str) -> None:
        """Trace un échec de lecture ou une erreur inattendue."""
