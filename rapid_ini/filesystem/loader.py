"""Chargement de fichiers INI depuis le disque."""

from pathlib import Path

from rapid_ini.container.container import IniContainer
from rapid_ini.errors.exceptions import IniFileError
from rapid_ini.filesystem.base import TextSource
from rapid_ini.logging.base import Logger
from rapid_ini.reader.parser import parse


class FileTextSource(TextSource):
    """
    Lecture de fichiers texte locaux.

    Toutes les opérations sont loggées via l'instance Logger.
    """

    def __init__(self, logger: Logger, encoding: str = "utf-8") -> None:
        """
        Initialise la source de texte.

        Args:
            logger: Instance de Logger pour le logging
            encoding: Encodage des fichiers lus
        """
        self.logger = logger
        self.encoding = encoding

    def read_text(self, file_path: str | Path) -> str:
        """
        Lit tout le contenu d'un fichier.

        Args:
            file_path: Chemin du fichier

        Returns:
            Contenu complet du fichier

        Raises:
            FileNotFoundError: Si le fichier n'existe pas
            IniFileError: Si le fichier ne peut pas être lu ou décodé
        """
        path = Path(file_path)
        if not path.is_file():
            self.logger.log_error(f"Fichier non trouvé : {path}")
            raise FileNotFoundError(f"Fichier non trouvé : {path}")

        try:
            # newline="" conserve les '\r', ignorés ensuite par le lecteur
            with open(path, "r", encoding=self.encoding, newline="") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            self.logger.log_error(
                f"Erreur lors de la lecture du fichier {path}: {e}"
            )
            raise IniFileError(
                f"Impossible de lire {path} ({self.encoding}): {e}"
            ) from e

        self.logger.log_info(f"Fichier {path} lu avec succès.")
        return content


class IniFileLoader:
    """
    Charge un fichier INI et le convertit en propriétés.

    Example:
        >>> from rapid_ini import FileLogger
        >>> loader = IniFileLoader(FileLogger("/tmp/rapid_ini.log"))
        >>> container = loader.load_container("settings.ini")
        >>> container.get_value_or("Database", "Host", "localhost")
    """

    def __init__(
        self,
        logger: Logger,
        text_source: TextSource | None = None,
        encoding: str = "utf-8"
    ) -> None:
        """
        Initialise le chargeur.

        Args:
            logger: Instance de Logger pour le logging
            text_source: Source de texte injectable. Si None,
                utilise FileTextSource.
            encoding: Encodage utilisé par la source par défaut
        """
        self.logger = logger
        self.text_source = text_source or FileTextSource(logger, encoding)

    def load(self, file_path: str | Path) -> dict[str, str]:
        """
        Lit un fichier INI.

        Args:
            file_path: Chemin du fichier INI

        Returns:
            Dictionnaire {clé qualifiée: valeur}

        Raises:
            FileNotFoundError: Si le fichier n'existe pas
            IniFileError: Si le fichier ne peut pas être lu
        """
        properties = parse(self.text_source.read_text(file_path))
        self.logger.log_info(
            f"{len(properties)} propriété(s) lue(s) dans {file_path}."
        )
        return properties

    def load_container(self, file_path: str | Path) -> IniContainer:
        """Lit un fichier INI et retourne un IniContainer."""
        return IniContainer(self.load(file_path))
