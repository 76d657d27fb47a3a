"""Modèles Pydantic des paramètres rapid_ini."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseModel):
    """Paramètres de journalisation.

    Attributes:
        file: Chemin du fichier de log (None : pas de fichier imposé).
        level: Niveau minimal des messages.
        format: Format des lignes de log (syntaxe ``logging``).
        console_output: Dupliquer les messages sur la console.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    file: str | None = None
    level: LogLevel = "INFO"
    format: str = DEFAULT_LOG_FORMAT
    console_output: bool = False


class RapidIniSettings(BaseModel):
    """Paramètres globaux de l'application.

    Attributes:
        encoding: Encodage des fichiers INI lus.
        logging: Paramètres de journalisation.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    encoding: str = Field(default="utf-8", min_length=1)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
