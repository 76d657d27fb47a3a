"""Fonctions de chargement de configuration."""

import json
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from rapid_ini.errors.exceptions import FileConfigurationError
from rapid_ini.reader.parser import parse


class ConfigLoader(ABC):
    """
    Interface abstraite pour le chargement de configuration.

    Permet l'injection de dépendance et facilite les tests
    en permettant de substituer l'implémentation réelle par un mock.
    """

    @abstractmethod
    def load(
        self,
        config_path: Union[str, Path],
        schema: type | None = None
    ) -> Union[Dict[str, Any], Any]:
        """
        Charge un fichier de configuration.

        Args:
            config_path: Chemin vers le fichier de configuration
            schema: Classe Pydantic BaseModel optionnelle pour
                validation. Si fourni, retourne une instance
                du modèle. Si None, retourne un dict brut.

        Returns:
            Dictionnaire de configuration ou instance du schema

        Raises:
            FileNotFoundError: Si le fichier n'existe pas
            ValueError: Si le format n'est pas supporté
            TypeError: Si schema n'est pas un BaseModel
            FileConfigurationError: Si la validation échoue
        """
        pass


class FileConfigLoader(ConfigLoader):
    """
    Implémentation du chargeur de configuration depuis fichiers.

    Supporte les formats TOML, JSON et INI, détectés automatiquement
    par l'extension du fichier. Les fichiers INI sont lus avec le
    lecteur rapid_ini et donnent un dictionnaire plat
    {"section.clé": "valeur"}.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        """
        Initialise le chargeur.

        Args:
            encoding: Encodage des fichiers JSON et INI
        """
        self.encoding = encoding

    def load(
        self,
        config_path: Union[str, Path],
        schema: type | None = None
    ) -> Union[Dict[str, Any], Any]:
        """
        Charge un fichier de configuration TOML, JSON ou INI.

        Le format est détecté automatiquement par l'extension
        du fichier. Si un schema Pydantic est fourni, le dict
        brut est validé et une instance du modèle est retournée.

        Args:
            config_path: Chemin vers le fichier de configuration
            schema: Classe Pydantic BaseModel optionnelle

        Returns:
            Dictionnaire de configuration ou instance du schema

        Raises:
            FileNotFoundError: Si le fichier n'existe pas
            ValueError: Si l'extension n'est pas supportée
            TypeError: Si schema n'est pas un BaseModel
            FileConfigurationError: Si le contenu est invalide ou non décodable
        """
        path = Path(config_path)

        if not path.exists():
            raise FileNotFoundError(
                f"Fichier de configuration non trouvé: {path}"
            )

        suffix = path.suffix.lower()

        try:
            if suffix == ".toml":
                with open(path, "rb") as f:
                    raw_config = tomllib.load(f)
            elif suffix == ".json":
                with open(path, "r", encoding=self.encoding) as f:
                    raw_config = json.load(f)
            elif suffix in (".ini", ".conf"):
                raw_config = parse(path.read_text(encoding=self.encoding))
            else:
                raise ValueError(
                    f"Extension non supportée: {suffix}. "
                    "Utilisez .toml, .json ou .ini"
                )
        except (tomllib.TOMLDecodeError, json.JSONDecodeError,
                UnicodeDecodeError) as e:
            raise FileConfigurationError(
                f"Fichier de configuration invalide {path}: {e}"
            ) from e

        if schema is None:
            return raw_config

        if suffix in (".ini", ".conf"):
            raw_config = self._nest_sections(raw_config)

        return self._validate_with_schema(raw_config, schema)

    @staticmethod
    def _nest_sections(properties: Dict[str, str]) -> Dict[str, Any]:
        """Regroupe les clés qualifiées par section (premier point).

        Args:
            properties: Dictionnaire plat {"section.clé": "valeur"}.

        Returns:
            Dictionnaire imbriqué {section: {clé: valeur}}, les clés
            sans section restant au premier niveau.

        Raises:
            FileConfigurationError: Si une clé porte le nom d'une section.
        """
        nested: Dict[str, Any] = {}
        for qualified, value in properties.items():
            section, separator, key = qualified.partition(".")
            if not separator:
                if isinstance(nested.get(qualified), dict):
                    raise FileConfigurationError(
                        f"La clé '{qualified}' masque une section"
                    )
                nested[qualified] = value
                continue
            group = nested.setdefault(section, {})
            if not isinstance(group, dict):
                raise FileConfigurationError(
                    f"La clé '{section}' masque une section"
                )
            group[key] = value
        return nested

    @staticmethod
    def _validate_with_schema(
        data: Dict[str, Any], schema: type
    ) -> Any:
        """Valide un dict via un modèle Pydantic.

        Args:
            data: Dictionnaire brut à valider.
            schema: Classe Pydantic BaseModel.

        Returns:
            Instance du modèle validé.

        Raises:
            TypeError: Si schema n'est pas un BaseModel.
            FileConfigurationError: Si les données sont invalides.
        """
        if not (
            isinstance(schema, type)
            and issubclass(schema, BaseModel)
        ):
            raise TypeError(
                f"Le schema doit être une sous-classe de "
                f"pydantic.BaseModel, reçu: {schema}"
            )

        try:
            return schema.model_validate(data)
        except PydanticValidationError as e:
            raise FileConfigurationError(
                f"Configuration invalide pour {schema.__name__}: {e}"
            ) from e
