"""
Module contenant les exceptions personnalisées de rapid_ini.

La lecture INI n'échoue jamais : seules les recherches exactes du
conteneur et les collaborateurs (fichiers, configuration) lèvent
des exceptions.
"""


class RapidIniError(Exception):
    """Exception de base pour toutes les erreurs rapid_ini."""
    pass


class KeyNotFoundError(RapidIniError, KeyError):
    """Clé qualifiée absente du conteneur."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Clé introuvable : {key!r}")

    def __str__(self) -> str:
        # KeyError.__str__ entoure le message de guillemets
        return self.args[0]


class ConfigurationError(RapidIniError):
    """Exception de base pour toutes les Configurations."""
    pass


class FileConfigurationError(ConfigurationError):
    """Fichier de configuration invalide."""
    pass


class IniFileError(RapidIniError):
    """Fichier INI illisible ou mal encodé."""
    pass
