"""
    ConsoleErrorHandler (générique, configurable)
"""
import sys
from typing import TextIO

from rapid_ini.errors.base import ErrorHandler
from rapid_ini.errors.exceptions import (ConfigurationError,
                                         IniFileError,
                                         KeyNotFoundError,
                                         RapidIniError)


class ConsoleErrorHandler(ErrorHandler):
    """Handler pour afficher les erreurs dans la console.

    Distingue les erreurs connues (RapidIniError) des erreurs
    inattendues, et affiche un message de solution adapté au type
    d'erreur.
    """

    def __init__(
        self,
        base_error_type: type[Exception] = RapidIniError,
        solutions: dict[type[Exception], str] | None = None,
        stream: TextIO | None = None
    ) -> None:
        """Initialise le handler console.

        Args:
            base_error_type: Classe de base pour distinguer erreurs connues/inconnues
                             (défaut: RapidIniError).
            solutions: Dictionnaire {TypeException: "message solution"}
                       prioritaire sur les messages par défaut.
            stream: Flux d'affichage (défaut: sys.stdout au moment de
                    l'affichage).
        """
        self.base_error_type = base_error_type
        self.solutions = solutions or {}
        self.stream = stream

    def handle(self, error: Exception) -> None:
        """Affiche l'erreur dans la console avec des messages utilisateur.

        Args:
            error: L'exception à afficher.
        """
        if isinstance(error, self.base_error_type):
            self._handle_known_error(error)
        else:
            self._handle_unknown_error(error)

    def _print(self, message: str) -> None:
        print(message, file=self.stream or sys.stdout)

    def _handle_known_error(self, error: Exception) -> None:
        """Gère les erreurs connues du projet.

        Affiche le type et le message de l'erreur, suivi d'une
        suggestion de solution adaptée via isinstance.

        Args:
            error: L'exception métier à traiter.
        """
        self._print(f"\n🛑 {type(error).__name__}: {str(error)}")

        for error_type, solution in self.solutions.items():
            if isinstance(error, error_type):
                self._print(f"\n🔧 Solution : {solution}")
                return

        if isinstance(error, KeyNotFoundError):
            self._print("\n🔧 Solution : Vérifiez la section et la casse de la clé,"
                        " ou utilisez get_value_or().")
        elif isinstance(error, IniFileError):
            self._print("\n🔧 Solution : Vérifiez le chemin et l'encodage du fichier INI.")
        elif isinstance(error, ConfigurationError):
            self._print("\n🔧 Solution : Vérifiez votre fichier de configuration.")
        else:
            self._print("\n🔧 Solution : Voir les suggestions ci-dessus.")

    def _handle_unknown_error(self, error: Exception) -> None:
        """Gère les erreurs inattendues.

        Args:
            error: L'exception non prévue à afficher.
        """
        self._print(f"\n💥 Erreur inattendue: {str(error)}")
        self._print(f"Type: {type(error).__name__}")
        self._print(
            "\n📋 Cela peut être un bug. Veuillez ouvrir une issue avec ces informations."
        )
