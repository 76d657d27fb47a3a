"""Handlers d'erreurs de rapid_ini et chaîne de diffusion.

Le parseur et le conteneur lèvent des exceptions sans jamais les
afficher ; ce sont les appelants (la démonstration, un outil qui lit
des fichiers INI) qui décident de leur présentation via ces handlers.
"""

import sys
from abc import ABC, abstractmethod


class ErrorHandler(ABC):
    """Traitement d'une erreur remontée par la lecture INI.

    Une clé absente (KeyNotFoundError), un fichier illisible
    (IniFileError) ou des paramètres invalides (ConfigurationError)
    arrivent ici. ConsoleErrorHandler les présente à l'utilisateur,
    LoggerErrorHandler les trace dans le journal.
    """

    @abstractmethod
    def handle(self, error: Exception) -> None:
        """Traite une erreur sans la relancer.

        Args:
            error: Exception levée par rapid_ini ou par l'appelant.
        """


class ErrorHandlerChain:
    """Transmet chaque erreur à tous les handlers enregistrés.

    L'ordre d'ajout est conservé : la démonstration enregistre la
    console avant le journal.
    """

    def __init__(self, handlers: list[ErrorHandler] | None = None):
        """Initialise la chaîne.

        Args:
            handlers: Handlers initiaux (liste vide par défaut).
        """
        self.handlers: list[ErrorHandler] = list(handlers or [])

    def add_handler(self, handler: ErrorHandler) -> None:
        """Ajoute un handler en fin de chaîne."""
        self.handlers.append(handler)

    def handle(self, error: Exception) -> None:
        """Diffuse une erreur récupérable, par exemple une clé absente."""
        for handler in self.handlers:
            handler.handle(error)

    def handle_and_exit(self, error: Exception, exit_code: int = 1) -> None:
        """Diffuse une erreur fatale puis termine le programme.

        Utilisé quand le fichier INI ou les paramètres ne peuvent pas
        être lus.

        Args:
            error: Exception à diffuser avant la sortie.
            exit_code: Code transmis à sys.exit (défaut: 1).

        Raises:
            SystemExit: Toujours, après la diffusion.
        """
        self.handle(error)
        sys.exit(exit_code)
