"""
    LoggerErrorHandler
"""
from rapid_ini.errors.base import ErrorHandler
from rapid_ini.errors.exceptions import RapidIniError
from rapid_ini.logging.base import Logger


class LoggerErrorHandler(ErrorHandler):
    """Handler pour logger les erreurs.

    Enregistre les erreurs dans le fichier de log via le Logger
    injecté au constructeur.
    """

    def __init__(self,
                 logger: Logger,
                 base_error_type: type[Exception] = RapidIniError
                 ) -> None:
        """Initialise le handler avec un logger.

        Args:
            logger: Instance de Logger pour l'enregistrement des erreurs.
            base_error_type: Classe de base des erreurs connues.
        """
        self.logger = logger
        self.base_error_type = base_error_type

    def handle(self, error: Exception) -> None:
        """Log l'erreur avec différents niveaux selon la gravité.

        Les clés absentes sont attendues (avertissement), les autres
        erreurs connues sont des erreurs.

        Args:
            error: L'exception à logger.
        """
        if isinstance(error, KeyError) and isinstance(error, self.base_error_type):
            self.logger.log_warning(f"{type(error).__name__}: {str(error)}")
        elif isinstance(error, self.base_error_type):
            self.logger.log_error(f"{type(error).__name__}: {str(error)}")
        else:
            self.logger.log_error(
                f"Erreur inattendue: {type(error).__name__}: {str(error)}"
            )
