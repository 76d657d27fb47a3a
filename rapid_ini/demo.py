"""Démonstration en ligne de commande de rapid_ini.

Lit un fichier INI, affiche toutes ses propriétés puis, si une clé est
demandée, illustre ``get_value`` (qui peut échouer) et ``get_value_or``
(qui retourne une valeur de repli).

Usage:
    python -m rapid_ini settings.ini --key Database.Host --default localhost
"""

import argparse
import sys
import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing import Sequence, TextIO

from rapid_ini.config.loader import FileConfigLoader
from rapid_ini.config.settings import RapidIniSettings
from rapid_ini.container.container import IniContainer
from rapid_ini.errors.base import ErrorHandlerChain
from rapid_ini.errors.console_handler import ConsoleErrorHandler
from rapid_ini.errors.exceptions import KeyNotFoundError, RapidIniError
from rapid_ini.errors.logger_handler import LoggerErrorHandler
from rapid_ini.filesystem.loader import IniFileLoader
from rapid_ini.logging.base import Logger
from rapid_ini.logging.file_logger import FileLogger

DEFAULT_LOG_FILE = str(Path(tempfile.gettempdir()) / "rapid_ini.log")


def build_parser() -> argparse.ArgumentParser:
    """Construit l'analyseur d'arguments de la démonstration."""
    parser = argparse.ArgumentParser(
        prog="rapid_ini",
        description="Lit un fichier INI et affiche ses propriétés.",
        epilog="Exemple : python -m rapid_ini Test.ini --key Database.Host",
    )
    parser.add_argument("ini_file", help="Fichier INI à lire.")
    parser.add_argument(
        "--key", help="Clé qualifiée à rechercher (ex: 'Database.Host')."
    )
    parser.add_argument(
        "--default", default="",
        help="Valeur de repli pour get_value_or (défaut: chaîne vide)."
    )
    parser.add_argument(
        "--settings", help="Fichier de paramètres (.toml, .json ou .ini)."
    )
    parser.add_argument("--log-file", help="Fichier de log.")
    return parser


def load_settings(settings_path: str | None) -> RapidIniSettings:
    """Charge les paramètres ou retourne les valeurs par défaut."""
    if settings_path is None:
        return RapidIniSettings()
    return FileConfigLoader().load(settings_path, schema=RapidIniSettings)


def display_properties(properties: Mapping[str, str], out: TextIO) -> None:
    """Affiche chaque propriété sous la forme ``clé=valeur``."""
    print("Propriétés trouvées :", file=out)
    for key, value in properties.items():
        print(f"{key}={value}", file=out)
    print("=" * 35, file=out)


def query_key(
    container: IniContainer,
    key: str,
    default: str,
    errors: ErrorHandlerChain,
    out: TextIO
) -> None:
    """Illustre get_value puis get_value_or sur une même clé."""
    print("# get_value()", file=out)
    try:
        value = container.get_value(key)
        print(f'Valeur de "{key}" = "{value}"', file=out)
    except KeyNotFoundError as e:
        errors.handle(e)

    print("# get_value_or()", file=out)
    value = container.get_value_or(key, default)
    print(f'Valeur de "{key}" = "{value}"', file=out)


def run(
    ini_file: str,
    logger: Logger,
    errors: ErrorHandlerChain,
    out: TextIO,
    key: str | None = None,
    default: str = "",
    encoding: str = "utf-8"
) -> int:
    """
    Exécute la démonstration.

    Args:
        ini_file: Fichier INI à lire
        logger: Logger des opérations
        errors: Chaîne de handlers d'erreurs
        out: Flux de sortie
        key: Clé qualifiée à rechercher (optionnelle)
        default: Valeur de repli de get_value_or
        encoding: Encodage du fichier INI

    Returns:
        Code de sortie 0

    Raises:
        SystemExit: Code 1 si le fichier INI ne peut pas être lu
    """
    try:
        container = IniFileLoader(logger, encoding=encoding).load_container(
            ini_file
        )
    except (FileNotFoundError, RapidIniError) as e:
        errors.handle_and_exit(e)

    display_properties(container.get_properties(), out)
    if key is not None:
        query_key(container, key, default, errors, out)

    logger.log_info("Démonstration terminée avec succès.")
    return 0


def main(argv: Sequence[str] | None = None, out: TextIO | None = None) -> int:
    """Point d'entrée de ``python -m rapid_ini``.

    Les erreurs sont affichées sur ``out``. Des paramètres ou un fichier
    INI illisibles terminent le programme avec le code 1.
    """
    args = build_parser().parse_args(argv)
    out = out or sys.stdout

    console = ConsoleErrorHandler(stream=out)
    try:
        settings = load_settings(args.settings)
    except (FileNotFoundError, ValueError, RapidIniError) as e:
        ErrorHandlerChain([console]).handle_and_exit(e)

    log_file = args.log_file or settings.logging.file or DEFAULT_LOG_FILE
    logger = FileLogger(log_file, config=settings.logging)
    errors = ErrorHandlerChain([console, LoggerErrorHandler(logger)])

    return run(
        args.ini_file,
        logger,
        errors,
        out,
        key=args.key,
        default=args.default,
        encoding=settings.encoding,
    )
