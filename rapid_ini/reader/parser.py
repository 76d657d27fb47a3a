"""Lecteur INI à passe unique.

Ce module convertit un texte INI en dictionnaire plat
``{"section.clé": "valeur"}`` à l'aide d'un automate à états finis
parcourant le texte caractère par caractère, sans retour arrière.

Règles de lecture :
- ``\\r`` est ignoré partout, ``\\n`` termine la ligne
- ``;`` en début de ligne ouvre un commentaire
- ``[nom]`` change la section courante
- ``clé=valeur`` ajoute une propriété (la dernière écriture l'emporte)

La lecture n'échoue jamais : les constructions mal formées sont
résolues par des règles de repli (voir ``_LineScanner.end_line``).
"""

from collections.abc import Iterable
from itertools import islice

from rapid_ini.reader.base import WHITESPACE, ReaderState, qualified_key


class _LineScanner:
    """État transitoire d'une lecture.

    Chaque appel à ``parse`` crée son propre scanner : aucun état
    n'est partagé entre deux lectures.
    """

    def __init__(self) -> None:
        self.result: dict[str, str] = {}
        self.state = ReaderState.UNKNOWN
        self.current_section = ""
        self._section_name: list[str] = []
        self._key_name: list[str] = []
        self._key_value: list[str] = []
        self._value_has_only_spaces = True

    def feed(self, char: str) -> None:
        """Traite un caractère selon l'état courant.

        Args:
            char: Caractère à traiter.
        """
        if char == "\r":
            return

        if char == "\n":
            self.end_line()
            return

        state = self.state
        if state is ReaderState.UNKNOWN:
            self._start_line(char)
        elif state is ReaderState.READING_SECTION_NAME:
            if char == "]":
                self.current_section = "".join(self._section_name)
                # Le reste de la ligne après ']' est ignoré.
                self.state = ReaderState.READING_COMMENT
            else:
                self._section_name.append(char)
        elif state is ReaderState.READING_KEY_NAME:
            if char == "=":
                self.state = ReaderState.READING_KEY_VALUE
                self._key_value.clear()
                self._value_has_only_spaces = True
            else:
                self._key_name.append(char)
        elif state is ReaderState.READING_KEY_VALUE:
            if char not in WHITESPACE:
                self._value_has_only_spaces = False
            self._key_value.append(char)

    def _start_line(self, char: str) -> None:
        """Détermine le type de ligne à partir du premier caractère utile."""
        if char in WHITESPACE:
            return

        if char == ";":
            self.state = ReaderState.READING_COMMENT
        elif char == "[":
            self.state = ReaderState.READING_SECTION_NAME
            self._section_name.clear()
        else:
            self.state = ReaderState.READING_KEY_NAME
            self._key_name.clear()
            self._key_name.append(char)

    def end_line(self) -> None:
        """Valide l'état en cours à la fin d'une ligne ou du texte.

        - valeur en cours : la propriété est enregistrée
        - nom de clé sans ``=`` : la ligne est abandonnée
        - section sans ``]`` : le texte lu devient la section courante
        """
        state = self.state
        if state is ReaderState.READING_KEY_VALUE:
            key = qualified_key(self.current_section, "".join(self._key_name))
            if self._value_has_only_spaces:
                self.result[key] = ""
            else:
                self.result[key] = "".join(self._key_value)
        elif state is ReaderState.READING_SECTION_NAME:
            self.current_section = "".join(self._section_name)

        self.state = ReaderState.UNKNOWN


def parse(text: Iterable[str]) -> dict[str, str]:
    """Lit un texte INI et retourne ses propriétés.

    Args:
        text: Contenu INI (``str`` ou tout itérable de caractères).

    Returns:
        Dictionnaire associant chaque clé qualifiée à sa valeur.

    Example:
        >>> parse("[Database]\\nHost=localhost\\nPort=5432\\n")
        {'Database.Host': 'localhost', 'Database.Port': '5432'}
    """
    scanner = _LineScanner()
    for char in text:
        scanner.feed(char)
    # Dernière ligne sans terminateur
    scanner.end_line()
    return scanner.result


def parse_buffer(data: Iterable[str], length: int) -> dict[str, str]:
    """Lit les ``length`` premiers caractères d'un texte INI.

    Args:
        data: Contenu INI.
        length: Nombre de caractères à lire. Une longueur supérieure
            à celle du contenu lit tout le contenu.

    Returns:
        Dictionnaire associant chaque clé qualifiée à sa valeur.

    Raises:
        ValueError: Si ``length`` est négatif.
    """
    if length < 0:
        raise ValueError(f"Longueur invalide : {length}")
    return parse(islice(data, length))


class IniReader:
    """Service sans état exposant la lecture INI.

    Example:
        >>> IniReader.read("A=1")
        {'A': '1'}
    """

    @staticmethod
    def read(text: Iterable[str]) -> dict[str, str]:
        """Lit un texte INI complet. Voir ``parse``."""
        return parse(text)

    @staticmethod
    def read_buffer(data: Iterable[str], length: int) -> dict[str, str]:
        """Lit un préfixe de texte INI. Voir ``parse_buffer``."""
        return parse_buffer(data, length)
