"""Sérialisation de propriétés au format INI.

Produit un texte que ``parse`` relit à l'identique :
``parse(to_ini(props)) == props`` pour tout dictionnaire issu de ``parse``.
"""

from collections.abc import Mapping

from rapid_ini.reader.base import SECTION_SEPARATOR, WHITESPACE

_LINE_START_MARKERS = frozenset(";[") | WHITESPACE


def split_qualified_key(qualified: str) -> tuple[str, str]:
    """Sépare une clé qualifiée en (section, clé) au dernier point.

    Args:
        qualified: Clé qualifiée (ex: "Database.Connection.Host").

    Returns:
        Tuple (section, clé). La section est vide sans point.

    Example:
        >>> split_qualified_key("Database.Connection.Host")
        ('Database.Connection', 'Host')
    """
    section, separator, key = qualified.rpartition(SECTION_SEPARATOR)
    if not separator:
        return "", qualified
    return section, key


def _fits_under_header(section: str, key: str) -> bool:
    """Indique si la paire peut être écrite sous un en-tête [section]."""
    if not section or not key:
        return False
    if "]" in section:
        return False
    return key[0] not in _LINE_START_MARKERS


def _header_split(qualified: str) -> tuple[str, str] | None:
    """Cherche, du dernier point au premier, un découpage réinscriptible.

    Returns:
        Tuple (section, clé), ou None si la clé doit rester sans section.
    """
    end = len(qualified)
    while True:
        index = qualified.rfind(SECTION_SEPARATOR, 0, end)
        if index < 0:
            return None
        section, key = qualified[:index], qualified[index + 1:]
        if _fits_under_header(section, key):
            return section, key
        end = index


def to_ini(properties: Mapping[str, str]) -> str:
    """Génère le contenu INI d'un dictionnaire de propriétés.

    Les clés sans section exploitable sont écrites en tête de fichier,
    les autres sont regroupées sous leur section, dans l'ordre
    de première apparition.

    Args:
        properties: Dictionnaire {clé qualifiée: valeur}.

    Returns:
        Contenu INI formaté.
    """
    preamble: list[str] = []
    sections: dict[str, list[str]] = {}

    for qualified, value in properties.items():
        split = _header_split(qualified)
        if split is None:
            preamble.append(f"{qualified}={value}")
        else:
            section, key = split
            sections.setdefault(section, []).append(f"{key}={value}")

    lines = list(preamble)
    for section, entries in sections.items():
        if lines:
            lines.append("")
        lines.append(f"[{section}]")
        lines.extend(entries)

    if not lines:
        return ""
    return "\n".join(lines) + "\n"
