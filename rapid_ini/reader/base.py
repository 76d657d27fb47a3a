"""Types de base du lecteur INI."""

from enum import Enum

SECTION_SEPARATOR = "."

# Seuls l'espace et la tabulation comptent comme blancs (ASCII).
WHITESPACE = frozenset(" \t")


class ReaderState(Enum):
    """États de l'automate de lecture INI."""

    UNKNOWN = "unknown"
    READING_SECTION_NAME = "reading_section_name"
    READING_KEY_NAME = "reading_key_name"
    READING_KEY_VALUE = "reading_key_value"
    READING_COMMENT = "reading_comment"


def qualified_key(section: str, key: str) -> str:
    """Construit la clé qualifiée d'une propriété.

    Args:
        section: Nom de la section courante (peut être vide).
        key: Nom de la clé.

    Returns:
        ``key`` si la section est vide, sinon ``section.key``.

    Example:
        >>> qualified_key("Database", "Host")
        'Database.Host'
        >>> qualified_key("", "Host")
        'Host'
    """
    if not section:
        return key
    return f"{section}{SECTION_SEPARATOR}{key}"
