"""Tests unitaires pour le lecteur INI."""

import pytest

from rapid_ini.reader import (
    IniReader,
    ReaderState,
    parse,
    parse_buffer,
    qualified_key,
)


class TestQualifiedKey:
    """Tests pour la fonction qualified_key."""

    def test_without_section(self):
        """Une section vide donne la clé seule."""
        assert qualified_key("", "Host") == "Host"

    def test_with_section(self):
        """La section et la clé sont jointes par un point."""
        assert qualified_key("Database", "Host") == "Database.Host"

    def test_names_are_verbatim(self):
        """Aucun espace n'est supprimé."""
        assert qualified_key(" S ", " k") == " S . k"


class TestReaderState:
    """Tests pour l'énumération ReaderState."""

    def test_five_states(self):
        """L'automate comporte exactement cinq états."""
        assert {state.name for state in ReaderState} == {
            "UNKNOWN",
            "READING_SECTION_NAME",
            "READING_KEY_NAME",
            "READING_KEY_VALUE",
            "READING_COMMENT",
        }


class TestParseScenarios:
    """Scénarios de référence de la lecture."""

    def test_sections_and_keys(self):
        """Les clés sont préfixées par leur section."""
        result = parse("[Database]\nHost=localhost\nPort=5432\n")
        assert result == {"Database.Host": "localhost", "Database.Port": "5432"}

    def test_standalone_comment_and_empty_value(self):
        """Clé hors section, commentaire ignoré, valeur vide."""
        result = parse("Standalone=1\n;comment\n[S]\nK=\n")
        assert result == {"Standalone": "1", "S.K": ""}

    def test_whitespace_only_value_is_empty(self):
        """Une valeur faite d'espaces devient vide, la clé garde son espace."""
        assert parse("Key =   \n") == {"Key ": ""}

    def test_last_line_without_newline(self):
        """La dernière ligne sans terminateur est prise en compte."""
        assert parse("A=1") == {"A": "1"}

    def test_unterminated_section_is_committed(self):
        """Un en-tête sans ']' devient quand même la section courante."""
        assert parse("[Broken\nX=9\n") == {"Broken.X": "9"}

    def test_unterminated_section_at_end_of_input(self):
        """Un en-tête sans ']' en fin de texte ne produit aucune entrée."""
        assert parse("A=1\n[Broken") == {"A": "1"}


class TestParseLineEndings:
    """Tests de la gestion des fins de ligne."""

    def test_crlf(self):
        """Les '\\r' sont ignorés."""
        result = parse("[S]\r\nK=V\r\nL=W\r\n")
        assert result == {"S.K": "V", "S.L": "W"}

    def test_carriage_return_inside_value(self):
        """Un '\\r' au milieu d'une valeur est supprimé."""
        assert parse("K=a\rb\n") == {"K": "ab"}

    def test_carriage_return_does_not_start_key(self):
        """Un '\\r' isolé en début de ligne n'ouvre pas de clé."""
        assert parse("\r\rK=1") == {"K": "1"}

    def test_empty_input(self):
        """Un texte vide donne un dictionnaire vide."""
        assert parse("") == {}

    def test_blank_lines(self):
        """Les lignes vides ou blanches ne produisent rien."""
        assert parse("\n   \n\t\n") == {}


class TestParseKeys:
    """Tests de la lecture des clés et valeurs."""

    def test_leading_whitespace_skipped(self):
        """Les blancs avant la clé sont ignorés."""
        assert parse("  \tKey=Value") == {"Key": "Value"}

    def test_value_kept_verbatim(self):
        """Les blancs autour d'une valeur non vide sont conservés."""
        assert parse("K=  a b  \n") == {"K": "  a b  "}

    def test_tabs_only_value_is_empty(self):
        """Une valeur faite de tabulations devient vide."""
        assert parse("K=\t \t\n") == {"K": ""}

    def test_other_whitespace_is_not_blank(self):
        """Seuls l'espace et la tabulation sont des blancs."""
        assert parse("K=\x0b\n") == {"K": "\x0b"}

    def test_value_contains_equal_sign(self):
        """La clé s'arrête au premier '='."""
        assert parse("url=http://x?a=b") == {"url": "http://x?a=b"}

    def test_value_contains_delimiters(self):
        """'[', ']' et ';' font partie de la valeur."""
        assert parse("K=[a];b") == {"K": "[a];b"}

    def test_key_without_equal_is_discarded(self):
        """Une ligne sans '=' ne produit rien."""
        assert parse("orphan\nK=1\norphan2") == {"K": "1"}

    def test_line_starting_with_equal(self):
        """Un '=' en début de ligne est le premier caractère de la clé."""
        assert parse("=a=b\n") == {"=a": "b"}
        assert parse("=a\n") == {}

    def test_last_write_wins(self):
        """Une clé répétée garde la dernière valeur."""
        assert parse("K=1\nK=2\n") == {"K": "2"}

    def test_same_key_in_two_sections(self):
        """La même clé dans deux sections donne deux entrées."""
        result = parse("[A]\nK=1\n[B]\nK=2\n")
        assert result == {"A.K": "1", "B.K": "2"}

    def test_dotted_section_name(self):
        """Les points dans un nom de section sont conservés."""
        result = parse("[Database.Connection]\nHostName=db\n")
        assert result == {"Database.Connection.HostName": "db"}


class TestParseSectionsAndComments:
    """Tests des en-têtes de section et des commentaires."""

    def test_section_persists(self):
        """La section reste active jusqu'au prochain en-tête."""
        result = parse("[S]\nA=1\n\n;c\nB=2\n[T]\nC=3")
        assert result == {"S.A": "1", "S.B": "2", "T.C": "3"}

    def test_trailing_text_after_section_ignored(self):
        """Le texte après ']' est ignoré jusqu'à la fin de ligne."""
        result = parse("[S] trailing=ignored\nK=1\n")
        assert result == {"S.K": "1"}

    def test_indented_section(self):
        """Un en-tête précédé de blancs est reconnu."""
        assert parse("   [S]\nK=1") == {"S.K": "1"}

    def test_section_name_verbatim(self):
        """Le nom de section n'est pas nettoyé."""
        assert parse("[ S ]\nK=1") == {" S .K": "1"}

    def test_empty_section_resets_prefix(self):
        """Un en-tête vide revient aux clés sans section."""
        assert parse("[S]\n[]\nK=1") == {"K": "1"}

    def test_comment_line_ignored(self):
        """Une ligne de commentaire ne produit rien."""
        assert parse("  ; K=1\nL=2") == {"L": "2"}

    def test_semicolon_inside_key(self):
        """Un ';' après le début de ligne fait partie de la clé."""
        assert parse("a;b=1") == {"a;b": "1"}


class TestParseInputs:
    """Tests des différentes formes d'entrée."""

    def test_iterable_of_characters(self):
        """Tout itérable de caractères est accepté."""
        assert parse(iter("[S]\nK=V")) == {"S.K": "V"}
        assert parse(list("A=1\nB=2")) == {"A": "1", "B": "2"}

    def test_deterministic(self):
        """Deux lectures du même texte donnent le même résultat."""
        text = "[S]\nA=1\nB= 2 \n;c\n[T\nC=\n"
        assert parse(text) == parse(text)

    def test_returns_fresh_mapping(self):
        """Chaque appel retourne un nouveau dictionnaire."""
        first = parse("A=1")
        first["B"] = "2"
        assert parse("A=1") == {"A": "1"}


class TestParseBuffer:
    """Tests pour parse_buffer."""

    def test_reads_prefix_only(self):
        """Seuls les premiers caractères sont lus."""
        assert parse_buffer("A=1\nB=2\n", 4) == {"A": "1"}

    def test_cut_inside_value(self):
        """Une coupure dans une valeur valide la valeur partielle."""
        assert parse_buffer("Key=Value", 5) == {"Key": "V"}

    def test_length_longer_than_data(self):
        """Une longueur trop grande lit tout le contenu."""
        assert parse_buffer("A=1", 100) == {"A": "1"}

    def test_zero_length(self):
        """Une longueur nulle donne un dictionnaire vide."""
        assert parse_buffer("A=1", 0) == {}

    def test_negative_length_raises(self):
        """Une longueur négative lève ValueError."""
        with pytest.raises(ValueError, match="Longueur invalide"):
            parse_buffer("A=1", -1)


class TestIniReader:
    """Tests pour le service IniReader."""

    def test_read(self):
        """IniReader.read délègue à parse."""
        assert IniReader.read("[S]\nK=V") == {"S.K": "V"}

    def test_read_buffer(self):
        """IniReader.read_buffer délègue à parse_buffer."""
        assert IniReader.read_buffer("A=1\nB=2", 3) == {"A": "1"}
