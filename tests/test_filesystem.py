"""Tests unitaires pour le module filesystem."""

from unittest.mock import MagicMock

import pytest

from rapid_ini.container import IniContainer
from rapid_ini.errors import IniFileError
from rapid_ini.filesystem import FileTextSource, IniFileLoader, TextSource


# Fixtures


@pytest.fixture
def logger():
    """Logger simulé."""
    return MagicMock()


@pytest.fixture
def ini_file(tmp_path):
    """Crée un fichier INI de test avec fins de ligne Windows."""
    path = tmp_path / "Test.ini"
    path.write_bytes(
        b"; Configuration\r\n"
        b"[Database.Connection]\r\n"
        b"HostName=db.local\r\n"
        b"Port=5432\r\n"
        b"[Empty]\r\n"
        b"Value=   \r\n"
    )
    return path


class TestFileTextSource:
    """Tests pour FileTextSource."""

    def test_implements_interface(self, logger):
        """FileTextSource implémente TextSource."""
        assert isinstance(FileTextSource(logger), TextSource)

    def test_read_text_keeps_content(self, logger, ini_file):
        """Le contenu est lu en entier, '\\r' compris."""
        content = FileTextSource(logger).read_text(ini_file)
        assert content.startswith("; Configuration\r\n")
        logger.log_info.assert_called_once()

    def test_missing_file(self, logger, tmp_path):
        """Un fichier absent lève FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="Fichier non trouvé"):
            FileTextSource(logger).read_text(tmp_path / "absent.ini")
        logger.log_error.assert_called_once()

    def test_decode_error(self, logger, tmp_path):
        """Un contenu non décodable lève IniFileError."""
        path = tmp_path / "latin.ini"
        path.write_bytes("clé=été".encode("latin-1"))

        with pytest.raises(IniFileError, match="utf-8"):
            FileTextSource(logger).read_text(path)
        logger.log_error.assert_called_once()

    def test_custom_encoding(self, logger, tmp_path):
        """L'encodage est configurable."""
        path = tmp_path / "latin.ini"
        path.write_bytes("clé=été".encode("latin-1"))

        content = FileTextSource(logger, encoding="latin-1").read_text(path)

        assert content == "clé=été"


class TestIniFileLoader:
    """Tests pour IniFileLoader."""

    def test_load(self, logger, ini_file):
        """Le fichier est lu et converti en propriétés."""
        properties = IniFileLoader(logger).load(ini_file)

        assert properties == {
            "Database.Connection.HostName": "db.local",
            "Database.Connection.Port": "5432",
            "Empty.Value": "",
        }
        logger.log_info.assert_any_call(f"3 propriété(s) lue(s) dans {ini_file}.")

    def test_load_container(self, logger, ini_file):
        """load_container retourne un IniContainer."""
        container = IniFileLoader(logger).load_container(ini_file)

        assert isinstance(container, IniContainer)
        assert container.get_value_or(
            "Database.Connection", "HostName", "localhost"
        ) == "db.local"

    def test_injected_text_source(self, logger):
        """La source de texte est injectable."""
        source = MagicMock(spec=TextSource)
        source.read_text.return_value = "[S]\nK=V"

        properties = IniFileLoader(logger, text_source=source).load("virtuel.ini")

        assert properties == {"S.K": "V"}
        source.read_text.assert_called_once_with("virtuel.ini")

    def test_missing_file_propagates(self, logger, tmp_path):
        """FileNotFoundError est propagée."""
        with pytest.raises(FileNotFoundError):
            IniFileLoader(logger).load(tmp_path / "absent.ini")
