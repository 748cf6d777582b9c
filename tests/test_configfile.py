import pytest

from inimap.configfile import IniConfig
from inimap.document import Document
from inimap.exceptions import FileError

from . import get_resource, get_resource_path


def test_end_to_end():
	config = IniConfig(get_resource_path("server.ini"))

	assert config.sections == ["server"]
	assert list(config.section("Server").items()) == [
		("host", "localhost"),
		("port", "8080"),
		("timeout", "30"),
	]
	assert config.value("SERVER", "Port") == "8080"


def test_bom_matches_plain():
	assert IniConfig(get_resource_path("bom.ini")).document == \
		IniConfig(get_resource_path("nobom.ini")).document


def test_parse_twice_is_equal():
	path = get_resource_path("mixed.ini")
	assert IniConfig(path).document == IniConfig(path).document


def test_malformed_lines_are_ignored():
	config = IniConfig(get_resource_path("mixed.ini"))

	assert config.sections == ["database", "empty"]
	assert list(config.section("database").items()) == [("user", "root"), ("password", "s3cret")]
	assert len(config.section("empty")) == 0
	assert config.value("database", "orphan") is None


def test_crlf():
	config = IniConfig(get_resource_path("crlf.ini"))
	assert config.value("paths", "root") == "/srv/data"
	assert config.value("paths", "logs") == "/var/log"


def test_missing_values():
	config = IniConfig(get_resource_path("server.ini"))
	assert config.section("client") is None
	assert config.value("client", "host") is None
	assert config.value("server", "user") is None
	assert config.value("server", "user", "nobody") == "nobody"
	assert "client" not in config
	assert "Server" in config


def test_section_is_a_copy():
	config = IniConfig(get_resource_path("server.ini"))
	config.section("server").set("host", "changed")
	assert config.value("server", "host") == "localhost"


def test_missing_file(tmp_path):
	with pytest.raises(FileError):
		IniConfig(str(tmp_path / "nope.ini"))


def test_from_bytes():
	with get_resource("bom.ini", "rb") as f:
		config = IniConfig.from_bytes(f.read())

	assert config.path is None
	assert config.value("s", "k") == "v"
	assert list(config) == ["s"]
	assert len(config) == 1


def test_from_string():
	config = IniConfig.from_string("[a]\nx = 1\n[b]\n")
	assert config.sections == ["a", "b"]


def test_read_into_document():
	doc = Document()
	doc.get_or_insert_default("server").set("host", "old")
	doc.get_or_insert_default("server").set("user", "admin")

	IniConfig(get_resource_path("server.ini")).read(doc)

	assert doc.sections == ["server"]
	assert list(doc.section("server")) == ["host", "user", "port", "timeout"]
	assert doc.value("server", "host") == "localhost"
