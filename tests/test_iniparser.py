import io

import pytest

from arrowhead import iniparser
from arrowhead.inidict import IniDictionary


@pytest.fixture
def ini():
    d = IniDictionary()
    iniparser.set_entry(d, "Server", None)
    iniparser.set_entry(d, "Server:Port", "8080")
    iniparser.set_entry(d, "Server:Host", "localhost")
    iniparser.set_entry(d, "flags", None)
    iniparser.set_entry(d, "flags:debug", "yes")
    iniparser.set_entry(d, "flags:quiet", "False")
    iniparser.set_entry(d, "flags:weird", "maybe")
    iniparser.set_entry(d, "flags:empty", "")
    return d


def test_set_entry_lowercases_key(ini):
    assert "server:port" in ini
    assert "Server:Port" not in ini


def test_section_count_and_names(ini):
    assert iniparser.section_count(ini) == 2
    assert iniparser.section_name(ini, 0) == "server"
    assert iniparser.section_name(ini, 1) == "flags"
    assert iniparser.section_name(ini, 2) is None
    assert iniparser.section_name(ini, -1) is None


def test_section_count_empty():
    assert iniparser.section_count(IniDictionary()) == 0


def test_section_keys(ini):
    assert iniparser.section_keys(ini, "server") == ["server:port", "server:host"]
    assert iniparser.section_key_count(ini, "server") == 2
    assert iniparser.section_key_count(ini, "flags") == 4


def test_section_keys_missing_section(ini):
    assert iniparser.section_keys(ini, "nothing") == []
    assert iniparser.section_key_count(ini, "nothing") == 0


def test_get_string_case_insensitive(ini):
    assert iniparser.get_string(ini, "SERVER:HOST", "x") == "localhost"
    assert iniparser.get_string(ini, "server:missing", "x") == "x"
    assert iniparser.get_string(ini, None, "x") == "x"


@pytest.mark.parametrize(
    "text, expected",
    [("42", 42), ("042", 34), ("0x42", 66), ("  -7", -7), ("12abc", 12), ("abc", 0)],
)
def test_get_int_c_notation(text, expected):
    d = IniDictionary()
    iniparser.set_entry(d, "s:v", text)
    assert iniparser.get_int(d, "s:v", -1) == expected


def test_get_int_notfound(ini):
    assert iniparser.get_int(ini, "server:nope", 99) == 99
    assert iniparser.get_int(ini, "server:port", 99) == 8080


def test_get_double(ini):
    d = IniDictionary()
    iniparser.set_entry(d, "s:pi", "3.5 units")
    iniparser.set_entry(d, "s:bad", "none")
    assert iniparser.get_double(d, "s:pi", -1.0) == 3.5
    assert iniparser.get_double(d, "s:bad", -1.0) == 0.0
    assert iniparser.get_double(d, "s:missing", -1.0) == -1.0


def test_get_boolean(ini):
    assert iniparser.get_boolean(ini, "flags:debug", -1) == 1
    assert iniparser.get_boolean(ini, "flags:quiet", -1) == 0
    assert iniparser.get_boolean(ini, "flags:weird", -1) == -1
    assert iniparser.get_boolean(ini, "flags:empty", -1) == -1
    assert iniparser.get_boolean(ini, "flags:missing", 5) == 5


def test_find_entry(ini):
    assert iniparser.find_entry(ini, "server")
    assert iniparser.find_entry(ini, "SERVER:port")
    assert not iniparser.find_entry(ini, "other")


def test_unset_entry(ini):
    iniparser.unset_entry(ini, "Server:Host")
    assert not iniparser.find_entry(ini, "server:host")
    assert iniparser.section_key_count(ini, "server") == 1


def test_dump(ini):
    out = io.StringIO()
    iniparser.dump(ini, out)
    lines = out.getvalue().splitlines()
    assert lines[0] == "[server]=UNDEF"
    assert lines[1] == "[server:port]=[8080]"
    assert len(lines) == len(ini)


def test_dump_section_ini(ini):
    out = io.StringIO()
    iniparser.dump_section_ini(ini, "server", out)
    text = out.getvalue()
    assert text.startswith("\n[server]\n")
    entries = [line.split("=", 1) for line in text.strip().splitlines()[1:]]
    assert [(k.strip(), v.strip()) for k, v in entries] == [
        ("port", "8080"),
        ("host", "localhost"),
    ]


def test_dump_section_ini_missing_section(ini):
    out = io.StringIO()
    iniparser.dump_section_ini(ini, "absent", out)
    assert out.getvalue() == ""


def test_dump_ini_contains_every_section(ini):
    out = io.StringIO()
    iniparser.dump_ini(ini, out)
    text = out.getvalue()
    assert "[server]" in text
    assert "[flags]" in text
    assert text.endswith("\n\n")


def test_dump_ini_without_sections():
    d = IniDictionary()
    d.set("a:b", "c")
    out = io.StringIO()
    iniparser.dump_ini(d, out)
    assert out.getvalue() == "a:b = c\n"