import io
import logging
import textwrap

import pytest

from inistore import DEFAULT_SECTION, IniParser, IniStore, StringStream
from inistore.parser import parse_section, split_pair, strip_comment, unquote

EXAMPLE = textwrap.dedent(
    """\
    ; leading comment
    version = 1.0
    language = python

    [owner]
    name = Alice
    organization = "Acme; Inc."   # trailing comment

    [db]
    port = 5432
    server: 192.168.0.1
    read_only
    """
)


def parse(text: str) -> IniStore:
    return IniParser.readstream(StringStream(text))


@pytest.mark.parametrize(
    "line, expected",
    [
        ("key = value ; comment", "key = value "),
        ("key = value # comment", "key = value "),
        ("; whole line", ""),
        ('key = "a;b"', 'key = "a;b"'),
        ('key = "a;b" ; c', 'key = "a;b" '),
        ("no comment", "no comment"),
        ('size = 5" ; inches', 'size = 5" '),
        ('a = "x" ; "y;z"', 'a = "x" '),
    ],
)
def test_strip_comment(line, expected):
    assert strip_comment(line) == expected


def test_parse_section():
    assert parse_section("[owner]") == "owner"
    assert parse_section("[owner] trailing") == "owner"
    assert parse_section("[broken") is None
    assert parse_section("[]") is None
    assert parse_section("owner") is None


def test_split_pair():
    assert split_pair("key = value") == ("key", "value")
    assert split_pair("key: value") == ("key", "value")
    assert split_pair("url = http://x") == ("url", "http://x")
    assert split_pair("bare") == ("bare", None)
    assert split_pair("key =") == ("key", "")
    assert split_pair("= value") == ("", "value")


def test_unquote():
    assert unquote('"hello world"') == "hello world"
    assert unquote('""') == ""
    assert unquote('"') == '"'
    assert unquote('"half') == '"half'
    assert unquote('say "hi"') == 'say "hi"'


def test_example():
    ini = parse(EXAMPLE)

    assert ini.get_value(None, "version") == "1.0"
    assert ini.get_value(DEFAULT_SECTION, "language") == "python"
    assert ini.get_value("owner", "name") == "Alice"
    assert ini.get_value("owner", "organization") == "Acme; Inc."
    assert ini.get_value("db", "port") == "5432"
    assert ini.get_value("db", "server") == "192.168.0.1"
    assert "read_only" in ini["db"]
    assert ini["db"]["read_only"] is None
    assert set(ini) == {DEFAULT_SECTION, "owner", "db"}


def test_owner_db_scenario():
    ini = parse("[owner]\nname = Alice\n[db]\nport = 5432\n")

    assert ini.get_value("owner", "name", "?") == "Alice"
    assert ini.get_value("db", "port", "?") == "5432"
    assert ini.get_value("db", "missing", "default") == "default"


def test_quotes_are_stripped():
    ini = parse('quoted = "hello world"\nplain = hello world\n')
    assert ini.get_value(None, "quoted") == "hello world"
    assert ini.get_value(None, "plain") == "hello world"


def test_comment_inside_quotes_survives():
    assert parse('key = "a;b"').get_value(None, "key") == "a;b"
    assert parse('key = "a#b"').get_value(None, "key") == "a#b"


def test_no_escape_processing():
    assert parse(r'key = "a\nb"').get_value(None, "key") == r"a\nb"


def test_no_header_goes_to_default():
    ini = parse("a = 1\nb = 2\n")
    assert len(ini) == 1
    assert dict(ini.header) == {"a": "1", "b": "2"}


def test_empty_value_is_not_none():
    ini = parse("empty =\nbare\n")
    assert ini.header["empty"] == ""
    assert ini.header["bare"] is None


def test_later_value_wins():
    ini = parse("[s]\nk = 1\nk = 2\n")
    assert ini["s"]["k"] == "2"
    assert len(ini["s"]) == 1


def test_reopened_section_merges():
    ini = parse("[s]\na = 1\n[t]\nb = 2\n[s]\nc = 3\n")
    assert dict(ini["s"]) == {"a": "1", "c": "3"}


def test_malformed_lines_are_skipped():
    ini = parse("[s]\na = 1\n[broken\nb = 2\n[]\n= orphan\n  ;  \nc = 3\n")

    # the broken header did not switch section
    assert dict(ini["s"]) == {"a": "1", "b": "2", "c": "3"}
    assert "broken" not in ini
    assert dict(ini.header) == {}


def test_whitespace_is_trimmed():
    ini = parse("   [s]   \n\t key \t=\t value \t\n")
    assert ini["s"]["key"] == "value"


def test_crlf():
    ini = parse("[s]\r\nk = v\r\n")
    assert ini["s"]["k"] == "v"


def test_custom_default_section():
    ini = IniParser.readstream(StringStream("k = v"), default_section="root")
    assert ini.default_section == "root"
    assert ini["root"]["k"] == "v"
    assert DEFAULT_SECTION not in ini


def test_readstream_into_existing_store():
    ini = parse("[s]\na = 1\n")
    IniParser.readstream(StringStream("[s]\nb = 2\n[t]\nc = 3\n"), ini)
    assert dict(ini["s"]) == {"a": "1", "b": "2"}
    assert ini["t"]["c"] == "3"


def test_read_file(tmp_path):
    path = tmp_path / "example.ini"
    path.write_text(EXAMPLE, encoding="utf-8")

    ini = IniParser(str(path), "utf-8").read()
    assert ini is not None
    assert ini.get_value("owner", "name") == "Alice"


def test_read_missing_file(tmp_path):
    assert IniParser(str(tmp_path / "missing.ini")).read() is None


def test_read_guesses_encoding(tmp_path):
    path = tmp_path / "gbk.ini"
    text = "[owner]\nname = 张三\ncity = 北京市海淀区中关村大街\n"
    path.write_bytes(text.encode("gbk"))

    # wrong declared encoding falls back to chardet
    ini = IniParser(str(path), "utf-8").read()
    assert ini is not None
    assert set(ini["owner"]) == {"name", "city"}


def test_unclosed_quote_does_not_hide_comment():
    ini = parse('size = 5" ; inches\nnext = 1\n')
    assert ini.get_value(None, "size") == '5"'
    assert ini.get_value(None, "next") == "1"


def test_read_unknown_encoding(tmp_path, caplog):
    path = tmp_path / "example.ini"
    path.write_text(EXAMPLE, encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        assert IniParser(str(path), "no-such-codec").read() is None
    assert "Unable to read INI" in caplog.text


def test_write_unknown_encoding(tmp_path):
    path = tmp_path / "out.ini"
    parser = IniParser(str(path), "no-such-codec")
    assert parser.write(parse(EXAMPLE)) is False
