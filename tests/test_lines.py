import io

import pytest

from inistore import CallbackStream, FileStream, StreamModeError, StringStream
from inistore.lines import read_line, write_line


def read_all(stream):
    lines = []
    while (line := read_line(stream)) is not None:
        lines.append(line)
    return lines


def test_read_lines():
    assert read_all(StringStream("a\nb\n\nc")) == ["a", "b", "", "c"]


def test_read_lines_trailing_newline():
    assert read_all(StringStream("a\n")) == ["a"]


def test_read_lines_empty():
    assert read_line(StringStream("")) is None


def test_read_lines_crlf():
    assert read_all(StringStream("a\r\nb\r\n")) == ["a", "b"]


def test_read_long_line():
    text = "x" * 100_000
    assert read_all(FileStream(io.StringIO(text + "\n"))) == [text]


def test_read_line_needs_read_mode():
    with pytest.raises(StreamModeError):
        read_line(CallbackStream(print))


def test_write_line():
    out = []
    s = CallbackStream(out.append)
    write_line(s, "key = value")
    write_line(s, None)
    write_line(s, "")
    assert "".join(out) == "key = value\n\n"


def test_write_line_needs_write_mode():
    with pytest.raises(StreamModeError):
        write_line(StringStream(""), "text")
