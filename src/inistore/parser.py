# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/13 00:20:33
# @Author : Kariko Lin

"""Line based INI reader. Supported (per line, after dropping comments):

    ```ini
    key = value         ; goes to the default section
    [section]           # following pairs go to `section`
    key: "a;b"          ; quotes protect comment chars, and get stripped
    bare_key            ; declared without value (None)
    ```

Malformed lines (`[no_close`, `= no key`) are skipped silently,
so reading never fails due to the content.
"""

import logging
from io import StringIO

import chardet

from .abstract import CharStream, FileHandler, StreamMode
from .consts import COMMENT_CHARS, DEFAULT_SECTION, DELIMITER_CHARS, QUOTE_CHAR
from .lines import read_line
from .model import IniStore
from .stream import FileStream
from .writer import writestream


def strip_comment(line: str) -> str:
    """Cut `line` at the first comment char outside double quotes.

    A quote without its closing one is just a character.
    """
    idx = 0
    while idx < len(line):
        ch = line[idx]
        if ch == QUOTE_CHAR:
            close = line.find(QUOTE_CHAR, idx + 1)
            if close >= 0:
                idx = close + 1
                continue
        elif ch in COMMENT_CHARS:
            return line[:idx]
        idx += 1
    return line


def parse_section(line: str) -> str | None:
    """`[name]` => `name`. `None` if the header is not closed or empty."""
    if not line.startswith('['):
        return None
    end = line.find(']')
    if end < 0:
        return None
    return line[1:end] or None


def unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] == QUOTE_CHAR:
        return value[1:-1]
    return value


def split_pair(line: str) -> tuple[str, str | None]:
    """Split at the first `=` or `:`.

    Without any delimiter, the whole line is the key and value is `None`.
    """
    for idx, ch in enumerate(line):
        if ch in DELIMITER_CHARS:
            return line[:idx].strip(), unquote(line[idx + 1:].strip())
    return line.strip(), None


class IniParser(FileHandler[IniStore]):
    def __init__(
        self, filename: str, encoding: str | None = None, *,
        default_section: str = DEFAULT_SECTION
    ) -> None:
        super().__init__(filename)
        self._codec = encoding
        self._default = default_section

    @staticmethod
    def readstream(
        stream: CharStream,
        ins: IniStore | None = None,
        default_section: str = DEFAULT_SECTION
    ) -> IniStore:
        """读取字符流，也可以读进已有的`ins`里（用于合并多个 INI）。

        如没有特殊需求，直接调用`self.read()`便是。
        """
        if ins is None:
            ins = IniStore(default_section)
        this_sect = ins.header
        while (i := read_line(stream)) is not None:
            i = strip_comment(i).strip()
            if not i:
                continue
            if i[0] == '[':
                if (name := parse_section(i)) is None:
                    logging.debug(f'Malformed section header skipped: {i}')
                else:
                    this_sect = ins.setdefault(name)
                continue
            key, val = split_pair(i)
            if not key:
                logging.debug(f'Pair without key skipped: {i}')
                continue
            this_sect[key] = val
        return ins

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if not codec['encoding'] or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except UnicodeDecodeError:
            buf = raw.decode('gbk', errors='replace')
        return StringIO(buf)

    def read(self) -> IniStore | None:
        """读取`IniParser`实例指定的文件。

        If the file is NOT FOUND, or NOT READABLE,
        a warning gets logged and `None` is returned.
        """
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong,
            # just `UnicodeDecodeError` and fallback to `chardet`.
            try:
                with open(self._fn, 'r', encoding=self._codec) as fp:
                    return self.readstream(
                        FileStream(fp), default_section=self._default)
            except UnicodeDecodeError:
                logging.info(f'{self._fn}: guessing encoding with chardet.')
                return self.readstream(
                    FileStream(self._decode_file(self._fn)),
                    default_section=self._default)
        # LookupError: unknown encoding name.
        except (OSError, LookupError) as e:
            logging.warning(f'Unable to read INI: {e}')
            return None

    def write(
        self, instance: IniStore, *,
        pairing: str = ' = ',
        blank_lines: int = 1
    ) -> bool:
        """保存到 INI 文件（覆盖）。

        If the file is unable to open, a warning gets logged
        and `False` is returned.
        """
        try:
            fp = open(self._fn, 'w', encoding=self._codec or 'utf-8')
        except (OSError, LookupError) as e:
            logging.warning(f'Unable to write INI: {e}')
            return False
        with fp:
            writestream(
                instance, FileStream(fp, StreamMode.WRITE),
                pairing=pairing, blank_lines=blank_lines)
        return True

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f" ({self._codec})"
