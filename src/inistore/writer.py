# -*- encoding: utf-8 -*-
# @File   : writer.py
# @Time   : 2024/10/13 01:02:44
# @Author : Kariko Lin

"""INI serializer.

Default section pairs go first, without header,
then every other section in the store's enumeration order:

    ```ini
    version = 1.0

    [account]
    user = example

    [database]
    port = 5432
    ```

Nothing gets quoted or escaped on the way out. So values with comment chars,
surrounding quotes or surrounding spaces won't read back the same.
"""

from warnings import warn

from .abstract import CharStream, StreamMode, StreamModeError
from .consts import COMMENT_CHARS, DELIMITER_CHARS, QUOTE_CHAR
from .lines import write_line
from .model import IniSection, IniStore


_LINE_BREAKS = '\r\n'


def _is_lossy_section(name: str) -> bool:
    return any(c in name for c in ']' + _LINE_BREAKS + COMMENT_CHARS)


def _is_lossy(key: str, value: str) -> bool:
    if any(c in key for c in
           COMMENT_CHARS + DELIMITER_CHARS + QUOTE_CHAR + _LINE_BREAKS):
        return True
    if any(c in value for c in _LINE_BREAKS):
        return True
    if key.startswith('[') or key != key.strip():
        return True
    if any(c in value for c in COMMENT_CHARS):
        return True
    if value != value.strip():
        return True
    return len(value) >= 2 and value[0] == value[-1] == QUOTE_CHAR


def _write_pairs(
    stream: CharStream, section: IniSection, pairing: str
) -> int:
    cnt = 0
    for key, val in section.items():
        # a delimiter-only line must not come back as `= value`
        if not key:
            continue
        val = '' if val is None else val
        if _is_lossy(key, val):
            warn(
                f'{section}: pair "{key}" with value "{val}" is written '
                'as is, and will not be read back identically.')
        write_line(stream, f'{key}{pairing}{val}')
        cnt += 1
    return cnt


def _write_blanks(stream: CharStream, count: int) -> None:
    for _ in range(count):
        stream.putc('\n')


def writestream(
    instance: IniStore, stream: CharStream, *,
    pairing: str = ' = ',
    blank_lines: int = 1
) -> None:
    """Serialize `instance` into a write-mode stream.

    Args:
        pairing: how to connect key with value?
        blank_lines: how many lines between sections?
    """
    if stream.mode is not StreamMode.WRITE:
        raise StreamModeError(f'{stream} is not opened for writing.')

    if _write_pairs(stream, instance.header, pairing):
        _write_blanks(stream, blank_lines)

    first = True
    for sect in instance.sections():
        if sect.name == instance.default_section:
            continue
        if not first:
            _write_blanks(stream, blank_lines)
        first = False
        if _is_lossy_section(sect.name):
            warn(
                f'section name "{sect.name}" is written as is, '
                'and will not be read back identically.')
        write_line(stream, str(sect))
        _write_pairs(stream, sect, pairing)
