# -*- encoding: utf-8 -*-
# @File   : api.py
# @Time   : 2024/10/13 02:05:17
# @Author : Kariko Lin

"""Flat functions over `IniStore`, for callers not into the mapping API.

    ```python
    ini = parse_from_path('example.ini')
    if ini is not None:
        print(get_value(ini, 'owner', 'name', 'noname'))
        store_to_path(ini, 'output.ini')
        destroy(ini)
    ```
"""

from os import PathLike
from typing import TextIO

from .abstract import CharStream, StreamMode
from .consts import DEFAULT_SECTION
from .model import IniStore
from .parser import IniParser
from .stream import FileStream, StringStream
from .writer import writestream

__all__ = [
    'create_empty', 'destroy',
    'parse_from_text', 'parse_from_stream', 'parse_from_path',
    'get_value', 'set_value', 'remove_value',
    'store_to_stream', 'store_to_path'
]


def create_empty(default_section: str = DEFAULT_SECTION) -> IniStore:
    return IniStore(default_section)


def destroy(ini: IniStore) -> None:
    ini.free()


def parse_from_text(
    text: str, default_section: str = DEFAULT_SECTION
) -> IniStore:
    return IniParser.readstream(
        StringStream(text), default_section=default_section)


def parse_from_stream(
    handle: TextIO | CharStream, default_section: str = DEFAULT_SECTION
) -> IniStore:
    """Parse an opened text file, or any read-mode `CharStream`."""
    if not isinstance(handle, CharStream):
        handle = FileStream(handle)
    return IniParser.readstream(handle, default_section=default_section)


def parse_from_path(
    path: str | PathLike[str],
    encoding: str | None = None,
    default_section: str = DEFAULT_SECTION
) -> IniStore | None:
    """`None` if the file could not be opened."""
    return IniParser(
        str(path), encoding, default_section=default_section).read()


def get_value(
    ini: IniStore, section: str | None, key: str,
    fallback: str | None = None
) -> str | None:
    return ini.get_value(section, key, fallback)


def set_value(
    ini: IniStore, section: str | None, key: str, value: str | None
) -> bool:
    return ini.set_value(section, key, value)


def remove_value(ini: IniStore, section: str | None, key: str) -> bool:
    return ini.remove_value(section, key)


def store_to_stream(
    ini: IniStore, handle: TextIO | CharStream, *,
    pairing: str = ' = ',
    blank_lines: int = 1
) -> None:
    """Serialize into an opened text file, or any write-mode `CharStream`."""
    if not isinstance(handle, CharStream):
        handle = FileStream(handle, StreamMode.WRITE)
    writestream(ini, handle, pairing=pairing, blank_lines=blank_lines)


def store_to_path(
    ini: IniStore, path: str | PathLike[str],
    encoding: str = 'utf-8', *,
    pairing: str = ' = ',
    blank_lines: int = 1
) -> bool:
    """Create (or truncate) `path` and serialize into it.

    `False` if the file could not be opened.
    """
    return IniParser(str(path), encoding).write(
        ini, pairing=pairing, blank_lines=blank_lines)
