# -*- encoding: utf-8 -*-
# @File   : stream.py
# @Time   : 2024/10/12 22:17:45
# @Author : Kariko Lin

"""Concrete character streams.

- `StringStream`: reads an in-memory string.
- `FileStream`: reads or writes an opened text file (or any `TextIO`).
- `CallbackStream`: hands every written character to a callable,
  e.g. `CallbackStream(sys.stdout.write)`.
"""

from typing import Callable, TextIO

from .abstract import EOF, CharStream, StreamMode


class StringStream(CharStream):
    def __init__(self, text: str) -> None:
        super().__init__(StreamMode.READ)
        self.__text = text
        self.__pos = 0
        # C-string alike: an embedded NUL terminates.
        self.__end = text.find('\0')
        if self.__end < 0:
            self.__end = len(text)

    def eof(self) -> bool:
        return self.__pos >= self.__end

    def _getc(self) -> str:
        ch = self.__text[self.__pos]
        self.__pos += 1
        return ch


class FileStream(CharStream):
    def __init__(self, handle: TextIO, mode: StreamMode = StreamMode.READ):
        super().__init__(mode)
        self.__fp = handle
        # one char lookahead, so that `eof()` is exact before reading.
        self.__next: str | None = None

    def __fill(self) -> str:
        if self.__next is None:
            self.__next = self.__fp.read(1)
        return self.__next

    def eof(self) -> bool:
        if self.mode is StreamMode.WRITE:
            return True
        return self.__fill() == EOF

    def _getc(self) -> str:
        ch = self.__fill()
        self.__next = None
        return ch

    def _putc(self, ch: str) -> None:
        self.__fp.write(ch)

    def __str__(self) -> str:
        name = getattr(self.__fp, 'name', None)
        return super().__str__() if name is None else str(name)


class CallbackStream(CharStream):
    def __init__(self, write: Callable[[str], object]) -> None:
        super().__init__(StreamMode.WRITE)
        self.__write = write

    def eof(self) -> bool:
        return True

    def _putc(self, ch: str) -> None:
        self.__write(ch)
