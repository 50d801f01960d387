# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2024/10/12 21:03:18
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod
from enum import Enum


EOF = ''


class IniError(Exception):
    """Base class of errors raised by this package."""
    pass


class StreamModeError(IniError):
    """Raised when reading a write-mode stream, or vice versa."""
    pass


class StreamMode(str, Enum):
    READ = 'r'
    WRITE = 'w'


class CharStream(metaclass=ABCMeta):
    """Sequential character I/O, opened in exactly one direction.

    Subclasses implement `eof()` and `_getc()` and/or `_putc()`;
    the public `getc()` / `putc()` guard the direction and keep `peek`.
    """

    def __init__(self, mode: StreamMode) -> None:
        self._mode = StreamMode(mode)
        self._peek = EOF

    @property
    def mode(self) -> StreamMode:
        return self._mode

    @property
    def peek(self) -> str:
        """The last character produced by `getc()`, `EOF` if none."""
        return self._peek

    def getc(self) -> str:
        if self._mode is not StreamMode.READ:
            raise StreamModeError(f'{self} is not opened for reading.')
        self._peek = EOF if self.eof() else self._getc()
        return self._peek

    def putc(self, ch: str) -> None:
        if self._mode is not StreamMode.WRITE:
            raise StreamModeError(f'{self} is not opened for writing.')
        self._putc(ch)

    @abstractmethod
    def eof(self) -> bool:
        raise NotImplementedError

    # one-way streams only override the direction they support.
    def _getc(self) -> str:
        raise StreamModeError(f'{self} is not opened for reading.')

    def _putc(self, ch: str) -> None:
        raise StreamModeError(f'{self} is not opened for writing.')

    def __str__(self) -> str:
        return f'<{type(self).__name__} ({self._mode.value})>'


class FileHandler[T](metaclass=ABCMeta):
    def __init__(self, filename: str) -> None:
        self._fn = filename

    @abstractmethod
    def read(self) -> T | None:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> bool:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn
