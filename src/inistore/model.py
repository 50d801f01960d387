# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/12 23:26:37
# @Author : Kariko Lin

"""
Basically INI Structure: a section map of key maps.

Pairs declared before any `[section]` go to the default section,
which always exists. Pass `None` as section name to address it.
"""

from collections.abc import Mapping, MutableMapping
from typing import Iterator

from .consts import DEFAULT_SECTION
from .hashmap import IniMap


class IniSection(MutableMapping[str, str | None]):
    """... is a dict, just maintaining pairs.

    A value of `None` means the key was declared without any value,
    which is NOT the same as an empty string.
    """

    def __init__(
        self, name: str,
        pairs_to_import: Mapping[str, str | None] | None = None
    ) -> None:
        self._name = name
        self.__raw: IniMap[str | None] = IniMap()
        if pairs_to_import:
            self.update(pairs_to_import)

    @property
    def name(self) -> str:
        return self._name

    def put(self, key: str, value: str | None) -> bool:
        """Insert or replace, `True` if replaced. Empty keys are ignored."""
        return self.__raw.put(key, None if value is None else str(value))

    def remove(self, key: str) -> bool:
        return self.__raw.remove(key)

    def __getitem__(self, key: str) -> str | None:
        return self.__raw[key]

    def __setitem__(self, key: str, value: str | None) -> None:
        self.put(key, value)

    def __delitem__(self, key: str) -> None:
        del self.__raw[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__raw

    def __len__(self) -> int:
        return len(self.__raw)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __str__(self) -> str:
        return f'[{self._name}]'

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self.__raw))

    def clear(self) -> None:
        self.__raw.free()

    def free(self) -> None:
        self.__raw.free()


class IniStore(MutableMapping[str, IniSection]):
    """... is simply a group of sections, representing a whole INI file.

    Iteration follows the bucket order of the underlying hash table,
    so it is neither sorted nor in insertion order.
    """

    def __init__(self, default_section: str = DEFAULT_SECTION) -> None:
        """Init an INI document, with only the (empty) default section."""
        if not default_section:
            raise ValueError('default section name must not be empty.')
        self.__default = default_section
        self.__raw: IniMap[IniSection] = IniMap()
        self.__raw.put(default_section, IniSection(default_section))

    @property
    def default_section(self) -> str:
        return self.__default

    @property
    def header(self) -> IniSection:
        """Pairs not belonging to any declared section."""
        return self.__raw[self.__default]

    def _resolve(self, section: str | None) -> str:
        return self.__default if section is None else section

    def __getitem__(self, key: str | None) -> IniSection:
        return self.__raw[self._resolve(key)]

    def __setitem__(
        self,
        key: str | None,
        value: IniSection | Mapping[str, str | None]
    ) -> None:
        key = self._resolve(key)
        # shouldn't keep ptr to external dict in key setting operation.
        self.__raw.put(key, IniSection(key, value))

    def __delitem__(self, key: str | None) -> None:
        key = self._resolve(key)
        if key == self.__default:
            # the default section can be emptied but never goes away.
            self.__raw[key].free()
            return
        self.__raw[key].free()
        del self.__raw[key]

    def __contains__(self, key: object) -> bool:
        return key is None or key in self.__raw

    def __len__(self) -> int:
        return len(self.__raw)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def setdefault(
        self, section: str | None,
        default: Mapping[str, str | None] | None = None
    ) -> IniSection:
        """Get section, adding it (filled with `default`) if absent.

        May return `None` if the section name is empty.
        """
        section = self._resolve(section)
        if section not in self.__raw:
            self.__raw.put(section, IniSection(section, default))
        return self.__raw.get(section)

    def get_value(
        self, section: str | None, key: str, fallback: str | None = None
    ) -> str | None:
        """Value of `key` in `section`, or `fallback` if either is missing.

        Keys declared without value also give `fallback`.
        """
        sect = self.__raw.get(self._resolve(section))
        if sect is None or key not in sect:
            return fallback
        value = sect[key]
        return fallback if value is None else value

    def set_value(
        self, section: str | None, key: str, value: str | None
    ) -> bool:
        """Set a pair, creating the section on demand.

        Returns `False` (and changes nothing) if `key` or `section` is empty.
        """
        section = self._resolve(section)
        if not key or not isinstance(key, str) or not section:
            return False
        self.setdefault(section).put(key, value)
        return True

    def remove_value(self, section: str | None, key: str) -> bool:
        sect = self.__raw.get(self._resolve(section))
        return sect is not None and sect.remove(key)

    def sections(self) -> list[IniSection]:
        """All sections in enumeration order, the default one included."""
        return [i.value for i in self.__raw.enumerate()]

    def free(self) -> None:
        """Tear down every section, keeping an empty default one."""
        for sect in self.sections():
            sect.free()
        self.__raw.free()
        self.__raw.put(self.__default, IniSection(self.__default))

    def clear(self) -> None:
        self.free()

    def update(
        self, another: 'IniStore | Mapping' = (), /, **kwargs
    ) -> None:
        """To merge `another` into self, pair by pair.

        Existing sections are extended, never replaced.
        """
        if isinstance(another, IniStore):
            for sect in another.sections():
                name = (self.__default if sect.name == another.default_section
                        else sect.name)
                self.setdefault(name).update(sect)
            another = ()
        pairs = another.items() if isinstance(another, Mapping) else another
        for name, sect in [*pairs, *kwargs.items()]:
            if (target := self.setdefault(name)) is not None:
                target.update(sect)

    def __repr__(self) -> str:
        return 'IniStore { .default = %r, .sections = %d }' % (
            self.__default, len(self.__raw))
