# -*- encoding: utf-8 -*-
# @File   : hashmap.py
# @Time   : 2024/10/12 21:40:02
# @Author : Kariko Lin

"""String-keyed hash table with separate chaining.

`dict` would do for storage, but INI output is expected to follow
the bucket order of this table (djb2 hash, power-of-two buckets),
so we keep our own.
"""

import logging
from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Iterator

START_CAPACITY = 16
LOAD_FACTOR = 0.75

_HASH_SEED = 5381
_HASH_MASK = 0xFFFFFFFF  # unsigned int


def djb2(key: str) -> int:
    """djb2 string hash: http://www.cse.yorku.ca/~oz/hash.html"""
    h = _HASH_SEED
    for byte in key.encode('utf-8'):
        h = (h * 33 + byte) & _HASH_MASK
    return h


@dataclass(slots=True)
class MapEntry[V]:
    hash: int
    key: str
    value: V
    next: 'MapEntry[V] | None' = None


class IniMap[V](MutableMapping[str, V]):
    """Chained hash table. Iterates in bucket order, NOT insertion order."""

    def __init__(self) -> None:
        self.__buckets: list[MapEntry[V] | None] = [None] * START_CAPACITY
        self.__size = 0

    @property
    def capacity(self) -> int:
        return len(self.__buckets)

    @property
    def load_factor(self) -> float:
        return self.__size / len(self.__buckets)

    def __index(self, h: int) -> int:
        # capacity is always a power of two
        return h & (len(self.__buckets) - 1)

    def __find(self, key: str) -> MapEntry[V] | None:
        h = djb2(key)
        entry = self.__buckets[self.__index(h)]
        while entry is not None:
            if entry.hash == h and entry.key == key:
                return entry
            entry = entry.next
        return None

    def __expand(self) -> None:
        old = self.__buckets
        self.__buckets = [None] * (len(old) << 1)
        for head in old:
            entry = head
            while entry is not None:
                nxt = entry.next
                idx = self.__index(entry.hash)
                entry.next = self.__buckets[idx]
                self.__buckets[idx] = entry
                entry = nxt
        logging.debug(f'IniMap grown to {len(self.__buckets)} buckets.')

    def put(self, key: str, value: V) -> bool:
        """Insert or replace.

        Returns `True` if an existing value got replaced.
        Empty (or non-str) keys are silently ignored, returning `False`.
        """
        if not isinstance(key, str) or not key:
            logging.debug(f'IniMap.put() ignored invalid key {key!r}.')
            return False

        h = djb2(key)
        idx = self.__index(h)
        entry = self.__buckets[idx]
        tail = None
        while entry is not None:
            if entry.hash == h and entry.key == key:
                entry.value = value
                return True
            tail, entry = entry, entry.next

        if tail is None:
            self.__buckets[idx] = MapEntry(h, key, value)
        else:
            tail.next = MapEntry(h, key, value)
        self.__size += 1
        if self.load_factor > LOAD_FACTOR:
            self.__expand()
        return False

    def get(self, key: str, default: V | None = None) -> V | None:
        if not isinstance(key, str):
            return default
        entry = self.__find(key)
        return default if entry is None else entry.value

    def remove(self, key: str) -> bool:
        """Unlink `key`. Returns whether anything was removed."""
        if not isinstance(key, str):
            return False
        h = djb2(key)
        idx = self.__index(h)
        prev, entry = None, self.__buckets[idx]
        while entry is not None:
            if entry.hash == h and entry.key == key:
                if prev is None:
                    self.__buckets[idx] = entry.next
                else:
                    prev.next = entry.next
                self.__size -= 1
                return True
            prev, entry = entry, entry.next
        return False

    def enumerate(self) -> list[MapEntry[V]]:
        """Snapshot of all entries, bucket by bucket, chain by chain."""
        ret: list[MapEntry[V]] = []
        for head in self.__buckets:
            entry = head
            while entry is not None:
                ret.append(entry)
                entry = entry.next
        return ret

    def free(self) -> None:
        """Drop every entry and shrink back to the starting capacity."""
        for entry in self.enumerate():
            entry.next = None
        self.__buckets = [None] * START_CAPACITY
        self.__size = 0

    def clear(self) -> None:
        self.free()

    def __getitem__(self, key: str) -> V:
        entry = self.__find(key) if isinstance(key, str) else None
        if entry is None:
            raise KeyError(key)
        return entry.value

    def __setitem__(self, key: str, value: V) -> None:
        self.put(key, value)

    def __delitem__(self, key: str) -> None:
        if not self.remove(key):
            raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.__find(key) is not None

    def __len__(self) -> int:
        return self.__size

    def __iter__(self) -> Iterator[str]:
        return iter([i.key for i in self.enumerate()])

    def __repr__(self) -> str:
        return 'IniMap { .size = %d, .capacity = %d }' % (
            self.__size, len(self.__buckets))
