"""Chained hash table used for every graph lookup.

The table keeps a fixed array of buckets, each bucket being a list of
[key, value] pairs. Collisions are resolved by appending to the bucket
(chaining). The bucket array doubles in size before an insertion would
push the load factor to the growth threshold.

Example:
    table = HashTableMap[str, int]()
    table.put("Memorial Union", 0)
    table.get("Memorial Union")  # 0
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Iterator, List, Tuple, TypeVar

from ..domain.errors import DuplicateKeyError, KeyNotFoundError

K = TypeVar("K")
V = TypeVar("V")

DEFAULT_CAPACITY = 32
DEFAULT_LOAD_FACTOR = 0.75


@dataclass
class HashTableMap(Generic[K, V]):
    """Key-value map with separate chaining and automatic growth.

    Attributes:
        initial_capacity: Number of buckets allocated up front
        load_factor: Growth threshold for size / capacity
    """

    initial_capacity: int = DEFAULT_CAPACITY
    load_factor: float = DEFAULT_LOAD_FACTOR

    _buckets: List[List[List[Any]]] = field(init=False, repr=False)
    _size: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.initial_capacity < 1:
            raise ValueError(
                f"Capacity must be at least 1, got {self.initial_capacity}"
            )
        if not 0 < self.load_factor <= 1:
            raise ValueError(
                f"Load factor must be in (0, 1], got {self.load_factor}"
            )
        self._buckets = self._new_buckets(self.initial_capacity)

    @staticmethod
    def _new_buckets(capacity: int) -> List[List[List[Any]]]:
        return [[] for _ in range(capacity)]

    def _index_for(self, key: Any, capacity: int) -> int:
        # Python's modulo is already non-negative for a positive divisor.
        return hash(key) % capacity

    def _bucket_for(self, key: Any) -> List[List[Any]]:
        return self._buckets[self._index_for(key, len(self._buckets))]

    def _find_pair(self, key: Any) -> Tuple[List[List[Any]], int]:
        """Return the bucket holding ``key`` and the pair position, or -1."""
        bucket = self._bucket_for(key)
        for position, pair in enumerate(bucket):
            if pair[0] == key:
                return bucket, position
        return bucket, -1

    def _grow(self) -> None:
        """Double the bucket array and rehash every stored pair."""
        new_capacity = len(self._buckets) * 2
        new_buckets = self._new_buckets(new_capacity)
        for bucket in self._buckets:
            for pair in bucket:
                new_buckets[self._index_for(pair[0], new_capacity)].append(pair)
        self._buckets = new_buckets

    def put(self, key: K, value: V) -> None:
        """Add a new key-value pair.

        Args:
            key: The key to insert. Must not be None.
            value: The value the key maps to.

        Raises:
            TypeError: If key is None.
            DuplicateKeyError: If the key is already present.
        """
        if key is None:
            raise TypeError("key must not be None")
        if self.contains_key(key):
            raise DuplicateKeyError(f"Key already in table: {key!r}", key=key)

        if (self._size + 1) / len(self._buckets) >= self.load_factor:
            self._grow()

        self._bucket_for(key).append([key, value])
        self._size += 1

    def get(self, key: K) -> V:
        """Return the value mapped to ``key``.

        Raises:
            KeyNotFoundError: If the key is not present.
        """
        if key is not None:
            bucket, position = self._find_pair(key)
            if position >= 0:
                return bucket[position][1]
        raise KeyNotFoundError(f"Key not in table: {key!r}", key=key)

    def remove(self, key: K) -> V:
        """Remove ``key`` and return the value it mapped to.

        Raises:
            KeyNotFoundError: If the key is not present.
        """
        if key is not None:
            bucket, position = self._find_pair(key)
            if position >= 0:
                _, value = bucket.pop(position)
                self._size -= 1
                return value
        raise KeyNotFoundError(f"Key not in table: {key!r}", key=key)

    def contains_key(self, key: Any) -> bool:
        if key is None:
            return False
        return self._find_pair(key)[1] >= 0

    def clear(self) -> None:
        """Remove every pair while keeping the current capacity."""
        for bucket in self._buckets:
            bucket.clear()
        self._size = 0

    def size(self) -> int:
        return self._size

    def capacity(self) -> int:
        return len(self._buckets)

    def keys(self) -> Iterator[K]:
        for bucket in self._buckets:
            for pair in bucket:
                yield pair[0]

    def values(self) -> Iterator[V]:
        for bucket in self._buckets:
            for pair in bucket:
                yield pair[1]

    def items(self) -> Iterator[Tuple[K, V]]:
        for bucket in self._buckets:
            for pair in bucket:
                yield pair[0], pair[1]

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return self.contains_key(key)

    def __iter__(self) -> Iterator[K]:
        return self.keys()
