# -*- coding: utf-8 -*-
import operator
from abc import ABC, abstractmethod
from typing import Any, Iterator, Optional

import numpy as np

from bitree.data.errors import OutOfBoundsError
from bitree.data.utils.indexing import point_value, prefix_query
from bitree.data.value import identity


class FenwickTree(ABC):
    """Binary indexed tree over the keys ``0 .. capacity - 1``.

    Values live in a numpy array of ``capacity + 1`` slots, slot 0 unused.
    Numeric values use a numeric ``dtype``; any other type implementing
    ``FenwickValue`` is stored with ``dtype=object`` and an explicit ``zero``.
    """

    def __init__(self, capacity: int, dtype: Any = int, zero: Optional[Any] = None) -> None:
        capacity = operator.index(capacity)
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")

        self._dtype = np.dtype(dtype)
        self._zero = identity(self._dtype, zero)
        self._value = self._allocate(capacity + 1)

    def _allocate(self, size: int) -> np.ndarray:
        storage = np.empty([size], dtype=self._dtype)
        storage.fill(self._zero)
        return storage

    @staticmethod
    def _check_key(key: int) -> int:
        key = operator.index(key)
        if key < 0:
            raise OutOfBoundsError(key)
        return key

    @property
    def capacity(self) -> int:
        return len(self._value) - 1

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def zero(self) -> Any:
        return self._zero

    def __len__(self) -> int:
        return self.capacity

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the value at every key"""
        for pos in range(1, len(self._value)):
            yield point_value(self._value, pos)

    def total(self) -> Any:
        """Return the sum over every key"""
        return prefix_query(self._value, self.capacity, self._zero)

    @abstractmethod
    def __getitem__(self, key: int) -> Any:
        raise NotImplementedError

    @abstractmethod
    def update(self, key: int, delta: Any) -> None:
        raise NotImplementedError

    @abstractmethod
    def query(self, key: int) -> Any:
        raise NotImplementedError

    @abstractmethod
    def range_query(self, lo: int, hi: int) -> Any:
        raise NotImplementedError
