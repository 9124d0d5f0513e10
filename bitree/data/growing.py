# -*- coding: utf-8 -*-
from itertools import islice
from typing import Any, Optional

import numpy as np
from loguru import logger

from bitree.data.errors import InvalidRangeError
from bitree.data.tree import FenwickTree
from bitree.data.utils.indexing import (
    lowbit,
    lsb_ascending,
    point_update,
    point_value,
    prefix_query,
    range_query,
    to_internal,
)
from bitree.data.value import difference


class GrowingFenwickTree(FenwickTree):
    """Fenwick tree that grows on writes and clamps reads.

    ``update`` beyond the current capacity reallocates the storage to at
    least ``key + 1`` slots (``growth_factor`` times the old capacity when
    that is larger). ``query`` and ``range_query`` clamp keys to the
    rightmost slot, so reading past the end returns the total.
    """

    def __init__(
        self,
        capacity: int = 0,
        dtype: Any = int,
        zero: Optional[Any] = None,
        growth_factor: float = 2,
    ) -> None:
        if growth_factor < 1:
            raise ValueError(f"growth_factor must be at least 1, got {growth_factor}")
        super().__init__(capacity, dtype, zero)
        self._growth_factor = growth_factor

    @property
    def growth_factor(self) -> float:
        return self._growth_factor

    def _clamp(self, key: int) -> int:
        return min(self._check_key(key), self.capacity - 1)

    def _grown(self, key: int) -> np.ndarray:
        """Return a copy of the storage with room for ``key``"""

        old_capacity = self.capacity
        new_capacity = max(key + 1, int(old_capacity * self._growth_factor))
        logger.debug("growing fenwick tree from {} to {} keys", old_capacity, new_capacity)

        grown = self._allocate(new_capacity + 1)
        grown[: old_capacity + 1] = self._value

        # new positions whose interval reaches back below the old end start
        # out holding the old keys they cover
        if old_capacity > 0:
            old_total = prefix_query(self._value, old_capacity, self._zero)
            for pos in islice(lsb_ascending(old_capacity, new_capacity), 1, None):
                covered = prefix_query(self._value, pos - lowbit(pos), self._zero)
                with np.errstate(over="raise"):
                    grown[pos] = difference(old_total, covered)

        return grown

    def __getitem__(self, key: int) -> Any:
        key = self._check_key(key)
        if key >= self.capacity:
            return self._zero
        return point_value(self._value, to_internal(key))

    def update(self, key: int, delta: Any) -> None:
        """Add ``delta`` to the value at ``key``, growing the tree if needed"""

        key = self._check_key(key)
        storage = self._grown(key) if key >= self.capacity else self._value
        point_update(storage, to_internal(key), delta)
        self._value = storage

    def query(self, key: int) -> Any:
        """Return the sum over keys ``[0, key]``, clamped to the last key"""

        key = self._clamp(key)
        if key < 0:
            return self._zero
        return prefix_query(self._value, to_internal(key), self._zero)

    def range_query(self, lo: int, hi: int) -> Any:
        """Return the sum over keys ``[lo, hi]``, both clamped to the last key"""

        lo, hi = self._clamp(lo), self._clamp(hi)
        if lo > hi:
            raise InvalidRangeError(lo, hi)
        if hi < 0:
            return self._zero
        return range_query(self._value, lo, hi, self._zero)
