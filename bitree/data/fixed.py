# -*- coding: utf-8 -*-
from typing import Any

from bitree.data.errors import InvalidRangeError, OutOfBoundsError
from bitree.data.tree import FenwickTree
from bitree.data.utils.indexing import (
    point_update,
    point_value,
    prefix_query,
    range_query,
    to_internal,
)


class FixedSizeFenwickTree(FenwickTree):
    """Fenwick tree with a capacity chosen up front.

    Every key must lie in ``[0, capacity)``; anything else raises
    ``OutOfBoundsError`` and leaves the tree untouched.
    """

    def _check_bounds(self, key: int) -> int:
        key = self._check_key(key)
        if key >= self.capacity:
            raise OutOfBoundsError(key, self.capacity)
        return key

    def __getitem__(self, key: int) -> Any:
        key = self._check_bounds(key)
        return point_value(self._value, to_internal(key))

    def update(self, key: int, delta: Any) -> None:
        """Add ``delta`` to the value at ``key``"""

        key = self._check_bounds(key)
        point_update(self._value, to_internal(key), delta)

    def query(self, key: int) -> Any:
        """Return the sum over keys ``[0, key]``"""

        key = self._check_bounds(key)
        return prefix_query(self._value, to_internal(key), self._zero)

    def range_query(self, lo: int, hi: int) -> Any:
        """Return the sum over keys ``[lo, hi]``"""

        lo, hi = self._check_bounds(lo), self._check_bounds(hi)
        if lo > hi:
            raise InvalidRangeError(lo, hi)
        return range_query(self._value, lo, hi, self._zero)
