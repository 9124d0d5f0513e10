# -*- coding: utf-8 -*-
from typing import Optional


class FenwickTreeError(Exception):
    """Base class of every error raised by a fenwick tree"""


class OutOfBoundsError(FenwickTreeError, IndexError):
    def __init__(self, key: int, capacity: Optional[int] = None) -> None:
        if capacity is None:
            msg = f"key {key} is negative"
        else:
            msg = f"key {key} is out of bounds for capacity {capacity}"
        super().__init__(msg)
        self.key = key
        self.capacity = capacity


class InvalidRangeError(FenwickTreeError, ValueError):
    def __init__(self, lo: int, hi: int) -> None:
        super().__init__(f"invalid range: lo {lo} > hi {hi}")
        self.lo = lo
        self.hi = hi
