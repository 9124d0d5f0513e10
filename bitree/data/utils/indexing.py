# -*- coding: utf-8 -*-
"""Index arithmetic shared by every fenwick tree.

Callers address values with 0-based *keys*; storage is addressed with
1-based *positions* (``pos == key + 1``) and slot 0 is never read or
written. ``storage[pos]`` holds the sum of the values at positions
``(pos - lowbit(pos), pos]``.

Arithmetic on numeric storage runs under ``np.errstate(over="raise")``:
an overflowing sum raises ``FloatingPointError`` instead of wrapping.
"""
from typing import Any, Iterator

import numpy as np

from bitree.data.value import accumulate, difference


def lowbit(x: int) -> int:
    """Return the value of the least significant set bit, 0 for 0"""
    return x & -x


def to_internal(key: int) -> int:
    return key + 1


def lsb_ascending(pos: int, upper: int) -> Iterator[int]:
    """Yield ``pos`` and every position it contributes to, up to ``upper``"""

    while 0 < pos <= upper:
        yield pos
        pos += lowbit(pos)


def lsb_descending(pos: int) -> Iterator[int]:
    """Yield the positions whose sums make up the prefix ending at ``pos``"""

    while pos > 0:
        yield pos
        pos -= lowbit(pos)


def check_delta(storage: np.ndarray, delta: Any) -> None:
    """Raise ``TypeError`` if ``delta`` cannot be stored without loss"""

    if storage.dtype == object:
        return
    try:
        dtype = np.result_type(storage.dtype, np.asarray(delta))
    except (TypeError, ValueError, OverflowError) as e:
        raise TypeError(f"cannot store {delta!r} in a {storage.dtype} tree") from e
    if not np.can_cast(dtype, storage.dtype, "same_kind"):
        raise TypeError(f"cannot store {dtype} values in a {storage.dtype} tree")


def point_update(storage: np.ndarray, pos: int, delta: Any) -> None:
    """Add ``delta`` at ``pos``; storage is left untouched if anything fails"""

    check_delta(storage, delta)
    chain = list(lsb_ascending(pos, len(storage) - 1))
    with np.errstate(over="raise"):
        updated = [accumulate(storage[p], delta) for p in chain]
    storage[chain] = updated if storage.dtype != object else _as_objects(updated)


def _as_objects(values: list) -> np.ndarray:
    # keeps numpy from unpacking sequence-like values
    result = np.empty([len(values)], dtype=object)
    for i, v in enumerate(values):
        result[i] = v
    return result


def prefix_query(storage: np.ndarray, pos: int, zero: Any) -> Any:
    """Return the sum over positions ``[1, pos]``"""

    total = zero
    with np.errstate(over="raise"):
        for p in lsb_descending(pos):
            total = accumulate(total, storage[p])
    return total


def range_query(storage: np.ndarray, lo: int, hi: int, zero: Any) -> Any:
    """Return the sum over keys ``[lo, hi]``, ``lo <= hi`` is not checked"""

    hi_sum = prefix_query(storage, to_internal(hi), zero)
    if lo == 0:
        return hi_sum
    lo_sum = prefix_query(storage, to_internal(lo - 1), zero)
    with np.errstate(over="raise"):
        return difference(hi_sum, lo_sum)


def point_value(storage: np.ndarray, pos: int) -> Any:
    """Return the value stored at a single position.

    ``storage[pos]`` covers ``(pos - lowbit(pos), pos]``; subtracting the
    sums of the positions just below ``pos`` until the walk reaches the
    left edge of that interval leaves the value at ``pos`` alone.
    """

    value = storage[pos]
    parent = pos - lowbit(pos)
    p = pos - 1
    with np.errstate(over="raise"):
        while p != parent:
            value = difference(value, storage[p])
            p -= lowbit(p)
    return value
