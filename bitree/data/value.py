# -*- coding: utf-8 -*-
from typing import Any, Optional, Protocol, TypeVar

import numpy as np


class FenwickValue(Protocol):
    """Anything that can be stored in a fenwick tree.

    A value must support accumulation (``+``), the inverse used to turn two
    prefix sums into a range sum (``-``) and equality. Stored values are
    never mutated in place, so a value behaves as if copied on every read.
    Python and numpy numbers satisfy this without any extra work.
    """

    def __add__(self, other: Any) -> Any:
        ...

    def __sub__(self, other: Any) -> Any:
        ...

    def __eq__(self, other: object) -> bool:
        ...


V = TypeVar("V", bound=FenwickValue)


def accumulate(total: V, other: V) -> V:
    return total + other


def difference(lhs: V, rhs: V) -> V:
    return lhs - rhs


def identity(dtype: Any, zero: Optional[Any] = None) -> Any:
    """Return the zero element for values stored with ``dtype``"""

    if zero is not None:
        return zero
    return np.zeros((), dtype=dtype)[()]
