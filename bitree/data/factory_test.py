# -*- coding: utf-8 -*-
import pytest

from bitree.data.errors import OutOfBoundsError
from bitree.data.factory import create_tree
from bitree.data.fixed import FixedSizeFenwickTree
from bitree.data.growing import GrowingFenwickTree


def test_create_tree():
    tree = create_tree(8)
    assert isinstance(tree, FixedSizeFenwickTree)
    with pytest.raises(OutOfBoundsError):
        tree.update(8, 1)

    tree = create_tree(8, growing=True, growth_factor=4)
    assert isinstance(tree, GrowingFenwickTree)
    tree.update(8, 1)
    assert tree.capacity == 32
    assert tree.query(100) == 1

    tree = create_tree(4, dtype=float)
    tree.update(1, 0.5)
    assert tree.query(3) == 0.5


if __name__ == "__main__":
    test_create_tree()
