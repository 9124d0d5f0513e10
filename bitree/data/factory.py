# -*- coding: utf-8 -*-
from bitree.data.fixed import FixedSizeFenwickTree
from bitree.data.growing import GrowingFenwickTree
from bitree.data.tree import FenwickTree


def create_tree(capacity: int, growing: bool = False, **kwargs) -> FenwickTree:
    if growing:
        return GrowingFenwickTree(capacity, **kwargs)
    return FixedSizeFenwickTree(capacity, **kwargs)
