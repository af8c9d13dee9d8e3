"""Shared fixtures for the flowchart core tests."""

from __future__ import annotations

import itertools
from typing import Callable

import pytest

from core.log import Log
from core.tree import Node, insert_child, new_root


@pytest.fixture
def counter_ids() -> Callable[[], str]:
    """Deterministic id factory: n1, n2, n3, ..."""

    counter = itertools.count(1)
    return lambda: f"n{next(counter)}"


@pytest.fixture
def sample_tree(counter_ids) -> Node:
    """root -> [n1 -> [n3, n4], n2 -> [n5]]"""

    tree = new_root()
    tree = insert_child(tree, "root", counter_ids)
    tree = insert_child(tree, "root", counter_ids)
    tree = insert_child(tree, "n1", counter_ids)
    tree = insert_child(tree, "n1", counter_ids)
    tree = insert_child(tree, "n2", counter_ids)
    return tree


@pytest.fixture
def verbose_log():
    """Turn the shared log up for one test and restore it afterwards."""

    old = Log.verbosity
    Log.set_verbosity(3)
    Log.clear()
    yield Log
    Log.set_verbosity(old)
