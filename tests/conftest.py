"""Shared fixtures for the TreeZipper test suite."""

import pytest

from treezipper import LabeledTupleCapability, Zipper


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: large trees, excluded by run_tests.py unless --all"
    )


# The example tree used throughout the tests:
#
#       1
#  +--+-+--+---+
#  2  3    6   7
#    +-+       +
#    4 5       0
SAMPLE_TREE = (1, [2, (3, [4, 5]), 6, (7, [0])])

SAMPLE_PREORDER = [SAMPLE_TREE, 2, (3, [4, 5]), 4, 5, 6, (7, [0]), 0]


@pytest.fixture
def capability():
    return LabeledTupleCapability()


@pytest.fixture
def tree():
    return SAMPLE_TREE


@pytest.fixture
def root(tree, capability):
    return Zipper.new(tree, capability)
