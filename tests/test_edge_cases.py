"""Unit tests for edge cases in TreeZipper.

Tests unusual trees and boundary conditions: single-node trees, empty
branches, zippers reused after edits and ended zippers.
"""

import dataclasses
import sys
import unittest
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from treezipper import (
    InvalidEditError,
    LabeledTupleCapability,
    MappingCapability,
    NestedListCapability,
    PathMarker,
    Zipper,
    map_nodes,
)


class TestSingleNodeTrees(unittest.TestCase):
    """Trees consisting of a single leaf."""

    def setUp(self):
        self.zipper = Zipper.new(42, LabeledTupleCapability())

    def test_no_moves_available(self):
        self.assertIsNone(self.zipper.down())
        self.assertIsNone(self.zipper.up())
        self.assertIsNone(self.zipper.left())
        self.assertIsNone(self.zipper.right())
        self.assertIsNone(self.zipper.prev())

    def test_leftmost_rightmost_identity(self):
        self.assertIs(self.zipper.leftmost(), self.zipper)
        self.assertIs(self.zipper.rightmost(), self.zipper)

    def test_walk_has_one_node(self):
        self.assertEqual(list(self.zipper), [42])

    def test_prev_from_end_returns_the_leaf(self):
        ended = self.zipper.next()
        self.assertEqual(ended.prev().node, 42)
        self.assertIsNone(ended.prev().prev())

    def test_map_replaces_the_root(self):
        self.assertEqual(map_nodes(self.zipper, lambda n: n + 1).root(), 43)

    def test_root_edits_fail(self):
        for edit in (self.zipper.remove,
                     lambda: self.zipper.insert_left(1),
                     lambda: self.zipper.insert_right(1)):
            with self.assertRaises(InvalidEditError):
                edit()


class TestEmptyBranches(unittest.TestCase):
    """Branches whose child sequence is empty."""

    def test_empty_list_tree(self):
        zipper = Zipper.new([], NestedListCapability())

        self.assertTrue(zipper.is_branch())
        self.assertIsNone(zipper.down())
        self.assertEqual(list(zipper), [[]])
        self.assertTrue(zipper.next().is_end)

    def test_prev_does_not_descend_into_empty_branch(self):
        tree = [1, []]
        zipper = Zipper.new(tree, NestedListCapability())

        ended = zipper.next().next().next()
        self.assertTrue(ended.is_end)
        self.assertEqual(ended.prev().node, [])

    def test_empty_mapping(self):
        zipper = Zipper.new({}, MappingCapability())

        self.assertEqual(list(zipper), [{}])
        self.assertEqual(zipper.append_child(("a", 1)).node, {"a": 1})

    def test_remove_last_remaining_child(self):
        zipper = Zipper.new([[1]], NestedListCapability())
        removed = zipper.down().down().remove()

        self.assertEqual(removed.node, [])
        self.assertEqual(removed.root(), [[]])


class TestReuse(unittest.TestCase):
    """Zippers are values: old ones stay valid after new ones are made."""

    def setUp(self):
        self.root = Zipper.new((1, [2, (3, [4, 5])]), LabeledTupleCapability())

    def test_branching_edits(self):
        two = self.root.down()

        left_edit = two.replace("a")
        right_edit = two.replace("b")

        self.assertEqual(left_edit.root(), (1, ["a", (3, [4, 5])]))
        self.assertEqual(right_edit.root(), (1, ["b", (3, [4, 5])]))
        self.assertEqual(two.root(), (1, [2, (3, [4, 5])]))

    def test_ended_zipper_keeps_working(self):
        ended = map_nodes(self.root, lambda n: n)

        self.assertEqual(ended.path, PathMarker.END)
        self.assertIsNone(ended.up())
        self.assertIs(ended.top(), ended)
        self.assertEqual(ended.root(), (1, [2, (3, [4, 5])]))

    def test_ended_zipper_can_be_restarted(self):
        ended = map_nodes(self.root, lambda n: n)
        restarted = dataclasses.replace(ended, path=PathMarker.ROOT)

        self.assertEqual(restarted, self.root)
        self.assertEqual(restarted.next().node, 2)


if __name__ == "__main__":
    unittest.main()
