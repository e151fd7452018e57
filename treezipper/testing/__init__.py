"""Testing utilities for TreeZipper."""

from .fixtures import LabeledNode, reference_preorder, random_labeled_tree

__all__ = ['LabeledNode', 'reference_preorder', 'random_labeled_tree']
