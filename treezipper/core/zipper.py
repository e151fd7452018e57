"""The Zipper: an immutable cursor into a tree.

A Zipper is "being at a node" inside a tree value together with just
enough context to move to any neighbour, replace the node, and rebuild
the whole tree with the edits applied:

- ``location`` is the node in focus
- ``lefts`` are the siblings before it, nearest first
- ``rights`` are the siblings after it, in tree order
- ``path`` is the parent's zipper (the breadcrumb), or a ``PathMarker``

The parent zipper stored in ``path`` still holds the parent node as it
was when we moved down. ``up`` rebuilds it from
``reversed(lefts) + (location,) + rights`` through the capability, so
edits travel back towards the root one level at a time and the original
tree is never touched.

Example:
    >>> from treezipper.adapters import LabeledTupleCapability
    >>> z = Zipper.new((1, [2, (3, [4, 5])]), LabeledTupleCapability())
    >>> z.down().right().node
    (3, [4, 5])
    >>> z.down().right().remove().root()
    (1, [2])
    >>> [node for node in z if not isinstance(node, tuple)]
    [2, 4, 5]
"""

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterator, Optional, Tuple, Union

from .capability import TreeCapability
from .errors import InvalidEditError


class PathMarker(Enum):
    """Path values for zippers without a parent.

    ``ROOT`` marks an ordinary top-level zipper. ``END`` marks a top-level
    zipper whose depth-first walk is finished; ``next`` keeps returning it.
    """
    ROOT = "root"
    END = "end"


@dataclass(frozen=True, repr=False, eq=False)
class Zipper:
    """Immutable cursor over a tree described by a ``TreeCapability``.

    Every move and edit returns a new Zipper. Moves that have no target
    return ``None`` so callers can test for the boundary; edits that cannot
    be performed raise ``InvalidEditError``.

    Zippers compare equal field by field, ancestors included. They are not
    hashable, since nodes such as lists and dicts are not.
    """

    location: Any
    capability: TreeCapability
    lefts: Tuple[Any, ...] = ()
    rights: Tuple[Any, ...] = ()
    path: Union["Zipper", PathMarker] = PathMarker.ROOT

    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Zipper):
            return NotImplemented
        # Breadcrumbs are compared in a loop, one ancestor per step
        mine, theirs = self, other
        while isinstance(mine, Zipper) and isinstance(theirs, Zipper):
            if mine is theirs:
                return True
            if ((mine.location, mine.capability, mine.lefts, mine.rights)
                    != (theirs.location, theirs.capability, theirs.lefts, theirs.rights)):
                return False
            mine, theirs = mine.path, theirs.path
        return mine is theirs

    @classmethod
    def new(cls, tree: Any, capability: TreeCapability) -> "Zipper":
        """Create a top-level zipper focused on ``tree``.

        Args:
            tree: Root value of the tree
            capability: How to read and rebuild nodes of this tree

        Returns:
            Zipper at depth 0 with no siblings
        """
        return cls(location=tree, capability=capability)

    def as_root(self) -> "Zipper":
        """Treat the current node as the root of a tree of its own.

        Siblings and breadcrumbs are dropped, so the returned zipper can
        walk the subtree without ever leaving it. A top-level zipper is
        returned unchanged.
        """
        if self.path is PathMarker.ROOT:
            return self
        return Zipper(location=self.location, capability=self.capability)

    # Inspection

    @property
    def node(self) -> Any:
        """The node in focus."""
        return self.location

    @property
    def is_end(self) -> bool:
        """True once a depth-first walk has run past the last node."""
        return self.path is PathMarker.END

    @property
    def is_top(self) -> bool:
        """True if this zipper has no parent (root or end)."""
        return not isinstance(self.path, Zipper)

    @property
    def depth(self) -> int:
        """Number of ``up`` moves needed to reach the top."""
        depth = 0
        current = self.path
        while isinstance(current, Zipper):
            depth += 1
            current = current.path
        return depth

    @property
    def position(self) -> Tuple[int, ...]:
        """Child indexes leading from the top to the current node.

        The top-level zipper has position ``()``; its first child ``(0,)``.
        """
        indexes = []
        current = self
        while isinstance(current.path, Zipper):
            indexes.append(len(current.lefts))
            current = current.path
        return tuple(reversed(indexes))

    def is_branch(self) -> bool:
        return self.capability.is_branch(self.location)

    def children(self) -> Tuple[Any, ...]:
        return tuple(self.capability.children(self.location))

    # Navigation

    def down(self) -> Optional["Zipper"]:
        """Move to the first child, or return None if there is none."""
        if not self.is_branch():
            return None
        children = self.children()
        if not children:
            return None
        return Zipper(
            location=children[0],
            capability=self.capability,
            lefts=(),
            rights=children[1:],
            path=self,
        )

    def up(self) -> Optional["Zipper"]:
        """Move to the parent, rebuilding it from the current siblings.

        Returns None at the top (root or end).
        """
        parent = self.path
        if not isinstance(parent, Zipper):
            return None
        children = list(reversed(self.lefts))
        children.append(self.location)
        children.extend(self.rights)
        rebuilt = parent.capability.make_node(parent.location, children)
        return dataclasses.replace(parent, location=rebuilt)

    def left(self) -> Optional["Zipper"]:
        """Move to the previous sibling, or return None at the first one."""
        if not self.lefts:
            return None
        return dataclasses.replace(
            self,
            location=self.lefts[0],
            lefts=self.lefts[1:],
            rights=(self.location,) + self.rights,
        )

    def right(self) -> Optional["Zipper"]:
        """Move to the next sibling, or return None at the last one."""
        if not self.rights:
            return None
        return dataclasses.replace(
            self,
            location=self.rights[0],
            lefts=(self.location,) + self.lefts,
            rights=self.rights[1:],
        )

    def leftmost(self) -> "Zipper":
        """Move to the first sibling; identity if already there."""
        if not self.lefts:
            return self
        # lefts is nearest-first, so the first sibling is the last element
        rights = tuple(reversed(self.lefts[:-1])) + (self.location,) + self.rights
        return dataclasses.replace(
            self,
            location=self.lefts[-1],
            lefts=(),
            rights=rights,
        )

    def rightmost(self) -> "Zipper":
        """Move to the last sibling; identity if already there."""
        if not self.rights:
            return self
        lefts = tuple(reversed(self.rights[:-1])) + (self.location,) + self.lefts
        return dataclasses.replace(
            self,
            location=self.rights[-1],
            lefts=lefts,
            rights=(),
        )

    def top(self) -> "Zipper":
        """Climb to the top-level zipper, rebuilding every ancestor."""
        current = self
        while isinstance(current.path, Zipper):
            current = current.up()
        return current

    def root(self) -> Any:
        """Return the rebuilt root node, with all edits applied."""
        return self.top().location

    # Depth-first pre-order linearization

    def next(self) -> "Zipper":
        """Advance one step in depth-first pre-order.

        Descends into the first child when there is one, otherwise moves
        right or climbs until a right sibling exists. After the last node
        the top-level zipper is returned marked as ended; calling ``next``
        on it again returns it unchanged.
        """
        if self.path is PathMarker.END:
            return self
        child = self.down()
        if child is not None:
            return child
        return self.skip()

    def skip(self) -> "Zipper":
        """Advance in pre-order without entering the current subtree."""
        if self.path is PathMarker.END:
            return self
        current = self
        while True:
            sibling = current.right()
            if sibling is not None:
                return sibling
            parent = current.up()
            if parent is None:
                return dataclasses.replace(current, path=PathMarker.END)
            current = parent

    def prev(self) -> Optional["Zipper"]:
        """Step back one node in depth-first pre-order.

        From an ended zipper this is the last node of the tree. Returns
        None at the root.
        """
        if self.path is PathMarker.END:
            return dataclasses.replace(self, path=PathMarker.ROOT)._last_descendant()
        sibling = self.left()
        if sibling is None:
            return self.up()
        return sibling._last_descendant()

    def _last_descendant(self) -> "Zipper":
        current = self
        while True:
            child = current.down()
            if child is None:
                return current
            current = child.rightmost()

    def walk(self) -> Iterator["Zipper"]:
        """Yield zippers in pre-order from this one until the walk ends."""
        current = self
        while current.path is not PathMarker.END:
            yield current
            current = current.next()

    def __iter__(self) -> Iterator[Any]:
        """Iterate over nodes in pre-order, starting with the current one."""
        for zipper in self.walk():
            yield zipper.location

    # Editing

    def replace(self, node: Any) -> "Zipper":
        """Put ``node`` in place of the current node."""
        return dataclasses.replace(self, location=node)

    def update(self, fun: Callable[[Any], Any]) -> "Zipper":
        """Replace the current node with ``fun(node)``."""
        return dataclasses.replace(self, location=fun(self.location))

    def remove(self) -> "Zipper":
        """Delete the current node.

        The returned zipper is focused on the node that precedes the
        removed one in pre-order: the deepest last descendant of the left
        sibling, or the rebuilt parent when there is no left sibling.

        Raises:
            InvalidEditError: If called on the top-level node
        """
        parent = self.path
        if not isinstance(parent, Zipper):
            raise InvalidEditError("cannot remove the top-level node")
        if self.lefts:
            sibling = dataclasses.replace(
                self,
                location=self.lefts[0],
                lefts=self.lefts[1:],
            )
            return sibling._last_descendant()
        rebuilt = parent.capability.make_node(parent.location, list(self.rights))
        return dataclasses.replace(parent, location=rebuilt)

    def insert_left(self, node: Any) -> "Zipper":
        """Insert ``node`` as the immediate left sibling; focus is unchanged.

        Raises:
            InvalidEditError: If called on the top-level node
        """
        if self.is_top:
            raise InvalidEditError("cannot insert a left sibling at the top level")
        return dataclasses.replace(self, lefts=(node,) + self.lefts)

    def insert_right(self, node: Any) -> "Zipper":
        """Insert ``node`` as the immediate right sibling; focus is unchanged.

        Raises:
            InvalidEditError: If called on the top-level node
        """
        if self.is_top:
            raise InvalidEditError("cannot insert a right sibling at the top level")
        return dataclasses.replace(self, rights=(node,) + self.rights)

    def insert_child(self, node: Any) -> "Zipper":
        """Add ``node`` as the first child of the current node.

        A leaf, or a branch without children, is rebuilt through
        ``make_node`` with ``node`` as its only child.
        """
        child = self.down()
        if child is None:
            return self.replace(self.capability.make_node(self.location, [node]))
        return dataclasses.replace(child, lefts=(node,)).up()

    def append_child(self, node: Any) -> "Zipper":
        """Add ``node`` as the last child of the current node.

        A leaf, or a branch without children, is rebuilt through
        ``make_node`` with ``node`` as its only child.
        """
        child = self.down()
        if child is None:
            return self.replace(self.capability.make_node(self.location, [node]))
        return dataclasses.replace(child, rights=child.rights + (node,)).up()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.location!r})"
