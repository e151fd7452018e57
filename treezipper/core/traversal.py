"""Traversal drivers for TreeZipper.

The drivers walk a zipper in depth-first pre-order with ``Zipper.next``
and hand each visited zipper to a callback that may inspect it, edit it,
or (for the ``*_while`` variants) decide how the walk goes on.

Called on a top-level zipper they walk the whole tree and return the
ended zipper, whose ``root()`` is the rebuilt tree. Called on a zipper
somewhere inside a tree they walk only its subtree and return a zipper at
the same position with the rebuilt subtree in place. The one exception is
``Action.HALT``: halting always ends the whole walk, even from inside a
subtree, and returns the ended top-level zipper.

Example:
    >>> from treezipper.adapters import NestedListCapability
    >>> z = Zipper.new([1, [2, 3]], NestedListCapability())
    >>> leaves = lambda n: n if isinstance(n, list) else n * 10
    >>> map_nodes(z, leaves).root()
    [10, [20, 30]]
"""

import dataclasses
import logging
from enum import Enum
from typing import Any, Callable, Optional, Tuple, TypeVar

from .zipper import PathMarker, Zipper

logger = logging.getLogger(__name__)

Acc = TypeVar("Acc")


class Action(Enum):
    """What a ``traverse_while``/``fold_while`` callback wants next."""
    CONTINUE = "cont"  # visit the children, then carry on
    SKIP = "skip"      # carry on without visiting the children
    HALT = "halt"      # stop the whole walk now


def _restart(zipper: Zipper) -> Zipper:
    # An ended zipper sits at the top; clearing the marker walks it again
    return dataclasses.replace(zipper, path=PathMarker.ROOT)


def _halt(zipper: Zipper) -> Zipper:
    return dataclasses.replace(zipper.top(), path=PathMarker.END)


def _expect_zipper(result: Any, driver: str) -> Zipper:
    if not isinstance(result, Zipper):
        raise TypeError(f"{driver} callback must return a Zipper, got {result!r}")
    return result


def _expect_step(result: Any, driver: str, size: int) -> tuple:
    if (not isinstance(result, tuple) or len(result) != size
            or not isinstance(result[0], Action)
            or not isinstance(result[1], Zipper)):
        shape = "(Action, Zipper)" if size == 2 else "(Action, Zipper, acc)"
        raise TypeError(f"{driver} callback must return {shape}, got {result!r}")
    return result


def traverse(zipper: Zipper, fun: Callable[[Zipper], Zipper]) -> Zipper:
    """Visit every node in pre-order, replacing each zipper with ``fun(zipper)``.

    Args:
        zipper: Where to start; the top for the whole tree, else a subtree
        fun: Receives each visited zipper and returns the zipper to go on from

    Returns:
        The ended top-level zipper, or for a subtree walk the original
        position with the rebuilt subtree in place
    """
    def walk(current: Zipper) -> Zipper:
        while current.path is not PathMarker.END:
            current = _expect_zipper(fun(current), "traverse").next()
        return current

    if zipper.path is PathMarker.END:
        return walk(_restart(zipper))
    if zipper.path is PathMarker.ROOT:
        return walk(zipper)
    return zipper.replace(walk(zipper.as_root()).location)


def fold(zipper: Zipper, acc: Acc,
         fun: Callable[[Zipper, Acc], Tuple[Zipper, Acc]]) -> Tuple[Zipper, Acc]:
    """Visit every node in pre-order while threading an accumulator.

    Args:
        zipper: Where to start; the top for the whole tree, else a subtree
        acc: Initial accumulator
        fun: Receives ``(zipper, acc)`` and returns ``(zipper, acc)``

    Returns:
        Tuple of (zipper, acc); the zipper as described for ``traverse``

    Example:
        >>> from treezipper.adapters import NestedListCapability
        >>> z = Zipper.new([1, [2, 3]], NestedListCapability())
        >>> _, total = fold(z, 0, lambda z, acc: (z, acc + 1))
        >>> total
        5
    """
    def walk(current: Zipper, acc: Acc) -> Tuple[Zipper, Acc]:
        while current.path is not PathMarker.END:
            result = fun(current, acc)
            if not isinstance(result, tuple) or len(result) != 2:
                raise TypeError(f"fold callback must return (Zipper, acc), got {result!r}")
            current, acc = result
            current = _expect_zipper(current, "fold").next()
        return current, acc

    if zipper.path is PathMarker.END:
        return walk(_restart(zipper), acc)
    if zipper.path is PathMarker.ROOT:
        return walk(zipper, acc)
    replacement, acc = walk(zipper.as_root(), acc)
    return zipper.replace(replacement.location), acc


def map_nodes(zipper: Zipper, fun: Callable[[Any], Any]) -> Zipper:
    """Replace every node with ``fun(node)``, parents before children.

    Because parents are visited first, ``fun`` sees each branch before its
    children are mapped and the children it returns are the ones visited.
    """
    return traverse(zipper, lambda current: current.update(fun))


def traverse_while(zipper: Zipper,
                   fun: Callable[[Zipper], Tuple[Action, Zipper]]) -> Zipper:
    """Pre-order walk that the callback can prune or stop.

    ``fun`` returns ``(Action, zipper)``. ``CONTINUE`` goes on with
    ``next``, ``SKIP`` goes on with ``skip`` so the children of the
    returned zipper are never visited, and ``HALT`` stops immediately:
    the result is the ended top-level zipper of the whole tree, with
    every node not yet visited left as it was.
    """
    def step(current: Zipper, acc: None) -> Tuple[Action, Zipper, None]:
        action, current = _expect_step(fun(current), "traverse_while", 2)
        return action, current, acc

    result, _ = _walk_while(zipper, None, step)
    return result


def fold_while(zipper: Zipper, acc: Acc,
               fun: Callable[[Zipper, Acc], Tuple[Action, Zipper, Acc]]) -> Tuple[Zipper, Acc]:
    """Accumulating version of ``traverse_while``.

    ``fun`` returns ``(Action, zipper, acc)``. The accumulator returned
    alongside ``HALT`` is the final one.

    Example:
        >>> from treezipper.adapters import NestedListCapability
        >>> z = Zipper.new([1, [2, 3], 4], NestedListCapability())
        >>> def first_two_leaves(z, acc):
        ...     if isinstance(z.node, list):
        ...         return Action.CONTINUE, z, acc
        ...     acc = acc + [z.node]
        ...     return (Action.HALT if len(acc) == 2 else Action.CONTINUE), z, acc
        >>> ended, leaves = fold_while(z, [], first_two_leaves)
        >>> leaves, ended.is_end
        ([1, 2], True)
    """
    def step(current: Zipper, acc: Acc) -> Tuple[Action, Zipper, Acc]:
        return _expect_step(fun(current, acc), "fold_while", 3)

    return _walk_while(zipper, acc, step)


def _walk_while(zipper: Zipper, acc: Acc,
                step: Callable[[Zipper, Acc], Tuple[Action, Zipper, Acc]]) -> Tuple[Zipper, Acc]:
    """Shared loop of ``traverse_while`` and ``fold_while``.

    Walks the tree or subtree ``zipper`` stands for. A subtree walk that
    finishes normally is spliced back at the starting position; one that
    halts is spliced back and then ends the enclosing walk too.
    """
    if zipper.path is PathMarker.END:
        zipper = _restart(zipper)
    bounded = zipper.path is not PathMarker.ROOT
    current = zipper.as_root()

    halted = False
    while current.path is not PathMarker.END:
        action, current, acc = step(current, acc)
        if action is Action.HALT:
            halted = True
            break
        current = current.skip() if action is Action.SKIP else current.next()

    if not bounded:
        return (_halt(current) if halted else current), acc

    spliced = zipper.replace(current.top().location)
    if halted:
        logger.debug("halt inside subtree at %s ends the enclosing walk", spliced.position)
        return _halt(spliced), acc
    return spliced, acc


def find(zipper: Zipper, predicate: Callable[[Zipper], Any]) -> Optional[Zipper]:
    """Return the first zipper in pre-order for which ``predicate`` is truthy.

    The search starts with ``zipper`` itself and is not bounded to its
    subtree. Returns None once the walk ends. An ended zipper counts as
    past the last node, so ``predicate`` is never called on it and the
    result is None.

    Example:
        >>> from treezipper.adapters import NestedListCapability
        >>> z = Zipper.new([1, [2, 3]], NestedListCapability())
        >>> find(z, lambda z: z.node == 3).position
        (1, 1)
    """
    for current in zipper.walk():
        if predicate(current):
            return current
    return None
