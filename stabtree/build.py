"""Construction of the centered interval tree.

Each node takes the bounding box of the intervals in its scope, splits it
at the box midpoint, keeps the intervals that straddle that center and
hands the rest to a left or right child. The center is the midpoint of the
extent, not a median of the endpoints, so skewed inputs (many short
intervals bunched at one end of a long range) give unbalanced trees.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from operator import attrgetter
from typing import Any, Literal

from stabtree.domain import Domain
from stabtree.interval import Interval
from stabtree.validation import Entry, validate_all


@dataclass(frozen=True, eq=False)
class Node:
    """One level of the partition.

    Attributes:
        center: Split value for this node's scope
        covering_by_lower: Entries containing center, ascending by lower bound
        covering_by_upper: The same entries, descending by upper bound
        left: Subtree of entries entirely below center
        right: Subtree of entries entirely above center
    """

    center: Any
    covering_by_lower: tuple[Entry, ...]
    covering_by_upper: tuple[Entry, ...]
    left: "Node | None" = None
    right: "Node | None" = None


@dataclass
class _Split:
    center: Any
    covering: list[Entry]
    left: int | None = None
    right: int | None = None


def _split(
    entries: list[Entry], domain: Domain
) -> tuple[Any, list[Entry], list[Entry], list[Entry]]:
    """Partition entries around the midpoint of their bounding box."""
    center = domain.midpoint(
        min(entry.lower for entry in entries),
        max(entry.upper for entry in entries),
    )
    left: list[Entry] = []
    right: list[Entry] = []
    covering: list[Entry] = []
    for entry in entries:
        if entry.upper < center:
            left.append(entry)
        elif entry.lower > center:
            right.append(entry)
        else:
            covering.append(entry)
    return center, left, right, covering


def build_entries(entries: list[Entry], domain: Domain) -> Node | None:
    """Build a tree from already validated, deduplicated entries.

    Splits are planned top-down on an explicit work list, then nodes are
    created bottom-up, so tree depth is not limited by the interpreter's
    recursion limit. Every child split lands after its parent in `splits`,
    so walking the list backwards always finds children already built.
    """
    if not entries:
        return None

    splits: list[_Split] = []
    pending: list[tuple[list[Entry], int | None, Literal["left", "right"]]] = [
        (entries, None, "left")
    ]
    while pending:
        group, parent, side = pending.pop()
        center, left, right, covering = _split(group, domain)
        index = len(splits)
        splits.append(_Split(center=center, covering=covering))
        if parent is not None:
            setattr(splits[parent], side, index)
        if left:
            pending.append((left, index, "left"))
        if right:
            pending.append((right, index, "right"))

    nodes: list[Node | None] = [None] * len(splits)
    for index in reversed(range(len(splits))):
        split = splits[index]
        nodes[index] = Node(
            center=split.center,
            covering_by_lower=tuple(sorted(split.covering, key=attrgetter("lower"))),
            covering_by_upper=tuple(
                sorted(split.covering, key=attrgetter("upper"), reverse=True)
            ),
            left=None if split.left is None else nodes[split.left],
            right=None if split.right is None else nodes[split.right],
        )
    return nodes[0]


def build(intervals: Iterable[Interval], domain: Domain) -> Node | None:
    """Validate intervals and build the tree over them.

    Raises:
        InvalidInterval: If any interval cannot be stored; nothing is built
    """
    return build_entries(validate_all(intervals, domain), domain)


def iter_nodes(root: Node | None) -> Iterator[tuple[Node, int]]:
    """Yield (node, depth) pairs in pre-order, root at depth 1."""
    stack: list[tuple[Node, int]] = [] if root is None else [(root, 1)]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        if node.right is not None:
            stack.append((node.right, depth + 1))
        if node.left is not None:
            stack.append((node.left, depth + 1))
