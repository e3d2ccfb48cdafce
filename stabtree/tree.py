from collections.abc import Iterable, Iterator
from typing import Any

from stabtree.build import Node, build, iter_nodes
from stabtree.domain import Domain, DomainName, resolve_domain
from stabtree.errors import InvalidInterval
from stabtree.interval import Bound, Interval, is_nan
from stabtree.validation import Entry, validate


class IntervalTree:
    """Immutable index answering "which intervals contain this point?".

    The tree is built once from a collection of closed, finite intervals.
    Intervals with equal bounds are stored once. After construction nothing
    is mutated, so a tree can be queried from several threads without locks.

    Example:
        >>> tree = IntervalTree([Interval.closed(-10, 3), Interval.closed(-2, 5)])
        >>> sorted(str(i) for i in tree.search(3))
        ['[-10..3]', '[-2..5]']
    """

    def __init__(
        self,
        intervals: Iterable[Interval] = (),
        *,
        domain: "DomainName | Domain" = "exact",
    ) -> None:
        """
        Build the tree.

        Args:
            intervals: Closed intervals with finite numeric bounds
            domain: "exact" (default) compares bounds without rounding;
                "float" converts bounds and points to float first

        Raises:
            InvalidInterval: If any interval is open, unbounded, non-numeric
                or has a non-finite bound
            ValueError: If domain is not a known domain name
        """
        self._domain: Domain = resolve_domain(domain)
        self._root: Node | None = build(intervals, self._domain)
        self._size: int = sum(
            len(node.covering_by_lower) for node, _ in iter_nodes(self._root)
        )

    @property
    def root(self) -> Node | None:
        return self._root

    @property
    def domain(self) -> Domain:
        return self._domain

    @property
    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path."""
        return max((depth for _, depth in iter_nodes(self._root)), default=0)

    def search(self, point: Bound) -> set[Interval]:
        """Return every stored interval whose closed bounds contain point.

        Only one child is visited per level. When the point lies below a
        node's center, every covering interval already reaches past the
        point, so it contains the point iff its lower bound does not exceed
        it; scanning in ascending lower order can stop at the first miss.
        Above the center the same holds for the descending upper order.
        """
        found: set[Interval] = set()
        if is_nan(point):
            return found

        key = self._domain.key(point)
        node = self._root
        while node is not None:
            if key == node.center:
                # Children hold intervals strictly off the center
                found.update(entry.interval for entry in node.covering_by_lower)
                break
            if key < node.center:
                for entry in node.covering_by_lower:
                    if key < entry.lower or key > entry.upper:
                        break
                    found.add(entry.interval)
                node = node.left
            else:
                for entry in node.covering_by_upper:
                    if key < entry.lower or key > entry.upper:
                        break
                    found.add(entry.interval)
                node = node.right
        return found

    def _entries(self) -> Iterator[Entry]:
        for node, _ in iter_nodes(self._root):
            yield from node.covering_by_lower

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._root is not None

    def __iter__(self) -> Iterator[Interval]:
        """Yield stored intervals ordered by (lower, upper)."""
        entries = sorted(self._entries(), key=lambda entry: (entry.lower, entry.upper))
        return (entry.interval for entry in entries)

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, Interval):
            return False
        try:
            entry = validate(item, self._domain)
        except InvalidInterval:
            return False

        # An interval lives at the first node on its path whose center it spans
        node = self._root
        while node is not None:
            if entry.upper < node.center:
                node = node.left
            elif entry.lower > node.center:
                node = node.right
            else:
                return any(e.interval == item for e in node.covering_by_lower)
        return False

    def verify(self) -> None:
        """Raise RuntimeError if a structural invariant does not hold.

        Checks that every covering entry spans its node's center, that both
        covering views hold the same entries in the right order, that every
        entry under a left (right) child lies entirely below (above) the
        ancestor's center, and that no interval is stored twice.
        """
        seen: set[Interval] = set()
        count = 0
        # (node, entries must end below this, entries must start above this)
        stack: list[tuple[Node, Any, Any]] = []
        if self._root is not None:
            stack.append((self._root, None, None))

        while stack:
            node, below, above = stack.pop()
            center = node.center
            by_lower = node.covering_by_lower
            by_upper = node.covering_by_upper

            if len(by_lower) != len(by_upper) or {e.interval for e in by_lower} != {
                e.interval for e in by_upper
            }:
                raise RuntimeError(f"Covering views disagree at center {center}")
            if any(a.lower > b.lower for a, b in zip(by_lower, by_lower[1:])):
                raise RuntimeError(f"Lower-bound view out of order at center {center}")
            if any(a.upper < b.upper for a, b in zip(by_upper, by_upper[1:])):
                raise RuntimeError(f"Upper-bound view out of order at center {center}")

            for entry in by_lower:
                if not entry.lower <= center <= entry.upper:
                    raise RuntimeError(
                        f"{entry.interval} does not span center {center}"
                    )
                if below is not None and not entry.upper < below:
                    raise RuntimeError(
                        f"{entry.interval} reaches past ancestor center {below}"
                    )
                if above is not None and not entry.lower > above:
                    raise RuntimeError(
                        f"{entry.interval} reaches before ancestor center {above}"
                    )
                if entry.interval in seen:
                    raise RuntimeError(f"{entry.interval} is stored more than once")
                seen.add(entry.interval)
                count += 1

            if node.left is not None:
                left_below = center if below is None else min(below, center)
                stack.append((node.left, left_below, above))
            if node.right is not None:
                right_above = center if above is None else max(above, center)
                stack.append((node.right, below, right_above))

        if count != self._size:
            raise RuntimeError(f"Tree holds {count} intervals, expected {self._size}")

    def __repr__(self) -> str:
        return (
            f"IntervalTree(size={self._size}, height={self.height}, "
            f"domain={self._domain.name!r})"
        )
