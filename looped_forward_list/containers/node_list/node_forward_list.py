from __future__ import annotations
from dataclasses import dataclass
import logging
from types import TracebackType
from typing import Generic, Iterable, Iterator, Self, TypeVar
import weakref

from looped_forward_list.containers.loop_bounds import validate_loop_bounds
from looped_forward_list.cursor.forward_cursor import iter_values

T = TypeVar("T")

_logger = logging.getLogger(__name__)


# eq=False keeps identity comparison; a value-based __eq__ would recurse forever through a loop
@dataclass(eq=False)
class Node(Generic[T]):
    """
    A singly-linked node. Nodes are shared by every list and cursor that references them.

    Attributes:
        value (T):
            The stored element.

        next (Node[T] | None):
            The structural successor, or None at the end of the list.
    """
    value: T
    next: Node[T] | None = None


class NodeCursor(Generic[T]):
    """
    Cursor over a chain of `Node` objects.

    The cursor holds a reference to its node, keeping it alive. A cursor without a node is the
    end marker. Equality is node identity.
    """

    __slots__ = ("_node",)

    _node: Node[T] | None

    def __init__(self, node: Node[T] | None):
        self._node = node

    def value(self) -> T:
        if self._node is None:
            raise IndexError("cannot dereference the end cursor")
        return self._node.value

    def advance(self) -> NodeCursor[T]:
        if self._node is None:
            raise IndexError("cannot advance the end cursor")
        return NodeCursor(self._node.next)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NodeCursor):
            return NotImplemented
        return self._node is other._node

    def __hash__(self) -> int:
        return id(self._node)

    def __repr__(self) -> str:
        if self._node is None:
            return "NodeCursor(end)"
        return f"NodeCursor({self._node.value!r})"


class ForwardList(Generic[T]):
    """
    A plain singly-linked list built from heap-allocated, shared `Node` objects.

    The list is built by pushing every value to the front and then reversing the chain in place,
    so the final order equals the input order.

    Attributes:
        _head (Node[T] | None):
            First node, or None for an empty list.

        _length (int):
            Number of values the list was built from.
    """

    _head: Node[T] | None
    _length: int

    def __init__(self, values: Iterable[T] = ()):
        self._head = None
        self._length = 0
        for value in values:
            self._push_front(value)
        self._reverse()

    def _push_front(self, value: T) -> None:
        self._head = Node(value, self._head)
        self._length += 1

    def _reverse(self) -> None:
        prev: Node[T] | None = None
        current = self._head
        while current is not None:
            nxt = current.next
            current.next = prev
            prev = current
            current = nxt
        self._head = prev

    def _node_at(self, index: int) -> Node[T]:
        """
        Returns the node at `index` by walking from the head. The caller guarantees the index is
        valid.
        """
        node = self._head
        for _ in range(index):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def begin(self) -> NodeCursor[T]:
        return NodeCursor(self._head)

    def end(self) -> NodeCursor[T]:
        return NodeCursor(None)

    def __iter__(self) -> Iterator[T]:
        return iter_values(self)

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"ForwardList({list(self)!r})"


def _restore_next(node: Node[T], original_next: Node[T] | None) -> None:
    node.next = original_next
    _logger.debug("Restored original successor of looped node %r", node.value)


class LoopedForwardList(ForwardList[T]):
    """
    A singly-linked list whose element at `loop_from` is rewired to point at the element at
    `loop_to` instead of its natural successor.

    When `loop_to <= loop_from` the rewiring creates a cycle and every traversal starting at
    `begin()` is infinite. When `loop_to > loop_from` the rewiring only skips the elements in
    between and the traversal still reaches `end()`.

    The rewired link lives in nodes that outstanding cursors may share. The original successor
    is saved at construction and written back exactly once, on `close()`, when leaving a `with`
    block, or when the list is garbage-collected, whichever comes first. Cursors taken before
    that point then observe the original, unlooped chain.

    Attributes:
        _loop_from (int):
            Index of the rewired element.

        _loop_to (int):
            Index of the element that became its successor.

        _finalizer (weakref.finalize):
            Restores the saved successor; also runs if the list is collected without `close()`.
    """

    _loop_from: int
    _loop_to: int
    _finalizer: weakref.finalize

    def __init__(self, values: Iterable[T], loop_from: int, loop_to: int):
        """
        Builds the list and wires the loop.

        Args:
            values (Iterable[T]):
                The initial values, in order. Must not be empty.
            loop_from (int):
                Zero-based index of the element whose successor is redefined.
            loop_to (int):
                Zero-based index of the element that becomes that successor.

        Raises:
            LoopConfigurationError:
                If `values` is empty or either index is outside `[0, len(values) - 1]`.
        """
        super().__init__(values)
        loop_from, loop_to = validate_loop_bounds(self._length, loop_from, loop_to)

        self._loop_from = loop_from
        self._loop_to = loop_to

        from_node = self._node_at(loop_from)
        original_next = from_node.next
        from_node.next = self._node_at(loop_to)

        # the callback must not reference self or the list would never be collected
        self._finalizer = weakref.finalize(self, _restore_next, from_node, original_next)

        _logger.debug(
            "Wired loop %d -> %d over %d nodes", loop_from, loop_to, self._length
        )

    @property
    def loop_from(self) -> int:
        return self._loop_from

    @property
    def loop_to(self) -> int:
        return self._loop_to

    @property
    def closed(self) -> bool:
        return not self._finalizer.alive

    def close(self) -> None:
        """
        Restores the original successor of the `loop_from` node. Calling it again is a no-op.

        Cursors remain usable afterwards and follow the original chain.
        """
        self._finalizer()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"LoopedForwardList(length={self._length}, loop_from={self._loop_from}, "
            f"loop_to={self._loop_to}, closed={self.closed})"
        )
