from __future__ import annotations
from typing import Protocol, TypeVar, Iterator, runtime_checkable

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class ForwardCursor(Protocol[T_co]):
    """
    A position within a forward-only sequence, or the end marker.

    Cursors are immutable: `advance()` returns a new cursor and leaves the receiver untouched,
    so a cursor can be copied simply by keeping a reference to it.

    Two cursors compare equal iff they denote the same position. Equality must be an identity
    check on position, never a comparison of the values stored there.
    """

    def value(self) -> T_co: ...

    def advance(self) -> ForwardCursor[T_co]: ...

    def __eq__(self, other: object) -> bool: ...


@runtime_checkable
class ForwardSequence(Protocol[T_co]):
    """
    Anything that can hand out a cursor at its first element and the canonical end cursor.
    """

    def begin(self) -> ForwardCursor[T_co]: ...

    def end(self) -> ForwardCursor[T_co]: ...


def iter_values(sequence: ForwardSequence[T]) -> Iterator[T]:
    """
    Yields the values of a sequence by walking its cursors from `begin()` to `end()`.

    The walk never terminates on a sequence that contains a cycle; bound it with
    `itertools.islice` or `has_cycle()` first.

    Args:
        sequence (ForwardSequence[T]):
            The sequence to walk.

    Returns:
        Iterator[T]:
            The values in traversal order.
    """
    end = sequence.end()
    cursor = sequence.begin()
    while cursor != end:
        yield cursor.value()
        cursor = cursor.advance()
