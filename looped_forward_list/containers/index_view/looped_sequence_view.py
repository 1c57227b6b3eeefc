from __future__ import annotations
from collections.abc import Sequence
import logging
from typing import Any, Generic, Iterable, Iterator, TypeVar

import numpy as np
from numpy.typing import NDArray

from looped_forward_list.containers.loop_bounds import validate_loop_bounds
from looped_forward_list.cursor.forward_cursor import iter_values

T = TypeVar("T")

_logger = logging.getLogger(__name__)


class IndexCursor(Generic[T]):
    """
    Cursor over a `SequenceView`: the owning view plus an index, or no index for the end marker.

    Two cursors are equal when they belong to the same view object and hold the same index.
    Stored values are never compared, so duplicate values cannot alias positions.
    """

    __slots__ = ("_view", "_index")

    _view: SequenceView[T]
    _index: int | None

    def __init__(self, view: SequenceView[T], index: int | None):
        self._view = view
        self._index = index

    @property
    def index(self) -> int | None:
        return self._index

    def value(self) -> T:
        if self._index is None:
            raise IndexError("cannot dereference the end cursor")
        return self._view._storage[self._index]

    def advance(self) -> IndexCursor[T]:
        if self._index is None:
            raise IndexError("cannot advance the end cursor")
        return IndexCursor(self._view, self._view._successor(self._index))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IndexCursor):
            return NotImplemented
        return self._view is other._view and self._index == other._index

    def __hash__(self) -> int:
        return hash((id(self._view), self._index))

    def __repr__(self) -> str:
        if self._index is None:
            return "IndexCursor(end)"
        return f"IndexCursor(index={self._index})"


class SequenceView(Generic[T]):
    """
    A forward-only view over a contiguous sequence. Successor links are computed from indices on
    the fly; nothing is stored per element.

    Lists, tuples and other iterables are copied into a tuple. A one-dimensional numpy array is
    kept as a read-only view of the caller's buffer, without copying.

    Attributes:
        _storage (Sequence[T] | NDArray[Any]):
            The backing values.
    """

    _storage: Sequence[T] | NDArray[Any]

    def __init__(self, values: Iterable[T] | NDArray[Any] = ()):
        if isinstance(values, np.ndarray):
            if values.ndim != 1:
                raise ValueError(f"Expected a one-dimensional array, got {values.ndim} dimensions")
            storage = values.view()
            storage.flags.writeable = False
            self._storage = storage
        else:
            self._storage = tuple(values)

    def _successor(self, index: int) -> int | None:
        nxt = index + 1
        return nxt if nxt < len(self._storage) else None

    def begin(self) -> IndexCursor[T]:
        return IndexCursor(self, 0 if len(self._storage) else None)

    def end(self) -> IndexCursor[T]:
        return IndexCursor(self, None)

    def __iter__(self) -> Iterator[T]:
        return iter_values(self)

    def __len__(self) -> int:
        return len(self._storage)

    def _values_repr(self) -> str:
        if isinstance(self._storage, np.ndarray):
            return repr(self._storage.tolist())
        return repr(list(self._storage))

    def __repr__(self) -> str:
        return f"SequenceView({self._values_repr()})"


class LoopedSequenceView(SequenceView[T]):
    """
    A `SequenceView` whose element at `loop_from` has the element at `loop_to` as its successor.

    The wrap is virtual: the backing storage is never touched, so there is nothing to restore
    and any number of looped views may share one buffer.
    """

    _loop_from: int
    _loop_to: int

    def __init__(self, values: Iterable[T] | NDArray[Any], loop_from: int, loop_to: int):
        """
        Wraps the values and configures the virtual loop.

        Args:
            values (Iterable[T] | NDArray[Any]):
                The initial values, in order. Must not be empty.
            loop_from (int):
                Zero-based index of the element whose successor is redefined.
            loop_to (int):
                Zero-based index of the element that becomes that successor.

        Raises:
            LoopConfigurationError:
                If `values` is empty or either index is outside `[0, len(values) - 1]`.
            ValueError:
                If `values` is a numpy array with more than one dimension.
        """
        super().__init__(values)
        loop_from, loop_to = validate_loop_bounds(len(self._storage), loop_from, loop_to)
        self._loop_from = loop_from
        self._loop_to = loop_to
        _logger.debug(
            "Configured virtual loop %d -> %d over %d values", loop_from, loop_to, len(self)
        )

    @property
    def loop_from(self) -> int:
        return self._loop_from

    @property
    def loop_to(self) -> int:
        return self._loop_to

    def _successor(self, index: int) -> int | None:
        if index == self._loop_from:
            return self._loop_to
        return super()._successor(index)

    def __repr__(self) -> str:
        return (
            f"LoopedSequenceView({self._values_repr()}, loop_from={self._loop_from}, "
            f"loop_to={self._loop_to})"
        )
