from itertools import islice
import numpy as np
import pytest
from looped_forward_list.containers.loop_bounds import LoopConfigurationError
from looped_forward_list.containers.index_view.looped_sequence_view import (
    IndexCursor,
    LoopedSequenceView,
    SequenceView,
)

# pylint: disable=protected-access
# pyright: reportPrivateUsage=false

VALUES = [12, 14, 16, 18, 20, 22, 24, 26]


@pytest.fixture(name="looped")
def looped_impl() -> LoopedSequenceView[int]:
    return LoopedSequenceView(VALUES, 6, 2)


def test_plain_view_preserves_order() -> None:
    view = SequenceView(VALUES)
    assert list(view) == VALUES
    assert len(view) == 8


def test_plain_view_empty() -> None:
    view: SequenceView[int] = SequenceView()
    assert view.begin() == view.end()
    assert list(view) == []


def test_view_copies_lists() -> None:
    data = list(VALUES)
    view = SequenceView(data)
    data[0] = 99
    assert view.begin().value() == 12


def test_backward_loop_wraps(looped: LoopedSequenceView[int]) -> None:
    assert list(islice(looped, 12)) == [12, 14, 16, 18, 20, 22, 24, 16, 18, 20, 22, 24]


def test_forward_loop_skips_and_ends() -> None:
    view = LoopedSequenceView(VALUES, 2, 6)
    assert list(view) == [12, 14, 16, 24, 26]


def test_loop_properties(looped: LoopedSequenceView[int]) -> None:
    assert looped.loop_from == 6
    assert looped.loop_to == 2
    assert len(looped) == 8


def test_cursor_equality_ignores_duplicate_values() -> None:
    view = LoopedSequenceView(["a", "a", "a"], 2, 0)
    first = view.begin()
    second = first.advance()
    assert first.value() == second.value()
    assert first != second
    assert second.advance().advance() == first
    assert first.index == 0
    assert second.index == 1


def test_cursors_of_different_views_differ() -> None:
    a = SequenceView(VALUES)
    b = SequenceView(VALUES)
    assert a.begin() != b.begin()
    assert a.end() != b.end()
    assert a.end() == a.end()


def test_end_cursor_cannot_be_used(looped: LoopedSequenceView[int]) -> None:
    with pytest.raises(IndexError, match="dereference"):
        looped.end().value()
    with pytest.raises(IndexError, match="advance"):
        looped.end().advance()


def test_cursor_repr(looped: LoopedSequenceView[int]) -> None:
    assert repr(looped.begin()) == "IndexCursor(index=0)"
    assert repr(looped.end()) == "IndexCursor(end)"
    assert isinstance(looped.begin(), IndexCursor)


def test_repr(looped: LoopedSequenceView[int]) -> None:
    assert repr(looped) == f"LoopedSequenceView({VALUES!r}, loop_from=6, loop_to=2)"
    assert repr(SequenceView([1, 2])) == "SequenceView([1, 2])"


def test_numpy_storage_is_not_copied() -> None:
    arr = np.array(VALUES, dtype=np.int64)
    view = LoopedSequenceView(arr, 6, 2)
    assert np.shares_memory(view._storage, arr)
    arr[0] = 99
    assert view.begin().value() == 99


def test_numpy_storage_is_read_only_through_view() -> None:
    arr = np.array(VALUES)
    view = SequenceView(arr)
    assert arr.flags.writeable
    assert not view._storage.flags.writeable
    assert list(view) == VALUES
    assert repr(view) == f"SequenceView({VALUES!r})"


def test_numpy_storage_must_be_one_dimensional() -> None:
    with pytest.raises(ValueError, match="one-dimensional"):
        SequenceView(np.zeros((2, 2)))


def test_construction_rejects_empty() -> None:
    with pytest.raises(LoopConfigurationError, match="empty"):
        LoopedSequenceView([], 0, 0)
    with pytest.raises(LoopConfigurationError, match="empty"):
        LoopedSequenceView(np.array([]), 0, 0)


def test_construction_rejects_bad_indices() -> None:
    with pytest.raises(LoopConfigurationError, match="wrong loop_from"):
        LoopedSequenceView(VALUES, 8, 2)
    with pytest.raises(LoopConfigurationError, match="wrong loop_to"):
        LoopedSequenceView(VALUES, 6, 8)


def test_numpy_integer_indices_are_stored_as_int() -> None:
    arr = np.array(VALUES)
    view = LoopedSequenceView(arr, np.int64(6), np.flatnonzero(arr == 16)[0])
    assert type(view.loop_from) is int
    assert type(view.loop_to) is int
    assert view.loop_to == 2
    assert repr(view) == f"LoopedSequenceView({VALUES!r}, loop_from=6, loop_to=2)"


def test_constructor_docstring_has_summary() -> None:
    doc = LoopedSequenceView.__init__.__doc__
    assert doc is not None
    assert doc.strip().splitlines()[0] == "Wraps the values and configures the virtual loop."
