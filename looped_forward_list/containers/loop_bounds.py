from __future__ import annotations
import operator


class LoopConfigurationError(ValueError):
    """
    Raised when a looped sequence cannot be built from the given values and loop indices.

    Attributes:
        index_name (str | None):
            Which index was rejected, "loop_from" or "loop_to". None when the input was empty.

        index (object):
            The rejected index value, or None when the input was empty.

        length (int):
            Number of initial values the sequence was built from.
    """

    index_name: str | None
    index: object
    length: int

    def __init__(self, message: str, index_name: str | None, index: object, length: int):
        super().__init__(message)
        self.index_name = index_name
        self.index = index
        self.length = length


def _check_index(index_name: str, index: object, length: int) -> int:
    # bool is an int subclass but never a meaningful position
    position: int | None = None
    if not isinstance(index, bool):
        try:
            position = operator.index(index)  # type: ignore[arg-type]
        except TypeError:
            position = None

    if position is None or not 0 <= position < length:
        raise LoopConfigurationError(
            f"wrong {index_name} {index!r}: expected an integer in [0, {length - 1}]",
            index_name, index, length
        )
    return position


def validate_loop_bounds(length: int, loop_from: object, loop_to: object) -> tuple[int, int]:
    """
    Checks that a looped sequence of `length` elements can be wired from `loop_from` to
    `loop_to`.

    Both indices are zero-based and must lie in `[0, length - 1]`. Their relative order does not
    matter. `loop_from` is checked before `loop_to`, so when both are wrong the error names
    `loop_from`. Any integer type implementing `__index__` is accepted, e.g. `numpy.int64`
    positions returned by `np.flatnonzero` or `np.argmax`.

    Args:
        length (int):
            Number of initial values.
        loop_from (object):
            Index of the element whose successor is redefined.
        loop_to (object):
            Index of the element that becomes that successor.

    Returns:
        tuple[int, int]:
            `loop_from` and `loop_to` converted to plain `int`.

    Raises:
        LoopConfigurationError:
            If the sequence is empty or either index is not a valid position.
    """
    if length == 0:
        raise LoopConfigurationError("cannot loop an empty sequence", None, None, 0)

    return _check_index("loop_from", loop_from, length), _check_index("loop_to", loop_to, length)
