from __future__ import annotations
import logging
from typing import Any

from looped_forward_list.cursor.forward_cursor import ForwardSequence

_logger = logging.getLogger(__name__)


def has_cycle(sequence: ForwardSequence[Any]) -> bool:
    """
    Reports whether advancing from `begin()` forever would revisit a position.

    Uses Floyd's tortoise and hare walk: a slow cursor moves one step per round and a fast
    cursor two. If the fast cursor runs into `end()` the sequence is finite. If the two cursors
    ever compare equal, the fast one has lapped the slow one inside a cycle. With `M` steps
    before a cycle of length `C`, they meet within `M + C` rounds. Extra space is constant and
    the sequence is only read, so repeated calls give the same answer.

    Works on any object with `begin()` and `end()` whose cursors provide `advance()` and
    position equality, e.g. `ForwardList`, `LoopedForwardList`, `SequenceView` and
    `LoopedSequenceView`.

    Args:
        sequence (ForwardSequence[Any]):
            The sequence to inspect.

    Returns:
        bool:
            True if the traversal is cyclic, False if it reaches `end()`.
    """
    end = sequence.end()
    first = sequence.begin()

    # zero or one element cannot form a cycle unless it loops onto itself
    if first == end or first.advance() == end:
        return False

    slow = first
    fast = first
    rounds = 0
    while fast != end:
        step = fast.advance()
        if step == end:
            break
        slow = slow.advance()
        fast = step.advance()
        rounds += 1
        if slow == fast:
            _logger.debug("Cycle detected after %d rounds", rounds)
            return True

    _logger.debug("No cycle: end reached after %d rounds", rounds)
    return False
