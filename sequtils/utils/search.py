"""
Binary search helpers over ascending sequences.

All functions assume the sequence is sorted in ascending order by `<`. An
unsorted sequence does not crash, it just produces meaningless indices.

Each helper halves the window [i, j) on every step, so they run in O(log N)
time with O(1) extra space. Midpoints are computed as i + (j - i) // 2.
"""

from typing import Any, Protocol, Sequence, TypeVar

# Returned by binary_search when the target is absent. Never a valid index.
NOT_FOUND = -1


class SupportsLessThan(Protocol):
    """Element type with a total order exposed through `<`."""

    def __lt__(self, other: Any) -> bool:
        ...


E = TypeVar("E", bound=SupportsLessThan)


def binary_search(sequence: Sequence[E], target: E) -> int:
    """
    Find the index of `target` in an ascending sequence.

    **Functionally**:
    - Uses a three-way comparison at each step (less / greater / equal).
    - If `target` occurs more than once, the index of any one occurrence is
      returned, not necessarily the first. Use lower_bound for the first.
    - Returns NOT_FOUND (-1) when `target` is absent, including for an empty
      sequence.

    Args:
        sequence: Ascending sequence of comparable elements.
        target: Element to look for.

    Returns:
        Index i such that sequence[i] == target, or NOT_FOUND.
    """
    i, j = 0, len(sequence)
    while j > i:
        k = i + (j - i) // 2
        if sequence[k] < target:
            i = k + 1
        elif target < sequence[k]:
            j = k
        else:
            return k
    return NOT_FOUND


def lower_bound(sequence: Sequence[E], value: E) -> int:
    """
    Find the first index whose element is >= `value`.

    This is the leftmost position where `value` could be inserted while
    keeping the sequence sorted.

    **Edge cases**:
    - Empty sequence -> 0.
    - `value` <= every element -> 0.
    - `value` > every element -> len(sequence).

    Args:
        sequence: Ascending sequence of comparable elements.
        value: Probe value.

    Returns:
        Insertion index in [0, len(sequence)].
    """
    i, j = 0, len(sequence)
    while j > i:
        k = i + (j - i) // 2
        if sequence[k] < value:
            i = k + 1
        else:
            j = k
    return i


def upper_bound(sequence: Sequence[E], value: E) -> int:
    """
    Find the first index whose element is strictly greater than `value`.

    Rightmost insertion point for `value`; together with lower_bound,
    sequence[lower_bound(s, v):upper_bound(s, v)] is the run of elements
    equal to v.
    """
    i, j = 0, len(sequence)
    while j > i:
        k = i + (j - i) // 2
        if value < sequence[k]:
            j = k
        else:
            i = k + 1
    return i
