"""
Sequence construction helpers: integer ranges and one-level flattening.
"""

from typing import Iterable, List, TypeVar, Union

import numpy as np

from sequtils.utils.errors import InvalidArgumentError

T = TypeVar("T")

# Container types that flatten() expands; anything else is a raw element.
# Strings are deliberately absent so "ab" stays "ab" rather than "a", "b".
NESTED_TYPES = (list, tuple, np.ndarray)


def int_range(length: int, offset: int = 0) -> List[int]:
    """
    Generate `length` consecutive integers starting at `offset`.

    **Functionally**:
    - int_range(0) -> []
    - int_range(3) -> [0, 1, 2]
    - int_range(6, 4) -> [4, 5, 6, 7, 8, 9]

    The values run from offset to offset + length - 1 inclusive.

    Args:
        length: Number of integers to generate (>= 0).
        offset: First value of the range (default 0).

    Returns:
        A new list of `length` integers.

    Raises:
        InvalidArgumentError: If length is negative.
    """
    if length < 0:
        raise InvalidArgumentError(f"int_range length must be >= 0, got {length}")
    return list(range(offset, offset + length))


def flatten(mixed: Iterable[Union[T, List[T]]]) -> List[T]:
    """
    Remove one level of nesting from a mixed sequence.

    **Conceptual**: The argument mixes raw elements and sub-sequences of raw
    elements, e.g. [[1, 2], 3, [4]]. The result is a new flat list with the
    sub-sequences spliced in place: [1, 2, 3, 4].

    **Functionally**:
    - Lists, tuples and 1-D numpy arrays are expanded; every other item
      (including strings) is copied through unchanged.
    - Only one level is removed: [[1, [2]]] -> [1, [2]].
    - The input is never mutated.

    Args:
        mixed: Iterable of raw elements and/or sub-sequences.

    Returns:
        New list of raw elements, order preserved.
    """
    flat: List[T] = []
    for item in mixed:
        if isinstance(item, np.ndarray):
            # tolist() converts numpy scalars back to Python scalars
            flat.extend(item.tolist())
        elif isinstance(item, NESTED_TYPES):
            flat.extend(item)
        else:
            flat.append(item)
    return flat
