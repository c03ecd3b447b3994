"""
Random source abstraction and random sampling helpers.

This module provides a simple, testable way to obtain uniform random floats via
a source object rather than calling a global generator directly. Every helper
accepts an optional `source`; tests pass a seeded or scripted source and get
deterministic output, while production code can omit it and use the default
source configured through sequtils.config.settings.

The helpers are NOT cryptographically secure: they are built on numpy's PCG64
or Python's Mersenne Twister, neither of which is suitable for secrets.
"""

import logging
import math
import random
from typing import Iterable, List, MutableSequence, Optional, Protocol, TypeVar

import numpy as np

from sequtils.config.settings import RandomSettings, get_settings
from sequtils.utils.errors import InvalidArgumentError
from sequtils.utils.sequences import int_range

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=MutableSequence)


class RandomSource(Protocol):
    """
    Abstract uniform random source protocol.

    **Conceptual**: A RandomSource is any object that can answer "give me a
    uniform float in [0, 1)". Depending on this abstraction instead of a global
    generator makes the sampling helpers testable and reproducible.

    **Usage**: Helpers accept `source=` and call source.random() for every
    draw. In production, omit it (or pass NumpyRandomSource()); in tests, pass
    NumpyRandomSource(seed) or a SequenceRandomSource with scripted values.

    **Example**:
        shuffle(cards, source=NumpyRandomSource(42))  # same order every run
    """

    def random(self) -> float:
        """
        Return the next uniform float in the half-open interval [0, 1).
        """
        ...


class NumpyRandomSource:
    """
    Random source backed by numpy's Generator (PCG64).

    Each instance owns its own generator, so seeding one source never affects
    another or numpy's legacy global state.
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Args:
            seed: Optional seed. None seeds from OS entropy.
        """
        self._rng = np.random.default_rng(seed)

    def random(self) -> float:
        """Return the next uniform float in [0, 1) from the numpy generator."""
        # Generator.random() returns a numpy float64; callers expect a Python float
        return float(self._rng.random())


class PythonRandomSource:
    """Random source backed by a private random.Random instance (Mersenne Twister)."""

    def __init__(self, seed: Optional[int] = None):
        """
        Args:
            seed: Optional seed. None seeds from OS entropy.
        """
        self._rng = random.Random(seed)

    def random(self) -> float:
        """Return the next uniform float in [0, 1) from the private generator."""
        return self._rng.random()


class SequenceRandomSource:
    """
    Random source that replays a fixed list of values, cycling when exhausted.

    **Conceptual**: The random counterpart of a frozen clock. It lets a test
    dictate exactly which "random" numbers a helper sees, e.g. always 0.0 to
    force the smallest choice, or always just below 1.0 to force the largest.

    **Usage**:
        source = SequenceRandomSource([0.0])
        random_int(1, 6, source=source)  # always 1
    """

    def __init__(self, values: Iterable[float]):
        """
        Args:
            values: Non-empty iterable of floats, each in [0, 1).

        Raises:
            InvalidArgumentError: If values is empty or contains a value
                                  outside [0, 1).
        """
        self._values = [float(v) for v in values]
        if not self._values:
            raise InvalidArgumentError("SequenceRandomSource needs at least one value")
        for v in self._values:
            if not 0.0 <= v < 1.0:
                raise InvalidArgumentError(
                    f"SequenceRandomSource values must be in [0, 1), got {v}"
                )
        self._position = 0

    def random(self) -> float:
        """Return the next scripted value, wrapping to the start after the last."""
        value = self._values[self._position]
        self._position = (self._position + 1) % len(self._values)
        return value


def get_seeded_random_source(seed: int) -> RandomSource:
    """
    Factory function to create a reproducible random source.

    Args:
        seed: Seed for the underlying numpy generator.

    Returns:
        NumpyRandomSource seeded with `seed`.
    """
    return NumpyRandomSource(seed)


def build_random_source(settings: RandomSettings) -> RandomSource:
    """
    Create a random source from RandomSettings.

    Args:
        settings: Backend name and optional seed.

    Returns:
        NumpyRandomSource or PythonRandomSource, seeded if settings.seed is set.
    """
    if settings.backend == "python":
        return PythonRandomSource(settings.seed)
    return NumpyRandomSource(settings.seed)


_default_source: Optional[RandomSource] = None


def get_default_random_source() -> RandomSource:
    """
    Get the process-wide default random source.

    Built lazily on first use from get_settings().random, then reused so a
    configured seed yields one reproducible stream across calls.

    Returns:
        The default RandomSource.
    """
    global _default_source

    if _default_source is None:
        settings = get_settings().random
        _default_source = build_random_source(settings)
        logger.debug(
            "Created default random source: backend=%s seeded=%s",
            settings.backend,
            settings.seed is not None,
        )

    return _default_source


def set_default_random_source(source: Optional[RandomSource]) -> None:
    """
    Replace the default random source.

    Passing None discards the current default; the next call to
    get_default_random_source() rebuilds it from settings.
    """
    global _default_source
    _default_source = source


def _resolve(source: Optional[RandomSource]) -> RandomSource:
    return source if source is not None else get_default_random_source()


def _uniform_index(source: RandomSource, low: int, size: int) -> int:
    """Uniform integer in [low, low + size) drawn from `source`."""
    return low + math.floor(source.random() * size)


def shuffle(sequence: S, source: Optional[RandomSource] = None) -> S:
    """
    Shuffle a mutable sequence in place.

    **Conceptual**: Produces a uniformly distributed random permutation using
    the Knuth / Fisher-Yates algorithm. Every element ends up somewhere in the
    output exactly once; nothing is duplicated or dropped.

    **Mathematical**: For i = 0 .. n-1:
        j = i + floor(u * (n - i)),  u ~ U[0, 1)
        swap(sequence[i], sequence[j])
    With an unbiased source every one of the n! permutations is equally likely.

    **Functionally**:
    - Mutates `sequence` and returns the same object (not a copy) for chaining.
    - Works on lists and 1-D numpy arrays.
    - Not safe to call concurrently on the same sequence.

    Args:
        sequence: Mutable sequence to permute.
        source: Random source; defaults to get_default_random_source().

    Returns:
        The input sequence, now permuted.
    """
    source = _resolve(source)
    n = len(sequence)
    for i in range(n):
        j = _uniform_index(source, i, n - i)
        sequence[i], sequence[j] = sequence[j], sequence[i]
    return sequence


def random_int(min_value: int, max_value: int, source: Optional[RandomSource] = None) -> int:
    """
    Generate a random integer between min_value and max_value inclusive.

    **Mathematical**:
        min_value + floor(u * (max_value + 1 - min_value)),  u ~ U[0, 1)

    For example random_int(1, 6) simulates a die roll.

    Args:
        min_value: Lower bound (inclusive).
        max_value: Upper bound (inclusive), must be >= min_value.
        source: Random source; defaults to get_default_random_source().

    Returns:
        Integer in [min_value, max_value].

    Raises:
        InvalidArgumentError: If max_value < min_value.
    """
    if max_value < min_value:
        raise InvalidArgumentError(
            f"random_int requires min_value <= max_value, got [{min_value}, {max_value}]"
        )
    return _uniform_index(_resolve(source), min_value, max_value + 1 - min_value)


def random_ints(
    count: int,
    min_value: int,
    max_value: int,
    source: Optional[RandomSource] = None
) -> List[int]:
    """
    Generate `count` independent random integers in [min_value, max_value].

    Values may repeat; use random_ints_no_reps for distinct values.

    Raises:
        InvalidArgumentError: If count < 0 or max_value < min_value.
    """
    if count < 0:
        raise InvalidArgumentError(f"random_ints count must be >= 0, got {count}")
    if max_value < min_value:
        raise InvalidArgumentError(
            f"random_ints requires min_value <= max_value, got [{min_value}, {max_value}]"
        )
    source = _resolve(source)
    return [random_int(min_value, max_value, source=source) for _ in range(count)]


def random_ints_no_reps(
    count: int,
    min_value: int,
    max_value: int,
    source: Optional[RandomSource] = None
) -> List[int]:
    """
    Generate `count` distinct random integers in [min_value, max_value).

    **Conceptual**: Drawing lottery numbers: 6 distinct numbers between 1 and
    90 inclusive is random_ints_no_reps(6, 1, 91). Calling random_int six times
    would not guarantee uniqueness.

    **Algorithm**: Build every candidate [min_value, ..., max_value - 1], run
    the Fisher-Yates loop for only the first `count` positions (each swaps with
    a uniform position in [i, N-1]), then keep the first `count` values.

    **Complexity**: O(N) time and space with N = max_value - min_value,
    regardless of `count`. Cheap for small ranges, wasteful when sampling a
    handful of values out of a huge range.

    Args:
        count: Number of values to draw, 0 <= count <= max_value - min_value.
        min_value: Lower bound (inclusive).
        max_value: Upper bound (exclusive).
        source: Random source; defaults to get_default_random_source().

    Returns:
        List of `count` pairwise-distinct integers in [min_value, max_value).

    Raises:
        InvalidArgumentError: If count is negative or exceeds the number of
                              candidates.
    """
    size = max_value - min_value
    if count < 0 or size < 0 or count > size:
        raise InvalidArgumentError(
            f"random_ints_no_reps cannot draw {count} distinct values "
            f"from [{min_value}, {max_value})"
        )

    source = _resolve(source)
    numbers = int_range(size, min_value)
    for i in range(count):
        j = _uniform_index(source, i, size - i)
        if j != i:
            numbers[i], numbers[j] = numbers[j], numbers[i]

    del numbers[count:]
    return numbers
