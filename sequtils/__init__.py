"""
sequtils: numeric, sequence, random sampling and binary search helpers.

Every helper is a plain function over its arguments. The random helpers take
an optional `source` (see RandomSource) so callers can make them
deterministic.
"""

from sequtils.utils.errors import InvalidArgumentError
from sequtils.utils.numeric import almost_equals, next_power_of_two, wrap_mod
from sequtils.utils.randomness import (
    NumpyRandomSource,
    PythonRandomSource,
    RandomSource,
    SequenceRandomSource,
    get_default_random_source,
    get_seeded_random_source,
    random_int,
    random_ints,
    random_ints_no_reps,
    set_default_random_source,
    shuffle,
)
from sequtils.utils.search import NOT_FOUND, binary_search, lower_bound, upper_bound
from sequtils.utils.sequences import flatten, int_range

__version__ = "0.1.0"

__all__ = [
    "InvalidArgumentError",
    "NOT_FOUND",
    "NumpyRandomSource",
    "PythonRandomSource",
    "RandomSource",
    "SequenceRandomSource",
    "almost_equals",
    "binary_search",
    "flatten",
    "get_default_random_source",
    "get_seeded_random_source",
    "int_range",
    "lower_bound",
    "next_power_of_two",
    "random_int",
    "random_ints",
    "random_ints_no_reps",
    "set_default_random_source",
    "shuffle",
    "upper_bound",
    "wrap_mod",
]
