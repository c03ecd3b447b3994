"""
Generic helper functions shared across modules.

Includes numeric comparison helpers, range/flatten sequence helpers,
random sampling with an injectable random source, binary search helpers,
and error classes.
"""
