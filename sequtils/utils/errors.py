"""
Error types raised by the sequtils helpers.

Only precondition violations are errors. "Not found" results from the search
helpers are reported through a sentinel return value instead (see
sequtils.utils.search.NOT_FOUND), because absence is an ordinary outcome.
"""


class InvalidArgumentError(ValueError):
    """
    Raised when a helper is called outside its documented input domain.

    Subclasses ValueError so callers that already catch ValueError (the
    convention used by the settings loaders) handle it without changes.
    """
