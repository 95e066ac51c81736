"""
Error hierarchy for the query filter serializers.
"""


class FilterError(Exception):
    """Base class for all errors raised while handling encoded filters."""


class ParsingError(FilterError):
    """Raised when an encoded filter or a constraint cannot be understood.

    Callers treat this as malformed user input.
    """


class InternalConsistencyError(FilterError):
    """Raised when a stage receives data that an earlier stage should never produce."""
