"""Exceptions raised by probstats."""


class InvalidParameter(ValueError):
    """A distribution was constructed with parameters outside its domain.

    Subclasses :class:`ValueError` so callers that already guard
    constructors with ``except ValueError`` keep working.
    """
