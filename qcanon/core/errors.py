"""Exception hierarchy for qcanon."""


class CanonError(Exception):
    """Base exception for all qcanon errors."""


class CapabilityError(CanonError, TypeError):
    """An operation lacks the adjoint or controlled capability a combinator needs."""


class FlagIndexError(CanonError, IndexError):
    """A flag index falls outside the register it is applied to."""


class InvalidArgumentError(CanonError, ValueError):
    """Invalid iteration count, phase schedule or oracle parameter."""
