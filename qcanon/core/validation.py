"""Argument checks shared by oracles, phase schedules and simulation."""

import numpy as np

from qcanon.core.errors import InvalidArgumentError


def check_integer(value, what: str) -> int:
    """Return ``value`` as int, or raise ``InvalidArgumentError``.

    ``bool`` is rejected even though it subclasses ``int``.
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidArgumentError(f"{what} must be an integer, got {value!r}")
    return int(value)
