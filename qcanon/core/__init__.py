"""
Core Module
===========

Capability-tagged operations, intrinsic gates and conjugation combinators.
"""

from .errors import (
    CanonError,
    CapabilityError,
    FlagIndexError,
    InvalidArgumentError,
)

from .operation import (
    Capability,
    Operation,
    common_capabilities,
    composite,
    partial,
)

from .intrinsics import (
    H,
    R1,
    RY,
    X,
    Z,
    append_controlled,
    apply_to_each,
)

from .conjugation import (
    with_,
    with_a,
    with_c,
    with_ca,
    conjugate,
)

__all__ = [
    'CanonError',
    'CapabilityError',
    'FlagIndexError',
    'InvalidArgumentError',
    'Capability',
    'Operation',
    'common_capabilities',
    'composite',
    'partial',
    'H',
    'R1',
    'RY',
    'X',
    'Z',
    'append_controlled',
    'apply_to_each',
    'with_',
    'with_a',
    'with_c',
    'with_ca',
    'conjugate',
]
