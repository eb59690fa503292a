"""
Oracle Module
=============

Oracle shapes and the adapters converting between them.
"""

from .types import (
    StateOracle,
    DeterministicStateOracle,
    ObliviousOracle,
    ReflectionOracle,
    check_flag_index,
    exclude,
)

from .adapters import (
    oblivious_oracle_from_deterministic_state_oracle,
    deterministic_state_oracle_from_state_oracle,
    state_oracle_from_deterministic_state_oracle,
    identity_oblivious_oracle,
)

__all__ = [
    'StateOracle',
    'DeterministicStateOracle',
    'ObliviousOracle',
    'ReflectionOracle',
    'check_flag_index',
    'exclude',
    'oblivious_oracle_from_deterministic_state_oracle',
    'deterministic_state_oracle_from_state_oracle',
    'state_oracle_from_deterministic_state_oracle',
    'identity_oblivious_oracle',
]
