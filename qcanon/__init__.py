"""
qcanon: Quantum Operation Combinators
=====================================

A small algebra of capability-tagged quantum operations over Qiskit
circuits, and an amplitude-amplification driver built on it.

Key Features:
- Operations with explicit adjoint and controlled forms
- With / WithA / WithC / WithCA conjugation combinators
- Adapters between state, deterministic, oblivious and reflection oracles
- Reflections about |0...0⟩, |1...1⟩, a flag qubit or a prepared state
- Standard and fixed-point amplitude amplification
- Grover database search sample
"""

__version__ = "1.0.0"

from .core import (
    Capability,
    Operation,
    CanonError,
    CapabilityError,
    FlagIndexError,
    InvalidArgumentError,
    composite,
    partial,
    apply_to_each,
    with_,
    with_a,
    with_c,
    with_ca,
)

from .oracles import (
    StateOracle,
    DeterministicStateOracle,
    ObliviousOracle,
    ReflectionOracle,
    oblivious_oracle_from_deterministic_state_oracle,
    deterministic_state_oracle_from_state_oracle,
    state_oracle_from_deterministic_state_oracle,
)

from .amplification import (
    r_all0,
    r_all1,
    reflection_start,
    reflection_oracle_from_deterministic_state_oracle,
    target_state_reflection_oracle,
    ReflectionPhases,
    standard_phases,
    fixed_point_phases,
    amplitude_amplification,
    amplitude_amplification_by_reflections,
    amplitude_amplification_by_oracle,
    success_probability,
)

__all__ = [
    'Capability',
    'Operation',
    'CanonError',
    'CapabilityError',
    'FlagIndexError',
    'InvalidArgumentError',
    'composite',
    'partial',
    'apply_to_each',
    'with_',
    'with_a',
    'with_c',
    'with_ca',
    'StateOracle',
    'DeterministicStateOracle',
    'ObliviousOracle',
    'ReflectionOracle',
    'oblivious_oracle_from_deterministic_state_oracle',
    'deterministic_state_oracle_from_state_oracle',
    'state_oracle_from_deterministic_state_oracle',
    'r_all0',
    'r_all1',
    'reflection_start',
    'reflection_oracle_from_deterministic_state_oracle',
    'target_state_reflection_oracle',
    'ReflectionPhases',
    'standard_phases',
    'fixed_point_phases',
    'amplitude_amplification',
    'amplitude_amplification_by_reflections',
    'amplitude_amplification_by_oracle',
    'success_probability',
]
