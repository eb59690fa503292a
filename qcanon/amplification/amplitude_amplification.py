"""
Amplitude Amplification
=======================

Iterates a marked-state reflection and a start-state reflection:

    Start → (reflect marked[k]; reflect start[k]) for k = 1..M → measure

Mathematical Foundation:
------------------------
If the start state has amplitude sin(β) on the marked subspace, with
β = asin(sqrt(λ)), the standard (π, π) schedule leaves amplitude
sin((2M+1)·β) after M iterations. For Grover search over n qubits with
|marked| solutions, λ = |marked| / 2ⁿ.

All drivers validate the iteration count and phase schedule when they are
built, so an invalid schedule never appends a single gate. The composed
operation supports exactly the capabilities shared by both reflections.

Author: qcanon Development Team
Date: October 2026
"""

import logging
import math
from typing import Union

import numpy as np

from qcanon.core.errors import InvalidArgumentError
from qcanon.core.operation import Capability, Operation, composite
from qcanon.amplification.phases import (
    ReflectionPhases,
    check_iteration_count,
    standard_phases,
)
from qcanon.amplification.reflections import (
    reflection_oracle_from_deterministic_state_oracle,
    target_state_reflection_oracle,
)
from qcanon.oracles.adapters import deterministic_state_oracle_from_state_oracle

logger = logging.getLogger(__name__)


def _as_phases(phases: Union[ReflectionPhases, tuple]) -> ReflectionPhases:
    if isinstance(phases, ReflectionPhases):
        return phases
    if len(phases) != 2:
        raise InvalidArgumentError(
            f"a phase schedule is a (marked, start) pair, got {len(phases)} sequences"
        )
    marked, start = phases
    return ReflectionPhases(tuple(marked), tuple(start))


def amplitude_amplification_by_reflections(
    phases: ReflectionPhases,
    reflect_marked: Operation,
    reflect_start: Operation,
) -> Operation:
    """
    Amplitude amplification with an arbitrary phase schedule.

    Parameters
    ----------
    phases : ReflectionPhases or (marked, start) pair of sequences
        One phase pair per iteration.
    reflect_marked : ReflectionOracle
        Reflection about the marked subspace.
    reflect_start : ReflectionOracle
        Reflection about the start state.

    Returns
    -------
    Operation
        ``op(circuit, register)``; each iteration applies
        ``reflect_marked(marked[k], register)`` then
        ``reflect_start(start[k], register)``.
    """
    phases = _as_phases(phases)
    schedule = list(phases)

    def steps(register):
        sequence = []
        for marked_phase, start_phase in schedule:
            sequence.append((reflect_marked, (marked_phase, register)))
            sequence.append((reflect_start, (start_phase, register)))
        return sequence

    operation = composite(
        steps,
        [reflect_marked, reflect_start],
        name=f"AmpAmp[{len(schedule)}]({reflect_marked.name}, {reflect_start.name})",
    )
    logger.debug("Built %r with %d iterations", operation, len(schedule))
    return operation


def amplitude_amplification(
    iteration_count: int,
    reflect_marked: Operation,
    reflect_start: Operation,
) -> Operation:
    """Standard amplitude amplification: ``iteration_count`` rounds at phase π."""
    return amplitude_amplification_by_reflections(
        standard_phases(iteration_count), reflect_marked, reflect_start
    )


def amplitude_amplification_by_oracle_phases(
    phases: ReflectionPhases,
    state_oracle: Operation,
    flag_index: int,
) -> Operation:
    """
    Amplitude amplification driven by a state oracle.

    The start reflection is about the state ``state_oracle`` prepares with
    flag ``flag_index``; the marked reflection phases the flag qubit being
    |1⟩. ``state_oracle`` must support ADJOINT. The caller prepares the
    start state before applying the returned operation.
    """
    start_oracle = deterministic_state_oracle_from_state_oracle(flag_index, state_oracle)
    reflect_start = reflection_oracle_from_deterministic_state_oracle(start_oracle)
    reflect_marked = target_state_reflection_oracle(flag_index)
    return amplitude_amplification_by_reflections(phases, reflect_marked, reflect_start)


def amplitude_amplification_by_oracle(
    iteration_count: int,
    state_oracle: Operation,
    flag_index: int,
) -> Operation:
    """Standard-phase version of ``amplitude_amplification_by_oracle_phases``."""
    return amplitude_amplification_by_oracle_phases(
        standard_phases(iteration_count), state_oracle, flag_index
    )


def oblivious_amplitude_amplification(
    phases: ReflectionPhases,
    reflect_start: Operation,
    reflect_target: Operation,
    signal_oracle: Operation,
) -> Operation:
    """
    Oblivious amplitude amplification.

    Reflections act on the ancilla register only; the start reflection is
    conjugated by ``signal_oracle``, which must support ADJOINT.

    Returns
    -------
    Operation
        ``op(circuit, ancilla, system)``; iteration k applies
        ``reflect_target(marked[k], ancilla)``, ``signal_oracle†``,
        ``reflect_start(start[k], ancilla)`` and ``signal_oracle``.
    """
    phases = _as_phases(phases)
    schedule = list(phases)
    signal_oracle.require(Capability.ADJOINT, "oblivious amplitude amplification")
    signal_adjoint = signal_oracle.adjoint

    def steps(ancilla, system):
        sequence = []
        for marked_phase, start_phase in schedule:
            sequence.append((reflect_target, (marked_phase, ancilla)))
            sequence.append((signal_adjoint, (ancilla, system)))
            sequence.append((reflect_start, (start_phase, ancilla)))
            sequence.append((signal_oracle, (ancilla, system)))
        return sequence

    operation = composite(
        steps,
        [reflect_target, reflect_start, signal_oracle, signal_adjoint],
        name=f"ObliviousAmpAmp[{len(schedule)}]({signal_oracle.name})",
    )
    logger.debug("Built %r with %d iterations", operation, len(schedule))
    return operation


def _check_fraction(target_fraction: float) -> float:
    if not 0.0 <= target_fraction <= 1.0:
        raise InvalidArgumentError(f"target fraction must lie in [0, 1], got {target_fraction}")
    return float(target_fraction)


def amplified_amplitude(n_iterations: int, target_fraction: float) -> float:
    """Marked amplitude sin((2M+1)·asin(sqrt(λ))) after M standard iterations."""
    n_iterations = check_iteration_count(n_iterations)
    beta = np.arcsin(np.sqrt(_check_fraction(target_fraction)))
    return float(np.sin((2 * n_iterations + 1) * beta))


def success_probability(n_iterations: int, target_fraction: float) -> float:
    """Probability of measuring a marked state after M standard iterations."""
    return amplified_amplitude(n_iterations, target_fraction) ** 2


def optimal_iteration_count(target_fraction: float) -> int:
    """
    Iteration count maximizing ``success_probability``.

    Returns floor(π / (4β)), β = asin(sqrt(λ)).
    """
    target_fraction = _check_fraction(target_fraction)
    if target_fraction == 0.0:
        raise InvalidArgumentError("no iteration count amplifies an empty marked subspace")
    beta = math.asin(math.sqrt(target_fraction))
    return int(math.floor(math.pi / (4.0 * beta)))
