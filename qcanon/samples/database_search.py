"""
Database Search Sample
======================

Grover search over an unstructured database of 2ⁿ entries, built from the
amplitude-amplification driver.

Register layout:
----------------
One flag qubit plus n database qubits. The database register is
little-endian (database[0] is the least significant bit) and excludes the
flag qubit, wherever the flag sits.

State oracle:
-------------
    |0⟩|0...0⟩ → H^⊗n → flip flag for every marked index

so the flag reads |1⟩ with probability λ = |marked| / 2ⁿ, and after M
iterations with probability sin²((2M+1)·asin(sqrt(λ))).

Note: marking uses one multi-controlled X per marked index (O(|marked|)
MCX gates), fine for test-sized databases.

Author: qcanon Development Team
Date: October 2026
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

import numpy as np
from qiskit import QuantumCircuit, QuantumRegister

from qcanon.core.conjugation import with_ca
from qcanon.core.errors import FlagIndexError, InvalidArgumentError
from qcanon.core.intrinsics import H, X, apply_to_each
from qcanon.core.operation import Operation, composite
from qcanon.amplification.amplitude_amplification import (
    amplitude_amplification_by_oracle,
    success_probability,
)
from qcanon.amplification.phases import check_iteration_count
from qcanon.oracles.types import StateOracle, check_flag_index, exclude
from qcanon.simulation.statevector import SimulationConfig, register_probabilities, sample_counts

logger = logging.getLogger(__name__)


@dataclass
class SearchConfig(SimulationConfig):
    """Configuration for a database search run.

    Extends ``SimulationConfig`` (shots, seed, tolerance), which governs
    sampling of the flag and database registers.

    Attributes
    ----------
    flag_index : int
        Position of the flag qubit within the full register
    """
    flag_index: int = 0


@dataclass
class SearchResult:
    """Outcome of a database search.

    Attributes
    ----------
    n_iterations : int
        Amplification iterations applied
    success_probability : float
        Exact probability of the flag reading |1⟩
    expected_probability : float
        Closed form sin²((2M+1)·asin(sqrt(λ)))
    marked_distribution : np.ndarray
        P(flag = 1, database = i) for every database index i
    counts : Dict[int, int]
        Sampled outcomes, keyed by ``(index << 1) | flag``
    found : List[int]
        Database indices sampled together with flag = 1
    """
    n_iterations: int
    success_probability: float
    expected_probability: float
    marked_distribution: np.ndarray
    counts: Dict[int, int] = field(default_factory=dict)
    found: List[int] = field(default_factory=list)


def _check_marked_elements(marked_elements: Sequence[int]) -> List[int]:
    marked = sorted(set(int(index) for index in marked_elements))
    if any(index < 0 for index in marked):
        raise InvalidArgumentError(f"marked elements must be non-negative, got {marked}")
    return marked


def _basis_state_marker(index: int) -> Operation:
    """
    Flip the flag when the database register is in |index⟩.

    Maps |index⟩ to |1...1⟩ with X on the 0-bits, applies a multi-controlled
    X onto the flag, then undoes the flips.
    """
    def flips(flag, database):
        return [(X, (qubit,)) for bit, qubit in enumerate(database) if not (index >> bit) & 1]

    def mark(flag, database):
        return [(X.controlled, (list(database), flag))]

    return with_ca(
        composite(flips, [X], name=f"Flip0Bits[{index}]"),
        composite(mark, [X], name="MarkFlag"),
    )


def database_oracle(marked_elements: Sequence[int]) -> Operation:
    """
    Oracle ``op(circuit, flag, database)`` flipping ``flag`` on marked indices.

    Raises ``FlagIndexError`` when called on a database register too short
    to address every marked index.
    """
    marked = _check_marked_elements(marked_elements)
    markers = [_basis_state_marker(index) for index in marked]

    def steps(flag, database):
        size = 2 ** len(database)
        if marked and marked[-1] >= size:
            raise FlagIndexError(
                f"marked element {marked[-1]} does not fit a database of {size} entries"
            )
        return [(marker, (flag, database)) for marker in markers]

    return composite(steps, [X] + markers, name=f"DatabaseOracle{marked}")


def grover_state_oracle(marked_elements: Sequence[int]) -> StateOracle:
    """
    State oracle for database search.

    Prepares the uniform superposition over the database (every qubit but
    ``register[flag_index]``) and marks the flag for each marked index.
    """
    oracle = database_oracle(marked_elements)
    uniform = apply_to_each(H)

    def steps(flag_index, register):
        check_flag_index(flag_index, register)
        database = exclude(register, flag_index)
        return [
            (uniform, (database,)),
            (oracle, (register[flag_index], database)),
        ]

    return composite(steps, [uniform, oracle], name="GroverStateOracle", cls=StateOracle)


def grover_search(
    n_database_qubits: int,
    marked_elements: Sequence[int],
    n_iterations: int,
    config: Optional[SearchConfig] = None,
) -> SearchResult:
    """
    Run Grover search and measure the flag and database registers.

    Parameters
    ----------
    n_database_qubits : int
        Database size is 2^n_database_qubits.
    marked_elements : Sequence[int]
        Indices the oracle marks.
    n_iterations : int
        Amplification iterations M.
    config : SearchConfig, optional
        Shots, seed, tolerance and flag position.

    Returns
    -------
    result : SearchResult
    """
    config = config or SearchConfig()
    n_iterations = check_iteration_count(n_iterations)
    if n_database_qubits < 0:
        raise InvalidArgumentError(f"database qubit count must be non-negative, got {n_database_qubits}")
    marked = _check_marked_elements(marked_elements)

    register = QuantumRegister(n_database_qubits + 1, "q")
    circuit = QuantumCircuit(register, name="grover_search")
    qubits = list(register)

    state_oracle = grover_state_oracle(marked)
    search = amplitude_amplification_by_oracle(n_iterations, state_oracle, config.flag_index)

    state_oracle(circuit, config.flag_index, qubits)
    search(circuit, qubits)

    measured = [qubits[config.flag_index]] + exclude(qubits, config.flag_index)
    probs = register_probabilities(circuit, measured)
    marked_distribution = probs[1::2]
    prob_success = float(marked_distribution.sum())
    expected = success_probability(n_iterations, len(marked) / 2 ** n_database_qubits)

    counts = sample_counts(circuit, measured, config)
    found = sorted({outcome >> 1 for outcome in counts if outcome & 1})

    logger.info(
        "Grover search n=%d M=%d: P(success)=%.6f (expected %.6f), found %s",
        n_database_qubits, n_iterations, prob_success, expected, found,
    )

    return SearchResult(
        n_iterations=n_iterations,
        success_probability=prob_success,
        expected_probability=expected,
        marked_distribution=marked_distribution,
        counts=counts,
        found=found,
    )
