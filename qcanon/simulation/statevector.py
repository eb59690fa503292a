"""
Statevector Measurement
=======================

Exact outcome probabilities and seeded sampling for qubit subsets of a
measurement-free circuit, using Qiskit's ``Statevector``.

Outcomes are little-endian over the requested qubits: ``qubits[0]`` is the
least significant bit of the returned outcome index.

Author: qcanon Development Team
Date: October 2026
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

import numpy as np
from qiskit import QuantumCircuit
from qiskit.quantum_info import Statevector

from qcanon.core.errors import InvalidArgumentError
from qcanon.core.validation import check_integer


@dataclass
class SimulationConfig:
    """Configuration for sampled measurements.

    Attributes
    ----------
    shots : int
        Number of measurement samples
    seed : int, optional
        RNG seed for reproducibility
    tolerance : float
        Largest deviation of the total probability from 1 accepted before
        sampling
    """
    shots: int = 1000
    seed: Optional[int] = None
    tolerance: float = 1e-10


def _positions(circuit: QuantumCircuit, qubits: Sequence) -> List[int]:
    return [
        int(qubit) if isinstance(qubit, (int, np.integer)) else circuit.find_bit(qubit).index
        for qubit in qubits
    ]


def register_probabilities(circuit: QuantumCircuit, qubits: Sequence) -> np.ndarray:
    """
    Marginal outcome distribution over ``qubits``.

    Returns
    -------
    probs : np.ndarray, shape (2^len(qubits),)
        ``probs[i]`` is the probability of reading outcome ``i``.
    """
    state = Statevector(circuit)
    return np.asarray(state.probabilities(_positions(circuit, qubits)), dtype=float)


def qubit_probability(circuit: QuantumCircuit, qubit) -> float:
    """Probability of measuring ``qubit`` in |1⟩."""
    return float(register_probabilities(circuit, [qubit])[1])


def sample_counts(
    circuit: QuantumCircuit,
    qubits: Sequence,
    config: Optional[SimulationConfig] = None,
) -> Dict[int, int]:
    """
    Sample measurements of ``qubits``.

    Parameters
    ----------
    circuit : QuantumCircuit
        Measurement-free circuit to simulate.
    qubits : Sequence
        Qubits (or qubit positions) to read, least significant first.
    config : SimulationConfig, optional
        Shots, seed and normalization tolerance. Defaults to
        ``SimulationConfig()``.

    Returns
    -------
    counts : Dict[int, int]
        Outcome index -> number of occurrences.
    """
    config = config or SimulationConfig()
    shots = check_integer(config.shots, "shots")
    if shots <= 0:
        raise InvalidArgumentError(f"shots must be positive, got {shots}")

    probs = register_probabilities(circuit, qubits)
    total = probs.sum()
    if abs(total - 1.0) > config.tolerance:
        raise InvalidArgumentError(
            f"outcome probabilities sum to {total!r}, outside tolerance {config.tolerance}"
        )
    probs = probs / total

    rng = np.random.default_rng(config.seed)
    outcomes = rng.choice(len(probs), size=shots, p=probs)
    values, counts = np.unique(outcomes, return_counts=True)
    return {int(value): int(count) for value, count in zip(values, counts)}
