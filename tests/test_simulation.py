"""
Unit tests for statevector measurement helpers.
"""

import pytest
import numpy as np
from qiskit import QuantumCircuit, QuantumRegister

from qcanon.core import InvalidArgumentError
from qcanon.simulation import (
    SimulationConfig,
    qubit_probability,
    register_probabilities,
    sample_counts,
)
import qcanon.simulation.statevector as statevector


class TestProbabilities:
    """Marginal distributions over qubit subsets."""

    def test_qubit_probability(self):
        """Single-qubit marginal reads |1⟩ only where X was applied."""
        qc = QuantumCircuit(2)
        qc.x(1)
        assert np.isclose(qubit_probability(qc, 1), 1.0)
        assert np.isclose(qubit_probability(qc, 0), 0.0)

    def test_little_endian_over_requested_qubits(self):
        """First requested qubit is the least significant outcome bit."""
        register = QuantumRegister(3, "q")
        qc = QuantumCircuit(register)
        qc.x(register[2])
        probs = register_probabilities(qc, [register[2], register[0]])
        assert probs.shape == (4,)
        assert np.isclose(probs[1], 1.0)

    def test_uniform_superposition(self):
        """Hadamards on two qubits give four equally likely outcomes."""
        qc = QuantumCircuit(2)
        qc.h([0, 1])
        assert np.allclose(register_probabilities(qc, [0, 1]), 0.25)


class TestSampling:
    """Seeded sampling."""

    def test_seeded_counts_reproducible(self):
        """Same seed gives identical counts summing to the shot count."""
        qc = QuantumCircuit(2)
        qc.h([0, 1])
        config = SimulationConfig(shots=400, seed=5)
        first = sample_counts(qc, [0, 1], config)
        second = sample_counts(qc, [0, 1], config)
        assert first == second
        assert sum(first.values()) == 400

    def test_deterministic_outcome(self):
        """A basis state is sampled on every shot."""
        qc = QuantumCircuit(2)
        qc.x(0)
        assert sample_counts(qc, [0, 1], SimulationConfig(shots=50, seed=1)) == {1: 50}

    def test_default_config(self):
        """Without a config the default shot count is used."""
        qc = QuantumCircuit(1)
        assert sample_counts(qc, [0]) == {0: 1000}

    @pytest.mark.parametrize("shots", [0, -5])
    def test_shots_must_be_positive(self, shots):
        """Zero or negative shots are rejected."""
        with pytest.raises(InvalidArgumentError):
            sample_counts(QuantumCircuit(1), [0], SimulationConfig(shots=shots))

    @pytest.mark.parametrize("shots", [10.0, True, "10"])
    def test_shots_must_be_integer(self, shots):
        """Float, bool and string shot counts are rejected before sampling."""
        with pytest.raises(InvalidArgumentError):
            sample_counts(QuantumCircuit(1), [0], SimulationConfig(shots=shots))

    def test_total_probability_checked_against_tolerance(self, monkeypatch):
        """A distribution that does not sum to 1 within tolerance is rejected."""
        monkeypatch.setattr(
            statevector, "register_probabilities", lambda circuit, qubits: np.array([0.5, 0.4])
        )
        with pytest.raises(InvalidArgumentError):
            sample_counts(QuantumCircuit(1), [0], SimulationConfig(shots=10, seed=0))

        loose = SimulationConfig(shots=10, seed=0, tolerance=0.2)
        assert sum(sample_counts(QuantumCircuit(1), [0], loose).values()) == 10

    def test_config_defaults(self):
        """Default shots, seed and tolerance."""
        config = SimulationConfig()
        assert config.shots == 1000
        assert config.seed is None
        assert config.tolerance == 1e-10
