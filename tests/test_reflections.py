"""
Unit tests for reflection construction.
"""

import pytest
import numpy as np
from qiskit import QuantumCircuit, QuantumRegister
from qiskit.quantum_info import Operator, Statevector

from qcanon.core import Capability, CapabilityError, FlagIndexError, H, Operation, RY, composite
from qcanon.amplification import (
    r_all0,
    r_all1,
    reflection_oracle_from_deterministic_state_oracle,
    reflection_start,
    target_state_reflection_oracle,
)
from qcanon.oracles import DeterministicStateOracle, ReflectionOracle


def circuit_of(n_qubits):
    register = QuantumRegister(n_qubits, "q")
    return QuantumCircuit(register), list(register)


def operator_of(n_qubits, apply):
    qc, q = circuit_of(n_qubits)
    apply(qc, q)
    return Operator(qc).data


def partial_reflection(projector_state, theta):
    """I - (1 - e^{iθ})|ψ⟩⟨ψ|."""
    psi = np.asarray(projector_state).reshape(-1, 1)
    return np.eye(len(psi)) - (1 - np.exp(1j * theta)) * (psi @ psi.conj().T)


def prep_oracle():
    return composite(
        lambda register: [(H, (register[0],)), (RY, (0.8, register[1])), (H, (register[2],))],
        [H, RY],
        name="prep",
        cls=DeterministicStateOracle,
    )


class TestAllOnesAllZeros:
    """RAll1 and RAll0 reflections."""

    @pytest.mark.parametrize("n_qubits", [1, 2, 3])
    @pytest.mark.parametrize("theta", [np.pi, 0.7, -2.1])
    def test_r_all1_phases_all_ones(self, n_qubits, theta):
        """RAll1 phases only the all-ones state."""
        expected = np.eye(2 ** n_qubits, dtype=complex)
        expected[-1, -1] = np.exp(1j * theta)
        actual = operator_of(n_qubits, lambda qc, q: r_all1(qc, theta, q))
        assert np.allclose(actual, expected, atol=1e-10)

    def test_r_all1_single_gate(self):
        """RAll1 is one multi-controlled phase targeting qubit 0."""
        qc, q = circuit_of(3)
        r_all1(qc, 0.4, q)
        assert qc.size() == 1
        inst = qc.data[0]
        assert inst.operation.num_ctrl_qubits == 2
        assert qc.find_bit(inst.qubits[-1]).index == 0

    @pytest.mark.parametrize("n_qubits", [1, 2, 3])
    @pytest.mark.parametrize("theta", [np.pi, 0.7, -2.1])
    def test_r_all0_is_x_conjugated_r_all1(self, n_qubits, theta):
        """RAll0 equals RAll1 conjugated by X on every qubit."""
        def manual(qc, q):
            for qubit in q:
                qc.x(qubit)
            r_all1(qc, theta, q)
            for qubit in q:
                qc.x(qubit)

        expected = operator_of(n_qubits, manual)
        actual = operator_of(n_qubits, lambda qc, q: r_all0(qc, theta, q))
        assert np.allclose(actual, expected, atol=1e-10)

    @pytest.mark.parametrize("theta", [np.pi, 1.3])
    def test_r_all0_partial_reflection(self, theta):
        """RAll0 at θ is I - (1 - e^{iθ})"""
        zero = np.zeros(8)
        zero[0] = 1.0
        actual = operator_of(3, lambda qc, q: r_all0(qc, theta, q))
        assert np.allclose(actual, partial_reflection(zero, theta), atol=1e-10)

    @pytest.mark.parametrize("reflection", [r_all1, r_all0])
    @pytest.mark.parametrize("n_qubits", [1, 2, 3, 4])
    def test_involution_at_pi(self, reflection, n_qubits):
        """Reflections at π square to the identity."""
        def twice(qc, q):
            reflection(qc, np.pi, q)
            reflection(qc, np.pi, q)

        actual = operator_of(n_qubits, twice)
        assert np.allclose(actual, np.eye(2 ** n_qubits), atol=1e-10)

    def test_not_involution_off_pi(self):
        """Partial reflections do not square to the identity."""
        def twice(qc, q):
            r_all0(qc, 0.5, q)
            r_all0(qc, 0.5, q)

        actual = operator_of(2, twice)
        assert not np.allclose(actual, np.eye(4))

    def test_adjoint_negates_phase(self):
        """RAll0 adjoint is the conjugate transpose."""
        forward = operator_of(2, lambda qc, q: r_all0(qc, 0.9, q))
        backward = operator_of(2, lambda qc, q: r_all0.adjoint(qc, 0.9, q))
        assert np.allclose(backward, forward.conj().T, atol=1e-10)

    def test_controlled_r_all1_adds_controls(self):
        """Controlling RAll1 extends its controls."""
        qc, q = circuit_of(3)
        r_all1.controlled(qc, [q[0]], 0.6, q[1:])
        expected = np.eye(8, dtype=complex)
        expected[-1, -1] = np.exp(0.6j)
        assert np.allclose(Operator(qc).data, expected, atol=1e-10)

    def test_empty_register_rejected(self):
        """RAll1 on an empty register raises FlagIndexError."""
        qc = QuantumCircuit(1)
        with pytest.raises(FlagIndexError):
            r_all1(qc, np.pi, [])

    def test_reflection_start_is_r_all0(self):
        """Start reflection is RAll0."""
        start = reflection_start()
        assert isinstance(start, ReflectionOracle)
        assert start is r_all0


class TestStateReflection:
    """Reflection about the state a deterministic oracle prepares."""

    @pytest.mark.parametrize("theta", [np.pi, 0.45])
    def test_reflects_about_prepared_state(self, theta):
        """Reflection about A"""
        oracle = prep_oracle()
        qc_prep, q_prep = circuit_of(3)
        oracle(qc_prep, q_prep)
        psi = Statevector(qc_prep).data

        reflection = reflection_oracle_from_deterministic_state_oracle(oracle)
        actual = operator_of(3, lambda qc, q: reflection(qc, theta, q))
        assert np.allclose(actual, partial_reflection(psi, theta), atol=1e-10)

    def test_capabilities(self):
        """Reflection is adjointable and controllable given an adjointable oracle."""
        oracle = prep_oracle().narrow(Capability.ADJOINT)
        reflection = reflection_oracle_from_deterministic_state_oracle(oracle)
        assert reflection.capabilities == Capability.ADJOINT_CONTROLLED

    def test_requires_adjoint(self):
        """Oracle without adjoint is rejected."""
        one_way = Operation(lambda circuit, register: None, name="one-way")
        with pytest.raises(CapabilityError):
            reflection_oracle_from_deterministic_state_oracle(one_way)


class TestTargetStateReflection:
    """Single-qubit phase on the flag."""

    @pytest.mark.parametrize("flag_index", [0, 1, 2])
    def test_involution_on_flag_only(self, flag_index):
        """Flag reflection touches only the flag and squares to identity."""
        reflection = target_state_reflection_oracle(flag_index)
        qc, q = circuit_of(3)
        reflection(qc, np.pi, q)
        reflection(qc, np.pi, q)
        assert all(qc.find_bit(inst.qubits[0]).index == flag_index for inst in qc.data)
        assert np.allclose(Operator(qc).data, np.eye(8), atol=1e-12)

    @pytest.mark.parametrize("flag_index", [0, 2])
    def test_phases_flag_one(self, flag_index):
        """Flag reflection is a phase gate on the flag."""
        reflection = target_state_reflection_oracle(flag_index)
        actual = operator_of(3, lambda qc, q: reflection(qc, 0.8, q))
        expected = QuantumCircuit(3)
        expected.p(0.8, flag_index)
        assert np.allclose(actual, Operator(expected).data, atol=1e-12)

    def test_out_of_range_flag(self):
        """Out-of-range flag raises before any gate is appended."""
        reflection = target_state_reflection_oracle(3)
        qc, q = circuit_of(3)
        with pytest.raises(FlagIndexError):
            reflection(qc, np.pi, q)
        assert qc.size() == 0
