"""
Intrinsic Gates
===============

Backend-bound primitives. Each intrinsic appends Qiskit library gates and
declares its adjoint, controlled and controlled-adjoint bodies explicitly:

- X, H, Z: self-adjoint, ``op(circuit, qubit)``
- R1, RY: rotations, ``op(circuit, theta, qubit)``; adjoint negates theta

Controlled forms use ``Gate.control``, so a multi-controlled X becomes an
MCX gate and a multi-controlled R1 an MCPhase gate.

Author: qcanon Development Team
Date: October 2026
"""

from typing import Callable, Sequence

from qiskit import QuantumCircuit
from qiskit.circuit import Gate
from qiskit.circuit.library import HGate, PhaseGate, RYGate, XGate, ZGate

from qcanon.core.operation import Operation, composite


def append_controlled(circuit: QuantumCircuit, gate: Gate, controls: Sequence, targets: Sequence) -> None:
    """
    Append ``gate`` on ``targets`` conditioned on all of ``controls``.

    With no controls the bare gate is appended.
    """
    controls = list(controls)
    if controls:
        gate = gate.control(len(controls))
    circuit.append(gate, controls + list(targets))


def _self_adjoint(gate_factory: Callable[[], Gate], name: str) -> Operation:
    def body(circuit, qubit):
        circuit.append(gate_factory(), [qubit])

    def controlled_body(circuit, controls, qubit):
        append_controlled(circuit, gate_factory(), controls, [qubit])

    return Operation(body, body, controlled_body, controlled_body, name=name)


def _rotation(gate_factory: Callable[[float], Gate], name: str) -> Operation:
    def body(circuit, theta, qubit):
        circuit.append(gate_factory(theta), [qubit])

    def adjoint_body(circuit, theta, qubit):
        circuit.append(gate_factory(-theta), [qubit])

    def controlled_body(circuit, controls, theta, qubit):
        append_controlled(circuit, gate_factory(theta), controls, [qubit])

    def controlled_adjoint_body(circuit, controls, theta, qubit):
        append_controlled(circuit, gate_factory(-theta), controls, [qubit])

    return Operation(body, adjoint_body, controlled_body, controlled_adjoint_body, name=name)


X = _self_adjoint(XGate, "X")
H = _self_adjoint(HGate, "H")
Z = _self_adjoint(ZGate, "Z")

# R1(theta) = diag(1, e^{i theta}); controlled on k qubits it is the
# (k+1)-qubit phase shift of |1...1>.
R1 = _rotation(PhaseGate, "R1")
RY = _rotation(RYGate, "RY")


def apply_to_each(single: Operation) -> Operation:
    """
    Lift a single-qubit operation to every qubit of a register.

    The result is called as ``op(circuit, register)`` and has the same
    capabilities as ``single``.
    """
    return composite(
        lambda register: [(single, (qubit,)) for qubit in register],
        [single],
        name=f"ApplyToEach({single.name})",
    )
