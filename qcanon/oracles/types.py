"""
Oracle Types
============

Four oracle shapes, each an ``Operation`` with a fixed call signature:

- StateOracle:               ``oracle(circuit, flag_index, register)``
- DeterministicStateOracle:  ``oracle(circuit, register)``
- ObliviousOracle:           ``oracle(circuit, ancilla, system)``
- ReflectionOracle:          ``oracle(circuit, phase, register)``

A ReflectionOracle applies ``I - (1 - e^{i phase}) P`` for the projector
``P`` onto its target subspace; at ``phase = pi`` it is an involution.

Author: qcanon Development Team
Date: October 2026
"""

from typing import List, Sequence

from qcanon.core.errors import FlagIndexError
from qcanon.core.operation import Operation
from qcanon.core.validation import check_integer


class StateOracle(Operation):
    """Prepares a state in which ``register[flag_index]`` marks success."""
    __slots__ = ()


class DeterministicStateOracle(Operation):
    """Prepares a fixed target state from the all-zero register."""
    __slots__ = ()


class ObliviousOracle(Operation):
    """Acts on an ancilla register independently of the system register's content."""
    __slots__ = ()


class ReflectionOracle(Operation):
    """Phase-shift reflection about a fixed target subspace."""
    __slots__ = ()


def check_flag_index(flag_index: int, register: Sequence) -> None:
    """Raise ``FlagIndexError`` unless ``0 <= flag_index < len(register)``.

    Non-integer indices, ``bool`` included, raise ``InvalidArgumentError``.
    """
    flag_index = check_integer(flag_index, "flag index")
    if not 0 <= flag_index < len(register):
        raise FlagIndexError(
            f"flag index {flag_index} is out of range for a register of {len(register)} qubits"
        )


def exclude(register: Sequence, index: int) -> List:
    """Qubits of ``register`` other than ``register[index]``, order preserved."""
    check_flag_index(index, register)
    return [qubit for position, qubit in enumerate(register) if position != index]
