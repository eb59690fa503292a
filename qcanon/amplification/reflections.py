"""
Reflection Construction
=======================

Builders turning oracles into phase-shift reflections
``R(phase) = I - (1 - e^{i phase}) P``:

- r_all1: about |1...1⟩, one multi-controlled phase gate
- r_all0: about |0...0⟩, r_all1 conjugated by X on every qubit
- reflection_start: r_all0 as a ReflectionOracle
- reflection_oracle_from_deterministic_state_oracle: about A|0...0⟩,
  r_all0 conjugated by A†
- target_state_reflection_oracle: about |1⟩ on a single flag qubit

At ``phase = pi`` every reflection is an exact involution; other phases
give the partial reflections used by fixed-point schedules.

Author: qcanon Development Team
Date: October 2026
"""

from qcanon.core.conjugation import with_ca
from qcanon.core.errors import FlagIndexError
from qcanon.core.intrinsics import R1, X, apply_to_each
from qcanon.core.operation import Capability, Operation, composite, partial
from qcanon.oracles.types import ReflectionOracle, check_flag_index

_CONTROLLED_R1 = R1.controlled
_ALL_X = apply_to_each(X)


def _r_all1_steps(phase, qubits):
    if len(qubits) == 0:
        raise FlagIndexError("cannot reflect about |1...1> on an empty register")
    return [(_CONTROLLED_R1, (list(qubits[1:]), phase, qubits[0]))]


# Controls are qubits[1:], target qubits[0].
r_all1 = composite(_r_all1_steps, [_CONTROLLED_R1], name="RAll1", cls=ReflectionOracle)


def _r_all0_steps(phase, qubits):
    return [(with_ca(_ALL_X, partial(r_all1, phase)), (qubits,))]


r_all0 = composite(_r_all0_steps, [_ALL_X, r_all1], name="RAll0", cls=ReflectionOracle)


def reflection_start() -> ReflectionOracle:
    """Reflection about the all-zero start state."""
    return r_all0


def reflection_oracle_from_deterministic_state_oracle(oracle: Operation) -> ReflectionOracle:
    """
    Reflection about the state ``oracle`` prepares from |0...0⟩.

    Maps the target state back to |0...0⟩ with ``oracle†``, reflects, and
    maps forward again. The oracle must support ADJOINT; the reflection
    supports ADJOINT and CONTROLLED regardless of the oracle's controlled
    capability, since only the inner reflection is ever controlled.
    """
    oracle.require(Capability.ADJOINT, "a reflection about its prepared state")
    unprepare = oracle.adjoint

    def steps(phase, register):
        return [(with_ca(unprepare, partial(r_all0, phase)), (register,))]

    return composite(
        steps,
        [r_all0],
        name=f"Reflection({oracle.name})",
        cls=ReflectionOracle,
    )


def target_state_reflection_oracle(flag_index: int) -> ReflectionOracle:
    """Phase shift on ``register[flag_index]`` being |1⟩; other qubits untouched."""
    def steps(phase, register):
        check_flag_index(flag_index, register)
        return [(R1, (phase, register[flag_index]))]

    return composite(
        steps,
        [R1],
        name=f"TargetStateReflection[{flag_index}]",
        cls=ReflectionOracle,
    )
