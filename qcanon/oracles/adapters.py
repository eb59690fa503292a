"""
Oracle Adapters
===============

Conversions between oracle shapes, so that amplification routines can share
one representation. All adapters are closures over their fixed arguments
and keep the capabilities of the wrapped oracles.

An adapter is a faithful translation only when the flag index it assumes
matches the one used by the underlying oracle; a mismatch is the caller's
error. Indices outside ``[0, len(register))`` raise ``FlagIndexError`` when
the adapted oracle is called.

Author: qcanon Development Team
Date: October 2026
"""

from qcanon.core.operation import Operation, composite
from qcanon.oracles.types import (
    DeterministicStateOracle,
    ObliviousOracle,
    StateOracle,
    check_flag_index,
)


def oblivious_oracle_from_deterministic_state_oracle(
    ancilla_oracle: Operation,
    signal_oracle: Operation,
) -> ObliviousOracle:
    """
    Lift ancilla preparation into the oblivious-oracle shape.

    The result applies ``ancilla_oracle(ancilla)`` followed by
    ``signal_oracle(ancilla, system)``.

    Parameters
    ----------
    ancilla_oracle : DeterministicStateOracle
        Prepares the ancilla register.
    signal_oracle : ObliviousOracle
        Acts on ancilla and system registers.

    Returns
    -------
    ObliviousOracle
    """
    def steps(ancilla, system):
        return [
            (ancilla_oracle, (ancilla,)),
            (signal_oracle, (ancilla, system)),
        ]

    return composite(
        steps,
        [ancilla_oracle, signal_oracle],
        name=f"Oblivious({ancilla_oracle.name}, {signal_oracle.name})",
        cls=ObliviousOracle,
    )


def deterministic_state_oracle_from_state_oracle(
    flag_index: int,
    state_oracle: Operation,
) -> DeterministicStateOracle:
    """Fix the flag index of ``state_oracle``."""
    def steps(register):
        check_flag_index(flag_index, register)
        return [(state_oracle, (flag_index, register))]

    return composite(
        steps,
        [state_oracle],
        name=f"{state_oracle.name}[flag={flag_index}]",
        cls=DeterministicStateOracle,
    )


def state_oracle_from_deterministic_state_oracle(oracle: Operation) -> StateOracle:
    """
    Present a deterministic oracle as a flag-indexed one.

    The flag index is range-checked and then ignored: the wrapped oracle
    always acts on the full register. Callers cannot rely on index-sensitive
    behavior through this adapter.
    """
    def steps(flag_index, register):
        check_flag_index(flag_index, register)
        return [(oracle, (register,))]

    return composite(
        steps,
        [oracle],
        name=f"StateOracle({oracle.name})",
        cls=StateOracle,
    )


def identity_oblivious_oracle() -> ObliviousOracle:
    """Oblivious oracle that does nothing."""
    return composite(
        lambda ancilla, system: [],
        [],
        name="NoOp",
        cls=ObliviousOracle,
    )
