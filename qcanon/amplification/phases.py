"""
Reflection Phase Schedules
==========================

A schedule lists one ``(marked_phase, start_phase)`` pair per amplification
iteration. Iteration k applies the marked-state reflection at
``marked[k]`` and then the start-state reflection at ``start[k]``.

Standard schedule:
------------------
Every pair is (π, π): Grover's search. After M iterations the marked
amplitude is sin((2M+1)·β) with sin(β) = sqrt(λ), λ the initial success
probability.

Fixed-point schedule:
---------------------
Yoder, Low & Chuang, PRL 113, 210501 (2014). For L = 2l+1 oracle queries
and a minimum success probability 1 - δ²:

    γ⁻¹ = T_{1/L}(1/δ)
    α_j = 2·arccot(tan(2πj/L)·sqrt(1-γ²)),   β_j = -α_{l-j+1}

and G(α_j, β_j) = -S_s(α_j)·S_t(β_j) with S_s(α) = I - (1 - e^{-iα})|s⟩⟨s|,
S_t(β) = I - (1 - e^{iβ})P. In this package's sign convention iteration j
therefore reflects the marked subspace at β_j and the start state at -α_j.
The success probability is

    P_L(λ) = 1 - δ²·T_L(γ⁻¹·sqrt(1-λ))²

which is ≥ 1 - δ² for every λ ≥ 1 - γ².

Author: qcanon Development Team
Date: October 2026
"""

import math
from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple

import numpy as np

from qcanon.core.errors import InvalidArgumentError
from qcanon.core.validation import check_integer


def check_iteration_count(n_iterations) -> int:
    """Return ``n_iterations`` as int, or raise ``InvalidArgumentError``."""
    n_iterations = check_integer(n_iterations, "iteration count")
    if n_iterations < 0:
        raise InvalidArgumentError(f"iteration count must be non-negative, got {n_iterations}")
    return n_iterations


def _finite_phases(phases: Sequence[float], label: str) -> Tuple[float, ...]:
    values = tuple(float(phase) for phase in phases)
    for k, phase in enumerate(values):
        if not math.isfinite(phase):
            raise InvalidArgumentError(f"{label} phase {k} is not finite: {phase}")
    return values


@dataclass(frozen=True)
class ReflectionPhases:
    """Per-iteration phases for the marked-state and start-state reflections.

    Attributes
    ----------
    marked : Tuple[float, ...]
        Phase of the marked-subspace reflection in each iteration
    start : Tuple[float, ...]
        Phase of the start-state reflection in each iteration
    """
    marked: Tuple[float, ...]
    start: Tuple[float, ...]

    def __post_init__(self):
        marked = _finite_phases(self.marked, "marked")
        start = _finite_phases(self.start, "start")
        if len(marked) != len(start):
            raise InvalidArgumentError(
                f"phase schedules differ in length: {len(marked)} marked vs {len(start)} start"
            )
        object.__setattr__(self, "marked", marked)
        object.__setattr__(self, "start", start)

    def __len__(self) -> int:
        return len(self.marked)

    def __iter__(self) -> Iterator[Tuple[float, float]]:
        return iter(zip(self.marked, self.start))


def standard_phases(n_iterations: int) -> ReflectionPhases:
    """Grover schedule: ``n_iterations`` pairs of (π, π)."""
    n_iterations = check_iteration_count(n_iterations)
    return ReflectionPhases((np.pi,) * n_iterations, (np.pi,) * n_iterations)


def _check_fixed_point(n_queries: int, success_min: float) -> None:
    check_iteration_count(n_queries)
    if n_queries % 2 == 0:
        raise InvalidArgumentError(f"fixed-point schedules need an odd query count, got {n_queries}")
    if not 0.0 < success_min < 1.0:
        raise InvalidArgumentError(f"success_min must lie in (0, 1), got {success_min}")


def _inverse_gamma(n_queries: int, success_min: float) -> float:
    # γ⁻¹ = T_{1/L}(1/δ) with 1/δ > 1
    delta = math.sqrt(1.0 - success_min)
    return math.cosh(math.acosh(1.0 / delta) / n_queries)


def _chebyshev(order: int, x: float) -> float:
    if abs(x) <= 1.0:
        return math.cos(order * math.acos(x))
    return math.copysign(1.0, x) ** order * math.cosh(order * math.acosh(abs(x)))


def fixed_point_phases(n_queries: int, success_min: float) -> ReflectionPhases:
    """
    Fixed-point amplitude amplification schedule.

    Parameters
    ----------
    n_queries : int
        Odd number of oracle queries L = 2l + 1; the schedule has l
        iterations.
    success_min : float
        Guaranteed success probability 1 - δ², in (0, 1).

    Returns
    -------
    ReflectionPhases
        Partial-reflection schedule of length (n_queries - 1) / 2.
    """
    _check_fixed_point(n_queries, success_min)
    n_iterations = (n_queries - 1) // 2
    gamma = 1.0 / _inverse_gamma(n_queries, success_min)
    scale = math.sqrt(1.0 - gamma ** 2)

    # α_j for j = 1..l; arccot taken in (0, π)
    alphas = [
        2.0 * math.atan2(1.0, math.tan(2.0 * math.pi * j / n_queries) * scale)
        for j in range(1, n_iterations + 1)
    ]
    marked = tuple(-alphas[n_iterations - j] for j in range(1, n_iterations + 1))
    start = tuple(-alpha for alpha in alphas)
    return ReflectionPhases(marked, start)


def fixed_point_min_initial_probability(n_queries: int, success_min: float) -> float:
    """Smallest initial success probability λ for which the bound holds (1 - γ²)."""
    _check_fixed_point(n_queries, success_min)
    return 1.0 - _inverse_gamma(n_queries, success_min) ** -2


def fixed_point_success_probability(n_queries: int, success_min: float, initial_probability: float) -> float:
    """Closed-form success probability of the fixed-point schedule."""
    _check_fixed_point(n_queries, success_min)
    if not 0.0 <= initial_probability <= 1.0:
        raise InvalidArgumentError(f"initial probability must lie in [0, 1], got {initial_probability}")
    delta_sq = 1.0 - success_min
    x = _inverse_gamma(n_queries, success_min) * math.sqrt(1.0 - initial_probability)
    return 1.0 - delta_sq * _chebyshev(n_queries, x) ** 2
