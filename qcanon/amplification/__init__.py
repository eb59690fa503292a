"""
Amplification Module
====================

Reflections, phase schedules and amplitude-amplification drivers.
"""

from .reflections import (
    r_all0,
    r_all1,
    reflection_start,
    reflection_oracle_from_deterministic_state_oracle,
    target_state_reflection_oracle,
)

from .phases import (
    ReflectionPhases,
    check_iteration_count,
    standard_phases,
    fixed_point_phases,
    fixed_point_min_initial_probability,
    fixed_point_success_probability,
)

from .amplitude_amplification import (
    amplitude_amplification,
    amplitude_amplification_by_reflections,
    amplitude_amplification_by_oracle,
    amplitude_amplification_by_oracle_phases,
    oblivious_amplitude_amplification,
    amplified_amplitude,
    success_probability,
    optimal_iteration_count,
)

__all__ = [
    # Reflections
    'r_all0',
    'r_all1',
    'reflection_start',
    'reflection_oracle_from_deterministic_state_oracle',
    'target_state_reflection_oracle',

    # Phase schedules
    'ReflectionPhases',
    'check_iteration_count',
    'standard_phases',
    'fixed_point_phases',
    'fixed_point_min_initial_probability',
    'fixed_point_success_probability',

    # Drivers and closed forms
    'amplitude_amplification',
    'amplitude_amplification_by_reflections',
    'amplitude_amplification_by_oracle',
    'amplitude_amplification_by_oracle_phases',
    'oblivious_amplitude_amplification',
    'amplified_amplitude',
    'success_probability',
    'optimal_iteration_count',
]
