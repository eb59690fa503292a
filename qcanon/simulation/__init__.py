"""
Simulation Module
=================

Measurement of finished circuits through Qiskit's statevector backend.
"""

from .statevector import (
    SimulationConfig,
    register_probabilities,
    qubit_probability,
    sample_counts,
)

__all__ = [
    'SimulationConfig',
    'register_probabilities',
    'qubit_probability',
    'sample_counts',
]
