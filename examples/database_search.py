"""
Grover Database Search Example
==============================

Searches a 2⁵-entry database for three marked entries, sweeping the
iteration count and comparing measured success with the closed form.
"""

import logging

from qcanon.amplification import optimal_iteration_count
from qcanon.samples import SearchConfig, grover_search

logging.basicConfig(level=logging.INFO)


def main():
    n_qubits = 5
    marked = [1, 4, 9]
    best = optimal_iteration_count(len(marked) / 2 ** n_qubits)
    print(f"Database of {2 ** n_qubits} entries, marked {marked}, optimal M = {best}")

    config = SearchConfig(shots=1000, seed=42)
    for n_iterations in range(best + 2):
        result = grover_search(n_qubits, marked, n_iterations, config)
        print(
            f"  M={n_iterations}: P(success) = {result.success_probability:.4f} "
            f"(closed form {result.expected_probability:.4f}), found {result.found}"
        )


if __name__ == "__main__":
    main()
