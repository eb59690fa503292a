"""
Samples Module
==============

Applications built on the amplification driver.
"""

from .database_search import (
    SearchConfig,
    SearchResult,
    database_oracle,
    grover_state_oracle,
    grover_search,
)

__all__ = [
    'SearchConfig',
    'SearchResult',
    'database_oracle',
    'grover_state_oracle',
    'grover_search',
]
