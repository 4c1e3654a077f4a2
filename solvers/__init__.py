"""
solvers - Решатели Peg Solitaire

Экспортирует:
- Explorer: обход графа позиций (DFS/BFS) с мемоизацией
- solve: точка входа с параметрами по умолчанию
"""

from .base import BaseSolver, SearchNode, SolverStats
from .explorer import Explorer, solve, ORDERS

__all__ = [
    'BaseSolver',
    'SearchNode',
    'SolverStats',
    'Explorer',
    'solve',
    'ORDERS',
]
