"""
solvers/base.py

Базовый класс для решателей, узел поиска и статистика.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Hashable, Optional, Tuple

from core.board import Board, Move
from core.utils import Position
from utils.logging import get_logger


@dataclass
class SolverStats:
    """Статистика работы решателя."""
    nodes_visited: int = 0
    nodes_pruned: int = 0
    max_depth: int = 0
    max_frontier: int = 0
    memo_size: int = 0
    time_elapsed: float = 0.0
    solution_length: int = 0
    budget_exhausted: bool = False

    def __str__(self) -> str:
        return (
            f"Nodes: {self.nodes_visited}, "
            f"Pruned: {self.nodes_pruned}, "
            f"Memo: {self.memo_size}, "
            f"Depth: {self.max_depth}, "
            f"Time: {self.time_elapsed:.3f}s"
        )


@dataclass(frozen=True)
class SearchNode:
    """Доска и история ходов, которая к ней привела."""
    board: Board
    history: Tuple[Move, ...] = ()

    def child(self, move: Move, board: Board) -> 'SearchNode':
        return SearchNode(board, self.history + (move,))

    @property
    def depth(self) -> int:
        return len(self.history)


class BaseSolver(ABC):
    """
    Базовый класс решателя.

    Все решатели наследуют от него и реализуют метод solve().
    """

    def __init__(self, use_symmetry: bool = False, verbose: bool = False):
        self.use_symmetry = use_symmetry
        self.verbose = verbose
        self.stats = SolverStats()

    @abstractmethod
    def solve(self, board: Board, target: Optional[Position] = None) -> Optional[SearchNode]:
        """
        Решает головоломку.

        Args:
            board: начальная позиция
            target: клетка, где должен остаться последний колышек

        Returns:
            Выигрышный узел (финальная доска + ходы) или None
        """
        pass

    def _log(self, message: str) -> None:
        """Пишет сообщение в лог если verbose=True."""
        if self.verbose:
            get_logger().debug(f"[{self.__class__.__name__}] {message}")

    def _get_key(self, board: Board) -> Hashable:
        """Возвращает ключ для visited set."""
        if self.use_symmetry:
            return board.canonical_key()
        return board
