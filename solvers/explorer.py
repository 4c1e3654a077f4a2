"""
solvers/explorer.py

Обход графа позиций с явным списком работы и мемоизацией.

Каждая позиция попадает в memo в момент добавления в список работы,
поэтому ни одна позиция не раскрывается дважды за один запуск.
"""

import time
from collections import deque
from typing import Callable, Hashable, List, Optional, Set

from .base import BaseSolver, SearchNode, SolverStats
from core.board import Board, Move
from core.utils import Position
from utils.error_handling import validate_board
from utils.logging import get_logger
from utils.monitoring import get_monitor, monitor_time

ORDERS = ('dfs', 'bfs')

ExpandCallback = Callable[[SearchNode, List[Move]], None]


class Explorer(BaseSolver):
    """
    Поиск решения обходом графа позиций.

    Особенности:
    - dfs: список работы как стек (LIFO), bfs: как очередь (FIFO)
    - memo создаётся заново на каждый solve()
    - опциональный бюджет по узлам и по времени
    - опциональная склейка симметричных позиций
    - callback на каждое раскрытие узла (для анализа)
    """

    def __init__(self, order: str = 'dfs', node_limit: Optional[int] = None,
                 time_limit: Optional[float] = None, use_symmetry: bool = False,
                 on_expand: Optional[ExpandCallback] = None, verbose: bool = False):
        """
        Args:
            order: порядок обхода, 'dfs' или 'bfs'
            node_limit: максимум раскрытых узлов (None — без ограничения)
            time_limit: ограничение по времени в секундах (None — без ограничения)
            use_symmetry: ключ memo — каноническая форма доски
            on_expand: вызывается с (узел, ходы) перед раскрытием узла
            verbose: выводить отладочную информацию
        """
        if order not in ORDERS:
            raise ValueError(f"Unknown traversal order {order!r}, expected one of {ORDERS}")
        if node_limit is not None and node_limit < 1:
            raise ValueError("node_limit must be positive")
        if time_limit is not None and time_limit <= 0:
            raise ValueError("time_limit must be positive")
        super().__init__(use_symmetry=use_symmetry, verbose=verbose)
        self.order = order
        self.node_limit = node_limit
        self.time_limit = time_limit
        self.on_expand = on_expand

    def solve(self, board: Board, target: Optional[Position] = None) -> Optional[SearchNode]:
        """
        Ищет последовательность ходов, после которой остаётся один
        колышек в клетке target (по умолчанию центр доски).

        Returns:
            Выигрышный узел или None, если решения нет
            (или исчерпан бюджет — см. stats.budget_exhausted)
        """
        if target is None:
            target = board.center
        validate_board(board, target)
        if self.use_symmetry and not board.supports_symmetry(target):
            raise ValueError("Symmetry reduction needs a symmetric layout and a fixed target")

        self.stats = SolverStats()
        start = time.perf_counter()
        self._log(f"Starting {self.order.upper()} (pegs={board.filled_count()}, target={target})")

        memo: Set[Hashable] = {self._get_key(board)}
        result = self._explore(SearchNode(board), target, memo, start)

        self.stats.memo_size = len(memo)
        self.stats.time_elapsed = time.perf_counter() - start
        if result is not None:
            self.stats.solution_length = result.depth
            self._log(f"Solution found: {result.depth} moves")
        elif self.stats.budget_exhausted:
            get_logger().warning(
                f"[{self.__class__.__name__}] Search budget exhausted after "
                f"{self.stats.nodes_visited} nodes, no solution found yet"
            )
        else:
            self._log("No solution found")
        self._log(f"Stats: {self.stats}")
        return result

    def _explore(self, root: SearchNode, target: Position,
                 memo: Set[Hashable], start: float) -> Optional[SearchNode]:
        frontier = deque([root])
        pop = frontier.pop if self.order == 'dfs' else frontier.popleft
        stats = self.stats
        budgeted = self.node_limit is not None or self.time_limit is not None

        while frontier:
            if budgeted and self._over_budget(start):
                stats.budget_exhausted = True
                return None

            node = pop()
            stats.nodes_visited += 1
            if node.depth > stats.max_depth:
                stats.max_depth = node.depth

            # Победа: один колышек в целевой клетке
            if node.board.is_won(target):
                return node

            moves = node.board.all_legal_moves()
            if self.on_expand is not None:
                self.on_expand(node, moves)

            for move in moves:
                child = node.board.apply(move)
                key = self._get_key(child)
                if key in memo:
                    stats.nodes_pruned += 1
                    continue
                memo.add(key)
                frontier.append(node.child(move, child))

            if len(frontier) > stats.max_frontier:
                stats.max_frontier = len(frontier)

        return None

    def _over_budget(self, start: float) -> bool:
        if self.node_limit is not None and self.stats.nodes_visited >= self.node_limit:
            return True
        if self.time_limit is not None and time.perf_counter() - start >= self.time_limit:
            return True
        return False


@monitor_time('solve')
def solve(board: Optional[Board] = None, target: Optional[Position] = None,
          **options) -> Optional[SearchNode]:
    """
    Точка входа: решает доску (по умолчанию английскую стартовую).

    Args:
        board: начальная позиция
        target: целевая клетка (по умолчанию центр)
        **options: параметры Explorer (order, node_limit, time_limit, ...)

    Returns:
        Выигрышный узел или None
    """
    if board is None:
        board = Board.english_start()
    explorer = Explorer(**options)
    result = explorer.solve(board, target)

    monitor = get_monitor()
    monitor.increment_counter('nodes_visited', explorer.stats.nodes_visited)
    monitor.increment_counter('solved' if result is not None else 'unsolved')
    return result
