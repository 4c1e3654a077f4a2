"""
peg_io/visualizer.py

Визуализация доски и решений.
"""

from typing import Optional

from core.board import Board, Move
from solvers.base import SearchNode


def display_board(board: Board, with_coords: bool = False) -> str:
    """
    Текстовое представление доски: по строке на каждый y,
    по символу на клетку (' ' — нет клетки, 'O' — колышек, '-' — пусто).

    Args:
        board: доска
        with_coords: добавить номера столбцов и строк

    Returns:
        Строка для вывода
    """
    rows = [''.join(row) for row in board.to_matrix()]
    if not with_coords:
        return "\n".join(rows)

    header = "  " + "".join(str(x % 10) for x in range(board.size))
    lines = [header]
    for y, row in enumerate(rows):
        lines.append(f"{y:<2}{row}")
    return "\n".join(lines)


def format_move(move: Move) -> str:
    """Ход как координата и стрелка: "(3, 5) ↑"."""
    return f"({move.x}, {move.y}) {move.direction.symbol}"


def format_solution(node: Optional[SearchNode]) -> str:
    """
    Форматирует решение для вывода.

    Args:
        node: выигрышный узел или None

    Returns:
        Форматированная строка
    """
    if node is None:
        return "No solution found"

    lines = [f"Finished in {node.depth} moves", "", "(x, y) direction"]
    lines.extend(format_move(move) for move in node.history)
    return "\n".join(lines)
