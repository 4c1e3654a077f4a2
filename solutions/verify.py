"""
solutions/verify.py

Проверка решений повторным проигрыванием ходов.
"""

from typing import Iterable, Optional

from core.board import Board, Move
from core.utils import Position
from utils.error_handling import IllegalMoveError


def replay(board: Board, moves: Iterable[Move]) -> Board:
    """
    Применяет ходы по очереди.

    Raises:
        IllegalMoveError: на первом недопустимом ходе
    """
    for move in moves:
        board = board.apply(move)
    return board


def verify_solution(board: Board, moves: Iterable[Move],
                    target: Optional[Position] = None) -> bool:
    """
    Проверяет корректность решения.

    Правила:
    - каждый ход должен быть допустимым на своей позиции;
    - после всех ходов остаётся ровно один колышек;
    - он стоит в target (по умолчанию центр доски).
    """
    try:
        final = replay(board, moves)
    except IllegalMoveError:
        return False
    return final.is_won(target)
