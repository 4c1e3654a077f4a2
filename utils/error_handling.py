"""
utils/error_handling.py

Исключения и проверки входных данных.

Отсутствие решения исключением не является: решатель возвращает None.
"""

from typing import Optional, Tuple


class SolverError(Exception):
    """Базовое исключение для решателей."""
    pass


class InvalidBoardError(SolverError):
    """Ошибка невалидной доски или целевой клетки."""
    pass


class IllegalMoveError(SolverError):
    """
    Попытка применить недопустимый ход.

    Это ошибка программиста: решатель применяет только ходы,
    полученные из all_legal_moves(). Ядро её никогда не перехватывает.
    """

    def __init__(self, move, message: Optional[str] = None):
        self.move = move
        super().__init__(message or f"Illegal move applied: {move!r}")


def validate_board(board, target: Optional[Tuple[int, int]] = None) -> bool:
    """
    Валидирует доску перед поиском.

    Args:
        board: доска для валидации
        target: целевая клетка (x, y) или None

    Returns:
        True если доска валидна

    Raises:
        InvalidBoardError: если доска невалидна
    """
    if board is None:
        raise InvalidBoardError("Board must not be None")

    if not hasattr(board, 'filled_count'):
        raise InvalidBoardError("Board must provide filled_count()")

    if board.filled_count() < 1:
        raise InvalidBoardError("Board must contain at least one peg")

    if target is not None:
        x, y = target
        if not (0 <= x < board.size and 0 <= y < board.size):
            raise InvalidBoardError(f"Target {target} is outside the board")
        if board.is_blocked(x, y):
            raise InvalidBoardError(f"Target {target} is a blocked cell")

    return True
