"""
core - Ядро Peg Solitaire

Базовые структуры данных и утилиты.
"""

from .board import Board, Move
from .utils import (
    BOARD_SIZE, Cell, Direction, Position,
    in_range, index_to_pos, pos_to_index, parse_target
)

__all__ = [
    'Board', 'Move',
    'BOARD_SIZE', 'Cell', 'Direction', 'Position',
    'in_range', 'index_to_pos', 'pos_to_index', 'parse_target'
]
