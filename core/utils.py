"""
core/utils.py

Общие константы и типы клеток/направлений для Peg Solitaire.
"""

from enum import Enum
from typing import Tuple

# Размер английской доски
BOARD_SIZE = 7

Position = Tuple[int, int]


class Cell(Enum):
    """Состояние клетки. Значение — символ для отображения."""
    BLOCKED = ' '   # Клетки нет на доске
    FILLED = 'O'    # Колышек
    EMPTY = '-'     # Пустое место (можно прыгнуть)


class Direction(Enum):
    """Направление прыжка: (dx, dy, стрелка)."""
    UP = (0, -1, '↑')
    DOWN = (0, 1, '↓')
    LEFT = (-1, 0, '←')
    RIGHT = (1, 0, '→')

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def symbol(self) -> str:
        return self.value[2]

    def opposite(self) -> 'Direction':
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def in_range(x: int, y: int, size: int = BOARD_SIZE) -> bool:
    """Проверяет, находится ли координата в пределах доски."""
    return 0 <= x < size and 0 <= y < size


def index_to_pos(x: int, y: int) -> str:
    """Координата (x, y) → шахматная нотация (A1, B2, ...)."""
    return f"{chr(x + ord('A'))}{y + 1}"


def pos_to_index(pos: str) -> Position:
    """Шахматная нотация → координата (x, y)."""
    x = ord(pos[0].upper()) - ord('A')
    y = int(pos[1:]) - 1
    return x, y


def parse_target(text: str) -> Position:
    """
    Разбирает целевую клетку: "3,3" или "D4".

    Raises:
        ValueError: если строку не удалось разобрать
    """
    text = text.strip()
    if ',' in text:
        x_str, y_str = text.split(',', 1)
        return int(x_str), int(y_str)
    if len(text) >= 2 and text[0].isalpha():
        return pos_to_index(text)
    raise ValueError(f"Bad target cell: {text!r}")
