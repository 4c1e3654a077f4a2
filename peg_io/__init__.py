"""
peg_io - Вывод для Peg Solitaire

Экспортирует:
- Визуализация доски
- Форматирование ходов и решений
"""

from .visualizer import display_board, format_move, format_solution

__all__ = [
    'display_board',
    'format_move',
    'format_solution',
]
