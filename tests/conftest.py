"""
tests/conftest.py

Общие фикстуры для тестов.
"""

import os
import sys

import pytest

# Добавляем корень проекта в путь
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.board import Board


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: полный поиск на английской доске")


@pytest.fixture
def english_board() -> Board:
    return Board.english_start()


@pytest.fixture
def four_peg_board() -> Board:
    """
    Позиция на английской доске, решаемая за 3 хода с финалом в центре:
    (3,3)↑, (1,2)→, (3,1)↓.
    """
    return Board.from_rows([
        "  ---  ",
        "  ---  ",
        "-OOO---",
        "---O---",
        "-------",
        "  ---  ",
        "  ---  ",
    ])


@pytest.fixture
def two_move_board() -> Board:
    """Доска 5x5 с единственным решением из двух ходов в центр (2,2)."""
    return Board.from_rows([
        "-O---",
        "-O---",
        "O----",
        "-----",
        "-----",
    ])
