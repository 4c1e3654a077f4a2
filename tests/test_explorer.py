"""
tests/test_explorer.py

Тесты для Explorer: поиск, мемоизация, бюджет, симметрии.
"""

import logging

import pytest

from core.board import Board, Move
from core.utils import Cell, Direction
from solutions.verify import verify_solution
from solvers import Explorer, SearchNode, solve
from utils.error_handling import InvalidBoardError
from utils.monitoring import get_monitor


def test_two_move_board(two_move_board):
    """Тест: единственное решение из двух ходов."""
    solver = Explorer()

    result = solver.solve(two_move_board)

    assert result is not None, "Решение должно быть найдено"
    assert result.history == (
        Move(1, 0, Direction.DOWN),
        Move(0, 2, Direction.RIGHT),
    )
    assert result.board.filled_count() == 1
    assert result.board.cell(2, 2) is Cell.FILLED
    assert solver.stats.solution_length == 2
    assert solver.stats.nodes_visited == 3


def test_four_peg_board_solved(four_peg_board):
    """Тест: маленькая позиция на английской доске решается в центр."""
    result = Explorer().solve(four_peg_board)

    assert result is not None
    assert result.depth == 3, "История = начальные колышки - 1"
    assert result.board.is_won((3, 3))
    assert verify_solution(four_peg_board, result.history)


def test_bfs_order(four_peg_board):
    """Тест: обход в ширину тоже находит решение."""
    result = Explorer(order='bfs').solve(four_peg_board)

    assert result is not None
    assert verify_solution(four_peg_board, result.history)


def test_already_solved():
    """Тест: доска уже решена — пустая история."""
    board = Board.from_rows(["---", "-O-", "---"])
    solver = Explorer()

    result = solver.solve(board)

    assert result is not None
    assert result.history == ()
    assert result.board == board
    assert solver.stats.nodes_visited == 1


def test_no_legal_moves_from_start():
    """Тест: нет ни одного хода — решения нет после раскрытия корня."""
    board = Board.from_rows([
        "  -O-  ",
        "  ---  ",
        "-------",
        "O---O--",
        "-------",
        "  ---  ",
        "  ---  ",
    ])
    solver = Explorer()

    result = solver.solve(board)

    assert result is None, "Решение не должно быть найдено"
    assert solver.stats.nodes_visited == 1
    assert solver.stats.memo_size == 1
    assert not solver.stats.budget_exhausted


def test_wrong_final_cell_is_no_solution():
    """Тест: последний колышек не в цели — это не решение."""
    board = Board.from_rows(["OO-", "---", "---"])
    solver = Explorer()

    assert solver.solve(board) is None
    assert solver.stats.nodes_visited == 2
    assert solver.solve(board, target=(2, 0)) is not None


def test_each_snapshot_expanded_once(four_peg_board):
    """Тест: ни одна позиция не раскрывается дважды, memo — по записи на позицию."""
    expanded = []
    solver = Explorer(on_expand=lambda node, moves: expanded.append(node.board))

    # Цель недостижима, обходим всё пространство
    result = solver.solve(four_peg_board, target=(6, 3))

    assert result is None
    assert len(expanded) == len(set(expanded)), "Повторное раскрытие позиции"
    assert solver.stats.nodes_visited == len(expanded)
    assert solver.stats.nodes_visited == solver.stats.memo_size
    assert solver.stats.nodes_pruned > 0, "Одни и те же позиции достижимы разными путями"


def test_expanded_bounded_by_memo(four_peg_board):
    """Тест: при найденном решении раскрыто не больше, чем запомнено."""
    expanded = []
    solver = Explorer(on_expand=lambda node, moves: expanded.append(node))

    result = solver.solve(four_peg_board)

    assert result is not None
    assert len(expanded) == solver.stats.nodes_visited - 1, "Выигрышный узел не раскрывается"
    assert solver.stats.nodes_visited <= solver.stats.memo_size


def test_on_expand_receives_moves(two_move_board):
    calls = []
    solver = Explorer(on_expand=lambda node, moves: calls.append((node.depth, moves)))

    solver.solve(two_move_board)

    assert calls == [
        (0, [Move(1, 0, Direction.DOWN)]),
        (1, [Move(0, 2, Direction.RIGHT)]),
    ]


def test_deterministic(four_peg_board):
    """Тест: два запуска дают одинаковый результат."""
    first = Explorer().solve(four_peg_board)
    second = Explorer().solve(four_peg_board)

    assert first is not None and second is not None
    assert first.board == second.board
    assert first.history == second.history


def test_memo_is_per_run(two_move_board):
    """Тест: повторный solve() на том же объекте не видит прошлый memo."""
    solver = Explorer()

    first = solver.solve(two_move_board)
    nodes_first = solver.stats.nodes_visited
    second = solver.solve(two_move_board)

    assert first == second
    assert solver.stats.nodes_visited == nodes_first


def test_node_limit(english_board):
    """Тест: бюджет по узлам останавливает поиск."""
    solver = Explorer(node_limit=10)

    result = solver.solve(english_board)

    assert result is None
    assert solver.stats.budget_exhausted, "Останов по бюджету отличается от тупика"
    assert solver.stats.nodes_visited == 10


def test_invalid_options():
    with pytest.raises(ValueError):
        Explorer(order='random')
    with pytest.raises(ValueError):
        Explorer(node_limit=0)
    with pytest.raises(ValueError):
        Explorer(time_limit=-1.0)


def test_invalid_target(english_board):
    """Тест: цель вне доски или на вырезанной клетке."""
    with pytest.raises(InvalidBoardError):
        Explorer().solve(english_board, target=(9, 9))
    with pytest.raises(InvalidBoardError):
        Explorer().solve(english_board, target=(0, 0))


def test_board_without_pegs():
    with pytest.raises(InvalidBoardError):
        Explorer().solve(Board.from_rows(["---", "---", "---"]))


def test_symmetry(four_peg_board):
    """Тест: склейка симметрий сохраняет корректность решения."""
    solver = Explorer(use_symmetry=True)

    result = solver.solve(four_peg_board)

    assert result is not None
    assert verify_solution(four_peg_board, result.history)


def test_symmetry_needs_symmetric_target(english_board):
    with pytest.raises(ValueError):
        Explorer(use_symmetry=True).solve(english_board, target=(3, 2))


def test_solve_entry_point_monitoring(two_move_board):
    """Тест: solve() пишет время и счётчики в монитор."""
    monitor = get_monitor()
    monitor.reset()

    result = solve(two_move_board, order='bfs')

    assert isinstance(result, SearchNode)
    assert monitor.get_stats('solve')['count'] == 1
    assert monitor.counters['solved'] == 1
    assert monitor.counters['nodes_visited'] == 3


def test_solve_entry_point_records_errors():
    monitor = get_monitor()
    monitor.reset()

    with pytest.raises(InvalidBoardError):
        solve(Board.from_rows(["---", "---", "---"]))

    assert monitor.get_stats('solve_error')['count'] == 1
    assert monitor.get_stats('solve') == {}


@pytest.mark.slow
def test_english_board_solved():
    """Тест: стандартная английская доска решается за 31 ход с финалом в центре."""
    board = Board.english_start()
    solver = Explorer()

    result = solver.solve(board)

    assert result is not None, "Решение должно быть найдено"
    assert len(result.history) == 31
    assert result.board.filled_count() == 1
    assert result.board.cell(3, 3) is Cell.FILLED
    assert verify_solution(board, result.history, (3, 3))
    assert solver.stats.nodes_visited <= solver.stats.memo_size


def test_time_limit(english_board):
    """Тест: бюджет по времени останавливает поиск и помечается в статистике."""
    solver = Explorer(time_limit=1e-9)

    result = solver.solve(english_board)

    assert result is None
    assert solver.stats.budget_exhausted is True, "Останов по времени отличается от тупика"
    assert solver.stats.nodes_visited == 0


def test_symmetry_memo_keys_are_compact(four_peg_board):
    """Тест: с симметриями memo хранит строковые ключи, а не доски."""
    keys = []
    solver = Explorer(use_symmetry=True,
                      on_expand=lambda node, moves: keys.append(solver._get_key(node.board)))

    result = solver.solve(four_peg_board)

    assert result is not None
    assert all(isinstance(key, str) for key in keys)
    assert len(keys) == len(set(keys)), "Симметричные позиции раскрываются один раз"


def test_verbose_logs_at_debug(two_move_board, caplog):
    """Тест: подробный лог решателя пишется на уровне DEBUG."""
    caplog.set_level(logging.DEBUG, logger="peg_solitaire")

    Explorer(verbose=True).solve(two_move_board)

    messages = [r for r in caplog.records if "Solution found" in r.getMessage()]
    assert messages, "Сообщение о решении должно попасть в лог"
    assert all(r.levelno == logging.DEBUG for r in messages)
