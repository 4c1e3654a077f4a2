#!/usr/bin/env python3
"""
main.py

Точка входа для Peg Solitaire Solver.

Использование:
    python main.py                      # английская доска, DFS
    python main.py --order bfs          # обход в ширину
    python main.py --node-limit 100000  # ограничение по узлам
    python main.py --stats              # статистика производительности
"""

import argparse
import logging
import sys

from core.board import Board
from core.utils import parse_target
from peg_io import display_board, format_solution
from solutions.verify import verify_solution
from solvers import ORDERS, solve
from utils.error_handling import InvalidBoardError
from utils.logging import get_logger, remove_handler, setup_file_logging
from utils.monitoring import get_monitor


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Peg Solitaire Solver',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  python main.py                     # английская доска, DFS
  python main.py --order bfs         # обход в ширину
  python main.py --time-limit 60     # не дольше минуты
        """
    )
    parser.add_argument(
        '--order', '-o', choices=ORDERS, default='dfs',
        help='Порядок обхода (default: dfs)'
    )
    parser.add_argument(
        '--target', '-t', type=parse_target, default=None,
        help='Целевая клетка: "x,y" или "D4" (default: центр)'
    )
    parser.add_argument(
        '--node-limit', type=int, default=None,
        help='Максимум раскрытых позиций'
    )
    parser.add_argument(
        '--time-limit', type=float, default=None,
        help='Ограничение по времени в секундах'
    )
    parser.add_argument(
        '--symmetry', action='store_true',
        help='Склеивать симметричные позиции (меняет порядок обхода, '
             'на полной доске лучше задавать --time-limit)'
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true',
        help='Подробный лог решателя'
    )
    parser.add_argument(
        '--log-file', default=None,
        help='Дублировать лог в файл'
    )
    parser.add_argument(
        '--stats', action='store_true',
        help='Вывести статистику производительности'
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logger = get_logger()
    level = logging.DEBUG if args.verbose else logging.INFO
    logger.set_level(level)
    file_handler = setup_file_logging(args.log_file, level) if args.log_file else None
    try:
        return run(args)
    finally:
        if file_handler is not None:
            remove_handler(file_handler)


def run(args: argparse.Namespace) -> int:
    """Решает английскую доску с параметрами из командной строки."""
    logger = get_logger()
    board = Board.english_start()
    print("=" * 50)
    print("Peg Solitaire Solver")
    print("=" * 50)
    print(f"\nАнглийская доска ({board.filled_count()} колышков):")
    print(display_board(board, with_coords=True))
    print(f"\nОбход: {args.order}")
    print("-" * 50)

    try:
        result = solve(
            board, args.target,
            order=args.order,
            node_limit=args.node_limit,
            time_limit=args.time_limit,
            use_symmetry=args.symmetry,
            verbose=args.verbose,
        )
    except (InvalidBoardError, ValueError) as e:
        logger.error(f"Ошибка: {e}")
        return 1

    if args.stats:
        get_monitor().log_stats()

    if result is None:
        print(f"\n{format_solution(None)}")
        return 1

    if not verify_solution(board, result.history, args.target):
        logger.error("Найдено некорректное решение (валидация не пройдена)")
        return 1

    print()
    print(display_board(result.board))
    print(format_solution(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
