#!/usr/bin/env python3
"""
main.py

Точка входа для решателя треугольного Peg Solitaire.

Использование:
    python main.py 4                  # снять первый колышек с лунки 4
    python main.py 0 --compact        # только история ходов
    python main.py 4 --memo           # с мемо тупиковых позиций
    python main.py --all              # все 15 стартовых лунок
"""

import argparse
import logging
import sys
from typing import List, Optional

from core.board import TriangleBoard
from core.utils import SLOT_COUNT
from peg_io import display_board, format_history, format_replay, format_solution
from solutions.verify import verify_solution
from solvers import DEFAULT_MAX_NODES, GameTreeSolver, SearchStatus
from utils.error_handling import safe_solve
from utils.logging import get_logger, setup_file_logging

EXIT_SOLVED = 0
EXIT_UNSOLVED = 1
EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Triangle Peg Solitaire Solver',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Нумерация лунок:
        0
       1 2
      3 4 5
     6 7 8 9
   10 11 12 13 14
        """
    )
    parser.add_argument(
        'slot', nargs='?', type=int,
        help='Лунка, с которой снимается первый колышек (0-14)'
    )
    parser.add_argument(
        '--all', action='store_true',
        help='Решить для всех стартовых лунок и вывести сводку'
    )
    parser.add_argument(
        '--compact', action='store_true',
        help='Вывести только историю ходов: [4, [11, 7, 4], ...]'
    )
    parser.add_argument(
        '--memo', action='store_true',
        help='Мемо тупиковых позиций (ответ не меняется)'
    )
    parser.add_argument(
        '--no-symmetry', action='store_true',
        help='Не учитывать симметрии доски в мемо'
    )
    parser.add_argument(
        '--max-nodes', type=int, default=DEFAULT_MAX_NODES,
        help=f'Лимит построенных узлов (default: {DEFAULT_MAX_NODES})'
    )
    parser.add_argument('--verbose', '-v', action='store_true', help='Подробный лог')
    parser.add_argument('--log-file', help='Дублировать лог в файл')
    return parser


def make_solver(args) -> GameTreeSolver:
    return GameTreeSolver(
        max_nodes=args.max_nodes,
        use_memo=args.memo,
        use_symmetry=not args.no_symmetry,
        verbose=args.verbose,
    )


def solve_slot(args, slot: int) -> int:
    solver = make_solver(args)
    result = safe_solve(solver, slot)
    if result is None:
        print(f"❌ Некорректная лунка: {slot} (допустимо 0-{SLOT_COUNT - 1})")
        return EXIT_INVALID

    if not result.solved:
        if result.status is SearchStatus.EXHAUSTED:
            print(f"❌ Решения со стартовой лункой {slot} нет")
        else:
            print(f"❌ Поиск прерван: превышен лимит в {args.max_nodes} узлов")
        print(f"📊 Статистика: {result.stats}")
        return EXIT_UNSOLVED

    if not verify_solution(result.moves):
        # Недопустимая последовательность от решателя означает ошибку логики
        get_logger().error("Найденное решение не прошло проверку")
        return EXIT_UNSOLVED

    if args.compact:
        print(format_history(result.moves))
        return EXIT_SOLVED

    print(format_solution(result.moves))
    print()
    for frame in format_replay(result.moves):
        print(frame)
        print()
    print(f"📊 Статистика: {result.stats}")
    return EXIT_SOLVED


def solve_all(args) -> int:
    print(f"{'Лунка':>5}  {'Итог':<16} {'Узлов':>9}  Время")
    exit_code = EXIT_SOLVED
    for slot in range(SLOT_COUNT):
        result = make_solver(args).solve(slot)
        if not result.solved:
            exit_code = EXIT_UNSOLVED
        print(
            f"{slot:>5}  {result.status.value:<16} "
            f"{result.stats.nodes_visited:>9}  {result.stats.time_elapsed:.3f}s"
        )
    return exit_code


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.max_nodes < 1:
        parser.error("--max-nodes должен быть положительным")

    logger = get_logger()
    logger.set_level(logging.INFO if args.verbose else logging.WARNING)
    if args.log_file:
        file_level = logging.DEBUG if args.verbose else logging.INFO
        setup_file_logging(args.log_file, file_level)
        logger.logger.setLevel(file_level)

    if args.all:
        return solve_all(args)

    if args.slot is None:
        parser.print_usage()
        print("\nНумерация лунок:")
        print(display_board(TriangleBoard(), show_numbers=True))
        return EXIT_INVALID

    return solve_slot(args, args.slot)


if __name__ == "__main__":
    sys.exit(main())
