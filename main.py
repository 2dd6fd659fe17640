#!/usr/bin/env python3
"""
main.py

Точка входа для Peg Solitaire Solver.

Использование:
    python main.py                                 # английская доска, текст
    python main.py games/small.txt                 # своя доска
    python main.py games/english.txt --mode gif    # GIF в папку output
    python main.py --solver stack                  # решатель на явном стеке
"""

import argparse
import logging
import sys
from typing import List, Optional

from peg_io import load_board, display_board, format_solution, create_images, create_gif
from peg_io.images import check_output_folder
from solutions.verify import verify_solution
from solvers import SOLVERS
from utils.error_handling import SolverError
from utils.logging import get_logger, setup_file_logging

DEFAULT_INPUT = "games/english.txt"
DEFAULT_OUTPUT = "output"

MODES = ('text', 'images', 'gif')

EXIT_OK = 0
EXIT_NO_SOLUTION = 1
EXIT_BAD_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Peg Solitaire Solver',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  python main.py                              # английская доска
  python main.py games/small.txt              # маленькая доска
  python main.py --mode images --output out   # PNG на каждый шаг
  python main.py --mode gif                   # анимация solution.gif
        """
    )
    parser.add_argument(
        'input', nargs='?', default=DEFAULT_INPUT,
        help=f'Файл с доской (default: {DEFAULT_INPUT})'
    )
    parser.add_argument(
        '--mode', '-m', choices=MODES, default='text',
        help='Формат вывода решения (default: text)'
    )
    parser.add_argument(
        '--output', '-o', default=DEFAULT_OUTPUT,
        help=f'Папка для картинок (default: {DEFAULT_OUTPUT})'
    )
    parser.add_argument(
        '--solver', '-s', choices=list(SOLVERS.keys()),
        default='backtracking', help='Выбор решателя (default: backtracking)'
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true',
        help='Прогресс поиска и отладочные сообщения'
    )
    parser.add_argument(
        '--log-file',
        help='Дополнительно писать лог в файл'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logger = get_logger()
    logger.set_level(logging.DEBUG if args.verbose else logging.INFO)
    if args.log_file:
        setup_file_logging(args.log_file, logging.DEBUG if args.verbose else logging.INFO)

    try:
        if args.mode != 'text':
            check_output_folder(args.output)
        board = load_board(args.input)
    except (SolverError, OSError) as e:
        logger.error(f"Не удалось подготовить запуск для {args.input}: {e}")
        print(f"❌ Ошибка: {e}")
        return EXIT_BAD_INPUT

    print("=" * 50)
    print("🎯 Peg Solitaire Solver")
    print("=" * 50)
    print(f"\nДоска {args.input} ({board.peg_count()} колышков):")
    print(display_board(board))
    print(f"\n🔧 Решатель: {args.solver}")
    print("-" * 50)

    solver = SOLVERS[args.solver](verbose=args.verbose)
    solution = solver.solve(board)

    if solution is None:
        print(f"\n{format_solution(board, None)}")
        print(f"⏱ Время: {solver.stats.time_elapsed:.3f}с")
        return EXIT_NO_SOLUTION

    if not verify_solution(board, solution):
        # Ошибка решателя, а не входных данных
        raise SolverError("Найденное решение не прошло проверку")

    if args.mode == 'text':
        print(f"\n{format_solution(board, solution)}")
    elif args.mode == 'images':
        paths = create_images(board, solution, args.output)
        print(f"\n✅ Сохранено картинок: {len(paths)} в {args.output}")
    else:
        path = create_gif(board, solution, args.output)
        print(f"\n✅ Анимация сохранена: {path}")

    print(f"\n⏱ Время: {solver.stats.time_elapsed:.3f}с")
    print(f"📊 Статистика: {solver.stats}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
