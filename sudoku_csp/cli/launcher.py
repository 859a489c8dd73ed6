# -*- coding: utf-8 -*-
"""Command line entry to print a freshly generated Sudoku puzzle."""
import argparse
from typing import List, Optional

from sudoku_csp.common.config import GeneratorConfig, load_config
from sudoku_csp.common.grid import format_grid
from sudoku_csp.common.random_provider import SEEDED_PROVIDERS
from sudoku_csp.game.generator import PuzzleGenerator
from sudoku_csp.utils.log import get_logger, set_log_level

logger = get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a Sudoku puzzle.")
    parser.add_argument(
        "--config", type=str, default=None, help="Path to a YAML generator config."
    )
    parser.add_argument(
        "--difficulty",
        type=str,
        default=None,
        help="easy, medium or hard (default: from config, or medium).",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed.")
    parser.add_argument(
        "--random-provider",
        type=str,
        default=None,
        choices=list(SEEDED_PROVIDERS),
        help="Source of random draws.",
    )
    parser.add_argument(
        "--show-solution", action="store_true", default=False, help="Also print the solution."
    )
    parser.add_argument(
        "--log-level", type=str, default=None, help="Log level, e.g. DEBUG or INFO."
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> GeneratorConfig:
    config = load_config(args.config) if args.config else GeneratorConfig()
    if args.difficulty is not None:
        config.difficulty = args.difficulty
    if args.seed is not None:
        config.seed = args.seed
    if args.random_provider is not None:
        config.random_provider = args.random_provider
    if args.log_level is not None:
        config.log_level = args.log_level
    config.validate()
    return config


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    config = build_config(args)
    set_log_level(config.log_level)

    generator = PuzzleGenerator(config)
    game = generator.generate_new_game()
    logger.info(f"Generated a {game.difficulty.value} puzzle with {game.removed} empty cells.")

    print("Puzzle:")
    print(format_grid(game.initial))
    if args.show_solution:
        print("\nSolution:")
        print(format_grid(game.solution))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
