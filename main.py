#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--difficulty {beginner,intermediate,expert}]
                        [--rows R --cols C --mines M] [--seed N] [--debug]
    python main.py evaluate [--games N] [--seed N]
"""
import argparse
import logging
import sys
from pathlib import Path

# Add src to path for imports when running from a checkout
sys.path.insert(0, str(Path(__file__).parent / "src"))

from minefield import Board, BoardConfig, DIFFICULTIES, InvalidConfiguration
from minefield.console import ConsoleGame, run
from minefield.environment import ActionType
from agents import RandomAgent, Evaluator


def board_config(args: argparse.Namespace) -> BoardConfig:
    """Build the board configuration from a preset or explicit sizes."""
    if args.rows or args.cols or args.mines:
        preset = DIFFICULTIES[args.difficulty]
        return BoardConfig(
            rows=args.rows or preset.rows,
            cols=args.cols or preset.cols,
            num_mines=args.mines or preset.num_mines,
        )
    return DIFFICULTIES[args.difficulty]


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    config = board_config(args)
    game = ConsoleGame(
        board=Board(config, seed_value=args.seed),
        config=config,
        debug=args.debug,
        color=not args.no_color,
    )
    print("Type h for help.")
    run(game)


def evaluate(args: argparse.Namespace) -> None:
    """Evaluate random agents and print results."""
    config = board_config(args)
    agents = {
        "Random (step)": RandomAgent(config.rows, config.cols, seed=args.seed),
        "Random (all moves)": RandomAgent(
            config.rows, config.cols, seed=args.seed, action_types=ActionType
        ),
    }

    evaluator = Evaluator(config, num_episodes=args.games, seed=args.seed)
    results = evaluator.compare(agents)

    print("\n" + "=" * 50)
    print("Agent Comparison Results")
    print("=" * 50)
    print(f"{'Agent':<20} {'Win Rate':<12} {'Avg Reward':<12} {'Avg Steps':<10}")
    print("-" * 50)

    for name, metrics in results.items():
        print(
            f"{name:<20} {metrics['win_rate']:>10.1%} "
            f"{metrics['avg_reward']:>10.2f} "
            f"{metrics['avg_steps']:>10.1f}"
        )


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    """Board size options shared by all commands."""
    parser.add_argument(
        "--difficulty",
        choices=sorted(DIFFICULTIES),
        default="beginner",
        help="Preset board size",
    )
    parser.add_argument("--rows", type=int, help="Override the number of rows")
    parser.add_argument("--cols", type=int, help="Override the number of columns")
    parser.add_argument("--mines", type=int, help="Override the number of mines")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - Play in the terminal or evaluate agents"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug messages"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    add_board_arguments(play_parser)
    play_parser.add_argument(
        "--debug", action="store_true", help="Show covered cells"
    )
    play_parser.add_argument(
        "--no-color", action="store_true", help="Disable coloured numbers"
    )

    # Evaluate command
    eval_parser = subparsers.add_parser("evaluate", help="Evaluate random agents")
    add_board_arguments(eval_parser)
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games per agent"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "play":
            play(args)
        elif args.command == "evaluate":
            evaluate(args)
        else:
            parser.print_help()
    except InvalidConfiguration as error:
        parser.error(str(error))


if __name__ == "__main__":
    main()
