#!/usr/bin/env python3
"""Watch the Random agent play Minesweeper."""
import sys
import time
import os
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from minefield import BoardConfig, DIFFICULTIES, MinesweeperEnv
from agents import RandomAgent


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(delay: float = 0.3, games: int = 5, config: BoardConfig = None, seed: int = None):
    """Run demo games with visualization."""
    config = config or BoardConfig()
    env = MinesweeperEnv(config=config, render_mode="ansi")
    agent = RandomAgent(config.rows, config.cols, seed=seed)

    density = 100 * config.num_mines / config.total_cells
    print(f"Board: {config.rows}x{config.cols} with {config.num_mines} mines ({density:.1f}% density)")
    print("Starting in 2 seconds...")
    time.sleep(2)

    wins = 0

    for game in range(games):
        obs, _ = env.reset(seed=None if seed is None else seed + game)
        agent.reset()

        clear_screen()
        print(f"=== Game {game + 1}/{games} ===")
        print(f"Wins so far: {wins}\n")
        print(env.render())
        time.sleep(delay)

        done = False
        step = 0

        while not done:
            action = agent.select_action(obs, env.get_action_mask())
            _, row, col = env.decode_action(action)

            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{games} | Step {step} ===")
            print(f"Wins so far: {wins}")
            print(f"Last move: ({row}, {col})\n")
            print(env.render())

            if done:
                if info.get("game_state") == "WON":
                    wins += 1
                    print(f"\n*** WIN! ***")
                else:
                    print(f"\n*** LOST (hit mine) ***")

            time.sleep(delay)

        time.sleep(1.0)  # Pause between games

    print(f"\n=== Final: {wins}/{games} wins ({100*wins/games:.0f}%) ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between moves")
    parser.add_argument("--games", type=int, default=5, help="Number of games")
    parser.add_argument("--difficulty", choices=sorted(DIFFICULTIES), default="beginner")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args()

    demo(delay=args.delay, games=args.games, config=DIFFICULTIES[args.difficulty], seed=args.seed)
