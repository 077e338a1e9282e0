# -*- coding: utf-8 -*-
"""
Evaluate the game engine by playing random games.
"""
import logging
from argparse import ArgumentParser
from collections import Counter
from typing import Dict, Optional, Sequence, Tuple

from numpy.random import Generator, default_rng
from tqdm import trange

from slidemerge.core import Board, legal_directions
from slidemerge.envs import GameConfig, TwentyFortyEight

logger = logging.getLogger(__name__)


def play_random_game(env: TwentyFortyEight, rng: Generator, max_moves: int = 100_000) -> Tuple[int, int]:
    """
    Play one game choosing a random legal direction at every turn.

    Parameters
    ----------
    env : TwentyFortyEight
        A freshly reset game session.
    rng : Generator
        Random generator used to pick the directions.
    max_moves : int, optional
        Safety cap on the number of turns (default is 100000).

    Returns
    -------
    Tuple[int, int]
        The highest tile reached (0 on an empty board) and the number of moves played.
    """
    while not env.is_finished and env.moves < max_moves:
        board = Board.from_rows(env.board)
        legal = legal_directions(board)
        if not legal:
            break
        env.apply_direction(legal[int(rng.integers(len(legal)))])

    return max(value or 0 for row in env.board for value in row), env.moves


def evaluate(length: int = 10, seed: Optional[int] = None) -> Tuple[Dict[int, int], float]:
    """
    Play several random games.

    Parameters
    ----------
    length : int, optional
        The number of games to play (default is 10).
    seed : int, optional
        Seed for both tile spawning and direction choice.

    Returns
    -------
    Tuple[Dict[int, int], float]
        The frequency of each highest tile, and the average number of moves per game.
    """
    env = TwentyFortyEight(GameConfig(seed=seed, gate_on_change=True))
    rng = default_rng(seed)
    tiles, moves = [], []

    with trange(length) as period:
        for num in period:
            env.reset(seed=None if seed is None else seed + num)
            max_tile, played = play_random_game(env, rng)

            # ##: Log.
            period.set_description(f"Evaluation: {num + 1}")
            period.set_postfix(moves=played, max=max_tile)

            tiles.append(max_tile)
            moves.append(played)

    logger.info('Played %d games', length)
    return dict(Counter(tiles)), sum(moves) / len(moves) if moves else 0.0


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = ArgumentParser(description="Play random 2048 games and report the highest tiles")
    parser.add_argument("--games", type=int, default=10, help="Number of games to play")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed")
    parser.add_argument("--verbose", action="store_true", help="Show debug logs")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    frequency, average = evaluate(length=args.games, seed=args.seed)
    print(f"Highest tiles: {dict(sorted(frequency.items()))}")
    print(f"Average moves: {average:.1f}")


if __name__ == "__main__":
    main()
