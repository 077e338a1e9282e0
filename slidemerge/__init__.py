"""Game-state engine of the 2048 sliding-tile merge game."""

from .core import Board, Direction, is_done, move_tiles, spawn_tile
from .envs import GameConfig, TurnResult, TwentyFortyEight

__all__ = ["Board", "Direction", "move_tiles", "is_done", "spawn_tile", "GameConfig", "TurnResult", "TwentyFortyEight"]
