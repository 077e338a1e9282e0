# -*- coding: utf-8 -*-
"""
Game session configuration.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class GameConfig:
    """
    Configuration of a game session.

    Attributes
    ----------
    seed : int, optional
        Seed of the random generator used to spawn tiles, fresh entropy if None.
    initial_tiles : int
        Number of tiles placed on a new board.
    gate_on_change : bool
        If True, a direction that moves nothing neither spawns a tile nor counts as a move.
        By default every accepted direction spawns and counts.
    """

    seed: Optional[int] = None
    initial_tiles: int = 2
    gate_on_change: bool = False

    def __post_init__(self):
        if self.initial_tiles < 0:
            raise ValueError(f'initial_tiles must be >= 0, got {self.initial_tiles}')
