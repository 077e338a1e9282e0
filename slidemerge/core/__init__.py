# -*- coding: utf-8 -*-
"""
This module provides the core game logic of a 2048-like game.

It includes the board representation, the directional slide and merge of tiles, the detection of
legal moves and finished games, and the random spawning of new tiles.
"""

from .board import BOARD_SIZE, Board, Coord, Snapshot
from .gameboard import SPAWN_VALUE, fill_cells, is_done, spawn_tile
from .gamemove import Direction, can_move, illegal_directions, legal_directions, move_tiles, traversal_order

__all__ = [
    "BOARD_SIZE",
    "Board",
    "Coord",
    "Snapshot",
    "Direction",
    "move_tiles",
    "traversal_order",
    "can_move",
    "legal_directions",
    "illegal_directions",
    "SPAWN_VALUE",
    "is_done",
    "spawn_tile",
    "fill_cells",
]
