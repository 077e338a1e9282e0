"""
Game-state checks and tile spawning for the 2048 game.
"""

from __future__ import annotations

import logging
from typing import Optional

from numpy.random import PCG64DXSM, Generator, default_rng

from slidemerge.core.board import Board, Coord
from slidemerge.core.gamemove import Direction

# ##>: Every new tile starts at this value.
SPAWN_VALUE = 2

# ##>: Module-level generator for performance (avoids repeated initialization).
_GENERATOR = default_rng(PCG64DXSM())

# ##>: Module logger.
logger = logging.getLogger(__name__)


def is_done(board: Board) -> bool:
    """
    Check if the game has ended by determining if any moves are possible.

    Parameters
    ----------
    board : Board
        The current game board.

    Returns
    -------
    bool
        True if the game is over (no moves possible), False otherwise.

    Notes
    -----
    - Any empty cell means a move is possible.
    - Neighbours outside the grid have no value, so they never match a tile.
    """
    for row, col in board.coords():
        if not board.is_occupied(row, col):
            return False

        value = board.value_at(row, col)
        for direction in Direction:
            if board.value_at(row + direction.row_offset, col + direction.col_offset) == value:
                return False
    return True


def spawn_tile(board: Board, rng: Optional[Generator] = None) -> Optional[Coord]:
    """
    Place a new tile in a random empty cell.

    Parameters
    ----------
    board : Board
        The game board. **Modified in-place.**
    rng : Generator, optional
        Random number generator, the module-level one is used if omitted.

    Returns
    -------
    Coord or None
        The coordinate of the new tile, ``None`` if the game is over.

    Notes
    -----
    - The cell is drawn uniformly among the empty cells.
    - A finished game is left untouched.
    """
    if is_done(board):
        return None

    # ##: A board with no empty cell can still have merges left.
    available_cells = board.empty_cells()
    if not available_cells:
        return None

    rng = rng if rng is not None else _GENERATOR
    row, col = available_cells[int(rng.integers(len(available_cells)))]
    board.set_value(row, col, SPAWN_VALUE)
    logger.debug('Spawned %d at (%d, %d)', SPAWN_VALUE, row, col)
    return row, col


def fill_cells(board: Board, number_tile: int, seed: Optional[int] = None, rng: Optional[Generator] = None) -> list[Coord]:
    """
    Fill empty cells with new tiles.

    Parameters
    ----------
    board : Board
        The game board. **Modified in-place.**
    number_tile : int
        Number of new tiles to add.
    seed : int, optional
        Random number generator seed for reproducibility, ignored when ``rng`` is given.
    rng : Generator, optional
        Random number generator to draw from.

    Returns
    -------
    list[Coord]
        The coordinates of the new tiles.

    Notes
    -----
    If fewer tiles can be placed than requested, it stops once no tile can be placed.
    """
    if rng is None:
        rng = default_rng(seed) if seed is not None else _GENERATOR

    spawned = []
    for _ in range(number_tile):
        cell = spawn_tile(board, rng=rng)
        if cell is None:
            break
        spawned.append(cell)
    return spawned
