"""
Directional slide-and-merge for the 2048 game, with utilities for determining legal and illegal moves.
"""

from __future__ import annotations

import logging
from enum import Enum
from itertools import product
from typing import Any, Optional

from numpy import ones

from slidemerge.core.board import BOARD_SIZE, Board

# ##>: Module logger.
logger = logging.getLogger(__name__)


class Direction(Enum):
    """
    Direction of a move, valued by its unit vector (row offset, column offset).
    """

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def row_offset(self) -> int:
        return self.value[0]

    @property
    def col_offset(self) -> int:
        return self.value[1]

    @classmethod
    def parse(cls, value: Any) -> Optional[Direction]:
        """
        Interpret an input as a direction.

        Parameters
        ----------
        value : Any
            A ``Direction`` or a direction name such as ``"up"`` or ``"LEFT"``.

        Returns
        -------
        Direction or None
            The matching direction, or ``None`` if the input is not recognized.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.__members__.get(value.strip().upper())
        return None


def traversal_order(direction: Direction) -> list[int]:
    """
    Order in which row and column indices are swept for a move.

    Tiles are processed starting from the edge they move toward, so that tiles already moved
    never block the ones behind them.
    """
    if direction.row_offset == -1 or direction.col_offset == -1:
        return list(range(BOARD_SIZE))
    return list(range(BOARD_SIZE - 1, -1, -1))


def move_tiles(board: Board, direction: Direction) -> bool:
    """
    Slide every tile of the board in a direction, merging equal neighbours.

    Parameters
    ----------
    board : Board
        The game board. **Modified in-place.**
    direction : Direction
        The direction to slide toward.

    Returns
    -------
    bool
        True if at least one cell changed, False otherwise.

    Notes
    -----
    - A tile slides as far as it can, one cell at a time.
    - A cell absorbs at most one merge per move, and a tile that merged stops there:
      ``[_, 2, 2, 4]`` moved right gives ``[_, _, 4, 4]``, never ``[_, _, _, 8]``.
    """
    order = traversal_order(direction)
    row_offset, col_offset = direction.value

    # ##: Every cell may absorb one merge during this move.
    mergeable = ones((BOARD_SIZE, BOARD_SIZE), dtype=bool)
    changed = False

    for row, col in product(order, order):
        current = (row, col)
        while board.is_occupied(*current):
            target = (current[0] + row_offset, current[1] + col_offset)
            value = board.value_at(*current)

            if board.is_occupied(*target):
                # ##: Out-of-bounds targets have no value, so they never merge.
                if board.value_at(*target) == value and mergeable[target]:
                    board.set_value(*target, value * 2)
                    board.set_value(*current, None)
                    mergeable[target] = False
                    changed = True
                break

            board.set_value(*target, value)
            board.set_value(*current, None)
            changed = True
            current = target

    logger.debug('Moved %s, changed=%s', direction.name, changed)
    return changed


def can_move(board: Board, direction: Direction) -> bool:
    """
    Check if a move in a direction would change the board, without applying it.

    Parameters
    ----------
    board : Board
        The game board to check.
    direction : Direction
        Direction to check.

    Returns
    -------
    bool
        True if the move is possible, False otherwise.

    Notes
    -----
    A move is possible if an empty cell sits next to a tile on the side the tile moves toward,
    or if two adjacent tiles along the move axis hold the same value.
    """
    state = board.as_array()
    if direction.row_offset == 0:
        lead, trail = state[:, :-1], state[:, 1:]
    else:
        lead, trail = state[:-1, :], state[1:, :]

    # ##>: Moving right or down, the trailing side is the destination.
    if direction.row_offset == 1 or direction.col_offset == 1:
        lead, trail = trail, lead

    can_slide = (lead == 0) & (trail != 0)
    can_merge = (lead != 0) & (lead == trail)
    return bool(can_slide.any() or can_merge.any())


def legal_directions(board: Board) -> list[Direction]:
    """
    Determine the directions that would change the board.

    Parameters
    ----------
    board : Board
        The current game board.

    Returns
    -------
    list[Direction]
        The legal directions, in declaration order.
    """
    return [direction for direction in Direction if can_move(board, direction)]


def illegal_directions(board: Board) -> list[Direction]:
    """Determine the directions that would leave the board unchanged."""
    return [direction for direction in Direction if not can_move(board, direction)]
