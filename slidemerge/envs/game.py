"""2048 game session driven by directional commands."""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from numpy.random import PCG64DXSM, Generator, default_rng

from slidemerge.core.board import Board, Coord, Snapshot
from slidemerge.core.gameboard import fill_cells, is_done, spawn_tile
from slidemerge.core.gamemove import Direction, move_tiles
from slidemerge.envs.config import GameConfig

# ##>: Module logger.
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TurnResult:
    """
    Outcome of one accepted directional command.

    Attributes
    ----------
    direction : Direction
        The direction that was applied.
    changed : bool
        Whether the move changed any cell.
    spawned : Coord, optional
        Where a new tile was placed, None if no tile was spawned.
    board : Snapshot
        The board after the turn.
    is_finished : bool
        Whether the game is over after the turn.
    moves : int
        The move counter after the turn.
    """

    direction: Direction
    changed: bool
    spawned: Optional[Coord]
    board: Snapshot
    is_finished: bool
    moves: int


Observer = Callable[[TurnResult], Any]


class TwentyFortyEight:
    """
    2048 game session.

    This class owns the board for the whole session. Each call to ``apply_direction`` runs a full turn
    (move, spawn, move counter) before returning, and presentation layers read the result or register
    an observer with ``subscribe``.
    """

    # ##: All Actions.
    ACTIONS = {'left': Direction.LEFT, 'up': Direction.UP, 'right': Direction.RIGHT, 'down': Direction.DOWN}

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize the 2048 game board.

        Parameters
        ----------
        config : GameConfig, optional
            Session configuration (default is ``GameConfig()``).
        """
        self.config = config or GameConfig()
        self._rng: Generator = self._make_rng(self.config.seed)
        self._board = Board()
        self._moves = 0
        self._observers: list[Observer] = []

        self.reset()

    @staticmethod
    def _make_rng(seed: Optional[int]) -> Generator:
        return default_rng(seed) if seed is not None else default_rng(PCG64DXSM())

    @property
    def board(self) -> Snapshot:
        """
        Get the current state of the game board.

        Returns
        -------
        Snapshot
            A read-only copy of the board, ``None`` marking an empty cell.
        """
        return self._board.snapshot()

    @property
    def is_finished(self) -> bool:
        """True if the game is finished (no more moves possible), False otherwise."""
        return is_done(self._board)

    @property
    def moves(self) -> int:
        """Number of accepted directional commands since the last reset."""
        return self._moves

    def reset(self, seed: Optional[int] = None) -> Snapshot:
        """
        Empty the board and add the initial tiles.

        Parameters
        ----------
        seed : int, optional
            Reseed the random generator for reproducibility.

        Returns
        -------
        Snapshot
            The new game board.
        """
        if seed is not None:
            self._rng = self._make_rng(seed)

        self._board.clear()
        fill_cells(self._board, number_tile=self.config.initial_tiles, rng=self._rng)
        self._moves = 0
        logger.info('New game started')
        return self.board

    def apply_direction(self, direction: Any) -> Optional[TurnResult]:
        """
        Apply a directional command to the board.

        Parameters
        ----------
        direction : Any
            A ``Direction`` or a direction name. Any other input is ignored.

        Returns
        -------
        TurnResult or None
            The outcome of the turn, or None if the input was ignored.

        Notes
        -----
        - A new tile is spawned and the move counter incremented after every accepted direction, even
          one that moves nothing, unless ``gate_on_change`` is set in the configuration.
        - Observers are notified once the turn is complete.
        """
        parsed = Direction.parse(direction)
        if parsed is None:
            logger.debug('Ignored input %r', direction)
            return None

        changed = move_tiles(self._board, parsed)
        spawned = None
        if changed or not self.config.gate_on_change:
            spawned = spawn_tile(self._board, rng=self._rng)
            self._moves += 1

        result = TurnResult(
            direction=parsed,
            changed=changed,
            spawned=spawned,
            board=self.board,
            is_finished=self.is_finished,
            moves=self._moves,
        )
        if result.is_finished:
            logger.info('Game over after %d moves, max tile %s', self._moves, self._board.max_tile())

        for observer in list(self._observers):
            observer(result)
        return result

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """
        Register a callback notified with every ``TurnResult``.

        Parameters
        ----------
        observer : Callable[[TurnResult], Any]
            The callback.

        Returns
        -------
        Callable[[], None]
            A function removing the callback.
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def render(self) -> None:
        """
        Render the game board. This method prints the current state of the game board to the console.
        """
        print(self._board.pretty())
