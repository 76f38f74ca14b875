"""
Game session module for Minesweeper.

Holds the per-game context a front end needs: the current board, the
difficulty it was built from, and the move counter. Each retry or new
game builds a fresh Board.
"""
import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional

from .board import BEGINNER, Board, BoardConfig, GameState, RevealResult
from .coordinate import Coordinate

logger = logging.getLogger(__name__)


@dataclass
class GameSession:
    """
    One player's game, round after round.

    Attributes:
        config: Board configuration used for new rounds.
        seed: Seeds the sequence of round layouts, or None for random ones.
            Each round draws its own layout from that sequence.
        moves: Reveals and flags applied in the current round.
    """

    config: BoardConfig = field(default_factory=lambda: BEGINNER)
    seed: Optional[int] = None
    moves: int = field(default=0, init=False)
    _board: Board = field(init=False, repr=False)
    _lost: bool = field(default=False, init=False, repr=False)
    _rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)
        self.new_round()

    def new_round(self, config: Optional[BoardConfig] = None) -> Board:
        """
        Start a new round on a fresh board.

        Args:
            config: New configuration, or None to keep the current one.

        Returns:
            The new board.
        """
        if config is not None:
            self.config = config
        round_seed = self._rng.getrandbits(32)
        self._board = Board.from_config(self.config, seed=round_seed)
        self._lost = False
        self.moves = 0
        logger.info(
            "New round: %dx%d with %d mines",
            self.config.width,
            self.config.height,
            self.config.num_mines,
        )
        return self._board

    @property
    def board(self) -> Board:
        return self._board

    @property
    def state(self) -> GameState:
        """Current state of the round."""
        if self._lost:
            return GameState.LOST
        if self._board.has_won():
            return GameState.WON
        return GameState.IN_PROGRESS

    @property
    def is_over(self) -> bool:
        return self.state != GameState.IN_PROGRESS

    @property
    def remaining_mines(self) -> int:
        """Mine counter shown to the player."""
        return self._board.remaining_mines

    def reveal(self, row: int, col: int) -> GameState:
        """
        Reveal a cell. Does nothing once the round is over.

        On hitting a mine every other unflagged mine is revealed too.

        Returns:
            State of the round after the move.

        Raises:
            OutOfBoundsError: If the position is outside the board.
            FlaggedCellError: If the cell is flagged.
        """
        if self.is_over:
            return self.state

        result = self._board.reveal(row, col)
        self.moves += 1

        if result == RevealResult.GAME_OVER:
            self._lost = True
            self._reveal_mines()
            logger.info(
                "Hit mine at (%d, %d) after %d moves", row, col, self.moves
            )
        elif self._board.has_won():
            logger.info("Minefield cleared in %d moves", self.moves)
        return self.state

    def flag(self, row: int, col: int) -> bool:
        """
        Toggle a flag. Does nothing once the round is over.

        Returns:
            Whether the cell is flagged after the move.

        Raises:
            OutOfBoundsError: If the position is outside the board.
            RevealedCellError: If the cell is already revealed.
        """
        if self.is_over:
            return self._board.has_flag(row, col)

        flagged = self._board.flag(row, col)
        self.moves += 1
        return flagged

    def misplaced_flags(self) -> List[Coordinate]:
        """Flagged cells that are not mines."""
        return [
            Coordinate(row, col)
            for row in range(self._board.height)
            for col in range(self._board.width)
            if self._board.has_flag(row, col)
            and not self._board.is_mine(row, col)
        ]

    def _reveal_mines(self) -> None:
        """Reveal every mine the player did not flag."""
        board = self._board
        for row in range(board.height):
            for col in range(board.width):
                if board.is_mine(row, col) and not board.has_flag(row, col):
                    board.reveal(row, col)
