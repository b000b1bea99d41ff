import logging
from enum import Enum

from .board import Board, Cell, render_as_text
from .errors import GameError, MatchFinished

logger = logging.getLogger(__name__)


class MatchPhase(Enum):
    INIT = "init"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class TurnOwner(Enum):
    NONE = "none"
    X = "X"
    O = "O"

    @property
    def mark(self):
        return Cell(self.value) if self is not TurnOwner.NONE else Cell.EMPTY

    def other(self):
        if self is TurnOwner.X:
            return TurnOwner.O
        if self is TurnOwner.O:
            return TurnOwner.X
        return TurnOwner.NONE


class MatchOutcome(Enum):
    IN_PROGRESS = "in_progress"
    WIN_X = "win_x"
    WIN_O = "win_o"
    DRAW = "draw"

    @property
    def winner(self):
        """
        winning mark, or None
        """
        return {MatchOutcome.WIN_X: Cell.X, MatchOutcome.WIN_O: Cell.O}.get(self)

    @property
    def finished(self):
        return self is not MatchOutcome.IN_PROGRESS


def winning_line(board):
    """
    first full line of one non-empty mark, or None
    a line spans the whole board, so an NxN board needs N in a row
    """
    for line in board.lines():
        first = board.grid[line[0].row][line[0].col]
        if first is Cell.EMPTY:
            continue
        if all(board.grid[c.row][c.col] is first for c in line):
            return line
    return None


def compute_outcome(board):
    """
    derive outcome from board alone
    """
    line = winning_line(board)
    if line is not None:
        mark = board.grid[line[0].row][line[0].col]
        return MatchOutcome.WIN_X if mark is Cell.X else MatchOutcome.WIN_O
    if board.is_full():
        return MatchOutcome.DRAW
    return MatchOutcome.IN_PROGRESS


class Match:
    """
    one session: board, turn owner and phase
    """
    def __init__(self, board_size):
        """
        allocate board in INIT, then start right away
        """
        self.board = Board(board_size)     # raises InvalidSize
        self.phase = MatchPhase.INIT
        self.turn = TurnOwner.NONE
        self.move_count = 0
        self.start()

    def start(self):
        # x always moves first
        if self.phase is not MatchPhase.INIT:
            raise GameError(f"match already started ({self.phase.value})")
        self.phase = MatchPhase.PLAYING
        self.turn = TurnOwner.X
        logger.debug("match started on %dx%d board", self.board.size, self.board.size)

    @property
    def outcome(self):
        return compute_outcome(self.board)

    def winning_line(self):
        return winning_line(self.board)

    def attempt_move(self, coords):
        """
        place current player's mark, returns the new outcome
        raises OutOfBounds / CellOccupied / MatchFinished, board untouched
        """
        if self.phase is MatchPhase.GAME_OVER:
            raise MatchFinished(f"match is over ({self.outcome.value})")
        if self.phase is not MatchPhase.PLAYING:
            raise GameError("match not started")
        mover = self.turn
        self.board.set_cell(coords, mover.mark)
        self.move_count += 1
        outcome = self.outcome
        logger.debug("%s -> (%d, %d)\n%s", mover.value, coords.row, coords.col,
                     render_as_text(self.board))
        if outcome.finished:
            self.phase = MatchPhase.GAME_OVER
            logger.info("match over: %s after %d moves", outcome.value, self.move_count)
        else:
            self.turn = mover.other()
        return outcome
