"""
AI player for Modern Tic Tac Toe.
Picks moves with a fixed priority list: win, block, center, corner, any.
"""

from typing import Optional

import numpy as np

from .game_state import Board, Mark, empty_cells
from .win_checker import WIN_PATTERNS

CENTER = 4
CORNERS = (0, 2, 6, 8)


def find_completing_cell(board: Board, mark: Mark) -> Optional[int]:
    """
    Find a cell that would complete a line for mark.

    Lines are scanned in WIN_PATTERNS order; the first line holding two
    of mark and one empty cell wins.

    Returns:
        The empty cell index, or None if no line qualifies.
    """
    for line in WIN_PATTERNS:
        values = [board[i] for i in line]
        if values.count(mark) == 2 and values.count(None) == 1:
            return line[values.index(None)]
    return None


def choose_move(
    board: Board,
    my_side: Mark,
    rng: Optional[np.random.Generator] = None
) -> Optional[int]:
    """
    Choose the computer's next cell.

    Priority:
    1. Complete one of my lines
    2. Block one of the opponent's lines
    3. Take the center
    4. Take a random free corner
    5. Take any random free cell

    Only steps 4 and 5 use rng. There is no lookahead, so this can be
    beaten (a fork wins against it).

    Args:
        board: Board snapshot, not modified.
        my_side: Side the computer plays.
        rng: Random source for tie-breaks (default: fresh generator).

    Returns:
        Cell index, or None if the board is full.
    """
    move = find_completing_cell(board, my_side)
    if move is not None:
        return move

    move = find_completing_cell(board, my_side.opposite())
    if move is not None:
        return move

    if board[CENTER] is None:
        return CENTER

    if rng is None:
        rng = np.random.default_rng()

    corners = [i for i in CORNERS if board[i] is None]
    if corners:
        return int(rng.choice(corners))

    free = empty_cells(board)
    if free:
        return int(rng.choice(free))

    return None


class AIPlayer:
    """
    The computer opponent: choose_move() with its own random source.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None):
        """
        Initialize the AI player.

        Args:
            rng: Random source for tie-breaks (default: fresh generator).
        """
        self.rng = rng if rng is not None else np.random.default_rng()

    def get_move(self, board: Board, mark: Mark) -> Optional[int]:
        """
        Choose a move.

        Args:
            board: Board snapshot.
            mark: Side the AI plays this move.

        Returns:
            Cell index, or None if the board is full.
        """
        return choose_move(board, mark, self.rng)
