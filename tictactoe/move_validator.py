"""
Move validator for Modern Tic Tac Toe.
Validates that moves follow the rules.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .game_state import Mark, NUM_CELLS, Session


class RejectionReason(Enum):
    """Why a move was refused."""
    CELL_OCCUPIED = "cell_occupied"
    GAME_ALREADY_OVER = "game_already_over"
    WRONG_TURN = "wrong_turn"
    INDEX_OUT_OF_RANGE = "index_out_of_range"
    INPUT_BUSY = "input_busy"


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    reason: Optional[RejectionReason] = None
    error_message: Optional[str] = None

    @classmethod
    def reject(cls, reason: RejectionReason, message: str) -> "ValidationResult":
        return cls(is_valid=False, reason=reason, error_message=message)


class MoveValidator:
    """
    Validates Tic Tac Toe moves.

    Rules, checked in this order:
    1. Game must not be over
    2. Index must be a cell number 0-8
    3. Can only place on empty cells
    4. Must be the placing side's turn
    """

    def validate_move(self, session: Session, index: int, mark: Mark) -> ValidationResult:
        """
        Validate a move.

        Args:
            session: Current session.
            index: Cell to place on (0-8).
            mark: Side placing the mark.

        Returns:
            ValidationResult with is_valid, reason and error_message.
        """
        if session.game_over:
            return ValidationResult.reject(
                RejectionReason.GAME_ALREADY_OVER,
                "Game is already over!"
            )

        # bool is an int subclass but never a cell number
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < NUM_CELLS:
            return ValidationResult.reject(
                RejectionReason.INDEX_OUT_OF_RANGE,
                f"Invalid cell {index!r}. Must be 0-{NUM_CELLS - 1}."
            )

        occupant = session.board[index]
        if occupant is not None:
            return ValidationResult.reject(
                RejectionReason.CELL_OCCUPIED,
                f"Cell {index} is already occupied by {occupant.value}"
            )

        if mark != session.current_mark:
            return ValidationResult.reject(
                RejectionReason.WRONG_TURN,
                f"It is {session.current_mark.value}'s turn, not {mark.value}'s"
            )

        return ValidationResult(is_valid=True)

