"""
Move application for Modern Tic Tac Toe.

apply_move() is the only function that writes to a Session's board.
It validates, places the mark, evaluates the board and updates the
turn, game-over flag and score.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .events import DrawEvent, EventBus, MoveAcceptedEvent, WinEvent
from .game_state import Mark, Session
from .move_validator import MoveValidator, RejectionReason, ValidationResult
from .win_checker import Outcome, OutcomeStatus, evaluate

logger = logging.getLogger(__name__)

_validator = MoveValidator()


@dataclass(frozen=True)
class MoveResult:
    """
    Result of submitting a move.

    On success outcome is set; on rejection reason and error_message are.
    """
    accepted: bool
    outcome: Optional[Outcome] = None
    reason: Optional[RejectionReason] = None
    error_message: Optional[str] = None

    @classmethod
    def rejected(cls, validation: ValidationResult) -> "MoveResult":
        return cls(
            accepted=False,
            reason=validation.reason,
            error_message=validation.error_message,
        )


def apply_move(
    session: Session,
    index: int,
    mark: Mark,
    events: Optional[EventBus] = None
) -> MoveResult:
    """
    Place a mark on the board.

    A rejected move leaves the session untouched. An accepted one either
    ends the round (win or draw) or passes the turn to the other side.

    Args:
        session: Session to update.
        index: Cell to place on (0-8).
        mark: Side placing the mark.
        events: Where to publish the resulting event, if anywhere.

    Returns:
        MoveResult with the new Outcome, or the rejection reason.
    """
    validation = _validator.validate_move(session, index, mark)
    if not validation.is_valid:
        logger.debug("Rejected %s at %r: %s", mark.value, index, validation.error_message)
        return MoveResult.rejected(validation)

    session.board[index] = mark
    outcome = evaluate(session.board)

    if outcome.status == OutcomeStatus.WON:
        session.scores[outcome.mark] += 1
        session.game_over = True
        event = WinEvent(index=index, mark=outcome.mark, pattern=outcome.pattern)
        logger.info("%s wins on %s", outcome.mark.value, outcome.pattern)
    elif outcome.status == OutcomeStatus.DRAW:
        session.game_over = True
        event = DrawEvent(index=index, mark=mark)
        logger.info("Round drawn")
    else:
        session.turn_is_first = not session.turn_is_first
        event = MoveAcceptedEvent(index=index, mark=mark)

    if events is not None:
        events.publish(event)

    return MoveResult(accepted=True, outcome=outcome)
