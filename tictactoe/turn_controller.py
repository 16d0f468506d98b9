"""
Turn controller for Modern Tic Tac Toe.

Drives the round: accepts human moves, schedules the computer's reply in
single-player mode and starts new rounds. Front ends talk only to this
class.

Game flow (VS_COMPUTER):
1. Human places the mark that is due (O opens every round)
2. If the round goes on, the computer's move is scheduled after a short
   thinking delay; human input is refused until it lands
3. The computer places the other mark
4. Repeat until a win or a draw
"""

import logging
import time
from typing import Any, Callable, Dict, Optional

import numpy as np

from .ai_player import AIPlayer
from .config import GameConfig
from .events import EventBus, Listener, RoundResetEvent
from .game_state import Board, Mark, Mode, Session
from .move_validator import RejectionReason
from .rules import MoveResult, apply_move
from .win_checker import Outcome, evaluate

logger = logging.getLogger(__name__)


class ImmediateScheduler:
    """
    Scheduler that waits out the delay and then runs the callback inline.

    Used by the console front end, where blocking is fine. A scheduler is
    any object with call_later(delay, callback) -> handle and
    cancel(handle); see ui.TkScheduler for the event-loop version.
    """

    def __init__(self, sleep: bool = True):
        self.sleep = sleep

    def call_later(self, delay: float, callback: Callable[[], None]) -> Any:
        if self.sleep and delay > 0:
            time.sleep(delay)
        callback()
        return None

    def cancel(self, handle: Any):
        # Callbacks have already run by the time call_later returns
        pass


class TurnController:
    """
    Owns one Session and everything that mutates it.

    Several controllers can live in one process; they share nothing.
    """

    def __init__(
        self,
        mode: Mode = Mode.TWO_PLAYER,
        config: Optional[GameConfig] = None,
        scheduler: Optional[Any] = None,
        rng: Optional[np.random.Generator] = None
    ):
        """
        Initialize the controller and start the first round.

        Args:
            mode: Starting play mode.
            config: Game settings (default: GameConfig()).
            scheduler: Runs the computer's delayed move (default: ImmediateScheduler()).
            rng: Random source for the computer and its delay (default: config.make_rng()).
        """
        self.config = config if config is not None else GameConfig()
        self.scheduler = scheduler if scheduler is not None else ImmediateScheduler()
        self.rng = rng if rng is not None else self.config.make_rng()

        self.ai = AIPlayer(self.rng)
        self.events = EventBus()
        self.session = Session.start(Mode(mode), self.config.FIRST_TO_MOVE)

        # Pending computer move
        self._pending_handle: Any = None
        self._busy = False

        # Bumped on every reset; a scheduled move from an older round is dropped
        self._round = 0

    # ==================== SNAPSHOTS ====================

    @property
    def board(self) -> Board:
        return self.session.board_snapshot()

    @property
    def current_mark(self) -> Mark:
        return self.session.current_mark

    @property
    def game_over(self) -> bool:
        return self.session.game_over

    @property
    def scores(self) -> Dict[Mark, int]:
        return self.session.scores_snapshot()

    @property
    def mode(self) -> Mode:
        return self.session.mode

    @property
    def outcome(self) -> Outcome:
        return evaluate(self.session.board)

    @property
    def is_busy(self) -> bool:
        """True while a computer move is pending."""
        return self._busy

    @property
    def round_number(self) -> int:
        return self._round

    # ==================== EVENTS ====================

    def subscribe(self, listener: Listener):
        self.events.subscribe(listener)

    def unsubscribe(self, listener: Listener):
        self.events.unsubscribe(listener)

    # ==================== COMMANDS ====================

    def submit_move(self, index: int) -> MoveResult:
        """
        Place the mark that is due on a cell.

        Args:
            index: Cell index (0-8).

        Returns:
            MoveResult with the new Outcome, or why the move was refused.
        """
        if self._busy:
            return MoveResult(
                accepted=False,
                reason=RejectionReason.INPUT_BUSY,
                error_message="Wait for the computer to move."
            )

        result = apply_move(self.session, index, self.session.current_mark, self.events)

        if (result.accepted
                and not self.session.game_over
                and self.session.mode == Mode.VS_COMPUTER):
            self._schedule_computer_move()

        return result

    def new_round(self, keep_scores: bool = True):
        """
        Start a fresh round, dropping any pending computer move.

        Args:
            keep_scores: If False, both scores go back to zero.
        """
        self._cancel_pending()
        self._round += 1
        self.session.new_round(keep_scores)
        logger.info("Round %d started (%s)", self._round, self.session.mode.value)
        self.events.publish(RoundResetEvent(scores_cleared=not keep_scores))

    def full_reset(self):
        """New round with both scores set back to zero."""
        self.new_round(keep_scores=False)

    def set_mode(self, mode: Mode):
        """
        Switch between TWO_PLAYER and VS_COMPUTER. Always starts a new round.

        Raises:
            ValueError: If mode is not a Mode or a Mode value ("pvp"/"pve").
        """
        self.session.mode = Mode(mode)
        self.new_round(keep_scores=True)

    # ==================== COMPUTER OPPONENT ====================

    def _schedule_computer_move(self):
        self._busy = True
        token = self._round
        delay = self.config.thinking_delay(self.rng)
        logger.debug("Computer thinking for %.3fs", delay)

        handle = self.scheduler.call_later(delay, lambda: self._computer_move(token))

        # An inline scheduler has already run the move
        if self._busy and self._round == token:
            self._pending_handle = handle

    def _computer_move(self, token: int):
        if token != self._round:
            logger.debug("Dropping computer move from round %d", token)
            return

        self._pending_handle = None
        self._busy = False

        if self.session.game_over:
            return

        mark = self.session.current_mark
        move = self.ai.get_move(self.session.board_snapshot(), mark)
        if move is None:
            logger.warning("Computer found no free cell")
            return

        result = apply_move(self.session, move, mark, self.events)
        if not result.accepted:
            logger.warning("Computer move %d refused: %s", move, result.error_message)

    def _cancel_pending(self):
        if self._pending_handle is not None:
            self.scheduler.cancel(self._pending_handle)
            self._pending_handle = None
        self._busy = False
