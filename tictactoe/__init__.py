"""
Modern Tic Tac Toe
==================
Game-state engine for a 3x3 grid game with a two-player mode and a
single-player mode against a scripted opponent.

The engine has no UI of its own. Front ends (console, Tkinter) drive a
TurnController and react to the events it emits.
"""

from .game_state import Mark, Mode, Session
from .win_checker import Outcome, OutcomeStatus, WIN_PATTERNS, evaluate
from .move_validator import MoveValidator, RejectionReason, ValidationResult
from .rules import MoveResult, apply_move
from .ai_player import AIPlayer, choose_move
from .events import DrawEvent, EventBus, MoveAcceptedEvent, RoundResetEvent, WinEvent
from .turn_controller import ImmediateScheduler, TurnController
from .config import GameConfig

__version__ = "1.0.0"
