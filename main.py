"""
Main entry point for Modern Tic Tac Toe.

Launches the Tkinter UI by default. With --no-ui the game runs in the
console: type a cell number 1-9, or one of the commands below.

    n   new round (scores kept)
    r   reset scores (asks first)
    m   switch mode (two players / vs computer)
    q   quit
"""

from typing import Callable, Optional

import numpy as np

from tictactoe import (
    DrawEvent,
    GameConfig,
    ImmediateScheduler,
    Mark,
    Mode,
    MoveAcceptedEvent,
    RoundResetEvent,
    TurnController,
    WinEvent,
)
from tictactoe.game_state import format_board


MODE_NAMES = {
    Mode.TWO_PLAYER: "Two players",
    Mode.VS_COMPUTER: "Player vs computer",
}


class ConsoleGame:
    """
    Console front end.

    Reads commands from input_func and prints everything the engine
    reports.
    """

    def __init__(
        self,
        mode: Mode = Mode.TWO_PLAYER,
        seed: Optional[int] = None,
        delay: bool = True,
        input_func: Callable[[str], str] = input
    ):
        """
        Initialize the console game.

        Args:
            mode: Starting play mode.
            seed: Seed for the computer's random choices.
            delay: If False, the computer answers without a thinking pause.
            input_func: Where commands come from (input() by default).
        """
        self.config = GameConfig()
        self.controller = TurnController(
            mode=mode,
            config=self.config,
            scheduler=ImmediateScheduler(sleep=delay),
            rng=np.random.default_rng(seed),
        )
        self.controller.subscribe(self._on_event)
        self.input_func = input_func
        self.is_running = False

    def start(self):
        """Run the console loop until the player quits."""
        print("\n" + "="*40)
        print("   Modern Tic Tac Toe")
        print("="*40)
        print("Cells are numbered 1-9, left to right, top to bottom.")
        print("Commands: n = new round, r = reset scores, m = switch mode, q = quit\n")

        self.is_running = True
        self._print_status()

        while self.is_running:
            try:
                command = self.input_func(self._prompt())
            except EOFError:
                break
            self.handle_command(command)

    def handle_command(self, command: str):
        """
        Handle one line of player input.

        Args:
            command: A cell number 1-9 or n / r / m / q.
        """
        command = command.strip().lower()

        if command == "q":
            print("\nGame quit by user.")
            self.is_running = False
        elif command == "n":
            self.controller.new_round(keep_scores=True)
        elif command == "r":
            answer = self.input_func("Reset both scores to zero? [y/N] ")
            if answer.strip().lower() in ("y", "yes"):
                self.controller.full_reset()
            else:
                print("Reset cancelled.")
        elif command == "m":
            if self.controller.mode == Mode.TWO_PLAYER:
                self.controller.set_mode(Mode.VS_COMPUTER)
            else:
                self.controller.set_mode(Mode.TWO_PLAYER)
        elif command.isdigit():
            result = self.controller.submit_move(int(command) - 1)
            if not result.accepted:
                print(f"Move refused: {result.error_message}")
        elif command:
            print(f"Unknown command: {command!r}")

    def _prompt(self) -> str:
        if self.controller.game_over:
            return "Round over. n = new round, q = quit: "
        label = self.config.label(self.controller.current_mark)
        return f"Play {label} at [1-9]: "

    def _on_event(self, event):
        """Print what happened."""
        if isinstance(event, MoveAcceptedEvent):
            who = self._who(event.mark)
            print(f"\n>>> {who} placed {self.config.label(event.mark)} at {event.index + 1}")
            self._print_status()
        elif isinstance(event, WinEvent):
            print(f"\n>>> {self._who(event.mark)} placed {self.config.label(event.mark)} at {event.index + 1}")
            self._print_status()
            line = "-".join(str(i + 1) for i in event.pattern)
            print(f"\n🏆 {self.config.WIN_MESSAGE.format(label=self.config.label(event.mark))} (line {line})")
        elif isinstance(event, DrawEvent):
            self._print_status()
            print(f"\n🤝 {self.config.DRAW_MESSAGE}")
        elif isinstance(event, RoundResetEvent):
            if event.scores_cleared:
                print("\nScores reset!")
            print(f"\nNew round! Mode: {MODE_NAMES[self.controller.mode]}")
            self._print_status()

    def _who(self, mark: Mark) -> str:
        if self.controller.mode == Mode.VS_COMPUTER and mark != self.config.FIRST_TO_MOVE:
            return "Computer"
        return "Player"

    def _print_status(self):
        print(format_board(self.controller.board))
        scores = self.controller.scores
        print(
            f"Score  X: {scores[Mark.FIRST]}  O: {scores[Mark.SECOND]}"
            f"   |   {MODE_NAMES[self.controller.mode]}"
        )
        if not self.controller.game_over:
            print(f"Turn: {self.config.label(self.controller.current_mark)}")


def build_parser():
    import argparse

    parser = argparse.ArgumentParser(description="Modern Tic Tac Toe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--mode",
        choices=[m.value for m in Mode],
        default=Mode.TWO_PLAYER.value,
        help="pvp = two players, pve = player vs computer"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the computer's random choices"
    )
    parser.add_argument(
        "--no-delay",
        action="store_true",
        help="Computer moves without a thinking pause"
    )
    return parser


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)
    mode = Mode(args.mode)

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(mode=mode, seed=args.seed, delay=not args.no_delay)
        ui.run()
        return

    game = ConsoleGame(mode=mode, seed=args.seed, delay=not args.no_delay)

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
