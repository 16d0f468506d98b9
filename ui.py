"""
Modern Tic Tac Toe UI
A graphical interface for the game using Tkinter.

Shows:
- The 3x3 board (click or press Space/Enter on a cell)
- Whose turn it is
- The running score
- Mode selection (two players / vs computer)
- The winning line and the result of each round
"""

import tkinter as tk
from tkinter import messagebox, ttk
from typing import Any, Callable, Optional

import numpy as np

from tictactoe import (
    DrawEvent,
    GameConfig,
    Mark,
    Mode,
    MoveAcceptedEvent,
    OutcomeStatus,
    RoundResetEvent,
    TurnController,
    WinEvent,
)


# Colors
BG = '#1a1a2e'
CELL_BG = '#16213e'
WIN_BG = '#065f46'
X_FG = '#f87171'
O_FG = '#00d4ff'
ACTIVE_MODE_BG = '#6366f1'
IDLE_MODE_BG = '#2d3748'

# Pause before the result box, so the last mark is drawn first (ms)
RESULT_DELAY_MS = 180


def cell_views(board, outcome, busy, config):
    """
    Work out how each cell should be drawn.

    Args:
        board: Board snapshot.
        outcome: Current Outcome; a WON outcome highlights its line.
        busy: True while the computer is thinking.
        config: GameConfig for the labels.

    Returns:
        One dict of Button options per cell.
    """
    win_cells = outcome.pattern if outcome.status == OutcomeStatus.WON else ()
    views = []
    for index, mark in enumerate(board):
        fg = X_FG if mark == Mark.FIRST else O_FG
        disabled = mark is not None or busy or outcome.is_over
        views.append({
            "text": config.label(mark),
            "fg": fg,
            "disabledforeground": fg,
            "bg": WIN_BG if index in win_cells else CELL_BG,
            "state": "disabled" if disabled else "normal",
        })
    return views


class TkScheduler:
    """Runs delayed callbacks on the Tk event loop."""

    def __init__(self, root: tk.Misc):
        self.root = root

    def call_later(self, delay: float, callback: Callable[[], None]) -> Any:
        return self.root.after(int(delay * 1000), callback)

    def cancel(self, handle: Any):
        self.root.after_cancel(handle)


class TicTacToeUI:
    """
    Main UI class for Modern Tic Tac Toe.
    """

    def __init__(self, mode: Mode = Mode.TWO_PLAYER, seed: Optional[int] = None, delay: bool = True):
        """Initialize the UI."""
        self.config = GameConfig()
        if not delay:
            self.config.AI_DELAY_MIN_MS = 0
            self.config.AI_DELAY_JITTER_MS = 0

        self._create_ui()

        self.controller = TurnController(
            mode=mode,
            config=self.config,
            scheduler=TkScheduler(self.root),
            rng=np.random.default_rng(seed),
        )
        self.controller.subscribe(self._on_event)

        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("Modern Tic Tac Toe")
        self.root.configure(bg=BG)
        self.root.resizable(False, False)

        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=BG)
        style.configure('TLabel', background=BG, foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=16, pady=16)

        ttk.Label(main_frame, text="Tic Tac Toe", style='Title.TLabel').pack(pady=(0, 10))

        # Mode selection
        mode_frame = ttk.Frame(main_frame)
        mode_frame.pack(pady=5)
        self.mode_buttons = {}
        for mode, text in ((Mode.TWO_PLAYER, "2 Players"), (Mode.VS_COMPUTER, "vs Computer")):
            btn = tk.Button(
                mode_frame,
                text=text,
                font=('Segoe UI', 10, 'bold'),
                width=12,
                bg=IDLE_MODE_BG,
                fg='white',
                command=lambda m=mode: self._set_mode(m)
            )
            btn.pack(side=tk.LEFT, padx=5)
            self.mode_buttons[mode] = btn

        # Scoreboard
        score_frame = ttk.Frame(main_frame)
        score_frame.pack(pady=10)
        self.score_x_label = ttk.Label(score_frame, text="Player X: 0")
        self.score_x_label.pack(side=tk.LEFT, padx=10)
        self.score_o_label = ttk.Label(score_frame, text="Player O: 0")
        self.score_o_label.pack(side=tk.LEFT, padx=10)

        # Board
        board_frame = ttk.Frame(main_frame)
        board_frame.pack(pady=10)
        self.cells = []
        for index in range(9):
            cell = tk.Button(
                board_frame,
                text="",
                font=('Segoe UI', 24, 'bold'),
                width=4,
                height=2,
                bg=CELL_BG,
                fg='white',
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self._on_cell(i)
            )
            cell.grid(row=index // 3, column=index % 3, padx=2, pady=2)
            cell.bind('<Return>', lambda _e, i=index: self._on_cell(i))
            self.cells.append(cell)

        # Status
        self.turn_label = ttk.Label(main_frame, text="Turn: -", style='Status.TLabel')
        self.turn_label.pack(pady=5)

        # Controls
        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="New Round",
            font=('Segoe UI', 11, 'bold'),
            bg='#10b981',
            fg='white',
            width=12,
            command=lambda: self.controller.new_round(keep_scores=True)
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="Reset",
            font=('Segoe UI', 11, 'bold'),
            bg='#ef4444',
            fg='white',
            width=12,
            command=self._confirm_reset
        ).pack(side=tk.LEFT, padx=5)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_cell(self, index: int):
        """Handle a click on a cell."""
        result = self.controller.submit_move(index)
        if not result.accepted:
            # Clicks on full cells or during the computer's turn are ignored
            return
        self._refresh()

    def _set_mode(self, mode: Mode):
        print(f"Mode set to: {mode.value}")
        self.controller.set_mode(mode)

    def _confirm_reset(self):
        if messagebox.askyesno("Reset", "Reset both scores to zero?", parent=self.root):
            self.controller.full_reset()

    def _on_event(self, event):
        """React to engine events."""
        if isinstance(event, MoveAcceptedEvent):
            self.root.bell()
            self._refresh()
        elif isinstance(event, WinEvent):
            self._refresh()
            message = self.config.WIN_MESSAGE.format(label=self.config.label(event.mark))
            self.root.after(RESULT_DELAY_MS, lambda: self._show_result(message))
        elif isinstance(event, DrawEvent):
            self._refresh()
            self.root.after(RESULT_DELAY_MS, lambda: self._show_result(self.config.DRAW_MESSAGE))
        elif isinstance(event, RoundResetEvent):
            self._refresh()

    def _show_result(self, message: str):
        self.root.bell()
        messagebox.showinfo("Round over", message, parent=self.root)

    def _refresh(self):
        """Redraw board, turn, score and mode from the controller's snapshots."""
        busy = self.controller.is_busy
        over = self.controller.game_over

        views = cell_views(self.controller.board, self.controller.outcome, busy, self.config)
        for cell, view in zip(self.cells, views):
            cell.configure(**view)

        if over:
            self.turn_label.configure(text="Round over")
        elif busy:
            self.turn_label.configure(text="Computer is thinking...")
        else:
            self.turn_label.configure(text=f"Turn: {self.config.label(self.controller.current_mark)}")

        scores = self.controller.scores
        self.score_x_label.configure(text=f"Player X: {scores[Mark.FIRST]}")
        self.score_o_label.configure(text=f"Player O: {scores[Mark.SECOND]}")

        for mode, btn in self.mode_buttons.items():
            btn.configure(bg=ACTIVE_MODE_BG if mode == self.controller.mode else IDLE_MODE_BG)

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.controller.new_round()
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Modern Tic Tac Toe UI")
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

    args = parser.parse_args()

    print("\n" + "="*40)
    print("   Modern Tic Tac Toe UI")
    print("="*40)
    print(f"   Mode: {args.mode}")
    print("="*40 + "\n")

    ui = TicTacToeUI(mode=Mode(args.mode), seed=args.seed)
    ui.run()


if __name__ == "__main__":
    main()
