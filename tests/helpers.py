"""Shared helpers for the test suite."""

from tictactoe import Mark

X = Mark.FIRST
O = Mark.SECOND

_CELLS = {"X": X, "O": O, "_": None}


def board_from(text):
    """Build a board from a 9-character string like "XX_O_____"."""
    text = text.replace(" ", "").replace("/", "")
    assert len(text) == 9, text
    return [_CELLS[c] for c in text]


class ManualScheduler:
    """Scheduler that only runs callbacks when the test says so."""

    def __init__(self):
        self.pending = {}
        self.delays = []
        self.cancelled = []
        self._next_handle = 0

    def call_later(self, delay, callback):
        self._next_handle += 1
        self.pending[self._next_handle] = callback
        self.delays.append(delay)
        return self._next_handle

    def cancel(self, handle):
        self.pending.pop(handle, None)
        self.cancelled.append(handle)

    def run_pending(self):
        callbacks = list(self.pending.values())
        self.pending.clear()
        for callback in callbacks:
            callback()


class LeakyScheduler(ManualScheduler):
    """Scheduler whose cancel() does nothing, so stale callbacks still fire."""

    def cancel(self, handle):
        self.cancelled.append(handle)
