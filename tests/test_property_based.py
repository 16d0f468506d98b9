from typing import List

import numpy as np
from hypothesis import given, settings, strategies as st

from tictactoe import Mode, OutcomeStatus, RejectionReason, TurnController, WIN_PATTERNS, choose_move, evaluate

from helpers import ManualScheduler, O, X

cell_sequences = st.lists(st.integers(min_value=-2, max_value=10), max_size=30)


def _winners(board) -> set:
    return {board[a] for a, b, c in WIN_PATTERNS if board[a] is not None and board[a] == board[b] == board[c]}


@given(cell_sequences)
def test_accepted_moves_keep_board_consistent(indices: List[int]):
    controller = TurnController(mode=Mode.TWO_PLAYER, scheduler=ManualScheduler())

    for index in indices:
        before = controller.board
        result = controller.submit_move(index)
        board = controller.board

        if result.accepted:
            assert before[index] is None
            assert sum(1 for a, b in zip(before, board) if a != b) == 1
        else:
            assert board == before
            assert result.reason in (
                RejectionReason.CELL_OCCUPIED,
                RejectionReason.GAME_ALREADY_OVER,
                RejectionReason.INDEX_OUT_OF_RANGE,
            )

        # O opens, so O is never behind and never more than one ahead
        assert 0 <= board.count(O) - board.count(X) <= 1
        assert len(_winners(board)) <= 1


@given(cell_sequences)
def test_game_over_matches_outcome(indices: List[int]):
    controller = TurnController(mode=Mode.TWO_PLAYER, scheduler=ManualScheduler())
    for index in indices:
        controller.submit_move(index)
        assert controller.game_over == evaluate(controller.board).is_over


@settings(max_examples=50)
@given(st.integers(min_value=0, max_value=2**32 - 1), st.lists(st.integers(min_value=0, max_value=8), max_size=20))
def test_computer_always_plays_a_free_cell(seed: int, indices: List[int]):
    scheduler = ManualScheduler()
    controller = TurnController(
        mode=Mode.VS_COMPUTER,
        scheduler=scheduler,
        rng=np.random.default_rng(seed)
    )
    for index in indices:
        result = controller.submit_move(index)
        scheduler.run_pending()
        assert not controller.is_busy
        if (result.accepted
                and result.outcome.status == OutcomeStatus.ONGOING
                and not controller.game_over):
            # The computer answered without ending the round, so O is due again
            assert controller.current_mark == O
        assert 0 <= controller.board.count(O) - controller.board.count(X) <= 1


@given(st.lists(st.sampled_from([None, X, O]), min_size=9, max_size=9), st.sampled_from([X, O]))
def test_choose_move_returns_free_cell_or_none(board, side):
    move = choose_move(board, side, np.random.default_rng(0))
    if None in board:
        assert board[move] is None
    else:
        assert move is None
