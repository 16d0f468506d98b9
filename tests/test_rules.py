import pytest

from tictactoe import (
    DrawEvent,
    EventBus,
    Mode,
    MoveAcceptedEvent,
    Outcome,
    OutcomeStatus,
    RejectionReason,
    Session,
    WinEvent,
    apply_move,
)

from helpers import O, X, board_from


@pytest.fixture
def session():
    return Session.start()


@pytest.fixture
def bus():
    return EventBus()


def test_o_moves_first(session):
    assert session.current_mark == O
    assert not session.turn_is_first


def test_accepted_move_places_mark_and_passes_turn(session, bus):
    events = []
    bus.subscribe(events.append)

    result = apply_move(session, 4, O, bus)

    assert result.accepted
    assert result.outcome == Outcome.ongoing()
    assert session.board[4] == O
    assert session.current_mark == X
    assert events == [MoveAcceptedEvent(index=4, mark=O)]


def test_resubmitting_occupied_cell_is_rejected(session):
    apply_move(session, 4, O)
    before = list(session.board)

    result = apply_move(session, 4, X)

    assert not result.accepted
    assert result.reason == RejectionReason.CELL_OCCUPIED
    assert session.board == before
    assert session.current_mark == X


@pytest.mark.parametrize("index", [-1, 9, 42, "4", 4.0, None, True])
def test_bad_index_is_rejected(session, index):
    result = apply_move(session, index, O)
    assert not result.accepted
    assert result.reason == RejectionReason.INDEX_OUT_OF_RANGE
    assert session.board == [None] * 9


def test_wrong_side_is_rejected(session, bus):
    events = []
    bus.subscribe(events.append)

    result = apply_move(session, 0, X, bus)

    assert not result.accepted
    assert result.reason == RejectionReason.WRONG_TURN
    assert result.error_message
    assert session.board[0] is None
    assert events == []


def test_moves_after_game_over_are_rejected(session):
    for index in (0, 3, 1, 4, 2):
        apply_move(session, index, session.current_mark)
    assert session.game_over

    result = apply_move(session, 8, session.current_mark)
    assert result.reason == RejectionReason.GAME_ALREADY_OVER


def test_game_over_is_checked_before_the_cell(session):
    session.game_over = True
    assert apply_move(session, 99, O).reason == RejectionReason.GAME_ALREADY_OVER


def test_scripted_two_player_round_is_won_by_o(bus):
    session = Session.start(mode=Mode.TWO_PLAYER)
    events = []
    bus.subscribe(events.append)

    results = [apply_move(session, i, session.current_mark, bus) for i in (0, 4, 1, 3, 2)]

    assert all(r.accepted for r in results)
    assert results[-1].outcome == Outcome.won(O, (0, 1, 2))
    assert session.board == board_from("OOO XX_ ___")
    assert session.game_over
    assert session.scores == {X: 0, O: 1}
    assert events[-1] == WinEvent(index=2, mark=O, pattern=(0, 1, 2))
    assert [type(e) for e in events[:-1]] == [MoveAcceptedEvent] * 4


def test_winning_move_does_not_pass_turn(session):
    for index in (0, 4, 1, 3, 2):
        apply_move(session, index, session.current_mark)
    assert session.current_mark == O


def test_draw_ends_round_without_score(bus):
    # Produces O X O / O X X / X O O
    session = Session.start()
    events = []
    bus.subscribe(events.append)

    for index in (0, 1, 2, 4, 3, 6, 7, 5, 8):
        result = apply_move(session, index, session.current_mark, bus)
        assert result.accepted

    assert result.outcome.status == OutcomeStatus.DRAW
    assert session.game_over
    assert session.scores == {X: 0, O: 0}
    assert events[-1] == DrawEvent(index=8, mark=O)


def test_new_round_keeps_scores_unless_asked(session):
    for index in (0, 4, 1, 3, 2):
        apply_move(session, index, session.current_mark)

    session.new_round(keep_scores=True)
    assert session.board == [None] * 9
    assert session.current_mark == O
    assert not session.game_over
    assert session.scores[O] == 1

    session.new_round(keep_scores=False)
    assert session.scores == {X: 0, O: 0}


def test_session_copy_is_independent(session):
    apply_move(session, 0, O)
    clone = session.copy()
    apply_move(session, 1, X)
    assert clone.board[1] is None
    assert clone.current_mark == X


def test_session_rejects_short_board():
    with pytest.raises(ValueError):
        Session(board=[None] * 4)
