import pytest
from hypothesis import given, settings

from tictactoe.logic.ai_player import AIPlayer, NoMovesAvailable
from tictactoe.logic.game_state import GameSession, Player

from conftest import played_games

X, O = Player.X, Player.O

CORNERS = {0, 2, 6, 8}


def test_opening_move_is_a_corner_and_deterministic(session):
    ai = AIPlayer()
    first = ai.best_move(session)
    assert first in CORNERS
    assert ai.best_move(session) == first
    assert ai.nodes_evaluated > 0


def test_all_openings_are_draws(session):
    scores = AIPlayer().score_moves(session)
    assert sorted(scores) == list(range(9))
    assert set(scores.values()) == {0}


def test_self_play_is_always_a_draw(session):
    ai = AIPlayer()
    result = None
    while result is None:
        result = session.play(ai.best_move(session))
    assert result.is_draw
    assert None not in session.board


def test_takes_the_winning_move():
    s = GameSession.from_cells("XX.OO....")
    assert s.active_player is X
    assert AIPlayer(X).best_move(s) == 2
    assert AIPlayer().score_moves(s)[2] == 10


def test_blocks_the_opponent():
    s = GameSession.from_cells("OO.X....X")
    assert s.active_player is X
    assert AIPlayer(X).best_move(s) == 2

    scores = AIPlayer(X).score_moves(s)
    assert scores[2] > -9
    # anything else lets O win on the next ply
    assert all(score == -9 for index, score in scores.items() if index != 2)


def test_searches_for_its_own_player_not_the_active_one():
    s = GameSession.from_cells("XX.OO....")
    assert s.active_player is X
    # O to win at 5 if it were O's turn
    assert AIPlayer(O).best_move(s) == 5


def test_prefers_faster_win():
    # X wins now at 2, or later in several ways
    s = GameSession.from_cells("XX..O.O..")
    assert AIPlayer(X).best_move(s) == 2


def test_full_board_raises():
    s = GameSession.from_cells("XOXXOOOXX")
    with pytest.raises(NoMovesAvailable):
        AIPlayer().best_move(s)


@settings(max_examples=50, deadline=None)
@given(played_games())
def test_search_leaves_the_session_untouched(game):
    s, _ = game
    if not s.empty_cells():
        return
    before = s.copy()

    move = AIPlayer().best_move(s)

    assert s == before
    assert s.cell_at(move) is None


@settings(max_examples=30, deadline=None)
@given(played_games())
def test_never_loses_from_a_reachable_position_it_is_not_losing(game):
    s, _ = game
    if not s.in_play:
        return
    me = s.active_player
    ai = AIPlayer(me)
    value = max(ai.score_moves(s).values())

    result = None
    while result is None:
        result = s.play(AIPlayer().best_move(s))

    # perfect play on both sides realises the root value's sign
    if value > 0:
        assert result.winner is me
    elif value == 0:
        assert result.is_draw
    else:
        assert result.winner is me.other()
