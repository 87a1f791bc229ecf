from typing import List, Tuple

import pytest
from hypothesis import strategies as st

from tictactoe.logic.game_state import GameSession


@pytest.fixture
def session() -> GameSession:
    s = GameSession()
    s.reset()
    return s


@st.composite
def played_games(draw) -> Tuple[GameSession, List[int]]:
    """A session after a random legal game prefix; stops at the first result."""
    order = draw(st.permutations(list(range(9))))
    n_moves = draw(st.integers(min_value=0, max_value=9))

    s = GameSession()
    s.reset()
    played: List[int] = []
    for index in order[:n_moves]:
        played.append(index)
        if s.play(index) is not None:
            break
    return s, played
