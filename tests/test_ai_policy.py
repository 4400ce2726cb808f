"""Tests de la politique heuristique de l'ordinateur.

Priorités vérifiées: gagner > bloquer > centre > première case libre.
"""

from __future__ import annotations

from tictactoe.ai.policies import AgentPolicy, HeuristicPolicy, select_move
from tictactoe.engine.rules import Marker
from tictactoe.engine.state import GameState

X, O, _ = Marker.X, Marker.O, None


def test_blocks_diagonal_threat() -> None:
    """X en 0 et 4, O en 1: l'ordinateur doit bloquer en 8."""
    board = [X, O, _,
             _, X, _,
             _, _, _]
    assert select_move(board, O) == 8


def test_takes_immediate_win() -> None:
    board = [O, O, _,
             X, X, _,
             X, _, _]
    assert select_move(board, O) == 2


def test_prefers_win_over_block() -> None:
    # X menace 5 (ligne 3-4-5), O peut gagner en 8 (ligne 6-7-8)
    board = [X, _, _,
             X, X, _,
             O, O, _]
    assert select_move(board, O) == 8


def test_lowest_index_among_several_wins() -> None:
    board = [O, O, _,
             O, X, X,
             _, X, X]
    # Gagner en 2 (ligne du haut) ou en 6 (colonne de gauche): 2 d'abord
    assert select_move(board, O) == 2


def test_lowest_index_among_several_blocks() -> None:
    board = [X, X, _,
             _, O, _,
             X, _, _]
    # Bloquer en 2 (ligne) ou en 3 (colonne): 2 d'abord
    assert select_move(board, O) == 2


def test_takes_center_when_no_threat() -> None:
    board = [X, _, _,
             _, _, _,
             _, _, _]
    assert select_move(board, O) == 4


def test_first_available_when_center_taken() -> None:
    board = [_, _, _,
             _, X, _,
             _, _, _]
    assert select_move(board, O) == 0


def test_returns_none_on_full_board() -> None:
    board = [X, O, X,
             O, O, X,
             X, X, O]
    assert select_move(board, O) is None


def test_works_for_either_marker() -> None:
    board = [X, X, _,
             O, O, _,
             _, _, _]
    assert select_move(board, X) == 2
    assert select_move(board, O) == 5


def test_never_selects_occupied_cell() -> None:
    """Parcourt toutes les positions atteignables et vérifie la case choisie."""
    seen = set()
    frontier = [GameState.new_game()]
    while frontier:
        state = frontier.pop()
        if state.board in seen:
            continue
        seen.add(state.board)
        if state.is_finished:
            continue

        choice = select_move(state.board, state.turn)
        assert choice is not None
        assert state.board[choice] is None

        for index in state.legal_moves():
            frontier.append(state.apply_move(index))

    assert len(seen) == 5478


def test_fork_beats_the_heuristic() -> None:
    """La politique reste volontairement battable par une fourchette."""
    state = GameState.new_game()
    ai_moves = []
    for human_move in (4, 8, 2, 6):
        state = state.apply_move(human_move)
        if state.is_finished:
            break
        ai_move = select_move(state.board, O)
        ai_moves.append(ai_move)
        state = state.apply_move(ai_move)

    # O prend 0, puis 1 (première case libre), puis ne peut bloquer que 5
    assert ai_moves == [0, 1, 5]
    assert state.outcome is not None
    assert state.outcome.winner is X
    assert state.outcome.line == (2, 4, 6)


def test_heuristic_policy_wraps_select_move() -> None:
    policy = HeuristicPolicy()
    assert isinstance(policy, AgentPolicy)
    assert policy.name == "Heuristic"
    assert policy.marker is O

    state = GameState.new_game().apply_move(0)
    assert policy.select_move(state) == 4


def test_heuristic_policy_returns_none_when_finished() -> None:
    state = GameState.new_game()
    for index in (0, 3, 1, 4, 2):
        state = state.apply_move(index)
    assert state.is_finished
    assert HeuristicPolicy().select_move(state) is None

