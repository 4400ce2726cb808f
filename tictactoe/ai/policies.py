"""Politique heuristique de l'adversaire ordinateur.

Stratégie gloutonne à un coup d'avance, par priorité stricte :
1. gagner immédiatement,
2. bloquer une victoire immédiate de l'adversaire,
3. prendre le centre,
4. prendre la première case libre.

Ce n'est pas un minimax : une fourchette adverse bat cette politique.
"""

from __future__ import annotations

from typing import Optional, Sequence

from tictactoe.engine.rules import (
    AI_MARKER,
    CENTER_CELL,
    Cell,
    Marker,
    empty_cells,
    evaluate,
)
from tictactoe.engine.state import GameState


def _wins_with(board: Sequence[Cell], index: int, marker: Marker) -> bool:
    """True si poser `marker` en `index` donne la victoire à `marker`."""

    candidate = list(board)
    candidate[index] = marker
    outcome = evaluate(candidate)
    return outcome is not None and outcome.winner is marker


def select_move(board: Sequence[Cell], ai_marker: Marker) -> Optional[int]:
    """Choisit la case jouée par l'ordinateur.

    Les cases vides sont parcourues par indice croissant pour un choix
    déterministe.

    Args:
        board: Plateau de 9 cases
        ai_marker: Marqueur joué par l'ordinateur

    Returns:
        Indice de la case choisie, ou None si le plateau est plein
    """
    free = empty_cells(board)
    if not free:
        return None

    for index in free:
        if _wins_with(board, index, ai_marker):
            return index

    opponent = ai_marker.opponent()
    for index in free:
        if _wins_with(board, index, opponent):
            return index

    if CENTER_CELL in free:
        return CENTER_CELL

    return free[0]


class AgentPolicy:
    """Interface minimale d'un joueur automatique."""

    def __init__(self, *, name: str | None = None) -> None:
        self._name = name or self.__class__.__name__

    @property
    def name(self) -> str:
        return self._name

    def select_move(self, state: GameState) -> Optional[int]:
        raise NotImplementedError


class HeuristicPolicy(AgentPolicy):
    """Politique heuristique jouant `marker` (O par défaut)."""

    def __init__(self, marker: Marker = AI_MARKER) -> None:
        super().__init__(name="Heuristic")
        self.marker = marker

    def select_move(self, state: GameState) -> Optional[int]:
        if state.is_finished:
            return None
        return select_move(state.board, self.marker)


__all__ = ["AgentPolicy", "HeuristicPolicy", "select_move"]
