"""Règles du morpion 3x3.

Ce module expose le contrat minimal du moteur:
- constantes de plateau (`BOARD_CELLS`, `CENTER_CELL`, `WINNING_LINES`)
- marqueurs `Marker` et résultat de partie `Outcome`
- `evaluate()` : détection victoire / match nul sur un plateau de 9 cases
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple


class Marker(Enum):
    """Symbole d'un joueur."""

    X = "X"
    O = "O"

    def opponent(self) -> "Marker":
        """Retourne le marqueur adverse."""
        return Marker.O if self is Marker.X else Marker.X


Cell = Optional[Marker]
Line = Tuple[int, int, int]

BOARD_CELLS: int = 9
CENTER_CELL: int = 4

FIRST_MARKER: Marker = Marker.X
AI_MARKER: Marker = Marker.O

# Ordre stable: lignes (haut -> bas), colonnes (gauche -> droite), diagonales
WINNING_LINES: Tuple[Line, ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


@dataclass(frozen=True)
class Outcome:
    """Résultat d'une partie terminée.

    Args:
        winner: Marqueur gagnant, None pour un match nul
        line: Ligne gagnante (vide pour un match nul)
    """

    winner: Optional[Marker]
    line: Tuple[int, ...] = ()

    @property
    def is_draw(self) -> bool:
        return self.winner is None

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(winner=None, line=())


def _check_size(board: Sequence[Cell]) -> None:
    if len(board) != BOARD_CELLS:
        raise ValueError(
            f"Plateau de {len(board)} cases, {BOARD_CELLS} attendues"
        )


def empty_cells(board: Sequence[Cell]) -> List[int]:
    """Indices des cases vides, par ordre croissant."""
    _check_size(board)
    return [index for index, cell in enumerate(board) if cell is None]


def is_full(board: Sequence[Cell]) -> bool:
    """True si les 9 cases sont occupées."""
    _check_size(board)
    return all(cell is not None for cell in board)


def evaluate(board: Sequence[Cell]) -> Optional[Outcome]:
    """Évalue un plateau.

    La première ligne complète (dans l'ordre de `WINNING_LINES`) l'emporte.
    Sans ligne complète, un plateau plein est un match nul.

    Args:
        board: Séquence de 9 cases (None, Marker.X ou Marker.O)

    Returns:
        `Outcome` si la partie est terminée, None si elle continue

    Raises:
        ValueError: si le plateau ne contient pas 9 cases
    """
    _check_size(board)

    for line in WINNING_LINES:
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return Outcome(winner=board[a], line=line)

    if is_full(board):
        return Outcome.draw()

    return None


__all__ = [
    "Marker",
    "Cell",
    "Line",
    "Outcome",
    "BOARD_CELLS",
    "CENTER_CELL",
    "FIRST_MARKER",
    "AI_MARKER",
    "WINNING_LINES",
    "empty_cells",
    "is_full",
    "evaluate",
]
