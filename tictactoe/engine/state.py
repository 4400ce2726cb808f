"""État d'une partie de morpion et transitions.

Ce module définit l'état immuable d'une partie (`GameState`), le tableau des
scores (`Score`) et l'erreur levée pour un coup illégal (`InvalidMove`).
Toute transition retourne un nouvel état.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional, Tuple

from tictactoe.engine.rules import (
    BOARD_CELLS,
    FIRST_MARKER,
    Cell,
    Marker,
    Outcome,
    empty_cells,
    evaluate,
)

Board = Tuple[Cell, ...]

EMPTY_BOARD: Board = (None,) * BOARD_CELLS


class GamePhase(Enum):
    """Phases d'une partie."""

    AWAITING_MOVE = "AWAITING_MOVE"
    FINISHED = "FINISHED"


class Mode(Enum):
    """Modes de jeu. En mode VS_AI, l'ordinateur joue O."""

    TWO_PLAYER = "2p"
    VS_AI = "ai"


class RejectReason(Enum):
    """Motifs de refus d'un coup."""

    OUT_OF_RANGE = "OUT_OF_RANGE"
    OCCUPIED = "OCCUPIED"
    GAME_FINISHED = "GAME_FINISHED"


class InvalidMove(ValueError):
    """Coup refusé par le moteur (case occupée, hors plateau, partie finie)."""

    def __init__(self, index: int, reason: RejectReason) -> None:
        super().__init__(f"Coup illégal en {index}: {reason.value}")
        self.index = index
        self.reason = reason


@dataclass(frozen=True)
class Score:
    """Compteurs cumulés sur la durée d'une session."""

    x: int = 0
    o: int = 0
    draw: int = 0

    def record(self, outcome: Outcome) -> "Score":
        """Retourne un nouveau score incrémenté selon `outcome`."""
        if outcome.winner is Marker.X:
            return replace(self, x=self.x + 1)
        if outcome.winner is Marker.O:
            return replace(self, o=self.o + 1)
        return replace(self, draw=self.draw + 1)

    def as_dict(self) -> dict[str, int]:
        return {"X": self.x, "O": self.o, "Draw": self.draw}


@dataclass(frozen=True)
class GameState:
    """État immuable d'une partie.

    Args:
        board: 9 cases, ordre ligne par ligne
        turn: Marqueur attendu pour le prochain coup
        outcome: Résultat si la partie est terminée
    """

    board: Board = EMPTY_BOARD
    turn: Marker = FIRST_MARKER
    outcome: Optional[Outcome] = None

    def __post_init__(self) -> None:
        if len(self.board) != BOARD_CELLS:
            raise ValueError(
                f"Plateau de {len(self.board)} cases, {BOARD_CELLS} attendues"
            )
        if not isinstance(self.board, tuple):
            object.__setattr__(self, "board", tuple(self.board))

    @classmethod
    def new_game(cls) -> "GameState":
        """Plateau vide, X commence."""
        return cls()

    @property
    def phase(self) -> GamePhase:
        if self.outcome is None:
            return GamePhase.AWAITING_MOVE
        return GamePhase.FINISHED

    @property
    def is_finished(self) -> bool:
        return self.outcome is not None

    @property
    def winning_line(self) -> Tuple[int, ...]:
        """Ligne gagnante, vide tant qu'il n'y a pas de vainqueur."""
        if self.outcome is None:
            return ()
        return self.outcome.line

    def legal_moves(self) -> List[int]:
        """Cases jouables pour le joueur courant."""
        if self.is_finished:
            return []
        return empty_cells(self.board)

    def check_move(self, index: int) -> Optional[RejectReason]:
        """Retourne le motif de refus d'un coup, ou None s'il est légal."""
        if self.is_finished:
            return RejectReason.GAME_FINISHED
        if not 0 <= index < BOARD_CELLS:
            return RejectReason.OUT_OF_RANGE
        if self.board[index] is not None:
            return RejectReason.OCCUPIED
        return None

    def apply_move(self, index: int) -> "GameState":
        """Pose le marqueur courant en `index` et réévalue le plateau.

        Raises:
            InvalidMove: si le coup est illégal (l'état n'est pas modifié)
        """
        reason = self.check_move(index)
        if reason is not None:
            raise InvalidMove(index, reason)

        board = list(self.board)
        board[index] = self.turn
        new_board = tuple(board)

        outcome = evaluate(new_board)
        if outcome is not None:
            # Le tour ne change plus une fois la partie terminée
            return GameState(board=new_board, turn=self.turn, outcome=outcome)

        return GameState(board=new_board, turn=self.turn.opponent(), outcome=None)

    def __str__(self) -> str:
        cells = [cell.value if cell is not None else "." for cell in self.board]
        rows = [" ".join(cells[i:i + 3]) for i in range(0, BOARD_CELLS, 3)]
        return "\n".join(rows)


__all__ = [
    "Board",
    "EMPTY_BOARD",
    "GamePhase",
    "Mode",
    "RejectReason",
    "InvalidMove",
    "Score",
    "GameState",
]
