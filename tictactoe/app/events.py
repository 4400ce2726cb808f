"""Évènements publiés par la session (`tictactoe.app`)."""

from __future__ import annotations

from dataclasses import dataclass

from tictactoe.engine.rules import Marker, Outcome
from tictactoe.engine.state import GameState, Mode, RejectReason, Score


@dataclass(frozen=True)
class GameStartedEvent:
    """Émis par `GameSession.start()` et à chaque redémarrage."""

    state: GameState
    mode: Mode
    generation: int


@dataclass(frozen=True)
class ModeChangedEvent:
    """Émis quand le mode change (avant le redémarrage implicite)."""

    previous_mode: Mode
    mode: Mode


@dataclass(frozen=True)
class MoveAppliedEvent:
    """Émis après qu'un coup légal a été posé."""

    index: int
    marker: Marker
    previous_state: GameState
    new_state: GameState


@dataclass(frozen=True)
class GameEndedEvent:
    """Émis quand la partie passe à l'état terminé."""

    state: GameState
    outcome: Outcome
    score: Score


@dataclass(frozen=True)
class MoveRejectedEvent:
    """Émis quand un coup est refusé; l'état reste inchangé."""

    index: int
    reason: RejectReason
    state: GameState
