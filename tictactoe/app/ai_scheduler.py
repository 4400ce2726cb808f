"""Planification différée du coup de l'ordinateur.

Le coup de l'ordinateur est choisi dès que la session passe au tour de O,
puis appliqué après `AI_MOVE_DELAY` secondes pour laisser le temps à
l'interface d'afficher le coup humain. Le planificateur n'a pas de thread:
la boucle d'évènements appelle `poll()` à chaque frame.

Un coup en attente est abandonné si, au moment de l'appliquer, la
génération de la session, le plateau, le tour ou le mode ont changé
(redémarrage ou changement de mode entre-temps).
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from tictactoe.app.events import GameStartedEvent, MoveAppliedEvent
from tictactoe.app.session import GameSession
from tictactoe.engine.state import Board, Mode

logger = logging.getLogger(__name__)

# Délai d'affichage avant la réponse de l'ordinateur (secondes)
AI_MOVE_DELAY: float = 0.4

Clock = Callable[[], float]


@dataclass(frozen=True)
class PendingAIMove:
    """Coup de l'ordinateur calculé et en attente d'application."""

    index: int
    due_at: float
    generation: int
    board: Board


class AIMoveScheduler:
    """Déclenche le coup de l'ordinateur après un délai annulable."""

    def __init__(
        self,
        session: GameSession,
        *,
        delay: float = AI_MOVE_DELAY,
        clock: Optional[Clock] = None,
    ) -> None:
        self.session = session
        self.delay = delay
        self._clock: Clock = clock or time.monotonic
        self._pending: Optional[PendingAIMove] = None
        self._unsubscribe = session.event_bus.subscribe(self._on_event)

    @property
    def pending(self) -> Optional[PendingAIMove]:
        return self._pending

    @property
    def has_pending_move(self) -> bool:
        return self._pending is not None

    def close(self) -> None:
        """Se désabonne du bus et abandonne le coup en attente."""

        self._unsubscribe()
        self._pending = None

    def cancel(self) -> None:
        self._pending = None

    def schedule(self) -> Optional[PendingAIMove]:
        """Planifie le coup de l'ordinateur si c'est son tour."""

        if not self.session.is_ai_turn:
            return None

        board = self.session.board
        index = self.session.policy.select_move(self.session.state)
        if index is None:
            return None

        self._pending = PendingAIMove(
            index=index,
            due_at=self._clock() + self.delay,
            generation=self.session.generation,
            board=board,
        )
        return self._pending

    def poll(self, now: Optional[float] = None) -> Optional[int]:
        """Applique le coup en attente s'il est arrivé à échéance.

        Returns:
            Case jouée par l'ordinateur, ou None
        """

        pending = self._pending
        if pending is None:
            return None

        if now is None:
            now = self._clock()
        if now < pending.due_at:
            return None

        self._pending = None

        if not self._is_still_valid(pending):
            logger.debug("Coup IA en %s abandonné (partie modifiée)", pending.index)
            return None

        if not self.session.play(pending.index):
            return None
        return pending.index

    def _is_still_valid(self, pending: PendingAIMove) -> bool:
        session = self.session
        return (
            session.generation == pending.generation
            and session.mode is Mode.VS_AI
            and session.board == pending.board
            and session.is_ai_turn
        )

    def _on_event(self, event: object) -> None:
        if isinstance(event, (GameStartedEvent, MoveAppliedEvent)):
            if self.session.is_ai_turn:
                self.schedule()
            else:
                self._pending = None


__all__ = ["AI_MOVE_DELAY", "AIMoveScheduler", "PendingAIMove"]
