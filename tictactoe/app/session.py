"""Session de jeu: machine à états d'une suite de parties.

La session est l'unique autorité sur le plateau, le tour, le mode et le
score. La couche de présentation n'y accède qu'au travers de `play()`,
`restart()` et `set_mode()`; chaque transition recalcule le statut dérivé
puis publie les évènements correspondants sur le bus.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from tictactoe.ai.policies import AgentPolicy, HeuristicPolicy
from tictactoe.app.event_bus import EventBus
from tictactoe.app.events import (
    GameEndedEvent,
    GameStartedEvent,
    ModeChangedEvent,
    MoveAppliedEvent,
    MoveRejectedEvent,
)
from tictactoe.engine.rules import AI_MARKER, Marker
from tictactoe.engine.state import (
    Board,
    GamePhase,
    GameState,
    InvalidMove,
    Mode,
    Score,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Status:
    """Statut affichable de la partie en cours.

    Args:
        phase: AWAITING_MOVE ou FINISHED
        marker: Joueur au trait, ou vainqueur (None pour un match nul)
        text: Libellé prêt à afficher
        line: Ligne gagnante à surligner (vide sinon)
    """

    phase: GamePhase
    marker: Optional[Marker]
    text: str
    line: Tuple[int, ...] = ()

    @classmethod
    def from_state(cls, state: GameState) -> "Status":
        outcome = state.outcome
        if outcome is None:
            return cls(
                phase=GamePhase.AWAITING_MOVE,
                marker=state.turn,
                text=f"Au tour de {state.turn.value}",
            )
        if outcome.is_draw:
            return cls(phase=GamePhase.FINISHED, marker=None, text="Match nul !")
        assert outcome.winner is not None
        return cls(
            phase=GamePhase.FINISHED,
            marker=outcome.winner,
            text=f"Victoire : {outcome.winner.value}",
            line=outcome.line,
        )


class GameSession:
    """Possède l'état d'une session et publie ses transitions."""

    def __init__(
        self,
        *,
        event_bus: EventBus | None = None,
        mode: Mode = Mode.TWO_PLAYER,
        policy: AgentPolicy | None = None,
    ) -> None:
        self._event_bus = event_bus or EventBus()
        self._mode = mode
        self._policy = policy or HeuristicPolicy(AI_MARKER)
        self._score = Score()
        self._generation = 0
        self._state = GameState.new_game()
        self._status = Status.from_state(self._state)

    # ------------------------------------------------------------------
    # Lecture
    # ------------------------------------------------------------------

    @property
    def event_bus(self) -> EventBus:
        return self._event_bus

    @property
    def policy(self) -> AgentPolicy:
        """Politique jouant O en mode VS_AI."""
        return self._policy

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Board:
        return self._state.board

    @property
    def turn(self) -> Marker:
        return self._state.turn

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def score(self) -> Score:
        return self._score

    @property
    def status(self) -> Status:
        return self._status

    @property
    def winning_line(self) -> Tuple[int, ...]:
        return self._status.line

    @property
    def generation(self) -> int:
        """Compteur incrémenté à chaque redémarrage."""
        return self._generation

    @property
    def is_ai_turn(self) -> bool:
        """True quand l'ordinateur doit jouer."""
        return (
            self._mode is Mode.VS_AI
            and self._state.phase is GamePhase.AWAITING_MOVE
            and self._state.turn is AI_MARKER
        )

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def start(self) -> GameState:
        """Publie l'état initial aux observateurs déjà abonnés."""

        self._publish_started()
        return self._state

    def play(self, index: int) -> bool:
        """Pose le marqueur du joueur au trait en `index`.

        Un coup illégal ne modifie ni l'état ni le score: il est signalé par
        un `MoveRejectedEvent` et la méthode retourne False.
        """

        previous = self._state
        try:
            new_state = previous.apply_move(index)
        except InvalidMove as exc:
            logger.debug("Coup refusé en %s: %s", index, exc.reason.value)
            self._event_bus.publish(
                MoveRejectedEvent(index=index, reason=exc.reason, state=previous)
            )
            return False

        self._state = new_state
        if new_state.outcome is not None:
            self._score = self._score.record(new_state.outcome)
        self._status = Status.from_state(new_state)

        self._event_bus.publish(
            MoveAppliedEvent(
                index=index,
                marker=previous.turn,
                previous_state=previous,
                new_state=new_state,
            )
        )

        if new_state.outcome is not None:
            logger.info("Partie terminée: %s", self._status.text)
            logger.debug("Plateau final:\n%s", new_state)
            self._event_bus.publish(
                GameEndedEvent(
                    state=new_state,
                    outcome=new_state.outcome,
                    score=self._score,
                )
            )

        return True

    def play_ai_move(self) -> Optional[int]:
        """Joue immédiatement le coup de l'ordinateur.

        Returns:
            Case jouée, ou None si ce n'est pas au tour de l'ordinateur ou
            si aucun coup n'est possible
        """

        if not self.is_ai_turn:
            return None
        index = self._policy.select_move(self._state)
        if index is None:
            return None
        if not self.play(index):
            return None
        return index

    def restart(self) -> GameState:
        """Vide le plateau et rend la main à X; le score est conservé."""

        self._generation += 1
        self._state = GameState.new_game()
        self._status = Status.from_state(self._state)
        self._publish_started()
        return self._state

    def set_mode(self, mode: Mode) -> GameState:
        """Change de mode puis redémarre toujours la partie."""

        previous_mode = self._mode
        self._mode = mode
        if previous_mode is not mode:
            logger.info("Mode %s -> %s", previous_mode.value, mode.value)
        self._event_bus.publish(ModeChangedEvent(previous_mode=previous_mode, mode=mode))
        return self.restart()

    def _publish_started(self) -> None:
        self._event_bus.publish(
            GameStartedEvent(
                state=self._state,
                mode=self._mode,
                generation=self._generation,
            )
        )


__all__ = ["GameSession", "Mode", "Status"]
