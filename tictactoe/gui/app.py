"""Orchestrateur de la GUI morpion.

Ce module relie la session de jeu, le planificateur du coup de l'ordinateur
et le renderer pygame, et fournit un modèle testable indépendant de la
boucle pygame. Il expose:
- un objet `TicTacToeApp` recevant clics et actions de la présentation,
- un état d'interface (`UIState`) synthétisant plateau, statut, score, ligne
  gagnante, mode actif et état des boutons.

La boucle d'évènements (cf. play_gui.py) appelle `tick()` à chaque frame
pour laisser l'ordinateur jouer après son délai.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import pygame

from tictactoe.app.ai_scheduler import AI_MOVE_DELAY, AIMoveScheduler, Clock
from tictactoe.app.session import GameSession
from tictactoe.engine.state import Board, GamePhase, Mode, Score
from tictactoe.gui.renderer import COLOR_BG, SCREEN_HEIGHT, SCREEN_WIDTH, BoardRenderer

logger = logging.getLogger(__name__)

__all__ = ["ButtonState", "UIState", "TicTacToeApp", "MODE_ACTIONS"]

# Actions bouton -> mode sélectionné
MODE_ACTIONS: Dict[str, Mode] = {
    "mode_two_player": Mode.TWO_PLAYER,
    "mode_vs_ai": Mode.VS_AI,
}


@dataclass(frozen=True)
class ButtonState:
    """Représente l'état d'un bouton dans l'interface."""

    label: str
    enabled: bool
    active: bool = False


@dataclass(frozen=True)
class UIState:
    """Données agrégées pour la couche de présentation."""

    board: Board
    phase: GamePhase
    status_text: str
    winning_line: Tuple[int, ...]
    score: Score
    mode: Mode
    ai_pending: bool
    buttons: Dict[str, ButtonState]


class TicTacToeApp:
    """Modèle de présentation du morpion.

    Cette classe ne gère pas la boucle pygame mais fournit les opérations
    nécessaires à l'UI: clic sur une case, choix du mode, redémarrage et
    état synthétique prêt à rendre. Elle ne modifie jamais la session
    autrement qu'au travers de ses opérations publiques.
    """

    def __init__(
        self,
        *,
        session: Optional[GameSession] = None,
        screen: Optional[pygame.Surface] = None,
        ai_delay: float = AI_MOVE_DELAY,
        clock: Optional[Clock] = None,
    ) -> None:
        self.session = session or GameSession()
        self.screen = screen
        self.scheduler = AIMoveScheduler(self.session, delay=ai_delay, clock=clock)
        self._board_renderer: Optional[BoardRenderer] = None

    # ------------------------------------------------------------------
    # Initialisation
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Prépare le rendu et publie l'état initial de la session."""

        if self.screen is None:
            # Crée une surface si non fournie (utile hors tests)
            self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        self._board_renderer = BoardRenderer(self.screen)
        self.session.start()

    @property
    def renderer(self) -> BoardRenderer:
        """Retourne le renderer pygame associé (initialisé après start)."""

        if self._board_renderer is None:
            raise RuntimeError("BoardRenderer indisponible tant que start() n'a pas été appelé")
        return self._board_renderer

    # ------------------------------------------------------------------
    # Entrées présentation -> session
    # ------------------------------------------------------------------

    def handle_cell_click(self, index: int) -> bool:
        """Transmet un clic de case à la session.

        Les clics sont ignorés pendant le tour de l'ordinateur; la session
        revalide de toute façon chaque coup.
        """

        if self.session.is_ai_turn:
            logger.debug("Clic en %s ignoré: tour de l'ordinateur", index)
            return False
        return self.session.play(index)

    def trigger_action(self, action: str) -> bool:
        """Déclenche une action de haut niveau (bouton ou raccourci)."""

        if action == "restart":
            self.session.restart()
            return True

        mode = MODE_ACTIONS.get(action)
        if mode is not None:
            self.session.set_mode(mode)
            return True

        return False

    def handle_click(self, pos: Tuple[int, int]) -> bool:
        """Route un clic écran vers un bouton ou une case."""

        action = self.renderer.get_button_at_position(pos)
        if action is not None:
            return self.trigger_action(action)

        index = self.renderer.get_cell_at_position(pos)
        if index is not None:
            return self.handle_cell_click(index)

        return False

    def tick(self, now: Optional[float] = None) -> Optional[int]:
        """Laisse l'ordinateur jouer si son coup est arrivé à échéance."""

        return self.scheduler.poll(now)

    # ------------------------------------------------------------------
    # Rendu
    # ------------------------------------------------------------------

    def render(self) -> None:
        """Dessine une frame complète sur l'écran."""

        ui_state = self.get_ui_state()
        renderer = self.renderer
        assert self.screen is not None
        self.screen.fill(COLOR_BG)
        renderer.render_hud(ui_state)
        renderer.render_board(ui_state.board, ui_state.winning_line)

    def get_ui_state(self) -> UIState:
        session = self.session
        status = session.status
        return UIState(
            board=session.board,
            phase=status.phase,
            status_text=status.text,
            winning_line=status.line,
            score=session.score,
            mode=session.mode,
            ai_pending=self.scheduler.has_pending_move,
            buttons=self._build_buttons(),
        )

    def _build_buttons(self) -> Dict[str, ButtonState]:
        mode = self.session.mode
        return {
            "mode_two_player": ButtonState(
                "2 joueurs", True, active=mode is Mode.TWO_PLAYER
            ),
            "mode_vs_ai": ButtonState(
                "Contre l'IA", True, active=mode is Mode.VS_AI
            ),
            "restart": ButtonState("Recommencer", True),
        }
