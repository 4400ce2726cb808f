"""BoardRenderer: rendu pygame du plateau et du HUD.

Responsabilités:
- Dessiner la grille 3x3, les marqueurs X / O et la ligne gagnante
- Dessiner le HUD: boutons de mode, score, statut, bouton Recommencer
- Retrouver la case ou le bouton sous un clic souris

Conventions visuelles:
- X en bleu (primaire), O en rose (secondaire), nuls et Recommencer en jaune
- Le bouton du mode actif est rempli de la couleur du mode
- Les cases de la ligne gagnante sont surlignées
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Iterable, Optional, Sequence, Tuple

import pygame

from tictactoe.engine.rules import Cell, Marker
from tictactoe.gui.geometry import BoardGeometry

if TYPE_CHECKING:
    from tictactoe.gui.app import ButtonState, UIState


# Constantes écran
SCREEN_WIDTH = 480
SCREEN_HEIGHT = 640

# Constantes plateau
CELL_SIZE = 120
BOARD_MARGIN = 0
BOARD_OFFSET_X = 60
BOARD_OFFSET_Y = 180  # laisse la place au HUD au-dessus de la grille

# Couleurs
COLOR_BG = (255, 255, 255)
COLOR_PRIMARY = (63, 81, 181)  # #3f51b5
COLOR_SECONDARY = (245, 0, 87)  # #f50057
COLOR_ACCENT = (255, 235, 59)  # #ffeb3b
COLOR_ACCENT_DARK = (245, 127, 23)  # #f57f17, variante foncée de l'accent
COLOR_TEXT = (33, 33, 33)
COLOR_MUTED = (120, 120, 120)
COLOR_GRID = (200, 200, 210)
COLOR_CELL = (245, 246, 250)
COLOR_HIGHLIGHT = (255, 245, 157)
COLOR_BUTTON = (230, 230, 235)

# Tailles pièces
MARKER_WIDTH = 8
MARKER_PADDING = 28
GRID_LINE_WIDTH = 4

# Boutons HUD (action -> rectangle écran)
BUTTON_LAYOUT: Dict[str, Tuple[int, int, int, int]] = {
    "mode_two_player": (60, 64, 170, 38),
    "mode_vs_ai": (250, 64, 170, 38),
    "restart": (160, 570, 160, 42),
}

_MODE_BUTTON_COLORS: Dict[str, Tuple[int, int, int]] = {
    "mode_two_player": COLOR_PRIMARY,
    "mode_vs_ai": COLOR_SECONDARY,
}

# Compteurs du score (clé de Score.as_dict -> libellé, couleur)
SCORE_STYLES: Dict[str, Tuple[str, Tuple[int, int, int]]] = {
    "X": ("X", COLOR_PRIMARY),
    "O": ("O", COLOR_SECONDARY),
    "Draw": ("Nul", COLOR_ACCENT_DARK),
}


class BoardRenderer:
    """Rendu du plateau et du HUD."""

    _MARKER_COLORS: Dict[Marker, Tuple[int, int, int]] = {
        Marker.X: COLOR_PRIMARY,
        Marker.O: COLOR_SECONDARY,
    }

    def __init__(
        self,
        screen: pygame.Surface,
        geometry: Optional[BoardGeometry] = None,
    ) -> None:
        """Initialize renderer with pygame surface.

        Args:
            screen: pygame surface to draw on
            geometry: grid geometry (default layout if omitted)
        """
        self.screen = screen
        self.geometry = geometry or BoardGeometry(
            cell_size=CELL_SIZE,
            margin=BOARD_MARGIN,
            origin=(BOARD_OFFSET_X, BOARD_OFFSET_Y),
        )
        self._button_rects: Dict[str, pygame.Rect] = {
            action: pygame.Rect(rect) for action, rect in BUTTON_LAYOUT.items()
        }

        # Fonts (lazy init on first render)
        self._font: Optional[pygame.font.Font] = None
        self._title_font: Optional[pygame.font.Font] = None

    def _ensure_fonts(self) -> pygame.font.Font:
        """Lazy init fonts."""
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.SysFont("Arial", 20, bold=True)
            self._title_font = pygame.font.SysFont("Arial", 30, bold=True)
        return self._font

    def cell_rect(self, index: int) -> pygame.Rect:
        return pygame.Rect(self.geometry.cell_rect(index))

    def button_rect(self, action: str) -> pygame.Rect:
        return self._button_rects[action]

    # === Plateau ===

    def render_board(
        self,
        board: Sequence[Cell],
        winning_line: Iterable[int] = (),
    ) -> None:
        """Render cells, grid lines and markers.

        Args:
            board: 9 cells to draw
            winning_line: cell indices to highlight
        """
        highlighted = set(winning_line)

        for index in range(len(board)):
            color = COLOR_HIGHLIGHT if index in highlighted else COLOR_CELL
            pygame.draw.rect(self.screen, color, self.cell_rect(index))

        self._render_grid()

        for index, cell in enumerate(board):
            if cell is Marker.X:
                self._draw_x(index)
            elif cell is Marker.O:
                self._draw_o(index)

    def _render_grid(self) -> None:
        geometry = self.geometry
        left = geometry.grid_left
        top = geometry.grid_top
        size = geometry.grid_size
        for step in (1, 2):
            offset = step * geometry.cell_size
            pygame.draw.line(
                self.screen, COLOR_GRID,
                (left + offset, top), (left + offset, top + size),
                width=GRID_LINE_WIDTH,
            )
            pygame.draw.line(
                self.screen, COLOR_GRID,
                (left, top + offset), (left + size, top + offset),
                width=GRID_LINE_WIDTH,
            )

    def _draw_x(self, index: int) -> None:
        """Draw an X as two diagonal strokes."""
        rect = self.cell_rect(index).inflate(-2 * MARKER_PADDING, -2 * MARKER_PADDING)
        color = self._MARKER_COLORS[Marker.X]
        pygame.draw.line(self.screen, color, rect.topleft, rect.bottomright, width=MARKER_WIDTH)
        pygame.draw.line(self.screen, color, rect.topright, rect.bottomleft, width=MARKER_WIDTH)

    def _draw_o(self, index: int) -> None:
        """Draw an O as a ring."""
        center = self.geometry.cell_center(index)
        radius = self.geometry.cell_size / 2 - MARKER_PADDING
        color = self._MARKER_COLORS[Marker.O]
        pygame.draw.circle(self.screen, color, center, radius, width=MARKER_WIDTH)

    # === HUD ===

    def render_hud(self, ui_state: "UIState") -> None:
        """Render title, mode buttons, score, status and restart button."""
        font = self._ensure_fonts()
        assert self._title_font is not None

        title = self._title_font.render("Tic Tac Toe", True, COLOR_TEXT)
        self.screen.blit(title, title.get_rect(center=(SCREEN_WIDTH // 2, 32)))

        for action, button in ui_state.buttons.items():
            if action in self._button_rects:
                self._render_button(action, button)

        self._render_score(ui_state)

        status_color = COLOR_MUTED if ui_state.ai_pending else COLOR_TEXT
        status = font.render(ui_state.status_text, True, status_color)
        self.screen.blit(status, status.get_rect(center=(SCREEN_WIDTH // 2, 152)))

    def _render_button(self, action: str, button: "ButtonState") -> None:
        font = self._ensure_fonts()
        rect = self._button_rects[action]

        if action == "restart":
            fill = COLOR_ACCENT
            text_color = COLOR_TEXT
        elif button.active:
            fill = _MODE_BUTTON_COLORS.get(action, COLOR_PRIMARY)
            text_color = COLOR_BG
        else:
            fill = COLOR_BUTTON
            text_color = COLOR_TEXT

        if not button.enabled:
            text_color = COLOR_MUTED

        pygame.draw.rect(self.screen, fill, rect, border_radius=8)
        pygame.draw.rect(self.screen, COLOR_GRID, rect, width=2, border_radius=8)
        label = font.render(button.label, True, text_color)
        self.screen.blit(label, label.get_rect(center=rect.center))

    def _render_score(self, ui_state: "UIState") -> None:
        font = self._ensure_fonts()
        x = 110
        for key, count in ui_state.score.as_dict().items():
            label, color = SCORE_STYLES[key]
            surf = font.render(f"{label}: {count}", True, color)
            self.screen.blit(surf, (x, 112))
            x += surf.get_width() + 40

    # === Détection de clics ===

    def get_cell_at_position(self, pos: Tuple[float, float]) -> Optional[int]:
        """Find cell index at given screen position.

        Args:
            pos: (x, y) screen coordinates

        Returns:
            Cell index if the click is inside the grid, None otherwise
        """
        return self.geometry.cell_at(pos)

    def get_button_at_position(self, pos: Tuple[int, int]) -> Optional[str]:
        """Return the HUD action whose button contains the position, if any."""
        for action, rect in self._button_rects.items():
            if rect.collidepoint(pos):
                return action
        return None


__all__ = [
    "BoardRenderer",
    "BUTTON_LAYOUT",
    "SCREEN_WIDTH",
    "SCREEN_HEIGHT",
    "CELL_SIZE",
    "BOARD_OFFSET_X",
    "BOARD_OFFSET_Y",
    "COLOR_BG",
    "COLOR_ACCENT_DARK",
    "SCORE_STYLES",
]
