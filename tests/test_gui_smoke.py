"""Tests smoke GUI: rendu headless pygame.

Objectif: valider que le renderer peut être construit et utilisé en mode
headless (SDL_VIDEODRIVER=dummy).

Couverture:
- Surface principale créée
- Rendu du plateau (vide, en cours, ligne gagnante) sans crash
- Rendu du HUD sans crash
- Détection des cases et boutons sous un clic
- Pas de validation pixel-perfect, seulement non-régression
"""

import os

import pytest

# Force headless mode
os.environ["SDL_VIDEODRIVER"] = "dummy"

import pygame

from tictactoe.engine.rules import Marker
from tictactoe.engine.state import EMPTY_BOARD, GamePhase, Mode, Score
from tictactoe.gui.renderer import (
    BOARD_OFFSET_X,
    BOARD_OFFSET_Y,
    BUTTON_LAYOUT,
    CELL_SIZE,
    COLOR_ACCENT_DARK,
    SCORE_STYLES,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    BoardRenderer,
)

X, O, _ = Marker.X, Marker.O, None


@pytest.fixture
def headless_pygame():
    """Initialize pygame in headless mode."""
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def screen(headless_pygame):
    return pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))


@pytest.fixture
def renderer(screen):
    return BoardRenderer(screen)


def _ui_state(board, status_text="Au tour de X", winning_line=(), ai_pending=False):
    from tictactoe.gui.app import ButtonState, UIState

    return UIState(
        board=tuple(board),
        phase=GamePhase.FINISHED if winning_line else GamePhase.AWAITING_MOVE,
        status_text=status_text,
        winning_line=tuple(winning_line),
        score=Score(x=2, o=1, draw=3),
        mode=Mode.VS_AI,
        ai_pending=ai_pending,
        buttons={
            "mode_two_player": ButtonState("2 joueurs", True),
            "mode_vs_ai": ButtonState("Contre l'IA", True, active=True),
            "restart": ButtonState("Recommencer", True),
        },
    )


def test_pygame_headless_init(headless_pygame):
    """Vérifie que pygame s'initialise correctement en mode headless."""
    assert pygame.get_init()


def test_screen_surface_created(screen):
    assert screen.get_size() == (SCREEN_WIDTH, SCREEN_HEIGHT)


def test_render_empty_board(renderer):
    renderer.render_board(EMPTY_BOARD)


def test_render_board_with_winning_line(renderer):
    board = [X, X, X,
             O, O, _,
             _, _, _]
    renderer.render_board(board, winning_line=(0, 1, 2))


def test_render_hud(renderer):
    renderer.render_hud(_ui_state([X, _, _, _, O, _, _, _, _], ai_pending=True))
    renderer.render_hud(_ui_state([X] * 3 + [None] * 6, "Victoire : X", (0, 1, 2)))


def test_cell_positions_match_layout(renderer):
    assert renderer.get_cell_at_position((BOARD_OFFSET_X + 1, BOARD_OFFSET_Y + 1)) == 0
    assert renderer.get_cell_at_position(
        (BOARD_OFFSET_X + 3 * CELL_SIZE - 1, BOARD_OFFSET_Y + 3 * CELL_SIZE - 1)
    ) == 8
    assert renderer.get_cell_at_position((BOARD_OFFSET_X - 1, BOARD_OFFSET_Y + 1)) is None
    assert renderer.cell_rect(4).center == (
        BOARD_OFFSET_X + CELL_SIZE + CELL_SIZE // 2,
        BOARD_OFFSET_Y + CELL_SIZE + CELL_SIZE // 2,
    )


def test_button_positions_match_layout(renderer):
    for action, (x, y, w, h) in BUTTON_LAYOUT.items():
        assert renderer.get_button_at_position((x + w // 2, y + h // 2)) == action
        assert renderer.button_rect(action) == pygame.Rect(x, y, w, h)

    assert renderer.get_button_at_position((1, SCREEN_HEIGHT - 1)) is None


def test_buttons_do_not_overlap_grid(renderer):
    for action in BUTTON_LAYOUT:
        assert renderer.get_cell_at_position(renderer.button_rect(action).center) is None


class RecordingFont:
    """Enveloppe une police pygame et note les textes rendus."""

    def __init__(self, font):
        self.font = font
        self.calls = []

    def render(self, text, antialias, color):
        self.calls.append((text, color))
        return self.font.render(text, antialias, color)


def test_score_styles_cover_every_counter():
    assert set(SCORE_STYLES) == set(Score().as_dict())
    assert SCORE_STYLES["Draw"] == ("Nul", COLOR_ACCENT_DARK)


def test_hud_draws_draw_counter_in_accent(renderer):
    renderer._ensure_fonts()
    recorder = RecordingFont(renderer._font)
    renderer._font = recorder

    renderer.render_hud(_ui_state(EMPTY_BOARD))

    assert ("Nul: 3", COLOR_ACCENT_DARK) in recorder.calls
    assert ("X: 2", (63, 81, 181)) in recorder.calls
    assert ("O: 1", (245, 0, 87)) in recorder.calls
