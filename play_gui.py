#!/usr/bin/env python3
"""Lance le morpion (pygame).

Ce script fournit la boucle d'évènements reliant `tictactoe.gui.app.TicTacToeApp`
à une fenêtre pygame: clics souris sur les cases et les boutons, raccourcis
clavier, et déclenchement du coup différé de l'ordinateur à chaque frame.

Raccourcis clavier:
- 1   : mode 2 joueurs
- 2   : mode contre l'IA
- R   : recommencer la partie
- ESC : quitter
"""

from __future__ import annotations

import logging
import sys
from typing import Tuple

import pygame

from tictactoe.app.session import GameSession
from tictactoe.gui.app import TicTacToeApp
from tictactoe.gui.renderer import SCREEN_HEIGHT, SCREEN_WIDTH


KEY_BINDINGS: Tuple[Tuple[str, int, str], ...] = (
    ("1", pygame.K_1, "mode_two_player"),
    ("2", pygame.K_2, "mode_vs_ai"),
    ("R", pygame.K_r, "restart"),
)


def setup_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def main() -> int:
    setup_logging()

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    pygame.display.set_caption("Tic Tac Toe")

    app = TicTacToeApp(
        session=GameSession(),
        screen=screen,
        clock=lambda: pygame.time.get_ticks() / 1000.0,
    )
    app.start()

    clock = pygame.time.Clock()
    running = True

    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                    continue
                for _label, key, action in KEY_BINDINGS:
                    if event.key == key:
                        app.trigger_action(action)
                        break
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                app.handle_click(event.pos)

        app.tick()
        app.render()

        pygame.display.flip()
        clock.tick(30)

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
