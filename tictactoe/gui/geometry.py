"""Geometry utilities for board rendering.

Ce module fournit la classe BoardGeometry qui calcule les rectangles écran
des 9 cases à partir d'une taille de case, d'une marge et d'une origine, et
retrouve la case située sous un point écran (clic souris).

Aucune dépendance pygame: les rectangles sont des tuples (x, y, w, h).
"""

from __future__ import annotations

from typing import Optional, Tuple

from tictactoe.engine.rules import BOARD_CELLS

GRID_SIDE = 3

Rect = Tuple[float, float, float, float]


class BoardGeometry:
    """Compute screen coordinates for the 3x3 grid.

    Les cases sont numérotées ligne par ligne (0 en haut à gauche, 8 en bas
    à droite).
    """

    def __init__(
        self,
        cell_size: float,
        margin: float,
        origin: Tuple[float, float] = (0.0, 0.0),
    ) -> None:
        """Initialize geometry calculator.

        Args:
            cell_size: Side of a cell in pixels
            margin: Margin around the grid in pixels
            origin: Top-left corner of the board area (margin excluded)
        """
        self.cell_size = cell_size
        self.margin = margin
        self.origin = origin

    @property
    def grid_left(self) -> float:
        return self.origin[0] + self.margin

    @property
    def grid_top(self) -> float:
        return self.origin[1] + self.margin

    @property
    def grid_size(self) -> float:
        return self.cell_size * GRID_SIDE

    def cell_rect(self, index: int) -> Rect:
        """Get screen rectangle of a cell.

        Args:
            index: Cell index (0-8)

        Returns:
            (x, y, width, height) in pixels
        """
        if not 0 <= index < BOARD_CELLS:
            raise ValueError(f"Case {index} hors plateau")
        row, col = divmod(index, GRID_SIDE)
        x = self.grid_left + col * self.cell_size
        y = self.grid_top + row * self.cell_size
        return (x, y, self.cell_size, self.cell_size)

    def cell_center(self, index: int) -> Tuple[float, float]:
        x, y, w, h = self.cell_rect(index)
        return (x + w / 2, y + h / 2)

    def cell_at(self, pos: Tuple[float, float]) -> Optional[int]:
        """Return the cell index under a screen position, if any."""
        x, y = pos
        rel_x = x - self.grid_left
        rel_y = y - self.grid_top
        if rel_x < 0 or rel_y < 0:
            return None
        if rel_x >= self.grid_size or rel_y >= self.grid_size:
            return None
        col = int(rel_x // self.cell_size)
        row = int(rel_y // self.cell_size)
        return row * GRID_SIDE + col

    @property
    def surface_size(self) -> Tuple[float, float]:
        """Get the size needed by the board area, margins included.

        Returns:
            (width, height) in pixels
        """
        side = self.grid_size + 2 * self.margin
        return (side, side)


__all__ = ["BoardGeometry", "GRID_SIDE"]
