"""GUI package: interface graphique du morpion avec pygame.

Modules:
- geometry: calcul des rectangles écran des cases
- renderer: rendu du plateau, des marqueurs et du HUD
- app: modèle de présentation reliant session, IA différée et rendu
"""

__all__ = [
    "geometry",
    "renderer",
    "app",
]
