"""Adversaire ordinateur pour le mode solo.

- policies.py : sélection heuristique d'un coup (gagner, bloquer, centre,
  première case libre) et politiques utilisables par la session.

Exemple :
    >>> from tictactoe.ai import select_move
    >>> from tictactoe.engine.rules import Marker
    >>>
    >>> X, O = Marker.X, Marker.O
    >>> select_move((X, O, None, None, X, None, None, None, None), O)
    8
"""

from .policies import AgentPolicy, HeuristicPolicy, select_move

__all__ = [
    "AgentPolicy",
    "HeuristicPolicy",
    "select_move",
]
