"""Engine package exposing rules and state modules."""

from . import rules  # re-export for convenience
from . import state

__all__ = ["rules", "state"]
