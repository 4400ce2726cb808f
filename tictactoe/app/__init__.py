"""Services d'application orchestrant une session de morpion."""

from .ai_scheduler import AI_MOVE_DELAY, AIMoveScheduler, PendingAIMove
from .event_bus import EventBus
from .events import (
    GameEndedEvent,
    GameStartedEvent,
    ModeChangedEvent,
    MoveAppliedEvent,
    MoveRejectedEvent,
)
from .session import GameSession, Mode, Status

__all__ = [
    "AI_MOVE_DELAY",
    "AIMoveScheduler",
    "PendingAIMove",
    "EventBus",
    "GameSession",
    "Mode",
    "Status",
    "GameStartedEvent",
    "ModeChangedEvent",
    "MoveAppliedEvent",
    "MoveRejectedEvent",
    "GameEndedEvent",
]
