"""Bus d'évènements synchrone reliant la session aux observateurs."""

from __future__ import annotations

from typing import Callable, List

Subscriber = Callable[[object], None]


class EventBus:
    """Diffuse les évènements de session aux abonnés, dans l'ordre d'inscription.

    Une exception levée par un abonné interrompt la diffusion et remonte à
    l'appelant.
    """

    __slots__ = ("_subscribers",)

    def __init__(self) -> None:
        self._subscribers: List[Subscriber] = []

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Enregistre un abonné et retourne sa fonction de désinscription."""

        self._subscribers.append(callback)

        def unsubscribe() -> None:
            try:
                self._subscribers.remove(callback)
            except ValueError:
                # Déjà retiré: la désinscription reste idempotente
                pass

        return unsubscribe

    def publish(self, event: object) -> None:
        """Transmet `event` à chaque abonné courant."""

        # Copie: un abonné peut se désinscrire pendant la diffusion
        for callback in tuple(self._subscribers):
            callback(event)
