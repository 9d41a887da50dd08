"""Change notification shared by the store and the add dialog."""
from __future__ import annotations
import logging
from typing import Callable, List

logger = logging.getLogger(__name__)

Listener = Callable[[object], None]


class Observable:
    """In-memory listener registry.

    Listeners are called synchronously, in subscription order, with the
    object that changed. A mutation is therefore fully painted before the
    caller gets control back.

    Exceptions from a listener propagate out of the mutating call: the
    change is already applied, and listeners after the failing one are not
    called. The app mounts a single subscriber (the terminal runtime).
    """

    def __init__(self) -> None:
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        logger.debug("%s changed, notifying %d listener(s)", type(self).__name__, len(self._listeners))
        for listener in list(self._listeners):
            listener(self)
