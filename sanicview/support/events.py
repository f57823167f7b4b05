"""
Event Dispatcher
Named listener registry used for process-wide notifications
"""
from typing import Any, Callable, Dict, List

from sanicview.logging import getLogger

logger = getLogger(__name__)


class EventDispatcher:
    """
    Registry of listeners keyed by event name

    Example:
        dispatcher = EventDispatcher()
        dispatcher.listen('output', lambda composer: composer.header('X-Served-By', 'app'))
        dispatcher.trigger('output', composer)
    """

    def __init__(self):
        self._listeners: Dict[str, List[Callable[[Any], Any]]] = {}

    def listen(self, name: str, callback: Callable[[Any], Any]):
        if not callable(callback):
            raise TypeError(f"Listener for '{name}' must be callable")
        self._listeners.setdefault(name, []).append(callback)

    def forget(self, name: str):
        self._listeners.pop(name, None)

    def has_listeners(self, name: str) -> bool:
        return bool(self._listeners.get(name))

    def trigger(self, name: str, subject: Any = None):
        """
        Call every listener of an event in registration order

        Listener exceptions propagate to the caller.
        """
        listeners = list(self._listeners.get(name, []))
        logger.debug("Triggering '%s' for %d listener(s)", name, len(listeners))
        for callback in listeners:
            callback(subject)


# Process-wide default dispatcher
dispatcher = EventDispatcher()
