"""
Readiness gate — an observable flag that must hold before any data fetch.
The listing controller subscribes to it instead of reading global session state.
"""

from typing import Callable

ReadinessListener = Callable[[bool], None]


class ReadinessGate:
    """Publishes transitions of the session/identity "loaded" flag."""

    def __init__(self, ready: bool = False) -> None:
        self._ready = ready
        self._listeners: list[ReadinessListener] = []

    @property
    def is_ready(self) -> bool:
        return self._ready

    def set_ready(self, ready: bool) -> None:
        if ready == self._ready:
            return
        self._ready = ready
        for listener in list(self._listeners):
            listener(ready)

    def subscribe(self, listener: ReadinessListener) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
