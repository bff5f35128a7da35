"""
Debounce wrapper on top of the running asyncio loop.
"""

import asyncio
import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)


class Debouncer:
    """
    Delays calls to `fn` until `wait` seconds pass without another call.
    Only the arguments of the last call in a burst are applied.

    Build one instance per owner and keep it: the pending timer lives on
    the instance.
    """

    def __init__(self, fn: Callable[..., Any], wait: float) -> None:
        self._fn = fn
        self._wait = wait
        self._handle: asyncio.TimerHandle | None = None
        self._args: tuple[Any, ...] = ()
        self._closed = False

    @property
    def pending(self) -> bool:
        return self._handle is not None

    @property
    def closed(self) -> bool:
        return self._closed

    def __call__(self, *args: Any) -> None:
        if self._closed:
            return
        self.cancel()
        self._args = args
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self._wait, self._fire)

    def cancel(self) -> None:
        """Drop the pending call, if any."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self._args = ()

    def close(self) -> None:
        """Release the timer; later calls are ignored."""
        self.cancel()
        self._closed = True

    def _fire(self) -> None:
        args = self._args
        self._handle = None
        self._args = ()
        if self._closed:
            return
        try:
            self._fn(*args)
        except Exception:
            logger.exception("Debounced call to %r failed", self._fn)
