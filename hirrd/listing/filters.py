"""
Filter state store for the job-listing page.

Holds the search text, location and company filters. Every mutation
notifies the page-reset hook; subscribers only hear about mutations that
actually changed the state, so setting the same value twice never causes
a second fetch.
"""

import logging
from typing import Callable

from hirrd.domain.models import FilterState

logger = logging.getLogger(__name__)

FilterListener = Callable[[FilterState], None]


class FilterStore:
    """Owns the current FilterState and publishes changes to subscribers."""

    def __init__(
        self,
        on_mutate: Callable[[], None] | None = None,
        initial: FilterState | None = None,
    ) -> None:
        self._state = initial or FilterState()
        self._on_mutate = on_mutate
        self._listeners: list[FilterListener] = []

    @property
    def state(self) -> FilterState:
        return self._state

    def subscribe(self, listener: FilterListener) -> Callable[[], None]:
        """Register a change listener; returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ── Mutators ──────────────────────────────────────────────

    def set_search(self, text: str) -> bool:
        return self._apply(search_query=text)

    def set_location(self, value: str) -> bool:
        return self._apply(location=value)

    def set_company(self, company_id: str) -> bool:
        return self._apply(company_id=company_id)

    def clear_all(self) -> bool:
        """Reset every filter in one transition."""
        return self._apply(search_query="", location="", company_id="")

    def _apply(self, **changes: str) -> bool:
        """
        Apply `changes` as a single transition.
        Returns True if the state changed (and subscribers were notified).
        """
        if self._on_mutate is not None:
            self._on_mutate()

        new_state = self._state.model_copy(update=changes)
        if new_state == self._state:
            return False

        self._state = new_state
        logger.debug("Filters changed: %s", new_state)
        for listener in list(self._listeners):
            listener(new_state)
        return True
