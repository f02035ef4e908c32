"""Observable in-memory state container with coalesced notification.

Writers merge partial updates synchronously, so a later ``set_state`` in the
same turn sees earlier merges. Each write enqueues a commit; the queue is
drained once per event-loop turn and every listener is notified once per
drain, however many writes were queued.

One store is created at application start and handed to its consumers.
"""

import asyncio
import logging
from collections import deque
from typing import Any, Callable, Generic, TypeVar

from pydantic import BaseModel

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=BaseModel)

Listener = Callable[[], None]
Partial = dict[str, Any] | Callable[[Any], dict[str, Any]]


class Store(Generic[S]):
    def __init__(self, initial_state: S) -> None:
        self._state = initial_state
        self._listeners: list[Listener] = []
        self._pending: deque[tuple[str, ...]] = deque()
        self._drain_scheduled = False

    def get_state(self) -> S:
        """Latest committed snapshot."""
        return self._state

    def set_state(self, partial: Partial) -> S:
        """Shallow-merge ``partial`` (or ``partial(state)``) and schedule notification."""
        update = partial(self._state) if callable(partial) else partial
        if not update:
            return self._state

        unknown = set(update) - set(type(self._state).model_fields)
        if unknown:
            raise KeyError(f"Unknown state keys: {', '.join(sorted(unknown))}")

        self._state = self._state.model_copy(update=update)
        self._pending.append(tuple(update))
        self._schedule_drain()
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @property
    def has_pending(self) -> bool:
        return bool(self._pending)

    def flush(self) -> None:
        """Drain queued commits and notify each listener once."""
        self._drain_scheduled = False
        if not self._pending:
            return

        changed: set[str] = set()
        while self._pending:
            changed.update(self._pending.popleft())
        logger.debug("Notifying %d listeners of changes to %s", len(self._listeners), sorted(changed))

        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                logger.exception("State listener failed")

    def _schedule_drain(self) -> None:
        if self._drain_scheduled:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No loop: commits wait for an explicit flush().
            return
        self._drain_scheduled = True
        loop.call_soon(self.flush)
