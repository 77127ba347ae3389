"""Synchronous observer registry for rendering events."""

from __future__ import annotations

import logging
import time
from collections import defaultdict
from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from quire.core.types import ItemRep

logger = logging.getLogger(__name__)

Handler = Callable[..., Any]


class NotificationEvent(str, Enum):
    FILTERING_STARTED = "filtering_started"
    FILTERING_ENDED = "filtering_ended"


class NotificationCenter:
    """Dispatches events to the handlers subscribed on this instance.

    Handlers run in registration order on the posting thread. Exceptions
    raised by a handler propagate to the poster.

    Example:
        >>> center = NotificationCenter()
        >>> @center.on(NotificationEvent.FILTERING_STARTED)
        ... def started(rep, filter_name):
        ...     print(filter_name)
        >>> center.post(NotificationEvent.FILTERING_STARTED, None, "markdown")
        markdown

    """

    def __init__(self) -> None:
        self._handlers: dict[NotificationEvent, list[Handler]] = defaultdict(list)

    def on(self, event: NotificationEvent, handler: Handler | None = None) -> Any:
        """Subscribe ``handler`` to ``event``; usable as a decorator."""
        if handler is None:

            def decorator(func: Handler) -> Handler:
                self._handlers[event].append(func)
                return func

            return decorator

        self._handlers[event].append(handler)
        return handler

    def remove(self, event: NotificationEvent, handler: Handler) -> None:
        handlers = self._handlers.get(event, [])
        if handler in handlers:
            handlers.remove(handler)

    def post(self, event: NotificationEvent, *args: Any) -> None:
        for handler in list(self._handlers.get(event, [])):
            handler(*args)


class FilterTimingObserver:
    """Collects wall-clock durations of filter runs, keyed by filter name."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._started: dict[str, float] = {}
        self.timings: dict[str, list[float]] = defaultdict(list)

    def attach(self, center: NotificationCenter) -> FilterTimingObserver:
        center.on(NotificationEvent.FILTERING_STARTED, self._on_started)
        center.on(NotificationEvent.FILTERING_ENDED, self._on_ended)
        return self

    def detach(self, center: NotificationCenter) -> None:
        center.remove(NotificationEvent.FILTERING_STARTED, self._on_started)
        center.remove(NotificationEvent.FILTERING_ENDED, self._on_ended)

    def _on_started(self, rep: ItemRep | None, filter_name: str) -> None:
        self._started[filter_name] = self._clock()

    def _on_ended(self, rep: ItemRep | None, filter_name: str) -> None:
        # A failed run posts no end; its start is overwritten by the next run.
        started_at = self._started.pop(filter_name, None)
        if started_at is None:
            logger.debug("Ignoring end of filter %s with no recorded start", filter_name)
            return
        elapsed = self._clock() - started_at
        self.timings[filter_name].append(elapsed)
        logger.debug("Filter %s on rep %s took %.4fs", filter_name, rep.name if rep else "-", elapsed)
