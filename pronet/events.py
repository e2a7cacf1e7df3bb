"""Explicit publish/subscribe channel used by the stores."""

import logging
from collections import defaultdict
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)

Handler = Callable[[Any], None]


class EventEmitter:
    """Maps event names to subscribed handlers and calls them on ``emit``."""

    def __init__(self):
        self._handlers: Dict[str, List[Handler]] = defaultdict(list)

    def subscribe(self, event: str, handler: Handler) -> Callable[[], None]:
        """
        Register ``handler`` for ``event``.

        Returns:
            A callable that removes the subscription.
        """
        self._handlers[event].append(handler)

        def unsubscribe() -> None:
            if handler in self._handlers[event]:
                self._handlers[event].remove(handler)

        return unsubscribe

    def emit(self, event: str, payload: Any = None) -> int:
        """
        Call every handler subscribed to ``event`` with ``payload``.

        Returns:
            Number of handlers called.
        """
        handlers = list(self._handlers.get(event, ()))
        for handler in handlers:
            handler(payload)
        if handlers:
            logger.debug(f"Emitted {event} to {len(handlers)} handler(s)")
        return len(handlers)

    def handler_count(self, event: str) -> int:
        return len(self._handlers.get(event, ()))
