"""
Message Bus

Routes domain events to their handlers (1:N). Handlers are registered by
the apps at startup, see ``apps.core.apps.CoreConfig.ready``.
"""

from typing import Callable, Dict, Iterable, List, Type
import logging

from shared.domain.base import DomainEvent

logger = logging.getLogger(__name__)

Handler = Callable[[DomainEvent], None]


class MessageBus:
    def __init__(self):
        self._event_handlers: Dict[Type[DomainEvent], List[Handler]] = {}

    def register_event_handler(self, event_type: Type[DomainEvent], handler: Handler):
        """Attach ``handler`` to ``event_type``; a repeated registration is ignored."""
        handlers = self._event_handlers.setdefault(event_type, [])
        if handler not in handlers:
            handlers.append(handler)

    def handlers_for(self, event_type: Type[DomainEvent]) -> List[Handler]:
        return list(self._event_handlers.get(event_type, []))

    def publish_events(self, events: Iterable[DomainEvent]):
        """
        Deliver each event to every handler of its type

        A failing handler is logged and skipped, the rest still run.
        """
        for event in events:
            name = type(event).__name__
            handlers = self.handlers_for(type(event))
            if not handlers:
                logger.debug(f"No handlers for {name}")
                continue

            for handler in handlers:
                try:
                    handler(event)
                except Exception as e:
                    logger.error(
                        f"Handler {getattr(handler, '__name__', handler)!s} failed on {name} "
                        f"({event.event_id}): {e}",
                        exc_info=True,
                    )


# Global message bus instance
message_bus = MessageBus()
