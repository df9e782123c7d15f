"""
Unit of Work

One ``transaction.atomic`` block plus the domain events recorded inside it.
Events reach the message bus only once the outermost transaction commits;
a rollback drops them.
"""

from typing import List, Optional
import logging

from django.db import transaction

from shared.domain.base import DomainEvent

logger = logging.getLogger(__name__)


class DjangoUnitOfWork:
    """
    Usage:
        with DjangoUnitOfWork() as uow:
            Listing.objects.filter(pk=listing_id).delete()
            uow.add_event(ListingDeleted(aggregate_id=listing_id))
        # ListingDeleted handlers run after commit
    """

    def __init__(self, bus=None):
        self._bus = bus
        self._events: List[DomainEvent] = []
        self._atomic: Optional[transaction.Atomic] = None

    def __enter__(self):
        self._atomic = transaction.atomic()
        self._atomic.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is None:
                self._schedule_publish()
            elif self._events:
                logger.warning(
                    f"{exc_type.__name__} inside unit of work, dropping {len(self._events)} events"
                )
        finally:
            self._events = []
            self._atomic.__exit__(exc_type, exc_val, exc_tb)

    def add_event(self, event: DomainEvent):
        self._events.append(event)

    @property
    def pending_events(self) -> List[DomainEvent]:
        return list(self._events)

    def _schedule_publish(self):
        if not self._events:
            return
        events = list(self._events)
        transaction.on_commit(lambda: self._publish(events))

    def _publish(self, events: List[DomainEvent]):
        bus = self._bus
        if bus is None:
            # Looked up at publish time so tests can swap the global bus
            from shared.application.message_bus import message_bus as bus

        logger.info(f"Publishing {len(events)} domain events after commit")
        try:
            bus.publish_events(events)
        except Exception as e:
            # Rows are already committed; publishing failures are only reported
            logger.error(f"Error publishing events: {e}", exc_info=True)
