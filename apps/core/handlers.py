"""
Audit handlers for consistency events.

Registered on the global message bus from ``CoreConfig.ready``; they run
after the transaction that produced the event has committed.
"""

import structlog

from shared.application.message_bus import message_bus

from .events import (
    ListingDeleted,
    OrphansPurged,
    ReservationCancelled,
    ReservationDeleted,
    ReviewDeleted,
    UserDeleted,
)

logger = structlog.get_logger(__name__)


def log_user_deleted(event: UserDeleted) -> None:
    logger.info(
        "cascade.user_deleted",
        user_id=event.aggregate_id,
        deleted_by=event.deleted_by,
        **event.counts,
    )


def log_listing_deleted(event: ListingDeleted) -> None:
    logger.info("cascade.listing_deleted", listing_id=event.aggregate_id, **event.counts)


def log_review_deleted(event: ReviewDeleted) -> None:
    logger.info("cascade.review_deleted", review_id=event.aggregate_id, listing_id=event.listing_id)


def log_reservation_deleted(event: ReservationDeleted) -> None:
    logger.info(
        "cascade.reservation_deleted",
        reservation_id=event.aggregate_id,
        listing_id=event.listing_id,
    )


def log_reservation_cancelled(event: ReservationCancelled) -> None:
    logger.info(
        "reservation.cancelled",
        reservation_id=event.aggregate_id,
        listing_id=event.listing_id,
        cancelled_by=event.cancelled_by,
    )


def log_orphans_purged(event: OrphansPurged) -> None:
    logger.warning("cascade.orphans_purged", **event.counts)


def register_handlers(bus=message_bus) -> None:
    bus.register_event_handler(UserDeleted, log_user_deleted)
    bus.register_event_handler(ListingDeleted, log_listing_deleted)
    bus.register_event_handler(ReviewDeleted, log_review_deleted)
    bus.register_event_handler(ReservationDeleted, log_reservation_deleted)
    bus.register_event_handler(ReservationCancelled, log_reservation_cancelled)
    bus.register_event_handler(OrphansPurged, log_orphans_purged)
