"""Domain services for booking workflows."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional, Tuple

from django.conf import settings  # type: ignore
from django.db import transaction  # type: ignore
from django.utils import timezone  # type: ignore

from apps.listings.models import ListingBase
from apps.listings.services import get_available_listing
from shared.domain.exceptions import ValidationError
from shared.infrastructure.store import DjangoRecordStore, lock_queryset_if_possible

from .domain.lifecycle import BookingBuckets, BookingStatus, classify_bookings, ensure_transition
from .domain.pricing import PriceQuote, quote_booking
from .models import Booking

logger = logging.getLogger(__name__)

bookings_store = DjangoRecordStore(Booking, name="bookings")


def quote_for_listing(
    kind: str,
    item_id: Any,
    start_date: date,
    end_date: Optional[date] = None,
    duration: Optional[int] = None,
) -> Tuple[ListingBase, PriceQuote]:
    """
    Price a booking of an available listing without persisting anything.

    Raises:
        NotFoundError: the listing does not exist or is unavailable
        ValidationError: the dates or duration cannot be priced
    """
    listing = get_available_listing(kind, item_id)
    quote = quote_booking(
        kind,
        listing.unit_price,
        start_date,
        end_date=end_date,
        duration=duration,
        currency=settings.RENTALS["CURRENCY"],
    )
    return listing, quote


def confirm_payment(method: str, quote: PriceQuote) -> None:
    """Mocked payment confirmation: accepts every supported method."""

    if method not in settings.RENTALS["PAYMENT_METHODS"]:
        raise ValidationError(f"Unsupported payment method: {method!r}")
    logger.info("Payment of %s confirmed via %s", quote.total, method)


@transaction.atomic
def create_booking(
    user,  # type: ignore
    kind: str,
    item_id: Any,
    start_date: date,
    payment_method: str,
    end_date: Optional[date] = None,
    duration: Optional[int] = None,
    today: Optional[date] = None,
) -> Booking:
    """
    Quote, confirm payment and persist a booking in one step.

    The listing's name, images, owner and the quoted total are copied onto
    the booking so later listing edits do not change it.
    """
    today = today or timezone.localdate()
    if start_date < today:
        raise ValidationError(f"Start date {start_date.isoformat()} is in the past")

    listing, quote = quote_for_listing(kind, item_id, start_date, end_date=end_date, duration=duration)
    confirm_payment(payment_method, quote)
    status = ensure_transition(BookingStatus.PENDING, BookingStatus.CONFIRMED)

    booking = bookings_store.insert(
        user=user,
        booking_type=kind,
        item_id=listing.pk,
        item_name=listing.name,
        item_images=list(listing.images),
        start_date=quote.start_date,
        end_date=quote.end_date,
        unit_price=quote.unit_price.amount,
        duration=quote.duration,
        total_amount=quote.total.amount,
        currency=quote.total.currency,
        payment_method=payment_method,
        status=status.value,
        owner_id=listing.owner_id,
    )
    logger.info("Booking %s created for %s %s: %s", booking.pk, kind, listing.pk, quote)
    return booking


@transaction.atomic
def cancel_booking(booking: Booking) -> Booking:
    """
    Cancel a pending or confirmed booking.

    Raises:
        ValidationError: the booking is already completed or cancelled
    """
    booking = lock_queryset_if_possible(Booking.objects.filter(pk=booking.pk)).get()
    target = ensure_transition(booking.status, BookingStatus.CANCELLED)
    booking.status = target.value
    booking.cancelled_at = timezone.now()
    booking.save(update_fields=["status", "cancelled_at", "updated_at"])
    logger.info("Booking %s cancelled", booking.pk)
    return booking


def complete_finished_bookings(today: Optional[date] = None) -> int:
    """Move confirmed bookings whose end date has passed to completed."""

    today = today or timezone.localdate()
    completed = 0
    with transaction.atomic():
        finished = lock_queryset_if_possible(
            Booking.objects.filter(status=Booking.Status.CONFIRMED, end_date__lt=today)
        )
        for booking in finished:
            booking.status = ensure_transition(booking.status, BookingStatus.COMPLETED).value
            booking.save(update_fields=["status", "updated_at"])
            completed += 1
    if completed:
        logger.info("Completed %s finished bookings", completed)
    return completed


def bookings_for(user, **lookups: Any) -> list[Booking]:  # type: ignore
    return bookings_store.fetch_all(user=user, **lookups)


def classify_for(user, today: Optional[date] = None) -> BookingBuckets:  # type: ignore
    """Split a user's bookings into upcoming and past, newest first."""

    return classify_bookings(bookings_for(user), today or timezone.localdate())
