"""Celery tasks for the booking domain."""

from __future__ import annotations

import logging

from celery import shared_task  # type: ignore

from .services import complete_finished_bookings as complete_finished

logger = logging.getLogger(__name__)


# ============================================================================
# PERIODIC TASKS (scheduled through Celery Beat)
# ============================================================================

@shared_task(name="bookings.complete_finished_bookings")
def complete_finished_bookings() -> dict[str, int]:
    """
    Complete confirmed bookings whose rental period is over.

    Runs nightly through Celery Beat.

    Returns:
        dict: {"completed": number of bookings moved to completed}
    """
    return {"completed": complete_finished()}
