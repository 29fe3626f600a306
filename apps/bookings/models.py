"""Booking model for UniStay."""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from apps.listings.models import ListingKind
from shared.domain.exceptions import ValidationError


class Booking(models.Model):
    """A confirmed rental of one room or vehicle, priced at creation time."""

    class Status(models.TextChoices):
        PENDING = "pending", _("Pending")
        CONFIRMED = "confirmed", _("Confirmed")
        COMPLETED = "completed", _("Completed")
        CANCELLED = "cancelled", _("Cancelled")

    class PaymentMethod(models.TextChoices):
        CARD = "card", _("Card")
        CASH = "cash", _("Cash")

    # Written once by the pricing step and never changed afterwards
    SNAPSHOT_FIELDS = (
        "booking_type",
        "item_id",
        "item_name",
        "item_images",
        "start_date",
        "end_date",
        "unit_price",
        "duration",
        "total_amount",
        "currency",
        "owner_id",
    )

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    booking_type = models.CharField(max_length=20, choices=ListingKind.choices)
    item_id = models.PositiveBigIntegerField()
    item_name = models.CharField(max_length=255)
    item_images = models.JSONField(default=list, blank=True)
    start_date = models.DateField()
    end_date = models.DateField()
    unit_price = models.DecimalField(max_digits=12, decimal_places=2)
    duration = models.PositiveIntegerField(help_text=_("Months for rooms, days for vehicles."))
    total_amount = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal("0.00"))
    currency = models.CharField(max_length=3, default="LKR")
    payment_method = models.CharField(max_length=10, choices=PaymentMethod.choices)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.PENDING)
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="received_bookings",
    )
    cancelled_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Booking")
        verbose_name_plural = _("Bookings")
        ordering = ["-created_at", "-id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(end_date__gte=models.F("start_date")),
                name="booking_valid_dates",
            ),
            models.CheckConstraint(
                condition=models.Q(total_amount__gte=0),
                name="booking_total_non_negative",
            ),
        ]
        indexes = [
            models.Index(fields=["user", "status"], name="bookings_bo_user_id_5f2c1e_idx"),
            models.Index(fields=["booking_type", "item_id"], name="bookings_bo_booking_8a7d44_idx"),
        ]

    def __str__(self) -> str:
        return f"Booking #{self.pk} {self.booking_type} {self.item_id} ({self.status})"

    @classmethod
    def from_db(cls, db, field_names, values):  # type: ignore
        instance = super().from_db(db, field_names, values)
        instance._loaded_snapshot = instance._snapshot()
        return instance

    def _snapshot(self) -> dict:
        # Deferred fields are absent from __dict__ and are skipped
        return {name: self.__dict__[name] for name in self.SNAPSHOT_FIELDS if name in self.__dict__}

    def save(self, *args, **kwargs):  # type: ignore
        loaded = getattr(self, "_loaded_snapshot", None)
        if not self._state.adding and loaded is not None:
            current = self._snapshot()
            changed = [name for name, value in loaded.items() if current.get(name, value) != value]
            if changed:
                raise ValidationError(
                    f"Booking {self.pk} pricing snapshot is immutable: {', '.join(changed)}"
                )
        super().save(*args, **kwargs)
        self._loaded_snapshot = self._snapshot()
