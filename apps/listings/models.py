"""Listing models for UniStay.

Rooms and vehicles share the attributes the catalog filter reads:
``category``, ``location``, ``unit_price``, ``amenities`` and
``search_fields()``.
"""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings  # type: ignore
from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class ListingKind(models.TextChoices):
    ROOM = "room", _("Room")
    VEHICLE = "vehicle", _("Vehicle")


class Location(models.TextChoices):
    BELIHULOYA_TOWN = "Belihuloya Town", _("Belihuloya Town")
    NEAR_UNIVERSITY = "Near University", _("Near University")
    BELIHULOYA_CENTER = "Belihuloya Center", _("Belihuloya Center")
    BALANGODA_ROAD = "Balangoda Road", _("Balangoda Road")
    KALUPAHANA = "Kalupahana", _("Kalupahana")


class ListingBase(models.Model):
    """Fields shared by every rentable item."""

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="%(class)ss",
    )
    owner_name = models.CharField(max_length=150, blank=True)
    owner_phone = models.CharField(max_length=30, blank=True)
    owner_email = models.EmailField(blank=True)
    location = models.CharField(max_length=100, choices=Location.choices)
    address = models.CharField(max_length=255, blank=True)
    description = models.TextField(blank=True)
    images = models.JSONField(default=list, blank=True, help_text=_("Image URLs, first one is the cover."))
    is_available = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    kind: ListingKind

    class Meta:
        abstract = True
        ordering = ["-created_at", "-id"]

    @property
    def cover_image(self) -> str:
        return self.images[0] if self.images else ""

    def owner_contact(self) -> dict:
        return {"name": self.owner_name, "phone": self.owner_phone, "email": self.owner_email}


class Room(ListingBase):
    """A room or apartment rented by the month."""

    class RoomType(models.TextChoices):
        SINGLE = "single", _("Single")
        DOUBLE = "double", _("Double")
        APARTMENT = "apartment", _("Apartment")
        HOSTEL = "hostel", _("Hostel")

    kind = ListingKind.ROOM

    name = models.CharField(max_length=255)
    room_type = models.CharField(max_length=20, choices=RoomType.choices)
    price_per_month = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0"))],
    )
    amenities = models.JSONField(default=list, blank=True)
    available_from = models.DateField(default=timezone.localdate)
    latitude = models.DecimalField(max_digits=9, decimal_places=6, null=True, blank=True)
    longitude = models.DecimalField(max_digits=9, decimal_places=6, null=True, blank=True)

    class Meta(ListingBase.Meta):
        verbose_name = _("Room")
        verbose_name_plural = _("Rooms")
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price_per_month__gte=0),
                name="room_price_non_negative",
            ),
        ]
        indexes = [
            models.Index(fields=["is_available", "room_type"], name="listings_ro_is_avai_6b1f0e_idx"),
        ]

    def __str__(self) -> str:
        return self.name

    @property
    def category(self) -> str:
        return self.room_type

    @property
    def unit_price(self) -> Decimal:
        return self.price_per_month

    def search_fields(self) -> tuple[str, ...]:
        return (self.name, self.location, self.description)


class Vehicle(ListingBase):
    """A car, bike or van rented by the day."""

    class VehicleType(models.TextChoices):
        CAR = "car", _("Car")
        BIKE = "bike", _("Bike")
        VAN = "van", _("Van")

    kind = ListingKind.VEHICLE

    brand = models.CharField(max_length=100)
    model = models.CharField(max_length=100)
    vehicle_type = models.CharField(max_length=20, choices=VehicleType.choices)
    rental_price_per_day = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0"))],
    )
    specifications = models.JSONField(
        default=dict,
        blank=True,
        help_text=_("year, transmission, fuel, seats, ac, engine"),
    )

    class Meta(ListingBase.Meta):
        verbose_name = _("Vehicle")
        verbose_name_plural = _("Vehicles")
        constraints = [
            models.CheckConstraint(
                condition=models.Q(rental_price_per_day__gte=0),
                name="vehicle_price_non_negative",
            ),
        ]
        indexes = [
            models.Index(fields=["is_available", "vehicle_type"], name="listings_ve_is_avai_3c9d2a_idx"),
        ]

    def __str__(self) -> str:
        return self.name

    @property
    def name(self) -> str:
        return f"{self.brand} {self.model}"

    @property
    def category(self) -> str:
        return self.vehicle_type

    @property
    def unit_price(self) -> Decimal:
        return self.rental_price_per_day

    @property
    def amenities(self) -> None:
        return None

    def search_fields(self) -> tuple[str, ...]:
        return (self.brand, self.model, self.location, self.description)


LISTING_MODELS: dict[str, type[ListingBase]] = {
    ListingKind.ROOM: Room,
    ListingKind.VEHICLE: Vehicle,
}
