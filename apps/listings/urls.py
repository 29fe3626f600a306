"""URL routing for the listings domain."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import RoomViewSet, VehicleViewSet

app_name = "listings"

router = DefaultRouter()
router.register(r"rooms", RoomViewSet, basename="room")
router.register(r"vehicles", VehicleViewSet, basename="vehicle")

urlpatterns = [path("", include(router.urls))]
