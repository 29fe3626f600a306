"""Listing API views."""

from __future__ import annotations

from asgiref.sync import async_to_sync  # type: ignore
from rest_framework import permissions, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.favorites.services import favorite_set_for
from apps.reviews.services import rating_summaries

from .domain.filters import ListingFilterConfig
from .models import ListingKind, Room, Vehicle
from .serializers import RoomSerializer, VehicleSerializer
from .services import CatalogLoader, featured_listings, get_available_listing

catalog_loader = CatalogLoader()


class ListingViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Read-only catalog for one listing kind.

    Endpoints:
    - GET /api/v1/<kind>s/ - available listings narrowed by query params
      (search, <category_key>, location, min_price, max_price, amenities)
    - GET /api/v1/<kind>s/{id}/ - one available listing
    - GET /api/v1/<kind>s/featured/ - newest available listings
    """

    permission_classes = [permissions.AllowAny]
    filter_backends: list = []
    kind: str
    category_key: str

    def _client(self):  # type: ignore
        """Request stream identity: the user, else the session, else none"""
        user = self.request.user
        if user.is_authenticated:
            return ("user", user.pk)
        session = getattr(self.request, "session", None)
        session_key = getattr(session, "session_key", None)
        if session_key:
            return ("session", session_key)
        return None

    def get_serializer_context(self):  # type: ignore
        context = super().get_serializer_context()
        context["favorites"] = favorite_set_for(self.request.user, self.kind)
        return context

    def _respond(self, listings, many: bool = True) -> Response:
        items = listings if many else [listings]
        context = self.get_serializer_context()
        context["ratings"] = rating_summaries(self.kind, [item.pk for item in items])
        serializer = self.get_serializer_class()(listings, many=many, context=context)
        return Response(serializer.data)

    def list(self, request, *args, **kwargs):  # type: ignore
        config = ListingFilterConfig.from_params(request.query_params, self.category_key)
        listings = async_to_sync(catalog_loader.load)(self.kind, config, self._client())
        return self._respond(listings)

    def retrieve(self, request, pk=None, *args, **kwargs):  # type: ignore
        return self._respond(get_available_listing(self.kind, pk), many=False)

    @action(detail=False, methods=["get"])
    def featured(self, request):  # type: ignore
        return self._respond(featured_listings(self.kind))


class RoomViewSet(ListingViewSet):
    queryset = Room.objects.filter(is_available=True)
    serializer_class = RoomSerializer
    kind = ListingKind.ROOM
    category_key = "room_type"


class VehicleViewSet(ListingViewSet):
    queryset = Vehicle.objects.filter(is_available=True)
    serializer_class = VehicleSerializer
    kind = ListingKind.VEHICLE
    category_key = "vehicle_type"
