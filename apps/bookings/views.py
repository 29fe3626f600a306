"""API views for the booking domain."""

from __future__ import annotations

from django.utils import timezone  # type: ignore
from rest_framework import mixins, permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from .domain.lifecycle import classify_bookings
from .filters import BookingFilterSet
from .models import Booking
from .serializers import (
    BookingCreateSerializer,
    BookingQuoteSerializer,
    BookingSerializer,
    PriceQuoteSerializer,
)
from .services import cancel_booking, create_booking, quote_for_listing


class BookingViewSet(
    mixins.CreateModelMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    """
    A user's own bookings.

    Endpoints:
    - GET /api/v1/bookings/ - list (?bucket=upcoming|past, booking_type, status)
    - POST /api/v1/bookings/ - quote, mocked payment and confirmation
    - GET /api/v1/bookings/{id}/ - detail
    - POST /api/v1/bookings/quote/ - price without booking
    - GET /api/v1/bookings/buckets/ - upcoming and past with counts
    - POST /api/v1/bookings/{id}/cancel/ - cancel a pending or confirmed booking
    """

    queryset = Booking.objects.select_related("user").all()
    permission_classes = [permissions.IsAuthenticated]
    filterset_class = BookingFilterSet

    def get_serializer_class(self):  # type: ignore
        if self.action == "create":
            return BookingCreateSerializer
        if self.action == "quote":
            return BookingQuoteSerializer
        return BookingSerializer

    def get_queryset(self):  # type: ignore
        return super().get_queryset().filter(user=self.request.user)

    def get_serializer_context(self):  # type: ignore
        context = super().get_serializer_context()
        context["today"] = timezone.localdate()
        return context

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        booking = create_booking(
            request.user,
            data.pop("booking_type"),
            data.pop("item_id"),
            data.pop("start_date"),
            data.pop("payment_method"),
            **data,
        )
        read_serializer = BookingSerializer(booking, context=self.get_serializer_context())
        headers = self.get_success_headers(read_serializer.data)
        return Response(read_serializer.data, status=status.HTTP_201_CREATED, headers=headers)

    @action(detail=False, methods=["post"])
    def quote(self, request):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        listing, quote = quote_for_listing(
            data.pop("booking_type"), data.pop("item_id"), data.pop("start_date"), **data
        )
        payload = PriceQuoteSerializer(quote).data
        payload.update({"item_id": listing.pk, "item_name": listing.name})
        return Response(payload)

    @action(detail=False, methods=["get"])
    def buckets(self, request):  # type: ignore
        context = self.get_serializer_context()
        buckets = classify_bookings(self.get_queryset(), context["today"])
        return Response(
            {
                "counts": buckets.counts,
                "upcoming": BookingSerializer(buckets.upcoming, many=True, context=context).data,
                "past": BookingSerializer(buckets.past, many=True, context=context).data,
            }
        )

    @action(detail=True, methods=["post"])
    def cancel(self, request, pk=None):  # type: ignore
        booking = cancel_booking(self.get_object())
        return Response(BookingSerializer(booking, context=self.get_serializer_context()).data)
