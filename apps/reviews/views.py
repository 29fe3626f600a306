"""API views for managing reviews."""

from __future__ import annotations

from rest_framework import mixins, permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from .filters import ReviewFilterSet
from .models import Review
from .serializers import (
    ItemQuerySerializer,
    RatingSummarySerializer,
    ReviewCreateSerializer,
    ReviewSerializer,
)
from .services import rating_summary, submit_review


class ReviewViewSet(mixins.ListModelMixin, mixins.CreateModelMixin, viewsets.GenericViewSet):
    """
    Reviews of rooms and vehicles.

    Endpoints:
    - GET /api/v1/reviews/?booking_type=&item_id= - reviews of one item, newest first
    - POST /api/v1/reviews/ - submit a review (authenticated)
    - GET /api/v1/reviews/summary/?booking_type=&item_id= - average and count
    """

    queryset = Review.objects.all()
    permission_classes = [permissions.IsAuthenticatedOrReadOnly]
    filterset_class = ReviewFilterSet

    def get_serializer_class(self):  # type: ignore
        if self.action == 'create':
            return ReviewCreateSerializer
        return ReviewSerializer

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        review = submit_review(request.user, **serializer.validated_data)
        return Response(ReviewSerializer(review).data, status=status.HTTP_201_CREATED)

    @action(detail=False, methods=['get'])
    def summary(self, request):  # type: ignore
        query = ItemQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        summary = rating_summary(query.validated_data['booking_type'], query.validated_data['item_id'])
        return Response(RatingSummarySerializer(summary).data)
