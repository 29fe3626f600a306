"""API views for favorites management."""

from __future__ import annotations

from rest_framework import mixins, permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from .models import Favorite
from .serializers import FavoriteSerializer, FavoriteToggleSerializer
from .services import toggle_favorite


class FavoriteViewSet(mixins.ListModelMixin, viewsets.GenericViewSet):
    """
    A user's favorite rooms and vehicles.

    Endpoints:
    - GET /api/v1/favorites/ - own favorites (?item_type=room|vehicle)
    - POST /api/v1/favorites/toggle/ - add when absent, remove when present
    """

    queryset = Favorite.objects.all()
    serializer_class = FavoriteSerializer
    permission_classes = [permissions.IsAuthenticated]
    filterset_fields = ['item_type']

    def get_serializer_class(self):  # type: ignore
        if self.action == 'toggle':
            return FavoriteToggleSerializer
        return FavoriteSerializer

    def get_queryset(self):  # type: ignore
        """Users only see their own favorites."""
        return super().get_queryset().filter(user=self.request.user)

    @action(detail=False, methods=['post'])
    def toggle(self, request):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = toggle_favorite(request.user, **serializer.validated_data)
        return Response(
            {
                'action': result.action,
                'is_favorite': result.is_favorite,
                'item_type': result.key.item_type,
                'item_id': result.key.item_id,
            },
            status=status.HTTP_201_CREATED if result.is_favorite else status.HTTP_200_OK,
        )
