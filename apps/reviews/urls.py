"""URL routing for reviews."""

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import ReviewViewSet

app_name = 'reviews'

router = DefaultRouter()
router.register(r'', ReviewViewSet, basename='review')

urlpatterns = [path('', include(router.urls))]
