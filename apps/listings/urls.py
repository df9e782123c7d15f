"""URL routing for listings."""

from django.urls import path, include  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from apps.reviews.views import ListingReviewViewSet

from .views import ListingViewSet

router = DefaultRouter()
router.register(r'', ListingViewSet, basename='listing')

review_list = ListingReviewViewSet.as_view({'get': 'list', 'post': 'create'})

urlpatterns = [
    path('<int:listing_pk>/reviews/', review_list, name='listing-reviews'),
    path('', include(router.urls)),
]
