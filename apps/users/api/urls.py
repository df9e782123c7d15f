"""URL routing for the admin dashboard API."""

from django.urls import path, include  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from apps.listings.views import ListingVerifyView
from apps.reservations.views import ReservationStatusView

from .views import DashboardStatsView, DashboardUserViewSet

# Create router
router = DefaultRouter()
router.register(r"users", DashboardUserViewSet, basename="dashboard-user")

# URL patterns
urlpatterns = [
    path("stats/", DashboardStatsView.as_view(), name="dashboard-stats"),
    path("listings/<int:pk>/verify/", ListingVerifyView.as_view(), name="dashboard-listing-verify"),
    path("reservations/<int:pk>/status/", ReservationStatusView.as_view(), name="dashboard-reservation-status"),
    path("", include(router.urls)),
]
