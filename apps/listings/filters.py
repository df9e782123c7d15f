"""FilterSet definitions for listings search."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import AMENITY_FIELDS, Listing


class ListingFilterSet(django_filters.FilterSet):
    """Filters for the listings index: free-text place search, price and capacity."""

    q = django_filters.CharFilter(method="filter_q")
    country = django_filters.CharFilter(field_name="country", lookup_expr="icontains")
    category = django_filters.ChoiceFilter(choices=Listing.Category.choices)
    badge = django_filters.ChoiceFilter(choices=Listing.Badge.choices)

    price_min = django_filters.NumberFilter(field_name="price", lookup_expr="gte")
    price_max = django_filters.NumberFilter(field_name="price", lookup_expr="lte")
    guests = django_filters.NumberFilter(field_name="guests", lookup_expr="gte")
    owner = django_filters.NumberFilter(field_name="owner_id")

    # CSV of amenity names (wifi,pool,...), requires all of them
    amenities = django_filters.CharFilter(method="filter_amenities")

    class Meta:
        model = Listing
        fields = ["country", "category", "badge", "is_verified"]

    def filter_q(self, queryset, name, value):  # type: ignore
        return queryset.search(value.strip())

    def filter_amenities(self, queryset, name, value):  # type: ignore
        wanted = {f"has_{item.strip().lower()}" for item in str(value).split(",") if item.strip()}
        known = wanted & set(AMENITY_FIELDS)
        if not known:
            return queryset
        return queryset.filter(**{field: True for field in known})
