from decimal import Decimal

import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Listing",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=100, validators=[django.core.validators.MinLengthValidator(3)])),
                ("description", models.TextField(validators=[django.core.validators.MinLengthValidator(10)])),
                (
                    "price",
                    models.DecimalField(
                        decimal_places=2,
                        help_text="Nightly rate.",
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(Decimal("0"))],
                    ),
                ),
                ("location", models.CharField(max_length=255)),
                ("country", models.CharField(max_length=100)),
                (
                    "category",
                    models.CharField(
                        choices=[
                            ("Rooms", "Rooms"),
                            ("Hotels", "Hotels"),
                            ("Entire Home", "Entire Home"),
                            ("Cabins", "Cabins"),
                            ("Luxe", "Luxe"),
                        ],
                        default="Rooms",
                        max_length=20,
                    ),
                ),
                (
                    "badge",
                    models.CharField(
                        choices=[
                            ("Standard", "Standard"),
                            ("Premium", "Premium"),
                            ("Budget", "Budget"),
                            ("Luxury", "Luxury"),
                            ("Trending", "Trending"),
                            ("Popular", "Popular"),
                            ("New", "New"),
                            ("Top Rated", "Top Rated"),
                            ("Featured", "Featured"),
                            ("Iconic", "Iconic"),
                        ],
                        default="Standard",
                        max_length=20,
                    ),
                ),
                ("image_url", models.URLField(blank=True, max_length=500)),
                ("image_filename", models.CharField(blank=True, max_length=255)),
                (
                    "latitude",
                    models.DecimalField(
                        decimal_places=6,
                        default=Decimal("18.879702"),
                        max_digits=9,
                        validators=[
                            django.core.validators.MinValueValidator(Decimal("-90")),
                            django.core.validators.MaxValueValidator(Decimal("90")),
                        ],
                    ),
                ),
                (
                    "longitude",
                    models.DecimalField(
                        decimal_places=6,
                        default=Decimal("72.140273"),
                        max_digits=9,
                        validators=[
                            django.core.validators.MinValueValidator(Decimal("-180")),
                            django.core.validators.MaxValueValidator(Decimal("180")),
                        ],
                    ),
                ),
                (
                    "guests",
                    models.PositiveSmallIntegerField(default=1, validators=[django.core.validators.MinValueValidator(1)]),
                ),
                (
                    "cleaning_fee",
                    models.DecimalField(
                        decimal_places=2,
                        default=Decimal("0.00"),
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(Decimal("0"))],
                    ),
                ),
                (
                    "service_fee_pct",
                    models.DecimalField(
                        decimal_places=2,
                        default=Decimal("3"),
                        max_digits=5,
                        validators=[
                            django.core.validators.MinValueValidator(Decimal("0")),
                            django.core.validators.MaxValueValidator(Decimal("100")),
                        ],
                    ),
                ),
                ("has_wifi", models.BooleanField(default=False)),
                ("has_ac", models.BooleanField(default=False)),
                ("has_kitchen", models.BooleanField(default=False)),
                ("has_parking", models.BooleanField(default=False)),
                ("has_pool", models.BooleanField(default=False)),
                ("has_gym", models.BooleanField(default=False)),
                ("has_workspace", models.BooleanField(default=False)),
                ("has_pets", models.BooleanField(default=False)),
                ("has_cctv", models.BooleanField(default=False)),
                (
                    "is_verified",
                    models.BooleanField(default=False, help_text="Only verified listings appear on the public index."),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "owner",
                    models.ForeignKey(
                        db_constraint=False,
                        on_delete=django.db.models.deletion.DO_NOTHING,
                        related_name="listings",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Listing",
                "verbose_name_plural": "Listings",
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["is_verified"], name="listing_verified_idx")],
            },
        ),
    ]
