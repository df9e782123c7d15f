import random
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction

from apps.listings.models import Listing
from apps.reservations.models import Reservation
from apps.reviews.models import Review

User = get_user_model()

SEED_PASSWORD = "123456"

USERS = [
    {"username": "amit_travels", "email": "amit@airhost.com", "role": "admin"},
    {"username": "sara_villas", "email": "sara@airhost.com"},
    {"username": "rahul_urban", "email": "rahul@airhost.com"},
    {"username": "priya_beach", "email": "priya@airhost.com"},
    {"username": "john_doe", "email": "john@airhost.com"},
]

# title, location, country, kind, nightly price, category, image
LISTINGS = [
    ("Royal Heritage Haveli", "Jaipur", "India", "Palace", 5500, "Luxe", "photo-1590053132232-f30217edd1bf"),
    ("Modern Sky Loft", "Mumbai", "India", "Apartment", 4500, "Entire Home", "photo-1502672260266-1c1ef2d93688"),
    ("Tropical Beach Villa", "Goa", "India", "Villa", 3500, "Entire Home", "photo-1499793983690-e29da59ef1c2"),
    ("Snow Peak Cabin", "Manali", "India", "Cabin", 2800, "Cabins", "photo-1464822759023-fed622ff2c3b"),
    ("Backwater Houseboat", "Alleppey", "India", "Boat", 4200, "Rooms", "photo-1593693397690-362cb9666fc2"),
    ("Infinity Pool Penthouse", "Dubai", "UAE", "Penthouse", 12000, "Luxe", "photo-1512917774080-9991f1c4c750"),
    ("Bamboo Treehouse", "Bali", "Indonesia", "Treehouse", 3200, "Cabins", "photo-1520250497591-112f2f40a3f4"),
    ("Cozy Studio", "Mumbai", "India", "Studio", 2200, "Rooms", "photo-1536376074432-cd23f5450974"),
    ("Elegant City Suite", "New York", "USA", "Suite", 9500, "Hotels", "photo-1449156059431-78995541892a"),
    ("Cliffside Mansion", "Santorini", "Greece", "Mansion", 15000, "Luxe", "photo-1570077188670-e3a8d69ac5ff"),
    ("Downtown Studio", "Tokyo", "Japan", "Studio", 7000, "Rooms", "photo-1503899036084-c55cdd92da26"),
    ("Mountain View Hostel", "Rishikesh", "India", "Hostel", 900, "Hotels", "photo-1555854877-bab0e564b8d5"),
    ("Nordic Lake Cabin", "Oslo", "Norway", "Cabin", 6500, "Cabins", "photo-1470770841072-f978cf4d019e"),
    ("Designer Apartment", "Paris", "France", "Apartment", 8800, "Entire Home", "photo-1502672023488-70e25813efdf"),
    ("Rainforest Eco-Lodge", "Cherrapunji", "India", "Lodge", 3400, "Cabins", "photo-1441974231531-c6227db76b6e"),
]

REVIEW_TEXTS = [
    "Absolutely stunning views!",
    "The owner was very helpful.",
    "Clean and well-maintained.",
    "A bit noisy but great location.",
    "Best vacation ever!",
    "Highly recommended.",
    "Value for money.",
    "The pool was amazing.",
]


class Command(BaseCommand):
    help = "Заполняет базу демонстрационными пользователями, объявлениями и отзывами"

    def add_arguments(self, parser):
        parser.add_argument(
            "--flush", action="store_true", help="Удалить существующие данные перед заполнением"
        )
        parser.add_argument("--seed", type=int, default=None, help="Seed генератора случайных чисел")

    @transaction.atomic
    def handle(self, *args, **options):
        rng = random.Random(options["seed"])

        if options["flush"]:
            # Dependents first, so nothing is left dangling mid-way
            Reservation.objects.all().delete()
            Review.objects.all().delete()
            Listing.objects.all().delete()
            User.objects.filter(is_superuser=False).delete()
            self.stdout.write("Cleared existing data")

        users = []
        for data in USERS:
            user = User.objects.filter(username=data["username"]).first()
            if user is None:
                user = User.objects.create_user(
                    username=data["username"],
                    email=data["email"],
                    password=SEED_PASSWORD,
                    role=data.get("role", User.RoleChoices.USER),
                )
            users.append(user)
        self.stdout.write(f"Users ready: {len(users)}")

        listings_created = reviews_created = 0
        for title, location, country, kind, price, category, image in LISTINGS:
            if Listing.objects.filter(title=title).exists():
                continue
            listing = Listing.objects.create(
                owner=rng.choice(users),
                title=title,
                description=(
                    f"Experience luxury at this {kind}. Located in the heart of {location}, "
                    "this space offers premium comfort, high-speed Wi-Fi, and breathtaking views."
                ),
                price=Decimal(price),
                location=location,
                country=country,
                category=category,
                image_url=f"https://images.unsplash.com/{image}",
                image_filename="listingimage",
                latitude=Decimal(f"{rng.uniform(8, 35):.6f}"),
                longitude=Decimal(f"{rng.uniform(68, 97):.6f}"),
                guests=rng.randint(2, 8),
                cleaning_fee=Decimal(rng.choice([0, 200, 500])),
                has_wifi=True,
                has_ac=rng.random() < 0.7,
                has_kitchen=rng.random() < 0.5,
                has_parking=rng.random() < 0.5,
                has_pool=rng.random() < 0.3,
                is_verified=True,
            )
            listings_created += 1

            for _ in range(rng.randint(2, 4)):
                Review.objects.create(
                    author=rng.choice(users),
                    listing=listing,
                    rating=rng.randint(4, 5),
                    comment=rng.choice(REVIEW_TEXTS),
                )
                reviews_created += 1

        self.stdout.write(
            self.style.SUCCESS(f"{listings_created} listings and {reviews_created} reviews created")
        )
