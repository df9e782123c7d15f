import os

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

User = get_user_model()


class Command(BaseCommand):
    help = "Создаёт администратора или обновляет пароль и роль существующего"

    def add_arguments(self, parser):
        parser.add_argument("--username", default=os.environ.get("ADMIN_USERNAME", "admin"))
        parser.add_argument("--email", default=os.environ.get("ADMIN_EMAIL", "admin@airhost.local"))
        parser.add_argument("--password", default=os.environ.get("ADMIN_PASSWORD"))

    @transaction.atomic
    def handle(self, *args, **options):
        password = options["password"]
        if not password:
            raise CommandError("Password is required: pass --password or set ADMIN_PASSWORD.")

        email = options["email"].lower()
        admin = User.objects.filter(email=email).first()

        if admin is not None:
            admin.set_password(password)
            admin.role = User.RoleChoices.ADMIN
            admin.status = User.StatusChoices.ACTIVE
            admin.is_staff = True
            admin.is_superuser = True
            admin.save()
            self.stdout.write(self.style.SUCCESS(f"Admin {admin.username} updated"))
            return

        if User.objects.filter(username=options["username"]).exists():
            raise CommandError(f"Username {options['username']} is taken by another account.")

        admin = User.objects.create_superuser(
            username=options["username"],
            email=email,
            password=password,
        )
        self.stdout.write(self.style.SUCCESS(f"Admin {admin.username} created"))
