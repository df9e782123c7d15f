from django.core.management.base import BaseCommand

from apps.core.cascade import purge_orphans


class Command(BaseCommand):
    help = "Удаляет объявления, отзывы и бронирования, ссылающиеся на удалённые записи"

    def handle(self, *args, **options):
        result = purge_orphans()

        if not result.total:
            self.stdout.write(self.style.SUCCESS("No orphans found"))
            return

        for entity, count in result.as_dict().items():
            if count:
                self.stdout.write(f"  {entity}: {count}")
        self.stdout.write(self.style.WARNING(f"Removed {result.total} orphaned rows"))
