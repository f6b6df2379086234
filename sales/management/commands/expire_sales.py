from django.core.management.base import BaseCommand

from sales.services import SaleService


class Command(BaseCommand):
    help = "Clear item and restaurant sales whose end date has passed."

    def handle(self, *args, **options):
        expired = SaleService.expire_finished_sales()
        self.stdout.write(self.style.SUCCESS(
            f"Expired {expired.items} item sales and {expired.restaurants} restaurant sales."
        ))


# Run with: python manage.py expire_sales
