import logging
from dataclasses import dataclass
from datetime import timedelta

from django.db import transaction
from django.utils import timezone
from rest_framework.exceptions import NotFound

from accounts.models import Restaurant
from api.exceptions import Conflict, database_errors
from menu.models import Item
from .models import CLEARED_SALE
from .pricing import sale_active

logger = logging.getLogger(__name__)

EXPIRING_SOON = timedelta(hours=24)


@dataclass(frozen=True)
class OnSaleSummary:
    items: list
    active_sales: int
    expiring_soon_sales: int
    upcoming_sales: int
    total_sales: int


@dataclass(frozen=True)
class ExpiredSales:
    items: int
    restaurants: int


def _sale_fields(sale: dict) -> dict:
    return {
        "on_sale": True,
        "sale_type": sale["sale_type"],
        "sale_amount": sale["sale_amount"],
        "sale_start_date": sale.get("sale_start_date"),
        "sale_end_date": sale.get("sale_end_date"),
    }


class SaleService:
    @staticmethod
    def _item(restaurant, item_id) -> Item:
        item = Item.objects.filter(pk=item_id, restaurant=restaurant).first()
        if not item:
            raise NotFound("Menu item not found")
        return item

    @classmethod
    @database_errors("Failed to apply sale to menu item")
    def apply_item_sale(cls, restaurant, item_id, sale: dict) -> Item:
        """An item sale is refused while the whole menu is on sale."""
        if Restaurant.objects.filter(pk=restaurant.pk, on_sale=True).exists():
            raise Conflict("Restaurant is already on sale")

        item = cls._item(restaurant, item_id)
        for name, value in _sale_fields(sale).items():
            setattr(item, name, value)
        item.save(update_fields=[*CLEARED_SALE, "updated_at"])
        logger.info(f"Sale applied to item {item.pk} ({sale['sale_type']} {sale['sale_amount']})")
        return item

    @classmethod
    @database_errors("Failed to remove sale from menu item")
    def remove_item_sale(cls, restaurant, item_id) -> Item:
        item = cls._item(restaurant, item_id)
        for name, value in CLEARED_SALE.items():
            setattr(item, name, value)
        item.save(update_fields=[*CLEARED_SALE, "updated_at"])
        logger.info(f"Sale removed from item {item.pk}")
        return item

    @staticmethod
    @database_errors("Failed to apply sale to the whole menu")
    @transaction.atomic
    def apply_menu_sale(restaurant, sale: dict) -> Restaurant:
        """
        Put the whole menu on sale. Item-level sales of the restaurant are
        cleared in the same transaction so only one discount source exists.
        """
        locked = Restaurant.objects.select_for_update().get(pk=restaurant.pk)
        if locked.on_sale:
            raise Conflict("Menu is already on sale")

        Restaurant.objects.filter(pk=locked.pk).update(**_sale_fields(sale), updated_at=timezone.now())
        cleared = Item.objects.filter(restaurant=locked, on_sale=True).update(**CLEARED_SALE)
        logger.info(f"Menu sale applied to restaurant {locked.pk}, {cleared} item sales cleared")

        locked.refresh_from_db()
        return locked

    @staticmethod
    @database_errors("Failed to remove menu sale")
    def remove_menu_sale(restaurant) -> Restaurant:
        Restaurant.objects.filter(pk=restaurant.pk).update(**CLEARED_SALE, updated_at=timezone.now())
        restaurant.refresh_from_db()
        logger.info(f"Menu sale removed from restaurant {restaurant.pk}")
        return restaurant

    @staticmethod
    @database_errors("Failed to get sale menu items")
    def on_sale_summary(restaurant, now=None) -> OnSaleSummary:
        now = now or timezone.now()
        items = list(
            Item.objects.on_sale().for_restaurant(restaurant)
            .select_related("category")
            .prefetch_related("variants__options", "addons")
        )

        active = [i for i in items if sale_active(i, now)]
        expiring_soon = [i for i in active if i.sale_end_date and i.sale_end_date <= now + EXPIRING_SOON]
        upcoming = [i for i in items if i.sale_start_date and i.sale_start_date > now]

        return OnSaleSummary(
            items=items,
            active_sales=len(active),
            expiring_soon_sales=len(expiring_soon),
            upcoming_sales=len(upcoming),
            total_sales=len(items),
        )

    @staticmethod
    @database_errors("Failed to get not on sale menu items")
    def not_on_sale_items(restaurant):
        return (
            Item.objects.for_restaurant(restaurant).filter(on_sale=False)
            .select_related("category")
            .prefetch_related("variants__options", "addons")
        )

    @staticmethod
    @transaction.atomic
    def expire_finished_sales(now=None) -> ExpiredSales:
        """Clear every item and restaurant sale whose end date has passed."""
        now = now or timezone.now()

        items = Item.objects.filter(on_sale=True, sale_end_date__lte=now).update(**CLEARED_SALE)
        restaurants = Restaurant.objects.filter(on_sale=True, sale_end_date__lte=now).update(**CLEARED_SALE)

        if items or restaurants:
            logger.info(f"Expired {items} item sales and {restaurants} restaurant sales")
        else:
            logger.debug("No expired sales found")
        return ExpiredSales(items=items, restaurants=restaurants)
