import logging
from django.db import transaction

from api.exceptions import Conflict, database_errors
from cart.services import CartService
from rest_framework.exceptions import NotFound
from .models import Category, Item, Variant, VariantOption, Addon

logger = logging.getLogger(__name__)


class CategoryService:
    @staticmethod
    @database_errors("Failed to create category")
    def create(restaurant, name: str) -> Category:
        name = (name or "").strip()
        if not name:
            raise Conflict("Category name is required")
        if Category.objects.filter(restaurant=restaurant, name__iexact=name).exists():
            raise Conflict("Category already exists")
        return Category.objects.create(restaurant=restaurant, name=name)

    @staticmethod
    def get(restaurant, category_id) -> Category:
        category = Category.objects.filter(pk=category_id, restaurant=restaurant).first()
        if not category:
            raise NotFound("Category not found")
        return category

    @classmethod
    @database_errors("Failed to update category")
    def rename(cls, restaurant, category_id, name: str) -> Category:
        category = cls.get(restaurant, category_id)
        name = (name or "").strip()
        if not name:
            raise Conflict("Category name is required")

        taken = Category.objects.filter(restaurant=restaurant, name__iexact=name).exclude(pk=category.pk)
        if taken.exists():
            raise Conflict("Category already exists")

        category.name = name
        category.save(update_fields=["name"])
        return category

    @classmethod
    @database_errors("Failed to delete category")
    def delete(cls, restaurant, category_id):
        category = cls.get(restaurant, category_id)
        if category.items.exists():
            raise Conflict("Category is associated with menu items, edit items first")
        category.delete()


class MenuItemService:
    @staticmethod
    def _write_children(item: Item, variants, addons):
        for variant_data in variants:
            variant_data = dict(variant_data)
            options = variant_data.pop("options", [])
            variant = Variant.objects.create(item=item, **variant_data)
            VariantOption.objects.bulk_create(
                [VariantOption(variant=variant, **dict(option)) for option in options]
            )
        Addon.objects.bulk_create([Addon(item=item, **dict(addon)) for addon in addons])

    @staticmethod
    def get(restaurant, item_id) -> Item:
        item = Item.objects.filter(pk=item_id, restaurant=restaurant).first()
        if not item:
            raise NotFound("Menu item not found")
        return item

    @staticmethod
    def get_by_title(restaurant, title: str) -> Item:
        item = (
            Item.objects.select_related("category")
            .prefetch_related("variants__options", "addons")
            .filter(restaurant=restaurant, title=title)
            .first()
        )
        if not item:
            raise NotFound("Menu item not found")
        return item

    @classmethod
    @database_errors("Failed to create menu item")
    @transaction.atomic
    def create(cls, restaurant, data: dict) -> Item:
        data = dict(data)
        variants = data.pop("variants", [])
        addons = data.pop("addons", [])

        if Item.objects.filter(restaurant=restaurant, title=data["title"]).exists():
            raise Conflict("Menu item already exists")

        item = Item.objects.create(restaurant=restaurant, **data)
        cls._write_children(item, variants, addons)
        logger.info(f"Restaurant {restaurant.pk} created item {item.pk}")
        return item

    @classmethod
    @database_errors("Failed to update menu item")
    @transaction.atomic
    def update(cls, restaurant, item_id, data: dict) -> Item:
        """Edit an item. Variants and addons are replaced, sale fields untouched."""
        item = cls.get(restaurant, item_id)
        data = dict(data)
        variants = data.pop("variants", [])
        addons = data.pop("addons", [])

        title_taken = (
            Item.objects.filter(restaurant=restaurant, title=data["title"]).exclude(pk=item.pk).exists()
        )
        if title_taken:
            raise Conflict("Menu item already exists")

        for field, value in data.items():
            setattr(item, field, value)
        item.is_edited = True
        item.save()

        item.variants.all().delete()
        item.addons.all().delete()
        cls._write_children(item, variants, addons)
        return item

    @classmethod
    @database_errors("Failed to delete menu item")
    @transaction.atomic
    def delete(cls, restaurant, item_id):
        """Delete an item. Carts holding it lose those lines first."""
        item = cls.get(restaurant, item_id)
        carts = CartService.release_item(item.pk)
        item.delete()
        logger.info(f"Restaurant {restaurant.pk} deleted item {item_id}, removed from {carts} carts")


class VariantService:
    @staticmethod
    def get(restaurant, variant_id) -> Variant:
        variant = Variant.objects.filter(pk=variant_id, item__restaurant=restaurant).first()
        if not variant:
            raise NotFound("Variant not found in any menu item")
        return variant

    @classmethod
    @database_errors("Failed to update variant")
    @transaction.atomic
    def update(cls, restaurant, variant_id, data: dict) -> Variant:
        variant = cls.get(restaurant, variant_id)
        data = dict(data)
        options = data.pop("options", [])

        for field, value in data.items():
            setattr(variant, field, value)
        variant.save()

        variant.options.all().delete()
        VariantOption.objects.bulk_create(
            [VariantOption(variant=variant, **dict(option)) for option in options]
        )
        return variant

    @classmethod
    @database_errors("Failed to delete variant")
    def delete(cls, restaurant, variant_id):
        variant = cls.get(restaurant, variant_id)
        variant.delete()
