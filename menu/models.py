from django.db import models
from accounts.models import Restaurant
from sales.models import SaleFields


class Category(models.Model):
    restaurant = models.ForeignKey(Restaurant, on_delete=models.CASCADE, related_name="categories")
    name = models.CharField(max_length=60)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name"]
        constraints = [
            models.UniqueConstraint(fields=["restaurant", "name"], name="uniq_category_per_restaurant"),
        ]

    def __str__(self):
        return f"{self.restaurant.name} - {self.name}"


class ItemQuerySet(models.QuerySet):
    def for_restaurant(self, restaurant):
        return self.filter(restaurant=restaurant)

    def available(self):
        return self.filter(is_available=True)

    def on_sale(self):
        return self.filter(on_sale=True)


class Item(SaleFields):
    restaurant = models.ForeignKey(Restaurant, on_delete=models.CASCADE, related_name="items")
    category = models.ForeignKey(Category, on_delete=models.PROTECT, related_name="items")
    title = models.CharField(max_length=100)
    description = models.CharField(max_length=250)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    tags = models.JSONField(default=list, blank=True)
    ingredients = models.JSONField(default=list, blank=True)
    image_url = models.URLField(blank=True, default="")
    rating = models.DecimalField(max_digits=3, decimal_places=2, default=0)

    is_edited = models.BooleanField(default=False)
    is_available = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ItemQuerySet.as_manager()

    class Meta:
        ordering = ["title"]
        constraints = [
            models.UniqueConstraint(fields=["restaurant", "title"], name="uniq_item_title_per_restaurant"),
        ]
        indexes = [
            models.Index(fields=["restaurant", "category"], name="item_restaurant_category_idx"),
            models.Index(fields=["on_sale", "sale_end_date"], name="item_sale_end_idx"),
            models.Index(fields=["on_sale", "restaurant"], name="item_sale_restaurant_idx"),
        ]

    def __str__(self):
        return self.title


class Variant(models.Model):
    """Radio-style choice group on an item (e.g. Size). Exactly one option is picked."""
    item = models.ForeignKey(Item, on_delete=models.CASCADE, related_name="variants")
    name = models.CharField(max_length=100)
    is_required = models.BooleanField(default=False)
    is_available = models.BooleanField(default=True)

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return f"{self.item.title} - {self.name}"


class VariantOption(models.Model):
    variant = models.ForeignKey(Variant, on_delete=models.CASCADE, related_name="options")
    name = models.CharField(max_length=100)  # e.g. "Small", "Large"
    price = models.DecimalField(max_digits=10, decimal_places=2, default=0)

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return self.name


class Addon(models.Model):
    """Checkbox-style extra (e.g. Extra Cheese)."""
    item = models.ForeignKey(Item, on_delete=models.CASCADE, related_name="addons")
    name = models.CharField(max_length=100)
    price = models.DecimalField(max_digits=10, decimal_places=2, default=0)

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return self.name
