from decimal import Decimal
from django.conf import settings
from django.db import models
from accounts.models import Restaurant
from menu.models import Item


class Cart(models.Model):
    """One cart per (user, restaurant). A user holds as many carts as restaurants they shop from."""
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="carts")
    restaurant = models.ForeignKey(Restaurant, on_delete=models.CASCADE, related_name="carts")
    total_price = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-updated_at"]
        constraints = [
            models.UniqueConstraint(fields=["user", "restaurant"], name="uniq_cart_per_user_restaurant"),
        ]

    def __str__(self):
        return f"Cart {self.pk} ({self.user_id} @ {self.restaurant_id})"


class CartItem(models.Model):
    """
    A cart line: one item with one variant/addon selection.
    variants: [{"variant_id", "name", "option_id", "option_name", "price"}]
    addons:   [{"addon_id", "name", "price"}]
    Both are snapshots taken when the line was added.
    """
    cart = models.ForeignKey(Cart, on_delete=models.CASCADE, related_name="items")
    item = models.ForeignKey(Item, on_delete=models.CASCADE, related_name="cart_lines")
    quantity = models.PositiveIntegerField(default=1)
    variants = models.JSONField(default=list, blank=True)
    addons = models.JSONField(default=list, blank=True)
    unit_price = models.DecimalField(max_digits=10, decimal_places=2)
    line_total = models.DecimalField(max_digits=12, decimal_places=2)
    selection_key = models.CharField(max_length=64)

    class Meta:
        ordering = ["id"]
        constraints = [
            models.UniqueConstraint(fields=["cart", "item", "selection_key"], name="uniq_cart_line_selection"),
        ]

    def __str__(self):
        return f"{self.quantity} x {self.item_id}"
