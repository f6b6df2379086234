import hashlib
import json
import logging
from decimal import Decimal

from django.conf import settings
from django.db import transaction
from django.db.models import F
from django.utils import timezone

from accounts.hours import is_restaurant_closed
from accounts.models import Restaurant, User
from api.exceptions import Conflict, database_errors
from menu.models import Item
from sales.pricing import calculate_item_total, calculate_cart_subtotal
from .models import Cart, CartItem

logger = logging.getLogger(__name__)

NORMALIZED = "normalized"
POSITIONAL = "positional"


def selection_key(item_id, variants, addons, matching=None) -> str:
    """
    Hash identifying a cart line. Two additions land on the same line iff
    their keys match: same item and same (option id, name, option name,
    price) per variant and (addon id, name, price) per addon.

    "normalized" sorts the selection by id first so submission order does
    not matter; "positional" compares the lists as submitted.
    """
    matching = matching or settings.CART_LINE_MATCHING
    if matching == NORMALIZED:
        variants = sorted(variants, key=lambda v: (v["variant_id"], v["option_id"]))
        addons = sorted(addons, key=lambda a: a["addon_id"])

    payload = {
        "item": item_id,
        "variants": [[v["option_id"], v["name"], v["option_name"], str(v["price"])] for v in variants],
        "addons": [[a["addon_id"], a["name"], str(a["price"])] for a in addons],
    }
    raw = json.dumps(payload, separators=(",", ":"), sort_keys=True)
    return hashlib.sha256(raw.encode()).hexdigest()


def resolve_selection(item: Item, selected_variants, selected_addons, matching=None):
    """
    Turn the client's {variant_id, option_id} / {addon_id} picks into snapshots
    built from the item's stored variants and addons.
    """
    matching = matching or settings.CART_LINE_MATCHING
    variants = {v.pk: v for v in item.variants.prefetch_related("options")}
    addons = {a.pk: a for a in item.addons.all()}

    variant_snapshots = []
    picked = set()
    for choice in selected_variants or []:
        variant = variants.get(choice["variant_id"])
        if variant is None:
            raise Conflict("Invalid variant for this item")
        if not variant.is_available:
            raise Conflict(f"{variant.name} is not available")
        if variant.pk in picked:
            raise Conflict(f"Only one option can be selected for {variant.name}")

        option = next((o for o in variant.options.all() if o.pk == choice["option_id"]), None)
        if option is None:
            raise Conflict(f"Invalid option for {variant.name}")

        picked.add(variant.pk)
        variant_snapshots.append({
            "variant_id": variant.pk,
            "name": variant.name,
            "option_id": option.pk,
            "option_name": option.name,
            "price": str(option.price),
        })

    missing = [v.name for v in variants.values() if v.is_required and v.is_available and v.pk not in picked]
    if missing:
        raise Conflict(f"Missing required variant: {', '.join(missing)}")

    addon_snapshots = []
    for choice in selected_addons or []:
        addon = addons.get(choice["addon_id"])
        if addon is None:
            raise Conflict("Invalid addon for this item")
        if any(a["addon_id"] == addon.pk for a in addon_snapshots):
            raise Conflict(f"{addon.name} selected more than once")
        addon_snapshots.append({"addon_id": addon.pk, "name": addon.name, "price": str(addon.price)})

    if matching == NORMALIZED:
        variant_snapshots.sort(key=lambda v: (v["variant_id"], v["option_id"]))
        addon_snapshots.sort(key=lambda a: a["addon_id"])
    return variant_snapshots, addon_snapshots


def _recalculate_total(cart_id):
    total = Decimal("0")
    for line_total in CartItem.objects.filter(cart_id=cart_id).values_list("line_total", flat=True):
        total += line_total
    Cart.objects.filter(pk=cart_id).update(total_price=total, updated_at=timezone.now())


class CartService:
    @staticmethod
    def _published_restaurant(restaurant_id) -> Restaurant:
        restaurant = Restaurant.objects.filter(pk=restaurant_id, is_published=True).first()
        if not restaurant:
            raise Conflict("Restaurant not found")
        return restaurant

    @staticmethod
    def _check_user(user):
        if user is None or not User.objects.filter(pk=user.pk, is_active=True).exists():
            raise Conflict("User not found")

    @staticmethod
    def _owned_cart(user, cart_id, lock=False) -> Cart:
        carts = Cart.objects.select_for_update() if lock else Cart.objects.select_related("restaurant")
        cart = carts.filter(pk=cart_id, user=user).first()
        if not cart:
            raise Conflict("Cart not found")
        return cart

    @classmethod
    @database_errors("Failed to add item to your cart")
    @transaction.atomic
    def add_item(cls, user, restaurant_id, item_id, quantity=1, selected_variants=None, selected_addons=None):
        """
        Add `quantity` of an item with the given selection. An existing line
        with the same selection is incremented, otherwise a new line is
        created. The cart row is locked for the duration so concurrent adds
        for the same cart serialize.
        """
        restaurant = cls._published_restaurant(restaurant_id)
        cls._check_user(user)

        item = Item.objects.filter(pk=item_id, restaurant=restaurant).first()
        if not item:
            raise Conflict("Invalid item for this restaurant")
        if not item.is_available:
            raise Conflict("Item is not available")

        variants, addons = resolve_selection(item, selected_variants, selected_addons)
        unit_price = calculate_item_total(item.price, 1, variants, addons)
        item_total = calculate_item_total(item.price, quantity, variants, addons)
        key = selection_key(item.pk, variants, addons)

        cart, created = Cart.objects.get_or_create(user=user, restaurant=restaurant)
        if created:
            logger.info(f"Cart {cart.pk} created for user {user.pk} at restaurant {restaurant.pk}")
        cart = Cart.objects.select_for_update().get(pk=cart.pk)

        updated = CartItem.objects.filter(cart=cart, item=item, selection_key=key).update(
            quantity=F("quantity") + quantity,
            line_total=F("line_total") + item_total,
        )
        if not updated:
            CartItem.objects.create(
                cart=cart,
                item=item,
                quantity=quantity,
                variants=variants,
                addons=addons,
                unit_price=unit_price,
                line_total=item_total,
                selection_key=key,
            )

        Cart.objects.filter(pk=cart.pk).update(
            total_price=F("total_price") + item_total,
            updated_at=timezone.now(),
        )
        cart.refresh_from_db()
        return cart

    @classmethod
    @database_errors("Failed to remove item from your cart")
    @transaction.atomic
    def remove_item(cls, user, restaurant_id, item_id):
        """
        Drop every line of `item_id` from the user's cart at this restaurant,
        whatever the selection. Returns None when the cart ends up empty and
        is deleted.
        """
        cls._check_user(user)
        if not Restaurant.objects.filter(pk=restaurant_id).exists():
            raise Conflict("Restaurant not found")
        if not Item.objects.filter(pk=item_id, restaurant_id=restaurant_id).exists():
            raise Conflict("Invalid item for this restaurant")

        cart = Cart.objects.select_for_update().filter(user=user, restaurant_id=restaurant_id).first()
        if not cart:
            raise Conflict("Cart not found")

        lines = CartItem.objects.filter(cart=cart, item_id=item_id)
        removed = sum((line.line_total for line in lines), Decimal("0"))
        deleted, _ = lines.delete()
        if not deleted:
            raise Conflict("Item not found in cart")

        if not cart.items.exists():
            cart.delete()
            logger.info(f"Cart for user {user.pk} at restaurant {restaurant_id} emptied and deleted")
            return None

        Cart.objects.filter(pk=cart.pk).update(
            total_price=F("total_price") - removed,
            updated_at=timezone.now(),
        )
        cart.refresh_from_db()
        return cart

    @classmethod
    @database_errors("Failed to update item quantity from your cart")
    @transaction.atomic
    def update_quantity(cls, user, cart_id, item_id, quantity, line_id=None):
        """
        Set the quantity of one line of the item and recompute its total.
        `line_id` picks the line when the item sits in the cart with several
        selections; without it the oldest line of the item is updated.
        """
        if quantity is None or int(quantity) <= 0:
            raise Conflict("Quantity must be greater than 0")
        cls._check_user(user)

        cart = cls._owned_cart(user, cart_id, lock=True)
        lines = CartItem.objects.filter(cart=cart, item_id=item_id)
        if line_id is not None:
            lines = lines.filter(pk=line_id)
        line = lines.order_by("id").first()
        if not line:
            raise Conflict("Item not found in cart")

        line.quantity = int(quantity)
        line.line_total = line.unit_price * line.quantity
        line.save(update_fields=["quantity", "line_total"])

        _recalculate_total(cart.pk)
        cart.refresh_from_db()
        return cart

    @classmethod
    @database_errors("Failed to delete your cart")
    def delete_cart(cls, user, cart_id):
        cls._check_user(user)
        deleted, _ = Cart.objects.filter(pk=cart_id, user=user).delete()
        if not deleted:
            raise Conflict("Cart not found")

    @staticmethod
    @database_errors("Failed to get your carts")
    def user_carts(user, now=None):
        """Summaries of every cart the user holds, priced with current sales."""
        now = now or timezone.now()
        carts = (
            Cart.objects.filter(user=user)
            .select_related("restaurant")
            .prefetch_related("items__item")
        )

        summaries = []
        for cart in carts:
            lines = list(cart.items.all())
            restaurant = cart.restaurant
            summaries.append({
                "id": cart.pk,
                "restaurant": {
                    "id": restaurant.pk,
                    "name": restaurant.name,
                    "logo": restaurant.logo,
                    "is_closed": restaurant.is_closed,
                },
                "items_count": len(lines),
                "total_price": calculate_cart_subtotal(lines, restaurant, now),
                "is_auto_closed": is_restaurant_closed(restaurant, now),
                "created_at": cart.created_at,
            })
        return summaries

    @classmethod
    @database_errors("Failed to get your cart")
    def get_cart(cls, user, cart_id, now=None) -> dict:
        now = now or timezone.now()
        cart = cls._owned_cart(user, cart_id)
        lines = list(cart.items.select_related("item"))
        restaurant = cart.restaurant
        closed = is_restaurant_closed(restaurant, now)

        return {
            "cart": cart,
            "lines": lines,
            "restaurant": restaurant,
            "subtotal": calculate_cart_subtotal(lines, restaurant, now),
            "is_auto_closed": closed,
            "can_checkout": restaurant.is_published and not closed,
        }

    @staticmethod
    def release_item(item_id) -> int:
        """
        Take every line of `item_id` out of the carts holding it, ahead of the
        item being deleted. Totals drop by the removed lines and carts left
        empty are deleted. Runs in the caller's transaction; returns the
        number of carts touched.
        """
        cart_ids = set(CartItem.objects.filter(item_id=item_id).values_list("cart_id", flat=True))
        if not cart_ids:
            return 0

        carts = list(Cart.objects.select_for_update().filter(pk__in=cart_ids).order_by("pk"))
        CartItem.objects.filter(cart_id__in=cart_ids, item_id=item_id).delete()

        for cart in carts:
            if cart.items.exists():
                _recalculate_total(cart.pk)
            else:
                logger.info(f"Cart {cart.pk} emptied by item {item_id} deletion and deleted")
                cart.delete()
        return len(carts)
