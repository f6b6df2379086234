"""
Sale pricing.

Every place that shows or charges a price (menu listing, cart lines, cart
totals) goes through these functions. They are pure: sources are model
instances or plain dicts carrying the sale columns
(on_sale, sale_type, sale_amount, sale_start_date, sale_end_date).
"""
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from django.utils import timezone

CENT = Decimal("0.01")
ZERO = Decimal("0")

RESTAURANT = "restaurant"
ITEM = "item"


@dataclass(frozen=True)
class EffectivePrice:
    amount: Decimal
    original_amount: Decimal
    discount_source: str | None = None

    @property
    def is_discounted(self) -> bool:
        return self.discount_source is not None


def _get(source, name, default=None):
    if isinstance(source, dict):
        return source.get(name, default)
    return getattr(source, name, default)


def to_money(value) -> Decimal:
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def calculate_item_total(base_price, quantity, variants=(), addons=()) -> Decimal:
    """(base + variant prices + addon prices) * quantity, no discount."""
    unit = Decimal(str(base_price))
    unit += sum((Decimal(str(_get(v, "price", 0))) for v in variants or ()), ZERO)
    unit += sum((Decimal(str(_get(a, "price", 0))) for a in addons or ()), ZERO)
    return to_money(unit * int(quantity))


def apply_discount(total, sale_type, sale_amount) -> Decimal:
    total = Decimal(str(total))
    amount = Decimal(str(sale_amount or 0))

    if sale_type == "percentage":
        total -= total * amount / Decimal(100)
    elif sale_type == "fixed":
        total -= amount

    return to_money(max(total, ZERO))


def sale_started(source, now=None) -> bool:
    """
    on_sale and the start date (if any) has passed. The end date is not
    considered, this drives the "On Sale" / "Starting Soon" badge.
    """
    if source is None or not _get(source, "on_sale"):
        return False
    start = _get(source, "sale_start_date")
    return start is None or start <= (now or timezone.now())


def sale_active(source, now=None) -> bool:
    now = now or timezone.now()
    if not sale_started(source, now):
        return False
    end = _get(source, "sale_end_date")
    return end is None or end > now


def _discounted(total, source):
    return apply_discount(total, _get(source, "sale_type"), _get(source, "sale_amount"))


def calculate_item_total_with_sale(line, now=None) -> Decimal:
    """Line total with the item-level sale applied. Restaurant sales are ignored here."""
    total = to_money(_get(line, "line_total"))
    item = _get(line, "item")
    if not sale_active(item, now):
        return total
    return _discounted(total, item)


def resolve_effective_price(item, restaurant, now=None, amount=None) -> EffectivePrice:
    """
    Price of `amount` (defaults to the item base price) for `item` right now.
    An active restaurant sale wins over the item's own sale.
    """
    now = now or timezone.now()
    original = to_money(_get(item, "price") if amount is None else amount)

    if sale_active(restaurant, now):
        return EffectivePrice(_discounted(original, restaurant), original, RESTAURANT)
    if sale_active(item, now):
        return EffectivePrice(_discounted(original, item), original, ITEM)
    return EffectivePrice(original, original)


def calculate_cart_subtotal(lines, restaurant, now=None) -> Decimal:
    """
    With an active restaurant sale the discount is applied once to the sum
    of line totals; otherwise each line carries its own item sale.
    """
    now = now or timezone.now()
    lines = list(lines)

    if sale_active(restaurant, now):
        base = sum((to_money(_get(line, "line_total")) for line in lines), ZERO)
        return _discounted(base, restaurant)

    return to_money(sum((calculate_item_total_with_sale(line, now) for line in lines), ZERO))
