import pytest
from datetime import datetime, timedelta, timezone as dt_timezone
from decimal import Decimal

from sales.pricing import (
    EffectivePrice, apply_discount, calculate_cart_subtotal, calculate_item_total,
    calculate_item_total_with_sale, resolve_effective_price, sale_active, sale_started,
)

NOW = datetime(2025, 6, 2, 12, 0, tzinfo=dt_timezone.utc)


def on_sale(sale_type, amount, start=None, end=None, price="100.00"):
    return {
        "price": Decimal(price),
        "on_sale": True,
        "sale_type": sale_type,
        "sale_amount": Decimal(str(amount)),
        "sale_start_date": start,
        "sale_end_date": end,
    }


NOT_ON_SALE = {"price": Decimal("100.00"), "on_sale": False}


class TestItemTotal:
    def test_base_plus_variants_plus_addons_times_quantity(self):
        total = calculate_item_total(10, 2, [{"price": 2}], [{"price": 1}])
        assert total == Decimal("26.00")

    @pytest.mark.parametrize("quantity", [1, 2, 3, 7])
    def test_linear_in_quantity(self, quantity):
        variants = [{"price": "1.25"}, {"price": "0.50"}]
        addons = [{"price": "0.99"}]
        single = calculate_item_total("8.40", 1, variants, addons)
        assert calculate_item_total("8.40", quantity, variants, addons) == single * quantity

    def test_no_selection(self):
        assert calculate_item_total(Decimal("4.50"), 3) == Decimal("13.50")


class TestApplyDiscount:
    def test_percentage(self):
        assert apply_discount(100, "percentage", 20) == Decimal("80.00")

    def test_full_percentage_is_free(self):
        assert apply_discount(100, "percentage", 100) == Decimal("0.00")

    def test_fixed(self):
        assert apply_discount(26, "fixed", 5) == Decimal("21.00")

    @pytest.mark.parametrize("amount", [26, 50, 10_000])
    def test_fixed_never_goes_negative(self, amount):
        assert apply_discount(26, "fixed", amount) == Decimal("0.00")

    def test_unknown_type_leaves_total(self):
        assert apply_discount(26, None, 5) == Decimal("26.00")


class TestSaleStarted:
    def test_no_start_date_started_immediately(self):
        assert sale_started(on_sale("fixed", 5), NOW)

    def test_future_start_date(self):
        source = on_sale("fixed", 5, start=NOW + timedelta(hours=1))
        assert not sale_started(source, NOW)
        assert sale_started(source, NOW + timedelta(hours=1))

    def test_not_on_sale(self):
        assert not sale_started(NOT_ON_SALE, NOW)

    def test_ignores_end_date(self):
        ended = on_sale("fixed", 5, end=NOW - timedelta(days=1))
        assert sale_started(ended, NOW)
        assert not sale_active(ended, NOW)

    def test_active_until_end(self):
        source = on_sale("fixed", 5, end=NOW + timedelta(minutes=1))
        assert sale_active(source, NOW)
        assert not sale_active(source, NOW + timedelta(minutes=1))


class TestItemTotalWithSale:
    def test_percentage_item_sale(self):
        line = {"item": on_sale("percentage", 20), "line_total": Decimal("100.00")}
        assert calculate_item_total_with_sale(line, NOW) == Decimal("80.00")

    def test_not_on_sale_returns_plain_total(self):
        line = {"item": NOT_ON_SALE, "line_total": Decimal("26.00")}
        assert calculate_item_total_with_sale(line, NOW) == Decimal("26.00")

    @pytest.mark.parametrize("sale_type,amount", [("fixed", 500), ("percentage", 100)])
    def test_floored_at_zero(self, sale_type, amount):
        line = {"item": on_sale(sale_type, amount), "line_total": Decimal("26.00")}
        assert calculate_item_total_with_sale(line, NOW) == Decimal("0.00")

    def test_upcoming_sale_not_applied(self):
        line = {"item": on_sale("percentage", 50, start=NOW + timedelta(days=1)), "line_total": Decimal("40.00")}
        assert calculate_item_total_with_sale(line, NOW) == Decimal("40.00")


class TestResolveEffectivePrice:
    def test_restaurant_sale_takes_precedence(self):
        item = on_sale("fixed", 30)
        restaurant = on_sale("percentage", 10)
        price = resolve_effective_price(item, restaurant, NOW)
        assert price == EffectivePrice(Decimal("90.00"), Decimal("100.00"), "restaurant")

    def test_item_sale_when_restaurant_sale_not_started(self):
        item = on_sale("fixed", 30)
        restaurant = on_sale("percentage", 10, start=NOW + timedelta(hours=2))
        price = resolve_effective_price(item, restaurant, NOW)
        assert price.amount == Decimal("70.00")
        assert price.discount_source == "item"

    def test_no_discount(self):
        price = resolve_effective_price(NOT_ON_SALE, {"on_sale": False}, NOW)
        assert price.amount == price.original_amount == Decimal("100.00")
        assert not price.is_discounted

    def test_explicit_amount(self):
        price = resolve_effective_price(on_sale("percentage", 50), None, NOW, amount="26.00")
        assert price.amount == Decimal("13.00")


class TestCartSubtotal:
    def test_restaurant_fixed_sale_applied_once(self):
        lines = [
            {"item": NOT_ON_SALE, "line_total": Decimal("20.00")},
            {"item": NOT_ON_SALE, "line_total": Decimal("6.00")},
        ]
        restaurant = on_sale("fixed", 5)
        assert calculate_cart_subtotal(lines, restaurant, NOW) == Decimal("21.00")

    def test_item_sales_applied_per_line(self):
        lines = [
            {"item": on_sale("fixed", 5), "line_total": Decimal("20.00")},
            {"item": on_sale("fixed", 5), "line_total": Decimal("6.00")},
        ]
        assert calculate_cart_subtotal(lines, {"on_sale": False}, NOW) == Decimal("16.00")

    def test_empty_cart(self):
        assert calculate_cart_subtotal([], {"on_sale": False}, NOW) == Decimal("0.00")
