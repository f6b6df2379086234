import pytest
from datetime import timedelta
from decimal import Decimal
from django.core.management import call_command
from django.urls import reverse
from django.utils import timezone
from rest_framework.exceptions import NotFound

from api.exceptions import Conflict
from sales.serializers import SaleSerializer
from sales.services import SaleService
from sales.tasks import expire_finished_sales

PERCENT_20 = {"sale_type": "percentage", "sale_amount": Decimal("20")}
FIXED_5 = {"sale_type": "fixed", "sale_amount": Decimal("5")}


@pytest.mark.django_db
class TestItemSale:
    def test_apply_and_remove(self, restaurant, item):
        SaleService.apply_item_sale(restaurant, item.pk, PERCENT_20)
        item.refresh_from_db()
        assert item.on_sale
        assert item.sale_type == "percentage"
        assert item.sale_amount == Decimal("20.00")

        SaleService.remove_item_sale(restaurant, item.pk)
        item.refresh_from_db()
        assert not item.on_sale
        assert item.sale_type is None and item.sale_amount is None
        assert item.sale_start_date is None and item.sale_end_date is None

    def test_refused_while_menu_on_sale(self, restaurant, item):
        SaleService.apply_menu_sale(restaurant, FIXED_5)
        with pytest.raises(Conflict, match="Restaurant is already on sale"):
            SaleService.apply_item_sale(restaurant, item.pk, PERCENT_20)

    def test_other_restaurants_item_not_found(self, restaurant, item_factory):
        foreign = item_factory()
        with pytest.raises(NotFound):
            SaleService.apply_item_sale(restaurant, foreign.pk, PERCENT_20)


@pytest.mark.django_db
class TestMenuSale:
    def test_menu_sale_clears_item_sales(self, restaurant, item, item_factory, category):
        other = item_factory(restaurant=restaurant, category=category)
        SaleService.apply_item_sale(restaurant, item.pk, PERCENT_20)
        SaleService.apply_item_sale(restaurant, other.pk, FIXED_5)

        SaleService.apply_menu_sale(restaurant, PERCENT_20)

        restaurant.refresh_from_db()
        assert restaurant.on_sale
        assert not restaurant.items.filter(on_sale=True).exists()

    def test_second_menu_sale_conflicts(self, restaurant):
        SaleService.apply_menu_sale(restaurant, FIXED_5)
        with pytest.raises(Conflict, match="Menu is already on sale"):
            SaleService.apply_menu_sale(restaurant, PERCENT_20)

    def test_remove_menu_sale(self, restaurant):
        SaleService.apply_menu_sale(restaurant, FIXED_5)
        SaleService.remove_menu_sale(restaurant)
        restaurant.refresh_from_db()
        assert not restaurant.on_sale
        assert restaurant.sale_amount is None


@pytest.mark.django_db
class TestSummaryAndExpiry:
    def test_on_sale_summary_counts(self, restaurant, category, item_factory):
        now = timezone.now()
        common = dict(restaurant=restaurant, category=category, on_sale=True, sale_type="fixed", sale_amount=1)
        item_factory(**common)  # active, open ended
        item_factory(**common, sale_end_date=now + timedelta(hours=3))  # active, expiring soon
        item_factory(**common, sale_start_date=now + timedelta(days=1))  # upcoming
        item_factory(restaurant=restaurant, category=category)  # not on sale

        summary = SaleService.on_sale_summary(restaurant, now)

        assert summary.total_sales == 3
        assert summary.active_sales == 2
        assert summary.expiring_soon_sales == 1
        assert summary.upcoming_sales == 1
        assert SaleService.not_on_sale_items(restaurant).count() == 1

    def test_expire_finished_sales(self, restaurant_factory, item_factory):
        now = timezone.now()
        ended = item_factory(on_sale=True, sale_type="fixed", sale_amount=1, sale_end_date=now - timedelta(minutes=1))
        running = item_factory(on_sale=True, sale_type="fixed", sale_amount=1, sale_end_date=now + timedelta(days=1))
        ended_menu = restaurant_factory(on_sale=True, sale_type="percentage", sale_amount=10, sale_end_date=now)

        expired = SaleService.expire_finished_sales(now)

        assert (expired.items, expired.restaurants) == (1, 1)
        ended.refresh_from_db()
        running.refresh_from_db()
        ended_menu.refresh_from_db()
        assert not ended.on_sale and ended.sale_end_date is None
        assert running.on_sale
        assert not ended_menu.on_sale

    def test_task_and_command_run_cleanup(self, item_factory):
        past = timezone.now() - timedelta(hours=1)
        first = item_factory(on_sale=True, sale_type="fixed", sale_amount=1, sale_end_date=past)

        assert expire_finished_sales() == {"items": 1, "restaurants": 0}

        second = item_factory(on_sale=True, sale_type="fixed", sale_amount=1, sale_end_date=past)
        call_command("expire_sales")
        first.refresh_from_db()
        second.refresh_from_db()
        assert not first.on_sale and not second.on_sale


class TestSaleSerializer:
    def _errors(self, **data):
        serializer = SaleSerializer(data=data)
        assert not serializer.is_valid()
        return serializer.errors

    def test_valid_percentage(self):
        assert SaleSerializer(data={"sale_type": "percentage", "sale_amount": "25"}).is_valid()

    def test_bad_type(self):
        assert "sale_type" in self._errors(sale_type="bogo", sale_amount="5")

    def test_fixed_must_be_positive(self):
        assert "sale_amount" in self._errors(sale_type="fixed", sale_amount="0")

    @pytest.mark.parametrize("amount", ["0", "100.5", "150"])
    def test_percentage_range(self, amount):
        assert "sale_amount" in self._errors(sale_type="percentage", sale_amount=amount)

    def test_start_date_in_future(self):
        past = (timezone.now() - timedelta(hours=1)).isoformat()
        assert "sale_start_date" in self._errors(sale_type="fixed", sale_amount="5", sale_start_date=past)

    def test_end_after_start(self):
        start = timezone.now() + timedelta(days=2)
        errors = self._errors(
            sale_type="fixed", sale_amount="5",
            sale_start_date=start.isoformat(), sale_end_date=(start - timedelta(days=1)).isoformat(),
        )
        assert "sale_end_date" in errors

    def test_start_needs_end(self):
        start = (timezone.now() + timedelta(days=1)).isoformat()
        errors = self._errors(sale_type="fixed", sale_amount="5", sale_start_date=start)
        assert "sale_end_date" in errors


@pytest.mark.django_db
class TestSaleEndpoints:
    def test_apply_item_sale_endpoint(self, restaurant_client, item):
        url = reverse("apply-item-sale", args=[item.pk])
        res = restaurant_client.patch(url, {"sale_type": "fixed", "sale_amount": "2.50"}, format="json")
        assert res.status_code == 201
        assert res.data["item"]["on_sale"] is True

    def test_apply_menu_sale_twice(self, restaurant_client):
        url = reverse("apply-menu-sale")
        payload = {"sale_type": "percentage", "sale_amount": "10"}
        assert restaurant_client.patch(url, payload, format="json").status_code == 201

        res = restaurant_client.patch(url, payload, format="json")
        assert res.status_code == 409
        assert res.data["message"] == "Menu is already on sale"

    def test_on_sale_items_endpoint(self, restaurant_client, restaurant, item):
        SaleService.apply_item_sale(restaurant, item.pk, PERCENT_20)
        res = restaurant_client.get(reverse("get-on-sale-items"))
        assert res.status_code == 200
        assert res.data["total_sales"] == 1
        assert res.data["items"][0]["title"] == item.title

    def test_customer_cannot_manage_sales(self, customer_client):
        res = customer_client.patch(reverse("remove-menu-sale"), format="json")
        assert res.status_code == 403
