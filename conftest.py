import pytest
from decimal import Decimal
from pytest_factoryboy import register
from rest_framework.test import APIClient

from menu.tests.factory import (
    RestaurantFactory, UserFactory, CategoryFactory, ItemFactory,
    VariantFactory, VariantOptionFactory, AddonFactory,
)

# Register all factories as pytest fixtures
register(RestaurantFactory)
register(UserFactory)
register(CategoryFactory)
register(ItemFactory)
register(VariantFactory)
register(VariantOptionFactory)
register(AddonFactory)


@pytest.fixture(autouse=True)
def fast_password_hasher(settings):
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def restaurant(restaurant_factory):
    """Published, always-open restaurant"""
    return restaurant_factory(name="Test Restaurant")


@pytest.fixture
def customer(user_factory):
    return user_factory(email="customer@example.com")


@pytest.fixture
def category(category_factory, restaurant):
    return category_factory(restaurant=restaurant, name="Mains")


@pytest.fixture
def item(item_factory, restaurant, category):
    """Base price 10"""
    return item_factory(restaurant=restaurant, category=category, title="Margherita", price=Decimal("10.00"))


@pytest.fixture
def size_variant(variant_factory, variant_option_factory, item):
    """Size: Small (+0), Large (+2)"""
    variant = variant_factory(item=item, name="Size", is_required=False)
    small = variant_option_factory(variant=variant, name="Small", price=Decimal("0.00"))
    large = variant_option_factory(variant=variant, name="Large", price=Decimal("2.00"))
    return variant, small, large


@pytest.fixture
def crust_variant(variant_factory, variant_option_factory, item):
    """Crust: Thin (+1), Thick (+1.50)"""
    variant = variant_factory(item=item, name="Crust", is_required=False)
    thin = variant_option_factory(variant=variant, name="Thin", price=Decimal("1.00"))
    thick = variant_option_factory(variant=variant, name="Thick", price=Decimal("1.50"))
    return variant, thin, thick


@pytest.fixture
def cheese_addon(addon_factory, item):
    return addon_factory(item=item, name="Extra Cheese", price=Decimal("1.00"))


@pytest.fixture
def customer_client(api_client, customer):
    api_client.force_authenticate(user=customer)
    return api_client


@pytest.fixture
def restaurant_client(restaurant):
    client = APIClient()
    client.force_authenticate(user=restaurant)
    return client
