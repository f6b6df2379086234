import pytest
from django.conf import settings
from django.urls import reverse
from rest_framework.test import APIClient

from accounts.models import Restaurant, User
from menu.tests.factory import PASSWORD


@pytest.mark.django_db
class TestCustomerAuth:
    def test_register(self, api_client):
        payload = {"first_name": "Ada", "last_name": "Lovelace", "email": "ada@example.com", "password": PASSWORD}
        res = api_client.post(reverse("register"), payload, format="json")

        assert res.status_code == 201
        assert User.objects.get(email="ada@example.com").check_password(PASSWORD)

    def test_register_duplicate_email(self, api_client, customer):
        payload = {"first_name": "Ada", "last_name": "Lovelace", "email": customer.email, "password": PASSWORD}
        res = api_client.post(reverse("register"), payload, format="json")

        assert res.status_code == 409
        assert res.data["message"] == "User already exists"

    @pytest.mark.parametrize("password", ["short1!", "alllowercase1!", "NoDigits!!", "NoSpecial123"])
    def test_register_weak_password(self, api_client, password):
        payload = {"first_name": "Ada", "last_name": "Lovelace", "email": "ada@example.com", "password": password}
        res = api_client.post(reverse("register"), payload, format="json")
        assert res.status_code == 400
        assert "password" in res.data["details"]

    def test_login_sets_cookie_and_authenticates(self, api_client, customer):
        res = api_client.post(reverse("login"), {"email": customer.email, "password": PASSWORD}, format="json")

        assert res.status_code == 201
        assert settings.USER_ACCESS_COOKIE in res.cookies

        status_res = api_client.get(reverse("status"))
        assert status_res.status_code == 200
        assert status_res.data["email"] == customer.email

    def test_login_wrong_password(self, api_client, customer):
        res = api_client.post(reverse("login"), {"email": customer.email, "password": "Wr0ng!pass"}, format="json")
        assert res.status_code in (401, 403)
        assert res.data["message"] == "Invalid credentials"

    def test_logout_clears_cookie(self, customer_client):
        res = customer_client.post(reverse("logout"))
        assert res.status_code == 200
        assert res.cookies[settings.USER_ACCESS_COOKIE].value == ""


@pytest.mark.django_db
class TestRestaurantAuth:
    def test_register(self, api_client):
        payload = {"name": "Mama Put", "cuisine": "Nigerian", "email": "mama@example.com", "password": PASSWORD}
        res = api_client.post(reverse("restaurant-register"), payload, format="json")

        assert res.status_code == 201
        restaurant = Restaurant.objects.get(email="mama@example.com")
        assert not restaurant.is_published

    def test_register_duplicate(self, api_client, restaurant):
        payload = {"name": "Mama Put", "cuisine": "Nigerian", "email": restaurant.email, "password": PASSWORD}
        res = api_client.post(reverse("restaurant-register"), payload, format="json")
        assert res.status_code == 409
        assert res.data["message"] == "Restaurant already exists"

    def test_login_token_opens_admin_endpoints(self, restaurant):
        client = APIClient()
        res = client.post(
            reverse("restaurant-login"), {"email": restaurant.email, "password": PASSWORD}, format="json",
        )
        assert res.status_code == 201
        assert settings.RESTAURANT_ACCESS_COOKIE in res.cookies

        status_res = client.get(reverse("restaurant-status"))
        assert status_res.status_code == 200
        assert status_res.data["id"] == restaurant.pk

    def test_customer_token_is_not_a_restaurant_token(self, api_client, customer):
        api_client.post(reverse("login"), {"email": customer.email, "password": PASSWORD}, format="json")
        res = api_client.get(reverse("restaurant-status"))
        assert res.status_code in (401, 403)

    def test_publish(self, restaurant_factory):
        restaurant = restaurant_factory(is_published=False)
        client = APIClient()
        client.force_authenticate(user=restaurant)
        payload = {
            "name": "Mama Put",
            "description": "Home cooking",
            "cuisine": "Nigerian",
            "address": {"street": "1 Broad St", "city": "Lagos", "state": "Lagos", "zip_code": "100001"},
            "opening_hours": {day: {"open": "08:00", "close": "22:00"} for day in (
                "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday",
            )},
            "phone_number": "+2348000000000",
        }

        res = client.post(reverse("restaurant-publish"), payload, format="json")

        assert res.status_code == 201
        restaurant.refresh_from_db()
        assert restaurant.is_published
        assert restaurant.street == "1 Broad St"
        assert restaurant.opening_hours["monday"] == {"open": "08:00", "close": "22:00"}

    def test_opening_hours_format(self, restaurant_client):
        hours = {day: {"open": "8am", "close": "22:00"} for day in (
            "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday",
        )}
        res = restaurant_client.put(reverse("restaurant-opening-hours"), hours, format="json")
        assert res.status_code == 400


@pytest.mark.django_db
class TestFavorites:
    def test_add_list_remove(self, customer_client, customer, restaurant):
        url = reverse("add-favorite", args=[restaurant.pk])
        assert customer_client.patch(url).data["message"] == "Restaurant added to favorites successfully"
        assert customer_client.patch(url).data["message"] == "Restaurant already added to favorites"

        res = customer_client.get(reverse("get-favorites"))
        assert [r["id"] for r in res.data["restaurants"]] == [restaurant.pk]

        url = reverse("remove-favorite", args=[restaurant.pk])
        assert customer_client.patch(url).data["message"] == "Restaurant removed from favorites successfully"
        assert customer_client.patch(url).data["message"] == "Restaurant already removed from favorites"
        assert not customer.favorites.exists()

    def test_unpublished_restaurant(self, customer_client, restaurant_factory):
        hidden = restaurant_factory(is_published=False)
        res = customer_client.patch(reverse("add-favorite", args=[hidden.pk]))
        assert res.status_code == 409
        assert res.data["message"] == "Restaurant not found"
