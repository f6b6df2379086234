from rest_framework.views import APIView
from rest_framework.response import Response
from django.db.models import Count, Q
from django.utils import timezone

from api.exceptions import Conflict
from accounts.models import Restaurant
from accounts.serializers import RestaurantCardSerializer, RestaurantDetailSerializer
from authflow.decorators import customer_authentication
from .models import Category, Item
from .serializers import CustomerItemSerializer

SORTS = {
    "name": ("name",),
    "newest": ("-created_at",),
}


def published_restaurant(restaurant_id):
    restaurant = Restaurant.objects.filter(pk=restaurant_id).first()
    if not restaurant:
        raise Conflict("Restaurant not found")
    if not restaurant.is_published:
        raise Conflict("Restaurant is not published")
    return restaurant


@customer_authentication
class CuisineListView(APIView):
    def get(self, request):
        restaurants = Restaurant.objects.filter(is_published=True)
        query = (request.query_params.get("query") or "").strip()
        if query:
            restaurants = restaurants.filter(cuisine__icontains=query)

        cuisines = restaurants.order_by("cuisine").values_list("cuisine", flat=True).distinct()
        return Response({"cuisines": list(cuisines)})


@customer_authentication
class RestaurantListView(APIView):
    """
    GET /api/user/get-filtered-restaurants/?cuisine=&q=&sort=name|newest
    """

    def get(self, request):
        restaurants = Restaurant.objects.filter(is_published=True)

        cuisine = request.query_params.get("cuisine")
        if cuisine:
            restaurants = restaurants.filter(cuisine__iexact=cuisine)

        query = (request.query_params.get("q") or "").strip()
        if query:
            restaurants = restaurants.filter(
                Q(name__icontains=query) | Q(cuisine__icontains=query) | Q(description__icontains=query)
            )

        restaurants = restaurants.order_by(*SORTS.get(request.query_params.get("sort"), ("name",)))
        data = RestaurantCardSerializer(restaurants, many=True, context={"now": timezone.now()}).data
        return Response({"restaurants": data})


@customer_authentication
class RestaurantDetailView(APIView):
    def get(self, request, restaurant_id):
        restaurant = published_restaurant(restaurant_id)
        data = RestaurantDetailSerializer(restaurant, context={"now": timezone.now()}).data
        return Response({"restaurant": data})


@customer_authentication
class RestaurantCategoriesView(APIView):
    def get(self, request, restaurant_id):
        restaurant = published_restaurant(restaurant_id)
        categories = Category.objects.filter(restaurant=restaurant).annotate(item_count=Count("items"))
        return Response({
            "categories": [
                {"id": c.pk, "name": c.name, "item_count": c.item_count} for c in categories
            ]
        })


@customer_authentication
class RestaurantItemsView(APIView):
    def get(self, request, restaurant_id):
        restaurant = published_restaurant(restaurant_id)
        items = (
            Item.objects.for_restaurant(restaurant)
            .select_related("category", "restaurant")
            .prefetch_related("variants__options", "addons")
        )

        category_id = request.query_params.get("category_id")
        if category_id:
            items = items.filter(category_id=category_id)

        data = CustomerItemSerializer(items, many=True, context={"now": timezone.now()}).data
        return Response({"items": data})
