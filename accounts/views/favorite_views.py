from rest_framework.views import APIView
from rest_framework.response import Response
from django.db import DatabaseError
from django.utils import timezone
import logging

from api.exceptions import Conflict, InternalServerError
from authflow.decorators import customer_authentication
from ..models import Restaurant
from ..serializers import RestaurantCardSerializer

logger = logging.getLogger(__name__)


def _published_restaurant(restaurant_id):
    restaurant = Restaurant.objects.filter(pk=restaurant_id, is_published=True).first()
    if not restaurant:
        raise Conflict("Restaurant not found")
    return restaurant


@customer_authentication
class AddFavoriteView(APIView):
    def patch(self, request, restaurant_id):
        restaurant = _published_restaurant(restaurant_id)
        favorites = request.user.favorites

        if favorites.filter(pk=restaurant.pk).exists():
            return Response({"message": "Restaurant already added to favorites"})
        try:
            favorites.add(restaurant)
        except DatabaseError:
            logger.exception(f"Failed adding favorite {restaurant.pk} for user {request.user.pk}")
            raise InternalServerError("Failed to add restaurant to your favorites")
        return Response({"message": "Restaurant added to favorites successfully"})


@customer_authentication
class RemoveFavoriteView(APIView):
    def patch(self, request, restaurant_id):
        restaurant = _published_restaurant(restaurant_id)
        favorites = request.user.favorites

        if not favorites.filter(pk=restaurant.pk).exists():
            return Response({"message": "Restaurant already removed from favorites"})
        try:
            favorites.remove(restaurant)
        except DatabaseError:
            logger.exception(f"Failed removing favorite {restaurant.pk} for user {request.user.pk}")
            raise InternalServerError("Failed to remove restaurant from your favorites")
        return Response({"message": "Restaurant removed from favorites successfully"})


@customer_authentication
class FavoriteListView(APIView):
    def get(self, request):
        restaurants = request.user.favorites.order_by("name")
        data = RestaurantCardSerializer(restaurants, many=True, context={"now": timezone.now()}).data
        return Response({"restaurants": data})
