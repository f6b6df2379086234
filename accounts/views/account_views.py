from rest_framework.permissions import AllowAny
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from rest_framework.exceptions import AuthenticationFailed
from django.conf import settings
import logging

from api.exceptions import Conflict
from authflow.decorators import restaurant_authentication
from authflow.services import make_restaurant_token, set_access_cookie, clear_access_cookie
from ..models import Restaurant
from ..serializers import (
    RegisterRestaurantSerializer, LoginSerializer, RestaurantSerializer,
    PublishRestaurantSerializer, OpeningHoursSerializer,
)

logger = logging.getLogger(__name__)


class RegisterRestaurantView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = RegisterRestaurantSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        if Restaurant.objects.filter(email__iexact=serializer.validated_data["email"]).exists():
            raise Conflict("Restaurant already exists")

        restaurant = serializer.save()
        logger.info(f"Restaurant {restaurant.pk} registered")
        return Response({"message": "Restaurant registered successfully"}, status=status.HTTP_201_CREATED)


class RestaurantLogInView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        restaurant = Restaurant.objects.filter(email__iexact=serializer.validated_data["email"]).first()
        if not restaurant or not restaurant.check_password(serializer.validated_data["password"]):
            raise AuthenticationFailed("Invalid credentials")

        response = Response({"message": "Restaurant Logged successfully"}, status=status.HTTP_201_CREATED)
        return set_access_cookie(response, settings.RESTAURANT_ACCESS_COOKIE, make_restaurant_token(restaurant))


@restaurant_authentication
class RestaurantLogoutView(APIView):
    def post(self, request):
        response = Response({"message": "Restaurant Logged out successfully"})
        return clear_access_cookie(response, settings.RESTAURANT_ACCESS_COOKIE)


@restaurant_authentication
class RestaurantStatusView(APIView):
    def get(self, request):
        return Response(RestaurantSerializer(request.user).data)


@restaurant_authentication
class PublishRestaurantView(APIView):
    """
    POST /api/admin-restaurant/publish/
    Fills in the public profile and makes the restaurant visible in the marketplace.
    """

    def post(self, request):
        serializer = PublishRestaurantSerializer(instance=request.user, data=request.data)
        serializer.is_valid(raise_exception=True)
        restaurant = serializer.save(is_published=True)
        logger.info(f"Restaurant {restaurant.pk} published")
        return Response(
            {"message": "Restaurant published successfully", "restaurant": RestaurantSerializer(restaurant).data},
            status=status.HTTP_201_CREATED,
        )


@restaurant_authentication
class ManageRestaurantView(APIView):
    """
    PUT /api/admin-restaurant/manage/
    Partial profile edit, publish state untouched.
    """

    def put(self, request):
        serializer = PublishRestaurantSerializer(instance=request.user, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        restaurant = serializer.save()
        return Response(
            {"message": "Restaurant updated successfully", "restaurant": RestaurantSerializer(restaurant).data}
        )


@restaurant_authentication
class OpeningHoursView(APIView):
    def put(self, request):
        serializer = OpeningHoursSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        restaurant = request.user
        restaurant.opening_hours = serializer.validated_data
        restaurant.save(update_fields=["opening_hours", "updated_at"])
        return Response({"message": "Opening hours updated successfully", "opening_hours": restaurant.opening_hours})
