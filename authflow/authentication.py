import jwt
from django.conf import settings
from rest_framework.authentication import BaseAuthentication
from rest_framework_simplejwt.authentication import JWTAuthentication as SimpleJWTAuth
from rest_framework_simplejwt.exceptions import AuthenticationFailed, InvalidToken
from django.utils.translation import gettext_lazy as _

from accounts.models import Restaurant
from .services import decode_restaurant_token


class CookieJWTAuthentication(SimpleJWTAuth):
    """
    Customer auth. Reads the simplejwt access token from the
    Fresh_V2_Access_Token cookie, falling back to "Authorization: Bearer <token>".
    """

    def authenticate(self, request):
        raw_token = request.COOKIES.get(settings.USER_ACCESS_COOKIE)
        if raw_token is None:
            header = self.get_header(request)
            if header is None:
                return None
            raw_token = self.get_raw_token(header)
            if raw_token is None:
                return None

        validated_token = self.get_validated_token(raw_token)
        return self.get_user(validated_token), validated_token

    def authenticate_header(self, request):
        return 'Bearer realm="api"'


class RestaurantJWTAuthentication(BaseAuthentication):
    """
    Restaurant admin auth. Token lives in the Fresh_V2_Access_Token_RESTAURANT
    cookie (or "Authorization: Restaurant <token>").
    """
    keyword = "Restaurant"

    def get_raw_token(self, request):
        token = request.COOKIES.get(settings.RESTAURANT_ACCESS_COOKIE)
        if token:
            return token

        auth_header = request.headers.get("Authorization", "")
        if auth_header.startswith(f"{self.keyword} "):
            return auth_header[len(self.keyword) + 1:]
        return None

    def authenticate(self, request):
        token = self.get_raw_token(request)
        if not token:
            return None

        try:
            payload = decode_restaurant_token(token)
        except jwt.ExpiredSignatureError:
            raise AuthenticationFailed(_("Restaurant token expired"))
        except jwt.InvalidTokenError:
            raise InvalidToken(_("Invalid restaurant token"))

        if payload.get("token_type") != "restaurant":
            raise InvalidToken(_("Invalid restaurant token"))

        restaurant = Restaurant.objects.filter(pk=payload.get("restaurant_id")).first()
        if not restaurant:
            raise AuthenticationFailed(_("Restaurant not found"), code="restaurant_not_found")

        auth_data = {
            "token_type": "restaurant",
            "restaurant_id": restaurant.pk,
        }
        return (restaurant, auth_data)

    def authenticate_header(self, request):
        return f'{self.keyword} realm="admin"'
