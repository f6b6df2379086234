import jwt
import datetime
from django.conf import settings
from rest_framework_simplejwt.tokens import RefreshToken
from accounts.models import User, Restaurant


def issue_jwt_for_user(user: User):
    refresh = RefreshToken.for_user(user)
    return {
        "access": str(refresh.access_token),
        "refresh": str(refresh),
    }


def make_restaurant_token(restaurant: Restaurant, expires_in=None):
    """
    Restaurants are not auth users, so their admin token is a plain HS256 JWT
    carrying the restaurant id.
    """
    expires_in = expires_in or settings.RESTAURANT_TOKEN_LIFETIME
    now = datetime.datetime.now(datetime.timezone.utc)
    exp = now + datetime.timedelta(seconds=expires_in)
    payload = {
        "restaurant_id": restaurant.pk,
        "token_type": "restaurant",
        "iat": now,
        "exp": exp,
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm="HS256")


def decode_restaurant_token(token):
    return jwt.decode(token, settings.SECRET_KEY, algorithms=["HS256"])


def set_access_cookie(response, name, token):
    response.set_cookie(
        name,
        token,
        max_age=settings.ACCESS_COOKIE_MAX_AGE,
        httponly=True,
        samesite="Strict",
        secure=not settings.DEBUG,
        path="/",
    )
    return response


def clear_access_cookie(response, name):
    response.delete_cookie(name, path="/", samesite="Strict")
    return response
