# authflow/schema.py
from django.conf import settings
from drf_spectacular.extensions import OpenApiAuthenticationExtension


def _cookie_jwt(name):
    return {
        "type": "apiKey",
        "in": "cookie",
        "name": name,
    }


class CookieJWTAuthenticationScheme(OpenApiAuthenticationExtension):
    """
    Customer tokens also work as "Authorization: Bearer", but OpenAPI can only
    describe a single scheme per auth class. We describe the cookie.
    """
    target_class = "authflow.authentication.CookieJWTAuthentication"
    name = "CustomerCookieJWT"

    def get_security_definition(self, auto_schema):
        return _cookie_jwt(settings.USER_ACCESS_COOKIE)


class RestaurantJWTAuthenticationScheme(OpenApiAuthenticationExtension):
    target_class = "authflow.authentication.RestaurantJWTAuthentication"
    name = "RestaurantCookieJWT"

    def get_security_definition(self, auto_schema):
        return _cookie_jwt(settings.RESTAURANT_ACCESS_COOKIE)
