from .authentication import RestaurantJWTAuthentication, CookieJWTAuthentication
from .permissions import IsRestaurantAdmin, IsCustomer


def restaurant_authentication(view_class):
    """
    Class decorator to apply RestaurantJWTAuthentication + IsRestaurantAdmin
    to any APIView subclass.
    """
    class Wrapped(view_class):
        authentication_classes = [RestaurantJWTAuthentication]
        permission_classes = [IsRestaurantAdmin]

    Wrapped.__name__ = view_class.__name__
    Wrapped.__qualname__ = view_class.__qualname__
    Wrapped.__doc__ = view_class.__doc__
    return Wrapped


def customer_authentication(view_class):
    """
    Class decorator to apply CookieJWTAuthentication + IsCustomer
    to any APIView subclass.
    """
    class Wrapped(view_class):
        authentication_classes = [CookieJWTAuthentication]
        permission_classes = [IsCustomer]

    Wrapped.__name__ = view_class.__name__
    Wrapped.__qualname__ = view_class.__qualname__
    Wrapped.__doc__ = view_class.__doc__
    return Wrapped
