from rest_framework import permissions
from accounts.models import Restaurant, User


class IsRestaurantAdmin(permissions.BasePermission):
    """
    Request was authenticated with a restaurant token.
    Usage:
        authentication_classes = [RestaurantJWTAuthentication]
        permission_classes = [IsRestaurantAdmin]
    """
    message = "Restaurant not found"

    def has_permission(self, request, view):
        return isinstance(request.user, Restaurant)


class IsCustomer(permissions.BasePermission):
    message = "User not found"

    def has_permission(self, request, view):
        user = request.user
        return isinstance(user, User) and user.is_authenticated and user.is_active
