from django.urls import path, include
from accounts import urls as accounts_urls

urlpatterns = [
    path("auth/", include(accounts_urls.user_auth_urls)),
    path("admin-restaurant/", include(accounts_urls.restaurant_auth_urls)),
    path("admin-restaurant/", include("menu.admin_urls")),
    path("admin-restaurant/", include("sales.urls")),
    path("user/", include("menu.urls")),
    path("user/", include(accounts_urls.favorite_urls)),
    path("cart/", include("cart.urls")),
]
