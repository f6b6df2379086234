from django.urls import path
from .views import (
    RegisterView, LogInView, LogoutView, StatusView,
    RegisterRestaurantView, RestaurantLogInView, RestaurantLogoutView, RestaurantStatusView,
    PublishRestaurantView, ManageRestaurantView, OpeningHoursView,
    AddFavoriteView, RemoveFavoriteView, FavoriteListView,
)

user_auth_urls = [
    path("register/", RegisterView.as_view(), name="register"),
    path("login/", LogInView.as_view(), name="login"),
    path("logout/", LogoutView.as_view(), name="logout"),
    path("status/", StatusView.as_view(), name="status"),
]

restaurant_auth_urls = [
    path("register/", RegisterRestaurantView.as_view(), name="restaurant-register"),
    path("login/", RestaurantLogInView.as_view(), name="restaurant-login"),
    path("logout/", RestaurantLogoutView.as_view(), name="restaurant-logout"),
    path("status/", RestaurantStatusView.as_view(), name="restaurant-status"),
    path("publish/", PublishRestaurantView.as_view(), name="restaurant-publish"),
    path("manage/", ManageRestaurantView.as_view(), name="restaurant-manage"),
    path("opening-hours/", OpeningHoursView.as_view(), name="restaurant-opening-hours"),
]

favorite_urls = [
    path("add-favorite/<int:restaurant_id>/", AddFavoriteView.as_view(), name="add-favorite"),
    path("remove-favorite/<int:restaurant_id>/", RemoveFavoriteView.as_view(), name="remove-favorite"),
    path("get-favorites/", FavoriteListView.as_view(), name="get-favorites"),
]
