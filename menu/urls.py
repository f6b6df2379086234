from django.urls import path
import menu.views as views

urlpatterns = [
    path("get-cuisines/", views.CuisineListView.as_view(), name="get-cuisines"),
    path("get-filtered-restaurants/", views.RestaurantListView.as_view(), name="get-filtered-restaurants"),
    path("get-restaurant-by-id/<int:restaurant_id>/", views.RestaurantDetailView.as_view(), name="get-restaurant"),
    path(
        "get-restaurant-categories/<int:restaurant_id>/",
        views.RestaurantCategoriesView.as_view(),
        name="get-restaurant-categories",
    ),
    path("get-restaurant-items/<int:restaurant_id>/", views.RestaurantItemsView.as_view(), name="get-restaurant-items"),
]
