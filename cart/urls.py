from django.urls import path
import cart.views as views

urlpatterns = [
    path("add-item/<int:item_id>/", views.AddItemView.as_view(), name="cart-add-item"),
    path("remove-item/<int:item_id>/", views.RemoveItemView.as_view(), name="cart-remove-item"),
    path(
        "update-quantity/<int:cart_id>/<int:item_id>/",
        views.UpdateQuantityView.as_view(),
        name="cart-update-quantity",
    ),
    path("delete-cart/<int:cart_id>/", views.DeleteCartView.as_view(), name="cart-delete"),
    path("get-carts/", views.UserCartsView.as_view(), name="cart-list"),
    path("get-cart/<int:cart_id>/", views.CartDetailView.as_view(), name="cart-detail"),
]
