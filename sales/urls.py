from django.urls import path
import sales.views as views

urlpatterns = [
    path("apply-item-sale/<int:item_id>/", views.ApplyItemSaleView.as_view(), name="apply-item-sale"),
    path("remove-item-sale/<int:item_id>/", views.RemoveItemSaleView.as_view(), name="remove-item-sale"),
    path("apply-menu-sale/", views.ApplyMenuSaleView.as_view(), name="apply-menu-sale"),
    path("remove-menu-sale/", views.RemoveMenuSaleView.as_view(), name="remove-menu-sale"),
    path("get-on-sale-items/", views.OnSaleItemsView.as_view(), name="get-on-sale-items"),
    path("get-not-on-sale-items/", views.NotOnSaleItemsView.as_view(), name="get-not-on-sale-items"),
]
