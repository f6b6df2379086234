from django.urls import path
import menu.admin_views as views

category_urls = [
    path("create-category/", views.CreateCategoryView.as_view(), name="create-category"),
    path("get-categories/", views.CategoryListView.as_view(), name="get-categories"),
    path("edit-category/<int:category_id>/", views.EditCategoryView.as_view(), name="edit-category"),
    path("delete-category/<int:category_id>/", views.DeleteCategoryView.as_view(), name="delete-category"),
]

item_urls = [
    path("create-item/", views.CreateItemView.as_view(), name="create-item"),
    path("get-items/", views.ItemListView.as_view(), name="get-items"),
    path("get-item/<str:title>/", views.ItemByTitleView.as_view(), name="get-item"),
    path("edit-item/<int:item_id>/", views.EditItemView.as_view(), name="edit-item"),
    path("delete-item/<int:item_id>/", views.DeleteItemView.as_view(), name="delete-item"),
    path("edit-variant/<int:variant_id>/", views.EditVariantView.as_view(), name="edit-variant"),
    path("delete-variant/<int:variant_id>/", views.DeleteVariantView.as_view(), name="delete-variant"),
]

urlpatterns = category_urls + item_urls
