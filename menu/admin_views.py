from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from django.utils import timezone

from authflow.decorators import restaurant_authentication
from .models import Category, Item
from .serializers import (
    CategorySerializer, ItemWriteSerializer, ItemSerializer, VariantSerializer,
)
from .services import CategoryService, MenuItemService, VariantService


# ---- categories ----

@restaurant_authentication
class CreateCategoryView(APIView):
    def post(self, request):
        category = CategoryService.create(request.user, request.data.get("name"))
        return Response(
            {"message": "Category created successfully", "category": CategorySerializer(category).data},
            status=status.HTTP_201_CREATED,
        )


@restaurant_authentication
class CategoryListView(APIView):
    def get(self, request):
        categories = Category.objects.filter(restaurant=request.user)
        return Response({"categories": CategorySerializer(categories, many=True).data})


@restaurant_authentication
class EditCategoryView(APIView):
    def put(self, request, category_id):
        category = CategoryService.rename(request.user, category_id, request.data.get("name"))
        return Response({"message": "Category updated successfully", "category": CategorySerializer(category).data})


@restaurant_authentication
class DeleteCategoryView(APIView):
    def delete(self, request, category_id):
        CategoryService.delete(request.user, category_id)
        return Response({"message": "Category deleted successfully"}, status=status.HTTP_201_CREATED)


# ---- items ----

@restaurant_authentication
class CreateItemView(APIView):
    def post(self, request):
        serializer = ItemWriteSerializer(data=request.data, context={"restaurant": request.user})
        serializer.is_valid(raise_exception=True)
        item = MenuItemService.create(request.user, serializer.validated_data)
        return Response(
            {"message": "Restaurant Menu Item Created Successfully", "item": ItemSerializer(item).data},
            status=status.HTTP_201_CREATED,
        )


@restaurant_authentication
class ItemListView(APIView):
    def get(self, request):
        items = (
            Item.objects.for_restaurant(request.user)
            .select_related("category")
            .prefetch_related("variants__options", "addons")
        )
        data = ItemSerializer(items, many=True, context={"now": timezone.now()}).data
        return Response({"menuItems": data})


@restaurant_authentication
class ItemByTitleView(APIView):
    def get(self, request, title):
        item = MenuItemService.get_by_title(request.user, title)
        return Response({"item": ItemSerializer(item, context={"now": timezone.now()}).data})


@restaurant_authentication
class EditItemView(APIView):
    def put(self, request, item_id):
        serializer = ItemWriteSerializer(data=request.data, context={"restaurant": request.user})
        serializer.is_valid(raise_exception=True)
        item = MenuItemService.update(request.user, item_id, serializer.validated_data)
        return Response({"message": "Menu item updated successfully", "item": ItemSerializer(item).data})


@restaurant_authentication
class DeleteItemView(APIView):
    def delete(self, request, item_id):
        MenuItemService.delete(request.user, item_id)
        return Response({"message": "Item deleted successfully"}, status=status.HTTP_201_CREATED)


# ---- variants ----

@restaurant_authentication
class EditVariantView(APIView):
    def put(self, request, variant_id):
        serializer = VariantSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        variant = VariantService.update(request.user, variant_id, serializer.validated_data)
        return Response({"message": "Variant updated successfully", "variant": VariantSerializer(variant).data})


@restaurant_authentication
class DeleteVariantView(APIView):
    def delete(self, request, variant_id):
        VariantService.delete(request.user, variant_id)
        return Response({"message": "Variant deleted successfully"}, status=status.HTTP_201_CREATED)
