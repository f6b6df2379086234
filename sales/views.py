from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from django.utils import timezone

from accounts.serializers import RestaurantSerializer
from authflow.decorators import restaurant_authentication
from menu.serializers import ItemSerializer
from .serializers import SaleSerializer, OnSaleSummarySerializer
from .services import SaleService


@restaurant_authentication
class ApplyItemSaleView(APIView):
    def patch(self, request, item_id):
        serializer = SaleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        item = SaleService.apply_item_sale(request.user, item_id, serializer.validated_data)
        return Response(
            {"message": "Sale applied successfully", "item": ItemSerializer(item).data},
            status=status.HTTP_201_CREATED,
        )


@restaurant_authentication
class RemoveItemSaleView(APIView):
    def patch(self, request, item_id):
        SaleService.remove_item_sale(request.user, item_id)
        return Response({"message": "Sale removed successfully"}, status=status.HTTP_201_CREATED)


@restaurant_authentication
class ApplyMenuSaleView(APIView):
    def patch(self, request):
        serializer = SaleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        restaurant = SaleService.apply_menu_sale(request.user, serializer.validated_data)
        return Response(
            {
                "message": "Sale applied to the whole menu successfully",
                "restaurant": RestaurantSerializer(restaurant).data,
            },
            status=status.HTTP_201_CREATED,
        )


@restaurant_authentication
class RemoveMenuSaleView(APIView):
    def patch(self, request):
        SaleService.remove_menu_sale(request.user)
        return Response({"message": "Menu Sale removed successfully"}, status=status.HTTP_201_CREATED)


@restaurant_authentication
class OnSaleItemsView(APIView):
    """
    GET /api/admin-restaurant/get-on-sale-items/
    Items on sale plus active / expiring (24h) / upcoming / total counts.
    """

    def get(self, request):
        now = timezone.now()
        summary = SaleService.on_sale_summary(request.user, now)
        return Response(OnSaleSummarySerializer(summary, context={"now": now}).data)


@restaurant_authentication
class NotOnSaleItemsView(APIView):
    def get(self, request):
        items = SaleService.not_on_sale_items(request.user)
        return Response({"items": ItemSerializer(items, many=True).data})
