from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from django.utils import timezone

from authflow.decorators import customer_authentication
from .serializers import (
    AddToCartSerializer, RemoveFromCartSerializer, UpdateQuantitySerializer,
    CartSerializer, CartItemSerializer,
)
from .services import CartService


@customer_authentication
class AddItemView(APIView):
    """
    POST /api/cart/add-item/<item_id>/
    body: {restaurant_id, quantity, selected_variants: [{variant_id, option_id}], selected_addons: [{addon_id}]}
    """

    def post(self, request, item_id):
        serializer = AddToCartSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        cart = CartService.add_item(
            request.user,
            data["restaurant_id"],
            item_id,
            quantity=data["quantity"],
            selected_variants=data["selected_variants"],
            selected_addons=data["selected_addons"],
        )
        return Response(
            {"message": "Item added to cart successfully", "cart": CartSerializer(cart).data},
            status=status.HTTP_201_CREATED,
        )


@customer_authentication
class RemoveItemView(APIView):
    def patch(self, request, item_id):
        serializer = RemoveFromCartSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        CartService.remove_item(request.user, serializer.validated_data["restaurant_id"], item_id)
        return Response({"message": "Item removed from cart successfully"}, status=status.HTTP_201_CREATED)


@customer_authentication
class UpdateQuantityView(APIView):
    def patch(self, request, cart_id, item_id):
        serializer = UpdateQuantitySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data
        CartService.update_quantity(request.user, cart_id, item_id, data["quantity"], line_id=data.get("line_id"))
        return Response(
            {"message": "Item quantity updated from your cart successfully"},
            status=status.HTTP_201_CREATED,
        )


@customer_authentication
class DeleteCartView(APIView):
    def delete(self, request, cart_id):
        CartService.delete_cart(request.user, cart_id)
        return Response({"message": "Cart deleted successfully"}, status=status.HTTP_201_CREATED)


@customer_authentication
class UserCartsView(APIView):
    def get(self, request):
        carts = CartService.user_carts(request.user, timezone.now())
        for cart in carts:
            cart["total_price"] = str(cart["total_price"])
        return Response({"carts": carts})


@customer_authentication
class CartDetailView(APIView):
    def get(self, request, cart_id):
        now = timezone.now()
        detail = CartService.get_cart(request.user, cart_id, now)
        cart, restaurant = detail["cart"], detail["restaurant"]

        return Response({
            "cart": {
                "id": cart.pk,
                "items": CartItemSerializer(detail["lines"], many=True, context={"now": now}).data,
                "total_price": str(cart.total_price),
                "subtotal": str(detail["subtotal"]),
                "restaurant_id": restaurant.pk,
                "restaurant_name": restaurant.name,
                "restaurant_on_sale": restaurant.on_sale,
                "restaurant_sale_type": restaurant.sale_type,
                "restaurant_sale_amount": restaurant.sale_amount,
                "restaurant_sale_start_date": restaurant.sale_start_date,
                "restaurant_sale_end_date": restaurant.sale_end_date,
                "is_auto_closed": detail["is_auto_closed"],
                "is_published": restaurant.is_published,
                "can_checkout": detail["can_checkout"],
                "created_at": cart.created_at,
            }
        })
