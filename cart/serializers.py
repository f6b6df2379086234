from rest_framework import serializers

from menu.models import Item
from sales.pricing import calculate_item_total_with_sale, sale_started
from .models import Cart, CartItem


class SelectedVariantSerializer(serializers.Serializer):
    variant_id = serializers.IntegerField()
    option_id = serializers.IntegerField()


class SelectedAddonSerializer(serializers.Serializer):
    addon_id = serializers.IntegerField()


class AddToCartSerializer(serializers.Serializer):
    restaurant_id = serializers.IntegerField()
    quantity = serializers.IntegerField(min_value=1, default=1)
    selected_variants = SelectedVariantSerializer(many=True, required=False, default=list)
    selected_addons = SelectedAddonSerializer(many=True, required=False, default=list)


class RemoveFromCartSerializer(serializers.Serializer):
    restaurant_id = serializers.IntegerField()


class UpdateQuantitySerializer(serializers.Serializer):
    # <= 0 is a 409 from the service, not a 400
    quantity = serializers.IntegerField()
    line_id = serializers.IntegerField(required=False)


class CartLineItemSerializer(serializers.ModelSerializer):
    class Meta:
        model = Item
        fields = (
            "id", "title", "price", "image_url", "is_available",
            "on_sale", "sale_type", "sale_amount", "sale_start_date", "sale_end_date",
        )


class CartItemSerializer(serializers.ModelSerializer):
    item = CartLineItemSerializer(read_only=True)
    sale_line_total = serializers.SerializerMethodField()
    sale_started = serializers.SerializerMethodField()

    class Meta:
        model = CartItem
        fields = (
            "id", "item", "quantity", "variants", "addons",
            "unit_price", "line_total", "sale_line_total", "sale_started",
        )

    def get_sale_line_total(self, obj) -> str:
        return str(calculate_item_total_with_sale(obj, self.context.get("now")))

    def get_sale_started(self, obj) -> bool:
        return sale_started(obj.item, self.context.get("now"))


class CartSerializer(serializers.ModelSerializer):
    items = CartItemSerializer(many=True, read_only=True)

    class Meta:
        model = Cart
        fields = ("id", "restaurant", "total_price", "items", "created_at", "updated_at")
